"""
Compact formula decoding for protein sequences.

Catalog formulas use a run-length shorthand: a single digit followed by
a symbol stands for that symbol repeated, everything else is literal.
"""

from genoquery.errors import MalformedSequenceError

DIGITS = "0123456789"


def decode_formula(formula: str) -> str:
    """
    Expand a compact run-length formula into a plain sequence.

    A digit immediately followed by a symbol expands to the symbol
    repeated that many times (0-9). The symbol is taken literally even
    if it is itself a digit. Any other character is copied through.

    Args:
        formula: Compact formula string (e.g., "3A2B")

    Returns:
        Decoded sequence string

    Raises:
        MalformedSequenceError: If the formula ends on a repeat count

    Example:
        >>> decode_formula("3A2B")
        'AAABB'
        >>> decode_formula("A0B1C")
        'AC'
    """
    decoded = []
    i = 0
    length = len(formula)

    while i < length:
        char = formula[i]
        if char in DIGITS:
            if i + 1 >= length:
                raise MalformedSequenceError(formula, i)
            decoded.append(formula[i + 1] * int(char))
            i += 2
        else:
            decoded.append(char)
            i += 1

    return "".join(decoded)


def is_compact_formula(formula: str) -> bool:
    """Return True if the formula decodes without error."""
    try:
        decode_formula(formula)
    except MalformedSequenceError:
        return False
    return True
