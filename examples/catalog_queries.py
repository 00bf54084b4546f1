#!/usr/bin/env python3
"""
Example: Catalog Queries with GenoQuery

This example walks through the query workflow on a small in-memory
catalog:
- Decoding compact formulas
- Searching for a decoded pattern
- Comparing two proteins position by position
- Finding the most frequent amino acid
- Writing the fixed-layout report
"""

import sys

from genoquery import QueryEngine, decode_formula, parse_catalog_string
from genoquery.io import parse_commands
from genoquery.query import ReportWriter

CATALOG = """\
INS\tHomo sapiens\tMALW2RLLPLLALLALWGPDPAAAFVNQHLCGSHLVEALYLVCGERGFFYTPKT
GCG\tRattus norvegicus\tHAEGTFTSDVSSYLEGQAAKEFIAWLVKGR
POLYQ\tSynthetic\tM9Q9Q2QL
"""

COMMANDS = [
    "search\tLVEALYL\n",
    "search\t3Q\n",
    "diff\tINS\tGCG\n",
    "mode\tPOLYQ\n",
    "mode\tTTR\n",
    "translate\tINS\n",
]


def demo_decoding():
    """Demonstrate compact formula decoding."""
    print("\n" + "=" * 60)
    print("FORMULA DECODING")
    print("=" * 60)

    for formula in ["3A2B", "A0B1C", "M9Q9Q2QL"]:
        print(f"   {formula:<12} -> {decode_formula(formula)}")


def demo_queries(engine):
    """Demonstrate the three query kinds."""
    print("\n" + "=" * 60)
    print("QUERIES")
    print("=" * 60)

    record = engine.locate("LVEALYL")
    print(f"\n1. Search LVEALYL: {record.name} ({record.origin})")

    print(f"2. Diff INS/GCG: {engine.compare('INS', 'GCG')} positions differ")

    symbol, count = engine.mode("POLYQ")
    print(f"3. Mode POLYQ: {symbol} occurs {count} times")


def demo_report(engine):
    """Demonstrate the report layout."""
    print("\n" + "=" * 60)
    print("REPORT")
    print("=" * 60 + "\n")

    writer = ReportWriter(sys.stdout)
    writer.write_header("Demo run")
    for result in engine.run(parse_commands(COMMANDS)):
        writer.emit(result)


def main():
    print("=" * 60)
    print("GenoQuery Catalog Demo")
    print("=" * 60)

    engine = QueryEngine(parse_catalog_string(CATALOG))

    demo_decoding()
    demo_queries(engine)
    demo_report(engine)

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
