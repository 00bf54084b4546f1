"""
Command-line entry point.

Loads the catalog, answers every command in the command file and
writes the report, in that order.
"""

import argparse
import logging
import sys
from typing import List, Optional

from genoquery.config import LOG_LEVELS, RunConfig
from genoquery.errors import GenoQueryError
from genoquery.io import parse_commands, read_catalog
from genoquery.io.files import open_file
from genoquery.query import QueryEngine, write_report
from genoquery.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run(config: RunConfig) -> int:
    """
    Execute one batch run.

    The catalog is fully loaded before the first command is read.

    Args:
        config: Run settings

    Returns:
        Number of commands answered

    Raises:
        MalformedRecordError: If the catalog contains a malformed line
        OSError: If an input file cannot be read or the report written
    """
    catalog = read_catalog(config.catalog_path, encoding=config.encoding)
    engine = QueryEngine(catalog)
    with open_file(config.commands_path, "rt", encoding=config.encoding) as f:
        return write_report(
            engine.run(parse_commands(f)),
            config.report_path,
            run_label=config.run_label,
            encoding=config.encoding,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genoquery",
        description="Answer search, diff and mode queries against a protein catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run with the default file names in the current directory
  genoquery

  # Explicit input and output files
  genoquery --catalog sequences.txt --commands commands.txt -o report.txt

  # Settings from a YAML file, with verbose logging
  genoquery --config run.yml -v
        """
    )

    parser.add_argument('-c', '--config',
                        help='YAML file with run settings')
    parser.add_argument('--catalog',
                        help='Protein catalog file (default: sequences.2.txt)')
    parser.add_argument('--commands',
                        help='Command file (default: commands.2.txt)')
    parser.add_argument('-o', '--output',
                        help='Report file (default: genedata.txt)')
    parser.add_argument('--label',
                        help='Run label written as the first report line')
    parser.add_argument('--log-level', choices=LOG_LEVELS, type=str.upper,
                        help='Logging level (default: WARNING)')
    parser.add_argument('--log-file',
                        help='Also write log records to this file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Shortcut for --log-level INFO')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = RunConfig.load_from_file(args.config) if args.config else RunConfig()
        config = config.merged({
            "catalog_path": args.catalog,
            "commands_path": args.commands,
            "report_path": args.output,
            "run_label": args.label,
            "log_level": args.log_level or ("INFO" if args.verbose else None),
            "log_file": args.log_file,
        })
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, config.log_file)

    try:
        run(config)
    except (GenoQueryError, OSError) as e:
        logger.error("Run aborted: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Operations completed. Results saved to {config.report_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
