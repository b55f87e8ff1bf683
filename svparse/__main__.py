"""
Command line entry point

Usage:
    python -m svparse data.csv
    python -m svparse data.txt --no-headers --suppress-ambiguity
    python -m svparse data.csv --separator-only --verbose
"""

import argparse
import logging
import sys

from .errors import SvParseError
from .reader import read_lines
from .rules import DEFAULT_SUPPRESS_AMBIGUITY
from .separator import infer_separator
from .table import RecordTable

logger = logging.getLogger("svparse")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svparse",
        description="Infer the separator of a delimiter-separated file and print its records",
    )
    parser.add_argument("path", help="File to parse")
    parser.add_argument(
        "--no-headers",
        dest="has_headers",
        action="store_false",
        help="The first line is a record, not a header row",
    )
    parser.add_argument(
        "--suppress-ambiguity",
        action="store_true",
        default=DEFAULT_SUPPRESS_AMBIGUITY,
        help="Pick one of several equally good separators instead of failing",
    )
    parser.add_argument(
        "--separator-only",
        action="store_true",
        help="Only print the inferred separator",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        lines, encoding = read_lines(args.path)
        logger.info("Read %d lines from %s (%s)", len(lines), args.path, encoding)

        if args.separator_only:
            print(repr(infer_separator(lines, args.has_headers, args.suppress_ambiguity)))
            return 0

        table = RecordTable.build(lines, args.has_headers, args.suppress_ambiguity)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except SvParseError as e:
        logger.error("Parsing failed: %s", e)
        return 1

    print(f"Separator: {table.separator!r}")
    print(f"Records: {len(table)}")
    print(table.render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
