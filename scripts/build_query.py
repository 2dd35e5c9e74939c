# scripts/build_query.py
"""
Query string builder CLI.

Builds a query string from key=value arguments. A key given more than
once becomes multi-valued.

Usage:
    python scripts/build_query.py name="John Doe" tag=a tag=b
    python scripts/build_query.py x=1 --no-prefix
    python scripts/build_query.py a=1 b=2 --pair-separator ";" --key-value-separator ":"
"""

import argparse
import logging
import sys

from querykit.config import LOG_LEVELS, settings
from querykit.query.builder import build_multi_query

logger = logging.getLogger(__name__)


def parse_pairs(parser: argparse.ArgumentParser, pairs: list[str]) -> dict[str, list[str]]:
    """Group key=value arguments by key, keeping first-seen key order."""
    params: dict[str, list[str]] = {}

    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            parser.error(f"invalid pair '{pair}', expected key=value")
        params.setdefault(key, []).append(value)

    return params


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a query string from key=value pairs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/build_query.py name="John Doe"
  python scripts/build_query.py tag=a tag=b --no-prefix
  python scripts/build_query.py a=1 b=2 --pair-separator ";"
        """,
    )
    parser.add_argument("pairs", nargs="*", metavar="key=value", help="Parameters to encode")
    parser.add_argument(
        "--pair-separator",
        default=settings.pair_separator,
        help=f"Separator between pairs (default: {settings.pair_separator!r})",
    )
    parser.add_argument(
        "--key-value-separator",
        default=settings.key_value_separator,
        help=f"Separator between key and value (default: {settings.key_value_separator!r})",
    )
    parser.add_argument(
        "--prefix",
        dest="include_prefix",
        action=argparse.BooleanOptionalAction,
        default=settings.include_prefix,
        help="Prepend '?' to a non-empty result (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    params = parse_pairs(parser, args.pairs)
    query = build_multi_query(
        params,
        pair_separator=args.pair_separator,
        key_value_separator=args.key_value_separator,
        include_prefix=args.include_prefix,
    )

    logger.info(f"Built query from {len(params)} key(s)")
    print(query)
    return 0


if __name__ == "__main__":
    sys.exit(main())
