from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from boxfinder.catalog import load_catalog
from boxfinder.config import get_boxfile, get_default_results, get_log_level
from boxfinder.errors import DimensionParseError, SidewaysWithoutHeightError
from boxfinder.matching import find_matches
from boxfinder.models import Dimensions, FitMode
from boxfinder.presenter import format_results

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_ERROR = 2


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxfinder",
        usage="%(prog)s [options] length width [height]",
        description="Find the catalog boxes that best fit the given dimensions",
    )
    parser.add_argument("dims", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument(
        "-b", "--boxfile",
        type=Path,
        help="box catalog file (tab separated, default: $BOXFINDER_BOXFILE or the bundled list)",
    )
    parser.add_argument(
        "-i", "--into",
        dest="mode",
        action="store_const",
        const=FitMode.INTO,
        help="fit box into given dimensions",
    )
    parser.add_argument(
        "-o", "--over",
        dest="mode",
        action="store_const",
        const=FitMode.OVER,
        help="fit box over given dimensions (default)",
    )
    parser.add_argument(
        "-s", "--sideways",
        action="store_true",
        help="allow turning box on its side",
    )
    parser.add_argument(
        "-n", "--results",
        type=positive_int,
        metavar="NUM",
        help="show NUM best matches (default: 5)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log debug information to stderr",
    )
    parser.set_defaults(mode=FitMode.OVER)
    return parser


def parse_target(values: list[str]) -> Dimensions:
    """Build the target from 2 or 3 command line numbers; height defaults to 0."""
    try:
        numbers = [int(v, 10) for v in values]
        if len(numbers) == 2:
            numbers.append(0)
        length, width, height = numbers
        return Dimensions(length=length, width=width, height=height)
    except (ValueError, ValidationError) as e:
        raise DimensionParseError("x".join(values)) from e


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    # Options may appear between the dimensions
    args = parser.parse_intermixed_args(argv)

    if len(args.dims) < 2 or len(args.dims) > 3:
        print(parser.format_help())
        return EXIT_USAGE

    try:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else get_log_level(),
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        count = args.results if args.results is not None else get_default_results()
        boxfile = args.boxfile if args.boxfile is not None else get_boxfile()
        target = parse_target(args.dims)

        # Fail before touching the catalog
        if args.sideways and target.height == 0:
            raise SidewaysWithoutHeightError()

        catalog = load_catalog(boxfile, args.mode)
        results = find_matches(catalog, target, args.mode, args.sideways, count)
    except OSError as e:
        print(f"ERROR: cannot read box file: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    if not results:
        logger.info("No box fits %s", target)
    for line in format_results(results, count):
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
