"""
Command line tool that writes single-digit arithmetic practice tests.

The output is a LaTeX file: a score-tracking page, a solutions page, and one
page per test with the problems in a fresh random order. Run it through
pdflatex (or similar) to get something printable.
"""

from typing import List, Optional
import argparse
import logging
import sys

import numpy as np

from document import iter_document
from problems import Operation


# Generator Configuration Constants
MAX_TESTS = 999  # Keeps score-tracker numbering to three digits
DEFAULT_NUM_TESTS = 60  # A scoring page fits 60 records
DEFAULT_OUTPUT = "tests"
DEFAULT_TEST_TYPE = "a"
OUTPUT_SUFFIX = ".tex"

logger = logging.getLogger(__name__)


def parse_num_tests(value: str) -> int:
    """Parse the test count, which must be an integer between 1 and MAX_TESTS."""
    # Whole decimal token only: no sign, whitespace, underscores or non-ASCII digits
    num_tests = int(value) if value.isascii() and value.isdigit() else 0
    if not 1 <= num_tests <= MAX_TESTS:
        raise argparse.ArgumentTypeError(
            f"num_tests ({value}) is not a positive integer between 1 and {MAX_TESTS}."
        )
    return num_tests


def parse_seed(value: str) -> int:
    """numpy only accepts non-negative seeds."""
    if not (value.isascii() and value.isdigit()):
        raise argparse.ArgumentTypeError(f"seed ({value}) is not a non-negative integer.")
    return int(value)


def parse_test_type(value: str) -> Operation:
    try:
        return Operation.from_tag(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"test_type ({value}) is not one of 'a', 'm', 's', or 'd'."
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithmetic-tests",
        description="Create LaTeX source for single-digit arithmetic tests.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "test types:\n"
            "  a - Addition\n"
            "  m - Multiplication\n"
            "  s - Subtraction\n"
            "  d - Division"
        ),
    )
    parser.add_argument(
        "-n", "--num-tests",
        type=parse_num_tests,
        default=DEFAULT_NUM_TESTS,
        help=(
            f"The number of tests to create, between 1 and {MAX_TESTS}. "
            f"A scoring page fits 60 records. (default: {DEFAULT_NUM_TESTS})"
        ),
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT,
        help=f"The file in which to store the output; '{OUTPUT_SUFFIX}' is added automatically. (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-t", "--test-type",
        type=parse_test_type,
        default=DEFAULT_TEST_TYPE,
        metavar="{a,m,s,d}",
        help=f"The arithmetic operator to use in the tests. (default: {DEFAULT_TEST_TYPE})",
    )
    parser.add_argument(
        "--seed",
        type=parse_seed,
        help="Seed for the random number generator to make output reproducible",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser


def write_tests(
    output_file: str,
    operation: Operation,
    num_tests: int,
    rng: np.random.Generator
) -> None:
    """Stream the document into `output_file`. Any OSError is left to the caller."""
    with open(output_file, "w", encoding="utf-8") as f:
        for chunk in iter_document(operation, num_tests, rng):
            f.write(chunk)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    operation = args.test_type
    output_file = args.output + OUTPUT_SUFFIX
    # Record the seed so any run can be reproduced
    seed = args.seed if args.seed is not None else int(np.random.SeedSequence().entropy % 2**32)
    rng = np.random.default_rng(seed)

    logger.info(f"Generating {args.num_tests} {operation.name.lower()} test(s)")
    logger.info(f"  Output: {output_file}")
    logger.info(f"  Seed: {seed}")

    try:
        write_tests(output_file, operation, args.num_tests, rng)
    except OSError as e:
        logger.error(f"Unable to write output file {output_file}: {e}")
        return 1

    logger.info(f"Saved {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
