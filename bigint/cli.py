"""Command-line calculator for BigInteger expressions.

Usage:
    bigint-calc --expr "99999999 * 99999999"

    echo "-7 % 2" | bigint-calc --verbose

Each expression is `a OP b` with whitespace between the tokens. Results are
printed one per line; a failing expression prints `error: <message>` to
stderr and the exit code becomes 1.
"""

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

import structlog

from bigint.calculator import evaluate, format_result, parse_expression
from bigint.errors import BigIntegerError

logger = structlog.get_logger()


def configure_logging(verbose: bool) -> None:
    """Route structlog output to stderr, DEBUG when verbose else WARNING."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def run_expressions(lines: Iterable[str], out: TextIO, err: TextIO) -> int:
    """Evaluate each non-blank line and write results.

    Returns:
        0 if every expression succeeded, 1 otherwise
    """
    exit_code = 0
    for line_num, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            left, op, right = parse_expression(line)
            result = evaluate(left, op, right)
        except (BigIntegerError, ValueError) as e:
            logger.warning("expression_failed", line=line_num, error=str(e))
            print(f"error: {e}", file=err)
            exit_code = 1
            continue
        print(format_result(result), file=out)
    return exit_code


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Evaluate arbitrary-precision integer expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--expr",
        "-e",
        action="append",
        default=[],
        help="Expression 'a OP b' to evaluate (can be specified multiple times)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    # Read from stdin when no expressions were given on the command line
    lines = args.expr if args.expr else sys.stdin
    return run_expressions(lines, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
