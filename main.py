"""Command-line entry point - tokenize arithmetic expressions"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, TOKENIZER_CONFIG, UNSIGNED_DTYPES, validate_config
from lexer import ExpressionStack, IncompleteExpressionError, LexError, number_text, tokenize
from utils import format_atoms

logger = logging.getLogger(__name__)


def main(args):
    validate_config()
    exit_code = 0

    for expression in args.expressions:
        try:
            atoms = tokenize(expression, strict=args.strict, number_dtype=args.number_dtype)
        except LexError as e:
            logger.error(f"Cannot tokenize {expression!r}: {e}")
            exit_code = 1
            continue

        line = format_atoms(atoms)

        if args.evaluate:
            # Two-operand stack only: no precedence, no parentheses
            try:
                result = ExpressionStack.from_atoms(atoms).calculate()
            except (IncompleteExpressionError, ValueError, ZeroDivisionError) as e:
                logger.error(f"Cannot evaluate {expression!r}: {e}")
                exit_code = 1
            else:
                line += f" = {number_text(result)}"

        print(line)

    return exit_code


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Arithmetic expression tokenizer")

    parser.add_argument(
        "expressions",
        nargs="+",
        help="Expressions to tokenize, e.g. '1+(2*34)'"
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=TOKENIZER_CONFIG["strict"],
        help="Fail on characters that are not digits, operators or parentheses (--no-strict skips them)"
    )
    parser.add_argument(
        "--number_dtype",
        type=str,
        choices=UNSIGNED_DTYPES,
        default=TOKENIZER_CONFIG["number_dtype"],
        help="Bound numbers to an unsigned integer dtype (default: unbounded)"
    )
    parser.add_argument(
        "--evaluate",
        action="store_true",
        help="Also evaluate simple two-operand expressions such as '12*3'"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))
