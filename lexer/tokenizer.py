"""Expression tokenizer - character classification followed by digit-run merging"""
import logging

from config.config import TOKENIZER_CONFIG, number_limit
from lexer.atom_system import Atom, PARENTHESIS_SYMBOLS, number_from_digits, operation_from_symbol
from lexer.errors import NumericOverflowError, UnrecognizedCharacterError

logger = logging.getLogger(__name__)

DIGITS = '0123456789'


class Tokenizer:
    """Turns an expression string into a list of Atoms"""

    @staticmethod
    def classify_characters(expression, strict=False):
        """
        Pass 1: one provisional atom per recognized character.

        Every digit becomes its own Number atom here, so '12+4' gives
        N(1), N(2), O(ADD), N(4). Returns (atom, position) pairs so that
        pass 2 can report where a digit run started.

        Args:
            expression: input text
            strict: raise UnrecognizedCharacterError instead of skipping
                characters that are not digits, operators or parentheses
        """
        classified = []
        for position, character in enumerate(expression):
            # ASCII digits only; str.isdigit() also accepts things like '²'
            if character in DIGITS:
                classified.append((Atom.number(ord(character) - ord('0')), position))
                continue

            op = operation_from_symbol(character)
            if op is not None:
                classified.append((Atom.operation(op), position))
                continue

            paren = PARENTHESIS_SYMBOLS.get(character)
            if paren is not None:
                classified.append((paren, position))
                continue

            if strict:
                raise UnrecognizedCharacterError(character, position)
            # whitespace, letters, unknown symbols: skipped

        return classified

    @staticmethod
    def merge_digit_runs(classified, limit=None):
        """
        Pass 2: collapse consecutive Number atoms into one multi-digit Number.

        With a limit, the run fails with NumericOverflowError at the first
        digit that takes it past the limit; the rest of the run is only read
        to report its digits.

        Args:
            classified: (atom, position) pairs from classify_characters
            limit: largest allowed Number value, None for no bound

        Returns:
            list of Atoms
        """
        tokens = []

        # Pending number: its digit characters and the position of the first one
        run = []
        start = None
        value = 0  # only tracked when bounded

        for index, (atom, position) in enumerate(classified):
            if atom.is_number:
                if not run:
                    start = position
                    value = 0
                run.append(DIGITS[atom.value])
                if limit is not None:
                    value = value * 10 + atom.value
                    if value > limit:
                        raise NumericOverflowError(
                            Tokenizer._run_digits(classified, index, run), start, limit
                        )
            else:
                if run:
                    tokens.append(Atom.number(number_from_digits(''.join(run))))
                    run = []
                tokens.append(atom)

        if run:
            tokens.append(Atom.number(number_from_digits(''.join(run))))

        return tokens

    @staticmethod
    def _run_digits(classified, index, run):
        """Digits of the whole run containing classified[index], for error reporting"""
        digits = list(run)
        for atom, _ in classified[index + 1:]:
            if not atom.is_number:
                break
            digits.append(DIGITS[atom.value])
        return ''.join(digits)

    @staticmethod
    def tokenize(expression, strict=None, number_dtype=None):
        """
        Tokenize an arithmetic expression.

        Parenthesis balance is not checked. Options left as None fall back
        to TOKENIZER_CONFIG.

        Args:
            expression: text made of digits, '+-*/^', parentheses and
                (outside strict mode) ignorable characters
            strict: raise on unrecognized characters
            number_dtype: unsigned dtype name bounding Number values

        Returns:
            list of Atoms in reading order
        """
        if strict is None:
            strict = TOKENIZER_CONFIG["strict"]
        if number_dtype is None:
            number_dtype = TOKENIZER_CONFIG["number_dtype"]
        limit = number_limit(number_dtype)

        classified = Tokenizer.classify_characters(expression, strict=strict)
        tokens = Tokenizer.merge_digit_runs(classified, limit=limit)

        logger.debug(f"Tokenized {len(expression)} characters into {len(tokens)} atoms")
        return tokens


def tokenize(expression, strict=None, number_dtype=None):
    return Tokenizer.tokenize(expression, strict=strict, number_dtype=number_dtype)
