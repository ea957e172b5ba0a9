"""lexer/errors.py"""


class LexError(ValueError):
    """Tokenizer failure; carries the index of the offending input."""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


class UnrecognizedCharacterError(LexError):
    """Strict mode only: a character that is not a digit, operator or parenthesis"""

    def __init__(self, character, position):
        super().__init__(f"Unrecognized character {character!r} at index {position}", position)
        self.character = character


class NumericOverflowError(LexError):
    """A digit run does not fit in the configured number dtype"""

    def __init__(self, digits, position, limit):
        super().__init__(
            f"Number {digits} at index {position} exceeds the maximum of {limit}", position
        )
        self.digits = digits
        self.limit = limit


class IncompleteExpressionError(ValueError):
    """ExpressionStack was asked to calculate without both operands and an operation"""

    def __init__(self, missing):
        super().__init__(
            "Cannot calculate value without a left value, right value and operation "
            f"(missing: {', '.join(missing)})"
        )
        self.missing = list(missing)
