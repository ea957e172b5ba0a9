"""lexer/atom_system.py"""
import sys
from enum import Enum


class Operation(Enum):
    """Binary arithmetic operations; value is (symbol, display name)"""
    ADD = ('+', 'ADD')
    SUBTRACT = ('-', 'SUBTRACT')
    MULTIPLY = ('*', 'MULTIPLY')
    DIVIDE = ('/', 'DIVIDE')
    POWER = ('^', 'POWER')

    @property
    def symbol(self):
        return self.value[0]

    @property
    def display_name(self):
        return self.value[1]

    def __str__(self):
        return self.display_name


class AtomType(Enum):
    NUMBER = "number"
    OPERATION = "operation"
    LEFT_PARENTHESIS = "left_parenthesis"
    RIGHT_PARENTHESIS = "right_parenthesis"


class Atom:
    """One lexical unit of an expression. Immutable; build with Atom.number / Atom.operation."""

    __slots__ = ('_type', '_value')

    def __init__(self, atom_type, value=None):
        object.__setattr__(self, '_type', atom_type)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy/pickle rebuild through __init__; slot restore would hit __setattr__
        return (Atom, (self._type, self._value))

    @classmethod
    def number(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Number atoms hold integers, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"Number atoms are non-negative, got {value}")
        return cls(AtomType.NUMBER, value)

    @classmethod
    def operation(cls, op):
        if not isinstance(op, Operation):
            raise TypeError(f"Expected an Operation, got {op!r}")
        return cls(AtomType.OPERATION, op)

    @property
    def type(self):
        return self._type

    @property
    def value(self):
        return self._value

    @property
    def is_number(self):
        return self._type == AtomType.NUMBER

    @property
    def is_operation(self):
        return self._type == AtomType.OPERATION

    def __eq__(self, other):
        if not isinstance(other, Atom):
            return NotImplemented
        return self._type == other._type and self._value == other._value

    def __hash__(self):
        return hash((self._type, self._value))

    def __str__(self):
        if self._type == AtomType.NUMBER:
            return f"Number({number_text(self._value)})"
        if self._type == AtomType.OPERATION:
            return f"Operation({self._value})"
        if self._type == AtomType.LEFT_PARENTHESIS:
            return "LPAREN"
        return "RPAREN"

    __repr__ = __str__


LEFT_PARENTHESIS = Atom(AtomType.LEFT_PARENTHESIS)
RIGHT_PARENTHESIS = Atom(AtomType.RIGHT_PARENTHESIS)

PARENTHESIS_SYMBOLS = {
    '(': LEFT_PARENTHESIS,
    ')': RIGHT_PARENTHESIS,
}

# symbol <-> operation
SYMBOL_TO_OPERATION = {op.symbol: op for op in Operation}
OPERATION_TO_SYMBOL = {op: symbol for symbol, op in SYMBOL_TO_OPERATION.items()}

# Evaluation order: power first, then multiply/divide, then add/subtract
ORDER_OF_OPERATIONS = (
    Operation.POWER,
    Operation.MULTIPLY,
    Operation.DIVIDE,
    Operation.ADD,
    Operation.SUBTRACT,
)

PRECEDENCE_LEVELS = {
    Operation.POWER: 3,
    Operation.MULTIPLY: 2,
    Operation.DIVIDE: 2,
    Operation.ADD: 1,
    Operation.SUBTRACT: 1,
}


def _safe_digits():
    """Longest digit string int()/str() may convert, None when unlimited"""
    limit = sys.get_int_max_str_digits()
    return limit or None


def number_text(value):
    """
    Decimal text of an int of any length.

    str() refuses ints longer than sys.get_int_max_str_digits(); longer values
    are split with divmod into halves that each stay under the limit.
    """
    if value < 0:
        return '-' + number_text(-value)
    limit = _safe_digits()
    # bit_length / 3 overestimates the digit count, so this stays below the limit
    if limit is None or value.bit_length() < 3 * limit:
        return str(value)
    half = int(value.bit_length() * 0.30103) // 2
    high, low = divmod(value, 10 ** half)
    return number_text(high) + number_text(low).zfill(half)


def number_from_digits(digits):
    """int() for a digit string of any length"""
    limit = _safe_digits()
    if limit is None or len(digits) <= limit:
        return int(digits)
    half = len(digits) // 2
    return number_from_digits(digits[:half]) * 10 ** (len(digits) - half) + number_from_digits(digits[half:])


def operation_from_symbol(character):
    """Operation for one of '+-*/^', None for any other character"""
    return SYMBOL_TO_OPERATION.get(character)


def symbol_from_operation(operation):
    """Single-character symbol of an operation"""
    return OPERATION_TO_SYMBOL[operation]
