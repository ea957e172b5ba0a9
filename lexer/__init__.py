"""Lexer module - atom model, tokenizer and the two-operand expression stack"""
from .atom_system import (
    Operation, AtomType, Atom, LEFT_PARENTHESIS, RIGHT_PARENTHESIS,
    SYMBOL_TO_OPERATION, OPERATION_TO_SYMBOL, ORDER_OF_OPERATIONS, PRECEDENCE_LEVELS,
    operation_from_symbol, symbol_from_operation, number_text, number_from_digits
)
from .errors import LexError, UnrecognizedCharacterError, NumericOverflowError, IncompleteExpressionError
from .tokenizer import Tokenizer, tokenize
from .operators import Operators, calculate
from .expression_stack import ExpressionStack

__all__ = [
    'Operation', 'AtomType', 'Atom', 'LEFT_PARENTHESIS', 'RIGHT_PARENTHESIS',
    'SYMBOL_TO_OPERATION', 'OPERATION_TO_SYMBOL', 'ORDER_OF_OPERATIONS', 'PRECEDENCE_LEVELS',
    'operation_from_symbol', 'symbol_from_operation', 'number_text', 'number_from_digits',
    'LexError', 'UnrecognizedCharacterError', 'NumericOverflowError', 'IncompleteExpressionError',
    'Tokenizer', 'tokenize', 'Operators', 'calculate', 'ExpressionStack'
]
