"""Two-operand expression stack - feeding it [1, +, 2] gives 3

Holds one left value, one right value and one operation. It has no notion
of precedence or parentheses; those belong to a full evaluator.
"""
import logging

from lexer.atom_system import AtomType, Operation
from lexer.errors import IncompleteExpressionError
from lexer.operators import calculate

logger = logging.getLogger(__name__)


class ExpressionStack:

    def __init__(self):
        self.operation = None
        self.left_value = None
        self.right_value = None

    @classmethod
    def from_atoms(cls, atoms):
        """Build a stack from a token sequence such as tokenize('12*3')"""
        stack = cls()
        for atom in atoms:
            stack.accept(atom)
        return stack

    def accept_number(self, number):
        """Fill the left slot first, then the right one"""
        if self.left_value is None:
            self.left_value = number
        elif self.right_value is None:
            self.right_value = number
        else:
            raise ValueError(f"Stack already holds two numbers, cannot accept {number}")

    def accept_operation(self, operation):
        if not isinstance(operation, Operation):
            raise TypeError(f"Expected an Operation, got {operation!r}")
        if self.operation is not None:
            raise ValueError(f"Stack already holds {self.operation}, cannot accept {operation}")
        self.operation = operation

    def accept(self, atom):
        """Dispatch a Number or Operation atom; parentheses are not supported"""
        if atom.type == AtomType.NUMBER:
            self.accept_number(atom.value)
        elif atom.type == AtomType.OPERATION:
            self.accept_operation(atom.value)
        else:
            raise ValueError(f"ExpressionStack does not handle {atom}")

    def is_complete(self):
        return None not in (self.left_value, self.right_value, self.operation)

    def calculate(self):
        missing = []
        if self.left_value is None:
            missing.append('left value')
        if self.right_value is None:
            missing.append('right value')
        if self.operation is None:
            missing.append('operation')
        if missing:
            raise IncompleteExpressionError(missing)

        return calculate(self.left_value, self.right_value, self.operation)

    def reset(self):
        self.operation = None
        self.left_value = None
        self.right_value = None
        logger.debug("Expression stack cleared")
