"""lexer/operators.py"""
import logging

from lexer.atom_system import Operation, number_text

logger = logging.getLogger(__name__)


class Operators:
    """Binary arithmetic on non-negative integer operands"""

    @staticmethod
    def add(lval, rval):
        return lval + rval

    @staticmethod
    def sub(lval, rval):
        return lval - rval

    @staticmethod
    def mul(lval, rval):
        return lval * rval

    @staticmethod
    def div(lval, rval):
        """Integer (floor) division; ZeroDivisionError is left to the caller"""
        return lval // rval

    @staticmethod
    def power(lval, rval):
        """Exponentiation, lval ** rval"""
        return lval ** rval


OPERATION_METHODS = {
    Operation.ADD: Operators.add,
    Operation.SUBTRACT: Operators.sub,
    Operation.MULTIPLY: Operators.mul,
    Operation.DIVIDE: Operators.div,
    Operation.POWER: Operators.power,
}


def calculate(lval, rval, operation):
    """Apply one Operation to two numbers"""
    op_method = OPERATION_METHODS.get(operation)
    if op_method is None:
        raise TypeError(f"Unknown operation: {operation!r}")
    result = op_method(lval, rval)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"{number_text(lval)} {operation.symbol} {number_text(rval)} = {number_text(result)}")
    return result
