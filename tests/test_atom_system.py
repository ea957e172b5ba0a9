"""Atom model: operation lookup, display, precedence table"""
import copy
import pickle

import pytest

from lexer.atom_system import (
    Atom, AtomType, Operation, LEFT_PARENTHESIS, RIGHT_PARENTHESIS,
    ORDER_OF_OPERATIONS, PRECEDENCE_LEVELS, operation_from_symbol, symbol_from_operation,
    number_from_digits, number_text
)


@pytest.mark.parametrize("symbol, expected", [
    ('+', Operation.ADD),
    ('-', Operation.SUBTRACT),
    ('*', Operation.MULTIPLY),
    ('/', Operation.DIVIDE),
    ('^', Operation.POWER),
])
def test_operation_from_symbol(symbol, expected):
    assert operation_from_symbol(symbol) is expected
    assert symbol_from_operation(expected) == symbol


@pytest.mark.parametrize("character", ['1', '0', '(', ')', ' ', 'x', '%', '', '**'])
def test_operation_from_symbol_returns_none_for_other_characters(character):
    assert operation_from_symbol(character) is None


def test_symbols_are_distinct():
    symbols = [symbol_from_operation(op) for op in Operation]
    assert len(set(symbols)) == len(Operation)


def test_operation_display():
    assert str(Operation.ADD) == "ADD"
    assert str(Operation.POWER) == "POWER"


def test_atom_display():
    assert str(Atom.number(42)) == "Number(42)"
    assert str(Atom.operation(Operation.MULTIPLY)) == "Operation(MULTIPLY)"
    assert str(LEFT_PARENTHESIS) == "LPAREN"
    assert str(RIGHT_PARENTHESIS) == "RPAREN"
    assert repr(Atom.number(7)) == "Number(7)"


def test_atom_equality_and_hash():
    assert Atom.number(12) == Atom.number(12)
    assert Atom.number(12) != Atom.number(21)
    assert Atom.operation(Operation.ADD) != Atom.operation(Operation.SUBTRACT)
    assert LEFT_PARENTHESIS != RIGHT_PARENTHESIS
    assert len({Atom.number(1), Atom.number(1), LEFT_PARENTHESIS}) == 2


def test_atom_is_immutable():
    atom = Atom.number(3)
    with pytest.raises(AttributeError):
        atom.value = 4
    assert atom.value == 3


def test_atom_number_validation():
    with pytest.raises(ValueError):
        Atom.number(-1)
    with pytest.raises(TypeError):
        Atom.number(1.5)
    with pytest.raises(TypeError):
        Atom.number(True)
    with pytest.raises(TypeError):
        Atom.operation('+')


def test_atom_types():
    assert Atom.number(0).type == AtomType.NUMBER
    assert Atom.operation(Operation.ADD).type == AtomType.OPERATION
    assert LEFT_PARENTHESIS.type == AtomType.LEFT_PARENTHESIS
    assert RIGHT_PARENTHESIS.value is None


def test_order_of_operations_lists_every_operation_once():
    assert len(ORDER_OF_OPERATIONS) == len(Operation)
    assert set(ORDER_OF_OPERATIONS) == set(Operation)
    assert ORDER_OF_OPERATIONS[0] is Operation.POWER
    assert ORDER_OF_OPERATIONS[-2:] == (Operation.ADD, Operation.SUBTRACT)


def test_precedence_levels_follow_order():
    levels = [PRECEDENCE_LEVELS[op] for op in ORDER_OF_OPERATIONS]
    assert levels == sorted(levels, reverse=True)
    assert PRECEDENCE_LEVELS[Operation.MULTIPLY] == PRECEDENCE_LEVELS[Operation.DIVIDE]
    assert PRECEDENCE_LEVELS[Operation.ADD] == PRECEDENCE_LEVELS[Operation.SUBTRACT]


def test_atoms_copy_and_pickle():
    atoms = [Atom.number(12), Atom.operation(Operation.ADD), LEFT_PARENTHESIS, Atom.number(3), RIGHT_PARENTHESIS]
    assert copy.deepcopy(atoms) == atoms
    assert copy.copy(atoms[0]) == atoms[0]
    assert pickle.loads(pickle.dumps(atoms)) == atoms
    restored = pickle.loads(pickle.dumps(Atom.number(5)))
    assert restored.value == 5
    with pytest.raises(AttributeError):
        restored.value = 6


# --- Numbers longer than int/str conversion allows ---

def test_number_text_beyond_conversion_limit():
    assert number_text(10 ** 5000 - 1) == "9" * 5000
    assert number_text(10 ** 6000) == "1" + "0" * 6000
    assert number_text(2 ** 20) == "1048576"
    assert number_text(0) == "0"
    assert number_text(-(10 ** 5000)) == "-1" + "0" * 5000


def test_number_from_digits_beyond_conversion_limit():
    assert number_from_digits("9" * 5000) == 10 ** 5000 - 1
    assert number_from_digits("1" + "0" * 6000) == 10 ** 6000
    assert number_from_digits("00042") == 42


def test_large_number_atom_display():
    atom = Atom.number(10 ** 5000 - 1)
    assert str(atom) == "Number(" + "9" * 5000 + ")"
    assert repr(atom) == str(atom)
