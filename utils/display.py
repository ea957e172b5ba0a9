"""utils/display.py"""
from config.config import DISPLAY_CONFIG


def format_atoms(atoms, separator=None):
    """Render a token sequence as '[Number(1), Operation(ADD), Number(2)]'"""
    if separator is None:
        separator = DISPLAY_CONFIG["separator"]
    return "[" + separator.join(str(atom) for atom in atoms) + "]"


def describe_atoms(atoms):
    """One row per atom: position, type, value and display text"""
    rows = []
    for position, atom in enumerate(atoms):
        value = atom.value
        rows.append({
            "position": position,
            "type": atom.type.value,
            "value": value.symbol if atom.is_operation else value,
            "text": str(atom),
        })
    return rows
