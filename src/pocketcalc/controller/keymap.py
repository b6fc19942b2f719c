"""
Key Mapping
===========
Translates button labels and typed characters into engine symbols.

Why is this file needed?
------------------------
1. The button grid shows user-friendly labels ("MC", "⌫") while the engine
   understands single-character symbols.
2. Keyboard text must be filtered: typing "c" or "M" in the window should not
   trigger clear or memory commands.

Note: This module should NOT import PySide6, so it can be tested without a display.
"""
from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional

from pocketcalc.model.engine import Key


class ButtonSpec(NamedTuple):
    label: str
    row: int
    column: int
    row_span: int = 1
    column_span: int = 1


# Row 0 holds the display, row 1 the memory indicator and status line
BUTTON_LAYOUT: List[ButtonSpec] = [
    ButtonSpec("MC", 2, 0), ButtonSpec("MR", 2, 1), ButtonSpec("M+", 2, 2), ButtonSpec("%", 2, 3),
    ButtonSpec("7", 3, 0), ButtonSpec("8", 3, 1), ButtonSpec("9", 3, 2), ButtonSpec("/", 3, 3),
    ButtonSpec("4", 4, 0), ButtonSpec("5", 4, 1), ButtonSpec("6", 4, 2), ButtonSpec("*", 4, 3),
    ButtonSpec("1", 5, 0), ButtonSpec("2", 5, 1), ButtonSpec("3", 5, 2), ButtonSpec("-", 5, 3),
    ButtonSpec("C", 6, 0), ButtonSpec("0", 6, 1), ButtonSpec(".", 6, 2), ButtonSpec("+", 6, 3),
    ButtonSpec("=", 7, 0, 1, 3),
    ButtonSpec("⌫", 7, 3),
]

BUTTON_SYMBOLS: Dict[str, str] = {
    "MC": Key.MEMORY_CLEAR,
    "MR": Key.MEMORY_RECALL,
    "M+": Key.MEMORY_ADD,
    "%": Key.PERCENT,
    "C": Key.CLEAR,
    "⌫": Key.BACKSPACE,
    "=": Key.EQUALS,
    ".": Key.DECIMAL,
    "+": Key.ADD,
    "-": Key.SUBTRACT,
    "*": Key.MULTIPLY,
    "/": Key.DIVIDE,
}

UTILITY_LABELS = frozenset({"C", "⌫", "MC", "MR", "M+", "%"})

# Characters accepted from the keyboard as typed text
TEXT_SYMBOLS: Dict[str, str] = {
    "+": Key.ADD,
    "-": Key.SUBTRACT,
    "*": Key.MULTIPLY,
    "/": Key.DIVIDE,
    "=": Key.EQUALS,
    ".": Key.DECIMAL,
    ",": Key.DECIMAL,
    "%": Key.PERCENT,
}


def symbol_for_button(label: str) -> str:
    """Engine symbol for a button label. Digits map to themselves."""
    if label.isdigit() and len(label) == 1:
        return label
    try:
        return BUTTON_SYMBOLS[label]
    except KeyError:
        raise ValueError(f"Unknown button label: {label!r}") from None


def symbol_for_text(text: str) -> Optional[str]:
    """Engine symbol for typed keyboard text, or None when the text is not a calculator key."""
    if len(text) != 1:
        return None
    if text in "0123456789":
        return text
    return TEXT_SYMBOLS.get(text)


def button_role(label: str) -> str:
    """Styling role of a button: 'number', 'eq', 'util' or 'op'."""
    if len(label) == 1 and label.isdigit():
        return "number"
    if label == "=":
        return "eq"
    if label in UTILITY_LABELS:
        return "util"
    return "op"
