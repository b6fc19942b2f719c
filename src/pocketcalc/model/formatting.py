"""
Number Formatting
=================
Conversion between numeric values and the two string forms used by the engine.

Why is this file needed?
------------------------
1. Internal form: The engine keeps the in-progress entry as text ("1234.5"),
   so backspace and leading-zero collapsing can work on characters.
2. Display form: The user sees grouped thousands and a comma decimal
   separator ("1.234,5").
3. Parsing: Only the internal form is ever turned back into a number.

All functions here are pure and stateless.
"""
from __future__ import annotations

import re
from typing import Union

import numpy as np

from pocketcalc.model.arithmetic import is_finite
from pocketcalc.config import (
    DECIMAL_SEPARATOR,
    FRACTION_DIGITS,
    GROUP_SEPARATOR,
    INTEGER_EPSILON,
    INTERNAL_DECIMAL_POINT,
    SCIENTIFIC_DIGITS,
)

Number = Union[float, int, np.floating]

_INT64 = np.iinfo(np.int64)

# Optional sign, digits with at most one point, optional exponent
_INTERNAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def is_scientific(text: str) -> bool:
    return "e" in text or "E" in text


def to_internal(value: Number) -> str:
    """
    Render a value as an internal string (no grouping, '.' decimal point).

    Values within INTEGER_EPSILON of an integer are printed as integers,
    falling back to scientific notation outside the signed 64-bit range.
    Everything else gets FRACTION_DIGITS fixed decimals with trailing zeros
    removed.

    Raises:
        ValueError: If the value is not finite in double precision.
    """
    v = np.longdouble(value)
    if not is_finite(v):
        raise ValueError(f"Cannot render a non-finite value: {v!r}")
    rounded = np.round(v)

    if abs(v - rounded) < INTEGER_EPSILON:
        if _INT64.min <= rounded <= _INT64.max:
            return str(int(rounded))
        return f"{float(v):.{SCIENTIFIC_DIGITS}e}"

    text = f"{float(v):.{FRACTION_DIGITS}f}"
    if INTERNAL_DECIMAL_POINT in text:
        text = text.rstrip("0").rstrip(INTERNAL_DECIMAL_POINT)

    # Tiny negatives collapse to "-0.0000"
    if text == "-0":
        text = "0"
    return text


def group_digits(digits: str, separator: str = GROUP_SEPARATOR) -> str:
    """Insert `separator` every three digits, counting from the right."""
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def to_display(internal: str) -> str:
    """
    Convert an internal string ("-1234.5") into display form ("-1.234,5").
    Scientific notation is passed through unchanged.
    """
    if is_scientific(internal):
        return internal

    sign = ""
    text = internal
    if text[:1] in ("-", "+"):
        sign, text = text[0], text[1:]

    int_part, _, frac_part = text.partition(INTERNAL_DECIMAL_POINT)

    # Drop any stray separators so grouping starts from clean digits
    for ch in (GROUP_SEPARATOR, DECIMAL_SEPARATOR, INTERNAL_DECIMAL_POINT):
        int_part = int_part.replace(ch, "")
        frac_part = frac_part.replace(ch, "")

    grouped = group_digits(int_part) if int_part else int_part

    if frac_part:
        return f"{sign}{grouped}{DECIMAL_SEPARATOR}{frac_part}"
    # A trailing point ("12.") has no fraction to show yet
    return f"{sign}{grouped}"


def format_number(value: Number) -> str:
    """Value straight to display form."""
    return to_display(to_internal(value))


def parse_internal(text: str) -> np.longdouble:
    """
    Parse an internal string into an extended precision value.

    Raises:
        ValueError: If the text is not in internal form (e.g. grouped display text).
    """
    if not _INTERNAL_PATTERN.match(text):
        raise ValueError(f"Not an internal number string: {text!r}")
    return np.longdouble(text)


def count_digits(text: str) -> int:
    return sum(1 for ch in text if ch.isdigit())
