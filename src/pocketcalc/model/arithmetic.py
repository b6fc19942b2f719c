"""
Operator Application
====================
Pure evaluation of a single binary operation on the accumulator.

Note: This module should be pure Python/NumPy and should NOT import PySide6.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Optional

import numpy as np


class Operator(StrEnum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class ErrorKind(StrEnum):
    """Error kinds latched by the engine. Values are the user-facing messages."""
    DIGIT_LIMIT = "Max 10 digits"
    MISSING_OPERAND = "Enter a number before '='"
    DIVISION_BY_ZERO = "Division by zero"
    OVERFLOW = "Overflow/invalid"


class OperationError(ValueError):
    """Raised when an operation cannot produce a finite result."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def is_finite(value: np.longdouble) -> bool:
    """Finite when projected to double precision (what the display can show)."""
    with np.errstate(over="ignore", invalid="ignore"):
        return bool(np.isfinite(np.float64(value)))


def apply_operator(
    lhs: Optional[np.longdouble],
    operator: Optional[Operator],
    rhs: np.longdouble,
) -> np.longdouble:
    """
    Compute `lhs operator rhs`.

    Without an accumulator or a pending operator the right-hand value is
    simply adopted.

    Raises:
        OperationError: DIVISION_BY_ZERO for a zero divisor, OVERFLOW for a
            non-finite outcome.
    """
    if lhs is None or operator is None:
        return np.longdouble(rhs)

    lhs = np.longdouble(lhs)
    rhs = np.longdouble(rhs)

    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        if operator == Operator.ADD:
            out = lhs + rhs
        elif operator == Operator.SUBTRACT:
            out = lhs - rhs
        elif operator == Operator.MULTIPLY:
            out = lhs * rhs
        else:
            if rhs == 0:
                raise OperationError(ErrorKind.DIVISION_BY_ZERO)
            out = lhs / rhs

    if not is_finite(out):
        raise OperationError(ErrorKind.OVERFLOW)
    return out
