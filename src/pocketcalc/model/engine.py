"""
Calculator Engine
=================
The single-accumulator state machine behind the calculator window.

Why is this file needed?
------------------------
1. Input handling: It turns one key symbol at a time into a state transition
   (entry buffering, operator chaining, equals, clear, backspace).
2. Error latching: Division by zero, overflow, the digit limit and a missing
   operand put the engine into an error state that only "clear" leaves.
3. Projections: It derives the display text and the status line shown by
   any presentation layer.

Operators apply immediately, left to right (no precedence). Every call runs
to completion synchronously; errors are reported through state, never raised.

Note: This module should be pure Python/NumPy and should NOT import PySide6.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Optional

import numpy as np

from pocketcalc.config import EMPTY_DISPLAY, ERROR_DISPLAY, MAX_DIGITS, READY_STATUS
from pocketcalc.model.arithmetic import ErrorKind, OperationError, Operator, apply_operator, is_finite
from pocketcalc.model.formatting import count_digits, format_number, parse_internal, to_display, to_internal
from pocketcalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


class Key(StrEnum):
    """Symbols understood by `Calculator.press` (besides the digits 0-9)."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUALS = "="
    DECIMAL = "."
    CLEAR = "c"
    BACKSPACE = "b"
    MEMORY_CLEAR = "X"
    MEMORY_RECALL = "R"
    MEMORY_ADD = "M"
    PERCENT = "%"


DIGITS = frozenset("0123456789")
WHITESPACE = frozenset(" \t\r\n")
CLEAR_KEYS = frozenset({Key.CLEAR, "C"})
BACKSPACE_KEYS = frozenset({Key.BACKSPACE, "B"})
DECIMAL_KEYS = frozenset({Key.DECIMAL, ","})
OPERATOR_KEYS = frozenset(op.value for op in Operator)


class Calculator:
    """
    Pocket calculator engine.

    Feed symbols with `press()`, read the results with `display()`,
    `status_line()`, `has_error()`, `error_message()` and `has_memory()`.
    """

    def __init__(self) -> None:
        self.state = CalculatorState()

    # --- INPUT ---

    def press(self, key: str) -> bool:
        """
        Feed one key symbol.

        Returns:
            True if the key was consumed, False if it was ignored.
        """
        # Memory and percent keep working in the error state
        if key == Key.MEMORY_CLEAR:
            self.memory_clear()
            return True
        if key == Key.MEMORY_RECALL:
            self.memory_recall()
            return True
        if key == Key.MEMORY_ADD:
            self.memory_add()
            return True
        if key == Key.PERCENT:
            self.percent()
            return True

        if key in WHITESPACE:
            return False

        if self.state.error:
            if key in CLEAR_KEYS:
                self.clear_all()
                return True
            return False

        if key in DIGITS:
            if self.state.just_evaluated:
                self.state.start_fresh()
            return self._append_digit(key)

        if key in CLEAR_KEYS:
            self.clear_all()
            return True

        if key in BACKSPACE_KEYS:
            self.backspace()
            return True

        if key in DECIMAL_KEYS:
            self._append_decimal_point()
            return True

        if key in OPERATOR_KEYS:
            self._latch_operator(Operator(key))
            return True

        if key == Key.EQUALS:
            self._evaluate()
            return True

        return False

    def clear_all(self) -> None:
        self.state.reset()

    def backspace(self) -> None:
        state = self.state
        if not state.entry:
            return
        # A dangling sign or exponent marker is not a number on its own
        state.entry = state.entry[:-1].rstrip("eE+-")
        if not state.entry:
            state.just_evaluated = False

    def _append_digit(self, digit: str) -> bool:
        state = self.state
        if count_digits(state.entry) >= MAX_DIGITS:
            self._set_error(ErrorKind.DIGIT_LIMIT)
            return True

        # "0" followed by a digit collapses instead of growing leading zeros
        if state.entry == "0":
            state.entry = digit
        else:
            state.entry += digit
        return True

    def _append_decimal_point(self) -> None:
        state = self.state
        if state.just_evaluated:
            state.start_fresh()

        if not state.entry:
            state.entry = "0."
        elif "." not in state.entry:
            state.entry += "."

    def _latch_operator(self, operator: Operator) -> None:
        state = self.state
        state.just_evaluated = False

        if state.accumulator is None:
            state.accumulator = self._entry_value() if state.entry else np.longdouble(0)
        elif state.pending_operator is not None and state.entry:
            # Chained operation: "3 + 4 +" evaluates 3 + 4 first
            if not self._apply_pending(self._entry_value()):
                return

        state.pending_operator = operator
        state.entry = ""

    def _evaluate(self) -> None:
        state = self.state

        if state.accumulator is None:
            if not state.entry:
                state.entry = "0"
            state.just_evaluated = True
            return

        if state.pending_operator is not None:
            if not state.entry:
                self._set_error(ErrorKind.MISSING_OPERAND)
                return
            if not self._apply_pending(self._entry_value()):
                return
            state.entry = to_internal(state.accumulator)
            state.pending_operator = None
            state.just_evaluated = True
            return

        state.entry = to_internal(state.accumulator)
        state.just_evaluated = True

    def _apply_pending(self, rhs: np.longdouble) -> bool:
        """Apply the pending operator to the accumulator. False if an error was latched."""
        state = self.state
        try:
            state.accumulator = apply_operator(state.accumulator, state.pending_operator, rhs)
        except OperationError as e:
            self._set_error(e.kind)
            return False
        return True

    def _entry_value(self) -> np.longdouble:
        return parse_internal(self.state.entry)

    def _set_error(self, kind: ErrorKind) -> None:
        logger.warning(f"Calculator error: {kind.value} (entry={self.state.entry!r})")
        self.state.set_error(kind.value)

    # --- MEMORY & PERCENT ---

    def memory_clear(self) -> None:
        """MC: empty the memory register."""
        self.state.memory = None
        logger.debug("Memory cleared.")

    def memory_recall(self) -> None:
        """MR: copy memory into the entry. Also leaves the error state."""
        state = self.state
        if state.memory is None:
            return

        state.entry = to_internal(state.memory)
        state.just_evaluated = False
        state.clear_error()
        logger.debug(f"Memory recalled: {state.entry}")

    def memory_add(self) -> None:
        """M+: add the working value (entry, else accumulator, else 0) to memory."""
        state = self.state

        if state.entry:
            value = self._entry_value()
        elif state.accumulator is not None:
            value = state.accumulator
        else:
            value = np.longdouble(0)

        current = state.memory if state.memory is not None else np.longdouble(0)
        with np.errstate(over="ignore", invalid="ignore"):
            total = current + value

        if not is_finite(total):
            self._set_error(ErrorKind.OVERFLOW)
            return

        state.memory = total
        logger.debug(f"Memory updated: {to_internal(total)}")

    def percent(self) -> None:
        """
        %: with a pending operator the entry becomes that percentage of the
        accumulator ("50 + 10 %" -> 5); otherwise the entry is divided by 100.
        With no entry, the accumulator divided by 100 is placed in the entry.
        """
        state = self.state

        if not state.entry:
            if state.accumulator is not None:
                self._set_entry_checked(state.accumulator / 100)
            return

        value = self._entry_value()
        with np.errstate(over="ignore", invalid="ignore"):
            if state.accumulator is not None and state.pending_operator is not None:
                value = state.accumulator * (value / 100)
            else:
                value = value / 100

        if not self._set_entry_checked(value):
            return
        state.just_evaluated = False

    def _set_entry_checked(self, value: np.longdouble) -> bool:
        """Write a computed value into the entry. False if it overflowed (error latched)."""
        if not is_finite(value):
            self._set_error(ErrorKind.OVERFLOW)
            return False
        self.state.entry = to_internal(value)
        return True

    # --- PROJECTIONS ---

    @property
    def entry(self) -> str:
        return self.state.entry

    @property
    def accumulator(self) -> Optional[np.longdouble]:
        return self.state.accumulator

    @property
    def pending_operator(self) -> Optional[Operator]:
        return self.state.pending_operator

    def display(self) -> str:
        """Text for the main display."""
        state = self.state
        if state.error:
            return ERROR_DISPLAY
        if state.entry:
            return to_display(state.entry)
        if state.accumulator is not None:
            return format_number(state.accumulator)
        return EMPTY_DISPLAY

    def status_line(self) -> str:
        """Small status text, e.g. "12 +"."""
        state = self.state
        if state.error:
            return state.error_message
        if state.accumulator is None:
            return READY_STATUS

        text = format_number(state.accumulator)
        if state.pending_operator is not None:
            text += f" {state.pending_operator.value}"
        return text

    def has_error(self) -> bool:
        return self.state.error

    def error_message(self) -> str:
        return self.state.error_message

    def has_memory(self) -> bool:
        return self.state.memory is not None
