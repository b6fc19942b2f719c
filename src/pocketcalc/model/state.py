"""
Calculator State (Data Model)
=============================
This module defines the central data structure for a running calculator session.

Why is this file needed?
------------------------
1. State Management: It holds the entry buffer, the accumulator, the pending
   operator, the error latch and the memory register in one place.
2. Decoupling: The engine writes to this object; views only read the
   projections the engine derives from it.

Classes:
    CalculatorState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

import numpy as np

from pocketcalc.model.arithmetic import Operator

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """
    Holds the whole state of one calculator session.

    `entry` is always in internal form (ASCII digits, at most one '.',
    optional leading '-'). An empty entry means nothing is being typed.
    `memory` has its own lifecycle and survives `reset()`.
    """
    entry: str = ""
    accumulator: Optional[np.longdouble] = None
    pending_operator: Optional[Operator] = None
    just_evaluated: bool = False

    error: bool = False
    error_message: str = ""

    memory: Optional[np.longdouble] = None

    def reset(self) -> None:
        """Clear everything for a new calculation (memory is kept)."""
        self.entry = ""
        self.accumulator = None
        self.pending_operator = None
        self.just_evaluated = False
        self.clear_error()
        logger.debug("Calculator state has been reset.")

    def start_fresh(self) -> None:
        """Discard the finished calculation before typing a new number."""
        self.accumulator = None
        self.pending_operator = None
        self.entry = ""
        self.just_evaluated = False

    def set_error(self, message: str) -> None:
        self.error = True
        self.error_message = message

    def clear_error(self) -> None:
        self.error = False
        self.error_message = ""
