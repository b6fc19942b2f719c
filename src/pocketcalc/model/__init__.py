"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with entry buffering, arithmetic and number formatting.
"""
from pocketcalc.model.arithmetic import ErrorKind, OperationError, Operator
from pocketcalc.model.engine import Calculator, Key
from pocketcalc.model.state import CalculatorState

__all__ = ["Calculator", "CalculatorState", "ErrorKind", "Key", "OperationError", "Operator"]
