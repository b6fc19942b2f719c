"""Pocket calculator: a single-accumulator engine with a Qt front end."""
from pocketcalc.model import Calculator, Key

__version__ = "1.0.0"

__all__ = ["Calculator", "Key", "__version__"]
