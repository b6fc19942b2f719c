"""
Configuration & Global Constants
================================
This module serves as the central registry for the calculator's constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (digit limits, separators, messages)
   from being scattered throughout the engine and the views.
2. Consistency: The model and the view read the same display conventions.

Exports:
    MAX_DIGITS (int): Maximum number of digit characters in an entry.
    GROUP_SEPARATOR (str): Thousands grouping character on display.
    DECIMAL_SEPARATOR (str): Decimal separator character on display.
"""

# Application identity (Qt settings / window title)
ORG_ID = "pocketcalc"
APP_ID = "pocketcalc"
VISIBLE_APP_NAME = "Calculator"

# Window geometry
WINDOW_MIN_WIDTH = 360
WINDOW_MIN_HEIGHT = 520

# Entry limits
MAX_DIGITS: int = 10

# Internal number formatting
INTEGER_EPSILON: float = 1e-12
FRACTION_DIGITS: int = 4
SCIENTIFIC_DIGITS: int = 10
INTERNAL_DECIMAL_POINT: str = "."

# Display formatting (fixed regional convention, e.g. "1.234,5")
GROUP_SEPARATOR: str = "."
DECIMAL_SEPARATOR: str = ","

# Projections
ERROR_DISPLAY: str = "ERROR"
READY_STATUS: str = "Ready"
EMPTY_DISPLAY: str = "0"
MEMORY_INDICATOR: str = "M"
