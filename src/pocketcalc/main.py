"""
Application Initialization
==========================
This module wires the engine to the window and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the engine (Calculator).
2. Instantiates the window (View).
3. Passes the engine into the window so they can communicate.
"""
import logging
import os
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QStyleFactory
from PySide6.QtCore import QCoreApplication

from pocketcalc.config import APP_ID, ORG_ID, VISIBLE_APP_NAME
from pocketcalc.logging_config import setup_logging
from pocketcalc.model.engine import Calculator
from pocketcalc.view.calculator_widget import CalculatorWidget

logger = logging.getLogger(__name__)


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    # Fusion gives the stylesheet full control over the look
    fusion = QStyleFactory.create("Fusion")
    if fusion is not None:
        app.setStyle(fusion)
    else:
        logger.warning("Fusion style not available, using the platform default.")

    return app


def main() -> None:
    # Use logging.DEBUG to trace every state reset and memory action
    setup_logging(level=os.environ.get("POCKETCALC_LOG_LEVEL", "INFO"))

    app = create_app()

    calculator = Calculator()
    window = CalculatorWidget(calculator)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
