"""
Calculator Window
=================
The GUI container with the display, the status line and the button grid.

Why is this file needed?
------------------------
1. Layout: It organizes the display, memory indicator, status label and keys.
2. Routing: It forwards button clicks and key presses to the engine and
   re-renders the engine's projections afterwards.
"""
import logging

from PySide6.QtWidgets import QGridLayout, QLabel, QLineEdit, QPushButton, QWidget
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent

from pocketcalc.config import MEMORY_INDICATOR, VISIBLE_APP_NAME, WINDOW_MIN_HEIGHT, WINDOW_MIN_WIDTH
from pocketcalc.controller.keymap import BUTTON_LAYOUT, button_role, symbol_for_button, symbol_for_text
from pocketcalc.model.engine import Calculator, Key
from pocketcalc.view.style import APP_STYLE

logger = logging.getLogger(__name__)

# Keys that carry no text (or whose text is not the symbol we want)
SPECIAL_KEYS = [
    (Qt.Key_Return, Key.EQUALS),
    (Qt.Key_Enter, Key.EQUALS),
    (Qt.Key_Backspace, Key.BACKSPACE),
    (Qt.Key_Escape, Key.CLEAR),
    (Qt.Key_Delete, Key.CLEAR),
]


def symbol_for_key_event(event: QKeyEvent) -> str | None:
    for qt_key, symbol in SPECIAL_KEYS:
        if event.key() == qt_key:
            return symbol
    return symbol_for_text(event.text())


class CalculatorWidget(QWidget):
    # Emitted after every refresh of the projections
    state_changed = Signal()

    def __init__(self, calculator: Calculator, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.calculator: Calculator = calculator
        self.buttons: dict[str, QPushButton] = {}

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.setStyleSheet(APP_STYLE)
        self.setAutoFillBackground(True)
        self.setFocusPolicy(Qt.StrongFocus)

        layout = QGridLayout(self)
        layout.setSpacing(12)
        layout.setContentsMargins(18, 18, 18, 18)

        # --- DISPLAY ---
        self.display_edit = QLineEdit()
        self.display_edit.setReadOnly(True)
        self.display_edit.setAlignment(Qt.AlignRight)
        self.display_edit.setMinimumHeight(70)
        self.display_edit.setFocusPolicy(Qt.NoFocus)
        font = self.display_edit.font()
        font.setPointSize(28)
        font.setBold(True)
        self.display_edit.setFont(font)

        # --- MEMORY INDICATOR + STATUS ---
        self.lbl_memory = QLabel("")
        self.lbl_memory.setObjectName("memIndicator")
        self.lbl_memory.setMinimumHeight(22)
        self.lbl_memory.setAlignment(Qt.AlignLeft)
        font = self.lbl_memory.font()
        font.setBold(True)
        self.lbl_memory.setFont(font)

        self.lbl_status = QLabel("")
        self.lbl_status.setAlignment(Qt.AlignRight)
        self.lbl_status.setMinimumHeight(22)

        layout.addWidget(self.display_edit, 0, 0, 1, 4)
        layout.addWidget(self.lbl_memory, 1, 0, 1, 1)
        layout.addWidget(self.lbl_status, 1, 1, 1, 3)

        # --- BUTTONS ---
        for spec in BUTTON_LAYOUT:
            btn = self._create_button(spec.label)
            layout.addWidget(btn, spec.row, spec.column, spec.row_span, spec.column_span)

        for column in range(4):
            layout.setColumnStretch(column, 1)

        self.refresh()
        logger.info("Calculator window created.")

    def _create_button(self, label: str) -> QPushButton:
        btn = QPushButton(label)
        btn.setMinimumHeight(56)
        btn.setFocusPolicy(Qt.NoFocus)
        font = btn.font()
        font.setPointSize(18)
        font.setBold(True)
        btn.setFont(font)

        # Dynamic property used by the stylesheet selectors
        btn.setProperty(button_role(label), True)

        btn.clicked.connect(lambda _checked=False, text=label: self.on_button_clicked(text))
        self.buttons[label] = btn
        return btn

    # --- PROPERTIES ---

    @property
    def display_text(self) -> str:
        return self.display_edit.text()

    @property
    def status_text(self) -> str:
        return self.lbl_status.text()

    @property
    def memory_text(self) -> str:
        return self.lbl_memory.text()

    # --- SLOTS ---

    def on_button_clicked(self, label: str) -> None:
        self.calculator.press(symbol_for_button(label))
        self.refresh()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        symbol = symbol_for_key_event(event)
        if symbol is None:
            super().keyPressEvent(event)
            return

        self.calculator.press(symbol)
        self.refresh()
        event.accept()

    # --- RENDERING ---

    def refresh(self) -> None:
        """Re-read every projection from the engine."""
        calc = self.calculator
        self.display_edit.setText(calc.display())
        self.lbl_status.setText(calc.status_line())
        self.lbl_memory.setText(MEMORY_INDICATOR if calc.has_memory() else "")

        # Re-apply the stylesheet after the property change
        self.display_edit.setProperty("err", calc.has_error())
        self.display_edit.style().unpolish(self.display_edit)
        self.display_edit.style().polish(self.display_edit)

        self.state_changed.emit()
