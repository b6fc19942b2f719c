"""
Tests for the Qt calculator window.
Runs on the offscreen platform; skipped when the Qt libraries cannot be loaded.

Run with: pytest tests/test_calculator_widget.py -v
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QKeyEvent

from pocketcalc.model.engine import Calculator
from pocketcalc.view.calculator_widget import CalculatorWidget


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def widget(qapp):
    w = CalculatorWidget(Calculator())
    yield w
    w.deleteLater()


def click(widget, labels):
    for label in labels:
        widget.buttons[label].click()


def key(widget, qt_key, text=""):
    widget.keyPressEvent(QKeyEvent(QEvent.KeyPress, qt_key, Qt.NoModifier, text))


class TestInitialRender:
    def test_shows_engine_projections(self, widget):
        assert widget.display_text == "0"
        assert widget.status_text == "Ready"
        assert widget.memory_text == ""

    def test_has_every_button(self, widget):
        for label in ["MC", "MR", "M+", "%", "C", "⌫", "=", ".", "+", "-", "*", "/"]:
            assert label in widget.buttons
        for digit in "0123456789":
            assert digit in widget.buttons

    def test_buttons_carry_role_property(self, widget):
        assert widget.buttons["5"].property("number") is True
        assert widget.buttons["="].property("eq") is True
        assert widget.buttons["MC"].property("util") is True
        assert widget.buttons["+"].property("op") is True


class TestButtons:
    def test_addition(self, widget):
        click(widget, ["3", "+"])
        assert widget.status_text == "3 +"
        click(widget, ["4", "="])
        assert widget.display_text == "7"
        assert widget.status_text == "7"

    def test_grouped_display(self, widget):
        click(widget, ["1", "2", "3", "4", ".", "5"])
        assert widget.display_text == "1.234,5"

    def test_memory_indicator(self, widget):
        click(widget, ["5", "M+"])
        assert widget.memory_text == "M"
        click(widget, ["MC"])
        assert widget.memory_text == ""

    def test_error_property(self, widget):
        click(widget, ["8", "/", "0", "="])
        assert widget.display_text == "ERROR"
        assert widget.status_text == "Division by zero"
        assert widget.display_edit.property("err") is True
        click(widget, ["C"])
        assert widget.display_text == "0"
        assert widget.display_edit.property("err") is False

    def test_state_changed_signal(self, widget):
        received = []
        widget.state_changed.connect(lambda: received.append(widget.display_text))
        click(widget, ["9"])
        assert received == ["9"]


class TestKeyboard:
    def test_typed_expression(self, widget):
        key(widget, Qt.Key_5, "5")
        key(widget, Qt.Key_Plus, "+")
        key(widget, Qt.Key_2, "2")
        key(widget, Qt.Key_Return, "\r")
        assert widget.display_text == "7"

    def test_backspace_and_escape(self, widget):
        key(widget, Qt.Key_1, "1")
        key(widget, Qt.Key_2, "2")
        key(widget, Qt.Key_Backspace)
        assert widget.display_text == "1"
        key(widget, Qt.Key_Escape)
        assert widget.display_text == "0"

    def test_letters_do_not_trigger_commands(self, widget):
        key(widget, Qt.Key_5, "5")
        key(widget, Qt.Key_M, "M")
        key(widget, Qt.Key_C, "c")
        assert widget.display_text == "5"
        assert widget.memory_text == ""

    def test_comma_key(self, widget):
        key(widget, Qt.Key_1, "1")
        key(widget, Qt.Key_Comma, ",")
        key(widget, Qt.Key_5, "5")
        assert widget.display_text == "1,5"
