"""
Dark theme stylesheet for the calculator window.
Buttons are selected through the dynamic properties set by the widget
(number / op / eq / util), the display through `err`.
"""

APP_STYLE = """
QWidget {
    background: #0f1115;
    color: #e6e6e6;
    font-family: "Segoe UI", Roboto, Helvetica, Arial;
}

QLineEdit {
    background: #161a22;
    border: 1px solid #232a36;
    border-radius: 16px;
    padding: 14px 14px;
    color: #eaf2ff;
    selection-background-color: #2f81f7;
}

QLabel { color: #9aa4b2; }
QLabel#memIndicator { color: #1f5eff; }

QPushButton {
    background: #1b2230;
    border: 1px solid #252f3f;
    border-radius: 16px;
    padding: 10px;
    color: #e6e6e6;
}
QPushButton:hover { background: #222c3d; }
QPushButton:pressed { background: #131a26; }

QPushButton[number="true"] { background: #18202d; }
QPushButton[number="true"]:hover { background: #1f2a3b; }

QPushButton[op="true"] {
    background: #2a1f12;
    border: 1px solid #3a2a18;
    color: #ffd7a3;
}
QPushButton[op="true"]:hover { background: #332513; }

QPushButton[eq="true"] {
    background: #1f5eff;
    border: 1px solid #1f5eff;
    color: #ffffff;
    font-weight: 700;
}
QPushButton[eq="true"]:hover { background: #2b6bff; }

QPushButton[util="true"] {
    background: #2b2f3a;
    border: 1px solid #3a4150;
    color: #e6e6e6;
}
QPushButton[util="true"]:hover { background: #333949; }

QLineEdit[err="true"] {
    color: #ff6b6b;
    border: 1px solid #5a2a2a;
}
"""
