"""
Main Application Window
=======================
The calculator window: a read-only display above a 4x4 keypad.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure (display, separator, buttons).
2. Routing: It forwards every button click and keyboard shortcut to the
   KeypadController and mirrors the controller's text in the display.
"""
from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QGridLayout, QLineEdit, QPushButton, QFrame
)

from safecalc import config
from safecalc.controller.keypad import KeypadController, KEYPAD_LAYOUT, CLEAR_KEY, EQUALS_KEY

GRID_COLUMNS = 4


class CalculatorWindow(QMainWindow):
    def __init__(self, controller: KeypadController) -> None:
        super().__init__()
        self.controller = controller
        self.controller.on_display_changed = self.on_display_changed

        self.setWindowTitle(config.VISIBLE_APP_NAME)
        self.setFixedSize(*config.WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        # --- 1. DISPLAY ---
        self.display = QLineEdit()
        self.display.setPlaceholderText("0")
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        self.display.setMinimumHeight(36)
        self.display.setStyleSheet("font-size: 18px;")
        layout.addWidget(self.display)

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        layout.addWidget(separator)

        # --- 2. KEYPAD ---
        grid = QGridLayout()
        self.buttons: dict[str, QPushButton] = {}
        for index, label in enumerate(KEYPAD_LAYOUT):
            btn = QPushButton(label)
            btn.setMinimumHeight(40)
            btn.setShortcut(QKeySequence(ord(label)))
            btn.clicked.connect(lambda _checked=False, key=label: self.on_key_pressed(key))
            grid.addWidget(btn, index // GRID_COLUMNS, index % GRID_COLUMNS)
            self.buttons[label] = btn
        layout.addLayout(grid)
        layout.addStretch()

        # --- 3. EXTRA SHORTCUTS ---
        for sequence, key in ((Qt.Key_Return, EQUALS_KEY),
                              (Qt.Key_Enter, EQUALS_KEY),
                              (Qt.Key_Escape, CLEAR_KEY)):
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(lambda key=key: self.on_key_pressed(key))

        self.on_display_changed(self.controller.text)

    # --- SLOTS ---

    def on_key_pressed(self, label: str) -> None:
        self.controller.press(label)

    def on_display_changed(self, text: str) -> None:
        self.display.setText(text)
