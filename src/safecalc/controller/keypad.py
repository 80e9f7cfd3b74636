"""
Keypad Controller
=================
Holds the text typed on the calculator keypad and reacts to button presses.

Why is this file needed?
------------------------
1. Decoupling: The window only forwards button labels; buffer handling and
   the "=" / "C" actions live here, without any Qt import, so they can be
   tested without a display.
2. Error policy: Every evaluation failure collapses to the ERROR_MARKER in
   the display, while the detailed reason goes to the log.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from safecalc import config
from safecalc.model.errors import EvaluationError
from safecalc.model.evaluator import ExpressionEvaluator

logger = logging.getLogger(__name__)

CLEAR_KEY = "C"
EQUALS_KEY = "="

# Buttons in reading order (4 columns)
KEYPAD_LAYOUT: list[str] = [
    "7", "8", "9", "/",
    "4", "5", "6", "*",
    "1", "2", "3", "-",
    CLEAR_KEY, "0", EQUALS_KEY, "+",
]


class KeypadController:
    def __init__(self, evaluator: ExpressionEvaluator,
                 on_display_changed: Optional[Callable[[str], None]] = None) -> None:
        self.evaluator = evaluator
        self.on_display_changed = on_display_changed
        self._text: str = ""

    @property
    def text(self) -> str:
        return self._text

    def _set_text(self, text: str) -> None:
        self._text = text
        if self.on_display_changed is not None:
            self.on_display_changed(text)

    # --- ACTIONS ---

    def press(self, label: str) -> str:
        """Handle a button press and return the resulting display text."""
        if label == CLEAR_KEY:
            return self.clear()
        if label == EQUALS_KEY:
            return self.equals()

        # No validation while typing, the evaluator guards on "="
        self._set_text(self._text + label)
        return self._text

    def clear(self) -> str:
        self._set_text("")
        return self._text

    def equals(self) -> str:
        expression = self._text
        try:
            result = self.evaluator.evaluate(expression)
        except EvaluationError as e:
            logger.warning(f"Could not evaluate '{expression}': {e}")
            self._set_text(config.ERROR_MARKER)
            return self._text

        logger.debug(f"'{expression}' = {result}")
        self._set_text(result)
        return self._text
