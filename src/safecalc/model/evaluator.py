"""
Expression Guard & Evaluator
============================
Validates raw calculator input, forces floating-point division, delegates to
the arithmetic engine and formats the outcome for the display.

Pipeline:
    trim -> length cap -> character allow-list -> division rewrite
    -> engine -> classify -> format

The allow-list check runs on the trimmed but otherwise untouched input, so
nothing the rewrite produces can smuggle characters past it.
"""
from __future__ import annotations

import re
from typing import Optional

from safecalc import config
from safecalc.model.engine import ArithmeticEngine, default_engine
from safecalc.model.errors import EmptyExpression, EngineError, ExpressionTooLong, InvalidCharacters
from safecalc.model.formatting import format_result
from safecalc.model.results import classify
from safecalc.model.tokens import floatify_integers

ALLOWED_EXPRESSION = re.compile(config.ALLOWED_EXPRESSION_PATTERN, re.ASCII)


def coerce_division(expression: str) -> str:
    """
    Rewrite integer literals as floats when the expression divides.

    "7/2" -> "7.0/2.0", "7.5/2" -> "7.5/2.0". Expressions without "/" are
    returned unchanged.
    """
    if "/" not in expression:
        return expression
    return floatify_integers(expression)


class ExpressionEvaluator:
    """
    Stateless guard around an arithmetic engine.

    Args:
        engine: Engine used for evaluation. Defaults to the shared numexpr engine.
        max_length: Longest accepted (trimmed) input.
    """

    def __init__(self, engine: Optional[ArithmeticEngine] = None,
                 max_length: int = config.MAX_EXPRESSION_LENGTH) -> None:
        self.engine: ArithmeticEngine = engine if engine is not None else default_engine()
        self.max_length = max_length

    def evaluate(self, expression: str) -> str:
        """
        Evaluate ``expression`` and return the display string.

        Raises:
            EmptyExpression: Nothing but whitespace was given.
            ExpressionTooLong: The trimmed input exceeds ``max_length``.
            InvalidCharacters: A character outside digits, + - * / ( ) . and whitespace.
            EngineError: The engine could not evaluate the expression.
        """
        trimmed = expression.strip()
        if not trimmed:
            raise EmptyExpression()

        if len(trimmed) > self.max_length:
            raise ExpressionTooLong(len(trimmed), self.max_length)

        if not ALLOWED_EXPRESSION.fullmatch(trimmed):
            raise InvalidCharacters()

        has_division = "/" in trimmed
        to_eval = coerce_division(trimmed)

        try:
            raw = self.engine.evaluate(to_eval)
        except EngineError:
            raise
        except Exception as e:
            raise EngineError(str(e) or type(e).__name__) from e

        return format_result(classify(raw), prefer_float=has_division)


def evaluate(expression: str, engine: Optional[ArithmeticEngine] = None) -> str:
    """Evaluate with a throwaway evaluator around ``engine`` (or the shared engine)."""
    return ExpressionEvaluator(engine).evaluate(expression)
