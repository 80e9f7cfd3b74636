"""
The MODEL layer contains the pure evaluation logic.
It has NO knowledge of the GUI (Qt).
It deals with input validation, the arithmetic engine and result formatting.
"""
from safecalc.model.errors import (
    EvaluationError,
    EmptyExpression,
    ExpressionTooLong,
    InvalidCharacters,
    EngineError,
)
from safecalc.model.evaluator import ExpressionEvaluator, evaluate, coerce_division

__all__ = [
    "EvaluationError",
    "EmptyExpression",
    "ExpressionTooLong",
    "InvalidCharacters",
    "EngineError",
    "ExpressionEvaluator",
    "evaluate",
    "coerce_division",
]
