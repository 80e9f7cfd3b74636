"""
Evaluation Errors
=================
Every way an expression can fail to produce a display string.

All errors are terminal for a single evaluation: nothing is retried and
nothing is logged here. Callers decide how to present them.
"""


class EvaluationError(Exception):
    """Base class for all evaluator failures."""


class EmptyExpression(EvaluationError):
    def __init__(self) -> None:
        super().__init__("empty expression")


class ExpressionTooLong(EvaluationError):
    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"expression too long ({length} > {limit} characters)")
        self.length = length
        self.limit = limit


class InvalidCharacters(EvaluationError):
    def __init__(self) -> None:
        super().__init__("invalid characters")


class EngineError(EvaluationError):
    """The arithmetic engine rejected or failed to evaluate the expression."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
