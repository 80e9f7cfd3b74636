"""
Result Formatting
Turns a NumericResult into the text shown in the calculator display.
"""
from __future__ import annotations

import numpy as np

from safecalc.model.results import (
    NumericResult, IntResult, Int64Result, Float32Result, Float64Result, TextResult, OtherResult
)


def shortest_float(value: float, single: bool = False) -> str:
    """
    Shortest positional representation that parses back to the same float.

    No exponent notation, no trailing zeros and no dangling decimal point:
    6.0 -> "6", 6.5 -> "6.5", 1e21 -> "1000000000000000000000".

    Args:
        value: The number to render.
        single: Round-trip in float32 instead of float64 semantics.
    """
    scalar = np.float32(value) if single else np.float64(value)
    return np.format_float_positional(scalar, unique=True, trim="-")


def format_result(result: NumericResult, prefer_float: bool) -> str:
    """
    Render an evaluation result for display.

    Args:
        result: Classified engine output.
        prefer_float: True when the input contained a division. Integers are
            then rendered through the float path as well.
    """
    if prefer_float:
        if isinstance(result, Float32Result):
            return shortest_float(result.value, single=True)
        if isinstance(result, Float64Result):
            return shortest_float(result.value)
        if isinstance(result, (IntResult, Int64Result)):
            return shortest_float(float(result.value))
        if isinstance(result, (TextResult, OtherResult)):
            return str(result.value)
        raise TypeError(f"Unknown result variant: {type(result).__name__}")

    if isinstance(result, (IntResult, Int64Result)):
        return str(result.value)
    if isinstance(result, Float32Result):
        return shortest_float(result.value, single=True)
    if isinstance(result, Float64Result):
        return shortest_float(result.value)
    if isinstance(result, TextResult):
        return result.value
    if isinstance(result, OtherResult):
        return str(result.value)
    raise TypeError(f"Unknown result variant: {type(result).__name__}")
