"""
Evaluation Results
==================
The arithmetic engine hands back dynamically typed values (Python ints,
numpy scalars of various widths, 0-d arrays, occasionally text). This module
pins each one down to a single variant of ``NumericResult`` so the formatter
can branch on a closed set of types.

Classes:
    IntResult, Int64Result, Float32Result, Float64Result, TextResult, OtherResult
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import numpy as np


@dataclass(frozen=True)
class IntResult:
    """Integer of native (up to 32-bit) width, or a plain Python int."""
    value: int


@dataclass(frozen=True)
class Int64Result:
    value: int


@dataclass(frozen=True)
class Float32Result:
    # Stored as a Python float; every float32 is exactly representable
    value: float


@dataclass(frozen=True)
class Float64Result:
    value: float


@dataclass(frozen=True)
class TextResult:
    value: str


@dataclass(frozen=True)
class OtherResult:
    value: Any


NumericResult = Union[IntResult, Int64Result, Float32Result, Float64Result, TextResult, OtherResult]


def classify(raw: Any) -> NumericResult:
    """
    Map a raw engine value onto a NumericResult variant.

    0-d numpy arrays are unwrapped first. Booleans are not treated as
    numbers even though Python considers ``bool`` a subclass of ``int``.
    """
    if isinstance(raw, np.ndarray) and raw.ndim == 0:
        raw = raw[()]

    if isinstance(raw, (bool, np.bool_)):
        return OtherResult(raw)

    if isinstance(raw, np.integer):
        if raw.dtype.itemsize <= 4:
            return IntResult(int(raw))
        return Int64Result(int(raw))

    if isinstance(raw, int):
        return IntResult(raw)

    if isinstance(raw, np.float32):
        return Float32Result(float(raw))

    # np.float64 is a subclass of float
    if isinstance(raw, float):
        return Float64Result(float(raw))

    if isinstance(raw, str):
        return TextResult(raw)

    if isinstance(raw, bytes):
        return TextResult(raw.decode("utf-8", errors="replace"))

    return OtherResult(raw)
