"""
Arithmetic Engine
=================
Adapter between the evaluator and the numexpr expression engine.

Why is this file needed?
------------------------
1. Isolation: The evaluator only depends on the small ArithmeticEngine
   protocol, so tests can inject fake engines returning any value type.
2. Engine policy: numexpr compiles one line of Python, with Python literal
   rules and fixed-width integers. The adapter smooths over line breaks,
   leading zeros and 32-bit overflow, and reports non-finite results as
   failures.

Classes:
    ArithmeticEngine: Protocol implemented by every engine.
    NumexprEngine: The production engine.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import numexpr
import numpy as np

from safecalc.model.errors import EngineError
from safecalc.model.tokens import collapse_whitespace, floatify_integers, strip_leading_zeros

logger = logging.getLogger(__name__)


class ArithmeticEngine(Protocol):
    def evaluate(self, expression: str) -> Any:
        """Parse and evaluate with no bound variables and no custom functions."""
        ...


class NumexprEngine:
    """
    Evaluates arithmetic with ``numexpr.evaluate``.

    The instance holds no mutable state and can be shared between calls.
    Failures of any kind are raised as EngineError.
    """

    def evaluate(self, expression: str) -> Any:
        prepared = strip_leading_zeros(collapse_whitespace(expression))
        value = self._run(prepared)

        if isinstance(value, np.integer):
            # numexpr computes small integer literals in int32 and wraps on
            # overflow. Wrapping is exact modulo 2**bits, so the integer is
            # only wrong when the true value lies outside its dtype range.
            approx = self._run(floatify_integers(prepared))
            info = np.iinfo(value.dtype)
            if not float(info.min) <= float(approx) <= float(info.max):
                logger.debug(f"Integer overflow in '{prepared}', using float result {approx!r}")
                value = approx

        if isinstance(value, np.floating) and not np.isfinite(value):
            if np.isinf(value):
                raise EngineError("division by zero or overflow")
            raise EngineError("result is not a finite number")

        return value

    @staticmethod
    def _run(expression: str) -> Any:
        try:
            raw = numexpr.evaluate(expression, local_dict={}, global_dict={})
        except Exception as e:
            raise EngineError(str(e) or type(e).__name__) from e

        if isinstance(raw, np.ndarray) and raw.ndim == 0:
            return raw[()]
        return raw


_DEFAULT_ENGINE: Optional[NumexprEngine] = None


def default_engine() -> NumexprEngine:
    """Return the shared engine handle, creating it on first use."""
    global _DEFAULT_ENGINE

    if _DEFAULT_ENGINE is None:
        _DEFAULT_ENGINE = NumexprEngine()
    return _DEFAULT_ENGINE
