import numpy as np
import pytest

from safecalc.model.engine import NumexprEngine, default_engine
from safecalc.model.errors import EngineError


@pytest.fixture(scope="module")
def engine() -> NumexprEngine:
    return NumexprEngine()


def test_returns_numpy_scalars_not_arrays(engine: NumexprEngine) -> None:
    value = engine.evaluate("2+3")
    assert not isinstance(value, np.ndarray)
    assert isinstance(value, np.integer)
    assert int(value) == 5


def test_float_literals_give_float_results(engine: NumexprEngine) -> None:
    value = engine.evaluate("7.0/2.0")
    assert isinstance(value, np.floating)
    assert float(value) == 3.5


def test_leading_zeros_are_accepted(engine: NumexprEngine) -> None:
    assert int(engine.evaluate("08*2")) == 16


def test_integer_overflow_falls_back_to_double_precision(engine: NumexprEngine) -> None:
    value = engine.evaluate("99999*99999")
    assert float(value) == 9999800001.0


@pytest.mark.parametrize("expression", ["1.0/0.0", "-1.0/0.0", "0.0/0.0"])
def test_non_finite_results_are_errors(engine: NumexprEngine, expression: str) -> None:
    with pytest.raises(EngineError):
        engine.evaluate(expression)


def test_syntax_errors_are_wrapped(engine: NumexprEngine) -> None:
    with pytest.raises(EngineError) as exc_info:
        engine.evaluate("2+")
    assert exc_info.value.message
    assert exc_info.value.__cause__ is not None


def test_names_are_not_resolved_from_the_caller(engine: NumexprEngine) -> None:
    x = np.float64(3.0)  # noqa: F841 - must stay invisible to the engine
    with pytest.raises(EngineError):
        engine.evaluate("x+1")


def test_default_engine_is_shared() -> None:
    assert default_engine() is default_engine()


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("36028797018963971-36028797018963968", 3),
        ("9007199254740993+0", 9007199254740993),
        ("9007199254740993-1", 9007199254740992),
    ],
)
def test_exact_int64_results_are_kept_above_float_precision(
    engine: NumexprEngine, expression: str, expected: int
) -> None:
    value = engine.evaluate(expression)
    assert isinstance(value, np.integer)
    assert int(value) == expected


def test_int64_overflow_falls_back_to_double_precision(engine: NumexprEngine) -> None:
    value = engine.evaluate("9999999999*9999999999")
    assert isinstance(value, np.floating)
    assert float(value) == pytest.approx(9.999999998e19)


def test_line_breaks_and_tabs_separate_tokens(engine: NumexprEngine) -> None:
    assert int(engine.evaluate("2+\n3")) == 5
    assert int(engine.evaluate("4\t*\r\n\v2")) == 8
