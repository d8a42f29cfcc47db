import numpy as np
import pytest
import sympy as sp

from dirac_notation.errors import ParseError
from dirac_notation.evaluator import SympyEvaluator, default_evaluator


def test_scalar_expressions():
    ev = SympyEvaluator()
    assert ev.evaluate("1 - i") == 1 - 1j
    assert ev.evaluate("2i") == 2j
    assert ev.evaluate("2^3") == 8
    assert ev.evaluate("sqrt(4)") == 2
    assert ev.evaluate("sin(pi/2)") == pytest.approx(1)


def test_identifiers_containing_i_are_not_split():
    ev = SympyEvaluator()
    assert ev.evaluate("sin(pi/6) i") == pytest.approx(0.5j)
    assert ev.evaluate("pi i") == pytest.approx(np.pi * 1j)


def test_matrix_products_and_implicit_multiplication():
    ev = SympyEvaluator()
    out = ev.evaluate("(Matrix([[0, 1]])) (Matrix([[0], [1]]))")
    assert out.shape == (1, 1)
    assert out[0, 0] == 1
    outer = ev.evaluate("(Matrix([[1], [0]]))(Matrix([[0, 1]]))")
    assert np.allclose(outer, [[0, 1], [0, 0]])
    scaled = ev.evaluate("i (Matrix([[1], [0]]))")
    assert np.allclose(scaled, [[1j], [0]])


def test_conj_transpose_dagger():
    ev = SympyEvaluator()
    out = ev.evaluate("dagger(Matrix([[1], [i]]))")
    assert np.allclose(out, [[1, -1j]])
    assert np.allclose(ev.evaluate("transpose(Matrix([[1], [2]]))"), [[1, 2]])
    assert ev.evaluate("conj(1 + i)") == 1 - 1j


def test_failures_become_parse_errors():
    ev = SympyEvaluator()
    for bad in ["", "1 +", "(1", "x + 1", "Matrix([[1], [0]]) + Matrix([[1, 0]])"]:
        with pytest.raises(ParseError):
            ev.evaluate(bad)


def test_non_finite_results_rejected():
    with pytest.raises(ParseError):
        SympyEvaluator().evaluate("1/0")


def test_extra_names():
    ev = SympyEvaluator(extra_names={"hbar": sp.Rational(1, 2)})
    assert ev.evaluate("2 hbar") == 1
    ev.register("twice", lambda x: 2 * x)
    assert ev.evaluate("twice(3)") == 6
    with pytest.raises(ValueError):
        ev.register("not valid", 1)


def test_default_evaluator_is_shared():
    assert default_evaluator() is default_evaluator()


@pytest.mark.parametrize(
    "expression",
    [
        "__import__('os').system('true')",
        "(1).real",
        "lambda x: x",
        "Matrix.zeros(2)",
        "1; 2",
    ],
)
def test_python_syntax_outside_notation_rejected(expression):
    with pytest.raises(ParseError):
        SympyEvaluator().evaluate(expression)


def test_code_injection_has_no_side_effect(tmp_path):
    marker = tmp_path / "marker"
    ev = SympyEvaluator()
    with pytest.raises(ParseError):
        ev.evaluate(f"__import__('os').system('touch {marker}') (Matrix([[1], [0]]))")
    assert not marker.exists()


def test_builtins_are_not_visible():
    ev = SympyEvaluator()
    for name in ["open", "eval", "exec", "globals"]:
        with pytest.raises(ParseError):
            ev.evaluate(f"{name}(1)")


def test_euler_constant():
    ev = SympyEvaluator()
    assert ev.evaluate("e") == pytest.approx(np.e)
    assert ev.evaluate("e^(i pi)") == pytest.approx(-1)
