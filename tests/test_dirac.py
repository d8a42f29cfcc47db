import numpy as np
import pytest

from dirac_notation.dirac import Dirac
from dirac_notation.errors import (
    InvalidScalarError,
    ParseError,
    ShapeMismatchError,
    UnimplementedError,
)

R2 = 1.0 / np.sqrt(2)


def test_default_is_scalar_one():
    d = Dirac()
    assert d.get() == complex(1)
    assert d.shape == "scalar"
    assert str(d) == "1"


def test_scalar_rendering():
    assert Dirac().num(3.25).to_string() == "3.25"
    assert Dirac().num(complex(1, 1)).to_string() == "1 + i"
    assert Dirac(0).to_string() == "0"


def test_shape_predicates():
    bra = [[0, 1]]
    ket = [[0], [1]]
    assert Dirac().num(3.25).is_scalar()
    assert not Dirac().bra(bra).is_scalar()
    assert not Dirac().ket(ket).is_scalar()
    assert Dirac().bra(bra).is_bra() and not Dirac().num(3.25).is_bra()
    assert Dirac().ket(ket).is_ket() and not Dirac().bra(bra).is_ket()
    assert Dirac().ket(ket).bra(bra).is_operator()
    assert Dirac().is_ket(ket) and Dirac().is_bra(bra)


def test_inner_products():
    assert Dirac().bra([[0, 1]]).ket([[0], [1]]).to_string() == "1"
    assert Dirac().bra([[1, 0]]).ket([[0], [1]]).to_string() == "0"
    assert Dirac().bra([[1, 0]]).ket([[1], [0]]).to_string() == "1"
    assert isinstance(Dirac().bra([[0, 1]]).ket([[0], [1]]).get(), complex)


def test_ket_extends_mismatched_dimensions():
    assert Dirac().bra([[0, 0, 1]]).ket([[1], [0]]).to_string() == "0"
    assert Dirac().bra([[1, 0]]).ket([[0], [0], [1]]).to_string() == "0"
    assert Dirac().bra([[0, 0, 1]]).ket([[0], [0], [1], [0]]).to_string() == "1"


def test_vectors_render_with_binary_labels():
    assert Dirac().ket([[0], [0], [1]]).to_string() == "|10>"
    assert Dirac().bra([[0, 1]]).to_string() == "<1|"
    assert Dirac().ket([[0], [1]]).to_string() == "|1>"
    assert Dirac().ket([[1], [1]]).to_string() == "|0> + |1>"


def test_dagger():
    ket11 = [[1], [1]]
    assert Dirac().ket(ket11).dagger().to_string() == "<0| + <1|"
    assert Dirac().ket([[0], [1j]]).dagger().to_string() == "-i<1|"
    assert Dirac().ket([[1], [1j]]).dagger().to_string() == "<0| - i<1|"
    assert Dirac(1 + 2j).dagger().get() == 1 - 2j


@pytest.mark.parametrize(
    "data",
    [2 - 1j, [[1], [1j]], [[1, 2j, 3]], [[1, 2], [3j, 4]], [[1, 2, 3], [4, 5j, 6]]],
)
def test_dagger_is_an_involution(data):
    d = Dirac(data)
    assert np.allclose(d.copy().dagger().dagger().get(), d.get())


def test_coefficients():
    ket11 = np.array([[1], [1]])
    assert Dirac().ket(R2 * ket11).to_string() == "0.7071|0> + 0.7071|1>"
    assert Dirac().ket((0.5 + 0.5j) * ket11).to_string() == (
        "(0.5 + 0.5i)|0> + (0.5 + 0.5i)|1>"
    )


def test_project():
    assert Dirac().project([[0], [1]]).to_string() == "|1><1|"
    assert Dirac().ket([[0], [1j]]).bra([[0, 1]]).to_unicode() == "ⅈ|1〉〈1|"
    plus = Dirac().project([[1], [1]])
    assert np.allclose(plus.get(), 0.5 * np.ones((2, 2)))
    state = Dirac().bra([[1, 0]]).project(Dirac().ket_from_array([1, 1]))
    assert np.allclose(state.get(), [[0.5, 0.5]])


def test_project_rejects_non_kets_and_zero():
    with pytest.raises(ShapeMismatchError):
        Dirac().project([[0, 1]])
    with pytest.raises(InvalidScalarError):
        Dirac().project([[0], [0]])


def test_additions_extend_dimensions():
    ket2 = Dirac().ket_from_array([0, 1])
    bra2 = Dirac().ket_from_array([0, 1]).dagger()
    ket3 = Dirac().ket_from_array([0, 0, 1])
    bra3 = Dirac().ket_from_array([0, 0, 1]).dagger()
    proj2 = Dirac().project(ket2)
    proj3 = Dirac().project(ket3)

    assert Dirac().bra(bra2).plus(bra3).to_string() == "<01| + <10|"
    assert Dirac().ket(ket2).plus(ket3).to_string() == "|01> + |10>"
    assert proj2.to_string() == "|1><1|"
    assert Dirac(proj2).to_string() == "|1><1|"
    assert Dirac(proj3).to_string() == "|10><10|"
    assert Dirac(proj2).plus(proj3).to_string() == "|01><01| + |10><10|"
    assert Dirac(proj2).minus(proj3).to_string() == "|01><01| - |10><10|"


def test_plus_minus_scalars():
    assert Dirac(2).plus(1j).get() == 2 + 1j
    assert Dirac(2).minus(Dirac(3)).get() == -1


def test_plus_rejects_mixed_shapes():
    with pytest.raises(ShapeMismatchError):
        Dirac([[1], [0]]).plus([[1, 0]])
    with pytest.raises(ShapeMismatchError):
        Dirac(np.eye(2)).minus([[1], [0]])
    with pytest.raises(ShapeMismatchError):
        Dirac(1).plus([[1], [0]])


def test_bra_and_ket_validate_operands():
    with pytest.raises(ShapeMismatchError):
        Dirac().bra([[0], [1]])
    with pytest.raises(ShapeMismatchError):
        Dirac().ket([[0, 1]])
    with pytest.raises(ShapeMismatchError):
        Dirac().bra([[1, 0]]).bra([[0, 1]])


def test_num():
    assert np.allclose(Dirac([[1], [2]]).num(2j).get(), [[2j], [4j]])
    assert Dirac(3).num(Dirac(2)).get() == 6
    assert Dirac(3).num("2").get() == 6
    with pytest.raises(InvalidScalarError):
        Dirac(1).num("two")
    with pytest.raises(InvalidScalarError):
        Dirac(1).num([[1], [2]])


def test_abs():
    assert Dirac(1).abs() == pytest.approx(1)
    assert Dirac(2).abs() == pytest.approx(2)
    assert Dirac(complex(1, -1)).abs() == pytest.approx(np.sqrt(2))
    assert Dirac().ket([[0], [1]]).abs() == pytest.approx(1)
    assert Dirac().bra([[0, 1]]).abs() == pytest.approx(1)
    assert Dirac().ket([[1], [1j]]).abs() == pytest.approx(np.sqrt(2))
    assert Dirac().ket([[1], [1j]]).dagger().abs() == pytest.approx(np.sqrt(2))
    with pytest.raises(UnimplementedError):
        Dirac(np.eye(2)).abs()


def test_normalize():
    out = Dirac().ket([[1], [1j]]).normalize().get()
    assert np.allclose(out, [[R2], [1j * R2]])
    assert Dirac([[3, 4j]]).normalize().abs() == pytest.approx(1)
    zero = Dirac([[0], [0]]).normalize()
    assert np.allclose(zero.get(), [[0], [0]])
    with pytest.raises(UnimplementedError):
        Dirac(np.eye(2)).normalize()


def test_qubits():
    assert Dirac().qubits() == 0
    assert Dirac([[1], [0], [0]]).qubits() == 2
    assert Dirac().qubits([[1, 0]]) == 1


def test_get_returns_copies():
    d = Dirac([[1], [0]])
    arr = d.get()
    arr[0, 0] = 9
    assert d.get()[0, 0] == 1
    c = d.copy().num(2)
    assert d.get()[0, 0] == 1 and c.get()[0, 0] == 2


def test_value_does_not_expose_internal_array():
    d = Dirac([[1], [0]])
    arr = d.value()
    arr[1, 0] = 5
    assert d.to_string() == "|0>"
    np.testing.assert_allclose(d.value(), [[1], [0]])


def test_chaining_returns_self():
    d = Dirac()
    assert d.ket([[1], [0]]) is d
    assert d.dagger() is d
    assert d.num(2) is d


def test_string_input():
    assert Dirac("|0> + i|1>").to_string() == "|0> + i|1>"
    assert repr(Dirac("<1|")) == "Dirac('<1|')"
    with pytest.raises(ParseError):
        Dirac("|0> +")


def test_rendering_styles():
    d = Dirac([[0], [1j]])
    assert d.to_tex() == r"\imath|1\rangle"
    assert d.to_html() == '<span class="i">i</span><span class="ket">|1&gt;</span>'
    assert d.to_string({"decimals": 2, "qubits": 2}) == "i|01>"
