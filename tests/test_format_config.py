import pytest

from dirac_notation.errors import FormatConfigError
from dirac_notation.format_config import FormatSpec, make_format, resolve_format


def test_defaults_are_ascii():
    spec = resolve_format(None)
    assert (spec.left, spec.right, spec.center) == ("<", ">", "|")
    assert spec.decimals == 4
    assert spec.imaginary_unit == "i"
    assert spec.ket_open == "|" and spec.bra_close == "|"
    assert spec.epsilon == pytest.approx(0.5e-4)


def test_center_left_right_fall_back_to_center():
    spec = FormatSpec(center="!")
    assert spec.ket_open == "!" and spec.bra_close == "!"
    spec = FormatSpec(center="!", center_left="[", center_right="]")
    assert spec.ket_open == "[" and spec.bra_close == "]"


def test_named_styles():
    assert make_format("unicode").imaginary_unit == "ⅈ"
    assert make_format("TeX").left == r"\langle"
    html = make_format("html")
    assert html.ket_open.startswith('<span class="ket">')
    assert html.right.endswith("</span>")


def test_overrides_and_mappings():
    assert make_format("unicode", decimals=2).decimals == 2
    spec = resolve_format({"style": "tex", "qubits": 3})
    assert spec.left == r"\langle" and spec.qubits == 3
    assert resolve_format({"decimals": 1}).left == "<"
    assert resolve_format("unicode").left == "〈"
    spec = FormatSpec()
    assert resolve_format(spec) is spec
    assert spec.replace(decimals=6).decimals == 6


@pytest.mark.parametrize(
    "kwargs",
    [{"decimals": -1}, {"qubits": -2}, {"decimals": 1.5}, {"left": 3}],
)
def test_invalid_options_rejected(kwargs):
    with pytest.raises(FormatConfigError):
        FormatSpec(**kwargs)


def test_unknown_style_and_keys_rejected():
    with pytest.raises(FormatConfigError):
        make_format("markdown")
    with pytest.raises(FormatConfigError):
        resolve_format({"precision": 3})
    with pytest.raises(FormatConfigError):
        FormatSpec().replace(glyph="x")
    with pytest.raises(FormatConfigError):
        resolve_format(42)
