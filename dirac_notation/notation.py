# notation.py
#
# Conversion between Dirac-notation text and complex arrays.
#
# Parsing is intentionally narrow in scope:
# - It does NOT do any arithmetic itself.
# - It ONLY:
#     * folds Unicode brackets and bars to ASCII,
#     * splits brackets <a|b> into <a| |b>,
#     * rewrites every ket |label> and bra <label| into a matrix literal whose
#       size fits the widest label in the input,
#     * rewrites LaTeX-style calls \name{args} into name(args).
# The rewritten string is handed to an evaluator (SymPy by default), which
# performs sums, implicit products and function calls.
#
# Formatting goes the other way and renders a scalar or array as a sum of
# coefficient * basis-label terms.

from __future__ import annotations

import logging
import re
from typing import List, Optional

import numpy as np

from dirac_notation.constants import MAX_LABEL_QUBITS, UNICODE_INPUT_MAP
from dirac_notation.errors import ParseError, warn_once
from dirac_notation.evaluator import EvaluatorBase, default_evaluator
from dirac_notation.format_config import FormatLike, FormatSpec, resolve_format
from dirac_notation.shape import MatrixLike, classify, qubit_count, squeeze

logger = logging.getLogger(__name__)

__all__ = [
    "normalize_brackets",
    "split_brakets",
    "count_label_qubits",
    "ket_literal",
    "bra_literal",
    "rewrite_latex_calls",
    "parse_notation",
    "parse_and_evaluate",
    "format_real",
    "format_complex",
    "format_coefficient",
    "basis_label",
    "format_value",
]

# <a|b> with no other brackets or bars inside.
_BRAKET_RE = re.compile(r"<[^<>|]*\|[^<>|]*>")
_BRA_RE = re.compile(r"<[^<>|]+\|")
_KET_RE = re.compile(r"\|[^<>|]+>")
_LATEX_CALL_RE = re.compile(r"\\([a-z]*)\{([^}]*)\}")
_NON_BINARY_RE = re.compile(r"[^01]+")
_UNICODE_RE = re.compile("|".join(re.escape(ch) for ch in UNICODE_INPUT_MAP))


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def normalize_brackets(text: str) -> str:
    r"""Map Unicode angle brackets, bars and the ``ⅈ`` glyph to ASCII."""
    return _UNICODE_RE.sub(lambda m: UNICODE_INPUT_MAP[m.group(0)], text)


def split_brakets(text: str) -> str:
    r"""
    Break brackets apart so bra and ket are parsed independently.

    Examples
    --------
    >>> split_brakets("<0|1>")
    '<0| |1>'
    """
    return _BRAKET_RE.sub(lambda m: m.group(0).replace("|", "| |", 1), text)


def _binary_label(token: str) -> str:
    r"""
    Extract the binary digits of a bra or ket token such as ``|01>``.

    Whitespace is ignored; other non-binary characters are dropped with a
    one-time warning.

    Raises
    ------
    ParseError
        If the label contains no binary digit at all.
    """
    inner = "".join(token[1:-1].split())
    digits = _NON_BINARY_RE.sub("", inner)
    if not digits:
        raise ParseError(
            f"Basis label {token!r} contains no binary digits; "
            "labels are binary indices such as |0>, |10> or <011|."
        )
    if digits != inner:
        warn_once(f"Ignoring non-binary characters in basis label {token!r}.")
    return digits


def count_label_qubits(text: str) -> int:
    r"""
    Return the length of the longest binary label of any bra or ket in
    ``text`` (at least 1).

    Raises
    ------
    ParseError
        If a label is wider than ``MAX_LABEL_QUBITS`` bits.
    """
    qubits = 1
    for token in _BRA_RE.findall(text) + _KET_RE.findall(text):
        qubits = max(qubits, len(_binary_label(token)))
    if qubits > MAX_LABEL_QUBITS:
        raise ParseError(
            f"Basis labels are limited to {MAX_LABEL_QUBITS} qubits, got {qubits}."
        )
    return qubits


def _unit_entries(label: str, qubits: int) -> List[int]:
    index = int(label, 2)
    dim = 1 << max(len(label), qubits)
    entries = [0] * dim
    entries[index] = 1
    return entries


def ket_literal(label: str, qubits: int) -> str:
    r"""
    Column-vector literal for the basis ket ``|label>``.

    The vector has dimension ``2**max(len(label), qubits)`` and a single 1 at
    the binary value of ``label``.

    Examples
    --------
    >>> ket_literal("1", 2)
    '(Matrix([[0], [1], [0], [0]]))'
    """
    rows = ", ".join(f"[{v}]" for v in _unit_entries(label, qubits))
    return f"(Matrix([{rows}]))"


def bra_literal(label: str, qubits: int) -> str:
    r"""
    Row-vector literal for the basis bra ``<label|``.

    This is the conjugate transpose of :func:`ket_literal`; the entries are
    real, so only the orientation changes.
    """
    cols = ", ".join(str(v) for v in _unit_entries(label, qubits))
    return f"(Matrix([[{cols}]]))"


def rewrite_latex_calls(text: str) -> str:
    r"""
    Rewrite LaTeX-style calls into call syntax.

    Examples
    --------
    >>> rewrite_latex_calls(r"\sqrt{2}")
    '(sqrt(2))'
    """
    return _LATEX_CALL_RE.sub(r"(\1(\2))", text)


def parse_notation(text: str) -> str:
    r"""
    Rewrite Dirac-notation text into an expression for the evaluator.

    Parameters
    ----------
    text : str
        Notation such as ``"sin(pi/4) |0> + cos(pi/4) |1>"``,
        ``"<1|1>"`` or ``"|0><0| + |100><1|"``.

    Returns
    -------
    str
        Expression in which every bra and ket is a ``Matrix`` literal. All
        vectors share the dimension ``2**q`` where ``q`` is the length of the
        longest label present, so ``"<10| + <1|"`` adds two 4-dimensional
        rows.

    Raises
    ------
    ParseError
        If a basis label contains no binary digits or is wider than
        ``MAX_LABEL_QUBITS`` bits.
    """
    logger.debug("parse_notation: input: %s", text)
    s = split_brakets(normalize_brackets(text))
    logger.debug("parse_notation: normalized: %s", s)

    qubits = count_label_qubits(s)
    logger.debug("parse_notation: qubits: %d", qubits)

    s = _BRA_RE.sub(lambda m: bra_literal(_binary_label(m.group(0)), qubits), s)
    s = _KET_RE.sub(lambda m: ket_literal(_binary_label(m.group(0)), qubits), s)
    s = rewrite_latex_calls(s)
    logger.debug("parse_notation: expression: %s", s)
    return s


def parse_and_evaluate(
    text: str, evaluator: Optional[EvaluatorBase] = None
) -> MatrixLike:
    r"""Parse notation and evaluate it to a complex scalar or 2-d array."""
    expression = parse_notation(text)
    engine = evaluator if evaluator is not None else default_evaluator()
    return engine.evaluate(expression)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_real(x: float, decimals: int) -> str:
    r"""
    Render ``x`` with at most ``decimals`` decimal places.

    Trailing zeros are stripped and negative zero is printed as ``0``.
    """
    text = f"{x:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _complex_parts(z: complex, decimals: int, imaginary_unit: str) -> tuple[str, str]:
    r"""Return the rendered real and imaginary parts (``"0"`` when absent)."""
    re_s = format_real(z.real, decimals)
    im_s = format_real(z.imag, decimals)
    if im_s == "0":
        return re_s, "0"
    if im_s == "1":
        im_s = imaginary_unit
    elif im_s == "-1":
        im_s = "-" + imaginary_unit
    else:
        im_s = im_s + imaginary_unit
    return re_s, im_s


def format_complex(z: complex, decimals: int = 4, imaginary_unit: str = "i") -> str:
    r"""
    Render a complex number, e.g. ``1``, ``-i``, ``0.5 + 2i``, ``1 - i``.
    """
    re_s, im_s = _complex_parts(complex(z), decimals, imaginary_unit)
    if im_s == "0":
        return re_s
    if re_s == "0":
        return im_s
    if im_s.startswith("-"):
        return f"{re_s} - {im_s[1:]}"
    return f"{re_s} + {im_s}"


def format_coefficient(z: complex, fmt: FormatSpec) -> str:
    r"""
    Render a coefficient standing in front of a basis label.

    A bare ``1`` disappears, ``-1`` becomes ``-``, and coefficients with both
    a real and an imaginary part are parenthesized.
    """
    re_s, im_s = _complex_parts(complex(z), fmt.decimals, fmt.imaginary_unit)
    text = format_complex(z, fmt.decimals, fmt.imaginary_unit)
    if text == "1":
        return ""
    if text == "-1":
        return "-"
    if re_s != "0" and im_s != "0":
        return f"({text})"
    return text


def basis_label(index: int, qubits: int) -> str:
    r"""Binary label of ``index`` zero-padded to ``qubits`` digits."""
    return format(index, "b").zfill(qubits)


def format_value(value: MatrixLike, fmt: FormatLike = None) -> str:
    r"""
    Render a scalar, bra, ket or operator in Dirac notation.

    Parameters
    ----------
    value : complex or numpy.ndarray
        Scalar or 2-d array.
    fmt : FormatSpec, str, Mapping or None, optional
        Output options; see :func:`~dirac_notation.format_config.resolve_format`.

    Returns
    -------
    str
        For scalars the plain complex number. Otherwise a sum of terms
        ``coefficient + label`` in row-major order, e.g.
        ``"0.7071|0> + 0.7071|1>"`` or ``"|01><01| - |10><10|"``. Terms whose
        magnitude is negligible at the requested precision are omitted;
        ``"0"`` is returned if none survive.

    Examples
    --------
    >>> format_value(np.array([[1], [1j]]))
    '|0> + i|1>'
    """
    spec = resolve_format(fmt)
    value = squeeze(value)
    shape = classify(value)
    if shape == "scalar":
        return format_complex(complex(value), spec.decimals, spec.imaginary_unit)

    qubits = max(qubit_count(value), spec.qubits)
    terms: List[str] = []
    for (row, col), coeff in np.ndenumerate(value):
        if abs(coeff) <= spec.epsilon:
            continue
        if format_complex(coeff, spec.decimals) == "0":
            continue
        text = format_coefficient(coeff, spec)
        if terms:
            text = " - " + text[1:] if text.startswith("-") else " + " + text

        ket_label = spec.ket_open + basis_label(row, qubits) + spec.right
        bra_label = spec.left + basis_label(col, qubits) + spec.bra_close
        if shape == "ket":
            text += ket_label
        elif shape == "bra":
            text += bra_label
        else:
            text += ket_label + bra_label
        terms.append(text)

    return "".join(terms) or "0"
