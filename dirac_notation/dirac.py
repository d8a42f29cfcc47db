# dirac.py
#
# Chainable Dirac-notation values: scalars, bras, kets and operators backed by
# a complex NumPy array.

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

import numpy as np

from dirac_notation.errors import (
    InvalidScalarError,
    ShapeMismatchError,
    UnimplementedError,
)
from dirac_notation.evaluator import EvaluatorBase
from dirac_notation.format_config import FormatLike
from dirac_notation.notation import format_value, parse_and_evaluate
from dirac_notation.resize import extend_to, pad_to
from dirac_notation.shape import (
    MatrixLike,
    Shape,
    as_matrix,
    classify,
    qubit_count,
    squeeze,
    to_complex,
)

logger = logging.getLogger(__name__)

__all__ = ["Dirac", "Operand"]

# Anything accepted where another value is expected.
Operand = Union["Dirac", np.ndarray, Sequence[Any], complex, float, int]


def _matmul(a: MatrixLike, b: MatrixLike) -> MatrixLike:
    r"""Matrix product that falls back to scalar multiplication."""
    if isinstance(a, complex) or isinstance(b, complex):
        return a * b
    if a.shape[1] != b.shape[0]:
        raise ShapeMismatchError(
            f"Cannot multiply a {a.shape[0]}x{a.shape[1]} value by a "
            f"{b.shape[0]}x{b.shape[1]} value."
        )
    return a @ b


def _adjoint(a: MatrixLike) -> MatrixLike:
    if isinstance(a, complex):
        return a.conjugate()
    return a.conj().T


class Dirac:
    r"""
    A scalar, bra, ket or operator in Dirac notation.

    The value owns a single complex number or 2-d complex array. Algebraic
    methods replace it and return ``self`` so calls can be chained::

        Dirac().ket([[0], [1]]).bra([[0, 1]]).num(0.5)   # 0.5|1><1|

    Parameters
    ----------
    y : Dirac, str, array-like or number, optional
        Initial value. Strings are parsed as Dirac notation (e.g.
        ``"(|0> + |1>)/sqrt(2)"``); other values are copied. Defaults to the
        scalar 1, the identity for chaining.
    evaluator : EvaluatorBase or None, optional
        Evaluator for string input; the shared SymPy evaluator by default.

    Raises
    ------
    ParseError
        If ``y`` is a string that cannot be parsed.
    """

    def __init__(
        self,
        y: Union[Operand, str, None] = None,
        *,
        evaluator: Optional[EvaluatorBase] = None,
    ) -> None:
        self._x: MatrixLike
        if y is None:
            self._x = complex(1)
        elif isinstance(y, str):
            self._x = parse_and_evaluate(y, evaluator)
        else:
            self._x = as_matrix(y)
        self._x = squeeze(self._x)

    # ------------------------------------------------------------------
    # Accessors (not chainable)
    # ------------------------------------------------------------------

    def get(self) -> MatrixLike:
        r"""Return a copy of the value: a ``complex`` or a 2-d array."""
        self.is_scalar()
        if isinstance(self._x, complex):
            return self._x
        return self._x.copy()

    def value(self) -> MatrixLike:
        r"""Alias of :meth:`get`; the owned array is never handed out."""
        return self.get()

    def copy(self) -> "Dirac":
        return Dirac(self)

    @property
    def shape(self) -> Shape:
        r"""Current shape; a 1x1 array is squeezed into a scalar first."""
        self._x = squeeze(self._x)
        return classify(self._x)

    def is_scalar(self, y: Optional[Operand] = None) -> bool:
        r"""
        Test ``y`` or, if omitted, this value for being a scalar.

        Classifying this value turns a 1x1 array into a true scalar.
        """
        if y is None:
            return self.shape == "scalar"
        return classify(as_matrix(y)) == "scalar"

    def is_bra(self, y: Optional[Operand] = None) -> bool:
        r"""Test ``y`` or this value for being a bra (row vector)."""
        return classify(self._x if y is None else as_matrix(y)) == "bra"

    def is_ket(self, y: Optional[Operand] = None) -> bool:
        r"""Test ``y`` or this value for being a ket (column vector)."""
        return classify(self._x if y is None else as_matrix(y)) == "ket"

    def is_operator(self, y: Optional[Operand] = None) -> bool:
        r"""Test ``y`` or this value for being an operator."""
        return classify(self._x if y is None else as_matrix(y)) == "operator"

    def qubits(self, y: Optional[Operand] = None) -> int:
        r"""
        Minimum number of qubits needed to label ``y`` or this value.

        Scalars need zero qubits.
        """
        return qubit_count(self._x if y is None else as_matrix(y))

    def abs(self) -> float:
        r"""
        Norm :math:`\sqrt{\langle x|x\rangle}` of a ket, bra or scalar.

        Raises
        ------
        UnimplementedError
            For operators.
        """
        shape = self.shape
        if shape == "operator":
            raise UnimplementedError("abs() is not implemented for operators.")
        adjoint = _adjoint(self._x)
        if shape == "ket":
            inner = _matmul(adjoint, self._x)
        else:
            inner = _matmul(self._x, adjoint)
        return float(np.sqrt(to_complex(inner).real))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self, fmt: FormatLike = None) -> str:
        r"""
        Render in Dirac notation.

        ``fmt`` is a :class:`~dirac_notation.format_config.FormatSpec`, a
        style name (``"ascii"``, ``"unicode"``, ``"tex"``, ``"html"``) or a
        mapping of option overrides such as ``{"decimals": 2}``.
        """
        self.is_scalar()
        return format_value(self._x, fmt)

    def to_unicode(self) -> str:
        return self.to_string("unicode")

    def to_tex(self) -> str:
        r"""Render for TeX math mode, e.g. ``\imath|1\rangle``."""
        return self.to_string("tex")

    def to_html(self) -> str:
        return self.to_string("html")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Dirac({self.to_string()!r})"

    # ------------------------------------------------------------------
    # Chainable algebra
    # ------------------------------------------------------------------

    def bra(self, b: Operand) -> "Dirac":
        r"""
        Multiply from the right by the bra ``b``.

        Applied to a ket this builds an outer product ``|x><b|``; applied to
        the scalar identity it simply yields ``b``.

        Raises
        ------
        ShapeMismatchError
            If ``b`` is not a bra, or the product is undefined.
        """
        b = as_matrix(b)
        if classify(b) != "bra":
            raise ShapeMismatchError(
                f"Expected a Dirac bra vector, got a {classify(b)}."
            )
        self._x = squeeze(_matmul(self._x, b))
        return self

    def ket(self, k: Operand) -> "Dirac":
        r"""
        Multiply from the right by the ket ``k``.

        The column count of this value and the row count of ``k`` are first
        extended to their maximum, so a bra over one qubit can be applied to a
        ket over two. A 1x1 result becomes a scalar.

        Raises
        ------
        ShapeMismatchError
            If ``k`` is not a ket.
        """
        k = as_matrix(k)
        if classify(k) != "ket":
            raise ShapeMismatchError(
                f"Expected a Dirac ket vector, got a {classify(k)}."
            )
        if not isinstance(self._x, complex):
            size = max(self._x.shape[1], k.shape[0])
            self._x = pad_to(self._x, self._x.shape[0], size)
            k = pad_to(k, size, 1)
        self._x = squeeze(_matmul(self._x, k))
        return self

    def ket_from_array(self, values: Sequence[Any]) -> "Dirac":
        r"""Apply :meth:`ket` to a flat sequence of coordinates."""
        column = np.asarray(values, dtype=complex).reshape(-1, 1)
        return self.ket(column)

    def num(self, n: Union[Operand, str]) -> "Dirac":
        r"""
        Multiply by the scalar ``n``.

        Raises
        ------
        InvalidScalarError
            If ``n`` cannot be interpreted as a complex number.
        """
        if isinstance(n, Dirac):
            n = n.get()
        self._x = self._x * to_complex(n)
        return self

    def _combine(self, y: Operand, sign: int) -> "Dirac":
        y = as_matrix(y)
        if self.shape != classify(y):
            raise ShapeMismatchError(
                f"Cannot combine a {self.shape} with a {classify(y)}."
            )
        a = extend_to(self._x, y)
        b = extend_to(y, self._x)
        self._x = squeeze(a + b if sign > 0 else a - b)
        return self

    def plus(self, y: Operand) -> "Dirac":
        r"""
        Add ``y``, zero-padding the smaller of the two to the larger size.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ (e.g. a bra plus a ket).
        """
        return self._combine(y, +1)

    def minus(self, y: Operand) -> "Dirac":
        r"""Subtract ``y``; see :meth:`plus`."""
        return self._combine(y, -1)

    def dagger(self) -> "Dirac":
        r"""Replace the value by its conjugate transpose."""
        self._x = _adjoint(self._x)
        return self

    def normalize(self) -> "Dirac":
        r"""
        Scale to unit norm; a zero vector is left unchanged.

        Raises
        ------
        UnimplementedError
            For operators.
        """
        norm = self.abs()
        if norm != 0:
            self._x = self._x / norm
        return self

    def project(self, p_ket: Operand) -> "Dirac":
        r"""
        Apply the projector :math:`|p\rangle\langle p| / \langle p|p\rangle`.

        Raises
        ------
        ShapeMismatchError
            If ``p_ket`` is not a ket.
        InvalidScalarError
            If ``p_ket`` is the zero vector.
        """
        p_ket = as_matrix(p_ket)
        if classify(p_ket) != "ket":
            raise ShapeMismatchError(
                f"Expected a Dirac ket vector, got a {classify(p_ket)}."
            )
        p_bra = _adjoint(p_ket)
        bracket = to_complex(_matmul(p_bra, p_ket))
        if bracket == 0:
            raise InvalidScalarError("Cannot project onto the zero vector.")
        logger.debug("project: <p|p> = %s", bracket)
        return self.ket(p_ket).bra(p_bra).num(1.0 / bracket)
