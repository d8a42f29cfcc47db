r"""
Shape classification for scalars, bra and ket vectors, and operators.

Values are either plain complex numbers or two-dimensional complex arrays.
The shape is never stored; it is derived from the dimensions each time:

* ``scalar``: 1x1 (or a bare number),
* ``ket``: n x 1 with n > 1,
* ``bra``: 1 x m with m > 1,
* ``operator``: n x m with n, m > 1.
"""

from __future__ import annotations

import numbers
from typing import Any, Literal, Union

import numpy as np

from dirac_notation.errors import InvalidScalarError, ShapeMismatchError

__all__ = [
    "Shape",
    "MatrixLike",
    "as_matrix",
    "to_complex",
    "classify",
    "is_scalar",
    "is_bra",
    "is_ket",
    "is_operator",
    "qubit_count",
    "squeeze",
]

Shape = Literal["scalar", "bra", "ket", "operator"]

# Either a squeezed scalar or a 2-D complex array.
MatrixLike = Union[complex, np.ndarray]


def to_complex(value: Any) -> complex:
    r"""
    Coerce a number (or a single-entry array) to ``complex``.

    Raises
    ------
    InvalidScalarError
        If ``value`` has more than one entry or is not numeric.
    """
    if not isinstance(value, (str, numbers.Number)):
        try:
            value = np.asarray(value, dtype=complex)
        except (TypeError, ValueError) as exc:
            raise InvalidScalarError(
                f"Cannot interpret {value!r} as a complex number."
            ) from exc
        if value.size != 1:
            raise InvalidScalarError(
                f"Expected a scalar, got an array of shape {value.shape}."
            )
        value = value.reshape(-1)[0]
    try:
        return complex(value)
    except (TypeError, ValueError) as exc:
        raise InvalidScalarError(
            f"Cannot interpret {value!r} as a complex number."
        ) from exc


def as_matrix(operand: Any) -> MatrixLike:
    r"""
    Normalize an operand to a ``complex`` or a 2-D complex ``ndarray``.

    Accepts another :class:`~dirac_notation.dirac.Dirac` value (through its
    ``get`` accessor), nested sequences, NumPy arrays, and numbers. The
    returned array is always a fresh copy.

    Raises
    ------
    ShapeMismatchError
        For arrays that are neither 0-d nor 2-d.
    InvalidScalarError
        For non-numeric input.
    """
    from dirac_notation.dirac import Dirac

    if isinstance(operand, Dirac):
        operand = operand.get()
    if isinstance(operand, numbers.Number):
        return complex(operand)
    if isinstance(operand, str):
        raise InvalidScalarError(
            f"Expected a number or array, got the string {operand!r}; "
            "use Dirac(text) to parse notation."
        )
    try:
        arr = np.array(operand, dtype=complex)
    except (TypeError, ValueError) as exc:
        raise InvalidScalarError(
            f"Cannot interpret {operand!r} as a complex array."
        ) from exc
    if arr.ndim == 0:
        return complex(arr)
    if arr.ndim != 2:
        raise ShapeMismatchError(
            f"Expected a scalar or a 2-d array, got shape {arr.shape}; "
            "write vectors as [[a], [b]] (ket) or [[a, b]] (bra)."
        )
    if arr.shape[0] < 1 or arr.shape[1] < 1:
        raise ShapeMismatchError(f"Arrays must not be empty; got shape {arr.shape}.")
    return arr


def _dims(value: MatrixLike) -> tuple[int, int]:
    if isinstance(value, np.ndarray):
        if value.ndim == 2:
            return int(value.shape[0]), int(value.shape[1])
        if value.ndim == 0:
            return 1, 1
        raise ShapeMismatchError(f"Unsupported array rank {value.ndim}.")
    return 1, 1


def classify(value: MatrixLike) -> Shape:
    r"""Return the shape of ``value`` from its dimensions alone."""
    rows, cols = _dims(value)
    if rows == 1 and cols == 1:
        return "scalar"
    if cols == 1:
        return "ket"
    if rows == 1:
        return "bra"
    return "operator"


def is_scalar(value: MatrixLike) -> bool:
    return classify(value) == "scalar"


def is_bra(value: MatrixLike) -> bool:
    return classify(value) == "bra"


def is_ket(value: MatrixLike) -> bool:
    return classify(value) == "ket"


def is_operator(value: MatrixLike) -> bool:
    return classify(value) == "operator"


def squeeze(value: MatrixLike) -> MatrixLike:
    r"""Turn a 1x1 array into a true scalar; leave anything else alone."""
    if isinstance(value, np.ndarray) and value.size == 1:
        return complex(value.reshape(-1)[0])
    return value


def qubit_count(value: MatrixLike) -> int:
    r"""
    Minimum number of qubits needed to label every basis index of ``value``.

    Scalars need zero qubits; otherwise this is the smallest ``k >= 1`` with
    ``2**k >= max(rows, cols)``. Dimensions need not be powers of two.
    """
    rows, cols = _dims(value)
    n = max(rows, cols)
    if n == 1:
        return 0
    k = 1
    while (1 << k) < n:
        k += 1
    return k
