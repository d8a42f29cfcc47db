from __future__ import annotations

import numpy as np

from dirac_notation.shape import MatrixLike, is_scalar

__all__ = ["extend_to", "pad_to"]


def pad_to(a: np.ndarray, rows: int, cols: int) -> np.ndarray:
    r"""
    Return a copy of ``a`` zero-padded to at least ``rows x cols``.

    Existing entries keep their indices; a dimension that is already larger
    than requested is kept as is.
    """
    rows = max(rows, a.shape[0])
    cols = max(cols, a.shape[1])
    out = np.zeros((rows, cols), dtype=complex)
    out[: a.shape[0], : a.shape[1]] = a
    return out


def extend_to(a: MatrixLike, b: MatrixLike) -> MatrixLike:
    r"""
    Enlarge ``a`` to the dimensions of ``b`` where ``b`` is larger.

    Both operands must be non-scalar for anything to happen; scalars are
    returned unchanged so callers can fall back to ordinary complex
    arithmetic. This is how values declared over different numbers of qubits
    are combined: ``|1>`` on one qubit and ``|10>`` on two become vectors of
    the same length.

    Examples
    --------
    >>> extend_to(np.array([[1], [2]]), np.array([[0], [0], [0]])).shape
    (3, 1)
    """
    if is_scalar(a) or is_scalar(b):
        return a
    return pad_to(np.asarray(a), b.shape[0], b.shape[1])
