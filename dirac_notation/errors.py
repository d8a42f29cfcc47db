from __future__ import annotations

import warnings

__all__ = [
    "DiracError",
    "ParseError",
    "ShapeMismatchError",
    "InvalidScalarError",
    "UnimplementedError",
    "FormatConfigError",
    "enable_warnings",
    "warn_once",
]


class DiracError(Exception):
    r"""Base exception for dirac_notation."""


class ParseError(DiracError):
    r"""Raised when notation text is malformed or cannot be evaluated."""


class ShapeMismatchError(DiracError):
    r"""Raised when an operand is not a scalar/bra/ket/operator as required."""


class InvalidScalarError(DiracError):
    r"""Raised when a value cannot be coerced to a complex number."""


class UnimplementedError(DiracError):
    r"""Raised for operations that are only defined on vectors and scalars."""


class FormatConfigError(DiracError):
    r"""Raised for invalid output format options."""


_WARN_ENABLED = True
_WARNED: set[str] = set()


def enable_warnings(enabled: bool = True) -> None:
    r"""Enable or disable module-level runtime warnings."""
    global _WARN_ENABLED
    _WARN_ENABLED = enabled


def warn_once(message: str) -> None:
    r"""Emit a warning only once per unique message."""
    if not _WARN_ENABLED:
        return
    if message in _WARNED:
        return
    _WARNED.add(message)
    warnings.warn(message, RuntimeWarning, stacklevel=2)
