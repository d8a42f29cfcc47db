from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from dirac_notation.constants import DEFAULT_DECIMALS, STYLE_GLYPHS
from dirac_notation.errors import FormatConfigError

__all__ = ["FormatSpec", "FormatLike", "make_format", "resolve_format"]


@dataclass(frozen=True)
class FormatSpec:
    r"""
    Output options for rendering values in Dirac notation.

    Parameters
    ----------
    left, right : str
        Outer bracket glyphs, e.g. ``<`` of a bra and ``>`` of a ket.
    center : str
        Vertical bar used on the inner side of both bras and kets.
    center_left, center_right : str or None, optional
        Distinct inner glyphs for kets (``center_left``) and bras
        (``center_right``). Both default to ``center``.
    decimals : int, optional
        Decimal places for coefficients. Coefficients whose magnitude does
        not exceed ``0.5 * 10**-decimals`` are omitted.
    imaginary_unit : str, optional
        Glyph substituted for the imaginary unit.
    qubits : int, optional
        Minimum label width in bits. Widens the zero padding of basis labels
        without touching the data.
    """

    left: str = "<"
    right: str = ">"
    center: str = "|"
    center_left: Optional[str] = None
    center_right: Optional[str] = None
    decimals: int = DEFAULT_DECIMALS
    imaginary_unit: str = "i"
    qubits: int = 0

    def __post_init__(self) -> None:
        r"""Validate glyphs and numeric options."""
        for name in ("left", "right", "center", "imaginary_unit"):
            if not isinstance(getattr(self, name), str):
                raise FormatConfigError(f"FormatSpec.{name} must be a string.")
        for name in ("center_left", "center_right"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise FormatConfigError(f"FormatSpec.{name} must be a string or None.")
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise FormatConfigError("FormatSpec.decimals must be an integer.")
        if self.decimals < 0:
            raise FormatConfigError("FormatSpec.decimals must be non-negative.")
        if isinstance(self.qubits, bool) or not isinstance(self.qubits, int):
            raise FormatConfigError("FormatSpec.qubits must be an integer.")
        if self.qubits < 0:
            raise FormatConfigError("FormatSpec.qubits must be non-negative.")

    @property
    def ket_open(self) -> str:
        r"""Glyph opening a ket label."""
        return self.center if self.center_left is None else self.center_left

    @property
    def bra_close(self) -> str:
        r"""Glyph closing a bra label."""
        return self.center if self.center_right is None else self.center_right

    @property
    def epsilon(self) -> float:
        r"""Magnitude at or below which a coefficient is treated as zero."""
        return 0.5 * 10.0 ** (-self.decimals)

    def replace(self, **overrides: Any) -> "FormatSpec":
        r"""Return a copy with selected fields replaced."""
        _check_keys(overrides)
        return dataclasses.replace(self, **overrides)


FormatLike = Union[FormatSpec, str, Mapping[str, Any], None]

_FIELDS = {f.name for f in dataclasses.fields(FormatSpec)}


def _check_keys(options: Mapping[str, Any]) -> None:
    unknown = sorted(set(options) - _FIELDS)
    if unknown:
        raise FormatConfigError(
            f"Unknown format option(s) {unknown}. Known options: {sorted(_FIELDS)}."
        )


def make_format(style: str = "ascii", **overrides: Any) -> FormatSpec:
    """
    Build a :class:`FormatSpec` from a named style plus explicit overrides.

    ``style`` is one of ``"ascii"``, ``"unicode"``, ``"tex"``, ``"html"``.
    """
    glyphs = STYLE_GLYPHS.get(style.lower())
    if glyphs is None:
        raise FormatConfigError(
            f"Unknown format style '{style}'. Available: {sorted(STYLE_GLYPHS)}."
        )
    _check_keys(overrides)
    options: dict[str, Any] = dict(glyphs)
    options.update(overrides)
    return FormatSpec(**options)


def resolve_format(fmt: FormatLike = None) -> FormatSpec:
    """
    Centralized format resolution for every rendering entry point.

    Accepts ``None`` (ASCII defaults), a ready :class:`FormatSpec`, a style
    name, or a mapping of overrides on top of the ASCII style.
    """
    if fmt is None:
        return make_format("ascii")
    if isinstance(fmt, FormatSpec):
        return fmt
    if isinstance(fmt, str):
        return make_format(fmt)
    if isinstance(fmt, Mapping):
        options = dict(fmt)
        style = options.pop("style", "ascii")
        return make_format(style, **options)
    raise FormatConfigError(
        f"Format must be a FormatSpec, style name or mapping; got {type(fmt)!r}."
    )
