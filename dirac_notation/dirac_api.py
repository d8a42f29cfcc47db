"""
User-facing entry points for evaluating Dirac-notation text.

This module intentionally stays thin: it wires parsing, evaluation,
optional normalization and formatting together and turns failures into an
error field that a calculator front end can display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from dirac_notation.dirac import Dirac
from dirac_notation.errors import DiracError
from dirac_notation.evaluator import EvaluatorBase
from dirac_notation.format_config import FormatLike, resolve_format

logger = logging.getLogger(__name__)

__all__ = [
    "NotationResult",
    "evaluate_notation",
    "best_effort_normalize",
    "format_notation",
    "reparse",
]


@dataclass
class NotationResult:
    r"""
    Outcome of one :func:`evaluate_notation` call.

    Attributes
    ----------
    input : str
        The text that was evaluated.
    normalize : bool
        Whether normalization was requested.
    output : str
        Rendered result; empty if evaluation failed.
    error : str or None
        Message of the failure, or ``None`` on success.
    plain : str
        ASCII rendering of the result (equal to ``output`` for the default
        format); used to build :attr:`reuse_input`.
    """

    input: str
    normalize: bool
    output: str = ""
    error: Optional[str] = None
    plain: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def reuse_input(self) -> str:
        r"""The result wrapped in parentheses, ready to be edited and re-evaluated."""
        if not self.ok:
            return self.input
        return f"({self.plain})"


def best_effort_normalize(value: Dirac) -> Dirac:
    r"""
    Normalize ``value`` if possible and leave it unchanged otherwise.

    Failures such as normalizing an operator are logged and swallowed; use
    :meth:`Dirac.normalize` directly to see them.
    """
    try:
        value.normalize()
    except DiracError as exc:
        logger.debug("best_effort_normalize: skipped (%s)", exc)
    return value


def evaluate_notation(
    input_text: str,
    normalize: bool = False,
    *,
    fmt: FormatLike = None,
    evaluator: Optional[EvaluatorBase] = None,
) -> NotationResult:
    r"""
    Parse, evaluate and render Dirac-notation text.

    Parameters
    ----------
    input_text : str
        Notation such as ``"|0> + i|1>"``.
    normalize : bool, optional
        Normalize kets, bras and scalars before rendering. Operators are
        rendered unchanged.
    fmt : FormatSpec, str, Mapping or None, optional
        Output format; ASCII with 4 decimals by default.
    evaluator : EvaluatorBase or None, optional
        Expression evaluator; the shared SymPy evaluator by default.

    Returns
    -------
    NotationResult
        ``result.output`` holds the rendering, or ``result.error`` the reason
        it failed.

    Examples
    --------
    >>> evaluate_notation("|0> + i|1>", normalize=True).output
    '0.7071|0> + 0.7071i|1>'
    """
    result = NotationResult(input=input_text, normalize=normalize)
    try:
        spec = resolve_format(fmt)
        value = Dirac(input_text, evaluator=evaluator)
        if normalize and value.shape in ("ket", "bra", "scalar"):
            best_effort_normalize(value)
        result.plain = value.to_string()
        result.output = value.to_string(spec)
    except DiracError as exc:
        logger.debug("evaluate_notation: %r failed: %s", input_text, exc)
        result.error = str(exc)
    return result


def format_notation(
    input_text: str,
    style: FormatLike = "ascii",
    *,
    evaluator: Optional[EvaluatorBase] = None,
) -> str:
    r"""
    Parse ``input_text`` and render it in another style.

    Unlike :func:`evaluate_notation`, errors propagate to the caller.

    Examples
    --------
    >>> format_notation("<1|", "unicode")
    '〈1|'
    """
    return Dirac(input_text, evaluator=evaluator).to_string(style)


def reparse(value: Dirac, *, evaluator: Optional[EvaluatorBase] = None) -> Dirac:
    r"""
    Round-trip ``value`` through its ASCII rendering.

    The result equals ``value`` up to the 4-decimal rounding of the output
    and any zero padding implied by the labels.
    """
    return Dirac(value.to_string(), evaluator=evaluator)
