r"""
Expression evaluators used to turn preprocessed notation into numbers.

The notation parser only rewrites bras and kets into matrix literals; all
arithmetic (sums, implicit products, ``sin``, ``pi``, ``sqrt`` ...) is left to
an evaluator. :class:`SympyEvaluator` is the default; custom evaluators
subclass :class:`EvaluatorBase` and implement :meth:`EvaluatorBase._evaluate`.
"""

from __future__ import annotations

import abc
import logging
import re
from typing import Any, Dict, Mapping, Optional

import numpy as np
import sympy as sp
from sympy.matrices import MatrixBase
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_application,
    implicit_multiplication,
    parse_expr,
    standard_transformations,
)

from dirac_notation.errors import DiracError, ParseError
from dirac_notation.shape import MatrixLike, as_matrix

logger = logging.getLogger(__name__)

__all__ = ["EvaluatorBase", "SympyEvaluator", "default_evaluator"]

# Characters and keywords that never occur in notation but could reach
# Python internals through eval.
_UNSAFE_RE = re.compile(r"[_'\"`\\:;]|\blambda\b|\.\s*[A-Za-z]")

# SymPy names that can parse strings or change the namespace.
_HIDDEN_SYMPY_NAMES = frozenset(
    {"sympify", "lambdify", "var", "init_session", "init_printing", "preview"}
)


def _sympy_globals() -> Dict[str, Any]:
    r"""Public SymPy names without Python builtins, for ``parse_expr``."""
    names: Dict[str, Any] = {
        name: getattr(sp, name)
        for name in dir(sp)
        if not name.startswith("_") and name not in _HIDDEN_SYMPY_NAMES
    }
    names["__builtins__"] = {}
    return names


_SYMPY_GLOBALS = _sympy_globals()


class EvaluatorBase(abc.ABC):
    r"""
    Abstract evaluator template; subclasses implement the actual parsing.

    :meth:`evaluate` wraps every failure of the concrete evaluator into a
    :class:`~dirac_notation.errors.ParseError` carrying the original message,
    and checks that the result is a finite scalar or 2-d array.
    """

    def evaluate(self, expression: str) -> MatrixLike:
        r"""Evaluate ``expression`` to a ``complex`` or a 2-d complex array."""
        logger.debug("evaluate: %s", expression)
        try:
            raw = self._evaluate(expression)
        except DiracError:
            raise
        except Exception as exc:
            raise ParseError(
                f"Could not evaluate expression {expression!r}: {exc}"
            ) from exc

        try:
            value = self._to_numeric(raw)
        except ParseError:
            raise
        except DiracError as exc:
            raise ParseError(
                f"Expression {expression!r} did not evaluate to a scalar, "
                f"vector or operator: {exc}"
            ) from exc

        if not np.all(np.isfinite(value)):
            raise ParseError(f"Expression {expression!r} evaluated to a non-finite value.")
        return value

    @abc.abstractmethod
    def _evaluate(self, expression: str) -> Any:
        r"""Evaluate the expression text with the underlying engine."""
        raise NotImplementedError("Evaluator must implement _evaluate.")

    def _to_numeric(self, raw: Any) -> MatrixLike:
        r"""Convert the engine's result into a complex scalar or array."""
        return as_matrix(raw)


def _conj(x: Any) -> Any:
    r"""Complex conjugate of a number, expression or matrix."""
    if hasattr(x, "conjugate"):
        return x.conjugate()
    return sp.conjugate(x)


def _transpose(x: Any) -> Any:
    r"""Matrix transpose; scalars are their own transpose."""
    if isinstance(x, MatrixBase):
        return x.T
    return x


def _dagger(x: Any) -> Any:
    r"""Conjugate transpose."""
    return _transpose(_conj(x))


class SympyEvaluator(EvaluatorBase):
    r"""
    Evaluate expressions with :func:`sympy.parsing.sympy_parser.parse_expr`.

    Implicit multiplication is enabled, so ``2 i``, ``sin(pi/4) (...)`` and
    ``(...)(...)`` are products, and ``^`` is exponentiation. The imaginary
    unit is the standalone identifier ``i`` (or ``I``); because the tokenizer
    works on whole identifiers, names such as ``sin`` or ``pi`` are never
    split apart.

    Parameters
    ----------
    extra_names : Mapping[str, object] or None, optional
        Additional names (constants or callables) visible to expressions.
        They override the built-in names.
    """

    transformations = standard_transformations + (
        implicit_multiplication,
        implicit_application,
        convert_xor,
    )

    def __init__(self, extra_names: Optional[Mapping[str, object]] = None) -> None:
        self.names: Dict[str, object] = {
            "i": sp.I,
            "I": sp.I,
            "pi": sp.pi,
            "e": sp.E,
            "Matrix": sp.Matrix,
            "conj": _conj,
            "transpose": _transpose,
            "dagger": _dagger,
            "sqrt": sp.sqrt,
            "abs": sp.Abs,
        }
        if extra_names:
            self.names.update(extra_names)

    def register(self, name: str, value: object) -> None:
        r"""Expose an additional constant or function to expressions."""
        if not name or not isinstance(name, str) or not name.isidentifier():
            raise ValueError("Evaluator names must be valid identifiers.")
        self.names[name] = value

    def _evaluate(self, expression: str) -> Any:
        match = _UNSAFE_RE.search(expression)
        if match:
            raise ParseError(
                f"Unsupported token {match.group(0)!r} in expression {expression!r}."
            )
        return parse_expr(
            expression,
            local_dict=dict(self.names),
            global_dict=dict(_SYMPY_GLOBALS),
            transformations=self.transformations,
        )

    def _to_numeric(self, raw: Any) -> MatrixLike:
        if isinstance(raw, MatrixBase):
            if raw.free_symbols:
                raise ParseError(
                    "Result depends on unknown symbols "
                    f"{sorted(str(s) for s in raw.free_symbols)}."
                )
            try:
                arr = np.array(raw.evalf().tolist(), dtype=complex)
            except (TypeError, ValueError) as exc:
                raise ParseError(f"Matrix entries are not numeric: {exc}") from exc
            return as_matrix(arr)
        if isinstance(raw, sp.Basic) and not isinstance(raw, sp.Expr):
            raise ParseError(f"Result {raw} is not a number.")
        if isinstance(raw, sp.Expr):
            if raw.free_symbols:
                raise ParseError(
                    "Result depends on unknown symbols "
                    f"{sorted(str(s) for s in raw.free_symbols)}."
                )
            try:
                return complex(raw.evalf())
            except (TypeError, ValueError) as exc:
                raise ParseError(f"Result {raw} is not a finite number.") from exc
        return as_matrix(raw)


_DEFAULT: Optional[SympyEvaluator] = None


def default_evaluator() -> SympyEvaluator:
    r"""Return the shared default :class:`SympyEvaluator`."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = SympyEvaluator()
    return _DEFAULT

