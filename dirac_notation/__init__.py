r"""
dirac_notation package: Dirac bra-ket notation to complex arrays and back.

Primary user-facing symbols are re-exported here for convenience.
"""

from .dirac import Dirac  # noqa: F401
from .dirac_api import (  # noqa: F401
    NotationResult,
    best_effort_normalize,
    evaluate_notation,
    format_notation,
    reparse,
)
from .errors import (  # noqa: F401
    DiracError,
    FormatConfigError,
    InvalidScalarError,
    ParseError,
    ShapeMismatchError,
    UnimplementedError,
    enable_warnings,
    warn_once,
)
from .evaluator import EvaluatorBase, SympyEvaluator, default_evaluator  # noqa: F401
from .format_config import FormatSpec, make_format, resolve_format  # noqa: F401
from .notation import format_value, parse_notation  # noqa: F401
from .resize import extend_to  # noqa: F401
from .shape import classify, qubit_count  # noqa: F401

__all__ = [
    "Dirac",
    "NotationResult",
    "best_effort_normalize",
    "evaluate_notation",
    "format_notation",
    "reparse",
    "DiracError",
    "FormatConfigError",
    "InvalidScalarError",
    "ParseError",
    "ShapeMismatchError",
    "UnimplementedError",
    "enable_warnings",
    "warn_once",
    "EvaluatorBase",
    "SympyEvaluator",
    "default_evaluator",
    "FormatSpec",
    "make_format",
    "resolve_format",
    "format_value",
    "parse_notation",
    "extend_to",
    "classify",
    "qubit_count",
]
