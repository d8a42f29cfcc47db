# flake8: noqa
"""
Extend the expression evaluator with user-defined names.

What this shows:
- Registering constants and functions on a `SympyEvaluator`.
- Passing the evaluator to `Dirac` and `evaluate_notation`.
- Tracing the parser's rewrites through the standard `logging` module.
"""

from __future__ import annotations

import logging

import sympy as sp

from dirac_notation import Dirac, SympyEvaluator, evaluate_notation


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    ev = SympyEvaluator(extra_names={"r2": 1 / sp.sqrt(2)})
    ev.register("phase", lambda theta: sp.exp(sp.I * theta))

    print(Dirac("r2 |0> + r2 phase(pi/2) |1>", evaluator=ev))
    print(evaluate_notation("r2 (|00> + |11>)", evaluator=ev).output)


if __name__ == "__main__":
    main()
