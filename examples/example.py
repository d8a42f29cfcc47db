# flake8: noqa
"""
Evaluate Dirac-notation text the way a calculator front end would.

What this shows:
- One call per user action via `evaluate_notation`.
- The optional normalization checkbox (kets, bras and scalars only).
- Feeding a result back in through `reuse_input`.
"""

from __future__ import annotations

from dirac_notation import evaluate_notation


def main() -> None:
    for text in [
        "sin(pi/4) |0> + cos(pi/4) |1>",
        "<10| + <1|",
        "(|0>+|1>)(<0|+<1|)",
        "|0> + <1|",
    ]:
        result = evaluate_notation(text)
        print(f"{text!r:40} -> {result.output if result.ok else 'error: ' + result.error}")

    result = evaluate_notation("|0> + i|1>", normalize=True)
    print("normalized:", result.output)
    print("reuse as:", result.reuse_input)


if __name__ == "__main__":
    main()
