# flake8: noqa
"""
Build states and operators with the chainable `Dirac` API.

What this shows:
- Inner and outer products from raw arrays.
- Automatic zero padding when values over different qubit counts meet.
- Projectors, norms and rendering in Unicode/TeX.
"""

from __future__ import annotations

from dirac_notation import Dirac


def main() -> None:
    print("<1|1> =", Dirac().bra([[0, 1]]).ket([[0], [1]]))
    print("|1><1| =", Dirac().project([[0], [1]]))

    ket2 = Dirac().ket_from_array([0, 1])
    ket3 = Dirac().ket_from_array([0, 0, 1])
    print("|1> + |2> =", Dirac(ket2).plus(ket3))

    state = Dirac("|0> + i|1>")
    print("norm:", state.abs())
    print("normalized:", state.normalize())
    print("bra:", state.copy().dagger().to_unicode())
    print("TeX:", state.to_tex())


if __name__ == "__main__":
    main()
