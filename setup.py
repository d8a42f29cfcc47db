from setuptools import find_packages, setup

setup(
    name="dirac-notation",
    version="0.1.0",
    description="Dirac bra-ket notation to complex arrays and back",
    packages=find_packages(exclude=["tests", "examples", "docs"]),
    install_requires=[
        "sympy",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx"],
    },
    python_requires=">=3.9",
)
