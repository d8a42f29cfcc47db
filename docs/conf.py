"""
Sphinx configuration for the dirac_notation project.

This minimal config enables autodoc and sets up the import path so the package
can be documented without installation.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime

# Add project root to sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(__file__, "..", ".."))
sys.path.insert(0, PROJECT_ROOT)

project = "dirac_notation"
author = "dirac_notation developers"
copyright = f"{datetime.now().year}, {author}"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.autosummary",
    "sphinx.ext.viewcode",
    "sphinx.ext.doctest",
]

autosummary_generate = True
autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "private-members": False,
    "show-inheritance": True,
}

templates_path = ["_templates"]
exclude_patterns: list[str] = []

try:
    import furo  # type: ignore  # noqa: F401

    html_theme = "furo"
except ImportError:
    html_theme = "alabaster"

html_static_path = ["_static"]
