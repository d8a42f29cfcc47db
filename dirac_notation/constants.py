"""
Shared glyph tables and defaults used by the notation parser and formatter.
"""

from __future__ import annotations

# Decimal places used when no precision is requested.
DEFAULT_DECIMALS = 4

# Widest basis label accepted by the parser; vectors have 2**width entries.
MAX_LABEL_QUBITS = 16

# Glyph sets for the built-in output styles. Keys match FormatSpec fields;
# center_left/center_right fall back to center when omitted.
ASCII_GLYPHS: dict[str, str] = {
    "left": "<",
    "right": ">",
    "center": "|",
    "imaginary_unit": "i",
}

UNICODE_GLYPHS: dict[str, str] = {
    "left": "〈",  # U+3008
    "right": "〉",  # U+3009
    "center": "|",
    "imaginary_unit": "ⅈ",  # U+2148
}

TEX_GLYPHS: dict[str, str] = {
    "left": r"\langle",
    "right": r"\rangle",
    "center": "|",
    "imaginary_unit": r"\imath",
}

# Markup for embedding results in a web page; bra and ket halves are wrapped
# in their own spans so they can be styled separately.
HTML_GLYPHS: dict[str, str] = {
    "left": '<span class="bra">&lt;',
    "center_left": '<span class="ket">|',
    "center_right": "|</span>",
    "right": "&gt;</span>",
    "center": "|",
    "imaginary_unit": '<span class="i">i</span>',
}

STYLE_GLYPHS: dict[str, dict[str, str]] = {
    "ascii": ASCII_GLYPHS,
    "unicode": UNICODE_GLYPHS,
    "tex": TEX_GLYPHS,
    "html": HTML_GLYPHS,
}

# Input characters folded to ASCII before parsing.
UNICODE_INPUT_MAP: dict[str, str] = {
    "⟨": "<",  # U+27E8 mathematical left angle bracket
    "〈": "<",  # U+2329 left-pointing angle bracket
    "〈": "<",  # U+3008 CJK left angle bracket
    "⟩": ">",  # U+27E9
    "〉": ">",  # U+232A
    "〉": ">",  # U+3009
    "∣": "|",  # U+2223 divides
    "│": "|",  # U+2502 box drawing vertical
    "ⅈ": "i",  # U+2148 double-struck italic i
}
