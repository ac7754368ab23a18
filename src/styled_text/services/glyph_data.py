"""Static code point data for styled Latin letters.

Deterministic data only. Every family is a contiguous 26-letter run in the
Mathematical Alphanumeric Symbols block (U+1D400..U+1D6A3); a few letters in
those runs are reserved because the glyph was encoded earlier in the
Letterlike Symbols block, and are listed as holes below.
"""

from __future__ import annotations

import string

from styled_text.schemas import LetterStyle, LetterType

StyleRef = tuple[LetterType, LetterStyle]

# (uppercase A, lowercase a) start of each contiguous run.
# serif-normal is plain ASCII and carries no styled glyphs.
RUN_STARTS: dict[StyleRef, tuple[int, int]] = {
    ("serif", "bold"): (0x1D400, 0x1D41A),
    ("serif", "italic"): (0x1D434, 0x1D44E),
    ("serif", "bolditalic"): (0x1D468, 0x1D482),
    ("sansserif", "normal"): (0x1D5A0, 0x1D5BA),
    ("sansserif", "bold"): (0x1D5D4, 0x1D5EE),
    ("sansserif", "italic"): (0x1D608, 0x1D622),
    ("sansserif", "bolditalic"): (0x1D63C, 0x1D656),
    ("script", "normal"): (0x1D49C, 0x1D4B6),
    ("script", "bold"): (0x1D4D0, 0x1D4EA),
    ("fraktur", "normal"): (0x1D504, 0x1D51E),
    ("fraktur", "bold"): (0x1D56C, 0x1D586),
    ("monospace", "normal"): (0x1D670, 0x1D68A),
    ("doublestruck", "bold"): (0x1D538, 0x1D552),
}

# Reserved slots in the runs above, filled from Letterlike Symbols
LETTERLIKE_HOLES: dict[StyleRef, dict[str, int]] = {
    ("serif", "italic"): {
        "h": 0x210E,  # PLANCK CONSTANT
    },
    ("script", "normal"): {
        "B": 0x212C,  # SCRIPT CAPITAL B
        "E": 0x2130,  # SCRIPT CAPITAL E
        "F": 0x2131,  # SCRIPT CAPITAL F
        "H": 0x210B,  # SCRIPT CAPITAL H
        "I": 0x2110,  # SCRIPT CAPITAL I
        "L": 0x2112,  # SCRIPT CAPITAL L
        "M": 0x2133,  # SCRIPT CAPITAL M
        "R": 0x211B,  # SCRIPT CAPITAL R
        "e": 0x212F,  # SCRIPT SMALL E
        "g": 0x210A,  # SCRIPT SMALL G
        "o": 0x2134,  # SCRIPT SMALL O
    },
    ("fraktur", "normal"): {
        "C": 0x212D,  # BLACK-LETTER CAPITAL C
        "H": 0x210C,  # BLACK-LETTER CAPITAL H
        "I": 0x2111,  # BLACK-LETTER CAPITAL I
        "R": 0x211C,  # BLACK-LETTER CAPITAL R
        "Z": 0x2128,  # BLACK-LETTER CAPITAL Z
    },
    ("doublestruck", "bold"): {
        "C": 0x2102,  # DOUBLE-STRUCK CAPITAL C
        "H": 0x210D,  # DOUBLE-STRUCK CAPITAL H
        "N": 0x2115,  # DOUBLE-STRUCK CAPITAL N
        "P": 0x2119,  # DOUBLE-STRUCK CAPITAL P
        "Q": 0x211A,  # DOUBLE-STRUCK CAPITAL Q
        "R": 0x211D,  # DOUBLE-STRUCK CAPITAL R
        "Z": 0x2124,  # DOUBLE-STRUCK CAPITAL Z
    },
}


def build_family(ref: StyleRef) -> dict[str, str]:
    """Return the letter -> glyph mapping of one family, holes applied."""
    glyphs: dict[str, str] = {}
    upper_start, lower_start = RUN_STARTS[ref]
    for offset, letter in enumerate(string.ascii_uppercase):
        glyphs[letter] = chr(upper_start + offset)
    for offset, letter in enumerate(string.ascii_lowercase):
        glyphs[letter] = chr(lower_start + offset)
    for letter, code_point in LETTERLIKE_HOLES.get(ref, {}).items():
        glyphs[letter] = chr(code_point)
    return glyphs


def family_refs() -> list[StyleRef]:
    return list(RUN_STARTS)
