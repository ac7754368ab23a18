from __future__ import annotations

import logging
import string
import unicodedata
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from styled_text.errors import AmbiguousReverseMappingError
from styled_text.services.glyph_data import build_family, family_refs
from styled_text.services.glyph_types import GlyphEntry, StyleKey, all_style_keys

logger = logging.getLogger(__name__)

ASCII_LETTERS = frozenset(string.ascii_letters)


def _validate_family(key: StyleKey, glyphs: Mapping[str, str]) -> None:
    for letter, glyph in glyphs.items():
        if letter not in ASCII_LETTERS:
            raise ValueError(f"{key}: {letter!r} is not an ASCII letter")
        if len(glyph) != 1:
            raise ValueError(f"{key}: glyph for {letter!r} must be a single code point, got {glyph!r}")
        if unicodedata.name(glyph, None) is None:
            raise ValueError(f"{key}: glyph U+{ord(glyph):04X} for {letter!r} is not an assigned code point")


def build_reverse_index(forward: Mapping[StyleKey, Mapping[str, str]]) -> dict[str, GlyphEntry]:
    """Invert the forward table, refusing any code point claimed twice."""
    reverse: dict[str, GlyphEntry] = {}
    for key, glyphs in forward.items():
        for letter, glyph in glyphs.items():
            entry = GlyphEntry(letter=letter, glyph=glyph, style_key=key)
            existing = reverse.get(glyph)
            if existing is not None:
                raise AmbiguousReverseMappingError(glyph, existing, entry)
            reverse[glyph] = entry
    return reverse


class GlyphTable:
    """Forward (letter, StyleKey) -> glyph table and its reverse index.

    Both directions are built and validated once in ``__init__`` and exposed
    through read-only views, so a table can be shared between threads.
    """

    def __init__(self, families: Mapping[StyleKey, Mapping[str, str]]):
        forward: dict[StyleKey, Mapping[str, str]] = {}
        for key, glyphs in families.items():
            _validate_family(key, glyphs)
            forward[key] = MappingProxyType(dict(glyphs))
        self._forward: Mapping[StyleKey, Mapping[str, str]] = MappingProxyType(forward)
        self._reverse: Mapping[str, GlyphEntry] = MappingProxyType(build_reverse_index(forward))

    def lookup_forward(self, letter: str, style_key: StyleKey) -> str | None:
        glyphs = self._forward.get(style_key)
        if glyphs is None:
            return None
        return glyphs.get(letter)

    def lookup_reverse(self, char: str) -> GlyphEntry | None:
        return self._reverse.get(char)

    def coverage(self, style_key: StyleKey) -> frozenset[str]:
        return frozenset(self._forward.get(style_key, {}))

    def covered_keys(self) -> list[StyleKey]:
        return [key for key in all_style_keys() if self._forward.get(key)]

    def __len__(self) -> int:
        return len(self._reverse)


def default_families() -> dict[StyleKey, dict[str, str]]:
    return {StyleKey(*ref): build_family(ref) for ref in family_refs()}


@lru_cache(maxsize=1)
def get_glyph_table() -> GlyphTable:
    table = GlyphTable(default_families())
    logger.debug("Built glyph table: %d glyphs across %d style keys", len(table), len(table.covered_keys()))
    return table
