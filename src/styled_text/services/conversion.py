from __future__ import annotations

import logging
import random

from styled_text.schemas import ConversionRequest, ConversionResult
from styled_text.services.glyph_table import ASCII_LETTERS, GlyphTable, get_glyph_table
from styled_text.services.glyph_types import StyleKey
from styled_text.services.selection import pick_random_style

logger = logging.getLogger(__name__)


def to_styled(text: str, style_key: StyleKey, table: GlyphTable | None = None) -> str:
    """Replace every ASCII letter that has a glyph under ``style_key``.

    Anything else, including letters the family does not cover, is copied as is,
    so the result always has the same number of code points as ``text``.
    """
    if table is None:
        table = get_glyph_table()
    result: list[str] = []
    for ch in text:
        glyph = table.lookup_forward(ch, style_key) if ch in ASCII_LETTERS else None
        result.append(glyph or ch)
    return "".join(result)


def to_ascii(text: str, table: GlyphTable | None = None) -> str:
    """Replace every recognised styled glyph with its ASCII letter."""
    if table is None:
        table = get_glyph_table()
    result: list[str] = []
    for ch in text:
        entry = table.lookup_reverse(ch)
        result.append(entry.letter if entry is not None else ch)
    return "".join(result)


def detect_style_keys(text: str, table: GlyphTable | None = None) -> list[StyleKey]:
    """Return the StyleKeys of the styled glyphs in ``text``, in order of first appearance."""
    if table is None:
        table = get_glyph_table()
    seen: dict[StyleKey, None] = {}
    for ch in text:
        entry = table.lookup_reverse(ch)
        if entry is not None:
            seen.setdefault(entry.style_key, None)
    return list(seen)


def resolve_style_key(request: ConversionRequest, rng: random.Random | None = None) -> StyleKey:
    if request.randomize:
        return pick_random_style(request.exclude_types, request.exclude_styles, rng=rng)
    return StyleKey(request.letter_type, request.letter_style)


def convert(
    request: ConversionRequest,
    rng: random.Random | None = None,
    table: GlyphTable | None = None,
) -> ConversionResult:
    if request.direction == "ascii":
        return ConversionResult(text=to_ascii(request.text, table), direction="ascii")

    style_key = resolve_style_key(request, rng)
    logger.debug("Converting %d characters with %s", len(request.text), style_key)
    return ConversionResult(
        text=to_styled(request.text, style_key, table),
        direction="styled",
        style_key=str(style_key),
    )
