from __future__ import annotations

from dataclasses import dataclass

from styled_text.schemas import LETTER_STYLES, LETTER_TYPES, LetterStyle, LetterType


@dataclass(frozen=True)
class StyleKey:
    letter_type: LetterType
    letter_style: LetterStyle

    def __post_init__(self) -> None:
        if self.letter_type not in LETTER_TYPES:
            raise ValueError(f"Unknown letter type: {self.letter_type!r}. Known types: {', '.join(LETTER_TYPES)}")
        if self.letter_style not in LETTER_STYLES:
            raise ValueError(f"Unknown letter style: {self.letter_style!r}. Known styles: {', '.join(LETTER_STYLES)}")

    def __str__(self) -> str:
        return f"{self.letter_type}-{self.letter_style}"

    @classmethod
    def parse(cls, value: str) -> StyleKey:
        """Parse the ``"<type>-<style>"`` form produced by ``str()``."""
        letter_type, sep, letter_style = value.strip().lower().partition("-")
        if not sep:
            raise ValueError(f"Expected '<type>-<style>', got {value!r}")
        return cls(letter_type, letter_style)  # type: ignore[arg-type]


def all_style_keys() -> list[StyleKey]:
    return [StyleKey(t, s) for t in LETTER_TYPES for s in LETTER_STYLES]


@dataclass(frozen=True)
class GlyphEntry:
    letter: str
    glyph: str
    style_key: StyleKey
