from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


LetterType = Literal["serif", "sansserif", "script", "fraktur", "monospace", "doublestruck"]
LetterStyle = Literal["normal", "bold", "italic", "bolditalic"]
Direction = Literal["styled", "ascii"]

LETTER_TYPES: tuple[LetterType, ...] = ("serif", "sansserif", "script", "fraktur", "monospace", "doublestruck")
LETTER_STYLES: tuple[LetterStyle, ...] = ("normal", "bold", "italic", "bolditalic")


class ConversionRequest(BaseModel):
    """Resolved configuration for one conversion run."""

    model_config = ConfigDict(frozen=True)

    text: str
    direction: Direction = "styled"
    letter_type: LetterType = "monospace"
    letter_style: LetterStyle = "normal"
    randomize: bool = False
    exclude_types: frozenset[LetterType] = Field(default_factory=frozenset)
    exclude_styles: frozenset[LetterStyle] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def _check_selection_policy(self) -> ConversionRequest:
        if (self.exclude_types or self.exclude_styles) and not self.randomize:
            raise ValueError("exclude_types/exclude_styles require randomize=True")
        explicit_style = {"letter_type", "letter_style"} & self.model_fields_set
        if self.direction == "ascii" and (self.randomize or explicit_style):
            raise ValueError("direction='ascii' accepts no letter_type, letter_style or randomize")
        if self.randomize and explicit_style:
            raise ValueError(f"randomize cannot be combined with an explicit {'/'.join(sorted(explicit_style))}")
        return self


class ConversionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    direction: Direction
    style_key: str | None = None
