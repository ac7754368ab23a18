from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from styled_text.services.glyph_types import GlyphEntry


@dataclass
class StyledTextError(Exception):
    detail: str
    code: str | None = None

    def __str__(self) -> str:
        return self.detail


class EmptyCandidateSetError(StyledTextError):
    def __init__(self, dimension: str, excluded: Iterable[str]):
        self.dimension = dimension
        self.excluded = sorted(excluded)
        super().__init__(
            detail=f"Every {dimension} is excluded ({', '.join(self.excluded)}); nothing left to pick from",
            code="empty_candidate_set",
        )


class AmbiguousReverseMappingError(StyledTextError):
    def __init__(self, glyph: str, first: GlyphEntry, second: GlyphEntry):
        self.glyph = glyph
        self.entries = (first, second)
        super().__init__(
            detail=(
                f"Glyph U+{ord(glyph):04X} is claimed by both "
                f"{first.letter!r} ({first.style_key}) and {second.letter!r} ({second.style_key})"
            ),
            code="ambiguous_reverse_mapping",
        )
