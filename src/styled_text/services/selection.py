from __future__ import annotations

import logging
import random
from typing import Iterable, Sequence, TypeVar

from styled_text.errors import EmptyCandidateSetError
from styled_text.schemas import LETTER_STYLES, LETTER_TYPES, LetterStyle, LetterType
from styled_text.services.glyph_types import StyleKey

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=str)


def _candidates(universe: Sequence[T], excluded: Iterable[str], label: str) -> list[T]:
    excluded_set = {str(v).strip().lower() for v in excluded}
    unknown = sorted(excluded_set.difference(universe))
    if unknown:
        raise ValueError(f"Unknown {label}s: {unknown}. Known {label}s: {list(universe)}")
    return [value for value in universe if value not in excluded_set]


def candidate_types(exclude_types: Iterable[str] = ()) -> list[LetterType]:
    return _candidates(LETTER_TYPES, exclude_types, "letter type")


def candidate_styles(exclude_styles: Iterable[str] = ()) -> list[LetterStyle]:
    return _candidates(LETTER_STYLES, exclude_styles, "letter style")


def build_selection_rng(seed: int | None = None) -> random.Random:
    """Return a generator owned by a single invocation."""
    if seed is None:
        return random.Random()
    return random.Random(seed)


def pick_random_style(
    exclude_types: Iterable[str] = (),
    exclude_styles: Iterable[str] = (),
    rng: random.Random | None = None,
) -> StyleKey:
    """Draw one StyleKey for a whole input string.

    Type and style are drawn independently and uniformly from what is left
    after removing the exclusions.
    """
    exclude_types = list(exclude_types)
    exclude_styles = list(exclude_styles)
    types = candidate_types(exclude_types)
    if not types:
        raise EmptyCandidateSetError("letter type", exclude_types)
    styles = candidate_styles(exclude_styles)
    if not styles:
        raise EmptyCandidateSetError("letter style", exclude_styles)

    rng = rng or build_selection_rng()
    key = StyleKey(rng.choice(types), rng.choice(styles))
    logger.debug("Picked %s from %d types x %d styles", key, len(types), len(styles))
    return key
