from __future__ import annotations

import string

import pytest

from styled_text.errors import AmbiguousReverseMappingError
from styled_text.services.glyph_data import LETTERLIKE_HOLES, RUN_STARTS, build_family
from styled_text.services.glyph_table import GlyphTable, build_reverse_index
from styled_text.services.glyph_types import GlyphEntry, StyleKey, all_style_keys


def test_every_family_is_injective(table):
    for key in all_style_keys():
        glyphs = [table.lookup_forward(letter, key) for letter in sorted(table.coverage(key))]
        assert len(glyphs) == len(set(glyphs)), key


def test_reverse_index_covers_every_forward_glyph(table):
    total = 0
    for key in all_style_keys():
        for letter in table.coverage(key):
            glyph = table.lookup_forward(letter, key)
            entry = table.lookup_reverse(glyph)
            assert entry == GlyphEntry(letter=letter, glyph=glyph, style_key=key)
            total += 1
    assert total == len(table)


def test_plain_ascii_and_punctuation_are_not_in_reverse_index(table):
    for ch in string.ascii_letters + string.digits + string.punctuation + " \t\n":
        assert table.lookup_reverse(ch) is None


@pytest.mark.parametrize(
    ("key", "letter", "expected"),
    [
        (StyleKey("serif", "bold"), "A", "\U0001D400"),
        (StyleKey("serif", "italic"), "h", "ℎ"),
        (StyleKey("serif", "italic"), "g", "\U0001D454"),
        (StyleKey("sansserif", "bolditalic"), "z", "\U0001D66F"),
        (StyleKey("script", "normal"), "B", "ℬ"),
        (StyleKey("script", "normal"), "I", "ℐ"),
        (StyleKey("script", "normal"), "J", "\U0001D4A5"),
        (StyleKey("script", "normal"), "o", "ℴ"),
        (StyleKey("script", "bold"), "a", "\U0001D4EA"),
        (StyleKey("fraktur", "normal"), "C", "ℭ"),
        (StyleKey("fraktur", "normal"), "Z", "ℨ"),
        (StyleKey("fraktur", "bold"), "A", "\U0001D56C"),
        (StyleKey("monospace", "normal"), "a", "\U0001D68A"),
        (StyleKey("doublestruck", "bold"), "R", "ℝ"),
        (StyleKey("doublestruck", "bold"), "A", "\U0001D538"),
        (StyleKey("doublestruck", "bold"), "b", "\U0001D553"),
    ],
)
def test_lookup_forward_known_code_points(table, key, letter, expected):
    assert table.lookup_forward(letter, key) == expected


@pytest.mark.parametrize(
    "key",
    [
        StyleKey("serif", "normal"),
        StyleKey("script", "italic"),
        StyleKey("script", "bolditalic"),
        StyleKey("fraktur", "italic"),
        StyleKey("fraktur", "bolditalic"),
        StyleKey("monospace", "bold"),
        StyleKey("monospace", "italic"),
        StyleKey("monospace", "bolditalic"),
        StyleKey("doublestruck", "normal"),
        StyleKey("doublestruck", "italic"),
        StyleKey("doublestruck", "bolditalic"),
    ],
)
def test_uncovered_families_have_no_glyphs(table, key):
    assert table.coverage(key) == frozenset()
    assert table.lookup_forward("a", key) is None
    assert key not in table.covered_keys()


def test_letterlike_math_symbols_are_not_letters(table):
    for ch in "ⅅⅆⅇⅈⅉ":
        assert table.lookup_reverse(ch) is None


def test_lookup_forward_ignores_non_letters(table):
    key = StyleKey("sansserif", "bold")
    for ch in "1!, é":
        assert table.lookup_forward(ch, key) is None


def test_holes_replace_reserved_slots():
    for ref, holes in LETTERLIKE_HOLES.items():
        family = build_family(ref)
        upper_start, lower_start = RUN_STARTS[ref]
        for letter, code_point in holes.items():
            start = upper_start if letter.isupper() else lower_start
            reserved = chr(start + string.ascii_letters.index(letter.lower()))
            assert family[letter] == chr(code_point)
            assert reserved not in family.values()


def test_build_reverse_index_rejects_shared_glyph():
    forward = {
        StyleKey("serif", "bold"): {"a": "\U0001D41A"},
        StyleKey("sansserif", "bold"): {"b": "\U0001D41A"},
    }
    with pytest.raises(AmbiguousReverseMappingError, match="U\\+1D41A") as excinfo:
        build_reverse_index(forward)
    assert excinfo.value.code == "ambiguous_reverse_mapping"
    assert {e.letter for e in excinfo.value.entries} == {"a", "b"}


def test_table_rejects_collision_inside_one_family():
    with pytest.raises(AmbiguousReverseMappingError):
        GlyphTable({StyleKey("monospace", "normal"): {"a": "\U0001D68A", "b": "\U0001D68A"}})


def test_table_rejects_unassigned_code_point():
    # U+1D455 is the reserved italic h slot
    with pytest.raises(ValueError, match="not an assigned code point"):
        GlyphTable({StyleKey("serif", "italic"): {"h": "\U0001D455"}})


def test_table_rejects_non_letter_keys():
    with pytest.raises(ValueError, match="not an ASCII letter"):
        GlyphTable({StyleKey("serif", "bold"): {"1": "\U0001D7CF"}})


def test_style_key_parse_and_str():
    key = StyleKey.parse("SansSerif-BoldItalic")
    assert key == StyleKey("sansserif", "bolditalic")
    assert str(key) == "sansserif-bolditalic"
    with pytest.raises(ValueError, match="Unknown letter type"):
        StyleKey.parse("gothic-bold")
    with pytest.raises(ValueError, match="Expected"):
        StyleKey.parse("monospace")
    with pytest.raises(ValueError, match="Unknown letter style"):
        StyleKey("serif", "light")  # type: ignore[arg-type]


def test_all_style_keys_is_full_matrix():
    keys = all_style_keys()
    assert len(keys) == 24
    assert len(set(keys)) == 24
