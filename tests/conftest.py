from __future__ import annotations

import os
import random

import pytest

from styled_text.config import get_settings
from styled_text.services.glyph_table import GlyphTable, get_glyph_table


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    for name in list(os.environ):
        if name.startswith("STYLED_TEXT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def table() -> GlyphTable:
    return get_glyph_table()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
