# tests/conftest.py
from __future__ import annotations

from typing import Callable

import pytest

from romaja.domain.enums import AssimilationDirection, WordClass
from romaja.domain.romanization_rr import romanize_text


@pytest.fixture
def rr() -> Callable[..., str]:
    """Romanize a word and return only the Roman string."""

    def _rr(
        text: str,
        word_class: WordClass = WordClass.GENERIC,
        direction: AssimilationDirection = AssimilationDirection.PROGRESSIVE,
    ) -> str:
        return romanize_text(text, direction=direction, word_class=word_class).rr

    return _rr
