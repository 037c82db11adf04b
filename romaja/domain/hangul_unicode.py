from __future__ import annotations

"""Hangul Unicode syllable arithmetic.

This module is *domain* logic (no I/O).

It provides:
  - The Hangul Syllables block bounds
  - `split_codepoint()` / `join_indices()` for the (initial, vowel, final) index triple

Notes:
  - Index order is the Unicode order; the inventories in `jamo_data` are
    declared in the same order so an index is also an enum ordinal.
"""

from typing import Final


# Unicode Hangul syllable constants
HANGUL_BASE: Final[int] = 0xAC00
HANGUL_LAST: Final[int] = 0xD7A3

INITIAL_COUNT: Final[int] = 19
VOWEL_COUNT: Final[int] = 21
FINAL_COUNT: Final[int] = 28

# Syllables sharing one initial consonant
_N_COUNT: Final[int] = VOWEL_COUNT * FINAL_COUNT


def is_hangul_syllable(codepoint: int) -> bool:
    """Return True if `codepoint` is a precomposed Hangul syllable."""
    return HANGUL_BASE <= codepoint <= HANGUL_LAST


def is_hangul_character(ch: str) -> bool:
    """Return True if `ch` is a single precomposed Hangul syllable."""
    return isinstance(ch, str) and len(ch) == 1 and is_hangul_syllable(ord(ch))


def split_codepoint(codepoint: int) -> tuple[int, int, int]:
    """Split a Hangul syllable codepoint into its component indices.

    Args:
        codepoint: A codepoint in the Hangul Syllables block.

    Returns:
        `(initial_index, vowel_index, final_index)`; final index 0 means no final.

    Raises:
        ValueError: if `codepoint` is outside the Hangul Syllables block.
    """
    if not is_hangul_syllable(codepoint):
        raise ValueError("Not a Hangul syllable: U+%04X" % codepoint)

    value = codepoint - HANGUL_BASE
    return value // _N_COUNT, (value % _N_COUNT) // FINAL_COUNT, value % FINAL_COUNT


def join_indices(initial_index: int, vowel_index: int, final_index: int = 0) -> int:
    """Compose a Hangul syllable codepoint from component indices.

    This uses the Unicode Hangul Syllables algorithm:
    SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    if not (
        0 <= initial_index < INITIAL_COUNT
        and 0 <= vowel_index < VOWEL_COUNT
        and 0 <= final_index < FINAL_COUNT
    ):
        raise ValueError(
            "Component index out of range: initial=%r vowel=%r final=%r"
            % (initial_index, vowel_index, final_index)
        )
    return HANGUL_BASE + (initial_index * VOWEL_COUNT + vowel_index) * FINAL_COUNT + final_index
