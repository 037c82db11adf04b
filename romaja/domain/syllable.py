from __future__ import annotations

"""Syllable value type (domain layer).

A Syllable is either a decomposed Hangul syllable (initial, vowel and final
all present) or an opaque character that romanizes to itself (all three
absent). Equality, hashing and ordering use the codepoint only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, TypeVar

from romaja.domain.enums import AssimilationDirection, WordClass
from romaja.domain.errors import InvalidComponent
from romaja.domain.hangul_unicode import is_hangul_syllable, join_indices, split_codepoint
from romaja.domain.jamo_data import FinalConsonant, InitialConsonant, Vowel

_E = TypeVar("_E", bound=Enum)


def _coerce(enum_cls: type[_E], value: Any, role: str) -> _E:
    """Accept an inventory member or its compatibility jamo string."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip())
        except ValueError as e:
            raise InvalidComponent("Unknown %s jamo: %r" % (role, value)) from e
    raise InvalidComponent("Invalid %s component: %r" % (role, value))


@dataclass(frozen=True, order=True)
class Syllable:
    codepoint: int
    initial: Optional[InitialConsonant] = field(default=None, compare=False)
    vowel: Optional[Vowel] = field(default=None, compare=False)
    final: Optional[FinalConsonant] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        parts = (self.initial, self.vowel, self.final)
        present = sum(p is not None for p in parts)
        if present == 0:
            return
        if present != 3:
            raise InvalidComponent(
                "Components must be all present or all absent: initial=%r vowel=%r final=%r" % parts
            )
        expected = join_indices(self.initial.index, self.vowel.index, self.final.index)
        if expected != self.codepoint:
            raise InvalidComponent(
                "Components do not match codepoint U+%04X (expected U+%04X)" % (self.codepoint, expected)
            )

    # --- Construction ---

    @classmethod
    def from_codepoint(cls, codepoint: int) -> Syllable:
        """Decode `codepoint`; anything outside the Hangul block passes through."""
        if not is_hangul_syllable(codepoint):
            return cls(codepoint)
        li, vi, ti = split_codepoint(codepoint)
        return cls(
            codepoint,
            InitialConsonant.from_index(li),
            Vowel.from_index(vi),
            FinalConsonant.from_index(ti),
        )

    @classmethod
    def from_character(cls, ch: str) -> Syllable:
        """Decode a single character; non-Hangul characters pass through.

        Never fails for a one-character string.

        Raises:
            ValueError: if `ch` is not a string of exactly one character.
        """
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError("Expected a single character, got %r" % (ch,))
        return cls.from_codepoint(ord(ch))

    @classmethod
    def from_components(cls, initial: Any, vowel: Any, final: Any) -> Syllable:
        """Compose a syllable from its three components.

        Args:
            initial: InitialConsonant or its jamo (e.g., "ㄱ")
            vowel: Vowel or its jamo (e.g., "ㅏ")
            final: FinalConsonant or its jamo; FinalConsonant.NONE / "" for no final

        Raises:
            InvalidComponent: if any component is missing or unknown.
        """
        if initial is None or vowel is None or final is None:
            raise InvalidComponent(
                "All components are required: initial=%r vowel=%r final=%r" % (initial, vowel, final)
            )
        ini = _coerce(InitialConsonant, initial, "initial")
        vow = _coerce(Vowel, vowel, "vowel")
        fin = _coerce(FinalConsonant, final, "final")
        return cls(join_indices(ini.index, vow.index, fin.index), ini, vow, fin)

    # --- Accessors ---

    @property
    def character(self) -> str:
        return chr(self.codepoint)

    @property
    def is_decomposed(self) -> bool:
        return self.initial is not None and self.vowel is not None and self.final is not None

    def __str__(self) -> str:
        return self.character

    # --- Romanization ---

    def romanize(
        self,
        previous: Syllable | None = None,
        following: Syllable | None = None,
        direction: AssimilationDirection = AssimilationDirection.PROGRESSIVE,
        word_class: WordClass = WordClass.GENERIC,
    ) -> str:
        """Romanize this syllable between its neighbours (None = no neighbour)."""
        from romaja.domain.romanization_rr import romanize

        return romanize(self, previous, following, direction, word_class)
