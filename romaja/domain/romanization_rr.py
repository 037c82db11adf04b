from __future__ import annotations

"""Contextual resolver.

Romanizes one syllable from its own components plus single-step neighbours.
A caller holding a sequence passes syllable[i - 1] and syllable[i + 1];
`romanize_sequence()` and `romanize_text()` do exactly that.
"""

from dataclasses import dataclass, field
from typing import Final, Iterable, Optional

from romaja.domain.assimilation_rules import RuleContext, final_label, initial_label, needs_hyphen
from romaja.domain.enums import AssimilationDirection, WordClass
from romaja.domain.jamo_data import FinalConsonant, InitialConsonant
from romaja.domain.syllable import Syllable


@dataclass(frozen=True)
class RRSegment:
    text: str
    role: str  # "initial" | "vowel" | "final" | "literal"


@dataclass(frozen=True)
class RRResult:
    rr: str
    hint: str
    details: list[str] = field(default_factory=list)
    segments: list[RRSegment] = field(default_factory=list)


# Last letter of the previous vowel -> first letters that would merge with it
_AMBIGUOUS_VOWEL_JOINS: Final[dict[str, frozenset[str]]] = {
    "a": frozenset("ae"),
    "e": frozenset("aeou"),
}

_ROLES: Final[tuple[str, str, str]] = ("initial", "vowel", "final")


def _is_decomposed(syllable: Optional[Syllable]) -> bool:
    return syllable is not None and syllable.is_decomposed


# -----------------------------------------------------------------------------
# Resolver
# -----------------------------------------------------------------------------

def romanize(
    current: Syllable,
    previous: Syllable | None = None,
    following: Syllable | None = None,
    direction: AssimilationDirection = AssimilationDirection.PROGRESSIVE,
    word_class: WordClass = WordClass.GENERIC,
) -> str:
    """Romanize `current` given its neighbours.

    Args:
        current: The syllable to romanize.
        previous: The syllable before it, or None.
        following: The syllable after it, or None.
        direction: Tie-break for ambiguous nasal/liquid clusters.
        word_class: Word-class hint; PERSONAL_NAME ignores both neighbours.

    Returns:
        The Roman string, possibly containing "-" or "_" separators.
        Non-Hangul characters are returned unchanged.
    """
    if not current.is_decomposed:
        return current.character
    return "".join(romanize_parts(current, previous, following, direction, word_class))


def romanize_parts(
    current: Syllable,
    previous: Syllable | None = None,
    following: Syllable | None = None,
    direction: AssimilationDirection = AssimilationDirection.PROGRESSIVE,
    word_class: WordClass = WordClass.GENERIC,
) -> tuple[str, str, str]:
    """Return the (initial, vowel, final) substrings of `romanize()`."""
    if not current.is_decomposed:
        return "", current.character, ""

    if word_class is WordClass.PERSONAL_NAME:
        previous = None
        following = None

    return (
        resolve_initial(previous, current, direction, word_class),
        resolve_vowel(previous, current),
        resolve_final(current, following, direction, word_class),
    )


def isolated_romanization(
    previous: Syllable,
    current: Syllable,
    direction: AssimilationDirection,
    word_class: WordClass,
) -> str:
    """Romanize `previous` with no predecessor of its own, followed by `current`.

    Used only for hyphen decisions. Because `previous` gets no predecessor,
    its own initial resolves to the default label without recursing.
    """
    return romanize(previous, None, current, direction, word_class)


def resolve_initial(
    previous: Syllable | None,
    current: Syllable,
    direction: AssimilationDirection,
    word_class: WordClass,
) -> str:
    initial = current.initial
    if not _is_decomposed(previous):
        return initial.label

    ctx = RuleContext(direction, word_class, current.vowel.induces_palatalization)
    label = initial_label(initial, previous.final, ctx)
    preceding = isolated_romanization(previous, current, direction, word_class)
    if needs_hyphen(initial, preceding, label):
        return "-" + label
    return label


def resolve_vowel(previous: Syllable | None, current: Syllable) -> str:
    label = current.vowel.label
    if (
        _is_decomposed(previous)
        and previous.final is FinalConsonant.NONE
        and current.initial is InitialConsonant.IEUNG
        and label[:1] in _AMBIGUOUS_VOWEL_JOINS.get(previous.vowel.label[-1:], frozenset())
    ):
        return "_" + label
    return label


def resolve_final(
    current: Syllable,
    following: Syllable | None,
    direction: AssimilationDirection,
    word_class: WordClass,
) -> str:
    final = current.final
    if not _is_decomposed(following):
        return final.label

    ctx = RuleContext(direction, word_class, following.vowel.induces_palatalization)
    return final_label(final, following.initial, ctx)


# -----------------------------------------------------------------------------
# Sequence / text drivers
# -----------------------------------------------------------------------------

def _iter_parts(
    syllables: list[Syllable],
    direction: AssimilationDirection,
    word_class: WordClass,
) -> Iterable[tuple[Syllable, tuple[str, str, str]]]:
    last = len(syllables) - 1
    for i, current in enumerate(syllables):
        previous = syllables[i - 1] if i > 0 else None
        following = syllables[i + 1] if i < last else None
        yield current, romanize_parts(current, previous, following, direction, word_class)


def romanize_sequence(
    syllables: Iterable[Syllable],
    direction: AssimilationDirection = AssimilationDirection.PROGRESSIVE,
    word_class: WordClass = WordClass.GENERIC,
) -> list[str]:
    """Romanize each syllable of a sequence against its immediate neighbours."""
    items = list(syllables)
    return ["".join(parts) for _, parts in _iter_parts(items, direction, word_class)]


def romanize_text(
    text: str,
    *,
    direction: AssimilationDirection = AssimilationDirection.PROGRESSIVE,
    word_class: WordClass = WordClass.GENERIC,
) -> RRResult:
    if not text:
        return RRResult(rr="", hint="", details=[], segments=[])

    syllables = [Syllable.from_character(ch) for ch in text]

    rr_parts: list[str] = []
    details: list[str] = []
    segments: list[RRSegment] = []
    for syllable, parts in _iter_parts(syllables, direction, word_class):
        rr = "".join(parts)
        rr_parts.append(rr)
        if not syllable.is_decomposed:
            segments.append(RRSegment(text=rr, role="literal"))
            continue

        for text_part, role in zip(parts, _ROLES):
            if text_part:
                segments.append(RRSegment(text=text_part, role=role))

        isolated = romanize(syllable, direction=direction, word_class=word_class)
        if rr != isolated:
            details.append("{}: {} (isolated: {})".format(syllable.character, rr, isolated))

    rr = "".join(rr_parts)
    hint = "; ".join(details) if details else rr
    return RRResult(rr=rr, hint=hint, details=details, segments=segments)
