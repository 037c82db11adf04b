from __future__ import annotations

"""Assimilation rule tables (domain layer).

This module is the single source of truth for context-dependent labels:

  - INITIAL_RULES: initial consonant -> {final of the previous syllable: cell}
  - FINAL_RULES:   final consonant -> {initial of the next syllable: cell}
  - HYPHEN_RULES:  initial consonant -> predicate(preceding romanization, label)

A cell is either a fixed label or a callable taking a RuleContext. A callable
returning None keeps the consonant's default label. Any adjacency missing
from a table also resolves to the default label.

IMPORTANT:
- This is DOMAIN DATA. Every cell is a pronunciation fact; do not derive
  or "simplify" entries.
- The palatalization flag always refers to the vowel of the syllable that
  owns the initial consonant at the boundary.
"""

from dataclasses import dataclass
from typing import Callable, Final, Optional, Union

from romaja.domain.enums import AssimilationDirection, WordClass
from romaja.domain.jamo_data import FinalConsonant, InitialConsonant


@dataclass(frozen=True)
class RuleContext:
    direction: AssimilationDirection
    word_class: WordClass
    palatal: bool


Cell = Union[str, Callable[[RuleContext], Optional[str]]]

# Short aliases keep the tables readable: C = choseong, J = jongseong
C = InitialConsonant
J = FinalConsonant


# -----------------------------------------------------------------------------
# Cell builders
# -----------------------------------------------------------------------------

def _resolve(cell: Cell | None, default: str, ctx: RuleContext) -> str:
    if cell is None:
        return default
    if callable(cell):
        out = cell(ctx)
        return default if out is None else out
    return cell


def _by_direction(progressive: str, regressive: str) -> Cell:
    """Liquid/nasal tie-break."""
    def cell(ctx: RuleContext) -> str:
        if ctx.direction is AssimilationDirection.REGRESSIVE:
            return regressive
        return progressive
    return cell


def _palatal(palatal: str, plain: str) -> Cell:
    def cell(ctx: RuleContext) -> str:
        return palatal if ctx.palatal else plain
    return cell


def _compound_palatal(compound: str | None, otherwise: str | None) -> Cell:
    """Branch taken only for compounds whose next vowel palatalizes (n-insertion)."""
    def cell(ctx: RuleContext) -> str | None:
        if ctx.word_class is WordClass.COMPOUND and ctx.palatal:
            return compound
        return otherwise
    return cell


def _unless_substantive(inner: Cell) -> Cell:
    """Substantives keep the morpheme boundary, i.e. the default label."""
    def cell(ctx: RuleContext) -> str | None:
        if ctx.word_class is WordClass.SUBSTANTIVE:
            return None
        if callable(inner):
            return inner(ctx)
        return inner
    return cell


# -----------------------------------------------------------------------------
# Initial consonant rules (keyed by the previous syllable's final)
# -----------------------------------------------------------------------------

_RIEUL_CLUSTER_FINALS: Final[tuple[FinalConsonant, ...]] = (
    J.RIEUL_GIYEOK, J.RIEUL_MIEUM, J.RIEUL_BIEUP, J.RIEUL_SIOT,
    J.RIEUL_TIEUT, J.RIEUL_PIEUP, J.RIEUL_HIEUT,
)

INITIAL_RULES: Final[dict[InitialConsonant, dict[FinalConsonant, Cell]]] = {
    C.GIYEOK: {
        **dict.fromkeys(_RIEUL_CLUSTER_FINALS, "kk"),
        J.HIEUT: "k",
    },
    C.NIEUN: dict.fromkeys((J.RIEUL, J.RIEUL_HIEUT), "l"),
    C.DIGEUT: {
        J.RIEUL_TIEUT: "tt",
        J.NIEUN_HIEUT: "t",
        J.HIEUT: "t",
    },
    C.RIEUL: {
        # nasalization of the liquid after an obstruent or nasal
        **dict.fromkeys(
            (
                J.GIYEOK, J.SSANGGIYEOK, J.GIYEOK_SIOT, J.RIEUL_GIYEOK,
                J.RIEUL_BIEUP, J.RIEUL_PIEUP, J.MIEUM, J.BIEUP,
                J.BIEUP_SIOT, J.IEUNG, J.KIEUK, J.PIEUP,
            ),
            "n",
        ),
        **dict.fromkeys(
            (
                J.NIEUN, J.DIGEUT, J.NIEUN_JIEUT, J.NIEUN_HIEUT, J.SIOT,
                J.SSANGSIOT, J.JIEUT, J.CHIEUT, J.HIEUT,
            ),
            _by_direction("n", "l"),
        ),
        **dict.fromkeys(
            (J.RIEUL, J.RIEUL_MIEUM, J.RIEUL_SIOT, J.RIEUL_TIEUT, J.RIEUL_HIEUT, J.TIEUT),
            "l",
        ),
    },
    C.BIEUP: {J.RIEUL_TIEUT: "pp"},
    # Zero onset: the previous coda moves across the syllable boundary.
    C.IEUNG: {
        J.GIYEOK: _compound_palatal("n", "g"),
        J.RIEUL_GIYEOK: "g",
        J.SSANGGIYEOK: "kk",
        **dict.fromkeys((J.GIYEOK_SIOT, J.RIEUL_SIOT, J.BIEUP_SIOT, J.SIOT), "s"),
        J.IEUNG: _compound_palatal("n", None),
        **dict.fromkeys((J.NIEUN, J.NIEUN_HIEUT), "n"),
        **dict.fromkeys((J.NIEUN_JIEUT, J.JIEUT), "j"),
        J.DIGEUT: _palatal("j", "d"),
        **dict.fromkeys((J.RIEUL, J.RIEUL_HIEUT), _compound_palatal("l", "r")),
        **dict.fromkeys((J.RIEUL_MIEUM, J.MIEUM), "m"),
        **dict.fromkeys((J.RIEUL_BIEUP, J.BIEUP), "b"),
        **dict.fromkeys((J.RIEUL_TIEUT, J.TIEUT), _palatal("ch", "t")),
        **dict.fromkeys((J.RIEUL_PIEUP, J.PIEUP), "p"),
        J.SSANGSIOT: "ss",
        J.CHIEUT: "ch",
        J.KIEUK: "k",
    },
    C.JIEUT: {J.HIEUT: "ch"},
    C.TIEUT: dict.fromkeys((J.JIEUT, J.CHIEUT), _palatal("ch", "t")),
    # Aspiration fusion with a preceding stop.
    C.HIEUT: {
        J.GIYEOK: _unless_substantive(""),
        J.SSANGGIYEOK: "kk",
        J.DIGEUT: _unless_substantive(_palatal("ch", "t")),
        **dict.fromkeys(
            (J.RIEUL_TIEUT, J.SIOT, J.SSANGSIOT, J.JIEUT, J.CHIEUT, J.TIEUT),
            _palatal("ch", "t"),
        ),
        J.RIEUL_GIYEOK: "k",
        J.RIEUL_BIEUP: "p",
        J.RIEUL_SIOT: "s",
        J.RIEUL_HIEUT: "r",
        J.BIEUP: _unless_substantive("p"),
    },
}

HYPHEN_RULES: Final[dict[InitialConsonant, Callable[[str, str], bool]]] = {
    C.GIYEOK: lambda preceding, label: preceding.endswith("n"),
    C.IEUNG: lambda preceding, label: preceding.endswith("ng") and not label,
    C.TIEUT: lambda preceding, label: preceding.endswith("t"),
    C.PIEUP: lambda preceding, label: preceding.endswith("p"),
    C.HIEUT: lambda preceding, label: bool(label) and preceding.endswith(label[0]),
}


# -----------------------------------------------------------------------------
# Final consonant rules (keyed by the next syllable's initial)
# -----------------------------------------------------------------------------

_NASAL_ONSETS: Final[tuple[InitialConsonant, ...]] = (C.NIEUN, C.MIEUM, C.RIEUL)

_NIEUN_FINAL: Final[dict[InitialConsonant, Cell]] = {
    C.RIEUL: _by_direction("n", "l"),
    C.IEUNG: "",
}

_DIGEUT_FINAL: Final[dict[InitialConsonant, Cell]] = {
    **dict.fromkeys((C.NIEUN, C.MIEUM), "n"),
    **dict.fromkeys((C.SSANGDIGEUT, C.IEUNG, C.TIEUT, C.HIEUT), _unless_substantive("")),
    C.RIEUL: _by_direction("n", "l"),
}

_LABIAL_CLUSTER_STOPS: Final[tuple[InitialConsonant, ...]] = (
    C.DIGEUT, C.SSANGDIGEUT, C.BIEUP, C.SIOT, C.SSANGSIOT, C.JIEUT,
    C.SSANGJIEUT, C.CHIEUT, C.KIEUK, C.TIEUT, C.HIEUT,
)

FINAL_RULES: Final[dict[FinalConsonant, dict[InitialConsonant, Cell]]] = {
    J.GIYEOK: {
        **dict.fromkeys((C.SSANGGIYEOK, C.KIEUK), ""),
        C.IEUNG: _compound_palatal("ng", ""),
        **dict.fromkeys(_NASAL_ONSETS, "ng"),
    },
    J.SSANGGIYEOK: {
        **dict.fromkeys((C.SSANGGIYEOK, C.KIEUK, C.IEUNG, C.HIEUT), ""),
        **dict.fromkeys(_NASAL_ONSETS, "ng"),
    },
    J.GIYEOK_SIOT: {
        **dict.fromkeys((C.SSANGGIYEOK, C.KIEUK), ""),
        **dict.fromkeys(_NASAL_ONSETS, "ng"),
    },
    J.NIEUN: _NIEUN_FINAL,
    J.NIEUN_JIEUT: {C.RIEUL: _by_direction("n", "l")},
    J.NIEUN_HIEUT: _NIEUN_FINAL,
    J.DIGEUT: _DIGEUT_FINAL,
    J.RIEUL: {C.IEUNG: _compound_palatal(None, "")},
    J.RIEUL_GIYEOK: {
        **dict.fromkeys((C.GIYEOK, C.SSANGGIYEOK, C.IEUNG, C.HIEUT), "l"),
        **dict.fromkeys(_NASAL_ONSETS, "ng"),
    },
    J.RIEUL_MIEUM: dict.fromkeys((C.RIEUL, C.MIEUM, C.IEUNG), "l"),
    J.RIEUL_BIEUP: {
        **dict.fromkeys((C.NIEUN, C.RIEUL), "m"),
        **dict.fromkeys(_LABIAL_CLUSTER_STOPS, "p"),
        C.SSANGBIEUP: "",
    },
    J.RIEUL_PIEUP: {
        **dict.fromkeys((C.NIEUN, C.RIEUL), "m"),
        **dict.fromkeys(_LABIAL_CLUSTER_STOPS, "p"),
        **dict.fromkeys((C.SSANGBIEUP, C.PIEUP), ""),
    },
    J.RIEUL_HIEUT: {
        C.HIEUT: "",
        C.IEUNG: _compound_palatal(None, ""),
    },
    J.MIEUM: {C.IEUNG: ""},
    J.BIEUP: {
        **dict.fromkeys(_NASAL_ONSETS, "m"),
        **dict.fromkeys((C.SSANGBIEUP, C.IEUNG), ""),
        C.HIEUT: _unless_substantive(""),
    },
    J.BIEUP_SIOT: {
        **dict.fromkeys(_NASAL_ONSETS, "m"),
        C.SSANGBIEUP: "",
    },
    J.SIOT: _DIGEUT_FINAL,
    J.SSANGSIOT: _DIGEUT_FINAL,
    J.JIEUT: _DIGEUT_FINAL,
    J.CHIEUT: _DIGEUT_FINAL,
    J.KIEUK: {
        **dict.fromkeys((C.SSANGGIYEOK, C.IEUNG), ""),
        **dict.fromkeys(_NASAL_ONSETS, "ng"),
    },
    J.TIEUT: {
        **dict.fromkeys((C.NIEUN, C.MIEUM), "n"),
        **dict.fromkeys((C.SSANGDIGEUT, C.IEUNG, C.HIEUT), ""),
        C.RIEUL: "l",
    },
    J.PIEUP: dict.fromkeys((C.SSANGBIEUP, C.IEUNG), ""),
    J.HIEUT: {
        **dict.fromkeys(
            (
                C.GIYEOK, C.SSANGGIYEOK, C.DIGEUT, C.SSANGDIGEUT, C.IEUNG, C.JIEUT,
                C.SSANGJIEUT, C.CHIEUT, C.KIEUK, C.TIEUT, C.PIEUP, C.HIEUT,
            ),
            "",
        ),
        **dict.fromkeys((C.NIEUN, C.MIEUM), "n"),
        C.RIEUL: _by_direction("n", "l"),
    },
}


# -----------------------------------------------------------------------------
# Lookups
# -----------------------------------------------------------------------------

def initial_label(initial: InitialConsonant, previous_final: FinalConsonant, ctx: RuleContext) -> str:
    """Return the label of `initial` after a syllable ending in `previous_final`."""
    cell = INITIAL_RULES.get(initial, {}).get(previous_final)
    return _resolve(cell, initial.label, ctx)


def final_label(final: FinalConsonant, next_initial: InitialConsonant, ctx: RuleContext) -> str:
    """Return the label of `final` before a syllable starting with `next_initial`."""
    cell = FINAL_RULES.get(final, {}).get(next_initial)
    return _resolve(cell, final.label, ctx)


def needs_hyphen(initial: InitialConsonant, preceding: str, label: str) -> bool:
    """Return True if `label` would fuse unreadably with the preceding romanization."""
    rule = HYPHEN_RULES.get(initial)
    return rule is not None and rule(preceding, label)
