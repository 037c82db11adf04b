from __future__ import annotations

"""Phoneme inventories (domain layer).

Three closed catalogs, declared in Unicode order so that a member's
position is also its index in the Hangul syllable formula:

  - InitialConsonant (19, choseong)
  - Vowel (21, jungseong)
  - FinalConsonant (28, jongseong; index 0 is NONE)

Each member carries its compatibility jamo as the enum value and a
default Roman label. Context-dependent labels live in
`assimilation_rules`.
"""

from enum import Enum
from typing import Final


class InitialConsonant(Enum):
    GIYEOK = "ㄱ"
    SSANGGIYEOK = "ㄲ"
    NIEUN = "ㄴ"
    DIGEUT = "ㄷ"
    SSANGDIGEUT = "ㄸ"
    RIEUL = "ㄹ"
    MIEUM = "ㅁ"
    BIEUP = "ㅂ"
    SSANGBIEUP = "ㅃ"
    SIOT = "ㅅ"
    SSANGSIOT = "ㅆ"
    IEUNG = "ㅇ"
    JIEUT = "ㅈ"
    SSANGJIEUT = "ㅉ"
    CHIEUT = "ㅊ"
    KIEUK = "ㅋ"
    TIEUT = "ㅌ"
    PIEUP = "ㅍ"
    HIEUT = "ㅎ"

    @property
    def jamo(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        return _INITIAL_INDEX[self]

    @property
    def label(self) -> str:
        """Default Roman label (no neighbouring context)."""
        return _INITIAL_RR[self]

    @classmethod
    def from_index(cls, index: int) -> InitialConsonant:
        return _INITIALS[index]


class Vowel(Enum):
    A = "ㅏ"
    AE = "ㅐ"
    YA = "ㅑ"
    YAE = "ㅒ"
    EO = "ㅓ"
    E = "ㅔ"
    YEO = "ㅕ"
    YE = "ㅖ"
    O = "ㅗ"
    WA = "ㅘ"
    WAE = "ㅙ"
    OE = "ㅚ"
    YO = "ㅛ"
    U = "ㅜ"
    WO = "ㅝ"
    WE = "ㅞ"
    WI = "ㅟ"
    YU = "ㅠ"
    EU = "ㅡ"
    UI = "ㅢ"
    I = "ㅣ"

    @property
    def jamo(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        return _VOWEL_INDEX[self]

    @property
    def label(self) -> str:
        return _VOWEL_RR[self]

    @property
    def induces_palatalization(self) -> bool:
        """True for i and the y-glide vowels."""
        return self in _PALATALIZING_VOWELS

    @classmethod
    def from_index(cls, index: int) -> Vowel:
        return _VOWELS[index]


class FinalConsonant(Enum):
    NONE = ""
    GIYEOK = "ㄱ"
    SSANGGIYEOK = "ㄲ"
    GIYEOK_SIOT = "ㄳ"
    NIEUN = "ㄴ"
    NIEUN_JIEUT = "ㄵ"
    NIEUN_HIEUT = "ㄶ"
    DIGEUT = "ㄷ"
    RIEUL = "ㄹ"
    RIEUL_GIYEOK = "ㄺ"
    RIEUL_MIEUM = "ㄻ"
    RIEUL_BIEUP = "ㄼ"
    RIEUL_SIOT = "ㄽ"
    RIEUL_TIEUT = "ㄾ"
    RIEUL_PIEUP = "ㄿ"
    RIEUL_HIEUT = "ㅀ"
    MIEUM = "ㅁ"
    BIEUP = "ㅂ"
    BIEUP_SIOT = "ㅄ"
    SIOT = "ㅅ"
    SSANGSIOT = "ㅆ"
    IEUNG = "ㅇ"
    JIEUT = "ㅈ"
    CHIEUT = "ㅊ"
    KIEUK = "ㅋ"
    TIEUT = "ㅌ"
    PIEUP = "ㅍ"
    HIEUT = "ㅎ"

    @property
    def jamo(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        return _FINAL_INDEX[self]

    @property
    def label(self) -> str:
        return _FINAL_RR[self]

    @classmethod
    def from_index(cls, index: int) -> FinalConsonant:
        return _FINALS[index]


# -----------------------------------------------------------------------------
# Ordinals
# -----------------------------------------------------------------------------

_INITIALS: Final[tuple[InitialConsonant, ...]] = tuple(InitialConsonant)
_VOWELS: Final[tuple[Vowel, ...]] = tuple(Vowel)
_FINALS: Final[tuple[FinalConsonant, ...]] = tuple(FinalConsonant)

_INITIAL_INDEX: Final[dict[InitialConsonant, int]] = {m: i for i, m in enumerate(_INITIALS)}
_VOWEL_INDEX: Final[dict[Vowel, int]] = {m: i for i, m in enumerate(_VOWELS)}
_FINAL_INDEX: Final[dict[FinalConsonant, int]] = {m: i for i, m in enumerate(_FINALS)}


# -----------------------------------------------------------------------------
# Default Roman labels
# -----------------------------------------------------------------------------

_INITIAL_RR: Final[dict[InitialConsonant, str]] = {
    InitialConsonant.GIYEOK: "g",
    InitialConsonant.SSANGGIYEOK: "kk",
    InitialConsonant.NIEUN: "n",
    InitialConsonant.DIGEUT: "d",
    InitialConsonant.SSANGDIGEUT: "tt",
    InitialConsonant.RIEUL: "r",
    InitialConsonant.MIEUM: "m",
    InitialConsonant.BIEUP: "b",
    InitialConsonant.SSANGBIEUP: "pp",
    InitialConsonant.SIOT: "s",
    InitialConsonant.SSANGSIOT: "ss",
    InitialConsonant.IEUNG: "",
    InitialConsonant.JIEUT: "j",
    InitialConsonant.SSANGJIEUT: "jj",
    InitialConsonant.CHIEUT: "ch",
    InitialConsonant.KIEUK: "k",
    InitialConsonant.TIEUT: "t",
    InitialConsonant.PIEUP: "p",
    InitialConsonant.HIEUT: "h",
}

_VOWEL_RR: Final[dict[Vowel, str]] = {
    Vowel.A: "a",
    Vowel.AE: "ae",
    Vowel.YA: "ya",
    Vowel.YAE: "yae",
    Vowel.EO: "eo",
    Vowel.E: "e",
    Vowel.YEO: "yeo",
    Vowel.YE: "ye",
    Vowel.O: "o",
    Vowel.WA: "wa",
    Vowel.WAE: "wae",
    Vowel.OE: "oe",
    Vowel.YO: "yo",
    Vowel.U: "u",
    Vowel.WO: "wo",
    Vowel.WE: "we",
    Vowel.WI: "wi",
    Vowel.YU: "yu",
    Vowel.EU: "eu",
    Vowel.UI: "ui",
    Vowel.I: "i",
}

# Finals are labelled by their representative (neutralized) sound.
# ㄼ, ㄽ, ㄾ, ㄿ and ㅀ keep the liquid.
_FINAL_RR: Final[dict[FinalConsonant, str]] = {
    FinalConsonant.NONE: "",
    FinalConsonant.GIYEOK: "k",
    FinalConsonant.SSANGGIYEOK: "k",
    FinalConsonant.GIYEOK_SIOT: "k",
    FinalConsonant.NIEUN: "n",
    FinalConsonant.NIEUN_JIEUT: "n",
    FinalConsonant.NIEUN_HIEUT: "n",
    FinalConsonant.DIGEUT: "t",
    FinalConsonant.RIEUL: "l",
    FinalConsonant.RIEUL_GIYEOK: "k",
    FinalConsonant.RIEUL_MIEUM: "m",
    FinalConsonant.RIEUL_BIEUP: "l",
    FinalConsonant.RIEUL_SIOT: "l",
    FinalConsonant.RIEUL_TIEUT: "l",
    FinalConsonant.RIEUL_PIEUP: "l",
    FinalConsonant.RIEUL_HIEUT: "l",
    FinalConsonant.MIEUM: "m",
    FinalConsonant.BIEUP: "p",
    FinalConsonant.BIEUP_SIOT: "p",
    FinalConsonant.SIOT: "t",
    FinalConsonant.SSANGSIOT: "t",
    FinalConsonant.IEUNG: "ng",
    FinalConsonant.JIEUT: "t",
    FinalConsonant.CHIEUT: "t",
    FinalConsonant.KIEUK: "k",
    FinalConsonant.TIEUT: "t",
    FinalConsonant.PIEUP: "p",
    FinalConsonant.HIEUT: "t",
}

_PALATALIZING_VOWELS: Final[frozenset[Vowel]] = frozenset({
    Vowel.YA, Vowel.YAE, Vowel.YEO, Vowel.YE, Vowel.YO, Vowel.YU, Vowel.I,
})
