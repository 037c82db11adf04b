"""Context-sensitive romanization of Hangul syllables."""

from romaja.domain.enums import AssimilationDirection, WordClass
from romaja.domain.errors import InvalidComponent, RomajaError
from romaja.domain.hangul_unicode import is_hangul_character
from romaja.domain.jamo_data import FinalConsonant, InitialConsonant, Vowel
from romaja.domain.romanization_rr import RRResult, RRSegment, romanize_sequence, romanize_text
from romaja.domain.syllable import Syllable

__all__ = [
    "AssimilationDirection",
    "FinalConsonant",
    "InitialConsonant",
    "InvalidComponent",
    "RRResult",
    "RRSegment",
    "RomajaError",
    "Syllable",
    "Vowel",
    "WordClass",
    "is_hangul_character",
    "romanize_sequence",
    "romanize_text",
]
