from __future__ import annotations

from enum import Enum


class AssimilationDirection(Enum):
    """Tie-break for nasal/liquid clusters whose outcome is ambiguous."""
    PROGRESSIVE = "progressive"
    REGRESSIVE = "regressive"


class WordClass(Enum):
    """Word-class hint that switches specific rule branches."""
    SUBSTANTIVE = "substantive"
    COMPOUND = "compound"
    PLACE_NAME = "place_name"
    PERSONAL_NAME = "personal_name"
    GENERIC = "generic"
