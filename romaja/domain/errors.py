from __future__ import annotations


class RomajaError(Exception):
    """Base class for romanization errors."""


class InvalidComponent(RomajaError, ValueError):
    """Raised when a syllable is built from missing or unknown components."""
