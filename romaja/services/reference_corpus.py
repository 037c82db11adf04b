from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import yaml

from romaja.domain.enums import AssimilationDirection, WordClass
from romaja.domain.romanization_rr import romanize_text

logger = logging.getLogger(__name__)


def _default_corpus_path() -> Path:
    """Return the packaged corpus.

    Assumes this file lives at: <root>/romaja/services/reference_corpus.py
    """
    return Path(__file__).resolve().parents[1] / "data" / "reference_corpus.yaml"


@dataclass(frozen=True)
class CorpusEntry:
    hangul: str
    rr: str
    word_class: WordClass = WordClass.GENERIC
    direction: AssimilationDirection = AssimilationDirection.PROGRESSIVE
    note: str | None = None


@dataclass(frozen=True)
class CorpusMismatch:
    entry: CorpusEntry
    actual: str


def _read_yaml(path: Path) -> Any:
    if not path.exists() or not path.is_file():
        logger.debug("Corpus file not found: %s", path)
        return None

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as e:
        logger.warning("Failed to read corpus %s: %s", path, e)
        return None

    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        logger.warning("Malformed corpus %s: %s", path, e)
        return None


def _as_nonempty_str(value: Any) -> str | None:
    if isinstance(value, str):
        s = value.strip()
        return s if s else None
    return None


def _parse_entry(raw: Any) -> CorpusEntry | None:
    if not isinstance(raw, dict):
        return None

    hangul = _as_nonempty_str(raw.get("hangul"))
    rr = _as_nonempty_str(raw.get("rr"))
    if hangul is None or rr is None:
        return None

    try:
        word_class = WordClass(_as_nonempty_str(raw.get("word_class")) or WordClass.GENERIC.value)
        direction = AssimilationDirection(
            _as_nonempty_str(raw.get("direction")) or AssimilationDirection.PROGRESSIVE.value
        )
    except ValueError:
        return None

    return CorpusEntry(
        hangul=hangul,
        rr=rr,
        word_class=word_class,
        direction=direction,
        note=_as_nonempty_str(raw.get("note")),
    )


def load_reference_corpus(path: Path | None = None) -> list[CorpusEntry]:
    """Load corpus entries; malformed items are skipped."""
    data = _read_yaml(path or _default_corpus_path())
    if isinstance(data, dict):
        items = data.get("entries", [])
    elif isinstance(data, list):
        items = data
    else:
        items = []
    if not isinstance(items, list):
        return []

    entries: list[CorpusEntry] = []
    for raw in items:
        entry = _parse_entry(raw)
        if entry is None:
            logger.debug("Skipping malformed corpus entry: %r", raw)
            continue
        entries.append(entry)
    return entries


def verify_corpus(entries: Iterable[CorpusEntry]) -> list[CorpusMismatch]:
    """Romanize every entry and return the ones that disagree."""
    mismatches: list[CorpusMismatch] = []
    for entry in entries:
        actual = romanize_text(entry.hangul, direction=entry.direction, word_class=entry.word_class).rr
        if actual != entry.rr:
            mismatches.append(CorpusMismatch(entry=entry, actual=actual))
    return mismatches
