from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from romaja.domain.enums import AssimilationDirection, WordClass

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "ROMAJA_SETTINGS"

DEFAULT_DIRECTION = AssimilationDirection.PROGRESSIVE
DEFAULT_WORD_CLASS = WordClass.GENERIC


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the romanization defaults

    Expected shape:
        romanization:
          direction: progressive
          word_class: generic

    Notes:
      - Missing or malformed files fall back to the built-in defaults.
    """

    def __init__(self, settings_path: str | os.PathLike[str] | None = None) -> None:
        if settings_path is None:
            env_path = os.environ.get(SETTINGS_ENV_VAR)
            self._path = Path(env_path) if env_path else Path.cwd() / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            logger.debug("Settings file not found: %s", p)
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except OSError as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings %s: %s", p, e)

    def _section(self) -> dict[str, Any]:
        section = self.load().get("romanization") or {}
        return section if isinstance(section, dict) else {}

    def _set(self, key: str, value: str) -> None:
        s = self.load()
        section = s.get("romanization") or {}
        if not isinstance(section, dict):
            section = {}
        section[key] = value
        s["romanization"] = section
        self.save(s)

    def get_direction(self) -> AssimilationDirection:
        raw = self._section().get("direction", DEFAULT_DIRECTION.value)
        try:
            return AssimilationDirection(str(raw).strip().lower())
        except ValueError:
            logger.warning("Unknown assimilation direction %r; using %s", raw, DEFAULT_DIRECTION.value)
            return DEFAULT_DIRECTION

    def set_direction(self, direction: AssimilationDirection) -> None:
        self._set("direction", direction.value)

    def get_word_class(self) -> WordClass:
        raw = self._section().get("word_class", DEFAULT_WORD_CLASS.value)
        try:
            return WordClass(str(raw).strip().lower())
        except ValueError:
            logger.warning("Unknown word class %r; using %s", raw, DEFAULT_WORD_CLASS.value)
            return DEFAULT_WORD_CLASS

    def set_word_class(self, word_class: WordClass) -> None:
        self._set("word_class", word_class.value)
