"""Configuration loading utilities for status badges."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .models import BadgeType


DEFAULT_SETTINGS_PATH = Path(__file__).parent / "data" / "settings.yaml"
SETTINGS_PATH_ENV = "STATUS_BADGE_SETTINGS"
LOG_LEVEL_ENV = "STATUS_BADGE_LOG_LEVEL"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _log_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {value}")
    return level


@dataclass(frozen=True)
class Settings:
    """Typed view over the settings YAML file."""

    colors: Mapping[BadgeType, str]
    label_color: str
    log_level: str

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Settings":
        raw_colors = dict(data.get("colors") or {})
        colors: Dict[BadgeType, str] = {}
        for key, value in raw_colors.items():
            badge_type = BadgeType.parse(str(key))
            if badge_type is None:
                raise ValueError(f"Unknown badge type in colors: {key}")
            colors[badge_type] = str(value).strip()
        missing = [badge_type.value for badge_type in BadgeType if not colors.get(badge_type)]
        if missing:
            raise ValueError(f"No color configured for badge types: {', '.join(missing)}")
        renderer_cfg = data.get("renderer") or {}
        logging_cfg = data.get("logging") or {}
        return Settings(
            colors=colors,
            label_color=str(renderer_cfg.get("label_color", "#555")),
            log_level=_log_level(logging_cfg.get("level", "WARNING")),
        )


class SettingsLoader:
    """Loads and caches settings from YAML configuration files."""

    def __init__(self, path: Path | None = None) -> None:
        env_path = os.getenv(SETTINGS_PATH_ENV)
        self._path = path or (Path(env_path) if env_path else DEFAULT_SETTINGS_PATH)
        self._cache: Settings | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self, force: bool = False) -> Settings:
        if self._cache is not None and not force:
            return self._cache
        with self._path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self._path} must contain a mapping")
        settings = Settings.from_dict(data)
        env_level = os.getenv(LOG_LEVEL_ENV)
        if env_level:
            settings = replace(settings, log_level=_log_level(env_level))
        self._cache = settings
        return self._cache


def get_settings() -> Settings:
    """Convenience accessor for default settings."""

    return SettingsLoader().load()


__all__ = ["LOG_LEVELS", "Settings", "SettingsLoader", "get_settings"]
