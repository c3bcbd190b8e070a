"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any

from loguru import logger


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node


@dataclass
class AppSettings:
    """Typed application settings with defaults.

    Attributes:
        log_dir: Directory for log files; None selects the platform default.
        log_level: loguru level name for the file sink.
        autosave: Persist metadata after every marking action.
        advance_after_skip: Move to the next image after skipping the current one.
    """

    log_dir: str | None = None
    log_level: str = "INFO"
    autosave: bool = True
    advance_after_skip: bool = True


def load_app_settings(settings_path: str | Path) -> AppSettings:
    """Read `AppSettings` from a JSON file, falling back to defaults.

    A missing or unparsable file yields the defaults; absent keys keep their
    default values.
    """
    defaults = AppSettings()
    try:
        settings = JsonSettings(settings_path)
    except FileNotFoundError:
        logger.info("Settings file not found at {}, using defaults", settings_path)
        return defaults
    except (OSError, ValueError) as ex:
        logger.warning("Failed to read settings {}: {}. Using defaults.", settings_path, ex)
        return defaults

    log_dir = settings.get("logging.dir", defaults.log_dir)
    return AppSettings(
        log_dir=str(log_dir) if log_dir else None,
        log_level=str(settings.get("logging.level", defaults.log_level)).upper(),
        autosave=bool(settings.get("session.autosave", defaults.autosave)),
        advance_after_skip=bool(
            settings.get("session.advance_after_skip", defaults.advance_after_skip)
        ),
    )
