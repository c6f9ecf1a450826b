"""JSON backed application settings."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from .errors import SettingsInvalidError
from .utils.jsonio import read_json, write_json

_LOGGER = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"
HOME_ENV_VAR = "INSTAFILTER_HOME"

DEFAULT_SETTINGS: dict[str, Any] = {
    "library": {
        "root": None,
        "album": "Instafilter",
    },
    "ui": {
        "default_filter": "Sepia Tone",
        "sliders": {
            "intensity": 0.5,
            "radius": 0.5,
            "scale": 0.5,
        },
    },
    "logging": {
        "level": "INFO",
    },
}


def default_home() -> Path:
    """Return the configuration directory, honouring ``INSTAFILTER_HOME``."""

    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".instafilter"


def _merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class SettingsManager:
    """Read and write dotted-key settings stored in ``settings.json``.

    The file is only created once a value is changed; until then the
    defaults are served from memory.  Every :meth:`set` rewrites the file
    atomically so a crash never leaves a truncated document behind.
    """

    def __init__(self, home: Optional[Path] = None) -> None:
        self._home = Path(home) if home is not None else default_home()
        self._path = self._home / SETTINGS_FILENAME
        self._data: dict[str, Any] = copy.deepcopy(DEFAULT_SETTINGS)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def home(self) -> Path:
        return self._home

    def load(self) -> None:
        """Load the settings file, keeping defaults for absent keys."""

        if not self._path.exists():
            _LOGGER.debug("No settings file at %s; using defaults", self._path)
            return
        stored = read_json(self._path, error=SettingsInvalidError)
        self._data = _merge(DEFAULT_SETTINGS, stored)

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return copy.deepcopy(node)

    def set(self, key: str, value: Any) -> None:
        parts = key.split(".")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
        write_json(self._path, self._data)

    def library_root(self) -> Path:
        """Return the photo library directory, defaulting under the home dir."""

        configured = self.get("library.root")
        if configured:
            return Path(str(configured)).expanduser()
        return self._home / "Library"

    def slider_default(self, name: str) -> float:
        stored = self.get(f"ui.sliders.{name}", 0.5)
        try:
            return float(stored)
        except (TypeError, ValueError):
            _LOGGER.warning("Ignoring invalid slider default %r for %s", stored, name)
            return 0.5


__all__ = ["DEFAULT_SETTINGS", "SettingsManager", "default_home"]
