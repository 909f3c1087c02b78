"""
Configuration Manager - Persisted comparison defaults and server settings

Settings live in config.json inside the first usable directory of:
$COMPARE_BACKEND_CONFIG_DIR, ~/.compare_backend, <tmp>/compare_backend.
Stored values are layered over the defaults section by section; anything
malformed is reported and replaced by its default.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from models.compare import CompareOptions

CONFIG_DIR_ENV = "COMPARE_BACKEND_CONFIG_DIR"
CONFIG_FILE_NAME = "config.json"
DEFAULT_MAX_LINES = 50000


def _candidate_dirs() -> list[Path]:
    candidates = []
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        candidates.append(Path(env_dir))
    candidates.append(Path("~/.compare_backend").expanduser())
    candidates.append(Path(tempfile.gettempdir()) / "compare_backend")
    return candidates


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None

    def __init__(self):
        self._config_file = self._resolve_config_file()
        self._config = self._load_config()

    @staticmethod
    def _resolve_config_file() -> Path:
        """First candidate directory that exists or can be created"""
        for directory in _candidate_dirs():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                print(f"[ConfigManager] Warning: Cannot use {directory}: {e}")
                continue
            return directory / CONFIG_FILE_NAME

        raise RuntimeError("No writable configuration directory available")

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next get_instance() re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _default_config(self) -> dict[str, Any]:
        return {
            "compare": {
                "ignoreWhitespace": False,
                "ignoreCase": False,
                "maxLines": DEFAULT_MAX_LINES,  # combined old + new lines accepted over HTTP
            },
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def _load_config(self) -> dict[str, Any]:
        """Read the config file and layer it over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            print(f"[ConfigManager] Ignoring malformed config in {self._config_file}")
            return config

        for section, values in stored.items():
            default = config.get(section)
            if isinstance(default, dict):
                if not isinstance(values, dict):
                    print(f"[ConfigManager] Ignoring malformed '{section}' section, using defaults")
                    continue
                config[section] = {**default, **values}
            else:
                config[section] = values
        return config

    def get_config(self) -> dict[str, Any]:
        """Get current configuration, re-read from disk"""
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Merge config into the current settings and write them out"""
        self._config.update(config)
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set one top-level section and persist it"""
        self.save_config({key: value})

    def update_section(self, section: str, values: dict[str, Any]):
        """Merge values into one section, keeping its other keys"""
        current = self.get_config().get(section, {})
        self.set(section, {**current, **values})

    def compare_options(self) -> CompareOptions:
        """Persisted comparison defaults as a CompareOptions model"""
        cfg = self.get_config()["compare"]
        return CompareOptions(
            ignore_whitespace=bool(cfg.get("ignoreWhitespace", False)),
            ignore_case=bool(cfg.get("ignoreCase", False)),
        )

    def max_lines(self) -> int:
        """Line limit for HTTP comparisons; invalid stored values use the default"""
        value = self.get_config()["compare"].get("maxLines", DEFAULT_MAX_LINES)
        try:
            limit = int(value)
        except (TypeError, ValueError):
            print(f"[ConfigManager] Invalid maxLines {value!r}, using {DEFAULT_MAX_LINES}")
            return DEFAULT_MAX_LINES
        if limit <= 0:
            print(f"[ConfigManager] Invalid maxLines {value!r}, using {DEFAULT_MAX_LINES}")
            return DEFAULT_MAX_LINES
        return limit
