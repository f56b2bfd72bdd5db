# phonebook_core/settings.py
"""
SettingsStore: load phonebook settings (YAML/JSON) from disk.
Supports manual reload(); the file is re-read only when its mtime changes.
If the file is missing or invalid, falls back to the defaults in config.
"""

import os
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from phonebook_core import config

log = logging.getLogger(__name__)


@dataclass
class Settings:
    data_path: str = config.PHONEBOOK_DATA_PATH
    log_level: str = config.PHONEBOOK_LOG_LEVEL

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Settings":
        return Settings(
            data_path=str(data.get("data_path") or config.PHONEBOOK_DATA_PATH),
            log_level=str(data.get("log_level") or config.PHONEBOOK_LOG_LEVEL).upper(),
        )


class SettingsStore:
    def __init__(self, path: Optional[str] = None):
        self.path = path or config.PHONEBOOK_SETTINGS_PATH
        self._mtime = 0.0
        self._settings = Settings()
        self.reload()

    def _read_file(self) -> Optional[Dict[str, Any]]:
        """Return parsed mapping, {} if the file is unchanged, None if unusable."""
        if not os.path.exists(self.path):
            return None
        try:
            mtime = os.path.getmtime(self.path)
            if mtime <= self._mtime:
                return {}
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
            if self.path.lower().endswith(".json"):
                data = json.loads(text)
            else:
                data = yaml.safe_load(text) or {}
            if not isinstance(data, dict):
                log.warning("SettingsStore: %s does not hold a mapping, ignoring", self.path)
                return None
            self._mtime = mtime
            return data
        except (OSError, ValueError, yaml.YAMLError) as e:
            log.warning("SettingsStore load error: %s", e)
            return None

    def reload(self) -> Settings:
        data = self._read_file()
        if data is None:
            self._settings = Settings()
        elif data:
            self._settings = Settings.from_dict(data)
            log.info("SettingsStore: loaded settings from %s", self.path)
        return self._settings

    @property
    def settings(self) -> Settings:
        return self._settings


# module-level singleton for easy imports
_store = None


def get_settings() -> Settings:
    global _store
    if _store is None:
        _store = SettingsStore()
    return _store.settings
