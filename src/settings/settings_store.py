# file: src/settings/settings_store.py
# English-only comments

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Demo credentials standing in for an external settings source.
SIMULATED_DB_SETTINGS: Dict[str, str] = {
    "db_user": "admin",
    "db_password": "1234",
}


class NotFoundError(KeyError):
    """Raised when a settings key has never been set."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Setting not found: {self.key}"


class SettingsStore:
    """
    Process-wide key/value settings registry.

    Do not construct this directly in application code; use
    settings.settings_provider.get_settings_store() so every caller
    shares the same instance.

    Concurrency:
      - set/get are single dict operations and need no lock.
      - save_to_file iterates over a snapshot, so concurrent writers
        never break the iteration.
      - File I/O itself is NOT serialized; callers must not save/load
        the same path from several threads at once.
    """

    def __init__(self) -> None:
        self._settings: Dict[str, str] = {}
        logger.info(json.dumps({"EventCode": 0, "Message": "SettingsStore created."}))

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------
    def set(self, key: str, value: str) -> None:
        self._settings[key] = value

    def get(self, key: str) -> str:
        try:
            return self._settings[key]
        except KeyError:
            raise NotFoundError(key) from None

    def snapshot(self) -> Dict[str, str]:
        """Copy of all pairs at call time."""
        return self._settings.copy()

    def __contains__(self, key: object) -> bool:
        return key in self._settings

    def __len__(self) -> int:
        return len(self._settings)

    # ------------------------------------------------------------------
    # Persistence (flat key=value text)
    # ------------------------------------------------------------------
    def save_to_file(self, path: PathLike) -> None:
        """
        Write every pair as `key=value`, one per line.

        NOTE:
          - No escaping: a value containing '=' is written as-is and
            will be skipped by load_from_file.
          - OSError from open/write propagates to the caller.
        """
        pairs = self.snapshot()
        with open(path, "w", encoding="utf-8") as f:
            for key, value in pairs.items():
                f.write(f"{key}={value}\n")

        logger.info(
            json.dumps({"EventCode": 0, "Message": f"Saved {len(pairs)} settings to {path}"})
        )

    def load_from_file(self, path: PathLike) -> int:
        """
        Read `key=value` lines and upsert them.

        Lines that do not split into exactly two parts on '=' are
        skipped without error. Returns the number of pairs loaded.
        """
        loaded = 0
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                parts = line.rstrip("\r\n").split("=")
                if len(parts) != 2:
                    continue
                self._settings[parts[0]] = parts[1]
                loaded += 1

        logger.info(
            json.dumps({"EventCode": 0, "Message": f"Loaded {loaded} settings from {path}"})
        )
        return loaded

    def load_simulated_database(self) -> None:
        """Insert the fixed demo credentials (simulated DB load)."""
        self._settings.update(SIMULATED_DB_SETTINGS)
        logger.info(
            json.dumps({"EventCode": 0, "Message": "Settings loaded from database (simulated)"})
        )
