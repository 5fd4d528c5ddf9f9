# file: src/settings/settings_provider.py
# English-only comments

from __future__ import annotations

import threading
from typing import Optional

from settings.settings_store import SettingsStore

_SETTINGS_STORE: Optional[SettingsStore] = None
_SINGLETON_LOCK = threading.Lock()


def get_settings_store() -> SettingsStore:
    """
    Returns the process-wide singleton SettingsStore.

    Double-checked: the unlocked check keeps every later access lock-free,
    the locked re-check guarantees only one thread ever constructs it.
    """
    global _SETTINGS_STORE
    if _SETTINGS_STORE is None:
        with _SINGLETON_LOCK:
            if _SETTINGS_STORE is None:
                _SETTINGS_STORE = SettingsStore()
    return _SETTINGS_STORE
