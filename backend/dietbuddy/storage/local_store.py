"""
Local key/value store.

Persists each key as a JSON document (``<key>.json``) inside a data
directory. Writes replace the previous value for the key atomically; there is
no schema migration.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Union

logger = logging.getLogger(__name__)

# Fixed keys used by the services
GENETIC_ANALYSIS_KEY = "genetic_analysis_result"
PROFILE_KEY = "profile"
GAMIFICATION_KEY = "gamification"
CHAT_HISTORY_KEY = "chat_history"

_KEY_RE = re.compile(r"^[A-Za-z0-9_\-]+$")


class StorageError(RuntimeError):
    pass


class LocalStore:
    """JSON-file backed key/value store."""

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def _path_for(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.data_dir / f"{key}.json"

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or ``default`` if absent or unreadable."""
        path = self._path_for(key)
        if not path.exists():
            return default

        try:
            with open(path, 'r', encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers both JSONDecodeError and UnicodeDecodeError
            logger.error("Error loading stored key %s: %s", key, e)
            return default

    def set(self, key: str, value: Any) -> None:
        """Serialize ``value`` and replace whatever was stored under ``key``."""
        path = self._path_for(key)
        tmp_name = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, 'w', encoding="utf-8") as f:
                json.dump(value, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error("Error saving stored key %s: %s", key, e)
            raise StorageError(f"Could not save {key}: {e}") from e

    def remove(self, key: str) -> bool:
        """Delete ``key``. Returns True if something was removed."""
        path = self._path_for(key)
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error("Error removing stored key %s: %s", key, e)
            raise StorageError(f"Could not remove {key}: {e}") from e

    def keys(self) -> List[str]:
        if not self.data_dir.exists():
            return []
        return sorted(p.stem for p in self.data_dir.glob("*.json"))

    def clear(self) -> None:
        for key in self.keys():
            self.remove(key)

    def contains(self, key: str) -> bool:
        return self._path_for(key).exists()


_store_instance: Optional[LocalStore] = None


def get_local_store() -> LocalStore:
    """Get the global store rooted at the configured data directory."""
    global _store_instance
    if _store_instance is None:
        from dietbuddy.core.config import get_data_dir

        _store_instance = LocalStore(get_data_dir())
    return _store_instance
