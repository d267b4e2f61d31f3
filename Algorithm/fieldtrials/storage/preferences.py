"""
Persistent typed key-value store for fieldtrials.

Values are kept in memory and mirrored to a JSON document of the form
{key: {"type": <tag>, "value": <value>}} after every write.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from fieldtrials.config.settings import get_settings

logger = logging.getLogger(__name__)


BOOLEAN = "boolean"
INT = "int"
DOUBLE = "double"
STRING = "string"

_PYTHON_TYPES = {
    BOOLEAN: (bool,),
    INT: (int,),
    DOUBLE: (float, int),
    STRING: (str,),
}


class PreferenceStoreError(Exception):
    """Raised when the preference file cannot be loaded."""
    
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class PreferenceTypeError(PreferenceStoreError):
    """Raised when a key is read as a different type than it was written."""
    
    def __init__(self, key: str, expected: str, actual: str):
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Preference {key!r} holds a {actual} value, not a {expected}"
        )


class PreferenceStore:
    """
    Typed key-value store persisted as JSON.
    
    Thread-safe. Each write replaces the file atomically, so readers in
    other processes never observe a partial document. A store created
    without a path lives in memory only.
    """
    
    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize preference store.
        
        Args:
            path: JSON file to load from and persist to (None = in-memory)
        
        Raises:
            PreferenceStoreError: If an existing file is not a valid store
        """
        self._path = Path(path) if path else None
        self._values: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()
        
        if self._path is not None and self._path.exists():
            self._values = self._load(self._path)
    
    @property
    def path(self) -> Optional[Path]:
        return self._path
    
    # =========================================================================
    # Writes
    # =========================================================================
    
    def write_boolean(self, key: str, value: bool) -> None:
        self._write(key, BOOLEAN, bool(value))
    
    def write_int(self, key: str, value: int) -> None:
        self._write(key, INT, int(value))
    
    def write_double(self, key: str, value: float) -> None:
        """Write a float. The stored value is always a float, never None."""
        self._write(key, DOUBLE, float(value))
    
    def write_string(self, key: str, value: str) -> None:
        self._write(key, STRING, str(value))
    
    def remove_key(self, key: str) -> bool:
        """
        Remove a key.
        
        Returns:
            True if the key was present
        """
        with self._lock:
            if key not in self._values:
                return False
            del self._values[key]
            self._persist()
            return True
    
    def clear(self) -> int:
        """
        Remove all keys.
        
        Returns:
            Number of keys removed
        """
        with self._lock:
            count = len(self._values)
            self._values.clear()
            self._persist()
            return count
    
    # =========================================================================
    # Reads
    # =========================================================================
    
    def read_boolean(self, key: str, default: bool) -> bool:
        return self._read(key, BOOLEAN, default)
    
    def read_int(self, key: str, default: int) -> int:
        return self._read(key, INT, default)
    
    def read_double(self, key: str, default: float) -> float:
        return self._read(key, DOUBLE, default)
    
    def read_string(self, key: str, default: str) -> str:
        return self._read(key, STRING, default)
    
    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._values
    
    def keys(self, prefix: Optional[str] = None) -> List[str]:
        """List stored keys, optionally only those starting with prefix."""
        with self._lock:
            return sorted(
                key for key in self._values
                if prefix is None or key.startswith(prefix)
            )
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
    
    def __contains__(self, key: str) -> bool:
        return self.contains(key)
    
    # =========================================================================
    # Internals
    # =========================================================================
    
    def _write(self, key: str, value_type: str, value: Any) -> None:
        with self._lock:
            self._values[key] = {"type": value_type, "value": value}
            self._persist()
        logger.debug(f"Wrote {value_type} preference {key}={value!r}")
    
    def _read(self, key: str, value_type: str, default: Any) -> Any:
        with self._lock:
            entry = self._values.get(key)
        if entry is None:
            return default
        if entry["type"] != value_type:
            raise PreferenceTypeError(key, value_type, entry["type"])
        return entry["value"]
    
    def _persist(self) -> None:
        """Atomically replace the backing file with the current values."""
        if self._path is None:
            return
        
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{self._path.name}.", dir=str(self._path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._values, f, sort_keys=True, indent=2)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
    
    @staticmethod
    def _load(path: Path) -> Dict[str, Dict[str, Any]]:
        """Load and validate a store file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise PreferenceStoreError(
                f"Preference file {path} is not valid JSON: {e}", str(path)
            ) from e
        
        if not isinstance(data, dict):
            raise PreferenceStoreError(
                f"Preference file {path} must contain a JSON object", str(path)
            )
        
        for key, entry in data.items():
            if (
                not isinstance(entry, dict)
                or entry.get("type") not in _PYTHON_TYPES
                or "value" not in entry
                or not isinstance(entry["value"], _PYTHON_TYPES[entry["type"]])
                or (entry["type"] != BOOLEAN and isinstance(entry["value"], bool))
            ):
                raise PreferenceStoreError(
                    f"Preference file {path} has a malformed entry for {key!r}",
                    str(path)
                )
            if entry["type"] == DOUBLE:
                entry["value"] = float(entry["value"])
        
        logger.info(f"Loaded {len(data)} preferences from {path}")
        return data


# =============================================================================
# Global Instance
# =============================================================================

_preference_store: Optional[PreferenceStore] = None


def get_preference_store() -> PreferenceStore:
    """Get or create global PreferenceStore instance."""
    global _preference_store
    if _preference_store is None:
        _preference_store = initialize_preference_store()
    return _preference_store


def initialize_preference_store(path: Optional[str] = None) -> PreferenceStore:
    """
    Initialize global PreferenceStore.
    
    Args:
        path: Store file (defaults to settings, empty = in-memory)
    
    Returns:
        Initialized PreferenceStore
    """
    global _preference_store
    _preference_store = PreferenceStore(path or get_settings().preferences_path or None)
    return _preference_store
