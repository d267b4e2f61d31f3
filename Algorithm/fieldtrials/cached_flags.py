"""
Caching and consistent reads of field-trial parameters.

Parameters are cached to disk in bulk, typically once at startup. Reads
go through the store once per key and are remembered afterwards, so code
running in one process always sees a single value for a parameter even
if a later cache_to_disk() rewrites it.
"""

import logging
import threading
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from fieldtrials.storage.preferences import PreferenceStore, get_preference_store

logger = logging.getLogger(__name__)


class CachedFlags:
    """
    Session-consistent view over cached parameter values.
    
    Thread-safe. Values are remembered per key and value type for the
    whole process, whichever store they were first read from. Values set
    with set_for_testing() take precedence over both remembered and
    stored values.
    """
    
    def __init__(self, store: Optional[PreferenceStore] = None):
        """
        Initialize CachedFlags.
        
        Args:
            store: Store to read from when a read does not pass one (global if None)
        """
        self._store = store
        self._values_returned: Dict[Tuple[str, str], Any] = {}
        self._overrides: Dict[str, Any] = {}
        self._lock = threading.RLock()
    
    def cache_field_trial_parameters(self, parameters: Iterable) -> int:
        """
        Cache each parameter's live value to disk, in order.
        
        Args:
            parameters: Objects with a cache_to_disk() method
        
        Returns:
            Number of parameters cached
        """
        count = 0
        for parameter in parameters:
            parameter.cache_to_disk()
            count += 1
        
        logger.info(f"Cached {count} field trial parameters")
        return count
    
    # =========================================================================
    # Consistent Reads
    # =========================================================================
    
    def get_consistent_bool(
        self,
        key: str,
        default: bool,
        store: Optional[PreferenceStore] = None
    ) -> bool:
        return self._get_consistent(key, default, store, PreferenceStore.read_boolean)
    
    def get_consistent_int(
        self,
        key: str,
        default: int,
        store: Optional[PreferenceStore] = None
    ) -> int:
        return self._get_consistent(key, default, store, PreferenceStore.read_int)
    
    def get_consistent_double(
        self,
        key: str,
        default: float,
        store: Optional[PreferenceStore] = None
    ) -> float:
        return self._get_consistent(key, default, store, PreferenceStore.read_double)
    
    def get_consistent_string(
        self,
        key: str,
        default: str,
        store: Optional[PreferenceStore] = None
    ) -> str:
        return self._get_consistent(key, default, store, PreferenceStore.read_string)
    
    def _get_consistent(
        self,
        key: str,
        default: Any,
        store: Optional[PreferenceStore],
        reader: Callable[[PreferenceStore, str, Any], Any]
    ) -> Any:
        with self._lock:
            if key in self._overrides:
                return self._overrides[key]
            memo_key = (key, reader.__name__)
            if memo_key in self._values_returned:
                return self._values_returned[memo_key]
            
            if store is None:
                store = self._store if self._store is not None else get_preference_store()
            value = reader(store, key, default)
            self._values_returned[memo_key] = value
            return value
    
    # =========================================================================
    # Testing
    # =========================================================================
    
    def set_for_testing(self, key: str, value: Any) -> None:
        """Force the value returned for a key."""
        with self._lock:
            self._overrides[key] = value
    
    def reset_for_testing(self) -> None:
        """Forget overrides and remembered values."""
        with self._lock:
            self._overrides.clear()
            self._values_returned.clear()


# =============================================================================
# Global Instance
# =============================================================================

_cached_flags: Optional[CachedFlags] = None


def get_cached_flags() -> CachedFlags:
    """Get or create global CachedFlags instance."""
    global _cached_flags
    if _cached_flags is None:
        _cached_flags = CachedFlags()
    return _cached_flags


def reset_cached_flags() -> None:
    """Drop the global CachedFlags instance."""
    global _cached_flags
    _cached_flags = None
