"""
Local persistence for cached field-trial values.
"""

from fieldtrials.storage.preferences import (
    PreferenceStore,
    PreferenceStoreError,
    PreferenceTypeError,
    get_preference_store,
    initialize_preference_store,
)

__all__ = [
    "PreferenceStore",
    "PreferenceStoreError",
    "PreferenceTypeError",
    "get_preference_store",
    "initialize_preference_store",
]
