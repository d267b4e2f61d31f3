"""
Base class for field-trial parameters cached to local storage.

A cached parameter names one parameter of one feature, knows its value
type, and derives the key its value is persisted under. Subclasses read
the live value from the feature list and write it to the preference store.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from fieldtrials.config.settings import get_settings
from fieldtrials.features.feature_list import FeatureList, get_feature_list
from fieldtrials.params.models import FieldTrialParameterType
from fieldtrials.storage.preferences import PreferenceStore, get_preference_store


def generate_shared_preference_key(feature_name: str, parameter_name: str) -> str:
    """Key under which the value of a feature's parameter is cached."""
    return f"{get_settings().key_prefix}{feature_name}:{parameter_name}"


class CachedParameter(ABC):
    """
    A field-trial parameter whose value is cached to disk.
    
    The feature list and preference store are looked up when used, so a
    parameter can be declared at import time, before either is initialized.
    Passing them explicitly pins the parameter to specific instances.
    """
    
    def __init__(
        self,
        feature_name: str,
        parameter_name: str,
        parameter_type: FieldTrialParameterType,
        string_default: Optional[str] = None,
        *,
        feature_list: Optional[FeatureList] = None,
        store: Optional[PreferenceStore] = None
    ):
        """
        Initialize cached parameter.
        
        Args:
            feature_name: Feature the parameter belongs to
            parameter_name: Parameter name within the feature
            parameter_type: Value type tag
            string_default: Default in string form, for string parameters
            feature_list: Feature list to read from (global if None)
            store: Preference store to write to (global if None)
        """
        self._feature_name = feature_name
        self._parameter_name = parameter_name
        self._type = parameter_type
        self._string_default = string_default
        self._feature_list = feature_list
        self._store = store
    
    def get_feature_name(self) -> str:
        return self._feature_name
    
    def get_parameter_name(self) -> str:
        return self._parameter_name
    
    def get_type(self) -> FieldTrialParameterType:
        return self._type
    
    def get_string_default(self) -> Optional[str]:
        return self._string_default
    
    def get_shared_preference_key(self) -> str:
        return generate_shared_preference_key(self._feature_name, self._parameter_name)
    
    @abstractmethod
    def get_default_value(self) -> Any:
        """Value used when the experiment provides none."""
    
    @abstractmethod
    def cache_to_disk(self) -> None:
        """Read the live value and persist it under the shared preference key."""
    
    def _get_feature_list(self) -> FeatureList:
        return self._feature_list if self._feature_list is not None else get_feature_list()
    
    def _get_store(self) -> PreferenceStore:
        return self._store if self._store is not None else get_preference_store()
    
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(feature={self._feature_name!r}, "
            f"parameter={self._parameter_name!r}, type={self._type.value})"
        )
