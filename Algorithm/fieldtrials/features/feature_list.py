"""
Feature list for fieldtrials.

In-memory registry of features and their field-trial parameters. Typed
parameter getters fall back to the caller's default when a feature is
unknown or disabled, when the parameter is unset, or when its value
cannot be parsed.
"""

import json
import logging
import math
import re
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from fieldtrials.config.settings import get_settings
from fieldtrials.features.models import FeatureState, FieldTrialConfig

logger = logging.getLogger(__name__)


# Plain decimal notation only: no whitespace, underscores, nan or inf
_DOUBLE_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_double(raw: str) -> float:
    if not _DOUBLE_PATTERN.fullmatch(raw):
        raise ValueError(f"not a decimal number: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"out of range: {raw!r}")
    return value


def _parse_int(raw: str) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"not an integer: {raw!r}")
    return int(raw)


class UnknownFeatureError(KeyError):
    """Raised when querying the enabled state of an unregistered feature."""
    
    def __init__(self, feature_name: str):
        self.feature_name = feature_name
        super().__init__(f"Feature {feature_name!r} is not registered")


class FeatureList:
    """
    Registry of feature states.
    
    Features:
    - Enabled/disabled state per feature
    - String-valued field-trial parameters per feature
    - Typed parameter lookups with default fallback
    - JSON snapshot import/export
    """
    
    def __init__(self, config: Optional[FieldTrialConfig] = None):
        """
        Initialize FeatureList.
        
        Args:
            config: Optional snapshot to load
        """
        self._features: Dict[str, FeatureState] = {}
        self._lock = threading.RLock()
        
        if config is not None:
            self.load_config(config)
    
    # =========================================================================
    # Registration
    # =========================================================================
    
    def register(
        self,
        name: str,
        enabled: bool = False,
        params: Optional[Dict[str, str]] = None
    ) -> FeatureState:
        """
        Register a feature, replacing any previous state.
        
        Args:
            name: Feature name
            enabled: Initial enabled state
            params: Field-trial parameters
        
        Returns:
            Registered feature state
        """
        state = FeatureState(name=name, enabled=enabled, params=params or {})
        with self._lock:
            self._features[name] = state
        return state
    
    def set_enabled(self, name: str, enabled: bool) -> None:
        """Enable or disable a feature, registering it if needed."""
        with self._lock:
            state = self._features.get(name)
            if state is None:
                self.register(name, enabled=enabled)
            else:
                state.enabled = enabled
    
    def set_param(self, name: str, param: str, value: Union[str, int, float, bool]) -> None:
        """Set a field-trial parameter, registering the feature if needed."""
        with self._lock:
            state = self._features.get(name)
            if state is None:
                state = self.register(name)
            params = dict(state.params)
            params[param] = value
            # Revalidate so non-string values are normalized
            self._features[name] = FeatureState(
                name=name, enabled=state.enabled, params=params
            )
    
    def clear_params(self, name: str) -> None:
        """Remove all parameters of a feature."""
        with self._lock:
            state = self._features.get(name)
            if state is not None:
                state.params = {}
    
    def reset(self) -> None:
        """Forget all features."""
        with self._lock:
            self._features.clear()
    
    # =========================================================================
    # Lookups
    # =========================================================================
    
    def is_enabled(self, name: str) -> bool:
        """
        Check whether a feature is enabled.
        
        Raises:
            UnknownFeatureError: If the feature was never registered
        """
        with self._lock:
            state = self._features.get(name)
        if state is None:
            raise UnknownFeatureError(name)
        return state.enabled
    
    def get_field_trial_param_value(self, feature_name: str, param_name: str) -> str:
        """
        Get the raw value of a field-trial parameter.
        
        Returns:
            Parameter value, or "" if the feature is unknown or disabled
            or the parameter is not set
        """
        with self._lock:
            state = self._features.get(feature_name)
            if state is None or not state.enabled:
                return ""
            return state.params.get(param_name, "")
    
    def get_param_as_double(
        self,
        feature_name: str,
        param_name: str,
        default_value: float
    ) -> float:
        """Get a parameter as a float, or default_value."""
        raw = self.get_field_trial_param_value(feature_name, param_name)
        if not raw:
            return default_value
        try:
            return _parse_double(raw)
        except ValueError:
            logger.warning(
                f"Failed to parse field trial param {param_name} with string "
                f"value {raw!r} under feature {feature_name} into a double. "
                f"Falling back to default value of {default_value}"
            )
            return default_value
    
    def get_param_as_int(
        self,
        feature_name: str,
        param_name: str,
        default_value: int
    ) -> int:
        """Get a parameter as an int, or default_value."""
        raw = self.get_field_trial_param_value(feature_name, param_name)
        if not raw:
            return default_value
        try:
            return _parse_int(raw)
        except ValueError:
            logger.warning(
                f"Failed to parse field trial param {param_name} with string "
                f"value {raw!r} under feature {feature_name} into an int. "
                f"Falling back to default value of {default_value}"
            )
            return default_value
    
    def get_param_as_bool(
        self,
        feature_name: str,
        param_name: str,
        default_value: bool
    ) -> bool:
        """Get a parameter as a bool ("true"/"false" only), or default_value."""
        raw = self.get_field_trial_param_value(feature_name, param_name)
        if raw == "true":
            return True
        if raw == "false":
            return False
        if raw:
            logger.warning(
                f"Failed to parse field trial param {param_name} with string "
                f"value {raw!r} under feature {feature_name} into a bool. "
                f"Falling back to default value of {default_value}"
            )
        return default_value
    
    # =========================================================================
    # Snapshots
    # =========================================================================
    
    def load_config(self, config: Union[FieldTrialConfig, Dict]) -> int:
        """
        Load features from a snapshot, merging over existing state.
        
        Args:
            config: Snapshot model or its dict form
        
        Returns:
            Number of features loaded
        """
        if isinstance(config, dict):
            config = FieldTrialConfig(**config)
        
        with self._lock:
            for name, state in config.features.items():
                self._features[name] = state.model_copy(deep=True)
        
        return len(config.features)
    
    def load_file(self, path: Union[str, Path]) -> int:
        """Load a JSON snapshot from disk."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        
        count = self.load_config(data)
        logger.info(f"Loaded {count} features from {path}")
        return count
    
    def to_config(self) -> FieldTrialConfig:
        """Export the current state as a snapshot."""
        with self._lock:
            return FieldTrialConfig(
                features={
                    name: state.model_copy(deep=True)
                    for name, state in self._features.items()
                }
            )
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._features)
    
    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._features


# =============================================================================
# Global Instance
# =============================================================================

_feature_list: Optional[FeatureList] = None


def get_feature_list() -> FeatureList:
    """Get or create global FeatureList instance."""
    global _feature_list
    if _feature_list is None:
        _feature_list = initialize_feature_list()
    return _feature_list


def initialize_feature_list(config_path: Optional[str] = None) -> FeatureList:
    """
    Initialize global FeatureList.
    
    Args:
        config_path: Snapshot file to load (defaults to settings)
    
    Returns:
        Initialized FeatureList
    """
    global _feature_list
    feature_list = FeatureList()
    
    config_path = config_path or get_settings().feature_config_path
    if config_path:
        feature_list.load_file(config_path)
    
    _feature_list = feature_list
    return _feature_list
