"""
Feature flag provider for fieldtrials.

Holds which features are enabled and the field-trial parameters
attached to them.
"""

from fieldtrials.features.models import FeatureState, FieldTrialConfig
from fieldtrials.features.feature_list import (
    FeatureList,
    UnknownFeatureError,
    get_feature_list,
    initialize_feature_list,
)

__all__ = [
    # Models
    "FeatureState",
    "FieldTrialConfig",
    # Provider
    "FeatureList",
    "UnknownFeatureError",
    "get_feature_list",
    "initialize_feature_list",
]
