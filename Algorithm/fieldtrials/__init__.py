"""
fieldtrials - Cached field-trial parameters

Reads typed experiment (A/B test) parameters from a feature list and
persists them to a local preference store, so later reads do not depend
on the experiment system being available.

Key Features:
- Boolean, int, double and string parameters with defaults
- JSON-backed preference store with atomic writes
- Session-consistent reads of cached values
"""

__version__ = "0.1.0"
__author__ = "fieldtrials Team"

from fieldtrials.params import (
    FieldTrialParameterType,
    CachedParameter,
    BooleanParameter,
    IntParameter,
    DoubleParameter,
    StringParameter,
)
from fieldtrials.features import FeatureList, get_feature_list
from fieldtrials.storage import PreferenceStore, get_preference_store
from fieldtrials.cached_flags import CachedFlags, get_cached_flags

__all__ = [
    # Parameters
    "FieldTrialParameterType",
    "CachedParameter",
    "BooleanParameter",
    "IntParameter",
    "DoubleParameter",
    "StringParameter",
    # Collaborators
    "FeatureList",
    "get_feature_list",
    "PreferenceStore",
    "get_preference_store",
    "CachedFlags",
    "get_cached_flags",
]
