"""
Cached field-trial parameters.

Each parameter binds a (feature, parameter, default) triple to a value that
is read from the feature list and persisted to the preference store.
"""

from fieldtrials.params.models import FieldTrialParameterType
from fieldtrials.params.base import CachedParameter, generate_shared_preference_key
from fieldtrials.params.boolean import BooleanParameter
from fieldtrials.params.integer import IntParameter
from fieldtrials.params.double import DoubleParameter
from fieldtrials.params.string import StringParameter

__all__ = [
    "FieldTrialParameterType",
    "CachedParameter",
    "generate_shared_preference_key",
    "BooleanParameter",
    "IntParameter",
    "DoubleParameter",
    "StringParameter",
]
