"""
A string-type cached field-trial parameter.

Unlike the other typed parameters, the default travels through the base
class's string default.
"""

from fieldtrials.cached_flags import get_cached_flags
from fieldtrials.params.base import CachedParameter
from fieldtrials.params.models import FieldTrialParameterType


class StringParameter(CachedParameter):
    """A str-valued CachedParameter."""
    
    def __init__(
        self,
        feature_name: str,
        parameter_name: str,
        default_value: str,
        **kwargs
    ):
        super().__init__(
            feature_name, parameter_name, FieldTrialParameterType.STRING, default_value, **kwargs
        )
    
    def get_default_value(self) -> str:
        return self.get_string_default()
    
    def cache_to_disk(self) -> None:
        value = self._get_feature_list().get_field_trial_param_value(
            self.get_feature_name(), self.get_parameter_name()
        )
        if not value:
            value = self.get_default_value()
        self._get_store().write_string(self.get_shared_preference_key(), value)
    
    def get_value(self) -> str:
        return get_cached_flags().get_consistent_string(
            self.get_shared_preference_key(), self.get_default_value(), store=self._get_store()
        )
