"""
A boolean-type cached field-trial parameter.
"""

from fieldtrials.cached_flags import get_cached_flags
from fieldtrials.params.base import CachedParameter
from fieldtrials.params.models import FieldTrialParameterType


class BooleanParameter(CachedParameter):
    """A bool-valued CachedParameter."""
    
    def __init__(
        self,
        feature_name: str,
        parameter_name: str,
        default_value: bool,
        **kwargs
    ):
        super().__init__(
            feature_name, parameter_name, FieldTrialParameterType.BOOLEAN, None, **kwargs
        )
        self._default_value = default_value
    
    def get_default_value(self) -> bool:
        return self._default_value
    
    def cache_to_disk(self) -> None:
        value = self._get_feature_list().get_param_as_bool(
            self.get_feature_name(), self.get_parameter_name(), self.get_default_value()
        )
        self._get_store().write_boolean(self.get_shared_preference_key(), value)
    
    def get_value(self) -> bool:
        return get_cached_flags().get_consistent_bool(
            self.get_shared_preference_key(), self.get_default_value(), store=self._get_store()
        )
