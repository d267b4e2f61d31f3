"""
An int-type cached field-trial parameter.
"""

from fieldtrials.cached_flags import get_cached_flags
from fieldtrials.params.base import CachedParameter
from fieldtrials.params.models import FieldTrialParameterType


class IntParameter(CachedParameter):
    """An int-valued CachedParameter."""
    
    def __init__(
        self,
        feature_name: str,
        parameter_name: str,
        default_value: int,
        **kwargs
    ):
        super().__init__(
            feature_name, parameter_name, FieldTrialParameterType.INT, None, **kwargs
        )
        self._default_value = default_value
    
    def get_default_value(self) -> int:
        return self._default_value
    
    def cache_to_disk(self) -> None:
        value = self._get_feature_list().get_param_as_int(
            self.get_feature_name(), self.get_parameter_name(), self.get_default_value()
        )
        self._get_store().write_int(self.get_shared_preference_key(), value)
    
    def get_value(self) -> int:
        return get_cached_flags().get_consistent_int(
            self.get_shared_preference_key(), self.get_default_value(), store=self._get_store()
        )
