"""
A double-type cached field-trial parameter.
"""

from fieldtrials.cached_flags import get_cached_flags
from fieldtrials.params.base import CachedParameter
from fieldtrials.params.models import FieldTrialParameterType


class DoubleParameter(CachedParameter):
    """A float-valued CachedParameter."""
    
    def __init__(
        self,
        feature_name: str,
        parameter_name: str,
        default_value: float,
        **kwargs
    ):
        super().__init__(
            feature_name, parameter_name, FieldTrialParameterType.DOUBLE, None, **kwargs
        )
        self._default_value = default_value
    
    def get_default_value(self) -> float:
        return self._default_value
    
    def cache_to_disk(self) -> None:
        value = self._get_feature_list().get_param_as_double(
            self.get_feature_name(), self.get_parameter_name(), self.get_default_value()
        )
        self._get_store().write_double(self.get_shared_preference_key(), value)
    
    def get_value(self) -> float:
        """Cached value, consistent for the rest of the process."""
        return get_cached_flags().get_consistent_double(
            self.get_shared_preference_key(), self.get_default_value(), store=self._get_store()
        )
