"""
Pydantic models for feature state snapshots.

A snapshot is the JSON document a FeatureList is loaded from and exported to.
"""

from typing import Dict
from pydantic import BaseModel, Field, field_validator


class FeatureState(BaseModel):
    """State of a single feature and its field-trial parameters."""
    
    name: str = Field(
        ...,
        min_length=1,
        description="Feature name"
    )
    enabled: bool = Field(
        default=False,
        description="Whether the feature is enabled for this client"
    )
    params: Dict[str, str] = Field(
        default_factory=dict,
        description="Field-trial parameters as raw strings"
    )
    
    model_config = {"extra": "forbid"}
    
    @field_validator("params", mode="before")
    @classmethod
    def stringify_params(cls, v):
        """Accept numbers and booleans in snapshots, store them as strings."""
        if not isinstance(v, dict):
            return v
        result = {}
        for key, value in v.items():
            if isinstance(value, bool):
                result[key] = "true" if value else "false"
            elif isinstance(value, (int, float)):
                result[key] = repr(value)
            else:
                result[key] = value
        return result


class FieldTrialConfig(BaseModel):
    """Snapshot of all known features."""
    
    features: Dict[str, FeatureState] = Field(
        default_factory=dict,
        description="Feature name to state mapping"
    )
    
    model_config = {"extra": "forbid"}
    
    @field_validator("features", mode="before")
    @classmethod
    def fill_feature_names(cls, v):
        """Fill in an omitted feature name and reject one that disagrees with its key."""
        if not isinstance(v, dict):
            return v
        result = {}
        for name, state in v.items():
            if isinstance(state, dict):
                if "name" not in state:
                    state = {**state, "name": name}
                elif state["name"] != name:
                    raise ValueError(
                        f"feature {name!r} has mismatched name {state['name']!r}"
                    )
            elif isinstance(state, FeatureState) and state.name != name:
                raise ValueError(
                    f"feature {name!r} has mismatched name {state.name!r}"
                )
            result[name] = state
        return result
