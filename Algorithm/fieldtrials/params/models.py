"""
Type tags for cached field-trial parameters.
"""

from enum import Enum


class FieldTrialParameterType(str, Enum):
    """Value type of a cached field-trial parameter."""
    BOOLEAN = "boolean"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
