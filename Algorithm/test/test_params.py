"""
Unit tests for the sibling typed parameters and the CachedParameter base.

Tests:
- base.py: key derivation, abstract interface
- boolean.py, integer.py, string.py: cache_to_disk() and get_value()
"""

import pytest

from fieldtrials.params import (
    BooleanParameter,
    CachedParameter,
    FieldTrialParameterType,
    IntParameter,
    StringParameter,
    generate_shared_preference_key,
)


PREFIX = "Chrome.Flags.FieldTrialParamCached."


# =============================================================================
# Base Tests
# =============================================================================

class TestCachedParameterBase:
    """Test the abstract base."""
    
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            CachedParameter("F", "P", FieldTrialParameterType.DOUBLE)
    
    def test_key_format(self):
        assert generate_shared_preference_key("F", "P") == PREFIX + "F:P"
    
    def test_key_prefix_from_settings(self, monkeypatch):
        monkeypatch.setenv("FIELDTRIALS_KEY_PREFIX", "Test.Cached.")
        assert generate_shared_preference_key("F", "P") == "Test.Cached.F:P"
    
    def test_type_enum_values(self):
        assert FieldTrialParameterType.BOOLEAN.value == "boolean"
        assert FieldTrialParameterType.INT.value == "int"
        assert FieldTrialParameterType.DOUBLE.value == "double"
        assert FieldTrialParameterType.STRING.value == "string"


# =============================================================================
# Boolean Tests
# =============================================================================

class TestBooleanParameter:
    """Test BooleanParameter."""
    
    def test_fields(self, feature_list, store):
        param = BooleanParameter("F", "enabled_ui", True, feature_list=feature_list, store=store)
        
        assert param.get_default_value() is True
        assert param.get_type() is FieldTrialParameterType.BOOLEAN
        assert param.get_string_default() is None
    
    def test_default_written(self, feature_list, store):
        BooleanParameter("F", "P", True, feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_boolean(PREFIX + "F:P", False) is True
    
    def test_live_value_written(self, feature_list, store):
        feature_list.register("F", enabled=True, params={"P": "false"})
        BooleanParameter("F", "P", True, feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_boolean(PREFIX + "F:P", True) is False
    
    def test_get_value(self, feature_list, store):
        feature_list.register("F", enabled=True, params={"P": "true"})
        param = BooleanParameter("F", "P", False, feature_list=feature_list, store=store)
        param.cache_to_disk()
        assert param.get_value() is True


# =============================================================================
# Int Tests
# =============================================================================

class TestIntParameter:
    """Test IntParameter."""
    
    def test_fields(self, feature_list, store):
        param = IntParameter("F", "P", 7, feature_list=feature_list, store=store)
        
        assert param.get_default_value() == 7
        assert param.get_type() is FieldTrialParameterType.INT
    
    def test_default_written(self, feature_list, store):
        IntParameter("F", "P", 7, feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_int(PREFIX + "F:P", 0) == 7
    
    def test_live_value_written(self, feature_list, store):
        feature_list.register("F", enabled=True, params={"P": "42"})
        IntParameter("F", "P", 7, feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_int(PREFIX + "F:P", 0) == 42
    
    def test_non_integer_falls_back(self, feature_list, store):
        feature_list.register("F", enabled=True, params={"P": "4.2"})
        IntParameter("F", "P", 7, feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_int(PREFIX + "F:P", 0) == 7
    
    @pytest.mark.parametrize("raw", ["1_000", " 42", "42 ", "+", "٤٢"])
    def test_non_decimal_integer_falls_back(self, feature_list, store, raw):
        feature_list.register("F", enabled=True, params={"P": raw})
        IntParameter("F", "P", 7, feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_int(PREFIX + "F:P", 0) == 7
    
    def test_signed_integer_accepted(self, feature_list, store):
        feature_list.register("F", enabled=True, params={"P": "-12"})
        IntParameter("F", "P", 7, feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_int(PREFIX + "F:P", 0) == -12
    
    def test_get_value_default(self, feature_list, store):
        param = IntParameter("F", "P", 7, feature_list=feature_list, store=store)
        assert param.get_value() == 7


# =============================================================================
# String Tests
# =============================================================================

class TestStringParameter:
    """Test StringParameter."""
    
    def test_default_carried_by_base(self, feature_list, store):
        param = StringParameter("F", "mode", "compact", feature_list=feature_list, store=store)
        
        assert param.get_string_default() == "compact"
        assert param.get_default_value() == "compact"
        assert param.get_type() is FieldTrialParameterType.STRING
    
    def test_default_written(self, feature_list, store):
        StringParameter("F", "mode", "compact", feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_string(PREFIX + "F:mode", "") == "compact"
    
    def test_live_value_written(self, feature_list, store):
        feature_list.register("F", enabled=True, params={"mode": "expanded"})
        StringParameter("F", "mode", "compact", feature_list=feature_list, store=store).cache_to_disk()
        assert store.read_string(PREFIX + "F:mode", "") == "expanded"
    
    def test_get_value(self, feature_list, store):
        feature_list.register("F", enabled=True, params={"mode": "expanded"})
        param = StringParameter("F", "mode", "compact", feature_list=feature_list, store=store)
        param.cache_to_disk()
        assert param.get_value() == "expanded"


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
