"""
Shared fixtures and configuration for fieldtrials tests.
"""

import pytest


# =============================================================================
# Global State
# =============================================================================

@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Give every test fresh settings and singletons."""
    import fieldtrials.cached_flags as cached_flags
    import fieldtrials.config.settings as settings
    import fieldtrials.features.feature_list as feature_list
    import fieldtrials.storage.preferences as preferences
    
    for var in (
        "FIELDTRIALS_PREFS_PATH",
        "FIELDTRIALS_CONFIG",
        "FIELDTRIALS_KEY_PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    
    monkeypatch.setattr(settings, "_settings", None)
    monkeypatch.setattr(feature_list, "_feature_list", None)
    monkeypatch.setattr(preferences, "_preference_store", None)
    monkeypatch.setattr(cached_flags, "_cached_flags", None)
    yield


# =============================================================================
# Collaborator Fixtures
# =============================================================================

@pytest.fixture
def feature_list():
    """Create an empty FeatureList."""
    from fieldtrials.features import FeatureList
    return FeatureList()


@pytest.fixture
def store():
    """Create an in-memory PreferenceStore."""
    from fieldtrials.storage import PreferenceStore
    return PreferenceStore()


@pytest.fixture
def prefs_path(tmp_path):
    """Path for a file-backed PreferenceStore."""
    return tmp_path / "prefs" / "field_trials.json"


@pytest.fixture
def global_collaborators(feature_list, store, monkeypatch):
    """Install feature_list and store as the process-wide instances."""
    import fieldtrials.features.feature_list as feature_list_module
    import fieldtrials.storage.preferences as preferences_module
    
    monkeypatch.setattr(feature_list_module, "_feature_list", feature_list)
    monkeypatch.setattr(preferences_module, "_preference_store", store)
    return feature_list, store


# =============================================================================
# Parameter Fixtures
# =============================================================================

@pytest.fixture
def threshold_param(feature_list, store):
    """DoubleParameter bound to explicit collaborators."""
    from fieldtrials.params import DoubleParameter
    return DoubleParameter(
        "ExperimentX", "threshold", 0.5,
        feature_list=feature_list, store=store
    )
