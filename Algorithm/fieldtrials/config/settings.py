"""
Global configuration settings for fieldtrials.

Loads configuration from environment variables and provides
typed access to storage locations, key naming and logging.
"""

import logging
import os
from typing import Optional, Dict, Any
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


DEFAULT_KEY_PREFIX = "Chrome.Flags.FieldTrialParamCached."


@dataclass
class Settings:
    """Global settings for fieldtrials."""
    
    # Persistent preference store (empty = in-memory only)
    preferences_path: str = ""
    
    # JSON snapshot of feature states loaded at startup
    feature_config_path: str = ""
    
    # Prefix for shared preference keys of cached parameters
    key_prefix: str = DEFAULT_KEY_PREFIX
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    def __post_init__(self):
        """Load settings from environment variables."""
        self.preferences_path = os.getenv("FIELDTRIALS_PREFS_PATH", self.preferences_path)
        self.feature_config_path = os.getenv("FIELDTRIALS_CONFIG", self.feature_config_path)
        self.key_prefix = os.getenv("FIELDTRIALS_KEY_PREFIX", self.key_prefix)
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "preferences_path": self.preferences_path,
            "persistent": bool(self.preferences_path),
            "feature_config_path": self.feature_config_path,
            "key_prefix": self.key_prefix,
            "log_level": self.log_level,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(
    preferences_path: str = None,
    feature_config_path: str = None,
    **kwargs
) -> Settings:
    """
    Configure global settings.
    
    Args:
        preferences_path: Path of the JSON preference store
        feature_config_path: Path of the feature snapshot file
        **kwargs: Additional settings
    
    Returns:
        Configured Settings instance
    """
    settings = get_settings()
    
    if preferences_path:
        settings.preferences_path = preferences_path
    if feature_config_path:
        settings.feature_config_path = feature_config_path
    
    for key, value in kwargs.items():
        if hasattr(settings, key):
            setattr(settings, key, value)
    
    return settings


def reset_settings() -> None:
    """Drop the global settings so the next access re-reads the environment."""
    global _settings
    _settings = None


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format
    )
