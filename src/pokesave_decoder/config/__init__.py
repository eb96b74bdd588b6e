"""Config package for decoder configuration management.

Provides type-safe access to configuration sections with validation and defaults.
"""

from .loader import ConfigLoader, ConfigLoadError, AppConfig
from .loader import TextSettings, DecoderSettings, LoggingSettings, OutputSettings

__all__ = [
    "ConfigLoader",
    "ConfigLoadError",
    "AppConfig",
    "TextSettings",
    "DecoderSettings",
    "LoggingSettings",
    "OutputSettings",
]
