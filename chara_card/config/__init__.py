"""Configuration loading and validation."""

from .models import AppConfig, CodecConfig, LoggingConfig
from .loader import ConfigLoader, ConfigLoadError, ConfigValidationError

__all__ = [
    "AppConfig",
    "CodecConfig",
    "LoggingConfig",
    "ConfigLoader",
    "ConfigLoadError",
    "ConfigValidationError",
]
