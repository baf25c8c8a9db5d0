"""Configuration management for nativepath."""

from nativepath.config.loader import load_config
from nativepath.config.models import Config, LoggingConfig, PathsConfig, TempConfig

__all__ = ["Config", "LoggingConfig", "PathsConfig", "TempConfig", "load_config"]
