"""
Configuration helpers for the static-site generator.
"""

from .models import DEFAULT_OUTPUT_DIR, BuildConfig, ConfigError, load_config
from .settings import Settings, get_settings

__all__ = ["DEFAULT_OUTPUT_DIR", "BuildConfig", "ConfigError", "load_config", "Settings", "get_settings"]
