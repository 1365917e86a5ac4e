"""Shared configuration helpers and settings."""

from .errors import ConfigurationError
from .runtime import env_bool, env_choice, lookup
from .settings import Settings, converter_settings, load_log_level, load_settings, reset_settings

__all__ = [
    "ConfigurationError",
    "Settings",
    "converter_settings",
    "env_bool",
    "env_choice",
    "load_log_level",
    "load_settings",
    "lookup",
    "reset_settings",
]
