"""Process-wide defaults for the case converters.

Converters called without explicit options use ``converter_settings()``.
It reads the environment once, caches the result for the life of the
process, and never raises: malformed configuration is logged and the
built-in defaults are used instead. Pass options explicitly for output that
depends on the arguments alone.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .runtime import env_bool, env_choice

logger = logging.getLogger(__name__)

UNICODE_WORDS_ENV = "CASECONV_UNICODE_WORDS"
CAMEL_PRESERVE_ENV = "CASECONV_CAMEL_PRESERVE_UNSEPARATED"
LOG_LEVEL_ENV = "CASECONV_LOG_LEVEL"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_settings_lock = threading.Lock()
_SETTINGS: Optional["Settings"] = None
_CONVERTER_SETTINGS: Optional["Settings"] = None


@dataclass(frozen=True)
class Settings:
    """Defaults applied when a converter is called without explicit options.

    Attributes:
        unicode_words: Treat non-ASCII letters and digits as word characters.
        camel_preserve_unseparated: Keep interior casing in camelCase output
            when the input has no separator characters.
    """

    unicode_words: bool = False
    camel_preserve_unseparated: bool = True


def _read_settings() -> Settings:
    return Settings(
        unicode_words=env_bool(UNICODE_WORDS_ENV, False),
        camel_preserve_unseparated=env_bool(CAMEL_PRESERVE_ENV, True),
    )


def load_settings() -> Settings:
    """Return the cached settings, reading the environment on first use.

    Raises:
        ConfigurationError: If a variable or .env file is malformed.
    """
    global _SETTINGS
    with _settings_lock:
        if _SETTINGS is None:
            _SETTINGS = _read_settings()
            logger.debug("Loaded settings: %s", _SETTINGS)
        return _SETTINGS


def converter_settings() -> Settings:
    """Return the settings the converters use; falls back to defaults instead of raising."""
    global _CONVERTER_SETTINGS
    if _CONVERTER_SETTINGS is not None:
        return _CONVERTER_SETTINGS
    try:
        resolved = load_settings()
    except ConfigurationError as exc:
        logger.warning("Ignoring invalid caseconv configuration, using defaults: %s", exc)
        resolved = Settings()
    with _settings_lock:
        _CONVERTER_SETTINGS = resolved
    return resolved


def load_log_level() -> str:
    """Return the configured log level name.

    Raises:
        ConfigurationError: If ``CASECONV_LOG_LEVEL`` is not a level name or a .env file is unreadable.
    """
    return env_choice(LOG_LEVEL_ENV, LOG_LEVELS, "WARNING")


def reset_settings() -> None:
    """Drop cached settings so the next lookup re-reads the environment."""
    global _SETTINGS, _CONVERTER_SETTINGS
    with _settings_lock:
        _SETTINGS = None
        _CONVERTER_SETTINGS = None
