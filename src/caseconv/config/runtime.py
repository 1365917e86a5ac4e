"""Environment lookups for caseconv settings.

A non-blank value in the process environment wins over one declared in a
``.env`` file. The files are read once per process; ``./.env`` takes
precedence over ``~/.env``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Sequence

from .dotenv_loader import read_dotenv
from .errors import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})

_DOTENV_FILES = (Path(".env"), Path.home() / ".env")

_FILE_VALUES: Optional[Dict[str, str]] = None


def _file_values() -> Dict[str, str]:
    global _FILE_VALUES
    if _FILE_VALUES is None:
        merged: Dict[str, str] = {}
        for path in reversed(_DOTENV_FILES):
            merged.update(read_dotenv(path))
        _FILE_VALUES = merged
    return _FILE_VALUES


def lookup(name: str) -> Optional[str]:
    """Return the stripped value of ``name``, or ``None`` when unset or blank."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        raw = _file_values().get(name)
    if raw is None:
        return None
    return raw.strip() or None


def env_bool(name: str, default: bool) -> bool:
    """Read ``name`` as a boolean flag."""
    raw = lookup(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_format(name, raw, f"one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}")


def env_choice(name: str, choices: Sequence[str], default: str) -> str:
    """Read ``name`` case-insensitively as one of ``choices`` (given in upper case)."""
    raw = lookup(name)
    if raw is None:
        return default
    value = raw.upper()
    if value not in choices:
        raise ConfigurationError.invalid_format(name, raw, f"one of {', '.join(choices)}")
    return value
