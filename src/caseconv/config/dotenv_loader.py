"""Reading ``KEY=value`` files that supply defaults for ``CASECONV_*`` variables."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def parse_dotenv(lines: Iterable[str]) -> Dict[str, str]:
    """
    Collect assignments from .env-style lines.

    Blank lines, ``#`` comments and lines without ``=`` are ignored. An
    ``export`` prefix and one layer of matching quotes around the value are
    removed. A later assignment of the same key replaces an earlier one.

    Example:
        >>> parse_dotenv(["# defaults", "export CASECONV_UNICODE_WORDS='yes'", "junk"])
        {'CASECONV_UNICODE_WORDS': 'yes'}
    """
    values: Dict[str, str] = {}
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, _, raw_value = stripped.partition("=")
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export ") :].strip()
        if not key:
            continue
        value = raw_value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key] = value
    return values


def read_dotenv(path: Path) -> Dict[str, str]:
    """
    Read assignments from ``path``; a missing file gives an empty mapping.

    Raises:
        ConfigurationError: If the file exists but cannot be read or is not UTF-8.
    """
    if not path.is_file():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError.load_failed(path) from exc
    values = parse_dotenv(text.splitlines())
    logger.debug("Read %d assignments from %s", len(values), path)
    return values
