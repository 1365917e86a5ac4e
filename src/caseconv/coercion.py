"""Input coercion shared by the case converters."""

from typing import Any


def coerce_text(value: Any) -> str:
    """Return ``value`` as text, mapping ``None`` to an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
