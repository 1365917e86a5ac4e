"""Recursive key conversion for JSON-like payloads."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Union

from .camel_case import to_camel_case
from .dot_case import to_dot_case
from .kebab_case import kebab_case

logger = logging.getLogger(__name__)

__all__ = ["CONVERTERS", "convert_keys"]

KeyConverter = Callable[[Any], str]

CONVERTERS: Dict[str, KeyConverter] = {
    "camel": to_camel_case,
    "kebab": kebab_case,
    "dot": to_dot_case,
}


def _resolve_converter(converter: Union[str, KeyConverter]) -> KeyConverter:
    if callable(converter):
        return converter
    try:
        return CONVERTERS[converter]
    except KeyError:
        raise ValueError(f"Unknown key converter {converter!r}; expected one of {sorted(CONVERTERS)}") from None


def _convert(payload: Any, converter: KeyConverter) -> Any:
    if isinstance(payload, dict):
        converted: Dict[str, Any] = {}
        for key, value in payload.items():
            new_key = converter(key)
            if new_key in converted:
                logger.warning("Key %r converts to %r, replacing an earlier key", key, new_key)
            converted[new_key] = _convert(value, converter)
        return converted
    if isinstance(payload, list):
        return [_convert(item, converter) for item in payload]
    if isinstance(payload, tuple):
        return tuple(_convert(item, converter) for item in payload)
    return payload


def convert_keys(payload: Any, converter: Union[str, KeyConverter]) -> Any:
    """
    Rebuild ``payload`` with every mapping key passed through ``converter``.

    Dicts, lists and tuples are walked recursively; any other value is
    returned as is. Values are never converted, only keys.

    Args:
        payload: Parsed JSON-like data.
        converter: A callable taking a key, or one of ``"camel"``, ``"kebab"``
            and ``"dot"``.

    Returns:
        A new structure with converted keys.

    Raises:
        ValueError: If ``converter`` is an unknown name.

    Example:
        >>> convert_keys({"user_id": 1, "home_address": {"zip_code": "04101"}}, "camel")
        {'userId': 1, 'homeAddress': {'zipCode': '04101'}}
    """
    return _convert(payload, _resolve_converter(converter))
