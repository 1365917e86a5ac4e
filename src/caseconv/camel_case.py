"""camelCase conversion."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .coercion import coerce_text
from .config import converter_settings
from .tokenizer import has_separator, split_words

logger = logging.getLogger(__name__)

__all__ = ["to_camel_case"]


def to_camel_case(
    value: Any,
    *,
    preserve_unseparated: Optional[bool] = None,
    unicode_words: Optional[bool] = None,
) -> str:
    """
    Convert text to lower camelCase.

    Separator runs mark word boundaries. The first word is lowercased and every
    following word is lowercased with its first character uppercased.

    When ``preserve_unseparated`` is enabled (the default) and the text has no
    separator at all, only its first character is lowercased, so text that is
    already camelCase keeps its shape.

    Args:
        value: Text to convert. ``None`` gives an empty string.
        preserve_unseparated: Keep interior casing of separator-free text.
            ``None`` uses the configured default.
        unicode_words: Treat non-ASCII letters and digits as word characters.
            ``None`` uses the configured default.

    Returns:
        The camelCase text, or an empty string if there are no words.

    Example:
        >>> to_camel_case("FOO_BAR-baz")
        'fooBarBaz'
        >>> to_camel_case("fooBar")
        'fooBar'
        >>> to_camel_case("fooBar", preserve_unseparated=False)
        'foobar'
    """
    text = coerce_text(value)
    words = split_words(text, unicode_words=unicode_words)
    if not words:
        logger.debug("No words found in %r; returning empty camelCase", value)
        return ""

    if preserve_unseparated is None:
        preserve_unseparated = converter_settings().camel_preserve_unseparated
    if preserve_unseparated and not has_separator(text, unicode_words=unicode_words):
        return text[0].lower() + text[1:]

    first, rest = words[0], words[1:]
    return first + "".join(word[0].upper() + word[1:] for word in rest)
