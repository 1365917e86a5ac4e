"""dot.case conversion."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .tokenizer import split_words

logger = logging.getLogger(__name__)

__all__ = ["to_dot_case"]


def to_dot_case(value: Any, *, unicode_words: Optional[bool] = None) -> str:
    """
    Convert text to dot.case.

    camelCase and PascalCase transitions split words (``v2Release`` becomes
    ``v2.release``, ``XMLHttp`` becomes ``xml.http``). Spaces, underscores,
    dashes, dots and any other punctuation are separators, and runs of them
    collapse into a single dot.

    Args:
        value: Text to convert. ``None`` gives an empty string and other
            non-string values are converted with ``str()``.
        unicode_words: Treat non-ASCII letters and digits as word characters.
            ``None`` uses the configured default.

    Returns:
        Lowercase words joined by dots.

    Example:
        >>> to_dot_case("HelloWorld")
        'hello.world'
        >>> to_dot_case(" already . dot.CASE ")
        'already.dot.case'
    """
    words = split_words(value, camel_boundaries=True, unicode_words=unicode_words)
    if not words:
        logger.debug("No words found in %r; returning empty dot.case", value)
    return ".".join(words)
