"""Word-boundary tokenizer shared by the camelCase and dot.case converters.

A word is a maximal run of word characters. Everything else is a separator:
runs of separators collapse into one boundary and leading or trailing
separators are dropped. Digits are ordinary word characters and stay inside the
token they appear in.

Word characters are ASCII letters and digits unless ``unicode_words`` is
enabled, in which case any Unicode letter or digit qualifies, together with
combining marks. Casing transitions (``aB`` and ``ABc``) are only detected
between ASCII letters in both modes.
"""

from __future__ import annotations

import re
import unicodedata
from itertools import groupby
from typing import Any, List, Optional

from .coercion import coerce_text
from .config import converter_settings

__all__ = ["has_separator", "insert_case_boundaries", "split_words"]

_ASCII_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")

_LOWER_TO_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_TO_WORD = re.compile(r"([A-Z])([A-Z][a-z])")


def _resolve_unicode_words(unicode_words: Optional[bool]) -> bool:
    if unicode_words is None:
        return converter_settings().unicode_words
    return unicode_words


def _is_unicode_word_char(char: str) -> bool:
    # lower() can emit combining marks ("İ" -> "i" + U+0307); they stay in the word
    return char.isalnum() or unicodedata.category(char).startswith("M")


def _unicode_words(text: str) -> List[str]:
    runs = ("".join(run) for is_word, run in groupby(text, key=_is_unicode_word_char) if is_word)
    return [run for run in runs if any(char.isalnum() for char in run)]


def insert_case_boundaries(text: str) -> str:
    """Insert a space at every camelCase and acronym-to-word transition.

    Example:
        >>> insert_case_boundaries("XMLHttpRequest")
        'XML Http Request'
        >>> insert_case_boundaries("v2Release")
        'v2 Release'
    """
    spaced = _LOWER_TO_UPPER.sub(r"\1 \2", text)
    return _ACRONYM_TO_WORD.sub(r"\1 \2", spaced)


def has_separator(value: Any, *, unicode_words: Optional[bool] = None) -> bool:
    """Return True if the text contains at least one separator character."""
    text = coerce_text(value)
    if _resolve_unicode_words(unicode_words):
        return not all(_is_unicode_word_char(char) for char in text)
    return _ASCII_SEPARATORS.search(text) is not None


def split_words(value: Any, *, camel_boundaries: bool = False, unicode_words: Optional[bool] = None) -> List[str]:
    """
    Split text into lowercase word tokens.

    Args:
        value: Text to split. ``None`` is treated as empty and other
            non-string values are converted with ``str()``.
        camel_boundaries: Also split on camelCase and acronym transitions.
        unicode_words: Treat non-ASCII letters and digits as word characters.
            ``None`` uses the configured default.

    Returns:
        The tokens in order, lowercased. Empty when the text has no word
        characters.

    Example:
        >>> split_words("FOO_BAR-baz")
        ['foo', 'bar', 'baz']
        >>> split_words("some_text-toConvert", camel_boundaries=True)
        ['some', 'text', 'to', 'convert']
    """
    text = coerce_text(value)
    if camel_boundaries:
        text = insert_case_boundaries(text)
    if _resolve_unicode_words(unicode_words):
        return [word.lower() for word in _unicode_words(text)]
    return [part.lower() for part in _ASCII_SEPARATORS.split(text) if part]
