"""kebab-case conversion.

Unlike the camelCase and dot.case converters this one does not split on
casing transitions: ``helloWorld`` becomes ``helloworld``. Accented letters
are folded to their base letter and any other character outside ``a-z``,
``0-9`` and the hyphen is dropped.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Any

logger = logging.getLogger(__name__)

__all__ = ["kebab_case"]

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_SPACE_OR_UNDERSCORE = re.compile(r"[_\s]+")
_DISALLOWED = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-+")


def kebab_case(value: Any) -> str:
    """
    Convert text to kebab-case.

    Args:
        value: Text to convert. Falsy values (``None``, ``""``, ``0``,
            ``False``) give an empty string.

    Returns:
        Lowercase ASCII words joined by single hyphens.

    Example:
        >>> kebab_case("Hello, World! This is kebab_case.")
        'hello-world-this-is-kebab-case'
        >>> kebab_case("Crème brûlée")
        'creme-brulee'
    """
    if not value:
        return ""

    text = unicodedata.normalize("NFKD", str(value))
    text = _COMBINING_MARKS.sub("", text).lower()
    text = _SPACE_OR_UNDERSCORE.sub("-", text)
    text = _DISALLOWED.sub("", text)
    text = _HYPHEN_RUNS.sub("-", text).strip("-")

    if not text:
        logger.debug("Nothing left of %r after kebab-case normalization", value)
    return text
