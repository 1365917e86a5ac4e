"""Lenient addition of two values that may arrive as numbers or text.

``sum_numbers`` reports one of three outcomes:

* ``BLANK``: either argument is ``None`` or whitespace-only text.
* ``INVALID``: an argument cannot be read as a number.
* ``VALUE``: both arguments are numeric; ``value`` holds the sum. A sum
  that is itself NaN (for example ``float("nan") + 1``) is still a ``VALUE``.

``add_numbers`` flattens that result into ``None`` / ``nan`` / the sum.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

__all__ = ["AdditionResult", "AdditionStatus", "add_numbers", "parse_number", "sum_numbers"]

Number = Union[int, float]

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY_LITERAL = re.compile(r"([+-]?)Infinity")
_PREFIXED_INTEGER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
# Longer decimal integers are read as float, which overflows to inf
_INT_DIGIT_LIMIT = 4300


class AdditionStatus(Enum):
    BLANK = "blank"
    INVALID = "invalid"
    VALUE = "value"


@dataclass(frozen=True)
class AdditionResult:
    """Outcome of ``sum_numbers``. ``value`` is set only for ``VALUE``."""

    status: AdditionStatus
    value: Optional[Number] = None

    @classmethod
    def blank(cls) -> "AdditionResult":
        return cls(AdditionStatus.BLANK)

    @classmethod
    def invalid(cls) -> "AdditionResult":
        return cls(AdditionStatus.INVALID)

    @classmethod
    def of(cls, value: Number) -> "AdditionResult":
        return cls(AdditionStatus.VALUE, value)

    @property
    def is_blank(self) -> bool:
        return self.status is AdditionStatus.BLANK

    @property
    def is_invalid(self) -> bool:
        return self.status is AdditionStatus.INVALID

    @property
    def is_value(self) -> bool:
        return self.status is AdditionStatus.VALUE

    def as_number(self) -> Optional[Number]:
        """Return the sum, ``math.nan`` for invalid input or ``None`` for blank input."""
        if self.status is AdditionStatus.BLANK:
            return None
        if self.status is AdditionStatus.INVALID:
            return math.nan
        return self.value


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _as_float(value: Number) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _add(left: Number, right: Number) -> Number:
    try:
        return left + right
    except OverflowError:
        # Huge int plus float
        return _as_float(left) + _as_float(right)


def _parse_text(text: str) -> Optional[Number]:
    stripped = text.strip()
    if _DECIMAL_LITERAL.fullmatch(stripped):
        if any(marker in stripped for marker in ".eE"):
            return float(stripped)
        if len(stripped.lstrip("+-")) > _INT_DIGIT_LIMIT:
            return float(stripped)
        try:
            return int(stripped)
        except ValueError:
            # Interpreter configured with a lower int digit limit
            return float(stripped)
    infinity = _INFINITY_LITERAL.fullmatch(stripped)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    if _PREFIXED_INTEGER.fullmatch(stripped):
        return int(stripped, 0)
    return None


def parse_number(value: Any) -> Optional[Number]:
    """
    Read ``value`` as a number, or return ``None`` if it is not one.

    Booleans count as 0 and 1. Text may be a decimal literal with optional sign
    and exponent, ``Infinity`` or a ``0x``/``0o``/``0b`` prefixed integer,
    with surrounding whitespace. Python-only spellings such as ``"inf"``,
    ``"nan"`` or ``"1_000"`` are rejected.

    Example:
        >>> parse_number(" 1.5 ")
        1.5
        >>> parse_number("0x1F")
        31
        >>> parse_number("abc") is None
        True
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, numbers.Real):
        return _as_float(value)
    if isinstance(value, str):
        return _parse_text(value)
    return None


def sum_numbers(a: Any, b: Any) -> AdditionResult:
    """
    Add two values that may be numbers or numeric text.

    Blank arguments are checked before numeric validity, so
    ``sum_numbers("abc", "")`` is ``BLANK``.

    Example:
        >>> sum_numbers("4", "1.5")
        AdditionResult(status=<AdditionStatus.VALUE: 'value'>, value=5.5)
        >>> sum_numbers("", 1).is_blank
        True
    """
    if _is_blank(a) or _is_blank(b):
        logger.debug("Blank operand in addition of %r and %r", a, b)
        return AdditionResult.blank()

    left, right = parse_number(a), parse_number(b)
    if left is None or right is None:
        logger.debug("Non-numeric operand in addition of %r and %r", a, b)
        return AdditionResult.invalid()

    return AdditionResult.of(_add(left, right))


def add_numbers(a: Any, b: Any) -> Optional[Number]:
    """
    Add two values, returning ``None`` for blank input and ``nan`` for non-numeric input.

    Example:
        >>> add_numbers(2, 3)
        5
        >>> add_numbers("", 1) is None
        True
    """
    return sum_numbers(a, b).as_number()
