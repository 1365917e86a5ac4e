"""String case conversion utilities.

See individual module documentation for detailed information.
"""

from .camel_case import to_camel_case
from .coercion import coerce_text
from .config import ConfigurationError, Settings, converter_settings, load_settings, reset_settings
from .dot_case import to_dot_case
from .kebab_case import kebab_case
from .keys import convert_keys
from .logging_config import setup_logging
from .numeric import AdditionResult, AdditionStatus, add_numbers, parse_number, sum_numbers
from .tokenizer import split_words

# Aliases matching the camelCase names used by JavaScript callers
toCamelCase = to_camel_case
kebabCase = kebab_case
toDotCase = to_dot_case
addNumbers = add_numbers

__all__ = [
    "AdditionResult",
    "AdditionStatus",
    "ConfigurationError",
    "Settings",
    "addNumbers",
    "add_numbers",
    "coerce_text",
    "convert_keys",
    "converter_settings",
    "kebabCase",
    "kebab_case",
    "load_settings",
    "parse_number",
    "reset_settings",
    "setup_logging",
    "split_words",
    "sum_numbers",
    "toCamelCase",
    "toDotCase",
    "to_camel_case",
    "to_dot_case",
]
