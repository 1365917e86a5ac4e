"""
Logging setup for applications embedding caseconv.

The library itself only creates module loggers under the ``caseconv``
namespace. ``setup_logging`` attaches a single console handler to that
namespace at the configured level.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

from caseconv.config import load_log_level

_config_lock = threading.Lock()
_PACKAGE_LOGGER_NAME = "caseconv"
_HANDLER_NAME = "caseconv-console"


def _build_console_handler(stream: Optional[TextIO]) -> logging.Handler:
    formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    return console_handler


def _find_console_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def setup_logging(level: Optional[str] = None, *, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the ``caseconv`` logger and return it.

    Calling this more than once keeps a single handler and only updates the level.
    """
    resolved_level = (level or load_log_level()).upper()

    with _config_lock:
        package_logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
        handler = _find_console_handler(package_logger)
        if handler is None:
            handler = _build_console_handler(stream)
            package_logger.addHandler(handler)

        package_logger.setLevel(resolved_level)
        handler.setLevel(resolved_level)
        return package_logger
