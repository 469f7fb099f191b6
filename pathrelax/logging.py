"""Package logger setup for pathrelax.

Every module logs through ``get_logger(__name__)``. Those loggers sit below the
``pathrelax`` package logger, which carries the only handler and the level;
adjust verbosity with ``logging.getLogger("pathrelax").setLevel(...)``.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "pathrelax"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach the package handler and return the ``pathrelax`` logger.

    Only the first call configures anything; later calls return the logger
    as it is.

    Args:
        level: Level of the package logger.
        format_string: Record format, ``DEFAULT_FORMAT`` if omitted.
        handler: Destination, a stdout ``StreamHandler`` if omitted.
    """
    global _configured

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _configured:
        return package_logger

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _configured = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under ``pathrelax`` that inherits its level and handler.

    Names outside the package namespace are prefixed with ``pathrelax.``.
    """
    setup_root_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
