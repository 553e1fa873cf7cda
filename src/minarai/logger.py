"""
Logging for the Minarai client.

Every module logs through a child of the ``minarai`` logger. The client
configures it from its ``debug`` / ``silent`` flags; payload dumps go
through :func:`log_obj` at DEBUG level.
"""

import json
import logging
import sys
from typing import Any

ROOT_LOGGER = "minarai"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"
# Above CRITICAL; child loggers inherit it.
SILENT = logging.CRITICAL + 1


def get_logger(name: str) -> logging.Logger:
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure(debug: bool = False, silent: bool = False) -> logging.Logger:
    """Apply the ``{debug, silent}`` flags to the ``minarai`` logger.

    ``silent`` wins over ``debug``. A console handler is installed once.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if silent:
        logger.setLevel(SILENT)
    else:
        logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not silent and not any(getattr(h, "_minarai", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._minarai = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


def log_obj(logger: logging.Logger, label: str, obj: Any = None) -> None:
    """Dump a payload as JSON under a label."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    if obj is None:
        logger.debug(label)
        return
    try:
        dumped = json.dumps(obj, ensure_ascii=False, default=str, indent=2)
    except (TypeError, ValueError):
        dumped = repr(obj)
    logger.debug(f"{label}: {dumped}")
