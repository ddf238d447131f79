"""Logging helpers for rational_kit.

The library itself only logs at DEBUG and never configures the root logger;
a console handler is attached on request (the CLI's ``--verbose``).
"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "rational_kit"
_CONSOLE_HANDLER_NAME = "rational_kit_console"
_DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for a module name.

    Example:
        >>> get_logger("rational_kit.helpers.ranges").name
        'rational_kit.helpers.ranges'
        >>> get_logger("ranges").name
        'rational_kit.ranges'
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _find_console_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if getattr(handler, "name", None) == _CONSOLE_HANDLER_NAME:
            return handler
    return None


def ensure_console_handler(
    logger: logging.Logger,
    *,
    enabled: bool,
    level: int = logging.INFO,
    fmt: str = _DEFAULT_FORMAT,
) -> None:
    """Attach/remove the named console handler without touching root logging."""
    existing = _find_console_handler(logger)

    if not enabled:
        if existing is not None:
            logger.removeHandler(existing)
        return

    if existing is None:
        existing = logging.StreamHandler()
        existing.name = _CONSOLE_HANDLER_NAME
        logger.addHandler(existing)
    existing.setFormatter(logging.Formatter(fmt))
    existing.setLevel(level)

    logger.setLevel(level)
    # Avoid double-printing when the application configured root handlers.
    logger.propagate = False


def configure_verbosity(verbose: bool) -> logging.Logger:
    """Console logging for command-line use: DEBUG when verbose, otherwise off."""
    logger = get_logger()
    ensure_console_handler(logger, enabled=verbose, level=logging.DEBUG)
    return logger


__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
    "ensure_console_handler",
    "configure_verbosity",
]
