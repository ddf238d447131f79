"""Runtime subpackage public exports."""

from .logging_utils import (
    ROOT_LOGGER_NAME,
    configure_verbosity,
    ensure_console_handler,
    get_logger,
)

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
    "ensure_console_handler",
    "configure_verbosity",
]
