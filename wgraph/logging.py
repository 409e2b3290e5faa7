"""Logging setup shared by every wgraph module.

All module loggers are children of the ``wgraph`` logger, which owns the only
handler. The starting level can be chosen with the ``WGRAPH_LOG_LEVEL``
environment variable (e.g. ``WGRAPH_LOG_LEVEL=debug``).
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "wgraph"
LOG_LEVEL_ENV = "WGRAPH_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant.

    Unknown or empty names give ``default``.
    """
    if not name:
        return default
    value = getattr(logging, name.strip().upper(), None)
    return value if isinstance(value, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``wgraph`` logger.

    Only the first call has an effect; use ``reset_logging`` to start over.

    Args:
        level: Logging level. Defaults to ``WGRAPH_LOG_LEVEL`` or INFO.
        format_string: Record format (optional).
        handler: Destination handler (optional, stdout stream by default).
    """
    global _configured
    if _configured:
        return

    if level is None:
        level = level_from_name(os.getenv(LOG_LEVEL_ENV))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    target = handler if handler is not None else logging.StreamHandler(sys.stdout)
    target.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(target)
    # pytest's caplog listens on the stdlib root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` with its level left to the wgraph root.

    Args:
        name: Logger name, normally the calling module's ``__name__``.

    Returns:
        The logger instance.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the wgraph root logger and its handler."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the handler and level so the next call configures from scratch."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
