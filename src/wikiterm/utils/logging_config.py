"""Logging setup shared by the CLI and the terminal session."""

from __future__ import annotations

import logging
import sys

from wikiterm.config import DEFAULT_LOG_LEVEL, WIKITERM_LOG_LEVEL

_ROOT_LOGGER_NAME = "wikiterm"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(level: str | None) -> str:
    """Normalize a level name, falling back to ``DEFAULT_LOG_LEVEL`` if unknown."""
    name = (level or "").strip().upper()
    if name in LOG_LEVELS:
        return name
    return DEFAULT_LOG_LEVEL


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once replaces the handler instead of stacking them.

    Args:
        level: Level name or number. Defaults to ``WIKITERM_LOG_LEVEL``.
            Unknown names fall back to ``DEFAULT_LOG_LEVEL``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    resolved = level if level is not None else WIKITERM_LOG_LEVEL
    if not isinstance(resolved, int):
        resolved = resolve_log_level(resolved)
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        if getattr(handler, "_wikiterm_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._wikiterm_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name == _ROOT_LOGGER_NAME or name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
