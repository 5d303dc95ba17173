"""Logging setup shared by every module in the package."""

from __future__ import annotations

import logging
import os

ROOT_LOGGER_NAME = "pymupdf_tablestripper"
LOG_LEVEL_ENV = "PYMUPDF_TABLESTRIPPER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LEVEL = logging.WARNING

_configured = False


def resolve_level() -> int:
    """Level named by the environment, or WARNING when unset or unknown."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return DEFAULT_LEVEL
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        logging.getLogger(ROOT_LOGGER_NAME).warning(
            "Ignoring unknown %s=%r, using WARNING", LOG_LEVEL_ENV, raw
        )
        return DEFAULT_LEVEL
    return level


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolve_level())
    _configured = True


def set_verbose(verbose: bool) -> None:
    """Switch the whole package between DEBUG and the configured level."""
    _configure_root()
    level = logging.DEBUG if verbose else resolve_level()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root, configuring the root once."""
    _configure_root()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
