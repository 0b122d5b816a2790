# SPDX-License-Identifier: MIT
"""Centralized logger configuration.

Usage:
    from webring.logger import get_logger
    logger = get_logger(__name__)

setup_logging() is called by the CLI and again when WebringApp starts; only
the first call attaches a handler.

The TUI owns the terminal, so records go to webring.log in the state
directory instead of stderr.
"""
import logging
import os
from typing import List, Optional

from webring.paths import PathResolver

ROOT_LOGGER = "webring"
HANDLER_NAME = "webring-log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level_from_env() -> int:
    name = os.getenv("WEBRING_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.INFO


def _own_handlers(root: logging.Logger) -> List[logging.Handler]:
    return [h for h in root.handlers if h.get_name() == HANDLER_NAME]


def setup_logging(level: Optional[int] = None) -> None:
    """Attach a file handler to the package root logger.

    Falls back to a stderr handler when the state directory can't be created.
    Handlers added by others (pytest's capture handlers, for one) are left alone.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if _own_handlers(root):
        return
    root.setLevel(level if level is not None else _level_from_env())
    root.propagate = False

    log_path = PathResolver.log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def reset_logger() -> None:
    """Close and drop our handler so the next setup_logging() picks up a new state dir."""
    root = logging.getLogger(ROOT_LOGGER)
    for handler in _own_handlers(root):
        root.removeHandler(handler)
        handler.close()


def get_logger(name: str) -> logging.Logger:
    """Module logger under the package root. Handlers are attached by setup_logging()."""
    return logging.getLogger(name)
