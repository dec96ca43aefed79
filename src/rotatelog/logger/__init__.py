from __future__ import annotations

import logging

from rotatelog.env import get_logging_env
from .console import build_console_handler
from .file import build_file_handler, close_file_handlers
from . import state as _state


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _level_to_int(level: str | int) -> int:
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).upper())
    return lvl if isinstance(lvl, int) else logging.INFO


def init_logging() -> None:
    """
    Initialize logging for the entire process.

    - Handlers are attached ONLY to the root logger; rotatelog.* loggers propagate.
    - Calling again with the same log file only refreshes the level.
    """
    env = get_logging_env()
    root = logging.getLogger()

    # verbose forces DEBUG regardless of ROTATELOG_LOG_LEVEL
    root_level = logging.DEBUG if env.verbose else _level_to_int(env.log_level)

    if _state.INITIALIZED and _state.LOG_FILE_PATH == env.log_file:
        root.setLevel(root_level)
        return

    close_file_handlers(root)
    root.handlers.clear()
    root.setLevel(root_level)

    if env.log_file is not None:
        root.addHandler(build_file_handler(env.log_file))

    if not env.quiet:
        root.addHandler(build_console_handler(root_level))

    _state.INITIALIZED = True
    _state.LOG_FILE_PATH = env.log_file
