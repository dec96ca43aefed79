from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from rotatelog.env import get_logging_env


class ConsoleGateFilter(logging.Filter):
    """
    Drop console output entirely in quiet mode.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not get_logging_env().quiet


def build_console_handler(level: int = logging.NOTSET) -> logging.Handler:
    # Console resolved per call so captured stdout (tests, pipes) is honoured
    console = Console(file=sys.stdout, soft_wrap=True)

    handler = RichHandler(
        console=console,
        level=level,
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
    )

    # RichHandler renders the level column; don't repeat it here.
    handler.setFormatter(logging.Formatter("%(message)s"))

    handler.addFilter(ConsoleGateFilter())
    return handler
