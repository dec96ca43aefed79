from __future__ import annotations

import logging
from pathlib import Path

FILE_FORMAT = "%(asctime)s | [%(levelname)s] | %(name)s | %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_file_handler(logfile: Path) -> logging.FileHandler:
    """Append-mode handler for the tool's own run log (not the managed logs)."""
    logfile.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(logfile, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    return handler


def close_file_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler):
            root.removeHandler(h)
            h.close()
