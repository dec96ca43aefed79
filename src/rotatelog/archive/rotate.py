from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from rotatelog.archive.errors import InputFileMissing
from rotatelog.logger import get_logger

log = get_logger("rotatelog.rotate")


def archive_name(day: date) -> str:
    # month-mday-year, no zero padding
    return f"{day.month}-{day.day}-{day.year}.log"


def move_live_log(
    input_file: Path,
    output_dir: Path,
    *,
    today: Optional[date] = None,
) -> Path:
    """
    Move the live log into `output_dir`, renamed after today's date.

    Nothing on disk changes when `input_file` is missing.
    """
    src = Path(input_file)
    if not src.exists():
        raise InputFileMissing(src)

    out = Path(output_dir)
    if not out.exists():
        log.debug(f"Creating {out}")
        out.mkdir(parents=True)

    dest = out / archive_name(today or date.today())
    if dest.exists():
        log.warning(f"Overwriting existing archive {dest}")
    # plain rename: same filesystem only, like the classic script
    src.replace(dest)
    log.info(f"Moved {src} -> {dest}")
    return dest


__all__ = ["archive_name", "move_live_log"]
