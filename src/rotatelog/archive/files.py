from __future__ import annotations

from pathlib import Path

from rotatelog.logger import get_logger

log = get_logger("rotatelog.files")

BYTES_PER_MB = 1_000_000


def remove_file(path: Path) -> bool:
    """
    Unlink a single file.

    Returns False when the file was already gone. Other OS errors are
    logged and re-raised so the caller can record them and move on.
    """
    try:
        Path(path).unlink()
    except FileNotFoundError:
        log.debug(f"Already gone: {path}")
        return False
    except OSError as e:
        log.warning(f"Cannot delete '{path}': {e}")
        raise
    return True


def file_size(path: Path) -> int:
    """Byte size of a file, or 0 if it can no longer be read."""
    try:
        return Path(path).stat().st_size
    except OSError:
        return 0


def truncated_mb(size: int) -> int:
    return size // BYTES_PER_MB
