from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rotatelog.archive.errors import DirectoryOpenError
from rotatelog.archive.files import remove_file
from rotatelog.archive.retention import PurgeResult, Remover
from rotatelog.logger import get_logger

log = get_logger("rotatelog.listing")

ARCHIVE_SUFFIXES = (".tar.gz", ".log")


def scan_directory(directory: Path) -> list[Path]:
    """All non-hidden entries of `directory`, as full paths."""
    try:
        names = sorted(p.name for p in Path(directory).iterdir())
    except OSError as e:
        raise DirectoryOpenError(directory, e.strerror) from e

    return [Path(directory) / n for n in names if not n.startswith(".")]


def archive_candidates(paths: Iterable[Path]) -> list[Path]:
    return [p for p in paths if p.name.endswith(ARCHIVE_SUFFIXES)]


def log_files(paths: Iterable[Path]) -> list[Path]:
    return [p for p in paths if p.name.endswith(".log")]


def text_files(paths: Iterable[Path]) -> list[Path]:
    return [p for p in paths if p.name.endswith(".txt")]


def delete_text_files(
    paths: Iterable[Path],
    *,
    remove: Remover = remove_file,
) -> PurgeResult:
    result = PurgeResult()
    for p in text_files(paths):
        try:
            if not remove(p):
                continue
        except OSError as e:
            result.failures.append((p, str(e)))
            continue
        log.debug(f"Deleted text file {p.name}")
        result.deleted.append(p)
    return result


__all__ = [
    "ARCHIVE_SUFFIXES",
    "scan_directory",
    "archive_candidates",
    "log_files",
    "text_files",
    "delete_text_files",
]
