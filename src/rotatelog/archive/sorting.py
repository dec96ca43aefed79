from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from rotatelog.archive.dates import ParsedDate, extract_date, is_parsed
from rotatelog.logger import get_logger

log = get_logger("rotatelog.sorting")


@dataclass(frozen=True)
class LogArchiveEntry:
    path: Path
    date: ParsedDate


def sort_chronologically(paths: Iterable[Path | str]) -> list[LogArchiveEntry]:
    """
    Order archive candidates oldest first by the date in their filename.

    Names without a numeric triple are left out of the result.
    """
    entries: list[LogArchiveEntry] = []
    for raw in paths:
        p = Path(raw)
        result = extract_date(p)
        if not is_parsed(result):
            log.debug(f"No date in filename, skipping: {p.name}")
            continue
        entries.append(LogArchiveEntry(path=p, date=result))

    # sorted() is stable, so full ties keep listing order
    return sorted(entries, key=lambda e: e.date.sort_key)


__all__ = ["LogArchiveEntry", "sort_chronologically"]
