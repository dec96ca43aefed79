"""
Archive directory operations.

- dates / sorting / retention: the purge engine (pure ordering + policies)
- listing / compress / rotate: thin filesystem collaborators
"""
from __future__ import annotations

from rotatelog.archive.dates import ParsedDate, Unparseable, extract_date
from rotatelog.archive.errors import (
    CompressionError,
    DirectoryOpenError,
    InputFileMissing,
    RotateLogError,
)
from rotatelog.archive.retention import (
    CountLimit,
    PurgeResult,
    SizeLimit,
    apply_policy,
    purge_by_count,
    purge_by_size,
)
from rotatelog.archive.sorting import LogArchiveEntry, sort_chronologically

__all__ = [
    "ParsedDate",
    "Unparseable",
    "extract_date",
    "LogArchiveEntry",
    "sort_chronologically",
    "CountLimit",
    "SizeLimit",
    "PurgeResult",
    "apply_policy",
    "purge_by_count",
    "purge_by_size",
    "RotateLogError",
    "DirectoryOpenError",
    "InputFileMissing",
    "CompressionError",
]
