from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence, Union

from rotatelog.archive.files import file_size, remove_file, truncated_mb
from rotatelog.archive.sorting import LogArchiveEntry
from rotatelog.logger import get_logger

log = get_logger("rotatelog.retention")

Remover = Callable[[Path], bool]
SizeOf = Callable[[Path], int]


# ------------------------------------------------------------
# Policies
# ------------------------------------------------------------


@dataclass(frozen=True)
class CountLimit:
    limit: int


@dataclass(frozen=True)
class SizeLimit:
    megabytes: int


RetentionPolicy = Union[CountLimit, SizeLimit]


@dataclass
class PurgeResult:
    deleted: list[Path] = field(default_factory=list)
    retained: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, str]] = field(default_factory=list)


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------


def _delete(path: Path, remove: Remover, result: PurgeResult) -> None:
    try:
        removed = remove(path)
    except OSError as e:
        result.failures.append((path, str(e)))
        return
    if not removed:
        # gone before we got to it; not a deletion of ours
        log.debug(f"Already gone, nothing to purge: {path.name}")
        return
    log.info(f"Purged {path.name}")
    result.deleted.append(path)


# ------------------------------------------------------------
# Count policy
# ------------------------------------------------------------


def purge_by_count(
    entries: Sequence[LogArchiveEntry],
    purge_limit: int,
    *,
    remove: Remover = remove_file,
) -> PurgeResult:
    """
    Keep the newest `purge_limit` entries and delete the rest.

    `entries` must already be sorted oldest first.
    """
    if purge_limit <= 0:
        raise ValueError(f"purge_limit must be positive, got {purge_limit}")

    result = PurgeResult()
    excess = len(entries) - purge_limit
    if excess <= 0:
        result.retained = [e.path for e in entries]
        log.debug(f"{len(entries)} archive(s) within count limit {purge_limit}")
        return result

    log.debug(f"{len(entries)} archive(s) over count limit {purge_limit}, deleting {excess}")
    for entry in entries[:excess]:
        _delete(entry.path, remove, result)
    result.retained = [e.path for e in entries[excess:]]
    return result


# ------------------------------------------------------------
# Size policy
# ------------------------------------------------------------


def purge_by_size(
    entries: Sequence[LogArchiveEntry],
    purge_size: int,
    *,
    size_of: SizeOf = file_size,
    remove: Remover = remove_file,
) -> PurgeResult:
    """
    Walk entries newest first, summing truncated megabytes.

    Every file seen once the running total exceeds `purge_size` is
    deleted, including the one that crossed it. The total is never
    reset, so the result is a single chronological cutoff rather than a
    cap on retained bytes.
    """
    if purge_size <= 0:
        raise ValueError(f"purge_size must be positive, got {purge_size}")

    result = PurgeResult()
    total_mb = 0
    for entry in reversed(entries):
        total_mb += truncated_mb(size_of(entry.path))
        if total_mb > purge_size:
            _delete(entry.path, remove, result)
        else:
            result.retained.append(entry.path)

    result.retained.reverse()
    log.debug(f"Size purge: {total_mb} MB seen against limit {purge_size} MB")
    return result


def apply_policy(
    entries: Sequence[LogArchiveEntry],
    policy: RetentionPolicy,
    *,
    remove: Remover = remove_file,
) -> PurgeResult:
    if isinstance(policy, CountLimit):
        return purge_by_count(entries, policy.limit, remove=remove)
    if isinstance(policy, SizeLimit):
        return purge_by_size(entries, policy.megabytes, remove=remove)
    raise TypeError(f"Unknown retention policy: {policy!r}")


__all__ = [
    "CountLimit",
    "SizeLimit",
    "RetentionPolicy",
    "PurgeResult",
    "purge_by_count",
    "purge_by_size",
    "apply_policy",
]
