from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from rotatelog.archive.compress import Compressor, build_compressor, compress_logs
from rotatelog.archive.errors import InputFileMissing
from rotatelog.archive.listing import (
    archive_candidates,
    delete_text_files,
    scan_directory,
)
from rotatelog.archive.retention import (
    CountLimit,
    PurgeResult,
    RetentionPolicy,
    SizeLimit,
    apply_policy,
)
from rotatelog.archive.rotate import move_live_log
from rotatelog.archive.sorting import sort_chronologically
from rotatelog.branding import ROTATELOG_HEADER, ROTATELOG_SECTION_END, SYMBOLS
from rotatelog.config import RotateConfig
from rotatelog.logger import get_logger

log = get_logger("rotatelog.runner")


class RunResult(str, Enum):
    OK = "ok"
    PARTIAL = "partial"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class StageResult:
    name: str
    state: RunResult
    affected: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, str]] = field(default_factory=list)
    reason: Optional[str] = None


@dataclass(frozen=True)
class RunOutcome:
    overall: RunResult
    stages: list[StageResult]

    def stage(self, name: str) -> StageResult | None:
        for s in self.stages:
            if s.name == name:
                return s
        return None


STAGE_COMPRESS = "Compress"
STAGE_TEXT = "Delete text"
STAGE_MOVE = "Move"
STAGE_PURGE_COUNT = "Purge (count)"
STAGE_PURGE_SIZE = "Purge (size)"


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------


def _skipped(name: str) -> StageResult:
    return StageResult(name=name, state=RunResult.SKIPPED)


def _from_failures(
    name: str, affected: list[Path], failures: list[tuple[Path, str]]
) -> StageResult:
    state = RunResult.PARTIAL if failures else RunResult.OK
    return StageResult(name=name, state=state, affected=affected, failures=failures)


def _log_stage(result: StageResult) -> None:
    if result.state == RunResult.SKIPPED:
        log.debug(f"{SYMBOLS.SKIPPED} {result.name}: skipped")
        return

    symbol = SYMBOLS.OK if result.state == RunResult.OK else SYMBOLS.FAIL
    summary = f"{symbol} {result.name}: {len(result.affected)} file(s)"
    if result.failures:
        summary += f", {len(result.failures)} failure(s)"
    if result.reason:
        summary += f" ({result.reason})"
    log.info(summary)


def _overall(stages: list[StageResult]) -> RunResult:
    states = {s.state for s in stages}
    if RunResult.FAILED in states or RunResult.PARTIAL in states:
        return RunResult.PARTIAL
    return RunResult.OK


def policies_for(config: RotateConfig) -> list[RetentionPolicy]:
    """Enabled retention policies, count first then size."""
    policies: list[RetentionPolicy] = []
    if config.purge_limit:
        policies.append(CountLimit(config.purge_limit))
    if config.purge_size:
        policies.append(SizeLimit(config.purge_size))
    return policies


# ------------------------------------------------------------
# Stages
# ------------------------------------------------------------


def _run_compress(listing: list[Path], compressor: Compressor) -> StageResult:
    res = compress_logs(listing, compressor)
    return _from_failures(STAGE_COMPRESS, res.archived, res.failures)


def _run_delete_text(listing: list[Path]) -> StageResult:
    res = delete_text_files(listing)
    return _from_failures(STAGE_TEXT, res.deleted, res.failures)


def _run_move(config: RotateConfig) -> StageResult:
    assert config.input_file is not None
    try:
        dest = move_live_log(config.input_file, config.output_dir)
    except InputFileMissing as e:
        log.error(str(e))
        return StageResult(
            name=STAGE_MOVE,
            state=RunResult.FAILED,
            failures=[(config.input_file, str(e))],
            reason="input missing",
        )
    except OSError as e:
        log.error(f"Cannot move '{config.input_file}': {e}")
        return StageResult(
            name=STAGE_MOVE,
            state=RunResult.FAILED,
            failures=[(config.input_file, str(e))],
        )
    return StageResult(name=STAGE_MOVE, state=RunResult.OK, affected=[dest])


def _run_purge(name: str, listing: list[Path], policy: RetentionPolicy) -> StageResult:
    entries = sort_chronologically(archive_candidates(listing))
    res: PurgeResult = apply_policy(entries, policy)
    return _from_failures(name, res.deleted, res.failures)


# ------------------------------------------------------------
# Core execution
# ------------------------------------------------------------


def run(config: RotateConfig, *, compressor: Compressor | None = None) -> RunOutcome:
    """
    Execute every requested step against `config.output_dir`, in order:
    compress, delete text files, move the live log, purge by count,
    purge by size.

    DirectoryOpenError propagates; every other failure is per-file and
    recorded on the stage result.
    """
    log.info(ROTATELOG_HEADER(f"rotatelog: {config.output_dir}"))

    listing = scan_directory(config.output_dir)
    log.debug(f"{len(listing)} entr(ies) in {config.output_dir}")

    stages: list[StageResult] = []

    if config.compress:
        stages.append(_run_compress(listing, compressor or build_compressor(config)))
    else:
        stages.append(_skipped(STAGE_COMPRESS))

    if config.delete_text:
        stages.append(_run_delete_text(listing))
    else:
        stages.append(_skipped(STAGE_TEXT))

    if config.input_file:
        stages.append(_run_move(config))
    else:
        stages.append(_skipped(STAGE_MOVE))

    policies = policies_for(config)
    # Both policies see one post-compress/move listing.
    purge_listing = scan_directory(config.output_dir) if policies else []
    for name, kind in ((STAGE_PURGE_COUNT, CountLimit), (STAGE_PURGE_SIZE, SizeLimit)):
        policy = next((p for p in policies if isinstance(p, kind)), None)
        if policy is None:
            stages.append(_skipped(name))
        else:
            stages.append(_run_purge(name, purge_listing, policy))

    for s in stages:
        _log_stage(s)

    outcome = RunOutcome(overall=_overall(stages), stages=stages)
    log.info(ROTATELOG_SECTION_END())
    return outcome
