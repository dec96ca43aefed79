from __future__ import annotations

import subprocess
import tarfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Protocol

from rotatelog.archive.errors import CompressionError
from rotatelog.archive.files import remove_file
from rotatelog.archive.listing import log_files
from rotatelog.archive.retention import Remover
from rotatelog.logger import get_logger

log = get_logger("rotatelog.compress")


class Compressor(Protocol):
    def compress(self, path: Path) -> Path:
        """Archive `path` beside itself and return the archive path."""
        ...


def archive_path_for(path: Path) -> Path:
    name = path.name
    if name.endswith(".log"):
        name = name[: -len(".log")]
    return path.parent / f"{name}.tar.gz"


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass


# ------------------------------------------------------------
# Implementations
# ------------------------------------------------------------


class TarGzCompressor:
    """In-process tar + gzip (level 9). Members are stored by bare filename."""

    def __init__(self, compresslevel: int = 9):
        self.compresslevel = compresslevel

    def compress(self, path: Path) -> Path:
        path = Path(path)
        dest = archive_path_for(path)
        try:
            with tarfile.open(dest, "w:gz", compresslevel=self.compresslevel) as tar:
                tar.add(path, arcname=path.name)
        except (OSError, tarfile.TarError) as e:
            _discard(dest)
            raise CompressionError(path, str(e)) from e
        return dest


class ShellCompressor:
    """`tar cf - <name> | gzip -9 > <stem>.tar.gz`, run from the log's directory."""

    def __init__(self, tar_bin: str = "tar", gzip_bin: str = "gzip"):
        self.tar_bin = tar_bin
        self.gzip_bin = gzip_bin

    def compress(self, path: Path) -> Path:
        path = Path(path)
        dest = archive_path_for(path)
        cwd = str(path.parent)

        try:
            with dest.open("wb") as out:
                tar = subprocess.Popen(
                    [self.tar_bin, "cf", "-", path.name],
                    cwd=cwd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                )
                try:
                    gz = subprocess.run(
                        [self.gzip_bin, "-9"],
                        cwd=cwd,
                        stdin=tar.stdout,
                        stdout=out,
                        stderr=subprocess.PIPE,
                    )
                finally:
                    if tar.stdout is not None:
                        tar.stdout.close()
                    tar_err = tar.stderr.read() if tar.stderr is not None else b""
                    tar.wait()
        except OSError as e:
            _discard(dest)
            raise CompressionError(path, str(e)) from e

        if tar.returncode != 0 or gz.returncode != 0:
            _discard(dest)
            detail = (tar_err or gz.stderr or b"").decode("utf-8", errors="replace").strip()
            raise CompressionError(
                path,
                detail or f"tar exit {tar.returncode}, gzip exit {gz.returncode}",
            )
        return dest


def build_compressor(config) -> Compressor:
    if config.compressor == "shell":
        return ShellCompressor(tar_bin=config.tar_bin, gzip_bin=config.gzip_bin)
    return TarGzCompressor()


# ------------------------------------------------------------
# Stage
# ------------------------------------------------------------


@dataclass
class CompressResult:
    archived: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, str]] = field(default_factory=list)


def compress_logs(
    paths: Iterable[Path],
    compressor: Compressor,
    *,
    remove: Remover = remove_file,
) -> CompressResult:
    """Archive every `.log` in the listing, deleting each source once archived."""
    result = CompressResult()
    for src in log_files(paths):
        try:
            dest = compressor.compress(src)
        except CompressionError as e:
            log.error(f"Cannot compress log file '{src}'")
            log.debug(str(e))
            result.failures.append((src, str(e)))
            continue

        try:
            remove(src)
        except OSError as e:
            result.failures.append((src, str(e)))

        log.info(f"Compressed {src.name} -> {dest.name}")
        result.archived.append(dest)
    return result


__all__ = [
    "Compressor",
    "TarGzCompressor",
    "ShellCompressor",
    "CompressResult",
    "archive_path_for",
    "build_compressor",
    "compress_logs",
]
