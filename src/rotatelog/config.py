"""
Run configuration.

Built once from parsed CLI arguments plus the environment and handed to
every stage. Nothing here is mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rotatelog.env import ConfigError, Environment, get_env


def normalize_dir(raw: str) -> Path:
    # "-d logs/" and "-d logs" name the same directory
    stripped = raw.rstrip("/")
    return Path(stripped or "/")


@dataclass(frozen=True)
class RotateConfig:
    output_dir: Path
    compress: bool = False
    delete_text: bool = False
    input_file: Optional[Path] = None
    purge_limit: int = 0
    purge_size: int = 0

    compressor: str = "tarfile"
    tar_bin: str = "tar"
    gzip_bin: str = "gzip"

    def __post_init__(self):
        if self.purge_limit < 0:
            raise ConfigError(f"Purge count must not be negative: {self.purge_limit}")
        if self.purge_size < 0:
            raise ConfigError(f"Purge size must not be negative: {self.purge_size}")


def load_config(
    *,
    output_dir: str | None,
    compress: bool = False,
    delete_text: bool = False,
    input_file: str | None = None,
    purge_limit: int | None = None,
    purge_size: int | None = None,
    env: Environment | None = None,
) -> RotateConfig:
    if not output_dir:
        raise ConfigError("No output directory provided")

    e = env or get_env()
    return RotateConfig(
        output_dir=normalize_dir(output_dir),
        compress=compress,
        delete_text=delete_text,
        input_file=Path(input_file) if input_file else None,
        purge_limit=purge_limit or 0,
        purge_size=purge_size or 0,
        compressor=e.compressor,
        tar_bin=e.tar_bin,
        gzip_bin=e.gzip_bin,
    )
