from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ------------------------------------------------------------
# Paths
# ------------------------------------------------------------

DEFAULT_ENV_FILE = Path(".env")


def env_file_path() -> Path:
    raw = os.environ.get("ROTATELOG_ENV_FILE")
    return Path(raw).expanduser() if raw else DEFAULT_ENV_FILE


# ------------------------------------------------------------
# Errors / helpers
# ------------------------------------------------------------


class ConfigError(RuntimeError):
    pass


def _as_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _choice(name: str, default: str, allowed: set[str]) -> str:
    v = os.environ.get(name, default).strip().lower() or default
    if v not in allowed:
        raise ConfigError(
            f"Invalid value for {name}: {v!r} (expected one of {', '.join(sorted(allowed))})"
        )
    return v


# ------------------------------------------------------------
# Logging environment (SAFE ANYWHERE)
# ------------------------------------------------------------


@dataclass(frozen=True)
class LoggingEnvironment:
    log_level: str
    verbose: bool
    quiet: bool
    log_file: Optional[Path]


def get_logging_env() -> LoggingEnvironment:
    log_file = os.environ.get("ROTATELOG_LOG_FILE")
    return LoggingEnvironment(
        log_level=os.environ.get("ROTATELOG_LOG_LEVEL", "INFO"),
        verbose=_as_bool(os.environ.get("ROTATELOG_VERBOSE", "0")),
        quiet=_as_bool(os.environ.get("ROTATELOG_QUIET", "0")),
        log_file=Path(log_file).expanduser() if log_file else None,
    )


# ------------------------------------------------------------
# Tool environment
# ------------------------------------------------------------


COMPRESSORS = {"tarfile", "shell"}


class Environment:
    def __init__(self):
        # Logging snapshot (immutable)
        self._logging = get_logging_env()

        self.compressor = _choice("ROTATELOG_COMPRESSOR", "tarfile", COMPRESSORS)
        self.tar_bin = os.environ.get("ROTATELOG_TAR", "tar") or "tar"
        self.gzip_bin = os.environ.get("ROTATELOG_GZIP", "gzip") or "gzip"

    def as_dict(self) -> dict:
        return {
            "Logging": {
                "log_level": self.log_level,
                "verbose": self.verbose,
                "quiet": self.quiet,
                "log_file": str(self.log_file) if self.log_file else None,
            },
            "Archive": {
                "compressor": self.compressor,
                "tar_bin": self.tar_bin,
                "gzip_bin": self.gzip_bin,
            },
        }

    # ---- logging passthrough ----
    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def verbose(self) -> bool:
        return self._logging.verbose

    @property
    def quiet(self) -> bool:
        return self._logging.quiet

    @property
    def log_file(self) -> Optional[Path]:
        return self._logging.log_file


_ENV: Optional[Environment] = None


def reset_env_caches() -> None:
    """Invalidate cached views of environment variables."""
    global _ENV
    _ENV = None


def get_env() -> Environment:
    global _ENV
    if _ENV is None:
        _ENV = Environment()
    return _ENV
