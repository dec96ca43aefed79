import logging
import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_env_and_state(monkeypatch, tmp_path):
    """
    Ensure tests don't leak env, logger state, or cached env views.
    """
    for k in list(os.environ):
        if k.startswith("ROTATELOG_"):
            monkeypatch.delenv(k, raising=False)

    # Never pick up a developer's .env
    monkeypatch.setenv("ROTATELOG_ENV_FILE", str(tmp_path / "missing.env"))

    import rotatelog.bootstrap
    import rotatelog.env.env
    import rotatelog.logger.state

    rotatelog.bootstrap._BOOTSTRAPPED = False
    rotatelog.env.env.reset_env_caches()
    rotatelog.logger.state.INITIALIZED = False
    rotatelog.logger.state.LOG_FILE_PATH = None

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    yield

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()


@pytest.fixture
def make_logs(tmp_path):
    """Create files in tmp_path; `sizes` maps name -> byte count (default 1)."""

    def _make(*names: str, sizes: dict | None = None) -> list[Path]:
        sizes = sizes or {}
        out = []
        for name in names:
            p = tmp_path / name
            p.write_bytes(b"x" * sizes.get(name, 1))
            out.append(p)
        return out

    return _make
