from __future__ import annotations

"""bootstrap.py

Process bootstrap for rotatelog.

Rules:
1) Only bootstrap is allowed to *mutate* os.environ for shared run context.
2) Call bootstrap_base_env() once at the true entrypoint.
3) Call bootstrap_run_context() after argparse parsing, before init_logging().
"""

import os

from dotenv import load_dotenv

from rotatelog.env import env_file_path, reset_env_caches


_BOOTSTRAPPED = False


def bootstrap_base_env() -> None:
    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return

    # Optional; shell / CI variables always win.
    dotenv_path = env_file_path()
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=False)

    reset_env_caches()
    _BOOTSTRAPPED = True


def bootstrap_run_context(
    *,
    verbose: bool | None = None,
    quiet: bool | None = None,
) -> None:
    """Stamp CLI overrides into the environment seen by logging."""

    if verbose:
        os.environ["ROTATELOG_VERBOSE"] = "1"
    if quiet:
        os.environ["ROTATELOG_QUIET"] = "1"

    # Context changes must invalidate cached env views.
    reset_env_caches()
