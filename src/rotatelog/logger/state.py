from __future__ import annotations

from pathlib import Path
from typing import Optional

INITIALIZED: bool = False
LOG_FILE_PATH: Optional[Path] = None
