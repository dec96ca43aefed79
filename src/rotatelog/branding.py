from __future__ import annotations

import shutil
from typing import Literal

# --------------------------------------------------
# Layout constants
# --------------------------------------------------

DEFAULT_WIDTH = 60
LOG_GUTTER_WIDTH = 10  # "INFO      " etc.

Width = int | Literal["auto"]


def _resolve_width(width: Width) -> int:
    if width == "auto":
        try:
            cols = shutil.get_terminal_size().columns
        except Exception:
            cols = DEFAULT_WIDTH
        return max(DEFAULT_WIDTH, cols - LOG_GUTTER_WIDTH)
    return max(DEFAULT_WIDTH, int(width))


# --------------------------------------------------
# Headers / sections
# --------------------------------------------------


def ROTATELOG_HEADER(
    title: str,
    *,
    width: Width = DEFAULT_WIDTH,
    pad: int = 4,
) -> str:
    title = title.strip()
    inner = max(_resolve_width(width) - 2, len(title) + pad * 2)

    top = f"╔{'═' * inner}╗"
    mid = f"║{title.center(inner)}║"
    bot = f"╚{'═' * inner}╝"

    return f"{top}\n{mid}\n{bot}"


def ROTATELOG_SECTION_END(
    *,
    width: Width = DEFAULT_WIDTH,
    fill: str = "━",
) -> str:
    return fill * _resolve_width(width)


class SYMBOLS:
    OK = "✔"
    FAIL = "✖"
    SKIPPED = "⤼"
