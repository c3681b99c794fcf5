from __future__ import annotations

import sys
from typing import Optional, TextIO

from four_product_scanner.models.grid import Grid


def format_grid(grid: Grid) -> str:
    """Render a grid one row per line, cells zero-padded to 2 chars and space-joined."""
    return "\n".join(
        " ".join(f"{v:02}" for v in row)
        for row in grid.to_lists()
    )


def pretty_print(grid: Grid, file: Optional[TextIO] = None) -> None:
    print(format_grid(grid), file=file if file is not None else sys.stdout)
