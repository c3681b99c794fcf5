from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class DirectionMax:
    """Best four-product found along one scan direction.

    Attributes
    ----------
    direction:
        ``"horizontal"``, ``"vertical"`` or ``"diagonal"``.
    n_windows:
        Number of window anchors that fit in the grid for this direction.
    max_product:
        Largest product over all windows, or the neutral value 0 when
        ``n_windows == 0``.
    anchor:
        Top-left ``(row, col)`` of the first window (row-major) reaching
        ``max_product``; None when there is no window.
    """

    direction: str
    n_windows: int
    max_product: int
    anchor: Optional[Tuple[int, int]] = None


@dataclass(frozen=True)
class ScanReport:
    """Result of scanning one grid in all three directions.

    ``max_product`` is the maximum of the three directional maxima, including
    neutral zeros from directions without windows.
    """

    shape: Tuple[int, int]
    horizontal: DirectionMax
    vertical: DirectionMax
    diagonal: DirectionMax

    @property
    def directions(self) -> Tuple[DirectionMax, DirectionMax, DirectionMax]:
        return (self.diagonal, self.vertical, self.horizontal)

    @property
    def max_product(self) -> int:
        return max(d.max_product for d in self.directions)

    @property
    def best(self) -> DirectionMax:
        """Direction reaching ``max_product`` (diagonal, then vertical, then horizontal on ties)."""
        target = self.max_product
        return next(d for d in self.directions if d.max_product == target)
