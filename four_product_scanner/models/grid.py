from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np


@dataclass(frozen=True, eq=False)
class Grid:
    """Immutable rectangular grid of signed integers.

    Values are kept in a flat, row-major, read-only ``int64`` buffer; cell
    ``(row, col)`` lives at ``row * width + col``.

    Notes
    - A Grid is only ever built complete: ``height * width`` must equal the
      number of values, otherwise construction raises ``ValueError``.
    - ``height`` may be positive with ``width == 0`` (e.g. parsed from empty text).
    """

    height: int
    width: int
    data: np.ndarray

    def __post_init__(self) -> None:
        h = int(self.height)
        w = int(self.width)
        if h < 0 or w < 0:
            raise ValueError(f"Grid dimensions must be >= 0, got {h} x {w}")

        raw = np.asarray(self.data)
        if raw.size and not np.issubdtype(raw.dtype, np.integer):
            raise ValueError(f"Grid values must be integers, got dtype {raw.dtype}")
        buf = np.array(raw, dtype=np.int64).reshape(-1)
        if buf.size != h * w:
            raise ValueError(f"Grid shape {h} x {w} does not match {buf.size} values")
        buf.flags.writeable = False

        object.__setattr__(self, "height", h)
        object.__setattr__(self, "width", w)
        object.__setattr__(self, "data", buf)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "Grid":
        """Build a grid from nested rows; every row must have the same length."""
        rows = [list(r) for r in rows]
        width = len(rows[0]) if rows else 0
        for i, r in enumerate(rows):
            if len(r) != width:
                raise ValueError(f"Row {i} has {len(r)} values, expected {width}")
        flat = [v for r in rows for v in r]
        return cls(height=len(rows), width=width, data=np.asarray(flat))

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    @property
    def size(self) -> int:
        return int(self.data.size)

    def get(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Grid index out of range: {(row, col)} for shape {self.shape}")
        return int(self.data[row * self.width + col])

    def __getitem__(self, key: Tuple[int, int]) -> int:
        row, col = key
        return self.get(row, col)

    def as_array(self) -> np.ndarray:
        """Read-only ``(height, width)`` view on the buffer."""
        return self.data.reshape((self.height, self.width))

    def to_lists(self) -> List[List[int]]:
        return self.as_array().tolist()

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"
