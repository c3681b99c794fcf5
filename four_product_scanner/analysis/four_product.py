"""Maximum four-product scans over a Grid.

The four-product is the product of four values in consecutive cells along a
row, a column, or a diagonal (either direction) of the grid.

Functions
---------
horizontal_max
    Best product over 1x4 windows.
vertical_max
    Best product over 4x1 windows.
diagonal_max
    Best product over 4x4 windows, taking the larger of the main diagonal and
    the anti-diagonal of each window.
max_four_product
    Maximum of the three directional maxima.
scan_four_products
    All three scans with window counts and best anchors.

A direction with no window that fits inside the grid reports the neutral
value 0, and that 0 still takes part in the combined maximum.

Products are exact Python integers: a product of four int64 values can
exceed the int64 range.
"""

from __future__ import annotations

import logging

import numpy as np

from four_product_scanner.models.grid import Grid
from four_product_scanner.models.results import DirectionMax, ScanReport

logger = logging.getLogger(__name__)

RUN = 4


def _exact(grid: Grid) -> np.ndarray:
    """Grid values as Python ints (object array) so products never wrap around."""
    return grid.as_array().astype(object)


def _best(direction: str, products: np.ndarray) -> DirectionMax:
    """Pick the first maximum (row-major over anchors) of a 2D product table."""
    if products.size == 0:
        return DirectionMax(direction=direction, n_windows=0, max_product=0, anchor=None)
    idx = int(np.argmax(products))
    row, col = divmod(idx, products.shape[1])
    return DirectionMax(
        direction=direction,
        n_windows=int(products.size),
        max_product=int(products.flat[idx]),
        anchor=(int(row), int(col)),
    )


def _scan_horizontal(grid: Grid) -> DirectionMax:
    a = _exact(grid)
    h, w = a.shape
    n_cols = max(w - RUN + 1, 0)
    products = np.empty((h, n_cols), dtype=object)
    for col in range(n_cols):
        products[:, col] = a[:, col] * a[:, col + 1] * a[:, col + 2] * a[:, col + 3]
    return _best("horizontal", products)


def _scan_vertical(grid: Grid) -> DirectionMax:
    a = _exact(grid)
    h, w = a.shape
    n_rows = max(h - RUN + 1, 0)
    products = np.empty((n_rows, w), dtype=object)
    for row in range(n_rows):
        products[row, :] = a[row] * a[row + 1] * a[row + 2] * a[row + 3]
    return _best("vertical", products)


def _scan_diagonal(grid: Grid) -> DirectionMax:
    a = _exact(grid)
    h, w = a.shape
    n_rows = max(h - RUN + 1, 0)
    n_cols = max(w - RUN + 1, 0)
    products = np.empty((n_rows, n_cols), dtype=object)
    if n_cols == 0:
        return _best("diagonal", products)

    for row in range(n_rows):
        # Column slices are indexed by the window anchor column.
        main = (
            a[row, 0:n_cols]
            * a[row + 1, 1:n_cols + 1]
            * a[row + 2, 2:n_cols + 2]
            * a[row + 3, 3:n_cols + 3]
        )
        anti = (
            a[row, 3:n_cols + 3]
            * a[row + 1, 2:n_cols + 2]
            * a[row + 2, 1:n_cols + 1]
            * a[row + 3, 0:n_cols]
        )
        products[row, :] = np.maximum(main, anti)
    return _best("diagonal", products)


def horizontal_max(grid: Grid) -> int:
    """Finds the horizontal max four-product of the given grid."""
    return _scan_horizontal(grid).max_product


def vertical_max(grid: Grid) -> int:
    """Finds the vertical max four-product of the given grid."""
    return _scan_vertical(grid).max_product


def diagonal_max(grid: Grid) -> int:
    """Finds the diagonal max four-product of the given grid."""
    return _scan_diagonal(grid).max_product


def scan_four_products(grid: Grid) -> ScanReport:
    """Run the horizontal, vertical and diagonal scans on ``grid``.

    Parameters
    ----------
    grid:
        Parsed grid. It is only read.

    Returns
    -------
    ScanReport
        Per-direction maxima with window counts and the anchor of the best
        window; ``report.max_product`` is the combined maximum.
    """
    report = ScanReport(
        shape=grid.shape,
        horizontal=_scan_horizontal(grid),
        vertical=_scan_vertical(grid),
        diagonal=_scan_diagonal(grid),
    )
    for d in report.directions:
        logger.debug(
            "%s: %d windows, max=%d at %s", d.direction, d.n_windows, d.max_product, d.anchor
        )
    return report


def max_four_product(grid: Grid) -> int:
    """Find the maximum four-product for a given grid.

    If the grid is so small that no four-product can be defined
    (i.e. 1x3, 3x1, 3x3) the value 0 is returned.
    """
    return scan_four_products(grid).max_product
