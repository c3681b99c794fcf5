"""Analysis package.

Design principle:
  - Ingest produces validated :class:`~four_product_scanner.models.grid.Grid` objects.
  - Analysis only reads a Grid and produces derived quantities; it never raises
    for a valid Grid, however small.
"""

from .four_product import (
    diagonal_max,
    horizontal_max,
    max_four_product,
    scan_four_products,
    vertical_max,
)
from .summary import scan_summary_table

__all__ = [
    "horizontal_max",
    "vertical_max",
    "diagonal_max",
    "max_four_product",
    "scan_four_products",
    "scan_summary_table",
]
