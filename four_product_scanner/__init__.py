"""Four Product Scanner -- maximum product of four adjacent numbers in a grid.

This package provides tools for:
- Parsing whitespace-separated integer matrices from text (strict shape checks)
- Scanning a grid for the largest product of four contiguous cells along
  rows, columns and both diagonals
- Summarising per-direction results as a DataFrame
- Printing grids in a fixed-width, zero-padded layout

Key principles:
- No trimming or guessing: the input text is split exactly as given
- Fail fast: the first bad token aborts parsing, no partial grid is returned
- Immutable data: grids are read-only once built

Main subpackages:
- ingest: Text parser and file readers
- models: Data models (Grid, parse errors, scan results)
- analysis: Directional four-product scans and summaries
- presentation: Human-readable grid rendering
"""

from .analysis.four_product import max_four_product
from .ingest.matrix_parser import parse_matrix

__all__ = ["max_four_product", "parse_matrix"]
