"""Ingest package - matrix text parsing and file readers.

This package handles:
- Parsing matrix text into a validated Grid (strict shape, fail-fast tokens)
- Reading matrix files from disk or from the bundled default input

Key objects:
- parse_matrix: text -> Grid, raising MatrixParseError subclasses
- MatrixTextReader: file / bundled resource -> MatrixSource

Design principle:
- Readers produce validated Grid objects
- Input text is never trimmed or repaired
"""

from .matrix_parser import parse_matrix
from .readers_text import MatrixReaderConfig, MatrixSource, MatrixTextReader

__all__ = [
    "parse_matrix",
    "MatrixReaderConfig",
    "MatrixSource",
    "MatrixTextReader",
]
