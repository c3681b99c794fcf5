from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import List, Optional, Tuple

from four_product_scanner.ingest.matrix_parser import parse_matrix
from four_product_scanner.models.errors import MalformedMatrix
from four_product_scanner.models.grid import Grid

logger = logging.getLogger(__name__)

BUNDLED_MATRIX = "matrix.txt"


@dataclass(frozen=True)
class MatrixReaderConfig:
    """
    Reader configuration for whitespace-separated matrix text files.

    encoding:
      Text encoding of the file. Undecodable bytes raise UnicodeDecodeError.
    """
    encoding: str = "utf-8"


@dataclass(frozen=True)
class MatrixSource:
    """
    A parsed matrix together with where it came from.

    Notes
    - source_path is None when the text did not come from a file on disk.
    - warnings collects non-fatal remarks made while reading.
    """
    source_path: Optional[Path]
    grid: Grid
    warnings: Tuple[str, ...] = ()


class MatrixTextReader:
    """
    Reads a matrix from a text file (or from the bundled default input).

    The text is handed to :func:`parse_matrix` unchanged; the reader never
    strips a trailing newline. When such a newline breaks the shape, the
    MalformedMatrix error is logged with a hint and re-raised.
    """

    def __init__(self, config: Optional[MatrixReaderConfig] = None):
        self.config = config or MatrixReaderConfig()

    def read(self, path: str | Path) -> MatrixSource:
        p = Path(path).expanduser().resolve()
        logger.info("reading matrix from %s", p)
        text = p.read_text(encoding=self.config.encoding)
        return self._parse(text, source_path=p)

    def read_bundled(self, name: str = BUNDLED_MATRIX) -> MatrixSource:
        """Read a matrix shipped in ``four_product_scanner/data``."""
        logger.info("reading bundled matrix %s", name)
        text = (
            resources.files("four_product_scanner")
            .joinpath("data")
            .joinpath(name)
            .read_text(encoding=self.config.encoding)
        )
        return self._parse(text, source_path=None)

    def read_text(self, text: str) -> MatrixSource:
        return self._parse(text, source_path=None)

    def _parse(self, text: str, source_path: Optional[Path]) -> MatrixSource:
        warnings: List[str] = []
        trailing_newline = text.endswith("\n")
        try:
            grid = parse_matrix(text)
        except MalformedMatrix as exc:
            if trailing_newline:
                logger.warning(
                    "input ends with a newline, which adds an empty row (height=%d); "
                    "remove it if the matrix is otherwise rectangular",
                    exc.height,
                )
            raise

        if trailing_newline:
            warnings.append("input ends with a newline; the empty last row was kept")
        if grid.width == 0:
            warnings.append(f"matrix has no columns ({grid.height} empty rows)")
        for w in warnings:
            logger.warning(w)

        return MatrixSource(source_path=source_path, grid=grid, warnings=tuple(warnings))
