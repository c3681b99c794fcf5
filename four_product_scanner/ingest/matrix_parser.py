"""Text to Grid parsing.

Input format: rows separated by ``"\\n"``, columns separated by runs of
whitespace, each column a base-10 signed integer literal.

The split is literal. A trailing newline yields one more (empty) row, which
counts towards the height and normally makes the matrix malformed.
"""

from __future__ import annotations

import logging
import re
from typing import List

import numpy as np

from four_product_scanner.models.errors import InvalidNumber, MalformedMatrix
from four_product_scanner.models.grid import Grid

logger = logging.getLogger(__name__)

_INT_LITERAL = re.compile(r"[+-]?[0-9]+", flags=re.ASCII)

_INT64 = np.iinfo(np.int64)


def _parse_token(token: str) -> int:
    # int() alone would also accept "1_000" and non-ASCII digits.
    if not _INT_LITERAL.fullmatch(token):
        raise ValueError(f"invalid digit found in string: {token!r}")
    value = int(token)
    if not (_INT64.min <= value <= _INT64.max):
        raise OverflowError(f"number too large to fit in target type: {token!r}")
    return value


def parse_matrix(matrix_string: str) -> Grid:
    """Parse ``matrix_string`` into a :class:`~four_product_scanner.models.grid.Grid`.

    Parameters
    ----------
    matrix_string:
        One row per line, whitespace-separated integer columns.

    Returns
    -------
    Grid
        Row-major grid of shape ``(n_lines, n_values // n_lines)``.

    Raises
    ------
    InvalidNumber
        On the first token that is not an integer literal (or does not fit in
        64 bits). Nothing after it is parsed.
    MalformedMatrix
        If the values do not fill a ``height x width`` rectangle, or if any
        row holds a different number of values than the others.
    """
    values: List[int] = []
    row_lengths: List[int] = []

    for row in matrix_string.split("\n"):
        n_before = len(values)
        for token in row.split():
            try:
                values.append(_parse_token(token))
            except (ValueError, OverflowError) as exc:
                raise InvalidNumber(token, exc) from exc
        row_lengths.append(len(values) - n_before)

    height = len(row_lengths)
    total = len(values)
    width = total // height

    if height * width != total or any(n != width for n in row_lengths):
        raise MalformedMatrix(height, width, total)

    logger.debug("parsed %d x %d matrix", height, width)
    return Grid(height=height, width=width, data=np.asarray(values, dtype=np.int64))
