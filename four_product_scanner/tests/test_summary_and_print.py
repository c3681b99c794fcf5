from __future__ import annotations

import io

import pandas as pd

from four_product_scanner.analysis.four_product import scan_four_products
from four_product_scanner.analysis.summary import SUMMARY_COLUMNS, scan_summary_table
from four_product_scanner.ingest.matrix_parser import parse_matrix
from four_product_scanner.presentation.pretty_print import format_grid, pretty_print


def test_format_grid_zero_pads() -> None:
    grid = parse_matrix("1 2 30\n4 -5 100")
    assert format_grid(grid) == "01 02 30\n04 -5 100"


def test_pretty_print_writes_line() -> None:
    buf = io.StringIO()
    pretty_print(parse_matrix("0 7\n8 9"), file=buf)
    assert buf.getvalue() == "00 07\n08 09\n"


def test_format_empty_grid() -> None:
    assert format_grid(parse_matrix("")) == ""


def test_summary_table_columns_and_values() -> None:
    grid = parse_matrix(
        """2 0 0 0 0
           3 0 0 0 0
           4 0 0 0 0
           5 0 0 0 0
           0 0 0 0 0"""
    )
    df = scan_summary_table(scan_four_products(grid))
    assert list(df.index) == ["horizontal", "vertical", "diagonal"]
    assert tuple(df.columns) == SUMMARY_COLUMNS
    assert df.loc["vertical", "max_product"] == 120
    assert df.loc["vertical", "anchor_row"] == 0
    assert df.loc["vertical", "anchor_col"] == 0
    assert df.loc["horizontal", "n_windows"] == 10
    assert df.loc["diagonal", "n_windows"] == 4


def test_summary_table_missing_windows_are_na() -> None:
    df = scan_summary_table(scan_four_products(parse_matrix("1 2 3 4 5")))
    assert df.loc["horizontal", "max_product"] == 120
    assert df.loc["vertical", "n_windows"] == 0
    assert pd.isna(df.loc["vertical", "anchor_row"])
    assert pd.isna(df.loc["diagonal", "anchor_col"])
    assert str(df["anchor_row"].dtype) == "Int64"


def test_summary_table_keeps_wide_products_exact() -> None:
    df = scan_summary_table(scan_four_products(parse_matrix("-100000 100000 100000 100000")))
    assert df.loc["horizontal", "max_product"] == -(10**20)
    assert df.loc["vertical", "max_product"] == 0
    assert df["max_product"].dtype == object
