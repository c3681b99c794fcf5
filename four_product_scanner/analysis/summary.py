from __future__ import annotations

from typing import Dict, List

import pandas as pd

from four_product_scanner.models.results import ScanReport

SUMMARY_COLUMNS = ("n_windows", "max_product", "anchor_row", "anchor_col")


def scan_summary_table(report: ScanReport) -> pd.DataFrame:
    """Build a per-direction summary DataFrame from a scan report.

    One row per direction (horizontal, vertical, diagonal), indexed by
    direction name. ``anchor_row``/``anchor_col`` are nullable integers and
    hold ``<NA>`` for directions without any window. ``max_product`` is an
    object column of Python ints, since products may not fit in int64.
    """
    rows: List[Dict[str, object]] = []
    for d in (report.horizontal, report.vertical, report.diagonal):
        anchor_row, anchor_col = d.anchor if d.anchor is not None else (None, None)
        rows.append(
            {
                "direction": d.direction,
                "n_windows": d.n_windows,
                "max_product": d.max_product,
                "anchor_row": anchor_row,
                "anchor_col": anchor_col,
            }
        )

    df = pd.DataFrame(rows).set_index("direction")
    return df.astype(
        {
            "n_windows": "int64",
            "max_product": object,
            "anchor_row": "Int64",
            "anchor_col": "Int64",
        }
    )
