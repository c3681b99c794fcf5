from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from four_product_scanner.analysis.four_product import scan_four_products
from four_product_scanner.analysis.summary import scan_summary_table
from four_product_scanner.ingest.readers_text import MatrixTextReader
from four_product_scanner.models.errors import MatrixParseError
from four_product_scanner.presentation.pretty_print import pretty_print

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"


def _setup_logging(verbose: bool) -> None:
    """Attach a single stderr handler to the package logger."""
    level = logging.DEBUG if verbose else logging.WARNING
    pkg_logger = logging.getLogger("four_product_scanner")
    pkg_logger.setLevel(level)
    if not pkg_logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        pkg_logger.addHandler(console)
    for handler in pkg_logger.handlers:
        handler.setLevel(level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m four_product_scanner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Print a matrix and the greatest product of four adjacent numbers in it
            (same row, same column, or either diagonal).

            The file holds one row per line with whitespace-separated integers.
            A trailing newline counts as an extra, empty row.
            """
        ),
    )
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Matrix text file (default: the bundled data/matrix.txt)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug details and a per-direction summary")

    ns = p.parse_args(list(argv) if argv is not None else None)
    _setup_logging(bool(ns.verbose))

    reader = MatrixTextReader()
    try:
        src = reader.read(ns.path) if ns.path is not None else reader.read_bundled()
    except (MatrixParseError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    grid = src.grid
    print("Read matrix:")
    pretty_print(grid)

    report = scan_four_products(grid)
    if ns.verbose:
        logger.debug("per-direction summary:\n%s", scan_summary_table(report).to_string())

    print(f"Max four-product is: {report.max_product}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
