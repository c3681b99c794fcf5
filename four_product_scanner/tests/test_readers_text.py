import logging
import tempfile
import unittest
from pathlib import Path

from four_product_scanner.analysis.four_product import max_four_product
from four_product_scanner.ingest.readers_text import MatrixReaderConfig, MatrixTextReader
from four_product_scanner.models.errors import InvalidNumber, MalformedMatrix


class TestMatrixTextReader(unittest.TestCase):
    def test_read_file(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "m.txt"
            p.write_text("1 2 3 4\n5 6 7 8", encoding="utf-8")
            src = MatrixTextReader().read(p)
            self.assertEqual(src.grid.shape, (2, 4))
            self.assertEqual(src.source_path, p.resolve())
            self.assertEqual(src.warnings, ())

    def test_trailing_newline_is_not_trimmed(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "m.txt"
            p.write_text("1 2\n3 4\n", encoding="utf-8")
            with self.assertLogs("four_product_scanner.ingest.readers_text", level=logging.WARNING):
                with self.assertRaises(MalformedMatrix) as cm:
                    MatrixTextReader().read(p)
            self.assertEqual(cm.exception.height, 3)

    def test_invalid_number_propagates(self):
        with self.assertRaises(InvalidNumber):
            MatrixTextReader().read_text("1 2\n3 four")

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(FileNotFoundError):
                MatrixTextReader().read(Path(d) / "nope.txt")

    def test_encoding_config(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "m.txt"
            p.write_text("1 2\n3 4", encoding="utf-16")
            src = MatrixTextReader(MatrixReaderConfig(encoding="utf-16")).read(p)
            self.assertEqual(src.grid.to_lists(), [[1, 2], [3, 4]])
            with self.assertRaises(UnicodeDecodeError):
                MatrixTextReader().read(p)

    def test_empty_rows_warn(self):
        src = MatrixTextReader().read_text("\n")
        self.assertEqual(src.grid.shape, (2, 0))
        self.assertEqual(len(src.warnings), 2)

    def test_bundled_matrix(self):
        src = MatrixTextReader().read_bundled()
        self.assertIsNone(src.source_path)
        self.assertEqual(src.grid.shape, (9, 12))
        self.assertEqual(src.warnings, ())
        self.assertEqual(max_four_product(src.grid), 50_000)


if __name__ == "__main__":
    unittest.main()
