from .errors import InvalidNumber, MalformedMatrix, MatrixParseError
from .grid import Grid
from .results import DirectionMax, ScanReport

__all__ = [
    "Grid",
    "MatrixParseError",
    "InvalidNumber",
    "MalformedMatrix",
    "DirectionMax",
    "ScanReport",
]
