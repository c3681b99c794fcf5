from __future__ import annotations


class MatrixParseError(ValueError):
    """Raised when text cannot be turned into a valid Grid."""


class InvalidNumber(MatrixParseError):
    """A column token is not a base-10 integer literal that fits in 64 bits.

    ``cause`` is the underlying conversion failure (``ValueError`` or ``OverflowError``).
    """

    def __init__(self, token: str, cause: Exception) -> None:
        self.token = token
        self.cause = cause
        super().__init__(f"could not parse number due to error {cause}")


class MalformedMatrix(MatrixParseError):
    """The parsed values cannot form a consistent ``height x width`` rectangle."""

    def __init__(self, height: int, width: int, actual_size: int) -> None:
        self.height = height
        self.width = width
        self.actual_size = actual_size
        super().__init__(
            f"matrix is malformed, expected rows and cols are {height} x {width}, "
            f"but actual size was {actual_size}"
        )
