"""Exception hierarchy shared by the storage layer and the algorithms."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a kernel failure."""

    INVALID_DIMENSIONS = "InvalidDimensions"
    INVALID_DATA = "InvalidData"
    INDEX_OUT_OF_BOUNDS = "IndexOutOfBounds"
    DIMENSION_MISMATCH = "DimensionMismatch"
    INCOMPATIBLE_DIMENSIONS = "IncompatibleDimensions"
    NOT_SQUARE = "NotSquare"
    SINGULAR = "Singular"


class MatrixError(Exception):
    """Base class for every failure raised by the kernel."""

    kind: ErrorKind


class InvalidDimensionsError(MatrixError, ValueError):
    """Raised when a sizing operation receives non-positive rows or cols."""

    kind = ErrorKind.INVALID_DIMENSIONS


class InvalidDataError(MatrixError, ValueError):
    """Raised for empty, ragged or non-numeric source data."""

    kind = ErrorKind.INVALID_DATA


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Raised when a cell outside ``[0, rows) x [0, cols)`` is accessed."""

    kind = ErrorKind.INDEX_OUT_OF_BOUNDS


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when element-wise operands differ in shape."""

    kind = ErrorKind.DIMENSION_MISMATCH


class IncompatibleDimensionsError(MatrixError, ValueError):
    """Raised when ``left.cols != right.rows`` for a matrix product."""

    kind = ErrorKind.INCOMPATIBLE_DIMENSIONS


class NotSquareError(MatrixError, ValueError):
    """Raised when an operation needs a non-empty square matrix."""

    kind = ErrorKind.NOT_SQUARE


class SingularMatrixError(MatrixError, ValueError):
    """Raised when Gauss-Jordan elimination finds no usable pivot."""

    kind = ErrorKind.SINGULAR
