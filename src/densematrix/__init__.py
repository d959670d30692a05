"""Dense matrix algebra kernel with interchangeable storage strategies."""

from importlib import metadata

from .determinant import cofactor, determinant, submatrix
from .elementary import add, identity, multiply, multiply_by_scalar, subtract, trace, transpose
from .errors import (
    DimensionMismatchError,
    ErrorKind,
    IncompatibleDimensionsError,
    IndexOutOfBoundsError,
    InvalidDataError,
    InvalidDimensionsError,
    MatrixError,
    NotSquareError,
    SingularMatrixError,
)
from .inverse import inverse
from .operations import OPERATIONS, OperationResult, run_operation
from .storage import ArrayMatrix, ListMatrix, MatrixStorage, storage_type
from .transport import MatrixData, build_matrix, format_matrix, parse_matrix

__all__ = [
    "__version__",
    # storage
    "ArrayMatrix",
    "ListMatrix",
    "MatrixStorage",
    "storage_type",
    # operations
    "add",
    "subtract",
    "multiply",
    "multiply_by_scalar",
    "transpose",
    "trace",
    "identity",
    "determinant",
    "cofactor",
    "submatrix",
    "inverse",
    "OPERATIONS",
    "OperationResult",
    "run_operation",
    # transport
    "MatrixData",
    "build_matrix",
    "format_matrix",
    "parse_matrix",
    # errors
    "ErrorKind",
    "MatrixError",
    "InvalidDimensionsError",
    "InvalidDataError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "IncompatibleDimensionsError",
    "NotSquareError",
    "SingularMatrixError",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("densematrix")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)
