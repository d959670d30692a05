"""Element-wise and product operations built on the storage protocol."""

from __future__ import annotations

from typing import Callable

from .errors import DimensionMismatchError, IncompatibleDimensionsError, NotSquareError
from .storage import MatrixStorage

BinaryOp = Callable[[float, float], float]


def _elementwise(left: MatrixStorage, right: MatrixStorage, op: BinaryOp) -> MatrixStorage:
    if not left.is_equal_size(right):
        raise DimensionMismatchError(
            f"Matrices must be equal in size: {left.rows}x{left.cols} vs {right.rows}x{right.cols}"
        )
    if left.is_empty():
        return left.create_same_type()
    out = left.create_same_type(left.rows, left.cols)
    for i in range(left.rows):
        for j in range(left.cols):
            out.set(i, j, op(left.get(i, j), right.get(i, j)))
    return out


def add(left: MatrixStorage, right: MatrixStorage) -> MatrixStorage:
    return _elementwise(left, right, lambda x, y: x + y)


def subtract(left: MatrixStorage, right: MatrixStorage) -> MatrixStorage:
    return _elementwise(left, right, lambda x, y: x - y)


def multiply_by_scalar(matrix: MatrixStorage, scalar: float) -> MatrixStorage:
    """Scale every entry; NaN and infinities propagate as plain float arithmetic."""

    if matrix.is_empty():
        return matrix.create_same_type()
    factor = float(scalar)
    out = matrix.create_same_type(matrix.rows, matrix.cols)
    for i in range(matrix.rows):
        for j in range(matrix.cols):
            out.set(i, j, matrix.get(i, j) * factor)
    return out


def multiply(left: MatrixStorage, right: MatrixStorage) -> MatrixStorage:
    if left.cols != right.rows:
        raise IncompatibleDimensionsError(
            f"Cannot multiply {left.rows}x{left.cols} by {right.rows}x{right.cols} matrices"
        )
    if left.rows == 0 or right.cols == 0:
        return left.create_same_type()
    out = left.create_same_type(left.rows, right.cols)
    for i in range(left.rows):
        for j in range(right.cols):
            total = 0.0
            for k in range(left.cols):
                total += left.get(i, k) * right.get(k, j)
            out.set(i, j, total)
    return out


def transpose(matrix: MatrixStorage) -> MatrixStorage:
    if matrix.is_empty():
        return matrix.create_same_type()
    out = matrix.create_same_type(matrix.cols, matrix.rows)
    for i in range(matrix.rows):
        for j in range(matrix.cols):
            out.set(j, i, matrix.get(i, j))
    return out


def trace(matrix: MatrixStorage) -> float:
    if not matrix.is_square() or matrix.is_empty():
        raise NotSquareError(f"Matrix must be square and not empty, got {matrix.rows}x{matrix.cols}")
    total = 0.0
    for i in range(matrix.rows):
        total += matrix.get(i, i)
    return total


def identity(n: int, like: MatrixStorage) -> MatrixStorage:
    """Return the ``n x n`` identity using the storage strategy of ``like``."""

    eye = like.create_same_type(n, n)
    for i in range(n):
        eye.set(i, i, 1.0)
    return eye
