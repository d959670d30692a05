"""Recursive cofactor-expansion determinant.

The expansion runs along row 0 and recurses on freshly allocated
``(n-1) x (n-1)`` submatrices, so its cost grows as ``O(n!)``. It is a
reference algorithm for small matrices; the recursion depth equals ``n``.
"""

from __future__ import annotations

import logging

from .errors import NotSquareError
from .storage import MatrixStorage, check_index

LOGGER = logging.getLogger(__name__)

_LARGE_EXPANSION = 9


def submatrix(matrix: MatrixStorage, row: int, col: int) -> MatrixStorage:
    """Copy ``matrix`` without ``row`` and ``col``, preserving the order of the rest.

    Raises :class:`~densematrix.errors.IndexOutOfBoundsError` when ``(row, col)``
    is not a cell of ``matrix``.
    """

    check_index(matrix, row, col)

    n = matrix.rows
    if n <= 1:
        return matrix.create_same_type()
    data = []
    for i in range(n):
        if i == row:
            continue
        data.append([matrix.get(i, j) for j in range(matrix.cols) if j != col])
    return matrix.create_same_type_from(data)


def cofactor(matrix: MatrixStorage, row: int, col: int) -> float:
    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * determinant(submatrix(matrix, row, col))


def determinant(matrix: MatrixStorage) -> float:
    if not matrix.is_square() or matrix.rows < 1:
        raise NotSquareError(f"Matrix must be square and not empty, got {matrix.rows}x{matrix.cols}")

    n = matrix.rows
    if n == 1:
        return matrix.get(0, 0)
    if n == 2:
        return matrix.get(0, 0) * matrix.get(1, 1) - matrix.get(0, 1) * matrix.get(1, 0)

    if n >= _LARGE_EXPANSION:
        LOGGER.debug("Cofactor expansion of a %dx%d matrix", n, n)
    det = 0.0
    for col in range(n):
        det += matrix.get(0, col) * cofactor(matrix, 0, col)
    return det
