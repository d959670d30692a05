"""Gauss-Jordan matrix inversion with partial pivoting.

The working copy ``work`` and the augmented identity ``inv`` are plain nested
lists; rows of both move together on every swap. The pivot threshold is the
absolute :data:`~densematrix.constants.PIVOT_TOLERANCE`, so the singularity
test is scale dependent: matrices whose entries are all tiny are reported
singular, and near-singular matrices with huge entries may pass.
"""

from __future__ import annotations

import logging
from typing import List

from .constants import PIVOT_TOLERANCE
from .errors import NotSquareError, SingularMatrixError
from .storage import MatrixStorage

LOGGER = logging.getLogger(__name__)


def _pivot_row(work: List[List[float]], column: int) -> int:
    # Strict ">" keeps the first maximal row.
    best = column
    best_value = abs(work[column][column])
    for k in range(column + 1, len(work)):
        candidate = abs(work[k][column])
        if candidate > best_value:
            best = k
            best_value = candidate
    return best


def inverse(matrix: MatrixStorage) -> MatrixStorage:
    if not matrix.is_square() or matrix.is_empty():
        raise NotSquareError(f"Matrix must be square and not empty, got {matrix.rows}x{matrix.cols}")

    n = matrix.rows
    work = [[matrix.get(i, j) for j in range(n)] for i in range(n)]
    inv = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]

    for i in range(n):
        row = _pivot_row(work, i)
        if abs(work[row][i]) < PIVOT_TOLERANCE:
            raise SingularMatrixError(f"Matrix is not invertible: pivot in column {i} is below {PIVOT_TOLERANCE}")

        if row != i:
            LOGGER.debug("Swapping rows %d and %d for pivot column %d", i, row, i)
            work[i], work[row] = work[row], work[i]
            inv[i], inv[row] = inv[row], inv[i]

        pivot = work[i][i]
        for j in range(n):
            work[i][j] /= pivot
            inv[i][j] /= pivot

        for k in range(n):
            if k == i:
                continue
            factor = work[k][i]
            for j in range(n):
                work[k][j] -= factor * work[i][j]
                inv[k][j] -= factor * inv[i][j]

    return matrix.create_same_type_from(inv)
