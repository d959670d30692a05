"""Tests for Gauss-Jordan inversion."""

from __future__ import annotations

import logging
from random import Random

import numpy as np
import pytest

from densematrix.constants import PIVOT_TOLERANCE
from densematrix.elementary import identity, multiply
from densematrix.errors import NotSquareError, SingularMatrixError
from densematrix.inverse import inverse


def _assert_close(left: list[list[float]], right: list[list[float]], tol: float = 1e-9) -> None:
    assert len(left) == len(right)
    for row_l, row_r in zip(left, right):
        assert len(row_l) == len(row_r)
        for a, b in zip(row_l, row_r):
            assert abs(a - b) < tol


def _well_conditioned(n: int, seed: int) -> list[list[float]]:
    rng = Random(seed)
    rows = [[rng.uniform(-1.0, 1.0) for _ in range(n)] for _ in range(n)]
    for i in range(n):
        rows[i][i] += float(n)
    return rows


def test_two_by_two(make) -> None:
    result = inverse(make([[4, 7], [2, 6]]))
    _assert_close(result.to_rows(), [[0.6, -0.7], [-0.2, 0.4]])


def test_single_cell(make) -> None:
    assert inverse(make([[4]])).to_rows() == [[0.25]]


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_round_trip_gives_identity(make, n: int) -> None:
    matrix = make(_well_conditioned(n, seed=n))
    product = multiply(matrix, inverse(matrix))
    _assert_close(product.to_rows(), identity(n, matrix).to_rows())


def test_matches_numpy(make) -> None:
    rows = _well_conditioned(4, seed=21)
    np.testing.assert_allclose(np.array(inverse(make(rows)).to_rows()), np.linalg.inv(np.array(rows)), atol=1e-12)


def test_requires_pivoting(make) -> None:
    # A zero on the diagonal forces a row swap.
    result = inverse(make([[0, 1], [1, 0]]))
    assert result.to_rows() == [[0.0, 1.0], [1.0, 0.0]]


def test_first_maximal_row_wins_pivot_ties(make, caplog: pytest.LogCaptureFixture) -> None:
    # Rows 1 and 2 tie on |2| in column 0; rows 1 and 2 tie again on |1| in column 1.
    rows = [[0, 1, 0], [2, 0, 1], [-2, 1, 1]]
    with caplog.at_level(logging.DEBUG, logger="densematrix.inverse"):
        result = inverse(make(rows))

    swaps = [record.getMessage() for record in caplog.records if "Swapping" in record.getMessage()]
    assert swaps == ["Swapping rows 0 and 1 for pivot column 0"]
    np.testing.assert_allclose(np.array(result.to_rows()), np.linalg.inv(np.array(rows, dtype=float)), atol=1e-12)


def test_operand_is_untouched(make, matrix_type) -> None:
    matrix = make([[0, 2], [3, 1]])
    result = inverse(matrix)
    assert type(result) is matrix_type
    assert matrix.to_rows() == [[0.0, 2.0], [3.0, 1.0]]


def test_singular_matrix(make) -> None:
    with pytest.raises(SingularMatrixError):
        inverse(make([[1, 2], [2, 4]]))
    with pytest.raises(SingularMatrixError):
        inverse(make([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))


def test_tolerance_is_absolute(make) -> None:
    tiny = PIVOT_TOLERANCE / 10
    with pytest.raises(SingularMatrixError):
        inverse(make([[tiny, 0.0], [0.0, tiny]]))
    assert inverse(make([[1e-11]])).get(0, 0) == pytest.approx(1e11)


def test_requires_square(make, matrix_type) -> None:
    with pytest.raises(NotSquareError):
        inverse(make([[1, 2, 3], [4, 5, 6]]))
    with pytest.raises(NotSquareError):
        inverse(matrix_type())
