"""Tests for the text transport format and flat records."""

from __future__ import annotations

import math

import pytest

from densematrix.errors import IndexOutOfBoundsError, InvalidDataError, InvalidDimensionsError
from densematrix.storage import ArrayMatrix, ListMatrix
from densematrix.transport import MatrixData, build_matrix, format_matrix, parse_matrix


class _CorruptCell(ListMatrix):
    """Matrix whose cell (0, 1) cannot be read."""

    __slots__ = ()

    def get(self, r: int, c: int) -> float:
        if (r, c) == (0, 1):
            raise IndexOutOfBoundsError("corrupted cell")
        return super().get(r, c)


def test_format_matrix(make) -> None:
    assert format_matrix(make([[4, 7], [2, 6]])) == "2 2 4.0 7.0 2.0 6.0"
    assert format_matrix(make([[0.1, -2.5e-07]])) == "1 2 0.1 -2.5e-07"


def test_format_empty_matrix(matrix_type) -> None:
    assert format_matrix(matrix_type()) == "0 0"


def test_format_non_finite_values(make) -> None:
    assert format_matrix(make([[math.nan, math.inf, -math.inf]])) == "1 3 NaN Infinity -Infinity"


def test_unreadable_cell_becomes_nan() -> None:
    matrix = _CorruptCell.from_rows([[1, 2], [3, 4]])
    assert format_matrix(matrix) == "2 2 1.0 NaN 3.0 4.0"


def test_parse_round_trip(matrix_type) -> None:
    text = "2 3 1.0 -2.5 0.1 4.0 5.0 6.0"
    matrix = parse_matrix(text, storage=matrix_type)
    assert type(matrix) is matrix_type
    assert matrix.to_rows() == [[1.0, -2.5, 0.1], [4.0, 5.0, 6.0]]
    assert format_matrix(matrix) == text


def test_parse_accepts_storage_names_and_whitespace() -> None:
    matrix = parse_matrix("  1\t2\n 3  4 ", storage="array")
    assert isinstance(matrix, ArrayMatrix)
    assert matrix.to_rows() == [[3.0, 4.0]]


def test_parse_reads_non_finite_tokens() -> None:
    matrix = parse_matrix("1 3 NaN Infinity -Infinity")
    values = matrix.to_rows()[0]
    assert math.isnan(values[0])
    assert values[1:] == [math.inf, -math.inf]
    assert parse_matrix("1 2 +Infinity 1e999").to_rows() == [[math.inf, math.inf]]


@pytest.mark.parametrize(
    "text, message",
    [
        ("2 2", "Not enough data"),
        ("a 2 1 2", "Invalid matrix dimensions"),
        ("1 2 1 x", "Invalid matrix value"),
        ("2 2 1 2 3", "expected 4 elements, got 3"),
        ("1_0 1 5", "Invalid matrix dimensions"),
        ("1 1 1_0", "Invalid matrix value"),
        ("1 1 inf", "Invalid matrix value"),
        ("1 1 nan", "Invalid matrix value"),
        ("1 1 -infinity", "Invalid matrix value"),
    ],
)
def test_parse_rejects_malformed_text(text: str, message: str) -> None:
    with pytest.raises(InvalidDataError, match=message):
        parse_matrix(text)


def test_parse_rejects_non_positive_dimensions() -> None:
    with pytest.raises(InvalidDimensionsError):
        parse_matrix("-1 -1 5")


def test_build_matrix_from_flat_values(matrix_type) -> None:
    matrix = build_matrix(2, 2, [1, 2, 3, 4], storage=matrix_type)
    assert matrix.to_rows() == [[1.0, 2.0], [3.0, 4.0]]
    with pytest.raises(InvalidDataError):
        build_matrix(2, 2, [1, 2, 3], storage=matrix_type)
    with pytest.raises(InvalidDimensionsError):
        build_matrix(0, 3, [], storage=matrix_type)


def test_matrix_data_round_trip(make) -> None:
    matrix = make([[1, 2, 3], [4, 5, 6]])
    data = MatrixData.from_matrix(matrix)
    assert data == MatrixData(2, 3, (1.0, 2.0, 3.0, 4.0, 5.0, 6.0))
    assert data.build("array").to_rows() == matrix.to_rows()
