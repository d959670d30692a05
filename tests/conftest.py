from __future__ import annotations

from typing import Callable, Sequence, Type

import pytest

from densematrix.storage import ArrayMatrix, ListMatrix, MatrixStorage

MatrixFactory = Callable[[Sequence[Sequence[float]]], MatrixStorage]


@pytest.fixture(params=[ListMatrix, ArrayMatrix], ids=["list", "array"])
def matrix_type(request: pytest.FixtureRequest) -> Type[MatrixStorage]:
    return request.param


@pytest.fixture()
def make(matrix_type) -> MatrixFactory:
    def _make(rows: Sequence[Sequence[float]]) -> MatrixStorage:
        return matrix_type.from_rows(rows)

    return _make
