"""Flat records and the ``"rows cols values..."`` text format.

The text format is what the presentation layer exchanges with the kernel::

    >>> from densematrix.storage import ListMatrix
    >>> format_matrix(ListMatrix.from_rows([[4, 7], [2, 6]]))
    '2 2 4.0 7.0 2.0 6.0'
    >>> format_matrix(ListMatrix())
    '0 0'

Values are written with ``repr`` so every finite float round-trips exactly.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Type, Union

from .constants import (
    DEFAULT_STORAGE,
    MIN_TEXT_TOKENS,
    NAN_TOKEN,
    NEGATIVE_INFINITY_TOKEN,
    POSITIVE_INFINITY_TOKEN,
    TEXT_SEPARATOR,
)
from .errors import InvalidDataError, MatrixError
from .storage import MatrixStorage, storage_type

LOGGER = logging.getLogger(__name__)

StorageSpec = Union[str, Type[MatrixStorage]]


def _resolve_storage(storage: StorageSpec) -> Type[MatrixStorage]:
    if isinstance(storage, str):
        return storage_type(storage)
    return storage


@dataclass(frozen=True, slots=True)
class MatrixData:
    """Dimensions plus a flat row-major sequence of values.

    Parameters
    ----------
    rows, cols:
        Requested dimensions. Both must be positive when the record is built.
    values:
        Exactly ``rows * cols`` real numbers in row-major order.
    """

    rows: int
    cols: int
    values: Tuple[float, ...]

    @classmethod
    def from_matrix(cls, matrix: MatrixStorage) -> "MatrixData":
        values = tuple(matrix.get(i, j) for i in range(matrix.rows) for j in range(matrix.cols))
        return cls(matrix.rows, matrix.cols, values)

    def build(self, storage: StorageSpec = DEFAULT_STORAGE) -> MatrixStorage:
        return build_matrix(self.rows, self.cols, self.values, storage=storage)


def build_matrix(
    rows: int,
    cols: int,
    values: Sequence[float],
    *,
    storage: StorageSpec = DEFAULT_STORAGE,
) -> MatrixStorage:
    """Create a ``rows x cols`` matrix from a flat row-major sequence."""

    expected = rows * cols
    if len(values) != expected:
        raise InvalidDataError(f"Cannot parse data: expected {expected} elements, got {len(values)}")
    matrix = _resolve_storage(storage)()
    matrix.init(rows, cols)
    index = 0
    for i in range(rows):
        for j in range(cols):
            matrix.set(i, j, values[index])
            index += 1
    return matrix


def _format_value(value: float) -> str:
    if math.isnan(value):
        return NAN_TOKEN
    if math.isinf(value):
        return POSITIVE_INFINITY_TOKEN if value > 0 else NEGATIVE_INFINITY_TOKEN
    return repr(float(value))


def format_matrix(matrix: MatrixStorage) -> str:
    """Serialize ``matrix``; unreadable cells become ``NaN`` instead of failing."""

    tokens = [str(matrix.rows), str(matrix.cols)]
    for i in range(matrix.rows):
        for j in range(matrix.cols):
            try:
                tokens.append(_format_value(matrix.get(i, j)))
            except (MatrixError, TypeError, ValueError) as exc:
                LOGGER.debug("Cell (%d, %d) could not be read: %s", i, j, exc)
                tokens.append(NAN_TOKEN)
    return TEXT_SEPARATOR.join(tokens)


_NON_FINITE_TOKENS = frozenset(
    {NAN_TOKEN, POSITIVE_INFINITY_TOKEN, "+" + POSITIVE_INFINITY_TOKEN, NEGATIVE_INFINITY_TOKEN}
)


def _parse_dimension(token: str) -> int:
    if "_" in token:
        raise ValueError(f"invalid literal for int(): {token!r}")
    return int(token)


def _parse_value(token: str) -> float:
    if "_" in token:
        raise ValueError(f"could not convert string to float: {token!r}")
    value = float(token)
    if token.lstrip("+-").isalpha() and token not in _NON_FINITE_TOKENS:
        raise ValueError(f"non-finite values must be written as NaN or Infinity: {token!r}")
    return value


def parse_matrix(text: str, *, storage: StorageSpec = DEFAULT_STORAGE) -> MatrixStorage:
    """Parse the text format produced by :func:`format_matrix`.

    Any run of whitespace separates tokens. At least one value is required.
    Digit separators (``1_0``) are rejected, and non-finite values are only
    read in the ``NaN``/``Infinity``/``-Infinity`` spelling.
    """

    tokens = text.split()
    if len(tokens) < MIN_TEXT_TOKENS:
        raise InvalidDataError("Not enough data to create matrix")
    try:
        rows = _parse_dimension(tokens[0])
        cols = _parse_dimension(tokens[1])
    except ValueError as exc:
        raise InvalidDataError(f"Invalid matrix dimensions: {tokens[0]!r} {tokens[1]!r}") from exc
    try:
        values = [_parse_value(token) for token in tokens[2:]]
    except ValueError as exc:
        raise InvalidDataError(f"Invalid matrix value: {exc}") from exc
    return build_matrix(rows, cols, values, storage=storage)
