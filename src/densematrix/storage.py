"""Matrix storage strategies.

Every algorithm in the kernel talks to matrices through the
:class:`MatrixStorage` protocol only, so the backing layout is interchangeable:

``ListMatrix``
    Nested Python lists of floats. No third-party dependency on the hot path.

``ArrayMatrix``
    A two-dimensional ``numpy`` array of ``float64``.

Both strategies copy their source data on construction and hand out fresh
instances from :meth:`MatrixStorage.create_same_type`, which is how the
algorithms build results without touching their operands.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol, Type, runtime_checkable

import numpy as np

from .constants import ARRAY_STORAGE, LIST_STORAGE, STORAGE_CHOICES
from .errors import IndexOutOfBoundsError, InvalidDataError, InvalidDimensionsError

LOGGER = logging.getLogger(__name__)

Rows = List[List[float]]


@runtime_checkable
class MatrixStorage(Protocol):
    """Capability interface shared by every storage strategy."""

    @property
    def rows(self) -> int:
        ...

    @property
    def cols(self) -> int:
        ...

    def is_square(self) -> bool:
        ...

    def is_empty(self) -> bool:
        ...

    def get(self, r: int, c: int) -> float:
        ...

    def set(self, r: int, c: int, value: float) -> None:
        ...

    def init(self, rows: int, cols: int) -> None:
        ...

    def init_from(self, data: Iterable[Iterable[Any]]) -> None:
        ...

    def create_same_type(self, rows: Optional[int] = None, cols: Optional[int] = None) -> "MatrixStorage":
        ...

    def create_same_type_from(self, data: Iterable[Iterable[Any]]) -> "MatrixStorage":
        ...

    def is_equal_size(self, other: "MatrixStorage") -> bool:
        ...

    def to_rows(self) -> Rows:
        ...


def _validate_dimensions(rows: int, cols: int) -> None:
    if rows <= 0 or cols <= 0:
        raise InvalidDimensionsError(f"Invalid number of rows or columns: {rows}x{cols}")


def _coerce_rows(data: Any) -> Rows:
    """Return a rectangular float copy of ``data`` or raise :class:`InvalidDataError`."""

    if data is None:
        raise InvalidDataError("Invalid matrix data")
    try:
        raw_rows = [list(row) for row in data]
    except TypeError as exc:
        raise InvalidDataError("Invalid matrix data: rows must be sequences") from exc
    if not raw_rows:
        raise InvalidDataError("Invalid matrix data")
    cols = len(raw_rows[0])
    if cols == 0:
        raise InvalidDataError("Invalid matrix data: rows must not be empty")
    for row in raw_rows:
        if len(row) != cols:
            raise InvalidDataError("Invalid matrix data: inconsistent row lengths")
    try:
        return [[float(value) for value in row] for row in raw_rows]
    except (TypeError, ValueError) as exc:
        raise InvalidDataError(f"Invalid matrix data: {exc}") from exc


def check_index(matrix: MatrixStorage, r: int, c: int) -> None:
    if r < 0 or c < 0 or r >= matrix.rows or c >= matrix.cols:
        raise IndexOutOfBoundsError(
            f"Row or column index out of bounds: ({r}, {c}) for {matrix.rows}x{matrix.cols}"
        )


class ListMatrix:
    """Matrix backed by a list of row lists."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None) -> None:
        self._rows = 0
        self._cols = 0
        self._data: Rows = []
        if rows is not None or cols is not None:
            self.init(rows or 0, cols or 0)

    @classmethod
    def from_rows(cls, data: Iterable[Iterable[Any]]) -> "ListMatrix":
        matrix = cls()
        matrix.init_from(data)
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def is_square(self) -> bool:
        return self._rows == self._cols

    def is_empty(self) -> bool:
        return self._rows == 0 or self._cols == 0

    def get(self, r: int, c: int) -> float:
        check_index(self, r, c)
        return self._data[r][c]

    def set(self, r: int, c: int, value: float) -> None:
        check_index(self, r, c)
        self._data[r][c] = float(value)

    def init(self, rows: int, cols: int) -> None:
        _validate_dimensions(rows, cols)
        self._rows = rows
        self._cols = cols
        self._data = [[0.0 for _ in range(cols)] for _ in range(rows)]

    def init_from(self, data: Iterable[Iterable[Any]]) -> None:
        values = _coerce_rows(data)
        self._rows = len(values)
        self._cols = len(values[0])
        self._data = values

    def create_same_type(self, rows: Optional[int] = None, cols: Optional[int] = None) -> "ListMatrix":
        return type(self)(rows, cols)

    def create_same_type_from(self, data: Iterable[Iterable[Any]]) -> "ListMatrix":
        return type(self).from_rows(data)

    def is_equal_size(self, other: MatrixStorage) -> bool:
        return self._rows == other.rows and self._cols == other.cols

    def to_rows(self) -> Rows:
        return [list(row) for row in self._data]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self._rows}, cols={self._cols})"

    def __str__(self) -> str:
        from .transport import format_matrix

        return format_matrix(self)


class ArrayMatrix:
    """Matrix backed by a two-dimensional ``float64`` numpy array."""

    __slots__ = ("_data",)

    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None) -> None:
        self._data = np.zeros((0, 0), dtype=float)
        if rows is not None or cols is not None:
            self.init(rows or 0, cols or 0)

    @classmethod
    def from_rows(cls, data: Iterable[Iterable[Any]]) -> "ArrayMatrix":
        matrix = cls()
        matrix.init_from(data)
        return matrix

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_empty(self) -> bool:
        return self._data.size == 0

    def get(self, r: int, c: int) -> float:
        check_index(self, r, c)
        return float(self._data[r, c])

    def set(self, r: int, c: int, value: float) -> None:
        check_index(self, r, c)
        self._data[r, c] = float(value)

    def init(self, rows: int, cols: int) -> None:
        _validate_dimensions(rows, cols)
        self._data = np.zeros((rows, cols), dtype=float)

    def init_from(self, data: Iterable[Iterable[Any]]) -> None:
        self._data = np.array(_coerce_rows(data), dtype=float)

    def create_same_type(self, rows: Optional[int] = None, cols: Optional[int] = None) -> "ArrayMatrix":
        return type(self)(rows, cols)

    def create_same_type_from(self, data: Iterable[Iterable[Any]]) -> "ArrayMatrix":
        return type(self).from_rows(data)

    def is_equal_size(self, other: MatrixStorage) -> bool:
        return self.rows == other.rows and self.cols == other.cols

    def to_rows(self) -> Rows:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the backing array."""

        return self._data.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, cols={self.cols})"

    def __str__(self) -> str:
        from .transport import format_matrix

        return format_matrix(self)


STORAGE_TYPES: Dict[str, Type[MatrixStorage]] = {
    LIST_STORAGE: ListMatrix,
    ARRAY_STORAGE: ArrayMatrix,
}


def storage_type(name: str) -> Type[MatrixStorage]:
    """Resolve a storage strategy by name (``"list"`` or ``"array"``)."""

    key = name.strip().lower()
    if key not in STORAGE_TYPES:
        raise ValueError(f"Unknown storage {name!r}; expected one of {', '.join(STORAGE_CHOICES)}")
    LOGGER.debug("Resolved storage %r to %s", name, STORAGE_TYPES[key].__name__)
    return STORAGE_TYPES[key]
