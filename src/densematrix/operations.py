"""Operation table and tagged results.

``OPERATIONS`` maps an operation name to a plain function. ``run_operation``
is the seam used by callers that prefer to branch on a result instead of
catching exceptions: every :class:`~densematrix.errors.MatrixError` raised by
an operation comes back as a failed :class:`OperationResult`.

>>> from densematrix.storage import ListMatrix
>>> result = run_operation("determinant", ListMatrix.from_rows([[4, 7], [2, 6]]))
>>> result.ok, result.value
(True, 10.0)
>>> run_operation("inverse", ListMatrix.from_rows([[1, 2], [2, 4]])).kind
<ErrorKind.SINGULAR: 'Singular'>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar, Union

from .determinant import determinant
from .elementary import add, multiply, multiply_by_scalar, subtract, trace, transpose
from .errors import ErrorKind, MatrixError
from .inverse import inverse
from .storage import MatrixStorage

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

OperationValue = Union[MatrixStorage, float]

OPERATIONS: Dict[str, Callable[..., OperationValue]] = {
    "determinant": determinant,
    "inverse": inverse,
    "trace": trace,
    "transpose": transpose,
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "multiply_by_scalar": multiply_by_scalar,
}


@dataclass(frozen=True, slots=True)
class OperationResult(Generic[T]):
    """Outcome of an operation: either ``value`` or ``error`` is set."""

    operation: str
    value: Optional[T] = None
    error: Optional[MatrixError] = None

    @classmethod
    def success(cls, operation: str, value: T) -> "OperationResult[T]":
        return cls(operation=operation, value=value)

    @classmethod
    def failure(cls, operation: str, error: MatrixError) -> "OperationResult[T]":
        return cls(operation=operation, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    @property
    def message(self) -> str:
        return "" if self.error is None else str(self.error)

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def run_operation(name: str, *operands: Any) -> OperationResult[OperationValue]:
    """Run ``OPERATIONS[name]`` and capture kernel failures as a result."""

    try:
        func = OPERATIONS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown operation {name!r}; expected one of {', '.join(OPERATIONS)}") from exc

    try:
        value = func(*operands)
    except MatrixError as exc:
        LOGGER.info("%s failed (%s): %s", name, exc.kind.value, exc)
        return OperationResult.failure(name, exc)
    return OperationResult.success(name, value)
