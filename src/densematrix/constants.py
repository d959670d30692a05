"""Centralized configuration constants for the densematrix package.

This module provides a single source of truth for default values used across
the kernel. Import constants from here rather than defining them in individual
modules.

Constants are grouped by category:
- Numerical thresholds
- Text transport format
- Storage strategies
- Operation names

Example
-------
>>> from densematrix.constants import PIVOT_TOLERANCE
>>> PIVOT_TOLERANCE
1e-12
"""

from __future__ import annotations

from typing import Tuple


# =============================================================================
# Numerical Thresholds
# =============================================================================

PIVOT_TOLERANCE = 1e-12
"""Absolute magnitude below which a Gauss-Jordan pivot is treated as zero."""


# =============================================================================
# Text Transport Format
# =============================================================================

TEXT_SEPARATOR = " "
"""Separator written between tokens of a serialized matrix."""

NAN_TOKEN = "NaN"
"""Token written for NaN values and for cells that cannot be read."""

POSITIVE_INFINITY_TOKEN = "Infinity"
"""Token written for positive infinity."""

NEGATIVE_INFINITY_TOKEN = "-Infinity"
"""Token written for negative infinity."""

MIN_TEXT_TOKENS = 3
"""Smallest token count of a parseable matrix: rows, cols and one value."""


# =============================================================================
# Storage Strategies
# =============================================================================

LIST_STORAGE = "list"
"""Nested Python list storage."""

ARRAY_STORAGE = "array"
"""numpy ``ndarray`` storage."""

STORAGE_CHOICES: Tuple[str, ...] = (LIST_STORAGE, ARRAY_STORAGE)
"""Names accepted wherever a storage strategy is selected."""

DEFAULT_STORAGE = LIST_STORAGE
"""Storage strategy used when none is configured."""

DEFAULT_LOG_LEVEL = "WARNING"
"""Python logging level used by the command line entry point."""

STORAGE_ENV_VAR = "DENSEMATRIX_STORAGE"
"""Environment variable overriding :data:`DEFAULT_STORAGE`."""

LOG_LEVEL_ENV_VAR = "DENSEMATRIX_LOG_LEVEL"
"""Environment variable overriding :data:`DEFAULT_LOG_LEVEL`."""


# =============================================================================
# Operation Names
# =============================================================================

UNARY_OPERATIONS: Tuple[str, ...] = ("determinant", "inverse", "trace", "transpose")
"""Operations taking a single matrix operand."""

BINARY_OPERATIONS: Tuple[str, ...] = ("add", "subtract", "multiply")
"""Operations taking two matrix operands."""

SCALAR_OPERATIONS: Tuple[str, ...] = ("multiply_by_scalar",)
"""Operations taking a matrix and a real scalar."""

OPERATION_NAMES: Tuple[str, ...] = UNARY_OPERATIONS + BINARY_OPERATIONS + SCALAR_OPERATIONS
"""Every operation exposed through :data:`densematrix.operations.OPERATIONS`."""
