"""Configuration helpers for the densematrix kernel and command line.

The module centralises defaults to keep them consistent between the CLI, tests,
and library callers.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Type

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_STORAGE,
    LOG_LEVEL_ENV_VAR,
    STORAGE_CHOICES,
    STORAGE_ENV_VAR,
)
from .storage import MatrixStorage, storage_type


@dataclass(frozen=True, slots=True)
class KernelConfig:
    """Runtime settings.

    Parameters
    ----------
    storage:
        Storage strategy name, one of :data:`~densematrix.constants.STORAGE_CHOICES`.
    log_level:
        Python logging level name applied by the command line entry point.
    """

    storage: str = DEFAULT_STORAGE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.storage not in STORAGE_CHOICES:
            raise ValueError(f"storage must be one of {', '.join(STORAGE_CHOICES)}, got {self.storage!r}")

    def describe(self) -> str:
        """Return a human readable description.

        >>> KernelConfig().describe()
        'storage=list log_level=WARNING'
        """

        return f"storage={self.storage} log_level={self.log_level}"

    def matrix_type(self) -> Type[MatrixStorage]:
        return storage_type(self.storage)

    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.WARNING)


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    *,
    storage: Optional[str] = None,
    log_level: Optional[str] = None,
) -> KernelConfig:
    """Build a :class:`KernelConfig`; explicit arguments win over the environment."""

    env = os.environ if environ is None else environ
    resolved_storage = (storage or env.get(STORAGE_ENV_VAR, "")).strip().lower() or DEFAULT_STORAGE
    resolved_level = (log_level or env.get(LOG_LEVEL_ENV_VAR, "")).strip().upper() or DEFAULT_LOG_LEVEL
    return KernelConfig(storage=resolved_storage, log_level=resolved_level)
