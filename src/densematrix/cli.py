"""Typer-powered command-line interface for the matrix kernel."""

from __future__ import annotations

import logging
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import KernelConfig, load_config
from .constants import BINARY_OPERATIONS, SCALAR_OPERATIONS, STORAGE_CHOICES, UNARY_OPERATIONS
from .errors import MatrixError
from .operations import OPERATIONS, OperationResult, run_operation
from .transport import format_matrix, parse_matrix

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Dense matrix algebra on the 'rows cols values...' text format.")
console = Console()


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)
    raise typer.Exit(code=1)


def _resolve_config(storage: Optional[str], log_level: Optional[str]) -> KernelConfig:
    try:
        config = load_config(storage=storage, log_level=log_level)
    except ValueError as exc:
        _fail(str(exc))
    logging.basicConfig(level=config.logging_level())
    LOGGER.debug("Using %s", config.describe())
    return config


def _collect_operands(
    operation: str,
    matrix: str,
    other: Optional[str],
    scalar: Optional[float],
    config: KernelConfig,
) -> List[object]:
    operands: List[object] = [parse_matrix(matrix, storage=config.storage)]
    if operation in BINARY_OPERATIONS:
        if other is None:
            _fail(f"{operation} requires --other")
        operands.append(parse_matrix(other, storage=config.storage))
    elif operation in SCALAR_OPERATIONS:
        if scalar is None:
            _fail(f"{operation} requires --scalar")
        operands.append(scalar)
    return operands


def _render(result: OperationResult) -> None:
    value = result.value
    if isinstance(value, float):
        console.print(repr(value), highlight=False, soft_wrap=True)
    else:
        console.print(format_matrix(value), highlight=False, soft_wrap=True)  # type: ignore[arg-type]


@app.command("evaluate")
def evaluate(
    operation: str = typer.Argument(..., help="Operation name; see the 'operations' command."),
    matrix: str = typer.Argument(..., help="Left operand in text form, e.g. '2 2 4 7 2 6'."),
    other: Optional[str] = typer.Option(
        None,
        "--other",
        help="Right operand for add, subtract and multiply.",
        rich_help_panel="Operands",
    ),
    scalar: Optional[float] = typer.Option(
        None,
        "--scalar",
        help="Scalar for multiply_by_scalar.",
        rich_help_panel="Operands",
    ),
    storage: Optional[str] = typer.Option(
        None,
        "--storage",
        help=f"Storage strategy ({', '.join(STORAGE_CHOICES)}). Defaults to DENSEMATRIX_STORAGE or 'list'.",
        rich_help_panel="Advanced",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Python logging level. Defaults to DENSEMATRIX_LOG_LEVEL or WARNING.",
        rich_help_panel="Advanced",
    ),
) -> None:
    """Evaluate one operation and print the scalar or matrix result."""

    if operation not in OPERATIONS:
        _fail(f"Unknown operation {operation!r}")
    config = _resolve_config(storage, log_level)

    try:
        operands = _collect_operands(operation, matrix, other, scalar, config)
    except MatrixError as exc:
        _fail(f"{exc.kind.value}: {exc}")

    result = run_operation(operation, *operands)
    if not result.ok:
        _fail(f"{result.kind.value}: {result.message}")  # type: ignore[union-attr]
    _render(result)


@app.command("operations")
def list_operations() -> None:
    """List the available operations and their operands."""

    table = Table(title="Operations")
    table.add_column("Name")
    table.add_column("Operands")
    for name in OPERATIONS:
        if name in UNARY_OPERATIONS:
            operands = "matrix"
        elif name in BINARY_OPERATIONS:
            operands = "matrix, --other"
        else:
            operands = "matrix, --scalar"
        table.add_row(name, operands)
    console.print(table)


def main() -> None:
    """Entry point for ``python -m densematrix``."""

    app()


if __name__ == "__main__":
    main()
