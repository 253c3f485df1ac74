from __future__ import annotations

import decimal
import logging
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Union

import typer

from .config import AppConfig, load_config
from .core.buffers import BoundedNumericBuffer, NumericWindow
from .core.precision import Precision
from .errors import NumericWindowError
from .utils.logging import setup_logging


logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Bounded numeric buffer with exact decimal averaging.")

Number = Union[int, Decimal]


def parse_number(text: str) -> Number:
    """Parse integral text as ``int`` and everything else as ``Decimal``."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return Decimal(text)
    except decimal.InvalidOperation:
        raise typer.BadParameter(f"not a number: {text!r}")


def _prepare(config: Optional[Path], capacity: Optional[int], values: List[str]) -> tuple[AppConfig, NumericWindow[Number]]:
    cfg = load_config(config)
    setup_logging(cfg.env.LOG_LEVEL)
    try:
        if capacity is None:
            buf: BoundedNumericBuffer[Number] = BoundedNumericBuffer.from_config(cfg.buffer)
        else:
            buf = BoundedNumericBuffer(capacity)
    except NumericWindowError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    for text in values:
        buf.add(parse_number(text))
    logger.debug("Buffer filled", extra={"size": buf.size(), "capacity": buf.capacity})
    return cfg, buf


@app.command()
def average(
    values: List[str] = typer.Argument(..., help="Numbers to insert, oldest first"),
    capacity: Optional[int] = typer.Option(None, help="Buffer capacity (defaults to config)"),
    digits: Optional[int] = typer.Option(None, help="Significant digits of the result"),
    rounding: Optional[str] = typer.Option(None, help="Rounding mode, e.g. HALF_EVEN or ROUND_DOWN"),
    config: Optional[Path] = typer.Option(None, help="Path to a YAML config file"),
) -> None:
    """Print the mean of the most recent values."""
    cfg, buf = _prepare(config, capacity, values)
    overrides = {}
    if digits is not None:
        overrides["digits"] = digits
    if rounding is not None:
        overrides["rounding"] = rounding
    try:
        precision = Precision(**{**cfg.buffer.precision.model_dump(), **overrides})
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    try:
        result = buf.average(precision)
    except NumericWindowError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(result))


@app.command()
def show(
    values: List[str] = typer.Argument(..., help="Numbers to insert, oldest first"),
    capacity: Optional[int] = typer.Option(None, help="Buffer capacity (defaults to config)"),
    config: Optional[Path] = typer.Option(None, help="Path to a YAML config file"),
) -> None:
    """Print the retained values, oldest first."""
    _, buf = _prepare(config, capacity, values)
    typer.echo(" ".join(str(v) for v in buf.all_elements()))


@app.command()
def nth(
    n: int = typer.Argument(..., help="1-based position, oldest first"),
    values: List[str] = typer.Argument(..., help="Numbers to insert, oldest first"),
    capacity: Optional[int] = typer.Option(None, help="Buffer capacity (defaults to config)"),
    config: Optional[Path] = typer.Option(None, help="Path to a YAML config file"),
) -> None:
    """Print the value at position N among the retained values."""
    _, buf = _prepare(config, capacity, values)
    try:
        typer.echo(str(buf.nth_element(n)))
    except NumericWindowError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
