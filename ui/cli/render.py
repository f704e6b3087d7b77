"""Terminal rendering for report sections."""

from __future__ import annotations

import shutil
from collections.abc import Callable, Iterable

import typer

from checks.base import CheckResult, Severity

FALLBACK_WIDTH = 80
START_MARKER = "* "
END_MARKER = " *"

_COLORS = {
    Severity.WARN: typer.colors.YELLOW,
    Severity.ERROR: typer.colors.RED,
}


def terminal_width() -> int:
    return shutil.get_terminal_size((FALLBACK_WIDTH, 24)).columns or FALLBACK_WIDTH


def _padding(name: str, width: int) -> str:
    return " " * max(width - len(name) - len(START_MARKER) - len(END_MARKER), 0)


def print_result(result: CheckResult) -> None:
    if result.severity is Severity.INFO:
        typer.echo(result.text())
        return
    typer.secho(result.text(), fg=_COLORS[result.severity], err=True)


def render_section(
    name: str,
    body: Callable[[], Iterable[CheckResult]],
    width: int | None = None,
) -> None:
    """Print a section banner, then each result as the body produces it."""
    width = width or terminal_width()
    line = typer.style("=" * width, dim=True)

    typer.echo(line)
    typer.echo(
        typer.style(START_MARKER, dim=True)
        + typer.style(name, fg=typer.colors.GREEN)
        + _padding(name, width)
        + typer.style(END_MARKER, dim=True)
    )
    typer.echo(line)

    for result in body():
        print_result(result)

    typer.echo("")
