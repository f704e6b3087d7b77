"""CLI entrypoint for dev-doctor."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from core.orchestrator import ReportRunner

app = typer.Typer(help="Developer machine environment diagnostic", add_completion=False)


@app.command()
def report(
    config: Path | None = typer.Option(None, "--config", help="YAML file overriding the default expectations"),
    verbose: bool = typer.Option(False, "--verbose", help="Log probe details to stderr"),
) -> None:
    """Inspect the system, the Node runtime and the git working tree."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ReportRunner.build(config_path=config).run()


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
