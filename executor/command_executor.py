"""Command execution wrapper."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger("doctor.executor")


def run(command: str, cwd: Path | None = None) -> str:
    """Run a shell command and return its stripped stdout.

    Raises ``subprocess.CalledProcessError`` on a non-zero exit and
    ``OSError`` when the shell cannot be spawned.
    """
    logger.debug("exec: %s", command)
    proc = subprocess.run(
        command,
        shell=True,
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout.strip()
