"""Inputs shared by every section body."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from core.config import DoctorConfig, HostEnvironment
from executor import command_executor


@dataclass
class ReportContext:
    """Config, host environment and side-effect seams for one run."""

    config: DoctorConfig
    host: HostEnvironment
    shell: Callable[[str], str] = command_executor.run
    clock: Callable[[], datetime] = datetime.now
    cwd: Path = field(default_factory=Path.cwd)

    def resolve(self, path: Path) -> Path:
        """Resolve a config path against the working directory."""
        return path if path.is_absolute() else self.cwd / path
