"""Shared fixtures for report tests."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from checks.context import ReportContext
from core.config import DoctorConfig, HostEnvironment

NOW = datetime(2020, 9, 1, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


def fake_shell(outputs: dict[str, str]) -> Callable[[str], str]:
    """Shell stand-in answering known commands and failing like a missing binary otherwise."""

    def _run(command: str) -> str:
        if command not in outputs:
            raise subprocess.CalledProcessError(127, command)
        return outputs[command].strip()

    return _run


@pytest.fixture
def make_context(tmp_path: Path, now: datetime) -> Callable[..., ReportContext]:
    def _make(
        outputs: dict[str, str] | None = None,
        environ: dict[str, str] | None = None,
        **config: object,
    ) -> ReportContext:
        return ReportContext(
            config=DoctorConfig(**config),
            host=HostEnvironment.from_environ(environ or {"USER": "dev", "NVM_DIR": "/home/dev/.nvm"}),
            shell=fake_shell(outputs or {}),
            clock=lambda: now,
            cwd=tmp_path,
        )

    return _make
