"""Report line model shared by every section."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class Severity(str, Enum):
    """How a report line is annotated."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class CheckResult(BaseModel):
    """One printed report line."""

    label: str
    value: str | bool | int | None = None
    severity: Severity = Severity.INFO

    def text(self) -> str:
        if self.severity is Severity.INFO:
            return f"{self.label}: {format_value(self.value)}"
        return f"→ {self.label}"


def info(label: str, value: str | bool | int | None) -> CheckResult:
    return CheckResult(label=label, value=value)


def warn(message: str) -> CheckResult:
    return CheckResult(label=message, severity=Severity.WARN)


def error(message: str) -> CheckResult:
    return CheckResult(label=message, severity=Severity.ERROR)


def format_value(value: Any) -> str:
    """Render a value the way the report prints it."""
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
