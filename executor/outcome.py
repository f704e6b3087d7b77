"""Failure policy wrapper around a single probe call."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger("doctor.executor")


class FailurePolicy(str, Enum):
    """What a check does with an exception raised by its probe."""

    COLLAPSE = "collapse_to_boolean_on_failure"
    PROPAGATE = "propagate_failure"


class CheckOutcome(BaseModel):
    """Value or error recorded for a single probe invocation."""

    value: Any = None
    error_kind: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


class CheckError(RuntimeError):
    """Raised when an untrapped check fails."""

    def __init__(self, label: str, cause: BaseException) -> None:
        super().__init__(f"Check '{label}' failed: {cause}")
        self.label = label


@dataclass
class Check:
    """A single observation with a declared failure policy."""

    label: str
    probe: Callable[[], Any]
    policy: FailurePolicy = FailurePolicy.PROPAGATE

    def run(self) -> CheckOutcome:
        """Invoke the probe, applying the failure policy to any exception."""
        try:
            value = self.probe()
        except Exception as exc:
            if self.policy is FailurePolicy.PROPAGATE:
                raise CheckError(self.label, exc) from exc
            logger.debug("%s collapsed to false: %s: %s", self.label, type(exc).__name__, exc)
            return CheckOutcome(value=False, error_kind=type(exc).__name__, error=str(exc))
        return CheckOutcome(value=value)

    def evaluate(self) -> Any:
        """Return the probe value, or the success flag for trapped checks."""
        outcome = self.run()
        if self.policy is FailurePolicy.COLLAPSE:
            return outcome.ok
        return outcome.value
