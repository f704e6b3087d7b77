"""Top-level report runner."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from checks.base import CheckResult
from checks.context import ReportContext
from checks.runtime import runtime_checks
from checks.system import system_checks
from checks.vcs import vcs_checks
from core.config import DoctorConfig, HostEnvironment, load_effective_config
from ui.cli.render import render_section

logger = logging.getLogger("doctor.report")


@dataclass
class Section:
    """A titled group of checks."""

    name: str
    body: Callable[[ReportContext], Iterator[CheckResult]]


DEFAULT_SECTIONS: tuple[Section, ...] = (
    Section("System", system_checks),
    Section("Node", runtime_checks),
    Section("Git", vcs_checks),
)


class ReportRunner:
    """Runs each section in order, printing results as they arrive."""

    def __init__(
        self,
        context: ReportContext,
        sections: tuple[Section, ...] = DEFAULT_SECTIONS,
        width: int | None = None,
    ) -> None:
        self.context = context
        self.sections = sections
        self.width = width

    @classmethod
    def build(cls, config_path: Path | None = None) -> ReportRunner:
        config: DoctorConfig = load_effective_config(config_path)
        return cls(ReportContext(config=config, host=HostEnvironment.from_environ()))

    def run(self) -> None:
        for section in self.sections:
            logger.debug("section start: %s", section.name)
            render_section(section.name, lambda: section.body(self.context), width=self.width)
