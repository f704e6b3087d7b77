"""Git section: branch divergence, last commit and working tree state."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from checks.base import CheckResult, info, warn
from checks.context import ReportContext
from executor.outcome import Check, FailurePolicy

logger = logging.getLogger("doctor.checks")


def ref_exists(ctx: ReportContext, ref: str) -> bool:
    """True when ``ref`` names a commit in the local repository."""
    return Check(
        f"resolve {ref}",
        lambda: ctx.shell(f"git rev-parse --verify --quiet {ref}"),
        FailurePolicy.COLLAPSE,
    ).evaluate()


def divergence(ctx: ReportContext, branch: str, reference: str) -> int:
    """Commits reachable from ``branch`` but not from ``reference``.

    A reference branch that does not exist locally counts as no divergence.
    """
    if not ref_exists(ctx, reference):
        logger.debug("reference branch %s not found; divergence is 0", reference)
        return 0
    output = ctx.shell(f"git log --oneline {branch} ^{reference}")
    return len([line for line in output.splitlines() if line.strip()])


def vcs_checks(ctx: ReportContext) -> Iterator[CheckResult]:
    reference = ctx.config.reference_branch
    threshold = ctx.config.divergence_threshold

    branch = Check("Branch", lambda: ctx.shell("git branch --show-current")).evaluate()
    difference = Check("Difference", lambda: divergence(ctx, branch, reference)).evaluate()

    yield info("Branch", branch)
    yield info("Difference", difference)
    if difference > threshold:
        yield warn(
            f"The local branch ({branch}) is over {threshold} commits apart "
            f"({difference}) from {reference}; consider rebasing."
        )

    yield info("Last commit", Check("Last commit", lambda: ctx.shell("git log -1 --pretty=%B")).evaluate())
    yield info("Clean", Check("Clean", lambda: ctx.shell("git status --porcelain") == "").evaluate())
