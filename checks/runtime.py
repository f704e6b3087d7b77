"""Node section: runtime pin, nvm presence and dependency freshness."""

from __future__ import annotations

from collections.abc import Iterator

from checks.base import CheckResult, error, info, warn
from checks.context import ReportContext
from core.versions import strip_v, version_satisfies
from executor.outcome import Check
from probes import filesystem

NVM_URL = "https://github.com/nvm-sh/nvm"


def runtime_checks(ctx: ReportContext) -> Iterator[CheckResult]:
    cfg = ctx.config
    expected = cfg.expected_runtime_version

    node_version = Check("Version", lambda: ctx.shell("node -v")).evaluate()
    yield info("Version", node_version)
    if not version_satisfies(node_version, expected):
        yield error(
            f"Installed Node version ({node_version}) does not satisfy expectations "
            f"({expected}); please update."
        )
        yield error(f"nvm install {strip_v(expected)}")

    yield info("npm", Check("npm", lambda: ctx.shell("npm -v")).evaluate())

    has_nvm = ctx.host.has_version_manager
    yield info("nvm", has_nvm)
    if not has_nvm:
        yield error("Node version manager missing; please install nvm.")
        yield error(NVM_URL)

    yield info("Env", ctx.host.mode)

    modules_dir = ctx.resolve(cfg.dependency_dir)
    yield info("Modules", Check("Modules", lambda: filesystem.count_entries(modules_dir)).evaluate())

    marker = modules_dir / cfg.install_marker_package
    last_install = Check("Installed", lambda: filesystem.installed_at(marker)).evaluate()
    now = ctx.clock()
    yield info("Installed", filesystem.time_ago(last_install, now))
    if filesystem.age_in_days(last_install, now) >= cfg.stale_after_days:
        yield warn(f"The last {modules_dir.name} install is over {cfg.stale_after_days} days old.")
        yield warn("Consider reinstalling dependencies: `npm ci`.")
