"""System section: host identity, connectivity and Docker."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

from checks.base import CheckResult, info
from checks.context import ReportContext
from executor.outcome import Check, FailurePolicy
from probes import filesystem, network


def docker_running(ctx: ReportContext) -> bool:
    """True when the Docker daemon answers ``docker version``."""
    return Check("Docker running", lambda: ctx.shell("docker version"), FailurePolicy.COLLAPSE).evaluate()


def system_checks(ctx: ReportContext) -> Iterator[CheckResult]:
    cfg = ctx.config
    on_vpn = network.is_reachable(
        cfg.vpn_probe_url,
        skip_certificate_verification=cfg.skip_certificate_verification,
        timeout=cfg.http_timeout,
    )

    yield info("Username", ctx.host.username)
    if cfg.show_os_version:
        version = Check("Operating System", lambda: filesystem.macos_version(cfg.os_version_file)).evaluate()
        yield info("Operating System", version)
    yield info("Distribution", sys.platform)
    yield info("CPUs", os.cpu_count())
    yield info("Internet", network.has_internet_access(cfg.dns_probe_host))
    yield info("VPN", on_vpn)
    yield info("Docker running", docker_running(ctx))
