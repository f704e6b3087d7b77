"""Network reachability probes."""

from __future__ import annotations

import logging
import socket
import warnings

import requests
from urllib3.exceptions import InsecureRequestWarning

from executor.outcome import Check, FailurePolicy

logger = logging.getLogger("doctor.network")

DEFAULT_DNS_HOST = "www.google.com"


def _get(url: str, verify: bool, timeout: float | None) -> None:
    with warnings.catch_warnings():
        if not verify:
            # Corporate proxies re-sign TLS traffic with their own root.
            warnings.simplefilter("ignore", InsecureRequestWarning)
        response = requests.get(url, verify=verify, timeout=timeout)
    response.raise_for_status()
    logger.debug("GET %s -> %s", url, response.status_code)


def is_reachable(
    url: str,
    *,
    skip_certificate_verification: bool = True,
    timeout: float | None = None,
) -> bool:
    """Return True when an HTTPS GET to ``url`` succeeds; never raises."""
    check = Check(
        label=f"reach {url}",
        probe=lambda: _get(url, verify=not skip_certificate_verification, timeout=timeout),
        policy=FailurePolicy.COLLAPSE,
    )
    return check.evaluate()


def has_internet_access(hostname: str = DEFAULT_DNS_HOST) -> bool:
    """Return True when ``hostname`` resolves; never raises."""
    check = Check(
        label=f"resolve {hostname}",
        probe=lambda: socket.getaddrinfo(hostname, None),
        policy=FailurePolicy.COLLAPSE,
    )
    return check.evaluate()
