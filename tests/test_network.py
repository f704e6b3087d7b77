"""Network probe tests; no real traffic is sent."""

from __future__ import annotations

import socket
from unittest.mock import MagicMock

import pytest
import requests

from probes import network


def test_is_reachable_false_for_unresolvable_url(monkeypatch: pytest.MonkeyPatch) -> None:
    get = MagicMock(side_effect=requests.exceptions.ConnectionError("Name or service not known"))
    monkeypatch.setattr(network.requests, "get", get)

    assert network.is_reachable("https://invalid.invalid") is False


def test_is_reachable_true_on_success_and_skips_verification(monkeypatch: pytest.MonkeyPatch) -> None:
    response = MagicMock(status_code=200)
    get = MagicMock(return_value=response)
    monkeypatch.setattr(network.requests, "get", get)

    assert network.is_reachable("https://intranet.example.com") is True
    get.assert_called_once_with("https://intranet.example.com", verify=False, timeout=None)


def test_is_reachable_verifies_when_asked(monkeypatch: pytest.MonkeyPatch) -> None:
    get = MagicMock(return_value=MagicMock(status_code=200))
    monkeypatch.setattr(network.requests, "get", get)

    network.is_reachable("https://example.com", skip_certificate_verification=False, timeout=5.0)
    get.assert_called_once_with("https://example.com", verify=True, timeout=5.0)


def test_is_reachable_false_on_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    response = MagicMock(status_code=503)
    response.raise_for_status.side_effect = requests.exceptions.HTTPError("503")
    monkeypatch.setattr(network.requests, "get", MagicMock(return_value=response))

    assert network.is_reachable("https://intranet.example.com") is False


def test_has_internet_access_false_when_dns_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(network.socket, "getaddrinfo", MagicMock(side_effect=socket.gaierror("fail")))
    assert network.has_internet_access() is False


def test_has_internet_access_true_when_dns_resolves(monkeypatch: pytest.MonkeyPatch) -> None:
    resolve = MagicMock(return_value=[(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("142.250.0.1", 0))])
    monkeypatch.setattr(network.socket, "getaddrinfo", resolve)

    assert network.has_internet_access("www.google.com") is True
    resolve.assert_called_once_with("www.google.com", None)
