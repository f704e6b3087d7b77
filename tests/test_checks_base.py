"""Check policy and result formatting tests."""

from __future__ import annotations

import pytest

from checks.base import Severity, error, format_value, info, warn
from executor.outcome import Check, CheckError, FailurePolicy


def _boom() -> str:
    raise OSError("no such file")


def test_propagating_check_wraps_failure() -> None:
    check = Check("Modules", _boom)
    with pytest.raises(CheckError) as excinfo:
        check.run()
    assert excinfo.value.label == "Modules"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_collapsing_check_records_error_kind() -> None:
    outcome = Check("Docker running", _boom, FailurePolicy.COLLAPSE).run()
    assert outcome.ok is False
    assert outcome.value is False
    assert outcome.error_kind == "OSError"
    assert "no such file" in (outcome.error or "")


def test_collapsing_check_evaluates_to_success_flag() -> None:
    assert Check("Docker running", lambda: "Server: 19.03", FailurePolicy.COLLAPSE).evaluate() is True
    assert Check("Docker running", _boom, FailurePolicy.COLLAPSE).evaluate() is False


def test_propagating_check_returns_probe_value() -> None:
    assert Check("npm", lambda: "6.14.6").evaluate() == "6.14.6"


def test_result_text() -> None:
    assert info("CPUs", 8).text() == "CPUs: 8"
    assert info("Clean", False).text() == "Clean: false"
    assert info("Env", None).text() == "Env: undefined"
    assert warn("stale").text() == "→ stale"
    assert error("missing").severity is Severity.ERROR


def test_format_value_keeps_numbers_and_text() -> None:
    assert format_value(0) == "0"
    assert format_value("develop") == "develop"
