"""Configuration and host environment bootstrapping."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.versions import expected_specifier

DEFAULT_CONFIG_NAME = ".dev-doctor.yaml"


class DoctorConfig(BaseModel):
    """Expectations the report compares the machine against."""

    model_config = ConfigDict(extra="forbid")

    expected_runtime_version: str = "v12.18.3"
    reference_branch: str = "develop"
    divergence_threshold: int = Field(default=10, ge=0)
    vpn_probe_url: str = "https://metadata.int.thomsonreuters.com"
    dns_probe_host: str = "www.google.com"
    skip_certificate_verification: bool = True
    http_timeout: float | None = None
    dependency_dir: Path = Path("node_modules")
    install_marker_package: str = "moment"
    stale_after_days: int = Field(default=7, ge=0)
    show_os_version: bool = False
    os_version_file: Path = Path("/System/Library/CoreServices/SystemVersion.plist")

    @field_validator("expected_runtime_version")
    @classmethod
    def _supported_pin(cls, value: str) -> str:
        expected_specifier(value)
        return value


class HostEnvironment(BaseModel):
    """Process environment values read once at startup."""

    home_dir: str | None = None
    username: str | None = None
    mode: str | None = None
    version_manager_marker: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> HostEnvironment:
        env = os.environ if environ is None else environ
        return cls(
            home_dir=env.get("HOME") or env.get("HOMEPATH") or env.get("USERPROFILE"),
            username=env.get("USERNAME") or env.get("USER"),
            mode=env.get("NODE_ENV"),
            version_manager_marker=env.get("NVM_DIR", "").strip(),
        )

    @property
    def has_version_manager(self) -> bool:
        return self.version_manager_marker != ""


def read_overlay(path: Path) -> dict[str, Any]:
    """Parse a YAML overlay; malformed or non-mapping content raises ValueError."""
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def load_effective_config(path: Path | None = None, cwd: Path | None = None) -> DoctorConfig:
    """Build the config from defaults plus an optional YAML overlay.

    An explicit ``path`` must exist. Without one, ``.dev-doctor.yaml`` in the
    working directory is used when present.
    """
    if path is None:
        path = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
        if not path.exists():
            return DoctorConfig()
    elif not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return DoctorConfig.model_validate(read_overlay(path))
