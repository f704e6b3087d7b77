"""Filesystem probes: platform descriptor, dependency directory, install age."""

from __future__ import annotations

import os
import plistlib
from datetime import datetime
from pathlib import Path

MACOS_VERSION_FILE = Path("/System/Library/CoreServices/SystemVersion.plist")


def macos_version(path: Path = MACOS_VERSION_FILE) -> str:
    """Return the product name and version from a SystemVersion plist.

    The descriptor lists its string entries in a fixed order; positions 2
    and 3 hold the product name and the user visible version, e.g.
    ``Mac OS X 10.15.6``.
    """
    with Path(path).open("rb") as fh:
        data = plistlib.load(fh)
    strings = [value for value in data.values() if isinstance(value, str)]
    return " ".join(strings[2:4])


def count_entries(directory: Path) -> int:
    """Number of entries directly inside ``directory``."""
    return len(os.listdir(directory))


def installed_at(path: Path) -> datetime:
    """Creation time of ``path``, used to approximate the last install."""
    stat = os.stat(path)
    created = getattr(stat, "st_birthtime", None)
    if created is None:
        created = min(stat.st_ctime, stat.st_mtime)
    return datetime.fromtimestamp(created)


def age_in_days(then: datetime, now: datetime) -> int:
    """Whole days elapsed between ``then`` and ``now``."""
    return int((now - then).total_seconds() / 86400)


def time_ago(then: datetime, now: datetime) -> str:
    """Describe ``then`` relative to ``now`` ("3 days ago", "in an hour")."""
    delta = (now - then).total_seconds()
    phrase = _humanize(abs(delta))
    if delta < 0:
        return f"in {phrase}"
    return f"{phrase} ago"


def _humanize(seconds: float) -> str:
    minutes = round(seconds / 60)
    hours = round(seconds / 3600)
    days = round(seconds / 86400)
    if seconds < 45:
        return "a few seconds"
    if seconds < 90:
        return "a minute"
    if minutes < 45:
        return f"{minutes} minutes"
    if minutes < 90:
        return "an hour"
    if hours < 22:
        return f"{hours} hours"
    if hours < 36:
        return "a day"
    if days < 26:
        return f"{days} days"
    if days < 45:
        return "a month"
    if days < 320:
        return f"{max(2, round(days / 30.4))} months"
    if days < 548:
        return "a year"
    return f"{round(days / 365)} years"
