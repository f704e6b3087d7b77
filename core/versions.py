"""Runtime version pins."""

from __future__ import annotations

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version


def strip_v(text: str) -> str:
    return text.strip().lstrip("vV")


def expected_specifier(expected: str) -> SpecifierSet:
    """Parse a pin: a bare version (``v12.18.3``) or a specifier list (``>=12.18,<13``).

    npm range syntax (``^12``, ``~12.18.0``, ``12.x``, space separated
    comparators) raises ``ValueError``.
    """
    wanted = strip_v(expected)
    if wanted[:1].isdigit():
        wanted = f"=={wanted}"
    try:
        return SpecifierSet(wanted)
    except InvalidSpecifier as exc:
        raise ValueError(
            f"Unsupported runtime version pin {expected!r}; use an exact version "
            "such as 'v12.18.3' or a comma separated list such as '>=12.18,<13'."
        ) from exc


def version_satisfies(installed: str, expected: str) -> bool:
    """True when ``installed`` (e.g. ``v12.18.3``) matches the pin."""
    try:
        version = Version(strip_v(installed))
    except InvalidVersion:
        return False
    return expected_specifier(expected).contains(version, prereleases=True)
