"""Version metadata of the command-line tool."""

from __future__ import annotations

import sys
from importlib import metadata

VERSION = "0.1.0"
COMMIT = "unknown"
BUILD_TIME = "unknown"

_DISTRIBUTION = "iockit"
_UNKNOWN = "(unknown)"


def _normalize(value: str, fallback: str) -> str:
    normalized = value.strip()
    return normalized or fallback


def now() -> str:
    """Return the normalized version string."""
    value = VERSION.strip()
    if value in ("", "unknown"):
        return _UNKNOWN
    if value == "dev" or value.startswith("v"):
        return value
    return "v" + value


def summary() -> str:
    """Return the version together with commit and build time, when known."""
    version = now()
    commit = _normalize(COMMIT, "unknown")
    build_time = _normalize(BUILD_TIME, "unknown")
    if commit == "unknown" and build_time == "unknown":
        return version
    return f"{version} (commit {commit}, built {build_time})"


def main_version() -> str:
    """Return the installed distribution version, or "(unknown)"."""
    try:
        version = metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return _UNKNOWN
    return version or _UNKNOWN


def print_version() -> str:
    """Write the version summary line to standard output and return it."""
    line = f"Version: {summary()}"
    sys.stdout.write(line + "\n")
    return line