"""Helper utilities for audit logging: timestamps, run IDs and environment info."""

import importlib.metadata
import secrets
import sys
from datetime import UTC, datetime

__all__ = [
    "generate_run_id",
    "get_iso_timestamp",
    "get_package_version",
    "get_python_version",
]


def get_iso_timestamp() -> str:
    """Current UTC time in ISO8601 with microseconds, e.g. "2026-02-03T12:34:56.123456Z"."""
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def generate_run_id() -> str:
    """Generate unique run identifier.

    Returns
    -------
    str
        Run ID in format: ISO8601_timestamp__random_suffix.
    """
    return f"{get_iso_timestamp()}__{secrets.token_hex(4)}"


def get_package_version() -> str:
    """Get hkidkit package version.

    Returns
    -------
    str
        Package version or "unknown".
    """
    try:
        return importlib.metadata.version("hkidkit")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_python_version() -> str:
    """Get Python version string (e.g., "3.12.3")."""
    return sys.version.split()[0]
