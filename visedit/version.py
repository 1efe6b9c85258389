from __future__ import annotations

import importlib.metadata

DISTRIBUTION = "visedit"


def get_version() -> str:
    """Installed version, or "unknown" when running from a source tree."""
    try:
        return importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_version_string() -> str:
    return f"{DISTRIBUTION} {get_version()}"
