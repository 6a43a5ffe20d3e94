from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Single way to get the installed package version.
    Does not depend on the rest of the package (avoids import cycles).
    """
    for dist in ("summer-intentions", "summer"):
        try:
            return metadata.version(dist)
        except Exception:
            continue
    return "0.0.0"

__all__ = ["tool_version"]
