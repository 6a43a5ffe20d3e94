from __future__ import annotations

from pathlib import Path

# Single source of truth for the configuration file location.
CFG_FILE = "summer.yaml"


def cfg_path(root: Path) -> Path:
    """Absolute path to summer.yaml in the given directory."""
    return (root / CFG_FILE).resolve()
