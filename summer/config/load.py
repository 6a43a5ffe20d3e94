"""
Loader of summer.yaml.

The file is a mapping of intention name to that intention's options:

    store_by_owner:
      proxy_property: viewStateProxy
      presenter_marker: Presenter
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .paths import cfg_path
from ..errors import ConfigError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> Dict[str, Any]:
    """Read a YAML file that must hold a mapping."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_config(root: Path, explicit: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """
    Raw per-intention configuration.

    Args:
        root: Directory searched for summer.yaml when no explicit file is given
        explicit: Path from --config; must exist

    Returns:
        Mapping intention name -> raw options (empty when there is no file)
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        path = explicit
    else:
        path = cfg_path(root)
        if not path.is_file():
            return {}

    raw = _read_yaml_map(path)
    logger.debug("Loaded config from %s: sections=%s", path, sorted(raw))

    out: Dict[str, Dict[str, Any]] = {}
    for name, section in raw.items():
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(f"{path}: section '{name}' must be a mapping")
        out[str(name)] = dict(section)
    return out


__all__ = ["load_config"]
