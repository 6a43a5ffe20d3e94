from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple, Type

from .base import BaseIntention

__all__ = [
    "register_lazy",
    "get_intentions_for_path",
    "list_intentions",
]


@dataclass(frozen=True)
class _LazySpec:
    module: str
    class_name: str
    extensions: Tuple[str, ...]


# Lazy specs in registration order: where each intention class lives
_LAZY_SPECS: List[_LazySpec] = []

# Resolved classes: module:class -> class
_CLASS_BY_SPEC: Dict[_LazySpec, Type[BaseIntention]] = {}


def register_lazy(*, module: str, class_name: str, extensions: List[str] | Tuple[str, ...]) -> None:
    """
    Register an intention "by strings" without importing its module.
    """
    spec = _LazySpec(module=module, class_name=class_name, extensions=tuple(e.lower() for e in extensions))
    if spec not in _LAZY_SPECS:
        _LAZY_SPECS.append(spec)


def _load_intention_from_spec(spec: _LazySpec) -> Type[BaseIntention]:
    cls = _CLASS_BY_SPEC.get(spec)
    if cls is not None:
        return cls
    # Both relative (".store_by_owner") and absolute module names are accepted
    mod = importlib.import_module(spec.module, package=__package__)
    cls = getattr(mod, spec.class_name, None)
    if cls is None:
        raise RuntimeError(f"Intention class '{spec.class_name}' not found in {spec.module}")
    if not issubclass(cls, BaseIntention):
        raise TypeError(f"{spec.module}.{spec.class_name} is not a subclass of BaseIntention")
    _CLASS_BY_SPEC[spec] = cls
    return cls


def get_intentions_for_path(path: Path) -> List[Type[BaseIntention]]:
    """
    Intention CLASSES applicable to a file, highest priority first.
    Nothing is instantiated.
    """
    ext = path.suffix.lower()
    classes = [_load_intention_from_spec(spec) for spec in _LAZY_SPECS if ext in spec.extensions]
    order = ["top", "high", "normal", "low"]
    return sorted(classes, key=lambda c: order.index(c.priority.value))


def list_intentions() -> List[Type[BaseIntention]]:
    """All registered intention classes in registration order."""
    return [_load_intention_from_spec(spec) for spec in _LAZY_SPECS]
