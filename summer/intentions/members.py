from __future__ import annotations

from ..tree.views import ClassBody


def has_member(body: ClassBody, name: str) -> bool:
    """True if the body already declares a property called ``name`` (case-sensitive)."""
    return any(prop.name == name for prop in body.properties)


__all__ = ["has_member"]
