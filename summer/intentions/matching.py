"""
Availability check: is the caret on the name of a property declared in a State class?
"""

from __future__ import annotations

from typing import Optional

from ..tree.model import SyntaxNode
from ..tree.views import ClassBody, ClassDeclaration, Identifier, PropertyDeclaration

DEFAULT_STATE_CLASS = "State"


def match_state_property(node: Optional[SyntaxNode],
                         state_class: str = DEFAULT_STATE_CLASS) -> Optional[PropertyDeclaration]:
    """
    Climb identifier -> property -> class body -> class, checking the kind at
    every hop. Returns the property when the class is named exactly ``state_class``.
    """
    identifier = Identifier.match(node)
    if identifier is None:
        return None
    prop = PropertyDeclaration.match(identifier.node.parent)
    if prop is None:
        return None
    body = ClassBody.match(prop.node.parent)
    if body is None:
        return None
    cls = ClassDeclaration.match(body.node.parent)
    if cls is None or cls.name != state_class:
        return None
    return prop


def is_applicable(node: Optional[SyntaxNode], state_class: str = DEFAULT_STATE_CLASS) -> bool:
    return match_state_property(node, state_class) is not None


__all__ = ["match_state_property", "is_applicable", "DEFAULT_STATE_CLASS"]
