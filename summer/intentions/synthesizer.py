"""
Building the delegated property that mirrors a State property.
"""

from __future__ import annotations

from ..errors import StructuralAssumptionViolation
from ..tree.factory import NodeFactory
from ..tree.model import NodeKind, SyntaxNode

DELEGATE_TEMPLATE = 'override val $name by owner.delegateFor("$name")'


def build_delegated_property(name: str,
                             factory: NodeFactory,
                             template: str = DELEGATE_TEMPLATE) -> SyntaxNode:
    """
    Detached property declaration rendered from ``template`` with ``$name`` = ``name``.

    ``name`` comes from an existing identifier, so it is not validated here.
    """
    node = factory.create_declaration(template, name=name)
    if node.kind is not NodeKind.PROPERTY:
        raise StructuralAssumptionViolation(
            f"Delegate template produced {node.kind.name.lower()}, not a property: {node.text!r}"
        )
    return node


__all__ = ["build_delegated_property", "DELEGATE_TEMPLATE"]
