from __future__ import annotations

# Public API of the tree package:
#  • SyntaxNode / NodeKind — editable tree model
#  • typed views used for structural matching
#  • parse_kotlin — tree provider (imported lazily, pulls in tree-sitter)
from .model import NodeKind, SyntaxNode
from .views import ClassBody, ClassDeclaration, Identifier, ObjectLiteralExpression, PropertyDeclaration

__all__ = [
    "NodeKind",
    "SyntaxNode",
    "ClassBody",
    "ClassDeclaration",
    "Identifier",
    "ObjectLiteralExpression",
    "PropertyDeclaration",
    "parse_kotlin",
]


def parse_kotlin(text: str) -> SyntaxNode:
    from .kotlin import parse_kotlin as _parse
    return _parse(text)
