"""
Typed views over SyntaxNode.

Every view exposes ``match(node) -> Optional[View]``: it returns a handle only
when the node has the expected kind, so callers chain matches instead of
casting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .model import DELIMITER_KINDS, NodeKind, SyntaxNode


def _name_of(node: SyntaxNode) -> Optional[str]:
    ident = node.first_child_of_kind(NodeKind.IDENTIFIER)
    return ident.text if ident is not None else None


@dataclass(frozen=True)
class Identifier:
    node: SyntaxNode

    @classmethod
    def match(cls, node: Optional[SyntaxNode]) -> Optional[Identifier]:
        if node is None or node.kind is not NodeKind.IDENTIFIER or not node.is_leaf:
            return None
        return cls(node)

    @property
    def text(self) -> str:
        return self.node.text


@dataclass(frozen=True)
class ClassBody:
    node: SyntaxNode

    @classmethod
    def match(cls, node: Optional[SyntaxNode]) -> Optional[ClassBody]:
        if node is None or node.kind is not NodeKind.CLASS_BODY:
            return None
        return cls(node)

    @property
    def members(self) -> List[SyntaxNode]:
        """Declarations of the body: everything except braces, whitespace and comments."""
        return [
            child for child in self.node.children
            if not child.is_trivia and child.kind not in DELIMITER_KINDS
        ]

    @property
    def properties(self) -> List[PropertyDeclaration]:
        return [PropertyDeclaration(child) for child in self.node.children_of_kind(NodeKind.PROPERTY)]

    @property
    def closing_brace(self) -> Optional[SyntaxNode]:
        last = self.node.last_child
        if last is not None and last.kind is NodeKind.RBRACE:
            return last
        return None


@dataclass(frozen=True)
class ObjectLiteralExpression:
    node: SyntaxNode

    @classmethod
    def match(cls, node: Optional[SyntaxNode]) -> Optional[ObjectLiteralExpression]:
        if node is None or node.kind is not NodeKind.OBJECT_LITERAL:
            return None
        return cls(node)

    @property
    def body(self) -> Optional[ClassBody]:
        # Some tree shapes keep the body under a nested object declaration
        holder = self.node.first_child_of_kind(NodeKind.OBJECT_DECLARATION) or self.node
        return ClassBody.match(holder.first_child_of_kind(NodeKind.CLASS_BODY))


@dataclass(frozen=True)
class PropertyDeclaration:
    node: SyntaxNode

    @classmethod
    def match(cls, node: Optional[SyntaxNode]) -> Optional[PropertyDeclaration]:
        if node is None or node.kind is not NodeKind.PROPERTY:
            return None
        return cls(node)

    @property
    def name(self) -> Optional[str]:
        return _name_of(self.node)

    @property
    def initializer(self) -> Optional[ObjectLiteralExpression]:
        """First object literal among the property's children."""
        return ObjectLiteralExpression.match(self.node.first_child_of_kind(NodeKind.OBJECT_LITERAL))


@dataclass(frozen=True)
class ClassDeclaration:
    node: SyntaxNode

    @classmethod
    def match(cls, node: Optional[SyntaxNode]) -> Optional[ClassDeclaration]:
        if node is None or node.kind is not NodeKind.CLASS:
            return None
        return cls(node)

    @property
    def name(self) -> Optional[str]:
        return _name_of(self.node)

    @property
    def body(self) -> Optional[ClassBody]:
        return ClassBody.match(self.node.first_child_of_kind(NodeKind.CLASS_BODY))


__all__ = [
    "Identifier",
    "ClassBody",
    "ObjectLiteralExpression",
    "PropertyDeclaration",
    "ClassDeclaration",
]
