"""
Editable syntax tree.

Children lists own their nodes; the parent link is a weak back-reference used
only for upward traversal. Leaves carry literal text, inner nodes derive their
text from their leaves, so rendering the root reproduces the whole document.
"""

from __future__ import annotations

import weakref
from enum import Enum
from typing import Iterator, List, Optional


class NodeKind(Enum):
    FILE = "file"
    CLASS = "class"
    CLASS_BODY = "class_body"
    PROPERTY = "property"
    OBJECT_LITERAL = "object_literal"
    OBJECT_DECLARATION = "object_declaration"
    IDENTIFIER = "identifier"
    LBRACE = "lbrace"
    RBRACE = "rbrace"
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    TOKEN = "token"
    COMPOSITE = "composite"


# Kinds that never count as declarations inside a body
TRIVIA_KINDS = frozenset({NodeKind.WHITESPACE, NodeKind.COMMENT})
DELIMITER_KINDS = frozenset({NodeKind.LBRACE, NodeKind.RBRACE})


class SyntaxNode:
    """
    Node of the editable tree.

    Leaves are created with ``text``; inner nodes with ``text=None`` and grow
    through ``append``/``insert``. ``grammar_type`` keeps the parser's own node
    type for diagnostics.
    """

    __slots__ = ("kind", "grammar_type", "_text", "_parent", "children", "__weakref__")

    def __init__(self, kind: NodeKind, text: Optional[str] = None, grammar_type: str = ""):
        self.kind = kind
        self.grammar_type = grammar_type
        self._text = text
        self._parent: Optional[weakref.ReferenceType[SyntaxNode]] = None
        self.children: List[SyntaxNode] = []

    @classmethod
    def leaf(cls, kind: NodeKind, text: str, grammar_type: str = "") -> SyntaxNode:
        return cls(kind, text, grammar_type)

    @classmethod
    def whitespace(cls, text: str) -> SyntaxNode:
        return cls(NodeKind.WHITESPACE, text)

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"SyntaxNode({self.kind.name}, {self._text!r})"
        return f"SyntaxNode({self.kind.name}, children={len(self.children)})"

    # ---- text ----

    @property
    def is_leaf(self) -> bool:
        return self._text is not None

    @property
    def text(self) -> str:
        if self._text is not None:
            return self._text
        return "".join(leaf._text or "" for leaf in self.leaves())

    @text.setter
    def text(self, value: str) -> None:
        if self._text is None:
            raise ValueError("Only leaf nodes carry literal text")
        self._text = value

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA_KINDS

    # ---- structure ----

    @property
    def parent(self) -> Optional[SyntaxNode]:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def root(self) -> SyntaxNode:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def first_child(self) -> Optional[SyntaxNode]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional[SyntaxNode]:
        return self.children[-1] if self.children else None

    def index_in_parent(self) -> int:
        parent = self.parent
        if parent is None:
            raise ValueError("Node is not attached")
        for i, child in enumerate(parent.children):
            if child is self:
                return i
        raise ValueError("Node is not listed among its parent's children")

    @property
    def prev_sibling(self) -> Optional[SyntaxNode]:
        parent = self.parent
        if parent is None:
            return None
        i = self.index_in_parent()
        return parent.children[i - 1] if i > 0 else None

    @property
    def next_sibling(self) -> Optional[SyntaxNode]:
        parent = self.parent
        if parent is None:
            return None
        i = self.index_in_parent()
        return parent.children[i + 1] if i + 1 < len(parent.children) else None

    def ancestors(self) -> Iterator[SyntaxNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator[SyntaxNode]:
        """Pre-order traversal starting with self."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> Iterator[SyntaxNode]:
        for node in self.walk():
            if node.is_leaf:
                yield node

    def children_of_kind(self, kind: NodeKind) -> List[SyntaxNode]:
        return [child for child in self.children if child.kind is kind]

    def first_child_of_kind(self, kind: NodeKind) -> Optional[SyntaxNode]:
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    # ---- editing ----

    def _adopt(self, child: SyntaxNode) -> None:
        if child is self or any(a is child for a in self.ancestors()):
            raise ValueError("Attaching a node under itself would create a cycle")
        if child.parent is not None:
            raise ValueError(f"{child!r} is already attached; remove it first")
        if self.is_leaf:
            raise ValueError("Leaf nodes cannot have children")
        child._parent = weakref.ref(self)

    def append(self, child: SyntaxNode) -> SyntaxNode:
        self._adopt(child)
        self.children.append(child)
        return child

    def insert(self, index: int, child: SyntaxNode) -> SyntaxNode:
        self._adopt(child)
        self.children.insert(index, child)
        return child

    def add_before(self, child: SyntaxNode, anchor: SyntaxNode) -> SyntaxNode:
        """Insert ``child`` right before ``anchor``, which must be a child of this node."""
        if anchor.parent is not self:
            raise ValueError(f"{anchor!r} is not a child of {self!r}")
        return self.insert(anchor.index_in_parent(), child)

    def remove(self, child: SyntaxNode) -> SyntaxNode:
        if child.parent is not self:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        del self.children[child.index_in_parent()]
        child._parent = None
        return child

    def detach(self) -> SyntaxNode:
        parent = self.parent
        if parent is not None:
            parent.remove(self)
        return self

    def unwrap(self) -> None:
        """Replace this node in its parent by its own children, keeping their order."""
        parent = self.parent
        if parent is None:
            raise ValueError("Cannot unwrap a root node")
        index = self.index_in_parent()
        parent.remove(self)
        for offset, child in enumerate(list(self.children)):
            self.remove(child)
            parent.insert(index + offset, child)

    def clear_whitespace(self) -> int:
        """Drop whitespace pseudo-children. Returns how many were removed."""
        spaces = self.children_of_kind(NodeKind.WHITESPACE)
        for node in spaces:
            self.remove(node)
        return len(spaces)

    # ---- positions ----

    @property
    def start_offset(self) -> int:
        """Character offset of this node in the text of its root."""
        offset = 0
        node = self
        parent = node.parent
        while parent is not None:
            for sibling in parent.children:
                if sibling is node:
                    break
                offset += len(sibling.text)
            node, parent = parent, parent.parent
        return offset

    @property
    def end_offset(self) -> int:
        return self.start_offset + len(self.text)

    def leaf_at(self, offset: int) -> Optional[SyntaxNode]:
        """Leaf whose text range ``[start, end)`` contains ``offset``."""
        if offset < 0:
            return None
        position = 0
        for leaf in self.leaves():
            size = len(leaf.text)
            if position <= offset < position + size:
                return leaf
            position += size
        return None

    def line_indent(self) -> str:
        """Leading whitespace of the line on which this node starts."""
        text = self.root.text
        start = self.start_offset
        line_start = text.rfind("\n", 0, start) + 1
        end = line_start
        while end < len(text) and text[end] in " \t":
            end += 1
        return text[line_start:end]

    def starts_line(self) -> bool:
        """True if only indentation precedes this node on its line."""
        text = self.root.text
        start = self.start_offset
        line_start = text.rfind("\n", 0, start) + 1
        return text[line_start:start].strip(" \t") == ""


__all__ = ["NodeKind", "SyntaxNode", "TRIVIA_KINDS", "DELIMITER_KINDS"]
