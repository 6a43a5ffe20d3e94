"""
Tree-sitter infrastructure for source documents.
Provides grammar binding, parsing and byte/char helpers used by the tree converters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from tree_sitter import Tree, Node, Parser, Language


class TreeSitterDocument(ABC):
    """
    Wrapper for a Tree-sitter parsed document.
    """

    def __init__(self, text: str):
        self.text = text
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode('utf-8')
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for the parser.

        Returns:
            Language instance
        """
        pass

    def get_parser(self) -> Parser:
        return Parser(self.get_language())

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = self.get_parser()
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    @property
    def byte_length(self) -> int:
        return len(self._text_bytes)

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self.get_byte_text(node.start_byte, node.end_byte)

    def get_byte_text(self, start_byte: int, end_byte: int) -> str:
        """Decode the source slice between two byte offsets."""
        return self._text_bytes[start_byte:end_byte].decode('utf-8')

    def walk_tree(self, start_node: Optional[Node] = None):
        """
        Walk the tree using TreeCursor for efficient traversal.

        Args:
            start_node: Node to start from (default: root)

        Yields:
            Node objects in depth-first order
        """
        if start_node is None:
            start_node = self.root_node

        cursor = start_node.walk()
        visited_children = False

        while True:
            if not visited_children:
                yield cursor.node

                if not cursor.goto_first_child():
                    visited_children = True
            elif cursor.goto_next_sibling():
                visited_children = False
            elif not cursor.goto_parent():
                break
            else:
                visited_children = True

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """Get all error nodes in the tree."""
        return [node for node in self.walk_tree() if node.type == "ERROR" or node.is_missing]
