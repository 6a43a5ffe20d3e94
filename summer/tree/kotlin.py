"""
Kotlin tree provider: tree-sitter parse converted into the editable SyntaxNode model.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from tree_sitter import Language, Node

from .model import NodeKind, SyntaxNode
from .tree_sitter_support import TreeSitterDocument

logger = logging.getLogger(__name__)


class KotlinDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_kotlin as tskotlin
        return Language(tskotlin.language())


# Grammar node types with a dedicated kind; everything else is COMPOSITE or a plain leaf
_KIND_BY_TYPE: Dict[str, NodeKind] = {
    "source_file": NodeKind.FILE,
    "class_declaration": NodeKind.CLASS,
    "class_body": NodeKind.CLASS_BODY,
    "enum_class_body": NodeKind.CLASS_BODY,
    "property_declaration": NodeKind.PROPERTY,
    "object_literal": NodeKind.OBJECT_LITERAL,
    "object_declaration": NodeKind.OBJECT_DECLARATION,
}

# Older and newer grammar releases name identifiers differently
IDENTIFIER_TYPES = frozenset({"identifier", "simple_identifier", "type_identifier"})
COMMENT_TYPES = frozenset({"line_comment", "multiline_comment", "block_comment", "comment"})

# Wrappers spliced into a property so its name identifier becomes a direct child
_SPLICED_INTO_PROPERTY = frozenset({"variable_declaration"})


def _leaf_kind(grammar_type: str, text: str) -> NodeKind:
    if grammar_type in IDENTIFIER_TYPES:
        return NodeKind.IDENTIFIER
    if grammar_type in COMMENT_TYPES:
        return NodeKind.COMMENT
    if text == "{":
        return NodeKind.LBRACE
    if text == "}":
        return NodeKind.RBRACE
    if text.strip() == "":
        return NodeKind.WHITESPACE
    return NodeKind.TOKEN


def _gap(doc: KotlinDocument, start_byte: int, end_byte: int) -> SyntaxNode:
    text = doc.get_byte_text(start_byte, end_byte)
    kind = NodeKind.WHITESPACE if text.strip() == "" else NodeKind.TOKEN
    return SyntaxNode.leaf(kind, text)


def _convert(doc: KotlinDocument, ts_node: Node,
             start_byte: Optional[int] = None, end_byte: Optional[int] = None) -> SyntaxNode:
    grammar_type = ts_node.type
    if grammar_type in IDENTIFIER_TYPES or grammar_type in COMMENT_TYPES or ts_node.child_count == 0:
        text = doc.get_node_text(ts_node)
        return SyntaxNode.leaf(_leaf_kind(grammar_type, text), text, grammar_type)

    node = SyntaxNode(_KIND_BY_TYPE.get(grammar_type, NodeKind.COMPOSITE), grammar_type=grammar_type)

    cursor = ts_node.start_byte if start_byte is None else start_byte
    for child in ts_node.children:
        if child.start_byte > cursor:
            node.append(_gap(doc, cursor, child.start_byte))
        node.append(_convert(doc, child))
        cursor = max(cursor, child.end_byte)

    stop = ts_node.end_byte if end_byte is None else end_byte
    if stop > cursor:
        node.append(_gap(doc, cursor, stop))

    if node.kind is NodeKind.PROPERTY:
        for child in list(node.children):
            if child.grammar_type in _SPLICED_INTO_PROPERTY:
                child.unwrap()

    return node


def parse_kotlin(text: str) -> SyntaxNode:
    """
    Parse Kotlin source into a FILE node whose leaves reproduce ``text`` exactly.

    Syntax errors do not abort the conversion: broken regions end up as
    COMPOSITE nodes and simply never match the structures the intentions look for.
    """
    doc = KotlinDocument(text)
    if doc.has_error():
        logger.debug("Kotlin source has %d syntax error node(s)", len(doc.get_errors()))

    root = _convert(doc, doc.root_node, start_byte=0, end_byte=doc.byte_length)
    root.kind = NodeKind.FILE
    return root


__all__ = ["KotlinDocument", "parse_kotlin", "IDENTIFIER_TYPES", "COMMENT_TYPES"]
