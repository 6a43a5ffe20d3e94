"""
Insertion of a new member at the end of a class body.
"""

from __future__ import annotations

import logging
from typing import List

from ..errors import StructuralAssumptionViolation
from ..tree.model import NodeKind, SyntaxNode
from ..tree.views import ClassBody

logger = logging.getLogger(__name__)

DEFAULT_INDENT_UNIT = "    "


def _closing_indent(body: ClassBody, anchor: SyntaxNode) -> str:
    if anchor.starts_line():
        return anchor.line_indent()
    return body.node.line_indent()


def _member_indent(members: List[SyntaxNode], closing_indent: str, indent_unit: str) -> str:
    for member in members:
        if member.starts_line():
            return member.line_indent()
    return closing_indent + indent_unit


def _line_separator(body: ClassBody) -> str:
    """Line break style of the file holding ``body``: CRLF if the file uses it, LF otherwise."""
    return "\r\n" if "\r\n" in body.node.root.text else "\n"


def _break_line_before(node: SyntaxNode, indent: str, separator: str) -> None:
    """Make ``node`` start a fresh line at ``indent``, reusing the whitespace leaf before it."""
    line_break = separator + indent
    prev = node.prev_sibling
    if prev is not None and prev.kind is NodeKind.WHITESPACE:
        prev.text = line_break
    else:
        parent = node.parent
        assert parent is not None
        parent.add_before(SyntaxNode.whitespace(line_break), node)


def insert(body: ClassBody, member: SyntaxNode, indent_unit: str = DEFAULT_INDENT_UNIT) -> SyntaxNode:
    """
    Add ``member`` as the last declaration of ``body``, right before its closing brace.

    An empty body is first cleared of whitespace so that ``{ }`` does not
    leave a stray blank line around the first member. Afterwards the member
    and the closing brace each start their own line.

    Raises:
        StructuralAssumptionViolation: the body does not end with a closing brace;
            nothing is inserted in that case.
    """
    existing = body.members
    anchor = body.closing_brace
    if anchor is None:
        raise StructuralAssumptionViolation("Class body has no closing brace to insert before")

    # Indentation is measured on the untouched layout
    closing_indent = _closing_indent(body, anchor)
    member_indent = _member_indent(existing, closing_indent, indent_unit)
    separator = _line_separator(body)

    if not existing:
        removed = body.node.clear_whitespace()
        logger.debug("Cleared %d whitespace node(s) from empty body", removed)

    body.node.add_before(member, anchor)
    _break_line_before(member, member_indent, separator)
    _break_line_before(anchor, closing_indent, separator)
    return member


__all__ = ["insert", "DEFAULT_INDENT_UNIT"]
