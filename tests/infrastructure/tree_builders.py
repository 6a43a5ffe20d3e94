"""
Hand-built syntax trees.

They mirror the shape the Kotlin tree provider produces (whitespace leaves
between tokens, property names as direct children) without going through
tree-sitter, so structural tests do not depend on the grammar.
"""

from __future__ import annotations

from typing import Optional

from summer.tree.model import NodeKind, SyntaxNode


def tok(text: str) -> SyntaxNode:
    return SyntaxNode.leaf(NodeKind.TOKEN, text)


def ws(text: str = " ") -> SyntaxNode:
    return SyntaxNode.whitespace(text)


def ident(name: str) -> SyntaxNode:
    return SyntaxNode.leaf(NodeKind.IDENTIFIER, name)


def lbrace() -> SyntaxNode:
    return SyntaxNode.leaf(NodeKind.LBRACE, "{")


def rbrace() -> SyntaxNode:
    return SyntaxNode.leaf(NodeKind.RBRACE, "}")


def _node(kind: NodeKind, *children: SyntaxNode) -> SyntaxNode:
    node = SyntaxNode(kind)
    for child in children:
        node.append(child)
    return node


def prop(name: str, type_name: str = "Boolean") -> SyntaxNode:
    """``val <name>: <type>``"""
    return _node(NodeKind.PROPERTY, tok("val"), ws(), ident(name), tok(":"), ws(), tok(type_name))


def delegated(name: str) -> SyntaxNode:
    """``override val <name> by owner.delegateFor("<name>")``"""
    return _node(
        NodeKind.PROPERTY,
        tok("override"), ws(), tok("val"), ws(), ident(name), ws(), tok("by"), ws(),
        tok(f'owner.delegateFor("{name}")'),
    )


def class_body(*members: SyntaxNode, indent: str = "    ", outer: str = "") -> SyntaxNode:
    """Body with one member per line."""
    body = _node(NodeKind.CLASS_BODY, lbrace())
    for member in members:
        body.append(ws("\n" + indent))
        body.append(member)
    body.append(ws("\n" + outer))
    body.append(rbrace())
    return body


def empty_body(space: Optional[str] = " ") -> SyntaxNode:
    """``{ }`` (or ``{}`` when ``space`` is None)."""
    body = _node(NodeKind.CLASS_BODY, lbrace())
    if space is not None:
        body.append(ws(space))
    body.append(rbrace())
    return body


def class_decl(name: str, body: Optional[SyntaxNode], keyword: str = "class") -> SyntaxNode:
    cls = _node(NodeKind.CLASS, tok(keyword), ws(), ident(name))
    if body is not None:
        cls.append(ws())
        cls.append(body)
    return cls


def object_literal(body: SyntaxNode, supertype: str = "ViewStateProxy") -> SyntaxNode:
    return _node(NodeKind.OBJECT_LITERAL, tok("object"), ws(), tok(":"), ws(), tok(supertype), ws(), body)


def proxy_prop(initializer: Optional[SyntaxNode], name: str = "viewStateProxy") -> SyntaxNode:
    """``override val viewStateProxy = <initializer>``"""
    node = _node(NodeKind.PROPERTY, tok("override"), ws(), tok("val"), ws(), ident(name))
    if initializer is not None:
        node.append(ws())
        node.append(tok("="))
        node.append(ws())
        node.append(initializer)
    return node


def kt_file(*declarations: SyntaxNode) -> SyntaxNode:
    root = SyntaxNode(NodeKind.FILE)
    for i, decl in enumerate(declarations):
        if i:
            root.append(ws("\n\n"))
        root.append(decl)
    root.append(ws("\n"))
    return root


def presenter_file(proxy_body: Optional[SyntaxNode] = None,
                   state_props: tuple = ("loading",),
                   presenter_name: str = "FeedPresenter") -> SyntaxNode:
    """
    ``interface State { val ... }`` followed by a presenter whose
    ``viewStateProxy`` is an object literal with ``proxy_body``.
    """
    state = class_decl("State", class_body(*[prop(p) for p in state_props]), keyword="interface")
    if proxy_body is None:
        proxy_body = class_body(indent="        ", outer="    ")
    presenter = class_decl(
        presenter_name,
        class_body(proxy_prop(object_literal(proxy_body))),
    )
    return kt_file(state, presenter)
