"""
Tests for the Kotlin tree provider (tree-sitter parse -> SyntaxNode).
"""

from summer.tree import parse_kotlin
from summer.tree.model import NodeKind
from summer.tree.views import ClassDeclaration, PropertyDeclaration
from tests.infrastructure import caret_on


def test_leaves_reproduce_source_exactly(presenter_empty_proxy, presenter_with_loading):
    for src in (presenter_empty_proxy, presenter_with_loading):
        assert parse_kotlin(src).text == src


def test_unicode_and_comments_survive():
    src = (
        "// Состояние экрана\n"
        "interface State {\n"
        "    /* заголовок */ val title: String // «title»\n"
        "}\n"
    )
    root = parse_kotlin(src)
    assert root.text == src
    assert any(leaf.kind is NodeKind.COMMENT for leaf in root.leaves())


def test_top_level_classes(presenter_empty_proxy):
    root = parse_kotlin(presenter_empty_proxy)
    assert root.kind is NodeKind.FILE
    names = [ClassDeclaration(c).name for c in root.children if c.kind is NodeKind.CLASS]
    assert names == ["State", "FeedPresenter"]


def test_property_name_is_direct_child(presenter_empty_proxy):
    root = parse_kotlin(presenter_empty_proxy)
    leaf = root.leaf_at(caret_on(presenter_empty_proxy, "loading"))
    assert leaf.kind is NodeKind.IDENTIFIER
    assert leaf.text == "loading"
    prop = PropertyDeclaration.match(leaf.parent)
    assert prop is not None
    assert prop.name == "loading"


def test_interface_body_holds_properties(presenter_empty_proxy):
    root = parse_kotlin(presenter_empty_proxy)
    state = ClassDeclaration(root.children_of_kind(NodeKind.CLASS)[0])
    assert [p.name for p in state.body.properties] == ["loading", "items"]


def test_proxy_initializer_is_object_literal(presenter_with_loading):
    root = parse_kotlin(presenter_with_loading)
    presenter = ClassDeclaration(root.children_of_kind(NodeKind.CLASS)[1])
    proxy = [p for p in presenter.body.properties if p.name == "viewStateProxy"][0]
    literal = proxy.initializer
    assert literal is not None
    body = literal.body
    assert body is not None
    assert body.node.first_child.kind is NodeKind.LBRACE
    assert body.closing_brace is not None
    assert [p.name for p in body.properties] == ["loading"]


def test_syntax_errors_do_not_abort():
    src = "class Broken {\n    val = \n"
    root = parse_kotlin(src)
    assert root.kind is NodeKind.FILE
    assert root.text == src
