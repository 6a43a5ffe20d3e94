"""
Tests for has_member and the insertion of a new member before the closing brace.
"""

import pytest

from summer.errors import StructuralAssumptionViolation
from summer.intentions.members import has_member
from summer.intentions.mutator import insert
from summer.tree.model import NodeKind, SyntaxNode
from summer.tree.views import ClassBody
from tests.infrastructure import (
    class_body, delegated, empty_body, lbrace, object_literal, presenter_file, prop, proxy_prop, class_decl,
    kt_file, ws,
)


# ============= has_member =============

def test_has_member_exact_match():
    body = ClassBody(class_body(delegated("loading"), delegated("items")))
    assert has_member(body, "loading")
    assert has_member(body, "items")
    assert not has_member(body, "Loading")
    assert not has_member(body, "load")
    assert not has_member(body, "")


def test_has_member_ignores_non_properties():
    fun = SyntaxNode(NodeKind.COMPOSITE)
    fun.append(SyntaxNode.leaf(NodeKind.TOKEN, "fun"))
    fun.append(ws())
    fun.append(SyntaxNode.leaf(NodeKind.IDENTIFIER, "loading"))
    body = ClassBody(class_body(fun))
    assert not has_member(body, "loading")


def test_has_member_empty_body():
    assert not has_member(ClassBody(empty_body()), "loading")


# ============= insert: non-empty bodies =============

def _proxy_file(proxy_body):
    return presenter_file(proxy_body)


def test_insert_becomes_last_member():
    existing = [delegated("a"), delegated("b")]
    node = class_body(*existing, indent="        ", outer="    ")
    root = _proxy_file(node)
    body = ClassBody(node)

    new = delegated("c")
    insert(body, new)

    assert body.members == existing + [new]
    # Nothing but layout between the new member and the closing brace
    assert new.next_sibling.kind is NodeKind.WHITESPACE
    assert new.next_sibling.next_sibling is body.closing_brace
    assert "\n\n" not in node.text
    assert root.text.count("\n\n") == 1


def test_insert_layout_matches_existing_members():
    node = class_body(delegated("a"), indent="        ", outer="    ")
    root = _proxy_file(node)
    insert(ClassBody(node), delegated("b"))
    assert node.text == (
        "{\n"
        '        override val a by owner.delegateFor("a")\n'
        '        override val b by owner.delegateFor("b")\n'
        "    }"
    )
    assert root.text.endswith("    }\n}\n")


def test_insert_collapses_blank_line_before_closing_brace():
    node = class_body(delegated("a"), indent="        ", outer="    ")
    node.children[-2].text = "\n\n\n    "
    _proxy_file(node)
    insert(ClassBody(node), delegated("b"))
    assert "\n\n" not in node.text
    assert node.text.endswith('delegateFor("b")\n    }')


def test_insert_keeps_order_of_prior_children():
    node = class_body(delegated("a"), delegated("b"), indent="        ", outer="    ")
    _proxy_file(node)
    before = [c for c in node.children if c.kind is not NodeKind.WHITESPACE]
    new = delegated("c")
    insert(ClassBody(node), new)
    after = [c for c in node.children if c.kind is not NodeKind.WHITESPACE]
    assert after[:-2] == before[:-1]
    assert after[-2:] == [new, before[-1]]


# ============= insert: empty bodies =============

@pytest.mark.parametrize("placeholder", [" ", "\n    ", "\n\n    ", None])
def test_insert_into_empty_body(placeholder):
    node = empty_body(placeholder)
    root = _proxy_file(node)
    body = ClassBody(node)

    new = delegated("loading")
    insert(body, new)

    assert body.members == [new]
    assert node.text == (
        "{\n"
        '        override val loading by owner.delegateFor("loading")\n'
        "    }"
    )
    assert root.text.count("\n\n") == 1


def test_insert_into_empty_top_level_body():
    node = empty_body()
    root = kt_file(class_decl("FeedPresenter", class_body(proxy_prop(object_literal(node)), indent="\t")))
    insert(ClassBody(node), delegated("loading"), indent_unit="\t")
    assert node.text == '{\n\t\toverride val loading by owner.delegateFor("loading")\n\t}'
    assert root.text.count("\n\n") == 0


# ============= insert: failures =============

def test_insert_without_closing_brace():
    node = SyntaxNode(NodeKind.CLASS_BODY)
    node.append(lbrace())
    node.append(ws("\n"))
    root = kt_file(class_decl("FeedPresenter", class_body(proxy_prop(object_literal(node)))))
    before = root.text

    new = delegated("loading")
    with pytest.raises(StructuralAssumptionViolation):
        insert(ClassBody(node), new)
    assert root.text == before
    assert new.parent is None


def test_insert_into_body_without_children():
    node = SyntaxNode(NodeKind.CLASS_BODY)
    with pytest.raises(StructuralAssumptionViolation):
        insert(ClassBody(node), prop("loading"))
    assert node.children == []
