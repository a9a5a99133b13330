"""Tests for single-node equality and attribute matching."""

import itertools
from pathlib import Path

import pytest

from markup_tree_compare.compare.equality import attr_equal, attr_included, equal
from markup_tree_compare.compare.search import find_tag
from markup_tree_compare.tree.builder import parse_file
from markup_tree_compare.tree.node import Attribute, Node, NodeType

DATA_DIR = Path(__file__).parent.parent / "data"

CLASS_FIXED = Attribute("", "class", "fixed")
STYLE_H2 = Attribute("", "style", "h2")


class TestEqual:
    """Test node equality field by field."""

    def test_absent_nodes(self) -> None:
        node = Node(NodeType.ELEMENT, "p")
        assert equal(None, None)
        assert not equal(None, node)
        assert not equal(node, None)

    def test_reflexive(self) -> None:
        node = Node(NodeType.ELEMENT, "p", "ns", [CLASS_FIXED, STYLE_H2])
        assert equal(node, node)

    def test_empty_nodes_are_equal(self) -> None:
        assert equal(Node(), Node())

    def test_each_field_matters(self) -> None:
        tag1 = Node(NodeType.ELEMENT, "h1")
        tag2 = Node(NodeType.ELEMENT, "h2")
        assert not equal(tag1, tag2)

        tag2.data = "h1"
        tag2.type = NodeType.TEXT
        assert not equal(tag1, tag2)

        tag2.type = NodeType.ELEMENT
        tag2.namespace = "ns"
        assert not equal(tag1, tag2)

        tag1.namespace = "ns"
        tag2.attributes = [CLASS_FIXED]
        assert not equal(tag1, tag2)

        tag1.attributes = [CLASS_FIXED]
        assert equal(tag1, tag2)

        tag2.attributes = [CLASS_FIXED, STYLE_H2]
        assert not equal(tag1, tag2)

        tag1.attributes = [STYLE_H2, CLASS_FIXED]
        assert equal(tag1, tag2)

        tag1.attributes = [STYLE_H2, Attribute("", "class", "variable")]
        assert not equal(tag1, tag2)

    def test_tree_position_is_ignored(self) -> None:
        parent = Node(NodeType.ELEMENT, "div")
        child = parent.append_child(Node(NodeType.ELEMENT, "p"))
        template = Node(NodeType.ELEMENT, "p")

        assert equal(child, template)
        assert equal(parent, Node(NodeType.ELEMENT, "div"))


class TestAttrEqual:
    """Attribute lists are compared as multisets."""

    def test_both_empty(self) -> None:
        assert attr_equal(Node(), Node())

    @pytest.mark.parametrize(
        "order", list(itertools.permutations(range(3)))
    )
    def test_order_independent(self, order) -> None:
        attributes = [CLASS_FIXED, STYLE_H2, Attribute("xlink", "href", "#a")]
        m = Node(NodeType.ELEMENT, "a", attributes=[attributes[i] for i in order])
        n = Node(NodeType.ELEMENT, "a", attributes=attributes)
        assert attr_equal(m, n)
        assert equal(m, n)

    def test_duplicates_are_counted(self) -> None:
        m = Node(attributes=[CLASS_FIXED, CLASS_FIXED])
        n = Node(attributes=[CLASS_FIXED, STYLE_H2])
        assert not attr_equal(m, n)
        assert not attr_equal(n, m)
        assert attr_equal(m, Node(attributes=[CLASS_FIXED, CLASS_FIXED]))

    def test_length_mismatch(self) -> None:
        assert not attr_equal(Node(attributes=[CLASS_FIXED]), Node())
        assert not attr_equal(Node(), Node(attributes=[CLASS_FIXED]))

    def test_namespace_of_attribute_matters(self) -> None:
        m = Node(attributes=[Attribute("xlink", "href", "#a")])
        n = Node(attributes=[Attribute("", "href", "#a")])
        assert not attr_equal(m, n)


class TestAttrIncluded:
    """Attribute inclusion is bounded by the shorter list."""

    def test_both_empty(self) -> None:
        assert attr_included(Node(), Node())

    def test_included(self) -> None:
        m = Node(attributes=[STYLE_H2, CLASS_FIXED])
        n = Node(attributes=[CLASS_FIXED])
        assert attr_included(m, n)

    def test_wrong_value(self) -> None:
        m = Node(attributes=[Attribute("", "class", "ex1")])
        n = Node(attributes=[Attribute("", "class", "not-found")])
        assert not attr_included(m, n)

    def test_excess_attributes_of_n_are_not_checked(self) -> None:
        m = Node(attributes=[CLASS_FIXED])
        n = Node(attributes=[CLASS_FIXED, Attribute("", "id", "unchecked")])
        assert attr_included(m, n)

    def test_empty_side_includes_anything(self) -> None:
        assert attr_included(Node(), Node(attributes=[CLASS_FIXED]))
        assert attr_included(Node(attributes=[CLASS_FIXED]), Node())

    def test_against_parsed_document(self) -> None:
        document = parse_file(DATA_DIR / "table.html")
        paragraph = find_tag(document, "p", NodeType.ELEMENT)

        assert attr_included(paragraph, Node(NodeType.ELEMENT, "p", attributes=[Attribute("", "class", "ex1")]))
        assert attr_included(paragraph, Node(NodeType.ELEMENT, "p"))
        assert not attr_included(
            paragraph, Node(NodeType.ELEMENT, "p", attributes=[Attribute("", "class", "not-found")])
        )
