"""Tests for tag and node search."""

from pathlib import Path

import pytest

from markup_tree_compare.compare.equality import attr_included
from markup_tree_compare.compare.search import find_node, find_tag, find_tags
from markup_tree_compare.tree.builder import parse_file, parse_string
from markup_tree_compare.tree.node import Attribute, Node, NodeType, format_node

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture
def table_document():
    return parse_file(DATA_DIR / "table.html")


def _button_grid(size: int) -> str:
    rows = []
    for row in range(size):
        cells = []
        for column in range(size):
            title = "Neutral" if row == column else "Other"
            cells.append(f'<td><button title="{title}">{row}{column}</button></td>')
        rows.append("<tr>" + "".join(cells) + "</tr>")
    return "<table>" + "".join(rows) + "</table>"


class TestFindTag:
    """Test first-match search by name."""

    def test_found(self, table_document) -> None:
        node = find_tag(table_document, "table", NodeType.ELEMENT)
        assert node is not None
        assert format_node(node) == "table (Element) [{ class fixed}]"

    def test_not_found(self, table_document) -> None:
        assert find_tag(table_document, "display", NodeType.ELEMENT) is None

    def test_first_in_document_order(self, table_document) -> None:
        node = find_tag(table_document, "p", NodeType.ELEMENT)
        assert node.get_attribute("class") == "ex1"

    def test_type_filter(self, table_document) -> None:
        assert find_tag(table_document, "html", NodeType.ELEMENT).type is NodeType.ELEMENT
        assert find_tag(table_document, "html", NodeType.DOCTYPE).type is NodeType.DOCTYPE
        assert find_tag(table_document, "table", NodeType.TEXT) is None

    def test_any_type(self, table_document) -> None:
        # The doctype comes before the html element.
        assert find_tag(table_document, "html", NodeType.ANY).type is NodeType.DOCTYPE

    def test_root_can_match(self) -> None:
        root = Node(NodeType.ELEMENT, "div")
        assert find_tag(root, "div", NodeType.ELEMENT) is root

    def test_text_nodes_by_content(self) -> None:
        document = parse_string("<p>one</p><p>two</p>")
        node = find_tag(document, "two", NodeType.TEXT)
        assert node is not None
        assert node.parent.data == "p"


class TestFindTags:
    """Test all-matches search."""

    def test_counts_every_match(self) -> None:
        document = parse_string(_button_grid(9))
        buttons = find_tags(document, "button", NodeType.ELEMENT)
        assert len(buttons) == 81

        template = Node(NodeType.ELEMENT, "caption", attributes=[Attribute("", "title", "Neutral")])
        neutral = [button for button in buttons if attr_included(button, template)]
        assert len(neutral) == 9

    def test_document_order(self) -> None:
        document = parse_string("<ul><li>a</li><li>b</li></ul><ol><li>c</li></ol>")
        items = find_tags(document, "li", NodeType.ELEMENT)
        assert [item.first_child.data for item in items] == ["a", "b", "c"]

    def test_does_not_descend_into_matches(self) -> None:
        document = parse_string(
            '<div id="outer"><div id="inner">x</div></div><div id="second"></div>'
        )
        divs = find_tags(document, "div", NodeType.ELEMENT)
        assert [div.get_attribute("id") for div in divs] == ["outer", "second"]

    def test_no_match(self, table_document) -> None:
        assert find_tags(table_document, "button", NodeType.ELEMENT) == []


class TestFindNode:
    """Test search by template node."""

    @pytest.mark.parametrize(
        "template, found",
        [
            (Node(NodeType.ELEMENT, "table", attributes=[Attribute("", "class", "fixed")]), True),
            (Node(NodeType.ELEMENT, "caption"), True),
            (Node(NodeType.ELEMENT, "p", attributes=[Attribute("", "class", "not-found")]), False),
            (Node(NodeType.ELEMENT, "p", "ns", [Attribute("", "class", "ex1")]), False),
            (Node(NodeType.ELEMENT, "p", attributes=[Attribute("", "class", "ex2")]), True),
        ],
    )
    def test_templates(self, table_document, template, found) -> None:
        node = find_node(table_document, template)
        if found:
            assert node is not None
            assert format_node(node) == format_node(template)
            assert node is not template
        else:
            assert node is None

    def test_template_links_are_ignored(self, table_document) -> None:
        template = Node(NodeType.ELEMENT, "caption")
        template.append_child(Node(NodeType.TEXT, "unrelated"))
        assert find_node(table_document, template) is not None

    def test_attributes_must_all_match(self, table_document) -> None:
        template = Node(NodeType.ELEMENT, "caption", attributes=[Attribute("", "class", "ex2")])
        assert find_node(table_document, template) is None
