"""Validation helpers checking that a document holds an expected text.

Each helper parses its input, locates a node and compares the text below it
with an expected string. The expected string is parsed as markup too, so that
``"Z<sub>3</sub>"`` matches the text ``"Z3"`` of the document. Failures raise,
first problem wins: ``ParsingError``, then ``NodeNotFoundError``, then
``TextsDifferError``.
"""

from dataclasses import replace
from typing import Optional

from markup_tree_compare.compare.search import find_node, find_tag
from markup_tree_compare.compare.text import get_text
from markup_tree_compare.shared.config import ParserConfig
from markup_tree_compare.shared.errors import NodeNotFoundError, TextsDifferError
from markup_tree_compare.shared.logging import get_logger
from markup_tree_compare.tree.builder import InputType, parse, parse_string
from markup_tree_compare.tree.node import Node, NodeType


def compare_texts(
    node: Node,
    expected_text: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """Compare the text below ``node`` with the text of ``expected_text``.

    Raises:
        TextsDifferError: If the texts differ
    """
    got = get_text(node)
    # The expected text is a fragment; strict mode would reject it for lacking
    # a doctype.
    fragment_config = replace(config or ParserConfig(), strict=False)
    want = get_text(parse_string(expected_text, fragment_config, correlation_id))
    if got != want:
        raise TextsDifferError(got, want, node_name=node.data)


def is_text_tag(
    source: InputType,
    tag_name: str,
    expected_text: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """Check that the first ``tag_name`` element of ``source`` holds ``expected_text``.

    Args:
        source: Document to check, anything accepted by ``parse``
        tag_name: Element name, attributes are not considered
        expected_text: Expected text, markup is stripped before comparing
        config: Parser configuration
        correlation_id: Optional correlation ID for request tracking

    Raises:
        ParsingError: If ``source`` cannot be parsed
        NodeNotFoundError: If no ``tag_name`` element exists
        TextsDifferError: If the texts differ
    """
    logger = get_logger(__name__, correlation_id, "validation")
    document = parse(source, config, correlation_id)
    node = find_tag(document, tag_name, NodeType.ELEMENT)
    if node is None:
        logger.info("Tag not found", extra={"tag": tag_name})
        raise NodeNotFoundError(tag_name)
    try:
        compare_texts(node, expected_text, config, correlation_id)
    except TextsDifferError as e:
        logger.info("Texts differ", extra={"tag": tag_name, "got": e.got, "want": e.want})
        raise


def is_text_node(
    source: InputType,
    template: Optional[Node],
    expected_text: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """Check that the first node equal to ``template`` holds ``expected_text``.

    The node is located with full single-node equality: type, name, namespace
    and attributes of ``template`` must all match.

    Raises:
        ParsingError: If ``source`` cannot be parsed
        NodeNotFoundError: If no node equals ``template``
        TextsDifferError: If the texts differ
    """
    logger = get_logger(__name__, correlation_id, "validation")
    document = parse(source, config, correlation_id)
    node = find_node(document, template) if template is not None else None
    if node is None:
        name = template.data if template is not None else ""
        logger.info("Node not found", extra={"node": name})
        raise NodeNotFoundError(name, by_template=True)
    try:
        compare_texts(node, expected_text, config, correlation_id)
    except TextsDifferError as e:
        logger.info("Texts differ", extra={"node": node.data, "got": e.got, "want": e.want})
        raise
