"""Parser collaborator turning HTML input into ``Node`` trees.

Markup is parsed with html5lib, which implements the WHATWG HTML parsing
algorithm: the implied ``html``/``head``/``body`` elements are created, open
elements are closed by the tags that imply their end, and stray end tags are
repaired exactly as a browser would. The resulting DOM is then converted into
the first-child/next-sibling ``Node`` model consumed by the comparison engine.
"""

import time
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, TextIO, Tuple, Union
from xml.dom import Node as DomNode

import html5lib
from html5lib.html5parser import ParseError as Html5ParseError

from markup_tree_compare.shared.config import ParserConfig
from markup_tree_compare.shared.errors import ParsingError
from markup_tree_compare.shared.logging import get_logger
from markup_tree_compare.tree.node import Attribute, Node, NodeType

# Type definitions for input data
InputType = Union[str, bytes, bytearray, BinaryIO, TextIO, Path]

MS_PER_SECOND = 1000

# Short namespace names used on nodes, keyed by namespace URI
ELEMENT_NAMESPACES = {
    "http://www.w3.org/1999/xhtml": "",
    "http://www.w3.org/2000/svg": "svg",
    "http://www.w3.org/1998/Math/MathML": "math",
}
ATTRIBUTE_NAMESPACES = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
    "http://www.w3.org/2000/xmlns/": "xmlns",
}


def parse(
    source: InputType,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> Node:
    """Parse HTML from a string, bytes, path or readable object.

    Args:
        source: Markup as ``str`` or ``bytes``, a ``Path`` to a file, or any
            object with a ``read()`` method
        config: Parser configuration, defaults to ``ParserConfig()``
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The DOCUMENT node at the root of the parsed tree

    Raises:
        ParsingError: If the input cannot be read or parsed
        OSError: If a ``Path`` cannot be opened

    Examples:
        >>> root = parse('<p class="ex1">Hello</p>')
        >>> root.type is NodeType.DOCUMENT
        True
    """
    if isinstance(source, Path):
        return parse_file(source, config, correlation_id)
    if isinstance(source, (str, bytes, bytearray)):
        return _parse_markup(source, config or ParserConfig(), correlation_id)
    if hasattr(source, "read"):
        try:
            content = source.read()
        except Exception as e:
            raise ParsingError(str(e)) from e
        if not isinstance(content, (str, bytes, bytearray)):
            raise ParsingError(
                f"read() returned {type(content).__name__}, expected str or bytes"
            )
        return _parse_markup(content, config or ParserConfig(), correlation_id)
    raise TypeError(f"Unsupported input type: {type(source).__name__}")


def parse_string(
    markup: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> Node:
    """Parse HTML held in a string."""
    if not isinstance(markup, str):
        raise TypeError("markup must be a str")
    return _parse_markup(markup, config or ParserConfig(), correlation_id)


def parse_file(
    path: Union[str, Path],
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> Node:
    """Parse an HTML file.

    Opening errors (missing file, permissions) propagate unchanged so that
    callers can tell them apart from parsing failures.
    """
    content = Path(path).read_bytes()
    return _parse_markup(content, config or ParserConfig(), correlation_id)


def _parse_markup(
    content: Union[str, bytes, bytearray],
    config: ParserConfig,
    correlation_id: Optional[str],
) -> Node:
    start_time = time.time()
    logger = get_logger(__name__, correlation_id, "builder")

    parser = html5lib.HTMLParser(
        tree=html5lib.getTreeBuilder("dom"),
        strict=config.strict,
        namespaceHTMLElements=False,
    )
    kwargs: Dict[str, Any] = {}
    if isinstance(content, (bytes, bytearray)):
        content = bytes(content)
        if config.encoding:
            kwargs["override_encoding"] = config.encoding

    try:
        document = parser.parse(content, **kwargs)
    except Html5ParseError as e:
        raise ParsingError(str(e) or "malformed markup") from e
    except (LookupError, UnicodeError) as e:
        raise ParsingError(str(e)) from e

    root, node_count = _convert(document, config)
    logger.debug(
        "Parsed document",
        extra={
            "input_length": len(content),
            "node_count": node_count,
            "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
        },
    )
    return root


def _convert(document: Any, config: ParserConfig) -> Tuple[Node, int]:
    """Convert a DOM document into a ``Node`` tree without recursion."""
    root = Node(NodeType.DOCUMENT)
    node_count = 1
    stack: List[Tuple[Any, Node, int]] = [(document, root, 0)]
    while stack:
        dom_parent, parent, depth = stack.pop()
        if depth >= config.max_depth:
            raise ParsingError(
                f"document nesting exceeds {config.max_depth} levels"
            )
        for dom_child in dom_parent.childNodes:
            if dom_child.nodeType == DomNode.TEXT_NODE:
                last = parent.last_child
                if config.merge_text and last is not None and last.type is NodeType.TEXT:
                    last.data += dom_child.data
                    continue
                parent.append_child(Node(NodeType.TEXT, dom_child.data))
            elif dom_child.nodeType == DomNode.ELEMENT_NODE:
                child = parent.append_child(_convert_element(dom_child))
                stack.append((dom_child, child, depth + 1))
            elif dom_child.nodeType == DomNode.COMMENT_NODE:
                parent.append_child(Node(NodeType.COMMENT, dom_child.data))
            elif dom_child.nodeType == DomNode.DOCUMENT_TYPE_NODE:
                parent.append_child(_convert_doctype(dom_child))
            else:
                continue
            node_count += 1
    return root, node_count


def _convert_element(element: Any) -> Node:
    namespace = ELEMENT_NAMESPACES.get(element.namespaceURI or "", element.namespaceURI or "")
    attributes = []
    dom_attributes = element.attributes
    for index in range(dom_attributes.length):
        dom_attribute = dom_attributes.item(index)
        attribute_namespace = dom_attribute.namespaceURI or ""
        key = dom_attribute.name
        if attribute_namespace in ATTRIBUTE_NAMESPACES:
            attribute_namespace = ATTRIBUTE_NAMESPACES[attribute_namespace]
            key = key.split(":", 1)[-1]
        attributes.append(Attribute(attribute_namespace, key, dom_attribute.value))
    return Node(NodeType.ELEMENT, element.tagName, namespace, attributes)


def _convert_doctype(doctype: Any) -> Node:
    attributes = []
    if doctype.publicId:
        attributes.append(Attribute("", "public", doctype.publicId))
    if doctype.systemId:
        attributes.append(Attribute("", "system", doctype.systemId))
    return Node(NodeType.DOCTYPE, doctype.name or "", attributes=attributes)
