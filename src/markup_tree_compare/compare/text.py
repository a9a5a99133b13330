"""Text content extraction."""

from typing import List, Optional, TextIO

from markup_tree_compare.tree.node import Node, NodeType


def _collect(node: Node, parts: List[str]) -> None:
    for child in node.children():
        if child.type == NodeType.TEXT:
            parts.append(child.data)
        _collect(child, parts)


def get_text(root: Node, sink: Optional[TextIO] = None) -> str:
    """Concatenate the text nodes below ``root`` in document order.

    ``root`` itself is not included. Text runs are joined as produced by the
    parser, without separators or whitespace normalization. When ``sink`` is
    given the text is also written to it.
    """
    parts: List[str] = []
    _collect(root, parts)
    text = "".join(parts)
    if sink is not None:
        sink.write(text)
    return text
