"""Diagnostic printers for exploring document trees.

These helpers only print; they have no comparison semantics. Every node is
shown with its canonical string, e.g. ``p (Element) [{ class ex1}]``.
"""

import sys
from typing import Optional, TextIO

from markup_tree_compare.compare.equality import equal
from markup_tree_compare.tree.node import Node, NodeType, format_node


def explore_node(
    node: Node,
    name: str = "",
    node_type: NodeType = NodeType.ANY,
    stream: Optional[TextIO] = None,
) -> None:
    """Print the nodes named ``name`` with type ``node_type``.

    An empty name prints every node of the type. Children start a new line
    and siblings share it.
    """
    _explore(node, name, node_type, stream or sys.stdout)


def _explore(node: Node, name: str, node_type: NodeType, stream: TextIO) -> None:
    if node.type == node_type or node_type == NodeType.ANY:
        if node.data == name or name == "":
            stream.write(" " + format_node(node))
    if node.first_child is not None:
        stream.write("\n")
    for child in node.children():
        _explore(child, name, node_type, stream)


def print_tags(
    node: Node,
    name: str = "",
    tag_only: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Print one node per line until the element named ``name`` is reached.

    With ``tag_only`` only elements are printed. The subtree of the element
    named ``name`` is not printed; its following siblings still are.
    """
    _print_tags(node, name, tag_only, stream or sys.stdout)


def _print_tags(node: Node, name: str, tag_only: bool, stream: TextIO) -> None:
    if not tag_only or node.type == NodeType.ELEMENT:
        stream.write(format_node(node) + "\n")
    if name and node.type == NodeType.ELEMENT and node.data == name:
        stream.write(f"[{node.data}] found. Stopping exploration\n")
        return
    for child in node.children():
        _print_tags(child, name, tag_only, stream)


def print_nodes(
    m: Node,
    n: Optional[Node] = None,
    node_type: NodeType = NodeType.ANY,
    depth: int = 0,
    stream: Optional[TextIO] = None,
) -> None:
    """Print the tree below ``m`` indented with one dot per level.

    Nodes equal to ``n`` are announced with ``tag found:``. Only children of
    ``node_type`` are printed, ``NodeType.ANY`` printing all of them.
    """
    _print_nodes(m, n, node_type, depth, stream or sys.stdout)


def _print_nodes(
    m: Node, n: Optional[Node], node_type: NodeType, depth: int, stream: TextIO
) -> None:
    if equal(m, n):
        stream.write("\ntag found: " + format_node(m))
    if m.first_child is not None:
        stream.write("\n" + "." * depth)
    for child in m.children():
        if child.type == node_type or node_type == NodeType.ANY:
            stream.write(" " + format_node(child))
        _print_nodes(child, n, node_type, depth + 1, stream)
