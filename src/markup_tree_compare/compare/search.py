"""Pre-order search of tags and nodes in a document tree."""

from typing import List, Optional

from markup_tree_compare.compare.equality import equal
from markup_tree_compare.tree.node import Node, NodeType


def _matches(node: Node, name: str, node_type: NodeType) -> bool:
    return node.data == name and (node.type == node_type or node_type == NodeType.ANY)


def find_tag(root: Node, name: str, node_type: NodeType) -> Optional[Node]:
    """Find the first node named ``name`` whatever its attributes.

    Passing ``NodeType.ANY`` searches nodes of every type.
    """
    if _matches(root, name, node_type):
        return root
    for child in root.children():
        found = find_tag(child, name, node_type)
        if found is not None:
            return found
    return None


def find_tags(root: Node, name: str, node_type: NodeType) -> List[Node]:
    """Find all nodes named ``name`` whatever their attributes.

    The subtree of a matching node is not searched: a ``div`` nested in a
    matching ``div`` is not returned.
    """
    if _matches(root, name, node_type):
        return [root]
    found: List[Node] = []
    for child in root.children():
        found.extend(find_tags(child, name, node_type))
    return found


def find_node(root: Node, template: Node) -> Optional[Node]:
    """Find the first node equal to ``template``.

    Only the values of the template are used; its tree links are ignored, so
    any standalone ``Node`` can serve as a pattern.
    """
    if equal(root, template):
        return root
    for child in root.children():
        found = find_node(child, template)
        if found is not None:
            return found
    return None
