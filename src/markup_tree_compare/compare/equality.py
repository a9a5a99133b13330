"""Single-node equality and attribute list matching.

Nodes are equal when their type, data, namespace and attributes match. Tree
position and children are ignored; attribute order is ignored but duplicates
count.
"""

from collections import Counter
from typing import List, Optional

from markup_tree_compare.tree.node import Attribute, Node


def _find_attribute(attribute: Attribute, attributes: List[Attribute]) -> bool:
    return any(attribute == candidate for candidate in attributes)


def attr_equal(m: Node, n: Node) -> bool:
    """Return True if both attribute lists hold the same attributes.

    Order is irrelevant and the comparison is count-sensitive: two identical
    attributes on ``m`` need two identical attributes on ``n``.
    """
    if not m.attributes and not n.attributes:
        return True
    if len(m.attributes) != len(n.attributes):
        return False
    return Counter(m.attributes) == Counter(n.attributes)


def attr_included(m: Node, n: Node) -> bool:
    """Return True if the attributes of ``n`` are found on reference node ``m``.

    Only the first ``min(len(m.attributes), len(n.attributes))`` attributes of
    ``n`` are looked up, so attributes of ``n`` beyond the length of ``m``'s
    list never cause a mismatch.
    """
    if not m.attributes and not n.attributes:
        return True
    for index in range(min(len(m.attributes), len(n.attributes))):
        if not _find_attribute(n.attributes[index], m.attributes):
            return False
    return True


def equal(m: Optional[Node], n: Optional[Node]) -> bool:
    """Return True if both nodes are absent or hold the same values.

    Links to parent, children and siblings are not compared.
    """
    if m is None and n is None:
        return True
    if m is None or n is None:
        return False
    return (
        m.type == n.type
        and m.data == n.data
        and m.namespace == n.namespace
        and attr_equal(m, n)
    )
