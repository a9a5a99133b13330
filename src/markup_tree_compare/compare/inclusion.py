"""Recursive inclusion and identity checks between two document trees.

All checks walk the children of the reference tree ``m`` and pair each of them
with the sibling at the same position in the candidate tree ``n``. Siblings are
never re-matched out of order: the checks test structural alignment. Each
function returns the node from which the trees diverge, or ``None``.

``included_node`` ignores whatever ``n`` holds beyond the children of ``m``.
``included_node_typed`` only reports divergences between nodes of one type.
``identical_nodes`` additionally reports siblings of ``n`` left over once the
children of ``m`` are exhausted.
"""

from typing import Optional

from markup_tree_compare.compare.equality import equal
from markup_tree_compare.shared.logging import get_logger
from markup_tree_compare.tree.node import Node, NodeType, format_node

logger = get_logger(__name__, component="inclusion")


def _next_sibling(node: Optional[Node]) -> Optional[Node]:
    return node.next_sibling if node is not None else None


def _counts(node: Node, node_type: NodeType) -> bool:
    return node_type == NodeType.ANY or node.type == node_type


def _included(m: Optional[Node], n: Optional[Node]) -> Optional[Node]:
    if not equal(m, n):
        if m is None:
            return n
        return m
    if m is None:
        return None

    counterpart = n.first_child
    for child in m.children():
        diverging = _included(child, counterpart)
        if diverging is not None:
            return diverging
        counterpart = _next_sibling(counterpart)
    return None


def _included_typed(
    m: Optional[Node], n: Optional[Node], node_type: NodeType, exhaust: bool
) -> Optional[Node]:
    if not equal(m, n):
        if m is None:
            return n
        if n is None:
            return m
        if _counts(m, node_type) and _counts(n, node_type):
            return m
        # Mismatch of another type: keep comparing the children.
    elif m is None:
        return None

    counterpart = n.first_child
    for child in m.children():
        diverging = _included_typed(child, counterpart, node_type, exhaust)
        if diverging is not None and _counts(diverging, node_type):
            return diverging
        counterpart = _next_sibling(counterpart)

    if exhaust and counterpart is not None:
        return counterpart
    return None


def _report(kind: str, diverging: Optional[Node]) -> Optional[Node]:
    if diverging is not None and logger.is_debug_enabled():
        logger.debug(
            "Trees diverge",
            extra={"check": kind, "node": format_node(diverging)},
        )
    return diverging


def included_node(m: Optional[Node], n: Optional[Node]) -> Optional[Node]:
    """Check that tree ``n`` reproduces tree ``m``, siblings in order.

    Extra siblings of ``n`` beyond the children of ``m`` are not checked.

    Returns:
        ``None`` when ``m`` is included in ``n``. Otherwise the node where the
        trees diverge: the node of ``m`` on a mismatch, or the present node
        when the other side is absent.
    """
    return _report("included", _included(m, n))


def included_node_typed(
    m: Optional[Node], n: Optional[Node], node_type: NodeType
) -> Optional[Node]:
    """Like ``included_node`` but only nodes of ``node_type`` can diverge.

    Mismatches between nodes of other types are skipped and the walk goes on
    with their children. ``NodeType.ANY`` reports every mismatch.
    """
    return _report("included_typed", _included_typed(m, n, node_type, exhaust=False))


def identical_nodes(
    m: Optional[Node], n: Optional[Node], node_type: NodeType
) -> Optional[Node]:
    """Check that both trees hold the same nodes of ``node_type``, in order.

    Unlike the inclusion checks, a sibling of ``n`` left once the children of
    ``m`` are exhausted is returned as the divergence.
    """
    return _report("identical", _included_typed(m, n, node_type, exhaust=True))
