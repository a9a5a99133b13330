"""Node comparison and inclusion engine.

Key Components:
    equal: Single-node equality ignoring tree position
    find_tag / find_tags / find_node: Pre-order search
    included_node / included_node_typed / identical_nodes: Tree comparison
    get_text: Text extraction
"""

from .equality import attr_equal, attr_included, equal
from .inclusion import identical_nodes, included_node, included_node_typed
from .search import find_node, find_tag, find_tags
from .text import get_text

__all__ = [
    "attr_equal",
    "attr_included",
    "equal",
    "find_node",
    "find_tag",
    "find_tags",
    "get_text",
    "identical_nodes",
    "included_node",
    "included_node_typed",
]
