"""Developer tools for inspecting parsed document trees."""

from .debugging import explore_node, print_nodes, print_tags

__all__ = [
    "explore_node",
    "print_nodes",
    "print_tags",
]
