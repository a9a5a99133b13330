"""Document tree model and the parser that produces it.

Key Components:
    Node: One node of a parsed document, linked by first-child/next-sibling
    NodeType: Closed enumeration of node kinds, ``ERROR`` doubling as "any"
    Attribute: Namespace/key/value triple compared by exact string equality
    parse: Turn strings, bytes, streams or paths into a tree
"""

from .builder import parse, parse_file, parse_string
from .node import Attribute, Node, NodeType, format_attributes, format_node

__all__ = [
    "Attribute",
    "Node",
    "NodeType",
    "format_attributes",
    "format_node",
    "parse",
    "parse_file",
    "parse_string",
]
