"""Node model for parsed markup documents.

A document is a tree of ``Node`` objects linked through ``first_child`` and
``next_sibling``. The ``parent``, ``prev_sibling`` and ``last_child`` links are
navigation helpers only; comparison never looks at them.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, NamedTuple, Optional


class NodeType(IntEnum):
    """Kinds of node produced by the parser.

    ``ERROR`` is the zero value and doubles as the "match any type" sentinel
    for every type-filtered operation.
    """

    ERROR = 0
    TEXT = 1
    DOCUMENT = 2
    ELEMENT = 3
    COMMENT = 4
    DOCTYPE = 5

    ANY = 0

    @property
    def display_name(self) -> str:
        """Name used in canonical node strings."""
        return NODE_TYPE_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "NodeType":
        """Look up a node type by case-insensitive name; "any" is the sentinel."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown node type: {name}") from None


NODE_TYPE_NAMES = ("Error", "Text", "Document", "Element", "Comment", "DocType")


class Attribute(NamedTuple):
    """A single ``namespace``/``key``/``value`` attribute of a node."""

    namespace: str
    key: str
    value: str

    def __str__(self) -> str:
        return "{%s %s %s}" % (self.namespace, self.key, self.value)


def format_attributes(attributes: List[Attribute]) -> str:
    """Render an attribute list as ``[{ns key value} ...]``."""
    return "[" + " ".join(str(attribute) for attribute in attributes) + "]"


@dataclass(eq=False)
class Node:
    """One node of a parsed document.

    Equality between nodes is structural and lives in
    ``markup_tree_compare.compare.equality``; ``==`` on ``Node`` stays identity
    so that search results can be checked with ``is``.
    """

    type: NodeType = NodeType.ERROR
    data: str = ""
    namespace: str = ""
    attributes: List[Attribute] = field(default_factory=list)

    first_child: Optional["Node"] = field(default=None, repr=False)
    next_sibling: Optional["Node"] = field(default=None, repr=False)
    parent: Optional["Node"] = field(default=None, repr=False)
    prev_sibling: Optional["Node"] = field(default=None, repr=False)
    last_child: Optional["Node"] = field(default=None, repr=False)

    def __str__(self) -> str:
        return format_node(self)

    def append_child(self, child: "Node") -> "Node":
        """Link a detached node as the last child of this node."""
        if not isinstance(child, Node):
            raise TypeError("Child must be a Node instance")
        if child.parent is not None or child.prev_sibling is not None or child.next_sibling is not None:
            raise ValueError("Child is already attached to a tree")

        child.parent = self
        if self.last_child is None:
            self.first_child = child
        else:
            self.last_child.next_sibling = child
            child.prev_sibling = self.last_child
        self.last_child = child
        return child

    def children(self) -> Iterator["Node"]:
        """Iterate over direct children in document order."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def get_attribute(self, key: str, namespace: str = "") -> Optional[str]:
        """Return the value of the first matching attribute, if any."""
        for attribute in self.attributes:
            if attribute.key == key and attribute.namespace == namespace:
                return attribute.value
        return None


def format_node(node: Node) -> str:
    """Return the canonical diagnostic string of a single node.

    The format is ``<data> (<Type>) <attributes> ns:[<namespace>]`` with the
    attribute list and the namespace omitted when empty, trimmed at both ends.

    >>> format_node(Node(NodeType.ELEMENT, "p", attributes=[Attribute("", "class", "ex2")]))
    'p (Element) [{ class ex2}]'
    """
    namespace = ""
    if node.namespace:
        namespace = " ns:[" + node.namespace + "]"
    attributes = ""
    if node.attributes:
        attributes = format_attributes(node.attributes)
    return (
        node.data + " (" + NODE_TYPE_NAMES[node.type] + ") " + attributes + namespace
    ).strip()
