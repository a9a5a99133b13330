"""Markup Tree Compare.

Structural search and comparison of parsed HTML documents: single-node
equality, tag search, tree inclusion and identity checks, and text extraction.

Progressive API Disclosure:
- Level 1: Validation helpers - is_text_tag(), is_text_node()
- Level 2: Engine functions - parse(), find_tag(), included_node(), get_text()
- Level 3: Configuration objects and adapters for lxml / BeautifulSoup trees
"""

__version__ = "0.1.0"
__author__ = "Markup Tree Compare Team"

# Level 1: Validation helpers
from .api.validation import compare_texts, is_text_node, is_text_tag

# Level 2: Engine
from .compare import (
    attr_equal,
    attr_included,
    equal,
    find_node,
    find_tag,
    find_tags,
    get_text,
    identical_nodes,
    included_node,
    included_node_typed,
)
from .tree import Attribute, Node, NodeType, format_node, parse, parse_file, parse_string

# Level 3: Configuration and errors
from .shared.config import AppConfig, CompareConfig, ParserConfig
from .shared.errors import (
    ComparisonError,
    NodeNotFoundError,
    ParsingError,
    TextsDifferError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Validation helpers
    "compare_texts",
    "is_text_node",
    "is_text_tag",

    # Tree model and parser
    "Attribute",
    "Node",
    "NodeType",
    "format_node",
    "parse",
    "parse_file",
    "parse_string",

    # Comparison engine
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

    # Configuration and errors
    "AppConfig",
    "CompareConfig",
    "ParserConfig",
    "ComparisonError",
    "NodeNotFoundError",
    "ParsingError",
    "TextsDifferError",
]
