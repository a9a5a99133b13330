"""High-level helpers built on the comparison engine."""

from .adapters import (
    BeautifulSoupAdapter,
    LxmlAdapter,
    TreeAdapter,
    from_beautifulsoup,
    from_lxml,
    get_adapter,
    list_adapters,
)
from .validation import compare_texts, is_text_node, is_text_tag

__all__ = [
    "BeautifulSoupAdapter",
    "LxmlAdapter",
    "TreeAdapter",
    "compare_texts",
    "from_beautifulsoup",
    "from_lxml",
    "get_adapter",
    "is_text_node",
    "is_text_tag",
    "list_adapters",
]
