"""Adapters bringing trees from other HTML libraries into the node model.

A document that was already loaded with lxml or BeautifulSoup is serialized
back to markup and re-parsed, so that the comparison engine always sees trees
built by the same HTML5 algorithm whatever library produced the original.
Both libraries are optional and imported lazily.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type

from markup_tree_compare.shared.config import ParserConfig
from markup_tree_compare.shared.logging import get_logger
from markup_tree_compare.tree.builder import parse_string
from markup_tree_compare.tree.node import Node


class TreeAdapter(ABC):
    """Base class for conversions from a foreign tree into ``Node`` trees."""

    name = ""
    package = ""

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, f"{self.name}_adapter")

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the foreign library can be imported."""

    @abstractmethod
    def serialize(self, target_data: Any) -> str:
        """Serialize a foreign tree back to HTML markup."""

    def to_tree(self, target_data: Any) -> Node:
        """Convert a foreign tree into a DOCUMENT node.

        Raises:
            ImportError: If the foreign library is not installed
            TypeError: If ``target_data`` is not a tree of that library
            ParsingError: If the serialized markup cannot be parsed
        """
        if not self.is_available():
            raise ImportError(
                f"{self.name} adapter requires the '{self.package}' package: "
                f"pip install {self.package}"
            )
        markup = self.serialize(target_data)
        self.logger.debug("Re-parsing serialized tree", extra={"markup_length": len(markup)})
        return parse_string(markup, self.config, self.correlation_id)


class LxmlAdapter(TreeAdapter):
    """Adapter for ``lxml.html`` and ``lxml.etree`` trees."""

    name = "lxml"
    package = "lxml"

    def is_available(self) -> bool:
        try:
            import lxml.etree  # noqa: F401
        except ImportError:
            return False
        return True

    def serialize(self, target_data: Any) -> str:
        import lxml.etree as ET

        if not (ET.iselement(target_data) or isinstance(target_data, ET._ElementTree)):
            raise TypeError("Target data is not a valid lxml element or tree")
        return ET.tostring(target_data, encoding="unicode", method="html")


class BeautifulSoupAdapter(TreeAdapter):
    """Adapter for BeautifulSoup documents and tags."""

    name = "beautifulsoup"
    package = "beautifulsoup4"

    def is_available(self) -> bool:
        try:
            import bs4  # noqa: F401
        except ImportError:
            return False
        return True

    def serialize(self, target_data: Any) -> str:
        import bs4

        if not isinstance(target_data, bs4.Tag):
            raise TypeError("Target data is not a valid BeautifulSoup object")
        return target_data.decode()


_ADAPTERS: Dict[str, Type[TreeAdapter]] = {
    LxmlAdapter.name: LxmlAdapter,
    BeautifulSoupAdapter.name: BeautifulSoupAdapter,
}


def get_adapter(
    name: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> TreeAdapter:
    """Return a new adapter instance by name.

    Raises:
        KeyError: If no adapter has that name
    """
    try:
        adapter_class = _ADAPTERS[name]
    except KeyError:
        raise KeyError(f"Unknown adapter: {name}. Available: {list_adapters()}") from None
    return adapter_class(config, correlation_id)


def list_adapters() -> List[str]:
    """Names of all adapters, installed or not."""
    return sorted(_ADAPTERS)


def from_lxml(target_data: Any, config: Optional[ParserConfig] = None) -> Node:
    """Convert an lxml element or element tree into a DOCUMENT node."""
    return LxmlAdapter(config).to_tree(target_data)


def from_beautifulsoup(target_data: Any, config: Optional[ParserConfig] = None) -> Node:
    """Convert a BeautifulSoup document or tag into a DOCUMENT node."""
    return BeautifulSoupAdapter(config).to_tree(target_data)
