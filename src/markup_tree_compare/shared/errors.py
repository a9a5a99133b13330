"""Exceptions raised by the validation helpers and the parser collaborator.

Search and comparison functions never raise: absence of a match is a ``None``
result. Only parsing and the composite validation helpers fail, and their
messages are part of the public contract.
"""

from typing import Optional


class ComparisonError(Exception):
    """Base exception for markup tree comparison failures."""


class ParsingError(ComparisonError):
    """Raised when input cannot be turned into a node tree."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"parsing: {detail}")
        self.detail = detail


class NodeNotFoundError(ComparisonError):
    """Raised when the searched tag or node is absent from the document."""

    def __init__(self, name: str, by_template: bool = False) -> None:
        if by_template:
            message = f"findnode: node {name} not found."
        else:
            message = f"findtag: tag {name} not found"
        super().__init__(message)
        self.name = name
        self.by_template = by_template


class TextsDifferError(ComparisonError):
    """Raised when the extracted text does not match the expected text."""

    def __init__(self, got: str, want: str, node_name: Optional[str] = None) -> None:
        super().__init__(f"texts differ: got {got}, want {want}")
        self.got = got
        self.want = want
        self.node_name = node_name
