"""Configuration classes for markup tree comparison.

This module provides configuration objects for the parser collaborator, the
comparison commands and the application as a whole. Every object validates
itself on construction and round-trips through dictionaries and JSON.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

# Names accepted wherever a node type filter is configured. "any" is the
# match-all sentinel.
NODE_TYPE_CHOICES = ("any", "text", "document", "element", "comment", "doctype")

LOGGING_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for turning markup into a node tree."""

    # Encoding forced on byte input; None lets html5lib sniff it
    encoding: Optional[str] = None
    # Report malformed markup as a parsing error instead of repairing it
    strict: bool = False
    # Join adjacent text runs into a single text node
    merge_text: bool = True
    max_depth: int = 500

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        if self.encoding is not None and not self.encoding.strip():
            raise ValueError("encoding must be a non-empty string or None")
        if self.max_depth <= 0:
            raise ValueError("max_depth must be > 0")


@dataclass(frozen=True)
class CompareConfig:
    """Configuration for tree comparison commands."""

    # Name from NODE_TYPE_CHOICES, resolved with NodeType.from_name
    node_type: str = "any"
    identical: bool = False

    def __post_init__(self) -> None:
        """Validate comparison configuration."""
        if self.node_type not in NODE_TYPE_CHOICES:
            raise ValueError(f"node_type must be one of {list(NODE_TYPE_CHOICES)}")


@dataclass(frozen=True)
class AppConfig:
    """Complete configuration shared by the API helpers and the CLI."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    compare: CompareConfig = field(default_factory=CompareConfig)
    logging_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate application configuration."""
        if self.logging_level not in LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {list(LOGGING_LEVELS)}",
                field_name="logging_level",
                suggestions=list(LOGGING_LEVELS),
            )

    def override(self, **kwargs: Any) -> "AppConfig":
        """Create a copy with selected fields replaced.

        Nested fields are addressed with a double underscore, e.g.
        ``parser__strict=True``.

        Raises:
            ConfigValidationError: If a field name is unknown
        """
        top_level: Dict[str, Any] = {}
        nested: Dict[str, Dict[str, Any]] = {}
        for key, value in kwargs.items():
            if "__" in key:
                section, name = key.split("__", 1)
                nested.setdefault(section, {})[name] = value
            else:
                top_level[key] = value

        for section, values in nested.items():
            current = getattr(self, section, None)
            if current is None or not hasattr(current, "__dataclass_fields__"):
                raise ConfigValidationError(
                    f"Unknown configuration section: {section}",
                    field_name=section,
                    suggestions=list(self.__dataclass_fields__),
                )
            unknown = set(values) - set(current.__dataclass_fields__)
            if unknown:
                raise ConfigValidationError(
                    f"Unknown fields for {section}: {sorted(unknown)}",
                    field_name=section,
                    suggestions=list(current.__dataclass_fields__),
                )
            top_level[section] = replace(current, **values)

        unknown = set(top_level) - set(self.__dataclass_fields__)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                suggestions=list(self.__dataclass_fields__),
            )
        return replace(self, **top_level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            return obj

        return _dataclass_to_dict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos in configuration files do not
        pass silently.
        """
        sections = {"parser": ParserConfig, "compare": CompareConfig}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key in sections:
                if not isinstance(value, dict):
                    raise ConfigValidationError(
                        f"Section {key} must be a mapping", field_name=key
                    )
                try:
                    values[key] = sections[key](**value)
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(
                        f"Invalid fields for {key}: {e}", field_name=key
                    ) from e
            elif key in cls.__dataclass_fields__:
                values[key] = value
            else:
                raise ConfigValidationError(
                    f"Unknown configuration field: {key}",
                    field_name=key,
                    suggestions=list(cls.__dataclass_fields__),
                )
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "AppConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON configuration: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def strict(cls) -> "AppConfig":
        """Preset that rejects malformed markup and demands equal sibling counts."""
        return cls(
            parser=ParserConfig(strict=True),
            compare=CompareConfig(identical=True),
        )

    @classmethod
    def lenient(cls) -> "AppConfig":
        """Preset that repairs markup and only reports element divergences."""
        return cls(
            parser=ParserConfig(strict=False),
            compare=CompareConfig(node_type="element", identical=False),
        )
