"""Shared utilities for markup tree comparison.

This module provides configuration objects, the error taxonomy and logging
helpers used across all layers.
"""

from .config import (
    AppConfig,
    CompareConfig,
    ConfigError,
    ConfigValidationError,
    ParserConfig,
)
from .errors import (
    ComparisonError,
    NodeNotFoundError,
    ParsingError,
    TextsDifferError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "AppConfig",
    "CompareConfig",
    "ConfigError",
    "ConfigValidationError",
    "ParserConfig",
    "ComparisonError",
    "NodeNotFoundError",
    "ParsingError",
    "TextsDifferError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]
