"""Command-line interface for markup tree comparison.

This module provides the ``markup-compare`` tool for inclusion checks, tag
search, text checks and tree exploration.
"""

from .main import main

__all__ = ["main"]
