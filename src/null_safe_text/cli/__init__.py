"""Command-line interface module for null-safe text operations.

This module exposes classification, search, stripping, truncation and
comparison of text arguments with text or JSON output.
"""

from .main import main

__all__ = ["main"]
