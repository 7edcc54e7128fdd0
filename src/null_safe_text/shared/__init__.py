"""Shared utilities for null-safe text operations.

This module provides the configuration, logging, result and null-aware object
helpers used around the sequence layer.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    OutputFormat,
    TextConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .objects import NULL
from .result import OperationResult

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "OutputFormat",
    "TextConfig",
    "CorrelationLogger",
    "get_logger",
    "NULL",
    "OperationResult",
]
