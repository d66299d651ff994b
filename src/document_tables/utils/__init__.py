"""Utilities package for the document table model.

This package provides:
- Centralized exception classes (exceptions.py)
- Structured logging utilities (logging.py)
"""

from document_tables.utils.exceptions import (
    ErrorCode,
    InvalidColumnError,
    InvalidCoordinatesError,
    MalformedTableError,
    SelectionError,
    SelectionInvariantError,
    StructureError,
    TableModelError,
    TableValueError,
)
from document_tables.utils.logging import (
    LogContext,
    StructuredLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    # Exceptions
    "ErrorCode",
    "InvalidColumnError",
    "InvalidCoordinatesError",
    "MalformedTableError",
    "SelectionError",
    "SelectionInvariantError",
    "StructureError",
    "TableModelError",
    "TableValueError",
    # Logging
    "LogContext",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
