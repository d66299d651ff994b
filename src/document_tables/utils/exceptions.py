"""Centralized exception classes for the document table model.

This module provides a hierarchy of custom exceptions with error codes and
structured error details for consistent error handling throughout the
library.

Exception Hierarchy:
    TableModelError (base)
    ├── StructureError
    │   └── MalformedTableError
    ├── SelectionError
    │   └── SelectionInvariantError
    └── TableValueError
        ├── InvalidCoordinatesError
        └── InvalidColumnError

Error Codes:
    All errors have a unique error code (e.g., "E1001") that can be used
    for programmatic error handling and documentation.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Enumeration of all error codes used in the library.

    Error codes are grouped by category:
    - E1xxx: Table structure errors
    - E2xxx: Selection errors
    - E3xxx: Value errors
    - E9xxx: Internal/unexpected errors
    """

    # Structure errors (E1xxx)
    MALFORMED_TABLE = "E1001"
    MISSING_COLUMNS = "E1002"
    CELL_COUNT_MISMATCH = "E1003"
    XML_SYNTAX_ERROR = "E1004"
    UNEXPECTED_ELEMENT = "E1005"

    # Selection errors (E2xxx)
    SELECTION_INVARIANT_VIOLATED = "E2001"

    # Value errors (E3xxx)
    INVALID_COORDINATES = "E3001"
    INVALID_COLUMN = "E3002"

    # Internal errors (E9xxx)
    INTERNAL_ERROR = "E9001"
    CONFIGURATION_ERROR = "E9002"


class TableModelError(Exception):
    """Base exception for all document table errors.

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code from ErrorCode enum.
        details: Optional dictionary with additional error details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Error code from ErrorCode enum.
            details: Optional additional details about the error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary for logging or reporting.

        Returns:
            Dictionary with error information.
        """
        result: dict[str, Any] = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code.value}] {self.message}"


# =============================================================================
# Structure Errors (E1xxx)
# =============================================================================


class StructureError(TableModelError):
    """Base class for errors in the persisted table layout."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.MALFORMED_TABLE,
        element: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending element name.

        Args:
            message: Error message.
            error_code: Error code.
            element: Local name of the element being processed.
            details: Additional details.
        """
        details = details or {}
        if element:
            details["element"] = element
        super().__init__(message, error_code, details)
        self.element = element


class MalformedTableError(StructureError):
    """Raised when a table element cannot be turned into a consistent model."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.MALFORMED_TABLE,
        element: str | None = None,
        row_num: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with optional row position.

        Args:
            message: Error message.
            error_code: Error code.
            element: Local name of the element being processed.
            row_num: 1-based row number where the problem was found.
            details: Additional details.
        """
        details = details or {}
        if row_num is not None:
            details["row_num"] = row_num
        super().__init__(
            message=message,
            error_code=error_code,
            element=element,
            details=details,
        )
        self.row_num = row_num


# =============================================================================
# Selection Errors (E2xxx)
# =============================================================================


class SelectionError(TableModelError):
    """Base class for selection errors."""


class SelectionInvariantError(SelectionError):
    """Raised when selected cells cannot form a valid selection shape.

    More than one selected cell sharing a single row and a single column can
    only happen when the same coordinates were fed in twice.
    """

    def __init__(
        self,
        cell_count: int,
        coordinates: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the selection that broke the invariant.

        Args:
            cell_count: Number of cells in the selection.
            coordinates: Coordinates of the selected cells.
            details: Additional details.
        """
        details = details or {}
        details["cell_count"] = cell_count
        if coordinates:
            details["coordinates"] = coordinates
        super().__init__(
            f"{cell_count} selected cells share one row and one column",
            ErrorCode.SELECTION_INVARIANT_VIOLATED,
            details,
        )
        self.cell_count = cell_count
        self.coordinates = coordinates or []


# =============================================================================
# Value Errors (E3xxx)
# =============================================================================


class TableValueError(TableModelError):
    """Base class for invalid argument values."""


class InvalidCoordinatesError(TableValueError):
    """Raised when a coordinate string cannot be parsed."""

    def __init__(
        self,
        coordinates: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the rejected coordinate string.

        Args:
            coordinates: The coordinate string that failed to parse.
            details: Additional details.
        """
        details = details or {}
        details["coordinates"] = coordinates
        super().__init__(
            f"Invalid cell coordinates: {coordinates!r}",
            ErrorCode.INVALID_COORDINATES,
            details,
        )
        self.coordinates = coordinates


class InvalidColumnError(TableValueError):
    """Raised when a column definition is given an impossible value."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the column index.

        Args:
            message: Error message.
            index: Index of the affected column.
            details: Additional details.
        """
        details = details or {}
        if index is not None:
            details["index"] = index
        super().__init__(message, ErrorCode.INVALID_COLUMN, details)
        self.index = index
