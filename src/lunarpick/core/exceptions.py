"""
Custom exceptions for lunarpick.

Exception hierarchy:
    LunarPickError (base)
    ├── ConfigurationError
    ├── OutOfRangeError
    └── InvalidDateError
"""

from __future__ import annotations

from typing import Any


class LunarPickError(Exception):
    """Base exception for all lunarpick errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Additional error details (optional)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigurationError(LunarPickError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - Missing config file passed explicitly
        - Invalid YAML syntax
        - Supported year range inverted or wider than the calendar data
    """

    pass


class OutOfRangeError(LunarPickError):
    """
    Raised when an index falls outside a list's valid bounds.

    The selection state machine clamps its own indices, so this only
    surfaces from direct oracle lookups (e.g. a year index past the table).
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize out-of-range error.

        Args:
            message: Error message
            index: Offending index
            size: Size of the list that was indexed
            details: Additional error details
        """
        super().__init__(message, details)
        self.index = index
        self.size = size

    def __str__(self) -> str:
        if self.index is not None and self.size is not None:
            return f"{self.message} (index {self.index}, valid 0..{self.size - 1})"
        return self.message


class InvalidDateError(LunarPickError):
    """
    Raised when a date cannot be converted.

    Examples:
        - Lunar year outside the supported range
        - Leap month requested in a year without that leap month
        - Solar date that does not exist (e.g. 2023-02-30)
    """

    def __init__(
        self,
        message: str,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize invalid date error.

        Args:
            message: Error message
            year: Year of the rejected date
            month: Month of the rejected date (negative for a leap month)
            day: Day of the rejected date
            details: Additional error details
        """
        super().__init__(message, details)
        self.year = year
        self.month = month
        self.day = day

    def __str__(self) -> str:
        if self.year is not None:
            return f"[{self.year}-{self.month}-{self.day}] {self.message}"
        return self.message
