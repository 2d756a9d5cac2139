"""
Common exception classes for the command console.

This module defines custom exception classes used throughout the application
for better error handling and categorization.
"""

from __future__ import annotations


class CommandConsoleError(Exception):
    """Base exception class for all command console errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DuplicateNameError(CommandConsoleError, ValueError):
    """Raised when a command or parameter name is already taken by its owner."""

    def __init__(self, name: str):
        super().__init__(
            f"The command or parameter named '{name}' already exists.",
            {"name": name},
        )
        self.name = name


class ConfigurationError(CommandConsoleError):
    """Raised when there's a configuration issue."""

    def __init__(self, message: str = "Configuration error", details: dict | None = None):
        super().__init__(message, details)
