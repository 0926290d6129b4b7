"""Custom exception classes for regcheck error handling.

This module defines the exception hierarchy for file-level failures:
- ReaderError: The input file cannot be opened, read, or decoded

Field-level problems (missing or malformed values) are never raised; they
are reported per record as verdicts. All exceptions inherit from
RegcheckError for consistent error handling.
"""

from typing import Any


class RegcheckError(Exception):
    """Base exception for all regcheck errors.

    Provides a common base class for all custom exceptions in regcheck,
    enabling catch-all error handling at the command boundary.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error description
            context: Optional dictionary of contextual information (file paths,
                    encodings, reasons, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        if not self.context:
            return self.message

        context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} [{context_str}]"


class ReaderError(RegcheckError):
    """Exception raised when the input file cannot be read.

    Raised by the delimited record reader when the source is missing,
    unreadable, or cannot be decoded with the requested encoding. A reader
    error is fatal: no record of the file is classified.

    Context typically includes:
        - file_path: Path to the input file
        - line_number: Line number involved (if applicable)
        - format: Expected file format
        - reason: Specific reason for the failure
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line_number: int | None = None,
        format: str | None = None,
        reason: str | None = None,
        **extra_context: Any,
    ) -> None:
        """Initialize reader error with input file details.

        Args:
            message: Human-readable error description
            file_path: Path to the input file that failed
            line_number: Line number where reading failed
            format: Expected file format (e.g., "delimited")
            reason: Specific reason for the failure
            **extra_context: Additional context information
        """
        context: dict[str, Any] = {}
        if file_path is not None:
            context["file_path"] = file_path
        if line_number is not None:
            context["line_number"] = line_number
        if format is not None:
            context["format"] = format
        if reason is not None:
            context["reason"] = reason
        context.update(extra_context)

        super().__init__(message, context)
