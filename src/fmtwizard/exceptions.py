"""Custom exceptions for fmtwizard.

This module defines exception types for wizard failures:
- ConfigurationError: Raised when a settings file is malformed
"""

from typing import Optional


class ConfigurationError(Exception):
    """Raised when wizard settings are invalid.

    Used for:
    - Invalid YAML syntax in a settings file
    - Settings file that is not a mapping
    - Settings values of the wrong type (e.g., non-numeric tool_timeout)

    Includes file path and line number context when available.

    Args:
        message: Error description
        file_path: Path to problematic settings file (optional)
        line_number: Line number where error occurred (optional)
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        """Initialize ConfigurationError with context.

        Args:
            message: Human-readable error description
            file_path: Path to settings file with error (if applicable)
            line_number: Line number in file where error occurred (if known)
        """
        self.message = message
        self.file_path = file_path
        self.line_number = line_number
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with file/line context if available."""
        parts = [self.message]
        if self.file_path:
            parts.append(f"in file: {self.file_path}")
        if self.line_number:
            parts.append(f"at line: {self.line_number}")
        return " ".join(parts)

    def __str__(self) -> str:
        """Return formatted error message."""
        return self._format_message()
