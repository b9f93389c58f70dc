#!/usr/bin/env python3
"""
Exceptions raised by the converter.

Every failure is terminal for the current run. Handlers raise without a
file path; the converter fills in ``path`` and ``operation`` before the
error reaches the CLI, which reports it via ``to_dict()``.
"""

from typing import Optional


class ConversionError(Exception):
    """Base class for all conversion failures."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = path
        self.operation = operation

    def __str__(self) -> str:
        if self.path and self.operation:
            return f"{self.operation} '{self.path}': {self.message}"
        if self.path:
            return f"'{self.path}': {self.message}"
        return self.message

    def to_dict(self) -> dict:
        data = {
            "status": "error",
            "error": str(self),
            "error_type": type(self).__name__,
        }
        if self.path:
            data["file"] = self.path
        if self.operation:
            data["operation"] = self.operation
        return data


class CatalogIOError(ConversionError):
    """A file could not be opened, read, decoded or written."""


class ParseError(ConversionError):
    """Input is not valid JSON/CSV or does not match the catalog schema."""


class FormatError(ParseError):
    """A CSV document breaks one of the table layout rules."""


class SerializationError(ConversionError):
    """The catalog could not be rendered as JSON."""


class UsageError(ConversionError):
    """Invalid configuration or nothing to convert."""
