#!/usr/bin/env python3
"""
Format handlers for the two document formats.

Supported formats:
- xcstrings: Xcode String Catalog JSON
- csv: translation table, one column per language
"""

from .base import FormatHandler, FormatRegistry
from .csv_handler import CsvHandler
from .xcstrings import XcstringsHandler

# Register handlers
FormatRegistry.register(XcstringsHandler)
FormatRegistry.register(CsvHandler)

__all__ = [
    'FormatHandler',
    'FormatRegistry',
    'CsvHandler',
    'XcstringsHandler',
]
