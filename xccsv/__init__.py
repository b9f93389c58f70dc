"""
xccsv - Xcode String Catalog <-> CSV converter

Exports an .xcstrings catalog to a CSV table with one column per language
so translators can work in a spreadsheet, and rebuilds the catalog from
the edited table.

Quick start:
    xccsv --mode json2csv --input Localizable.xcstrings --output translations.csv
    # edit translations.csv
    xccsv --mode csv2json --input translations.csv --output Localizable.xcstrings
"""

__version__ = "1.0.0"

from .catalog import Catalog, Entry, Localization, sorted_languages
from .converter import ConversionConfig, csv_to_json, json_to_csv, run
from .errors import (
    CatalogIOError,
    ConversionError,
    FormatError,
    ParseError,
    SerializationError,
    UsageError,
)

__all__ = [
    "Catalog",
    "Entry",
    "Localization",
    "sorted_languages",
    "ConversionConfig",
    "json_to_csv",
    "csv_to_json",
    "run",
    "ConversionError",
    "CatalogIOError",
    "ParseError",
    "FormatError",
    "SerializationError",
    "UsageError",
]
