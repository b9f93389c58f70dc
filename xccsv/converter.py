#!/usr/bin/env python3
"""
Conversion pipelines between .xcstrings catalogs and CSV tables.

Forward (json2csv): read catalog -> enumerate languages -> write table.
Reverse (csv2json): read table -> write catalog.

Each run reads the whole input into memory, converts it, and writes the
whole output. Files are opened only inside the read/write helpers and are
closed on every exit path. Handler errors are re-raised with the file
path and failing operation attached.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .catalog import Catalog
from .errors import CatalogIOError, ConversionError, UsageError
from .format_handlers import FormatHandler, FormatRegistry

JSON_TO_CSV = "json2csv"
CSV_TO_JSON = "csv2json"

# direction -> (reader format, writer format)
DIRECTIONS = {
    JSON_TO_CSV: ("xcstrings", "csv"),
    CSV_TO_JSON: ("csv", "xcstrings"),
}


@dataclass
class ConversionConfig:
    """
    Options for one conversion run.

    Attributes:
        direction: "json2csv" or "csv2json"
        input_path: File to read
        output_path: File to create or overwrite
    """
    direction: str
    input_path: str
    output_path: str

    def __post_init__(self):
        """Validate direction and paths."""
        if self.direction not in DIRECTIONS:
            available = ', '.join(DIRECTIONS)
            raise UsageError(f"Invalid mode: '{self.direction}'. Must be one of: {available}")
        if not self.input_path or not self.output_path:
            raise UsageError("Both an input and an output path are required")
        self.input_path = str(self.input_path)
        self.output_path = str(self.output_path)

    @property
    def reader(self) -> FormatHandler:
        return FormatRegistry.get_handler(DIRECTIONS[self.direction][0])

    @property
    def writer(self) -> FormatHandler:
        return FormatRegistry.get_handler(DIRECTIONS[self.direction][1])


def read_document(path: str) -> str:
    """Read a whole UTF-8 file (a leading BOM is dropped)."""
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise CatalogIOError(f"File is not valid UTF-8: {e.reason}", path, "read") from e
    except OSError as e:
        raise CatalogIOError(e.strerror or str(e), path, "read") from e


def write_document(path: str, content: str) -> None:
    """Create or overwrite a UTF-8 file with the whole document."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise CatalogIOError(e.strerror or str(e), path, "write") from e


def _attach(error: ConversionError, path: str, operation: str) -> ConversionError:
    """Fill in file attribution on an error raised by a handler."""
    if error.path is None:
        error.path = path
    if error.operation is None:
        error.operation = operation
    return error


def run(config: ConversionConfig) -> dict:
    """
    Execute one conversion described by ``config``.

    Args:
        config: Validated conversion options

    Returns:
        Status dictionary with languages, stats, the generated document and
        a human-readable summary

    Raises:
        ConversionError: Any failure; nothing is written unless the input
            was read and converted successfully
    """
    content = read_document(config.input_path)

    try:
        catalog, languages = config.reader.parse(content)
    except ConversionError as e:
        raise _attach(e, config.input_path, "parse")

    if not languages:
        raise UsageError("No languages found in the input file", config.input_path, "convert")

    try:
        document = config.writer.reconstruct(catalog, languages)
    except ConversionError as e:
        raise _attach(e, config.output_path, "serialize")

    write_document(config.output_path, document)

    kind = "CSV" if config.direction == JSON_TO_CSV else "JSON"
    output_name = Path(config.output_path).name
    return {
        "status": "ok",
        "direction": config.direction,
        "input_file": config.input_path,
        "output_file": config.output_path,
        "languages": list(languages),
        "stats": _stats(catalog, languages),
        "document": document,
        "summary": f"{kind} file '{output_name}' created successfully.",
    }


def _stats(catalog: Catalog, languages: list[str]) -> dict:
    return {
        "total_entries": len(catalog.entries),
        "total_languages": len(languages),
        "translated_cells": catalog.count_localizations(),
    }


def json_to_csv(input_path: str, output_path: str) -> dict:
    """Convert an .xcstrings catalog into a CSV table."""
    return run(ConversionConfig(JSON_TO_CSV, input_path, output_path))


def csv_to_json(input_path: str, output_path: str) -> dict:
    """Rebuild an .xcstrings catalog from a CSV table."""
    return run(ConversionConfig(CSV_TO_JSON, input_path, output_path))


def load_catalog(path: str, format_type: Optional[str] = None) -> tuple[Catalog, list[str]]:
    """
    Read and parse a catalog or table file without converting it.

    Args:
        path: File to read
        format_type: "xcstrings" or "csv"; inferred from the suffix when
            omitted (".csv" is a table, anything else a catalog)

    Returns:
        Tuple of (catalog, ordered language codes)
    """
    if format_type is None:
        format_type = "csv" if Path(path).suffix.lower() == ".csv" else "xcstrings"
    handler = FormatRegistry.get_handler(format_type)
    content = read_document(path)
    try:
        return handler.parse(content)
    except ConversionError as e:
        raise _attach(e, path, "parse")
