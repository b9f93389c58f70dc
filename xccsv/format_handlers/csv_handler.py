#!/usr/bin/env python3
"""
CSV translation table handler.

Table layout:
```
,en,de,fr
farewell,Goodbye,Auf Wiedersehen,Au revoir
greeting,Hello,Hallo,
```

Row 0 is the header: an empty corner cell followed by one language code
per column. Every other row is a key followed by its translations in
header order.

The first header language is the catalog's source language. Nothing in
the file marks it explicitly, so the column order written by
``reconstruct`` (source language first) must be kept whenever a table is
produced or edited.
"""

import csv
import io
import sys
from typing import Optional

from ..catalog import (
    DEFAULT_EXTRACTION_STATE,
    DEFAULT_VERSION,
    TRANSLATED_STATE,
    Catalog,
    Entry,
    Localization,
    sorted_languages,
)
from ..errors import FormatError, ParseError
from .base import FormatHandler


class CsvHandler(FormatHandler):
    """Handler for CSV translation tables (Table Reader and Table Writer)."""

    LINE_TERMINATOR = "\n"
    # csv.reader defaults to 128 KiB per field; tables are read whole
    FIELD_SIZE_LIMIT = min(sys.maxsize, 2**31 - 1)

    @property
    def name(self) -> str:
        return "csv"

    def parse(self, content: str) -> tuple[Catalog, list[str]]:
        """
        Parse a CSV table back into a catalog.

        Every entry gets extractionState "manual" and every non-blank cell
        becomes a "translated" localization holding the untrimmed value.
        Blank lines are skipped. Cells past the last header language are
        ignored and short rows simply lack the trailing languages. Header
        columns with a blank language code (trailing spreadsheet columns)
        are dropped as long as every cell under them is blank too.

        Args:
            content: Raw CSV document

        Returns:
            Tuple of (catalog, header languages in column order)

        Raises:
            ParseError: Malformed CSV quoting
            FormatError: Fewer than two rows, no languages, a blank source
                language, a value under a blank language code, or a
                repeated key
        """
        if csv.field_size_limit() < self.FIELD_SIZE_LIMIT:
            csv.field_size_limit(self.FIELD_SIZE_LIMIT)

        try:
            rows = [row for row in csv.reader(io.StringIO(content, newline=""), strict=True) if row]
        except csv.Error as e:
            raise ParseError(f"Invalid CSV: {e}") from e

        if len(rows) < 2:
            raise FormatError(
                f"insufficient rows: CSV file must have at least 2 rows (header and data), found {len(rows)}"
            )

        languages = rows[0][1:]
        if not languages:
            raise FormatError("no languages found in the CSV header")

        if not languages[0].strip():
            raise FormatError("blank language code in header column 2 (source language)")

        # Positional rule: the first language column is the source language
        catalog = Catalog(source_language=languages[0], version=DEFAULT_VERSION)

        for line_num, row in enumerate(rows[1:], start=2):
            key = row[0]
            if key in catalog.entries:
                raise FormatError(f"duplicate key found: {key} (row {line_num})")

            entry = Entry(extraction_state=DEFAULT_EXTRACTION_STATE)
            for column, (language, cell) in enumerate(zip(languages, row[1:]), start=2):
                if not cell.strip():
                    continue
                if not language.strip():
                    raise FormatError(
                        f"value under blank language code in column {column} (row {line_num})"
                    )
                entry.localizations[language] = Localization(
                    state=TRANSLATED_STATE,
                    value=cell,
                )
            catalog.entries[key] = entry

        return catalog, [language for language in languages if language.strip()]

    def reconstruct(
        self,
        catalog: Catalog,
        languages: Optional[list[str]] = None,
    ) -> str:
        """
        Render a catalog as a CSV table.

        Rows are sorted by key. For each language column the cell is:
        the key itself when the column is the source language and the entry
        has no localizations at all, otherwise the localized value, or an
        empty cell when that language is missing.

        Args:
            catalog: Catalog to render
            languages: Column order; defaults to ``sorted_languages(catalog)``

        Returns:
            CSV document
        """
        if languages is None:
            languages = sorted_languages(catalog)

        buffer = io.StringIO(newline="")
        writer = csv.writer(buffer, lineterminator=self.LINE_TERMINATOR)
        # QUOTE_MINIMAL only quotes lineterminator characters, so a bare \r
        # would be read back as a row break
        quoted_writer = csv.writer(
            buffer, lineterminator=self.LINE_TERMINATOR, quoting=csv.QUOTE_ALL
        )

        for row in self._rows(catalog, languages):
            if any("\r" in cell for cell in row):
                quoted_writer.writerow(row)
            else:
                writer.writerow(row)

        return buffer.getvalue()

    def _rows(self, catalog: Catalog, languages: list[str]):
        yield [""] + list(languages)
        for key in catalog.sorted_keys():
            yield [key] + self._row_values(catalog, key, languages)

    @staticmethod
    def _row_values(catalog: Catalog, key: str, languages: list[str]) -> list[str]:
        """Cells for one entry, in column order."""
        entry = catalog.entries[key]
        values = []
        for language in languages:
            if language == catalog.source_language and not entry.localizations:
                # Unlocalized source strings default to their key
                values.append(key)
            else:
                value = entry.value_for(language)
                values.append(value if value is not None else "")
        return values
