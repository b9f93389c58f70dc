#!/usr/bin/env python3
"""
Xcode String Catalog (.xcstrings) format handler.

String catalogs are JSON documents:
```json
{
  "sourceLanguage": "en",
  "strings": {
    "greeting": {
      "extractionState": "manual",
      "localizations": {
        "de": {"stringUnit": {"state": "translated", "value": "Hallo"}}
      }
    }
  },
  "version": "1.0"
}
```
"""

import json
from typing import Any, Optional

from ..catalog import (
    DEFAULT_EXTRACTION_STATE,
    DEFAULT_VERSION,
    Catalog,
    Entry,
    Localization,
    sorted_languages,
)
from ..errors import ParseError, SerializationError
from .base import FormatHandler


class XcstringsHandler(FormatHandler):
    """
    Handler for .xcstrings catalogs (Catalog Reader and Catalog Writer).

    Unknown members are ignored on read. Localizations that carry plural
    or device variations instead of a ``stringUnit`` are kept as empty
    localizations; variations themselves are not converted.
    """

    @property
    def name(self) -> str:
        return "xcstrings"

    def parse(self, content: str) -> tuple[Catalog, list[str]]:
        """
        Parse .xcstrings content into a catalog.

        Args:
            content: Raw JSON document

        Returns:
            Tuple of (catalog, languages with the source language first)
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON: {e.msg} at line {e.lineno}") from e

        if not isinstance(data, dict):
            raise ParseError("Root element must be an object")

        source_language = data.get("sourceLanguage")
        if not isinstance(source_language, str) or not source_language:
            raise ParseError("Missing or empty 'sourceLanguage'")

        catalog = Catalog(
            source_language=source_language,
            version=self._string_field(data, "version", "catalog", DEFAULT_VERSION),
        )

        strings = data.get("strings")
        if strings is None:
            strings = {}
        if not isinstance(strings, dict):
            raise ParseError("'strings' must be an object")

        for key, raw_entry in strings.items():
            catalog.entries[key] = self._parse_entry(key, raw_entry)

        return catalog, sorted_languages(catalog)

    def _parse_entry(self, key: str, raw_entry: Any) -> Entry:
        """Convert one member of the ``strings`` object."""
        where = f"strings['{key}']"
        if not isinstance(raw_entry, dict):
            raise ParseError(f"{where} must be an object")

        entry = Entry(
            extraction_state=self._string_field(
                raw_entry, "extractionState", where, DEFAULT_EXTRACTION_STATE
            ),
        )

        raw_localizations = raw_entry.get("localizations")
        if raw_localizations is None:
            return entry
        if not isinstance(raw_localizations, dict):
            raise ParseError(f"{where}.localizations must be an object")

        for language, raw_localization in raw_localizations.items():
            loc_where = f"{where}.localizations['{language}']"
            if not isinstance(raw_localization, dict):
                raise ParseError(f"{loc_where} must be an object")

            unit = raw_localization.get("stringUnit")
            if unit is None:
                entry.localizations[language] = Localization()
                continue
            if not isinstance(unit, dict):
                raise ParseError(f"{loc_where}.stringUnit must be an object")

            entry.localizations[language] = Localization(
                state=self._string_field(unit, "state", f"{loc_where}.stringUnit", ""),
                value=self._string_field(unit, "value", f"{loc_where}.stringUnit", ""),
            )

        return entry

    @staticmethod
    def _string_field(obj: dict, name: str, where: str, default: str) -> str:
        """Fetch an optional string member, rejecting other JSON types."""
        value = obj.get(name)
        if value is None:
            return default
        if not isinstance(value, str):
            raise ParseError(f"{where}.{name} must be a string, got {type(value).__name__}")
        return value

    def reconstruct(
        self,
        catalog: Catalog,
        languages: Optional[list[str]] = None,
    ) -> str:
        """
        Render a catalog as .xcstrings JSON.

        Keys are sorted at every level so repeated conversions of the same
        catalog produce identical files. ``languages`` is not used; every
        localization present in the catalog is written.

        Args:
            catalog: Catalog to render
            languages: Ignored

        Returns:
            JSON document (2-space indent, UTF-8 characters kept as-is)
        """
        strings = {}
        for key in catalog.sorted_keys():
            entry = catalog.entries[key]
            raw_entry: dict[str, Any] = {"extractionState": entry.extraction_state}
            if entry.localizations:
                raw_entry["localizations"] = {
                    language: {
                        "stringUnit": {
                            "state": localization.state,
                            "value": localization.value,
                        }
                    }
                    for language, localization in entry.localizations.items()
                }
            strings[key] = raw_entry

        document = {
            "sourceLanguage": catalog.source_language,
            "strings": strings,
            "version": catalog.version,
        }

        try:
            return json.dumps(document, indent=2, ensure_ascii=False, sort_keys=True)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot serialize catalog: {e}") from e
