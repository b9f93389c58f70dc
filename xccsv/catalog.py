#!/usr/bin/env python3
"""
In-memory model of a string catalog.

A Catalog maps string keys to Entry objects; each Entry holds one
Localization per language code. Both readers build a fresh Catalog and
both writers consume one, so this module is the only thing the two
conversion directions share.
"""

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_VERSION = "1.0"
DEFAULT_EXTRACTION_STATE = "manual"
TRANSLATED_STATE = "translated"


@dataclass
class Localization:
    """One language's translation of an entry."""
    state: str = ""
    value: str = ""


@dataclass
class Entry:
    """
    A single translatable key.

    Attributes:
        extraction_state: How the string was discovered (e.g. "manual")
        localizations: Map of language code -> Localization (may be empty)
    """
    extraction_state: str = DEFAULT_EXTRACTION_STATE
    localizations: dict[str, Localization] = field(default_factory=dict)

    def value_for(self, language: str) -> Optional[str]:
        """Translated value for a language, or None when absent."""
        localization = self.localizations.get(language)
        if localization is None:
            return None
        return localization.value


@dataclass
class Catalog:
    """
    Root of the model.

    Attributes:
        source_language: Development language of the catalog (e.g. "en")
        version: Format version string
        entries: Map of string key -> Entry
    """
    source_language: str
    version: str = DEFAULT_VERSION
    entries: dict[str, Entry] = field(default_factory=dict)

    def sorted_keys(self) -> list[str]:
        """Entry keys in ascending order; dict order is never relied on."""
        return sorted(self.entries)

    def count_localizations(self) -> int:
        """Total number of (key, language) translations in the catalog."""
        return sum(len(entry.localizations) for entry in self.entries.values())


def sorted_languages(catalog: Catalog) -> list[str]:
    """
    Collect every language code used by a catalog.

    The source language always comes first; the remaining codes follow in
    lexicographic order. The table writer uses this order for its columns,
    and the table reader treats the first column as the source language,
    so the two must stay in agreement.

    Args:
        catalog: Catalog to inspect

    Returns:
        Deduplicated list of language codes (empty only when the catalog has
        neither a source language nor any localization)
    """
    languages = set()
    for entry in catalog.entries.values():
        languages.update(entry.localizations)

    source = catalog.source_language
    languages.discard(source)
    ordered = sorted(languages)
    if source:
        ordered.insert(0, source)
    return ordered
