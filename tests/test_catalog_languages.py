#!/usr/bin/env python3
"""
Tests for the catalog model and language enumeration.

Tests:
1. Source language sorts first, the rest lexicographically
2. Languages are deduplicated across entries
3. Source language is listed even when nothing is localized
4. A catalog without source language and localizations yields nothing
5. Enumeration is deterministic regardless of entry insertion order
6. Entry/Catalog helpers
"""

from xccsv.catalog import Catalog, Entry, Localization, sorted_languages


def _entry(**values):
    return Entry(localizations={
        lang: Localization(state="translated", value=value)
        for lang, value in values.items()
    })


def test_source_language_first():
    """Test 1: en source with fr and de localizations -> en, de, fr."""
    catalog = Catalog(source_language="en")
    catalog.entries["greeting"] = _entry(fr="Bonjour", de="Hallo")

    assert sorted_languages(catalog) == ["en", "de", "fr"]


def test_source_language_not_alphabetically_first():
    """Test 1b: source language wins over lexicographic order."""
    catalog = Catalog(source_language="zh-Hans")
    catalog.entries["a"] = _entry(de="A", ar="A", en="A")

    assert sorted_languages(catalog) == ["zh-Hans", "ar", "de", "en"]


def test_languages_deduplicated():
    """Test 2: languages shared by several entries appear once."""
    catalog = Catalog(source_language="en")
    catalog.entries["a"] = _entry(en="A", fr="A")
    catalog.entries["b"] = _entry(fr="B", es="B")

    assert sorted_languages(catalog) == ["en", "es", "fr"]


def test_source_language_without_localizations():
    """Test 3: source language is a column even with no translations."""
    catalog = Catalog(source_language="en")
    catalog.entries["farewell"] = Entry()

    assert sorted_languages(catalog) == ["en"]


def test_empty_catalog_has_no_languages():
    """Test 4: nothing to enumerate."""
    assert sorted_languages(Catalog(source_language="")) == []


def test_missing_source_language_is_skipped():
    """Test 4b: an empty source code is not reported as a language."""
    catalog = Catalog(source_language="")
    catalog.entries["a"] = _entry(fr="A")

    assert sorted_languages(catalog) == ["fr"]


def test_enumeration_is_deterministic():
    """Test 5: same content in different insertion order, same result."""
    first = Catalog(source_language="en")
    first.entries["a"] = _entry(ja="A")
    first.entries["b"] = _entry(de="B")

    second = Catalog(source_language="en")
    second.entries["b"] = _entry(de="B")
    second.entries["a"] = _entry(ja="A")

    assert sorted_languages(first) == sorted_languages(second) == ["en", "de", "ja"]


def test_entry_defaults_and_helpers():
    """Test 6: defaults, value lookup, sorted keys, localization count."""
    entry = Entry()
    assert entry.extraction_state == "manual"
    assert entry.localizations == {}
    assert entry.value_for("en") is None

    catalog = Catalog(source_language="en")
    catalog.entries["zebra"] = _entry(en="Zebra", de="Zebra")
    catalog.entries["apple"] = _entry(en="Apple")

    assert catalog.version == "1.0"
    assert catalog.sorted_keys() == ["apple", "zebra"]
    assert catalog.count_localizations() == 3
    assert catalog.entries["zebra"].value_for("de") == "Zebra"
