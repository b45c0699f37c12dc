"""Tests for SourceLocationResolver."""

from unittest.mock import MagicMock

import pytest

from deprecation_audit.bundles import Bundle, MappingEntry, MappingTableResolver
from deprecation_audit.core.artifacts import LegacyLogEntry
from deprecation_audit.core.output import OriginalPosition
from deprecation_audit.resolution import SourceLocationResolver


@pytest.fixture
def resolver():
    return SourceLocationResolver()


@pytest.fixture
def bundle():
    """Bundle for S1 mapping (10, 4) to orig.js (2, 1)."""
    return Bundle(
        script_id="S1",
        url="https://example.com/app.min.js",
        resolver=MappingTableResolver([
            MappingEntry(line=10, column=4, source_url="orig.js",
                         source_line_number=2, source_column_number=1),
        ]),
    )


def test_raw_location_without_bundle(resolver):
    location = resolver.resolve("a.js", 5, 9)

    assert location.url == "a.js"
    assert location.line == 5
    assert location.column == 9
    assert location.original_position is None
    assert location.type == "source-location"
    assert location.url_provider == "network"


def test_bundle_adds_original_position(resolver, bundle):
    location = resolver.resolve("app.min.js", 10, 4, bundle)

    assert (location.line, location.column) == (10, 4)
    assert location.original_position == OriginalPosition(url="orig.js", line=2, column=1)


def test_unmapped_position_falls_back(resolver, bundle):
    location = resolver.resolve("app.min.js", 3, 0, bundle)

    assert location.original_position is None
    assert (location.line, location.column) == (3, 0)


def test_segment_without_source_falls_back(resolver):
    bundle = Bundle(script_id="S1", resolver=MappingTableResolver([MappingEntry(line=1, column=0)]))

    assert resolver.resolve("x.js", 1, 5, bundle).original_position is None


def test_bundle_without_resolver(resolver):
    location = resolver.resolve("x.js", 1, 5, Bundle(script_id="S1"))

    assert location.original_position is None


def test_resolver_error_never_raises(resolver):
    broken = MagicMock()
    broken.find_entry.side_effect = ValueError("malformed mapping")
    bundle = Bundle(script_id="S1", resolver=broken)

    location = resolver.resolve("x.js", 4, 2, bundle)

    assert location.original_position is None
    assert (location.url, location.line, location.column) == ("x.js", 4, 2)
    broken.find_entry.assert_called_once_with(4, 2)


def test_malformed_entry_falls_back(resolver):
    broken = MagicMock()
    broken.find_entry.return_value = object()

    location = resolver.resolve("x.js", 4, 2, Bundle(script_id="S1", resolver=broken))

    assert location.original_position is None


def test_negative_positions_clamped(resolver):
    location = resolver.resolve("x.js", -1, -1)

    assert (location.line, location.column) == (0, 0)


def test_negative_position_skips_bundle_lookup(resolver):
    mapper = MagicMock()
    mapper.find_entry.return_value = MappingEntry(
        line=0, column=0, source_url="o.js", source_line_number=3, source_column_number=3,
    )

    location = resolver.resolve("x.js", 0, -1, Bundle(script_id="S1", resolver=mapper))

    assert (location.line, location.column) == (0, 0)
    assert location.original_position is None
    mapper.find_entry.assert_not_called()


def test_legacy_entry_is_raw(resolver):
    entry = LegacyLogEntry(source="deprecation", text="foo", url="b.js",
                           line_number=1, column_number=0, script_id="S1")

    location = resolver.resolve_from_legacy_entry(entry)

    assert (location.url, location.line, location.column) == ("b.js", 1, 0)
    assert location.original_position is None


def test_legacy_entry_missing_fields(resolver):
    location = resolver.resolve_from_legacy_entry(LegacyLogEntry(source="deprecation"))

    assert (location.url, location.line, location.column) == ("", 0, 0)


def test_describe_is_one_indexed(resolver, bundle):
    assert resolver.resolve("a.js", 5, 9).describe() == "a.js:6:10"
    assert resolver.resolve("app.min.js", 10, 4, bundle).describe() == "app.min.js:11:5 (orig.js:3:2)"
