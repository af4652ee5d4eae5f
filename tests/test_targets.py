"""Tests for ConversionTarget: members, file metadata and name parsing."""

from __future__ import annotations

import pytest

from json_export.targets import ConversionTarget


class TestMembers:
    def test_has_exactly_four_members(self) -> None:
        assert len(ConversionTarget) == 4

    def test_values(self) -> None:
        assert [t.value for t in ConversionTarget] == ["json", "xml", "csv", "yaml"]

    def test_is_str_subclass(self) -> None:
        assert isinstance(ConversionTarget.XML, str)


class TestMetadata:
    @pytest.mark.parametrize(
        ("target", "label", "mime", "extension"),
        [
            (ConversionTarget.JSON, "JSON", "application/json", ".json"),
            (ConversionTarget.XML, "XML", "application/xml", ".xml"),
            (ConversionTarget.CSV, "CSV", "text/csv", ".csv"),
            (ConversionTarget.YAML, "YAML", "application/x-yaml", ".yaml"),
        ],
    )
    def test_table(
        self, target: ConversionTarget, label: str, mime: str, extension: str
    ) -> None:
        assert target.label == label
        assert target.mime_type == mime
        assert target.extension == extension


class TestParse:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("xml", ConversionTarget.XML),
            ("XML", ConversionTarget.XML),
            (".csv", ConversionTarget.CSV),
            (" Json ", ConversionTarget.JSON),
            ("yml", ConversionTarget.YAML),
            (".YML", ConversionTarget.YAML),
        ],
    )
    def test_names(self, name: str, expected: ConversionTarget) -> None:
        assert ConversionTarget.parse(name) is expected

    def test_member_passes_through(self) -> None:
        assert ConversionTarget.parse(ConversionTarget.CSV) is ConversionTarget.CSV

    def test_unknown_name_lists_supported_targets(self) -> None:
        with pytest.raises(ValueError, match="JSON, XML, CSV, YAML"):
            ConversionTarget.parse("toml")
