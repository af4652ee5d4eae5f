"""Tests for ExportResult frozen dataclass."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_export.result import ExportResult
from json_export.targets import ConversionTarget


def make_result(**overrides: object) -> ExportResult:
    """Return a valid ExportResult, optionally overriding specific fields."""
    defaults: dict[str, object] = {
        "content": "a: 1\n",
        "target": ConversionTarget.YAML,
        "mime_type": "application/x-yaml",
        "filename": "data.yaml",
    }
    defaults.update(overrides)
    return ExportResult(**defaults)  # type: ignore[arg-type]


class TestExportResult:
    def test_fields(self) -> None:
        result = make_result()
        assert result.content == "a: 1\n"
        assert result.target is ConversionTarget.YAML
        assert result.mime_type == "application/x-yaml"
        assert result.filename == "data.yaml"

    def test_frozen(self) -> None:
        result = make_result()
        with pytest.raises(FrozenInstanceError):
            result.content = "changed"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert make_result() == make_result()
        assert make_result() != make_result(filename="other.yaml")

    def test_size_counts_utf8_bytes(self) -> None:
        assert make_result(content="é").size_bytes == 2
