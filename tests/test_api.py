"""Unit tests for the public API functions and top-level exports."""

from __future__ import annotations

import json

import pytest

from json_export import (
    ConversionError,
    ConversionTarget,
    ExpansionState,
    ExportConfig,
    Exporter,
    ExportResult,
    PreviewCache,
    TreeNode,
    ValueKind,
    classify,
    convert,
    export,
    is_expandable,
    is_valid_json,
    minify,
    preview,
    project,
    to_csv,
    to_json,
    to_xml,
    to_yaml,
)


class TestToJson:
    def test_reindents(self) -> None:
        assert to_json('{"a":[1,2]}') == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_custom_indent(self) -> None:
        assert to_json('{"a":1}', indent=0) == '{\n"a": 1\n}'

    def test_accepts_bytes(self) -> None:
        assert to_json(b"[true]") == "[\n  true\n]"

    def test_out_of_range_number_becomes_null(self) -> None:
        assert to_json('{"n": 1e400}') == '{\n  "n": null\n}'

    def test_too_deep_raises_conversion_error(self) -> None:
        with pytest.raises(ConversionError, match="nested too deeply"):
            to_json("[" * 100_000)


class TestMinify:
    def test_minify(self) -> None:
        assert minify('{\n  "a": 1\n}') == '{"a":1}'


class TestToXml:
    def test_root_name(self) -> None:
        assert to_xml("[1]", root_name="items").endswith(
            "<items>\n  <items_item>1</items_item>\n</items>"
        )

    def test_empty_root_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="xml_root_name"):
            to_xml("{}", root_name="")


class TestToCsv:
    def test_records(self) -> None:
        assert to_csv('[{"a": 1}, {"b": 2}]') == '"a","b"\n"1",""\n"","2"'


class TestToYaml:
    def test_document(self) -> None:
        assert to_yaml('{"a": [1]}') == "a:\n  - 1\n"


class TestConvert:
    def test_by_name(self) -> None:
        assert convert("1", "yaml") == "1\n"

    def test_with_config(self) -> None:
        assert "<doc>" in convert("{}", "xml", config=ExportConfig(xml_root_name="doc"))


class TestPreview:
    def test_never_raises(self) -> None:
        assert preview("not json", "csv").startswith("Error: ")

    def test_too_deep_input_is_error_text(self) -> None:
        assert preview("[" * 100_000, "json").startswith("Error: ")

    def test_max_lines(self) -> None:
        assert preview("[1, 2, 3]", "csv", max_lines=1) == "Index,Value\n... (truncated)"


class TestExport:
    def test_returns_export_result(self) -> None:
        result = export('{"a": 1}', "json", filename="out")
        assert isinstance(result, ExportResult)
        assert result.filename == "out.json"
        assert json.loads(result.content) == {"a": 1}


class TestNoGlobalState:
    def test_repeated_calls_identical(self) -> None:
        source = '{"a": {"b": [1, 2]}}'
        for target in ConversionTarget:
            assert convert(source, target) == convert(source, target)

    def test_config_does_not_leak_between_calls(self) -> None:
        to_xml("{}", root_name="first")
        assert "<root>" in to_xml('{"a": 1}')


class TestTopLevelImports:
    """Verify all public symbols are importable from the top-level package."""

    def test_all_symbols_importable(self) -> None:
        # This test passes if the imports at the top of this file succeed.
        assert ConversionError is not None
        assert Exporter is not None
        assert PreviewCache is not None
        assert ExpansionState is not None
        assert TreeNode is not None
        assert ValueKind is not None

    def test_value_helpers_reexported(self) -> None:
        assert classify([]) == ValueKind.ARRAY
        assert is_expandable([1]) is True
        assert is_valid_json("{}") is True
        assert project({"a": 1}).preview == "Object(1)"
