"""Public API functions for json-export.

Each call creates a fresh ``Exporter`` so that no state is shared between
calls. All conversion functions take JSON *text*; a ``str`` argument is
always parsed, never treated as a JSON string value. Use
``Exporter.convert_value`` for values that are already parsed.
"""

from __future__ import annotations

from json_export.config import ExportConfig
from json_export.exporter import DEFAULT_FILENAME, Exporter
from json_export.result import ExportResult
from json_export.targets import ConversionTarget
from json_export.values import JsonSource

__all__ = [
    "convert",
    "export",
    "minify",
    "preview",
    "to_csv",
    "to_json",
    "to_xml",
    "to_yaml",
]


def to_json(source: JsonSource, indent: int = 2) -> str:
    """Re-serialize JSON text canonically with ``indent`` spaces per level.

    Raises:
        ConversionError: If ``source`` is not valid JSON.
    """
    return Exporter(ExportConfig(json_indent=indent)).convert(source, ConversionTarget.JSON)


def minify(source: JsonSource) -> str:
    """Re-serialize JSON text with no insignificant whitespace.

    Raises:
        ConversionError: If ``source`` is not valid JSON.
    """
    return Exporter().minify(source)


def to_xml(source: JsonSource, root_name: str = "root") -> str:
    """Convert JSON text to an XML document rooted at ``<root_name>``.

    Raises:
        ConversionError: If ``source`` is not valid JSON.
    """
    return Exporter(ExportConfig(xml_root_name=root_name)).convert(
        source, ConversionTarget.XML
    )


def to_csv(source: JsonSource) -> str:
    """Flatten JSON text into a CSV table.

    Raises:
        ConversionError: If ``source`` is not valid JSON.
    """
    return Exporter().convert(source, ConversionTarget.CSV)


def to_yaml(source: JsonSource) -> str:
    """Convert JSON text to a YAML document.

    Raises:
        ConversionError: If ``source`` is not valid JSON.
    """
    return Exporter().convert(source, ConversionTarget.YAML)


def convert(
    source: JsonSource,
    target: ConversionTarget | str,
    config: ExportConfig | None = None,
) -> str:
    """Convert JSON text to ``target`` (a ``ConversionTarget`` or its name).

    Raises:
        ConversionError: If ``source`` is not valid JSON.
        ValueError: If ``target`` names no supported format.
    """
    return Exporter(config).convert(source, target)


def preview(
    source: JsonSource,
    target: ConversionTarget | str,
    max_lines: int = 10,
    config: ExportConfig | None = None,
) -> str:
    """Return the first ``max_lines`` lines of a conversion.

    Conversion failures come back as an ``"Error: ..."`` string instead of
    being raised, so the result can be shown directly in a preview pane.
    """
    return Exporter(config).preview(source, target, max_lines=max_lines)


def export(
    source: JsonSource,
    target: ConversionTarget | str,
    filename: str = DEFAULT_FILENAME,
    config: ExportConfig | None = None,
) -> ExportResult:
    """Convert JSON text and return content, MIME type and download name.

    Raises:
        ConversionError: If ``source`` is not valid JSON.
    """
    return Exporter(config).export(source, target, filename=filename)
