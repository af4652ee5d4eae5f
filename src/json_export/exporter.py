"""Exporter: wires JSON parsing, the value-level writers and error reporting.

This is the layer between the pure writers in ``json_export.serializers`` and
the public API. It

- parses JSON text and turns decoder failures into ``ConversionError``
  naming the requested target,
- dispatches to the writer for a ``ConversionTarget`` with the options held
  in an ``ExportConfig``,
- builds ``ExportResult`` objects for download/clipboard collaborators,
- produces truncated previews that report failures as text instead of
  raising.

An ``Exporter`` holds nothing but its frozen config, so one instance can
serve any number of calls, and two calls never affect each other.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_export.config import ExportConfig
from json_export.errors import ConversionError
from json_export.result import ExportResult
from json_export.serializers import (
    write_csv,
    write_json,
    write_minified_json,
    write_xml,
    write_yaml,
)
from json_export.targets import ConversionTarget
from json_export.values import TOO_DEEP_MESSAGE, JsonSource, classify, parse_json

__all__ = ["NO_DATA_MESSAGE", "TRUNCATION_MARKER", "Exporter", "truncate_lines"]

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "... (truncated)"
NO_DATA_MESSAGE = "No data to preview"
DEFAULT_FILENAME = "data"


def truncate_lines(text: str, max_lines: int) -> str:
    """Keep the first ``max_lines`` lines of ``text``.

    When lines were dropped, ``TRUNCATION_MARKER`` is appended on its own
    line. Lines are split on ``\\n`` only, so a trailing newline counts as
    an (empty) final line.
    """
    lines = text.split("\n")
    if len(lines) > max_lines:
        return "\n".join([*lines[:max_lines], TRUNCATION_MARKER])
    return text


def download_name(filename: str, target: ConversionTarget) -> str:
    """Return ``filename`` ending in the target extension exactly once."""
    name = filename.strip() if filename else ""
    if not name:
        name = DEFAULT_FILENAME
    if not name.lower().endswith(target.extension):
        name += target.extension
    return name


class Exporter:
    """Converts JSON text or parsed JSON values into the four target formats.

    Example::

        from json_export.exporter import Exporter

        exporter = Exporter()
        exporter.convert('{"x": "<tag>&"}', "xml")
        # '<?xml version="1.0" encoding="UTF-8"?>\\n<root>\\n  <x>&lt;tag&gt;&amp;</x>\\n</root>'
        exporter.preview("[1, 2", "csv")
        # 'Error: Invalid JSON data for CSV conversion: ...'
    """

    def __init__(self, config: ExportConfig | None = None) -> None:
        """Initialise the exporter.

        Args:
            config: Output options. Defaults to ``ExportConfig()`` when None.
        """
        self._config: ExportConfig = config if config is not None else ExportConfig()

    @property
    def config(self) -> ExportConfig:
        return self._config

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert(self, source: JsonSource, target: ConversionTarget | str) -> str:
        """Parse JSON text and convert it to ``target``.

        Args:
            source: JSON text (``str``, ``bytes`` or ``bytearray``). A ``str``
                is always parsed, never treated as a JSON string value.
            target: A ``ConversionTarget`` or a name accepted by
                ``ConversionTarget.parse``.

        Returns:
            The converted text.

        Raises:
            ConversionError: If ``source`` is not valid JSON.
            ValueError: If ``target`` names no supported format.
        """
        target = ConversionTarget.parse(target)
        try:
            value = parse_json(source, target)
        except ConversionError as exc:
            logger.debug("Rejected %s conversion: %s", target.label, exc.cause)
            raise
        return self.convert_value(value, target)

    def convert_value(self, value: Any, target: ConversionTarget | str) -> str:
        """Convert an already-parsed JSON value to ``target``.

        The value is read, never mutated.

        Raises:
            ConversionError: If ``value`` nests deeper than the writer for
                ``target`` can follow.
            TypeError: If ``value`` contains a non-JSON Python object.
            ValueError: If ``target`` is unknown, or ``value`` holds NaN or an
                infinity and ``target`` is JSON or CSV.
        """
        target = ConversionTarget.parse(target)
        t0 = time.perf_counter()
        try:
            text = self._dispatch(value, target)
        except RecursionError as exc:
            # PyYAML's representer and the json encoder recurse per level.
            logger.debug("Rejected %s conversion: %s", target.label, TOO_DEEP_MESSAGE)
            raise ConversionError(target, TOO_DEEP_MESSAGE) from exc
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Converted %s value to %s (%d chars) in %.3f ms",
            classify(value),
            target.label,
            len(text),
            elapsed_ms,
        )
        return text

    def minify(self, source: JsonSource) -> str:
        """Parse JSON text and return it without insignificant whitespace.

        Raises:
            ConversionError: If ``source`` is not valid JSON.
        """
        return write_minified_json(parse_json(source, ConversionTarget.JSON))

    def _dispatch(self, value: Any, target: ConversionTarget) -> str:
        config = self._config
        if target == ConversionTarget.JSON:
            return write_json(value, indent=config.json_indent)
        if target == ConversionTarget.XML:
            return write_xml(value, root_name=config.xml_root_name)
        if target == ConversionTarget.CSV:
            return write_csv(value)
        if target == ConversionTarget.YAML:
            return write_yaml(
                value, indent=config.yaml_indent, width=config.yaml_line_width
            )
        raise ValueError(f"Unsupported format: {target!r}")

    # ------------------------------------------------------------------
    # Preview
    # ------------------------------------------------------------------

    def preview(
        self,
        source: JsonSource,
        target: ConversionTarget | str,
        max_lines: int | None = None,
    ) -> str:
        """Return the first lines of a conversion, or an error message.

        Never raises ``ConversionError``: invalid input yields
        ``"Error: <message>"`` and blank input yields ``NO_DATA_MESSAGE``.

        Args:
            source:    JSON text.
            target:    Output format.
            max_lines: Lines to keep. Defaults to ``config.preview_max_lines``.
        """
        if isinstance(source, (str, bytes, bytearray)) and not source.strip():
            return NO_DATA_MESSAGE
        limit = max_lines if max_lines is not None else self._config.preview_max_lines
        try:
            text = self.convert(source, target)
        except ConversionError as exc:
            return f"Error: {exc}"
        return truncate_lines(text, limit)

    def preview_value(
        self,
        value: Any,
        target: ConversionTarget | str,
        max_lines: int | None = None,
    ) -> str:
        """Like ``preview`` for an already-parsed value."""
        limit = max_lines if max_lines is not None else self._config.preview_max_lines
        try:
            text = self.convert_value(value, target)
        except ConversionError as exc:
            return f"Error: {exc}"
        return truncate_lines(text, limit)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(
        self,
        source: JsonSource,
        target: ConversionTarget | str,
        filename: str = DEFAULT_FILENAME,
    ) -> ExportResult:
        """Convert JSON text and package it for a download collaborator.

        Raises:
            ConversionError: If ``source`` is not valid JSON.
        """
        target = ConversionTarget.parse(target)
        return self._package(self.convert(source, target), target, filename)

    def export_value(
        self,
        value: Any,
        target: ConversionTarget | str,
        filename: str = DEFAULT_FILENAME,
    ) -> ExportResult:
        """Like ``export`` for an already-parsed value."""
        target = ConversionTarget.parse(target)
        return self._package(self.convert_value(value, target), target, filename)

    def _package(
        self, content: str, target: ConversionTarget, filename: str
    ) -> ExportResult:
        return ExportResult(
            content=content,
            target=target,
            mime_type=target.mime_type,
            filename=download_name(filename, target),
        )
