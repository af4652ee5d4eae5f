"""json-export - re-serialize JSON as JSON, XML, CSV or YAML, and view it as a tree."""

from __future__ import annotations

import logging

from json_export.api import (
    convert,
    export,
    minify,
    preview,
    to_csv,
    to_json,
    to_xml,
    to_yaml,
)
from json_export.cache import PreviewCache
from json_export.config import ExportConfig
from json_export.errors import ConversionError
from json_export.exporter import Exporter
from json_export.result import ExportResult
from json_export.targets import ConversionTarget
from json_export.tree import ExpansionState, TreeNode, project
from json_export.values import ValueKind, classify, is_expandable, is_valid_json

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ConversionError",
    "ConversionTarget",
    "ExpansionState",
    "ExportConfig",
    "ExportResult",
    "Exporter",
    "PreviewCache",
    "TreeNode",
    "ValueKind",
    "classify",
    "convert",
    "export",
    "is_expandable",
    "is_valid_json",
    "minify",
    "preview",
    "project",
    "to_csv",
    "to_json",
    "to_xml",
    "to_yaml",
]
