"""ExportConfig: immutable knobs for the serializers and the tree projector.

There is no module-level configuration. A config object is passed explicitly
to ``Exporter`` (or to the public API functions) and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExportConfig"]


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Immutable configuration for conversions and tree display.

    Attributes:
        json_indent: Spaces per level for canonical JSON (>= 0).
        xml_root_name: Name of the single top-level XML element. Sanitized the
            same way as object keys before use.
        yaml_indent: Spaces per YAML block level, in [2, 9].
        yaml_line_width: Preferred YAML line width (>= 20).
        preview_max_lines: Lines kept by ``preview()`` before truncation (>= 1).
        auto_expand_depth: Tree nodes at this depth or shallower start
            expanded; the root is depth 0 (>= 0).
    """

    json_indent: int = 2
    xml_root_name: str = "root"
    yaml_indent: int = 2
    yaml_line_width: int = 80
    preview_max_lines: int = 10
    auto_expand_depth: int = 2

    def __post_init__(self) -> None:
        if self.json_indent < 0:
            msg = f"json_indent must be >= 0, got {self.json_indent}"
            raise ValueError(msg)
        if not self.xml_root_name:
            msg = "xml_root_name must be a non-empty string"
            raise ValueError(msg)
        if not 2 <= self.yaml_indent <= 9:
            msg = f"yaml_indent must be in [2, 9], got {self.yaml_indent}"
            raise ValueError(msg)
        if self.yaml_line_width < 20:
            msg = f"yaml_line_width must be >= 20, got {self.yaml_line_width}"
            raise ValueError(msg)
        if self.preview_max_lines < 1:
            msg = f"preview_max_lines must be >= 1, got {self.preview_max_lines}"
            raise ValueError(msg)
        if self.auto_expand_depth < 0:
            msg = f"auto_expand_depth must be >= 0, got {self.auto_expand_depth}"
            raise ValueError(msg)
