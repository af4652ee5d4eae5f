"""ConversionTarget StrEnum: the four output formats and their file metadata.

The MIME type and extension of each target only matter to the code that hands
the converted text to a download or clipboard collaborator. Conversion logic
dispatches on the member itself.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["ConversionTarget"]

_LABELS = {"json": "JSON", "xml": "XML", "csv": "CSV", "yaml": "YAML"}

_MIME_TYPES = {
    "json": "application/json",
    "xml": "application/xml",
    "csv": "text/csv",
    "yaml": "application/x-yaml",
}

_ALIASES = {"yml": "yaml"}


class ConversionTarget(StrEnum):
    """Output format of a conversion.

    StrEnum values are the lowercased member names:
    - JSON -> "json" : canonical 2-space indented JSON
    - XML  -> "xml"  : element-per-key XML document
    - CSV  -> "csv"  : flattened, double-quoted table
    - YAML -> "yaml" : block-style YAML without anchors
    """

    JSON = auto()
    XML = auto()
    CSV = auto()
    YAML = auto()

    @property
    def label(self) -> str:
        """Display name used in error messages, e.g. ``"XML"``."""
        return _LABELS[self.value]

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self.value]

    @property
    def extension(self) -> str:
        """File extension including the leading dot, e.g. ``".yaml"``."""
        return f".{self.value}"

    @classmethod
    def parse(cls, name: str | ConversionTarget) -> ConversionTarget:
        """Look up a target by value, label or extension (case-insensitive).

        ``"XML"``, ``"xml"``, ``".xml"`` all resolve to ``XML``; ``"yml"`` is
        accepted as an alias for ``YAML``.

        Raises:
            ValueError: If ``name`` names no supported target.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().lstrip(".")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            supported = ", ".join(member.label for member in cls)
            msg = f"Unsupported format: {name!r} (expected one of {supported})"
            raise ValueError(msg) from None
