"""ExportResult dataclass: converted text plus the metadata a download needs."""

from __future__ import annotations

from dataclasses import dataclass

from json_export.targets import ConversionTarget

__all__ = ["ExportResult"]


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Result of an ``export()`` call.

    The library never touches the filesystem or clipboard; the caller wraps
    ``content`` in whatever blob or file object its platform needs.

    Attributes:
        content: The converted text.
        target: Format of ``content``.
        mime_type: MIME type for ``content`` (``target.mime_type``).
        filename: Suggested download name, ending in ``target.extension``.
    """

    content: str
    target: ConversionTarget
    mime_type: str
    filename: str

    @property
    def size_bytes(self) -> int:
        """Length of ``content`` once encoded as UTF-8."""
        return len(self.content.encode("utf-8"))
