"""ConversionError: the single error kind raised by the export engine."""

from __future__ import annotations

from json_export.targets import ConversionTarget

__all__ = ["ConversionError"]


class ConversionError(ValueError):
    """Raised when a source cannot be converted to the requested target.

    The message always names the target format so that a preview pane can
    show it verbatim, e.g.
    ``"Invalid JSON data for CSV conversion: Expecting value: line 1 column 6"``.

    Attributes:
        target: The format the caller asked for.
        cause:  Human-readable reason, typically the JSON decoder message.
    """

    def __init__(self, target: ConversionTarget, cause: str) -> None:
        self.target = target
        self.cause = cause
        super().__init__(f"Invalid JSON data for {target.label} conversion: {cause}")
