"""Canonical JSON re-serialization.

``write_json`` is the inverse of ``json.loads`` for every JSON value:
object key order, non-ASCII text and the int/float distinction survive a
round trip.
"""

from __future__ import annotations

import json
from typing import Any

from json_export.values import compact_json

__all__ = ["write_json", "write_minified_json"]


def write_json(value: Any, indent: int = 2) -> str:
    """Serialize ``value`` as indented JSON.

    Args:
        value:  Any JSON value.
        indent: Spaces per nesting level. Defaults to 2.

    Returns:
        The JSON text, without a trailing newline.

    Raises:
        ValueError: If ``value`` holds NaN or an infinity.
    """
    return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)


def write_minified_json(value: Any) -> str:
    """Serialize ``value`` as JSON with no insignificant whitespace."""
    return compact_json(value)
