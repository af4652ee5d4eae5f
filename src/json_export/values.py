"""JSON value model: the ValueKind tag, classification and scalar rendering.

Every consumer in the package dispatches on ``classify(value)`` instead of
probing Python types itself, so the six JSON kinds are handled in one place.
The dispatch order matters: ``bool`` MUST be checked before numbers because
``bool`` subclasses ``int`` (``isinstance(True, int)`` is True).

Values are never mutated here; parsing returns fresh objects and rendering
returns fresh strings.
"""

from __future__ import annotations

import json
import math
from enum import StrEnum, auto
from typing import Any, TypeAlias

from json_export.errors import ConversionError
from json_export.targets import ConversionTarget

__all__ = [
    "TOO_DEEP_MESSAGE",
    "JsonSource",
    "JsonValue",
    "ValueKind",
    "classify",
    "compact_json",
    "is_expandable",
    "is_valid_json",
    "parse_json",
    "scalar_text",
]

JsonValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None

# Accepted forms of JSON text.
JsonSource: TypeAlias = str | bytes | bytearray

TOO_DEEP_MESSAGE = "document nested too deeply"


class ValueKind(StrEnum):
    """The six kinds of JSON value.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of a JSON value.

    Raises:
        TypeError: If ``value`` is not one of the JSON Python types.
    """
    if value is None:
        return ValueKind.NULL
    # CRITICAL: bool before int/float
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_expandable(value: Any) -> bool:
    """True iff ``value`` is a non-empty array or a non-empty object."""
    return classify(value).is_container and len(value) > 0


def scalar_text(value: Any) -> str:
    """Render a scalar the way a browser's ``String(value)`` would.

    Strings are returned verbatim, booleans as ``true``/``false``, null as
    ``null`` and numbers as their JSON literal. Containers are rendered as
    compact JSON.
    """
    kind = classify(value)
    if kind == ValueKind.STRING:
        return value
    if kind == ValueKind.NULL:
        return "null"
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    return compact_json(value)


def compact_json(value: Any) -> str:
    """Serialize ``value`` without insignificant whitespace.

    Raises:
        ValueError: If ``value`` holds a non-finite float (NaN, Infinity).
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float | None:
    # A literal beyond double range reads as null, as JSON.stringify writes it.
    number = float(text)
    if math.isinf(number):
        return None
    return number


def parse_json(source: JsonSource, target: ConversionTarget) -> JsonValue:
    """Parse JSON text for a conversion to ``target``.

    ``bytes`` input is decoded per RFC 8259 (UTF-8, -16 or -32). The
    non-standard constants ``NaN``, ``Infinity`` and ``-Infinity`` that
    Python's decoder accepts by default are rejected. A number literal too
    large for a double (``1e400``) parses as null.

    Raises:
        ConversionError: If ``source`` is not valid JSON text, or nests deeper
            than the decoder can follow.
    """
    if not isinstance(source, (str, bytes, bytearray)):
        raise ConversionError(target, f"expected JSON text, got {type(source).__name__}")
    try:
        return json.loads(
            source, parse_constant=_reject_constant, parse_float=_finite_float
        )
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueError subclasses
        raise ConversionError(target, str(exc)) from exc
    except RecursionError as exc:
        raise ConversionError(target, TOO_DEEP_MESSAGE) from exc


def is_valid_json(source: JsonSource) -> bool:
    """Return True if ``source`` parses as JSON text."""
    try:
        parse_json(source, ConversionTarget.JSON)
    except ConversionError:
        return False
    return True
