"""CSV flattening of a JSON value.

The table shape is picked by the first matching rule:

1. Non-empty array of objects: one column per key in the ordered union of
   all keys (first-seen order), one row per object. Missing keys and null
   cells are empty.
2. Object: a ``Key,Value`` table in key order.
3. Any other array: an ``Index,Value`` table with zero-based indices.
4. Scalar: a one-column ``Value`` table with one row.

Nested objects and arrays inside a cell are written as compact JSON text
rather than being flattened into extra columns, so the column count depends
only on the top-level shape. Fields are double-quoted with embedded quotes
doubled; rows are joined with ``\\n`` and there is no trailing newline.
"""

from __future__ import annotations

from typing import Any

from json_export.values import ValueKind, classify, compact_json, scalar_text

__all__ = ["quote_field", "union_keys", "write_csv"]


def quote_field(text: str) -> str:
    """Wrap ``text`` in double quotes, doubling any embedded quote."""
    escaped = text.replace('"', '""')
    return f'"{escaped}"'


def union_keys(records: list[dict[str, Any]]) -> list[str]:
    """Return every key of ``records`` once, in first-seen order."""
    # dict preserves insertion order, which gives first-seen ordering for free.
    seen: dict[str, None] = {}
    for record in records:
        for key in record:
            seen.setdefault(key, None)
    return list(seen)


def write_csv(value: Any) -> str:
    """Flatten ``value`` into CSV text following the module-level rules."""
    kind = classify(value)

    if kind == ValueKind.ARRAY and value and all(
        classify(item) == ValueKind.OBJECT for item in value
    ):
        return _records_table(value)
    if kind == ValueKind.OBJECT:
        rows = [
            f"{quote_field(key)},{quote_field(_cell_text(member))}"
            for key, member in value.items()
        ]
        return "\n".join(["Key,Value", *rows])
    if kind == ValueKind.ARRAY:
        rows = [f"{index},{quote_field(_cell_text(item))}" for index, item in enumerate(value)]
        return "\n".join(["Index,Value", *rows])
    return "\n".join(["Value", quote_field(scalar_text(value))])


def _records_table(records: list[dict[str, Any]]) -> str:
    headers = union_keys(records)
    lines = [",".join(quote_field(header) for header in headers)]
    for record in records:
        cells = (_record_cell_text(record.get(header)) for header in headers)
        lines.append(",".join(quote_field(cell) for cell in cells))
    return "\n".join(lines)


def _record_cell_text(value: Any) -> str:
    # A missing key and an explicit null both read back as an empty cell.
    if value is None:
        return ""
    return _cell_text(value)


def _cell_text(value: Any) -> str:
    if classify(value).is_container:
        return compact_json(value)
    return scalar_text(value)
