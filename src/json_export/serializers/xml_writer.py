"""XML rendering of a JSON value by a depth-first walk.

Layout rules:
- The document is an XML declaration followed by one ``<root>`` element whose
  content is the input value.
- Object members become child elements, one indentation level deeper.
- Array items become sibling elements named ``<tag>_item`` at the array's own
  level; arrays never add a wrapping element, so an empty array emits nothing.
- Scalars become ``<tag>text</tag>``; null becomes ``<tag xsi:nil="true"/>``.
  The ``xsi`` prefix is declared on the root element only when a null occurs.

Element names are derived from object keys by replacing every character
outside ``[A-Za-z0-9_-]`` with ``_``.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple
from xml.sax.saxutils import escape

from json_export.values import ValueKind, classify, scalar_text

__all__ = ["XML_DECLARATION", "escape_text", "sanitize_name", "write_xml"]

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")

# saxutils.escape always handles &, < and >; quotes are added here.
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def sanitize_name(key: str) -> str:
    """Turn an object key into a valid XML element name.

    Characters outside ``[A-Za-z0-9_-]`` become ``_``. A name that would be
    empty or start with a digit or ``-`` is prefixed with ``_``.
    """
    name = _INVALID_NAME_CHARS.sub("_", key)
    if not name or name[0] in "0123456789-":
        name = f"_{name}"
    return name


def escape_text(text: str) -> str:
    """Escape the five XML-reserved characters with named entities."""
    return escape(text, _QUOTE_ENTITIES)


def write_xml(value: Any, root_name: str = "root", indent: int = 2) -> str:
    """Render ``value`` as an XML document.

    Args:
        value:     Any JSON value.
        root_name: Name of the top-level element (sanitized like a key).
        indent:    Spaces per nesting level. Defaults to 2.

    Returns:
        The XML text, without a trailing newline.
    """
    root = sanitize_name(root_name)
    unit = " " * indent
    namespace = f' xmlns:xsi="{_XSI_NAMESPACE}"' if _contains_null(value) else ""
    kind = classify(value)

    lines = [XML_DECLARATION]
    if kind == ValueKind.NULL:
        lines.append(f'<{root}{namespace} xsi:nil="true"/>')
    elif kind.is_container:
        body: list[str] = []
        _write_members(value, kind, root, 1, unit, body)
        if body:
            lines.append(f"<{root}{namespace}>")
            lines.extend(body)
            lines.append(f"</{root}>")
        else:
            lines.append(f"<{root}{namespace}></{root}>")
    else:
        lines.append(f"<{root}{namespace}>{escape_text(scalar_text(value))}</{root}>")
    return "\n".join(lines)


class _Pending(NamedTuple):
    """A value still to be written as element ``tag`` at ``depth``."""

    value: Any
    tag: str
    depth: int


class _Closing(NamedTuple):
    """The end tag of an object element opened at ``out[open_index]``."""

    tag: str
    pad: str
    open_index: int


def _write_members(
    value: Any, kind: ValueKind, tag: str, depth: int, unit: str, out: list[str]
) -> None:
    """Append the elements for the members of a container at ``depth``.

    Walks with an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit.
    """
    stack: list[_Pending | _Closing] = []
    _push_members(stack, value, kind, tag, depth)
    while stack:
        frame = stack.pop()
        if isinstance(frame, _Closing):
            if len(out) == frame.open_index + 1:
                # Nothing was written inside: collapse to an empty element.
                out[frame.open_index] = f"{frame.pad}<{frame.tag}></{frame.tag}>"
            else:
                out.append(f"{frame.pad}</{frame.tag}>")
            continue

        pad = unit * frame.depth
        member_kind = classify(frame.value)
        if member_kind == ValueKind.NULL:
            out.append(f'{pad}<{frame.tag} xsi:nil="true"/>')
        elif member_kind == ValueKind.ARRAY:
            # Items are emitted in place, under the parent's indentation.
            _push_members(stack, frame.value, member_kind, frame.tag, frame.depth)
        elif member_kind == ValueKind.OBJECT:
            out.append(f"{pad}<{frame.tag}>")
            stack.append(_Closing(frame.tag, pad, len(out) - 1))
            _push_members(stack, frame.value, member_kind, frame.tag, frame.depth + 1)
        else:
            text = escape_text(scalar_text(frame.value))
            out.append(f"{pad}<{frame.tag}>{text}</{frame.tag}>")


def _push_members(
    stack: list[_Pending | _Closing], value: Any, kind: ValueKind, tag: str, depth: int
) -> None:
    # Reverse so the first member is popped first.
    if kind == ValueKind.OBJECT:
        members = [
            _Pending(member, sanitize_name(key), depth) for key, member in value.items()
        ]
    else:
        item_tag = f"{tag}_item"
        members = [_Pending(item, item_tag, depth) for item in value]
    stack.extend(reversed(members))


def _contains_null(value: Any) -> bool:
    stack = [value]
    while stack:
        current = stack.pop()
        kind = classify(current)
        if kind == ValueKind.NULL:
            return True
        if kind == ValueKind.OBJECT:
            stack.extend(current.values())
        elif kind == ValueKind.ARRAY:
            stack.extend(current)
    return False
