"""TreeNode: a read-only view of one position in a JSON value.

A node never copies or stores its children; they are derived from ``value``
on demand by ``json_export.tree.projector``. Whether a node is shown open
is not part of the node either; that lives in ``ExpansionState``.

Paths are JSON Pointers (RFC 6901):
- the root is ``""``
- each level appends ``"/{key_or_index}"``, with ``~`` written as ``~0``
  and ``/`` written as ``~1``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from json_export.values import ValueKind, classify, scalar_text

__all__ = ["TreeNode", "escape_pointer_segment", "pointer_child", "split_pointer"]


def escape_pointer_segment(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def unescape_pointer_segment(segment: str) -> str:
    # Order matters: "~01" must decode to "~1", not "/".
    return segment.replace("~1", "/").replace("~0", "~")


def pointer_child(path: str, segment: str | int) -> str:
    """Return the JSON Pointer of ``segment`` under ``path``."""
    return f"{path}/{escape_pointer_segment(str(segment))}"


def split_pointer(path: str) -> list[str]:
    """Split a JSON Pointer into unescaped segments.

    Raises:
        ValueError: If ``path`` is neither empty nor starts with ``/``.
    """
    if path == "":
        return []
    if not path.startswith("/"):
        msg = f"JSON Pointer must be empty or start with '/', got {path!r}"
        raise ValueError(msg)
    return [unescape_pointer_segment(part) for part in path[1:].split("/")]


@dataclass(frozen=True, slots=True)
class TreeNode:
    """One row of a JSON tree view.

    Attributes:
        key:   Display label: the object key, ``"[i]"`` for array items, or
               the root label.
        value: The JSON value at this position (shared, never copied).
        path:  JSON Pointer to this node. ``""`` for the root.
        depth: Distance from the root (root is 0).
        kind:  ``classify(value)``, computed once at construction.
    """

    key: str
    value: Any
    path: str = ""
    depth: int = 0
    kind: ValueKind = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", classify(self.value))

    @property
    def expandable(self) -> bool:
        """True for a non-empty array or object."""
        return self.kind.is_container and len(self.value) > 0

    @property
    def size(self) -> int:
        """Element count for arrays, key count for objects, 0 for scalars."""
        return len(self.value) if self.kind.is_container else 0

    @property
    def preview(self) -> str:
        """One-line summary of ``value``.

        ``"text"`` for strings (not escaped), literals for numbers, booleans
        and null, ``Array(n)`` and ``Object(n)`` for containers.
        """
        if self.kind == ValueKind.STRING:
            return f'"{self.value}"'
        if self.kind == ValueKind.ARRAY:
            return f"Array({len(self.value)})"
        if self.kind == ValueKind.OBJECT:
            return f"Object({len(self.value)})"
        return scalar_text(self.value)
