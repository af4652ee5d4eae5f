"""Tree projection: lazy child listing, lookup and visible-row walking.

Nothing here copies the JSON value or caches derived data. ``children`` is
recomputed on every call, which is safe because values are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from json_export.tree.expansion import ExpansionState
from json_export.tree.nodes import TreeNode, pointer_child, split_pointer
from json_export.values import ValueKind, classify

__all__ = [
    "child_nodes",
    "children",
    "find",
    "preview",
    "project",
    "render_outline",
    "visible_nodes",
]

ROOT_KEY = "root"

_EXPANDED_MARKER = "▾ "
_COLLAPSED_MARKER = "▸ "
_LEAF_MARKER = "  "


def project(value: Any, key: str = ROOT_KEY) -> TreeNode:
    """Return the root node for ``value``."""
    return TreeNode(key=key, value=value)


def preview(value: Any) -> str:
    """One-line summary of a JSON value (see ``TreeNode.preview``)."""
    return project(value).preview


def children(source: TreeNode | Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(key, value)`` pairs for the children of a node or value.

    Arrays yield ``("[i]", item)`` in index order; objects yield their
    entries in insertion order; scalars yield nothing.
    """
    value = source.value if isinstance(source, TreeNode) else source
    kind = classify(value)
    if kind == ValueKind.ARRAY:
        for index, item in enumerate(value):
            yield f"[{index}]", item
    elif kind == ValueKind.OBJECT:
        yield from value.items()


def child_nodes(node: TreeNode) -> Iterator[TreeNode]:
    """Yield the child nodes of ``node`` one level deeper."""
    if node.kind == ValueKind.ARRAY:
        for index, item in enumerate(node.value):
            yield TreeNode(
                key=f"[{index}]",
                value=item,
                path=pointer_child(node.path, index),
                depth=node.depth + 1,
            )
    elif node.kind == ValueKind.OBJECT:
        for key, member in node.value.items():
            yield TreeNode(
                key=key,
                value=member,
                path=pointer_child(node.path, key),
                depth=node.depth + 1,
            )


def find(root: TreeNode, path: str) -> TreeNode:
    """Resolve the JSON Pointer ``path`` relative to ``root``.

    Raises:
        KeyError: If no node exists at ``path``.
        ValueError: If ``path`` is not a JSON Pointer.
    """
    node = root
    for segment in split_pointer(path):
        node = _child_at(node, segment, path)
    return node


def _child_at(node: TreeNode, segment: str, path: str) -> TreeNode:
    if node.kind == ValueKind.OBJECT:
        if segment not in node.value:
            raise KeyError(path)
        return TreeNode(
            key=segment,
            value=node.value[segment],
            path=pointer_child(node.path, segment),
            depth=node.depth + 1,
        )
    if node.kind == ValueKind.ARRAY:
        if not segment.isdigit() or (len(segment) > 1 and segment[0] == "0"):
            raise KeyError(path)
        index = int(segment)
        if index >= len(node.value):
            raise KeyError(path)
        return TreeNode(
            key=f"[{index}]",
            value=node.value[index],
            path=pointer_child(node.path, index),
            depth=node.depth + 1,
        )
    raise KeyError(path)


def visible_nodes(root: TreeNode, state: ExpansionState) -> Iterator[TreeNode]:
    """Yield the nodes a renderer should draw, depth-first in document order.

    A node's children are visited only when ``state`` reports it expanded.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if state.is_expanded(node):
            # Reverse so the first child is popped first.
            stack.extend(reversed(list(child_nodes(node))))


def render_outline(root: TreeNode, state: ExpansionState, indent: int = 2) -> str:
    """Render the visible rows as indented ``key: preview`` lines.

    Expandable rows are prefixed with ``▾`` when open and ``▸`` when
    collapsed.
    """
    lines = []
    for node in visible_nodes(root, state):
        if not node.expandable:
            marker = _LEAF_MARKER
        elif state.is_expanded(node):
            marker = _EXPANDED_MARKER
        else:
            marker = _COLLAPSED_MARKER
        lines.append(f"{' ' * (indent * node.depth)}{marker}{node.key}: {node.preview}")
    return "\n".join(lines)
