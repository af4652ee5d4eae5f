"""Tree subpackage: JSON values as lazily expandable trees.

Re-exports the public API for the tree module:
- TreeNode: read-only view of one position in a JSON value
- ExpansionState: caller-owned expand/collapse state keyed by JSON Pointer
- project / children / child_nodes / find: node construction and lookup
- visible_nodes / render_outline: walking the rows a renderer should draw
- classify / is_expandable / preview: per-value inspection
"""

from json_export.tree.expansion import ExpansionState
from json_export.tree.nodes import TreeNode
from json_export.tree.projector import (
    child_nodes,
    children,
    find,
    preview,
    project,
    render_outline,
    visible_nodes,
)
from json_export.values import ValueKind, classify, is_expandable

__all__ = [
    "ExpansionState",
    "TreeNode",
    "ValueKind",
    "child_nodes",
    "children",
    "classify",
    "find",
    "is_expandable",
    "preview",
    "project",
    "render_outline",
    "visible_nodes",
]
