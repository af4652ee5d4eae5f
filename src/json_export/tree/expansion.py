"""ExpansionState: caller-owned record of which tree nodes are open.

The projector never mutates this; the presentation layer does, one node at
a time. State is keyed by JSON Pointer, so opening or closing one node
leaves its siblings, ancestors and descendants untouched.

Default rule: an expandable node starts expanded when its depth is at most
``auto_expand_depth`` (the root is depth 0), collapsed otherwise. Explicit
``expand``/``collapse``/``toggle`` calls override the default for that path
only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_export.config import ExportConfig
    from json_export.tree.nodes import TreeNode

__all__ = ["ExpansionState"]


@dataclass
class ExpansionState:
    """Mutable expand/collapse state for one projected tree.

    Attributes:
        auto_expand_depth: Deepest level that starts expanded. Defaults to 2.
    """

    auto_expand_depth: int = 2
    _overrides: dict[str, bool] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.auto_expand_depth < 0:
            msg = f"auto_expand_depth must be >= 0, got {self.auto_expand_depth}"
            raise ValueError(msg)

    @classmethod
    def from_config(cls, config: ExportConfig) -> ExpansionState:
        return cls(auto_expand_depth=config.auto_expand_depth)

    def is_expanded(self, node: TreeNode) -> bool:
        """Return whether ``node`` is open. Leaves are never open."""
        if not node.expandable:
            return False
        override = self._overrides.get(node.path)
        if override is not None:
            return override
        return node.depth <= self.auto_expand_depth

    def expand(self, node: TreeNode) -> None:
        self._set(node, True)

    def collapse(self, node: TreeNode) -> None:
        self._set(node, False)

    def toggle(self, node: TreeNode) -> bool:
        """Flip ``node`` between expanded and collapsed.

        Returns:
            The new expanded flag.

        Raises:
            ValueError: If ``node`` is not expandable.
        """
        expanded = not self.is_expanded(node)
        self._set(node, expanded)
        return expanded

    def reset(self) -> None:
        """Forget every explicit change and fall back to the default rule."""
        self._overrides.clear()

    def _set(self, node: TreeNode, expanded: bool) -> None:
        if not node.expandable:
            msg = f"Node {node.path or '/'!r} ({node.kind}) cannot be expanded"
            raise ValueError(msg)
        self._overrides[node.path] = expanded
