"""YAML emission through PyYAML with a fixed output policy.

Policy:
- block style, ``indent`` spaces per level (sequences under a key included),
  preferred line width ``width``
- object key order kept; non-ASCII text written as-is
- no anchors or aliases: a value reachable through two paths is written out
  twice
- scalars are quoted only when YAML requires it, and then with double quotes
- no ``...`` document-end marker after a bare root scalar (``42`` -> ``42\\n``)
"""

from __future__ import annotations

from typing import Any

import yaml

__all__ = ["ExportDumper", "write_yaml"]

_DOCUMENT_END = "\n...\n"


class ExportDumper(yaml.SafeDumper):
    """SafeDumper that never shares nodes and prefers double quotes."""

    def ignore_aliases(self, data: Any) -> bool:
        return True

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        # Indent sequences nested under a mapping key ("key:\n  - item").
        return super().increase_indent(flow, False)

    def choose_scalar_style(self) -> str:
        style = super().choose_scalar_style()
        if style == "'":
            return '"'
        return style


def write_yaml(value: Any, indent: int = 2, width: int = 80) -> str:
    """Serialize ``value`` as a single YAML document.

    Args:
        value:  Any JSON value.
        indent: Spaces per block level. Defaults to 2.
        width:  Preferred line width. Defaults to 80.

    Returns:
        The YAML text, ending with a newline.
    """
    text = yaml.dump(
        value,
        Dumper=ExportDumper,
        indent=indent,
        width=width,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
    if text.endswith(_DOCUMENT_END):
        text = text[: -len(_DOCUMENT_END) + 1]
    return text
