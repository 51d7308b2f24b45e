"""Plain-text renderings of trees and traversal progress."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .tree_builder import TreeNode

PLACEHOLDER = "·"
EMPTY_TREE = "<empty>"


def _format_value(node: TreeNode, highlighted: Optional[TreeNode]) -> str:
    if node is highlighted:
        return f"*{node.value}*"
    return str(node.value)


def render_tree(
    root: Optional[TreeNode], highlighted: Optional[TreeNode] = None
) -> str:
    """Render *root* level-by-level, marking missing children with ``·``.

    Each row lists the child slots of the real nodes on the row above, so a
    missing child is shown once and never expanded further.  Output grows
    with the node count, not with ``2**depth``.  Rendering stops at the first
    row without a real node.  *highlighted* is matched by identity and drawn
    as ``*value*``.
    """

    if root is None:
        return EMPTY_TREE

    lines: List[str] = []
    row: List[Optional[TreeNode]] = [root]

    while any(node is not None for node in row):
        lines.append(
            " ".join(
                PLACEHOLDER if node is None else _format_value(node, highlighted)
                for node in row
            )
        )
        next_row: List[Optional[TreeNode]] = []
        for node in row:
            if node is not None:
                next_row.extend((node.left, node.right))
        row = next_row

    return "\n".join(lines)


def render_traversal(sequence: Sequence[TreeNode], step: int) -> str:
    """Show visited entries (index <= *step*) as ``[v]`` and the rest bare."""

    return " ".join(
        f"[{node.value}]" if index <= step else str(node.value)
        for index, node in enumerate(sequence)
    )


__all__ = ["EMPTY_TREE", "PLACEHOLDER", "render_traversal", "render_tree"]
