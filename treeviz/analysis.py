"""Structural metrics for binary trees.

Every metric walks the tree with an explicit queue or stack, so a degenerate
chain thousands of levels deep is measured like any other tree.
``is_balanced`` computes heights bottom-up and stops at the first imbalance;
the result is the same as re-checking ``max_depth`` of both subtrees at every
node.
"""

from __future__ import annotations

from collections import deque
from dataclasses import asdict, dataclass
from typing import Deque, Dict, List, Optional, Tuple

from .tree_builder import TreeNode


@dataclass(frozen=True)
class TreeMetrics:
    """Summary shown next to a rendered tree."""

    max_depth: int
    is_balanced: bool
    node_count: int

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def max_depth(node: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""

    if node is None:
        return 0
    depth = 0
    level: Deque[TreeNode] = deque([node])
    while level:
        depth += 1
        for _ in range(len(level)):
            current = level.popleft()
            if current.left is not None:
                level.append(current.left)
            if current.right is not None:
                level.append(current.right)
    return depth


def _subtree_heights(root: Optional[TreeNode]) -> Tuple[bool, Dict[TreeNode, int]]:
    """Post-order pass returning (balanced, height of every finished node)."""

    heights: Dict[TreeNode, int] = {}
    if root is None:
        return True, heights

    stack: List[Tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
            continue

        left_height = heights[node.left] if node.left is not None else 0
        right_height = heights[node.right] if node.right is not None else 0
        if abs(left_height - right_height) > 1:
            return False, heights
        heights[node] = max(left_height, right_height) + 1
    return True, heights


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return ``True`` when *root* is a height-balanced binary tree."""

    balanced, _ = _subtree_heights(root)
    return balanced


def count_nodes(root: Optional[TreeNode]) -> int:
    if root is None:
        return 0
    count = 0
    pending: List[TreeNode] = [root]
    while pending:
        node = pending.pop()
        count += 1
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return count


def analyze_tree(root: Optional[TreeNode]) -> TreeMetrics:
    """Compute all metrics for *root* in one call."""

    return TreeMetrics(
        max_depth=max_depth(root),
        is_balanced=is_balanced(root),
        node_count=count_nodes(root),
    )


__all__ = [
    "TreeMetrics",
    "analyze_tree",
    "count_nodes",
    "is_balanced",
    "max_depth",
]
