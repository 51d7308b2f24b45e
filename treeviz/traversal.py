"""Traversal strategies producing node references in visit order.

Each ``iter_*`` function returns a single-use iterator that yields the very
``TreeNode`` objects stored in the tree.  Depth-first orders keep an explicit
stack instead of recursing, so degenerate chains of any length are safe.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
import logging
from typing import Callable, Deque, Dict, Iterator, List, Optional, Tuple, Union

from .tree_builder import TreeNode

logger = logging.getLogger(__name__)


class UnknownTraversalError(ValueError):
    """Raised when a traversal label does not name a supported strategy."""


class TraversalOrder(str, Enum):
    """Supported strategies; values double as control-surface labels."""

    IN_ORDER = "In-order"
    PRE_ORDER = "Pre-order"
    POST_ORDER = "Post-order"
    LEVEL_ORDER = "Level-order"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: Union[str, "TraversalOrder"]) -> "TraversalOrder":
        """Resolve ``In-order``, ``in_order``, ``INORDER`` and similar spellings."""

        if isinstance(label, cls):
            return label
        key = _normalise_label(label)
        for member in cls:
            if key in (_normalise_label(member.value), _normalise_label(member.name)):
                return member
        raise UnknownTraversalError(
            f"Unsupported traversal {label!r}. Choose from {[m.value for m in cls]}"
        )


def _normalise_label(label: str) -> str:
    if not isinstance(label, str):
        raise UnknownTraversalError(f"Traversal label must be a string, got {label!r}")
    return "".join(ch for ch in label.lower() if ch.isalnum())


def iter_in_order(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield left subtree, node, right subtree."""

    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def iter_pre_order(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield node, left subtree, right subtree."""

    if root is None:
        return
    stack: List[TreeNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        # Right is pushed first so the left subtree is emitted first.
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def iter_post_order(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield left subtree, right subtree, node."""

    if root is None:
        return
    stack: List[Tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if children_done:
            yield node
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def iter_level_order(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield nodes breadth-first, left to right within each level."""

    if root is None:
        return
    queue: Deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


_STRATEGIES: Dict[TraversalOrder, Callable[[Optional[TreeNode]], Iterator[TreeNode]]] = {
    TraversalOrder.IN_ORDER: iter_in_order,
    TraversalOrder.PRE_ORDER: iter_pre_order,
    TraversalOrder.POST_ORDER: iter_post_order,
    TraversalOrder.LEVEL_ORDER: iter_level_order,
}


def iter_traversal(
    root: Optional[TreeNode], order: Union[str, TraversalOrder]
) -> Iterator[TreeNode]:
    """Return the lazy iterator implementing *order*."""

    return _STRATEGIES[TraversalOrder.from_label(order)](root)


def traverse(
    root: Optional[TreeNode], order: Union[str, TraversalOrder]
) -> Tuple[TreeNode, ...]:
    """Materialise the full visit sequence for *order*."""

    resolved = TraversalOrder.from_label(order)
    sequence = tuple(_STRATEGIES[resolved](root))
    logger.debug("%s traversal produced %s nodes", resolved.label, len(sequence))
    return sequence


def traversal_values(
    root: Optional[TreeNode], order: Union[str, TraversalOrder]
) -> List[int]:
    return [node.value for node in traverse(root, order)]


__all__ = [
    "TraversalOrder",
    "UnknownTraversalError",
    "iter_in_order",
    "iter_level_order",
    "iter_post_order",
    "iter_pre_order",
    "iter_traversal",
    "traversal_values",
    "traverse",
]
