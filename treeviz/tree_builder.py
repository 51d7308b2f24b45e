"""Binary tree construction from level-order encodings.

The visualizer accepts trees as a flat, comma separated list of integers in
breadth-first order where ``null`` (or an empty token) marks a missing child.
This module owns both halves of that hand-off:

* ``parse_level_order`` – turns raw user text into ``Optional[int]`` entries,
  treating unparseable tokens as absent.
* ``build_tree_from_level_order`` – links the entries into ``TreeNode``
  instances using the classic queue based reconstruction.

``TreeNode`` compares by identity.  Duplicate payloads are legal and a
renderer must be able to highlight the exact node a traversal produced.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
from typing import Deque, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

NULL_TOKEN = "null"


@dataclass(slots=True, eq=False)
class TreeNode:
    """Node representation used for binary tree algorithms."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("TreeNode value must be an integer")

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _checked(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("Level-order values must be integers or None")
    return value


def _next_slot(iterator: Iterator[Optional[int]]) -> tuple[bool, Optional[int]]:
    try:
        return True, next(iterator)
    except StopIteration:
        return False, None


def build_tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Construct a binary tree from a level-order sequence.

    Every entry after the root fills one child slot of the parent at the head
    of the queue, left slot first.  ``None`` leaves the slot empty but still
    consumes its position so the remaining entries stay aligned with the
    implicit layout.  Construction stops as soon as the input runs out; nodes
    still queued at that point keep both children absent.

    Returns ``None`` for an empty sequence or a ``None`` root entry.
    """

    iterator = iter(values)
    present, first = _next_slot(iterator)
    if not present or first is None:
        return None

    root = TreeNode(_checked(first))
    queue: Deque[TreeNode] = deque([root])

    while queue:
        node = queue.popleft()

        present, left_value = _next_slot(iterator)
        if not present:
            break
        if left_value is not None:
            node.left = TreeNode(_checked(left_value))
            queue.append(node.left)

        present, right_value = _next_slot(iterator)
        if not present:
            break
        if right_value is not None:
            node.right = TreeNode(_checked(right_value))
            queue.append(node.right)

    return root


def parse_level_order(text: str) -> List[Optional[int]]:
    """Split comma separated *text* into level-order entries.

    Empty tokens and ``null`` become ``None``.  Tokens that are not integers
    are treated the same way and reported through the module logger.
    """

    if not text.strip():
        return []

    values: List[Optional[int]] = []
    for position, raw_token in enumerate(text.split(",")):
        token = raw_token.strip()
        if not token or token.lower() == NULL_TOKEN:
            values.append(None)
            continue
        try:
            values.append(int(token, 10))
        except ValueError:
            logger.warning(
                "Ignoring unparseable token %r at position %s", token, position
            )
            values.append(None)
    return values


def compact_values(values: Iterable[Optional[int]]) -> List[int]:
    """Drop ``None`` entries, packing the remaining values left to right."""

    return [value for value in values if value is not None]


def level_order_values(root: Optional[TreeNode]) -> List[Optional[int]]:
    """Return the tree's level-order encoding including ``None`` sentinels."""

    if root is None:
        return []
    result: List[Optional[int]] = []
    queue: Deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.value)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


__all__ = [
    "NULL_TOKEN",
    "TreeNode",
    "build_tree_from_level_order",
    "compact_values",
    "level_order_values",
    "parse_level_order",
]
