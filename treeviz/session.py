"""One visualizer session: the current tree, its metrics and its replay.

A session mirrors the controls of the interactive visualizer.  ``visualize``
replaces the tree and throws away whatever replay was running; selecting a
traversal computes the full visit order up front and hands it to the replay
controller, superseding any earlier replay.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Union

from .analysis import TreeMetrics, analyze_tree
from .config import VisualizerConfig
from .replay import ReplayController, ReplayState
from .traversal import TraversalOrder, traverse
from .tree_builder import (
    TreeNode,
    build_tree_from_level_order,
    compact_values,
    level_order_values,
    parse_level_order,
)

logger = logging.getLogger(__name__)


class VisualizerSession:
    def __init__(self, config: Optional[VisualizerConfig] = None) -> None:
        self.config = config or VisualizerConfig()
        self._root: Optional[TreeNode] = None
        self._metrics = analyze_tree(None)
        self._replay = ReplayController()

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    @property
    def metrics(self) -> TreeMetrics:
        return self._metrics

    @property
    def replay(self) -> ReplayState:
        return self._replay.state

    @property
    def highlighted(self) -> Optional[TreeNode]:
        return self._replay.current_highlight()

    @property
    def controls_enabled(self) -> bool:
        """Traversal triggers are disabled while a replay is running."""

        return not self._replay.is_running

    def visualize(
        self, values: Iterable[Optional[int]], *, compact: Optional[bool] = None
    ) -> TreeMetrics:
        """Build a new tree from level-order *values* and reset the replay.

        With *compact* (defaulting to ``config.compact_input``) ``None``
        entries are removed before construction instead of marking gaps.
        """

        use_compact = self.config.compact_input if compact is None else compact
        entries: list[Optional[int]] = list(values)
        if use_compact:
            entries = list(compact_values(entries))

        root = build_tree_from_level_order(entries)
        metrics = analyze_tree(root)
        self._replay.reset()
        self._root = root
        self._metrics = metrics
        logger.info(
            "Visualized tree with %s nodes (depth=%s, balanced=%s)",
            metrics.node_count,
            metrics.max_depth,
            metrics.is_balanced,
        )
        return metrics

    def visualize_text(self, text: str, *, compact: Optional[bool] = None) -> TreeMetrics:
        return self.visualize(parse_level_order(text), compact=compact)

    def select_traversal(
        self, order: Union[str, TraversalOrder]
    ) -> Optional[ReplayState]:
        """Start replaying *order*; returns ``None`` when no tree is loaded."""

        resolved = TraversalOrder.from_label(order)
        if self._root is None:
            logger.debug("Ignoring %s request without a tree", resolved.label)
            return None
        sequence = traverse(self._root, resolved)
        return self._replay.start(sequence, resolved)

    def tick(self) -> Optional[TreeNode]:
        return self._replay.advance()

    @property
    def controller(self) -> ReplayController:
        return self._replay

    def snapshot(self) -> dict[str, Any]:
        """Return a JSON-serialisable view of the session for renderers."""

        state = self._replay.state
        highlighted = state.highlighted
        return {
            "values": level_order_values(self._root),
            "metrics": self._metrics.to_dict(),
            "traversal": state.order.label if state.order is not None else None,
            "sequence": [node.value for node in state.sequence],
            "step": state.step,
            "status": state.status.value,
            "highlighted": highlighted.value if highlighted is not None else None,
        }


__all__ = ["VisualizerSession"]
