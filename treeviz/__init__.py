"""Binary tree construction, metrics, traversals and step-by-step replay."""

from .analysis import TreeMetrics, analyze_tree, count_nodes, is_balanced, max_depth
from .config import ConfigError, VisualizerConfig, load_config
from .layout import (
    VisualizationPayload,
    build_networkx_graph,
    compute_edges,
    compute_layout,
    prepare_visualization,
    view_box,
)
from .render import render_traversal, render_tree
from .replay import ReplayController, ReplayState, ReplayStatus, run_replay
from .session import VisualizerSession
from .traversal import (
    TraversalOrder,
    UnknownTraversalError,
    iter_in_order,
    iter_level_order,
    iter_post_order,
    iter_pre_order,
    iter_traversal,
    traversal_values,
    traverse,
)
from .tree_builder import (
    TreeNode,
    build_tree_from_level_order,
    compact_values,
    level_order_values,
    parse_level_order,
)

__all__ = [
    "ConfigError",
    "ReplayController",
    "ReplayState",
    "ReplayStatus",
    "TraversalOrder",
    "TreeMetrics",
    "TreeNode",
    "UnknownTraversalError",
    "VisualizationPayload",
    "VisualizerConfig",
    "VisualizerSession",
    "analyze_tree",
    "build_networkx_graph",
    "build_tree_from_level_order",
    "compact_values",
    "compute_edges",
    "compute_layout",
    "count_nodes",
    "is_balanced",
    "iter_in_order",
    "iter_level_order",
    "iter_post_order",
    "iter_pre_order",
    "iter_traversal",
    "level_order_values",
    "load_config",
    "max_depth",
    "parse_level_order",
    "prepare_visualization",
    "render_traversal",
    "render_tree",
    "run_replay",
    "traversal_values",
    "traverse",
    "view_box",
]
