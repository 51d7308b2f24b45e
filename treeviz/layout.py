"""Canvas coordinates and NetworkX payloads for tree renderers.

Drawing is left to the caller.  This module only reproduces the geometry the
visualizer canvas uses so every renderer places nodes identically:

* the root sits at ``(canvas_width / 2, root_y)``;
* a node on level ``L`` spreads its children ``canvas_width * child_spread /
  2**L`` pixels to the left and right, ``vertical_spacing`` pixels lower (a
  ``child_spread`` of 0.5 puts the root's children on the canvas edges);
* edges run from the bottom of the parent circle to the top of the child
  circle, ``node_radius`` pixels from either centre;
* the view box is ``canvas_width`` wide and ``max_depth * level_height`` tall.

NetworkX is imported lazily so the core algorithms stay usable without it.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Deque,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeAlias,
)

from .analysis import max_depth
from .config import VisualizerConfig
from .tree_builder import TreeNode

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    import networkx as nx  # type: ignore[import-not-found,import-untyped]

    NxDiGraph: TypeAlias = nx.DiGraph
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxDiGraph: TypeAlias = Any

Position = Tuple[float, float]
Segment = Tuple[float, float, float, float]

__all__ = [
    "Position",
    "Segment",
    "VisualizationPayload",
    "build_networkx_graph",
    "compute_edges",
    "compute_layout",
    "prepare_visualization",
    "view_box",
]


@dataclass(frozen=True)
class VisualizationPayload:
    """Everything a renderer needs to draw one frame."""

    graph: NxDiGraph
    positions: Mapping[TreeNode, Position]
    labels: Mapping[TreeNode, str]
    view_box: Tuple[float, float, float, float]
    depth: int
    node_radius: float
    edges: Mapping[Tuple[TreeNode, TreeNode], Segment]
    highlighted: Optional[TreeNode] = None
    visited: Sequence[TreeNode] = ()


def compute_layout(
    root: Optional[TreeNode], config: Optional[VisualizerConfig] = None
) -> Dict[TreeNode, Position]:
    """Return canvas coordinates for every node, keyed by node identity."""

    settings = config or VisualizerConfig()
    positions: Dict[TreeNode, Position] = {}
    if root is None:
        return positions

    queue: Deque[Tuple[TreeNode, float, float, int]] = deque(
        [(root, settings.canvas_width / 2, settings.root_y, 0)]
    )
    while queue:
        node, x, y, level = queue.popleft()
        positions[node] = (x, y)
        offset = settings.canvas_width * settings.child_spread / 2**level
        child_y = y + settings.vertical_spacing
        if node.left is not None:
            queue.append((node.left, x - offset, child_y, level + 1))
        if node.right is not None:
            queue.append((node.right, x + offset, child_y, level + 1))
    return positions


def compute_edges(
    positions: Mapping[TreeNode, Position],
    config: Optional[VisualizerConfig] = None,
) -> Dict[Tuple[TreeNode, TreeNode], Segment]:
    """Return ``(x1, y1, x2, y2)`` line segments for every parent -> child edge."""

    radius = (config or VisualizerConfig()).node_radius
    segments: Dict[Tuple[TreeNode, TreeNode], Segment] = {}
    for node, (x, y) in positions.items():
        for child in (node.left, node.right):
            if child is None:
                continue
            child_x, child_y = positions[child]
            segments[(node, child)] = (x, y + radius, child_x, child_y - radius)
    return segments


def view_box(
    root: Optional[TreeNode], config: Optional[VisualizerConfig] = None
) -> Tuple[float, float, float, float]:
    settings = config or VisualizerConfig()
    return (0.0, 0.0, settings.canvas_width, max_depth(root) * settings.level_height)


def _require_networkx() -> Any:
    try:
        import networkx as nx  # type: ignore[import-not-found]
    except ImportError as exc:  # pragma: no cover - exercised only when missing
        raise ModuleNotFoundError(
            "NetworkX is required for graph payloads. Install it via 'pip install networkx'."
        ) from exc
    return nx


def build_networkx_graph(root: Optional[TreeNode]) -> NxDiGraph:
    """Convert the tree into a ``DiGraph`` with parent -> child edges.

    Graph nodes are the ``TreeNode`` objects themselves; each carries its
    ``value`` and edges carry ``side`` (``"left"`` or ``"right"``).
    """

    nx = _require_networkx()
    graph = nx.DiGraph()
    if root is None:
        return graph

    pending: List[TreeNode] = [root]
    graph.add_node(root, value=root.value)
    while pending:
        node = pending.pop()
        for side, child in (("left", node.left), ("right", node.right)):
            if child is None:
                continue
            graph.add_node(child, value=child.value)
            graph.add_edge(node, child, side=side)
            pending.append(child)
    return graph


def prepare_visualization(
    root: Optional[TreeNode],
    config: Optional[VisualizerConfig] = None,
    *,
    highlighted: Optional[TreeNode] = None,
    visited: Sequence[TreeNode] = (),
) -> VisualizationPayload:
    """Bundle graph, coordinates and highlight state for one frame."""

    settings = config or VisualizerConfig()
    graph = build_networkx_graph(root)
    positions = compute_layout(root, settings)
    labels = {node: str(node.value) for node in positions}
    return VisualizationPayload(
        graph=graph,
        positions=positions,
        labels=labels,
        view_box=view_box(root, settings),
        depth=max_depth(root),
        node_radius=settings.node_radius,
        edges=compute_edges(positions, settings),
        highlighted=highlighted,
        visited=tuple(visited),
    )
