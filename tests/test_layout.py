from __future__ import annotations

import pytest

from treeviz.config import VisualizerConfig
from treeviz.layout import compute_edges, compute_layout, view_box
from treeviz.tree_builder import build_tree_from_level_order


def test_compute_layout_uses_canvas_geometry() -> None:
    root = build_tree_from_level_order([1, 2, 3, 4])
    assert root is not None and root.left is not None

    positions = compute_layout(root)

    assert positions[root] == (300.0, 40.0)
    assert positions[root.left] == (150.0, 100.0)
    assert positions[root.right] == (450.0, 100.0)
    assert positions[root.left.left] == (75.0, 160.0)


def test_compute_layout_respects_config() -> None:
    config = VisualizerConfig(canvas_width=200, root_y=10, vertical_spacing=20)
    root = build_tree_from_level_order([1, 2, 3])
    assert root is not None

    positions = compute_layout(root, config)

    assert positions[root] == (100.0, 10.0)
    assert positions[root.left] == (50.0, 30.0)
    assert positions[root.right] == (150.0, 30.0)


def test_duplicate_values_get_distinct_positions() -> None:
    root = build_tree_from_level_order([1, 1, 1])

    positions = compute_layout(root)

    assert len(positions) == 3


def test_layout_of_empty_tree() -> None:
    assert compute_layout(None) == {}
    assert view_box(None) == (0.0, 0.0, 600.0, 0)


def test_view_box_height_scales_with_depth() -> None:
    root = build_tree_from_level_order([1, 2, None, 3])
    assert view_box(root) == (0.0, 0.0, 600.0, 240.0)


def test_prepare_visualization_builds_networkx_payload() -> None:
    pytest.importorskip("networkx")
    from treeviz.layout import prepare_visualization

    root = build_tree_from_level_order([5, 3, 8])
    assert root is not None

    payload = prepare_visualization(root, highlighted=root.right, visited=[root.left])

    assert payload.graph.number_of_nodes() == 3
    assert payload.graph.has_edge(root, root.left)
    assert payload.graph.edges[root, root.right]["side"] == "right"
    assert payload.graph.nodes[root.left]["value"] == 3
    assert payload.labels[root] == "5"
    assert payload.depth == 2
    assert payload.highlighted is root.right
    assert payload.visited == (root.left,)


def test_build_networkx_graph_for_empty_tree() -> None:
    pytest.importorskip("networkx")
    from treeviz.layout import build_networkx_graph

    assert build_networkx_graph(None).number_of_nodes() == 0


def test_child_spread_of_one_half_matches_edge_to_edge_geometry() -> None:
    root = build_tree_from_level_order([1, 2, 3, 4])
    assert root is not None and root.left is not None

    positions = compute_layout(root, VisualizerConfig(child_spread=0.5))

    assert positions[root.left] == (0.0, 100.0)
    assert positions[root.right] == (600.0, 100.0)
    assert positions[root.left.left] == (-150.0, 160.0)


def test_compute_edges_stop_at_node_circles() -> None:
    root = build_tree_from_level_order([1, 2, 3])
    assert root is not None
    config = VisualizerConfig(node_radius=10)

    edges = compute_edges(compute_layout(root, config), config)

    assert edges == {
        (root, root.left): (300.0, 50.0, 150.0, 90.0),
        (root, root.right): (300.0, 50.0, 450.0, 90.0),
    }


def test_prepare_visualization_carries_radius_and_edges() -> None:
    pytest.importorskip("networkx")
    from treeviz.layout import prepare_visualization

    root = build_tree_from_level_order([1, 2])
    assert root is not None

    payload = prepare_visualization(root, VisualizerConfig(node_radius=15))

    assert payload.node_radius == 15
    assert payload.edges[(root, root.left)] == (300.0, 55.0, 150.0, 85.0)
