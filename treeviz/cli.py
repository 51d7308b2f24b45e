"""Terminal front-end for the tree visualizer.

Example::

    python -m treeviz "1,2,3,null,4" --traversal in-order --interval 0.5
    python -m treeviz --demo

Text output redraws the tree after every replay tick with the current node
marked ``*value*``.  JSON output skips the animation and prints one snapshot
per requested traversal.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging
import sys
from typing import Any, Callable, Sequence

from .config import ConfigError, load_config
from .render import render_traversal, render_tree
from .replay import ReplayState, run_replay
from .session import VisualizerSession
from .traversal import TraversalOrder, UnknownTraversalError, traversal_values

logger = logging.getLogger(__name__)


def _traversal_order(value: str) -> TraversalOrder:
    try:
        return TraversalOrder.from_label(value)
    except UnknownTraversalError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _non_negative_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Interval must be a number") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("Interval must be non-negative")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeviz",
        description="Build a binary tree from level-order values and replay its traversals.",
    )
    parser.add_argument(
        "values",
        nargs="?",
        help="Comma separated level-order values, e.g. '1,2,3,null,4'.",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Print metrics and every traversal order for the built-in sample trees.",
    )
    parser.add_argument(
        "--traversal",
        "-t",
        action="append",
        type=_traversal_order,
        default=[],
        help="Traversal to replay (In-order, Pre-order, Post-order, Level-order). Repeatable.",
    )
    parser.add_argument("--config", help="Optional JSON or YAML settings file.")
    parser.add_argument(
        "--interval",
        type=_non_negative_float,
        help="Seconds between replay steps; overrides the configured tick_interval.",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Drop null entries before building instead of treating them as gaps.",
    )
    parser.add_argument(
        "--output-format",
        choices=("text", "json"),
        default="text",
        help="Animate in the terminal or print JSON snapshots.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Configure logging verbosity for troubleshooting.",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING))


def _print_summary(session: VisualizerSession) -> None:
    metrics = session.metrics
    print(f"Maximum depth: {metrics.max_depth}")
    print(f"Is balanced: {'Yes' if metrics.is_balanced else 'No'}")
    print(f"Node count: {metrics.node_count}")
    print(render_tree(session.root))


DEMO_TREES = (
    ("Balanced", "1,2,3,4,5,6,7"),
    ("Skewed", "1,2,null,3,null,4"),
)


def _print_demo(session: VisualizerSession) -> None:
    for name, text in DEMO_TREES:
        session.visualize_text(text, compact=False)
        print(f"{name} tree: {text}")
        _print_summary(session)
        for order in TraversalOrder:
            values = " ".join(str(value) for value in traversal_values(session.root, order))
            print(f"{order.label}: {values}")
        print()


def _text_step_printer(session: VisualizerSession) -> Callable[[ReplayState], None]:
    def _on_step(state: ReplayState) -> None:
        print(f"Step {state.step + 1}/{len(state.sequence)}")
        print(render_tree(session.root, state.highlighted))
        print(render_traversal(state.sequence, state.step))

    return _on_step


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.values is None and not args.demo:
        parser.error("provide level-order values or --demo")
    _configure_logging(args.log_level)

    try:
        config = load_config(args.config)
    except (ConfigError, FileNotFoundError) as error:
        logger.error("%s", error)
        return 2
    if args.interval is not None:
        config = replace(config, tick_interval=args.interval)

    session = VisualizerSession(config)
    if args.demo:
        _print_demo(session)
        return 0

    session.visualize_text(args.values, compact=args.compact or None)

    if args.output_format == "json":
        report: dict[str, Any] = {"tree": session.snapshot(), "traversals": []}
        for order in args.traversal:
            if session.select_traversal(order) is None:
                continue
            run_replay(session.controller, lambda _state: None, interval=0.0)
            report["traversals"].append(session.snapshot())
        print(json.dumps(report))
        return 0

    _print_summary(session)
    for order in args.traversal:
        if session.select_traversal(order) is None:
            print(f"{order.label}: nothing to traverse")
            continue
        print()
        print(f"{order.label} traversal")
        run_replay(
            session.controller,
            _text_step_printer(session),
            interval=config.tick_interval,
        )
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
