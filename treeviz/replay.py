"""Step-indexed replay of a traversal for highlight animation.

The controller is a two-state machine.  ``start`` installs a fresh
``ReplayState`` (step ``-1``) and marks it running; every ``advance`` call is
one tick of the animation clock and moves the highlight forward by exactly one
node.  Reaching the last node switches the replay back to idle, after which
ticks are ignored until a new replay is started.

States are immutable snapshots.  Starting a new replay swaps the active state
out, so callbacks that still hold the previous one can never move it.
The controller does not own a timer; ``run_replay`` is a blocking helper for
callers that have no event loop of their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import logging
import time
from typing import Callable, Optional, Sequence, Tuple

from .traversal import TraversalOrder
from .tree_builder import TreeNode

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 1.0


class ReplayStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class ReplayState:
    """Snapshot of one replay: the visit sequence and how far it has played."""

    sequence: Tuple[TreeNode, ...] = field(default_factory=tuple)
    order: Optional[TraversalOrder] = None
    step: int = -1
    status: ReplayStatus = ReplayStatus.IDLE

    def __post_init__(self) -> None:
        if not -1 <= self.step <= len(self.sequence) - 1:
            raise ValueError(
                f"Replay step {self.step} outside [-1, {len(self.sequence) - 1}]"
            )

    @property
    def highlighted(self) -> Optional[TreeNode]:
        if self.step < 0:
            return None
        return self.sequence[self.step]

    @property
    def visited(self) -> Tuple[TreeNode, ...]:
        return self.sequence[: self.step + 1]

    @property
    def is_running(self) -> bool:
        return self.status is ReplayStatus.RUNNING

    @property
    def is_finished(self) -> bool:
        return self.step == len(self.sequence) - 1


class ReplayController:
    """Drives the highlight through one traversal result at a time."""

    def __init__(self) -> None:
        self._state = ReplayState()

    @property
    def state(self) -> ReplayState:
        return self._state

    @property
    def step_index(self) -> int:
        return self._state.step

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    def start(
        self,
        sequence: Sequence[TreeNode],
        order: Optional[TraversalOrder] = None,
    ) -> ReplayState:
        """Begin replaying *sequence*, superseding any replay in progress."""

        if self._state.is_running:
            logger.debug(
                "Superseding running replay at step %s of %s",
                self._state.step,
                len(self._state.sequence),
            )
        nodes = tuple(sequence)
        status = ReplayStatus.RUNNING if nodes else ReplayStatus.IDLE
        self._state = ReplayState(sequence=nodes, order=order, step=-1, status=status)
        return self._state

    def advance(self) -> Optional[TreeNode]:
        """Apply one tick and return the node highlighted afterwards."""

        state = self._state
        if not state.is_running:
            return state.highlighted

        step = state.step + 1
        status = (
            ReplayStatus.IDLE if step == len(state.sequence) - 1 else ReplayStatus.RUNNING
        )
        self._state = replace(state, step=step, status=status)
        logger.debug("Replay step %s highlights value %s", step, state.sequence[step].value)
        return self._state.highlighted

    def current_highlight(self) -> Optional[TreeNode]:
        return self._state.highlighted

    def reset(self) -> None:
        """Discard the active replay."""

        self._state = ReplayState()


def run_replay(
    controller: ReplayController,
    on_step: Callable[[ReplayState], None],
    *,
    interval: float = DEFAULT_TICK_INTERVAL,
    sleep: Optional[Callable[[float], None]] = None,
) -> int:
    """Tick *controller* at a fixed cadence until its replay goes idle.

    ``on_step`` receives the state after every tick and *sleep* defaults to
    :func:`time.sleep`.  Returns the number of ticks performed.
    """

    if interval < 0:
        raise ValueError("interval must be non-negative")
    pause = sleep if sleep is not None else time.sleep
    ticks = 0
    while controller.is_running:
        pause(interval)
        controller.advance()
        ticks += 1
        on_step(controller.state)
    return ticks


__all__ = [
    "DEFAULT_TICK_INTERVAL",
    "ReplayController",
    "ReplayState",
    "ReplayStatus",
    "run_replay",
]
