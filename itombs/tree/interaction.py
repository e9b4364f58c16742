"""Drag interaction for tree nodes.

Node positions live in an explicit map keyed by node id. Every gesture step
is a pure reducer returning a new ``DragState``; ``TreeInteraction`` wraps
the reducers for the page that owns the canvas.

A press on a node only becomes a drag once the pointer travels past the
drag threshold. A gesture that never crosses it is reported as a click.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Optional

from itombs.config import settings
from itombs.logger import get_logger
from itombs.tree.canvas import Canvas, clamp, clamp_radius, display_radius
from itombs.tree.models import ROOT_ID, TreeLayout

logger = get_logger(__name__)

Point = tuple[float, float]


@dataclass(frozen=True)
class DragState:
    """Positions of all nodes plus the gesture in progress, if any."""
    positions: dict[str, Point] = field(default_factory=dict)
    order: tuple[str, ...] = ()
    active: Optional[str] = None
    offset: Point = (0.0, 0.0)
    origin: Point = (0.0, 0.0)
    moved: bool = False

    @property
    def is_dragging(self) -> bool:
        return self.active is not None and self.moved

    @property
    def is_idle(self) -> bool:
        return self.active is None

    @classmethod
    def from_layout(cls, tree: TreeLayout) -> "DragState":
        """Initial state from a fresh layout pass; earlier drags are dropped."""
        return cls(
            positions={node.id: (node.x, node.y) for node in tree.nodes},
            order=tuple(node.id for node in tree.nodes),
        )


def apply_drag(state: DragState, node_id: str, position: Point) -> DragState:
    """Return a new state with ``node_id`` moved to ``position``."""
    if node_id not in state.positions:
        return state
    positions = dict(state.positions)
    positions[node_id] = position
    return replace(state, positions=positions)


def begin_drag(state: DragState, node_id: str, pointer: Point) -> DragState:
    """Press on a node. Ignored while another gesture is active."""
    if not state.is_idle:
        logger.debug("Ignoring press on %s while %s is active", node_id, state.active)
        return state
    if node_id not in state.positions:
        return state

    x, y = state.positions[node_id]
    return replace(
        state,
        active=node_id,
        offset=(pointer[0] - x, pointer[1] - y),
        origin=pointer,
        moved=False,
    )


def update_drag(
    state: DragState,
    pointer: Point,
    canvas: Canvas,
    threshold: Optional[float] = None,
) -> DragState:
    """Move the active node to ``pointer - offset``, clamped to the canvas."""
    if state.is_idle:
        return state

    threshold = settings.canvas.drag_threshold if threshold is None else threshold
    moved = state.moved or math.dist(pointer, state.origin) > threshold
    if not moved:
        return state

    radius = clamp_radius(is_root=state.active == ROOT_ID, compact=canvas.compact)
    position = clamp(canvas, pointer[0] - state.offset[0], pointer[1] - state.offset[1], radius)
    return replace(apply_drag(state, state.active, position), moved=True)


def end_drag(state: DragState) -> tuple[DragState, Optional[str]]:
    """
    Release the pointer.

    Returns:
        The idle state and the id of the clicked node, or None when the
        gesture was a drag (or nothing was pressed).
    """
    clicked = state.active if state.active is not None and not state.moved else None
    return replace(state, active=None, offset=(0.0, 0.0), moved=False), clicked


def hit_test(state: DragState, point: Point, compact: bool = False) -> Optional[str]:
    """Return the topmost node whose drawn circle contains ``point``."""
    for node_id in reversed(state.order):
        position = state.positions.get(node_id)
        if position is None:
            continue
        radius = display_radius(is_root=node_id == ROOT_ID, compact=compact)
        if math.dist(point, position) <= radius:
            return node_id
    return None


class TreeInteraction:
    """Mutable holder for the drag state of one canvas."""

    def __init__(self, tree: TreeLayout, canvas: Canvas, threshold: Optional[float] = None):
        self.canvas = canvas
        self.threshold = threshold
        self.state = DragState.from_layout(tree)

    def reset(self, tree: TreeLayout, canvas: Canvas) -> None:
        """Start over from a new layout (data refresh or resize)."""
        self.canvas = canvas
        self.state = DragState.from_layout(tree)

    def position(self, node_id: str) -> Optional[Point]:
        return self.state.positions.get(node_id)

    def node_at(self, point: Point) -> Optional[str]:
        return hit_test(self.state, point, self.canvas.compact)

    def begin_drag(self, node_id: str, pointer: Point) -> None:
        self.state = begin_drag(self.state, node_id, pointer)

    def update_drag(self, pointer: Point) -> bool:
        """Returns True when a node moved."""
        before = self.state
        self.state = update_drag(self.state, pointer, self.canvas, self.threshold)
        return self.state is not before

    def end_drag(self) -> Optional[str]:
        self.state, clicked = end_drag(self.state)
        return clicked
