"""Star layout of a user's relatives around the root node.

Each relationship has a polar placement rule (angle measured clockwise from
the right in screen coordinates, and a distance from the center). Relatives
sharing a relationship are spread evenly over an arc centered on the rule's
angle so they never coincide.
"""

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional

from itombs.config import settings
from itombs.logger import get_logger
from itombs.models import Relationship, RelativeRecord
from itombs.tree.canvas import Canvas, clamp, clamp_radius
from itombs.tree.models import ROOT_ID, GraphEdge, GraphNode, TreeLayout, node_id_for

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlacementRule:
    """Polar placement for one relationship category."""
    angle: float
    distance: float
    compact_distance: float
    arc: float
    compact_arc: float

    def resolve(self, compact: bool) -> tuple[float, float]:
        """Return (distance, arc width) for the display mode."""
        if compact:
            return self.compact_distance, self.compact_arc
        return self.distance, self.arc


_NEAR_ARC = (40, 30)
_SIBLING_ARC = (80, 60)
_EXTENDED_ARC = (60, 40)


def _rule(angle, distance, compact_distance, arc) -> PlacementRule:
    return PlacementRule(angle, distance, compact_distance, arc[0], arc[1])


PLACEMENT_RULES: dict[str, PlacementRule] = {
    Relationship.SPOUSE.value: _rule(0, 200, 140, _NEAR_ARC),           # right
    Relationship.PARENT.value: _rule(-90, 200, 140, _NEAR_ARC),          # top
    Relationship.CHILD.value: _rule(90, 200, 140, _NEAR_ARC),            # bottom
    Relationship.SIBLING.value: _rule(180, 150, 140, _SIBLING_ARC),      # left
    Relationship.GRANDPARENT.value: _rule(-135, 250, 160, _EXTENDED_ARC),
    Relationship.GRANDCHILD.value: _rule(135, 250, 160, _EXTENDED_ARC),
    Relationship.AUNT.value: _rule(-45, 220, 150, _EXTENDED_ARC),
    Relationship.UNCLE.value: _rule(-45, 220, 150, _EXTENDED_ARC),
    Relationship.COUSIN.value: _rule(45, 220, 150, _EXTENDED_ARC),
    Relationship.NEPHEW.value: _rule(45, 220, 150, _EXTENDED_ARC),
    Relationship.NIECE.value: _rule(45, 220, 150, _EXTENDED_ARC),
}


def arc_offset(index: int, group_size: int, arc: float) -> float:
    """Angular offset (degrees) of member ``index`` in a group of ``group_size``."""
    if group_size <= 1:
        return 0.0
    return (index - (group_size - 1) / 2) * (arc / (group_size - 1))


def polar_to_canvas(canvas: Canvas, angle: float, distance: float) -> tuple[float, float]:
    """Convert an angle (degrees) and distance from the canvas center to x/y."""
    cx, cy = canvas.center
    radians = math.radians(angle)
    return cx + math.cos(radians) * distance, cy + math.sin(radians) * distance


def _find_self(relatives: Iterable[RelativeRecord]) -> Optional[RelativeRecord]:
    for record in relatives:
        if record.is_self:
            return record
    return None


def layout(
    root_name: Optional[str],
    relatives: list[RelativeRecord],
    width: float,
    height: float,
    compact: bool = False,
) -> TreeLayout:
    """
    Position the root and its relatives on a ``width`` x ``height`` canvas.

    Args:
        root_name: Display name for the root when no ``self`` record exists.
        relatives: Relative records for one owner, in store order.
        width: Canvas width, must be positive.
        height: Canvas height, must be positive.
        compact: Use the shorter distances and arcs of the mobile layout.

    Returns:
        TreeLayout whose first node is the root. Records with an
        unrecognized relationship, and any ``self`` record after the first,
        are listed in ``skipped``.
    """
    assert width > 0 and height > 0, f"invalid canvas {width}x{height}"

    canvas = Canvas(width=width, height=height, compact=compact)
    result = TreeLayout()

    self_record = _find_self(relatives)
    cx, cy = canvas.center
    result.nodes.append(GraphNode(
        id=ROOT_ID,
        name=self_record.name if self_record else (root_name or settings.root_placeholder_name),
        x=cx,
        y=cy,
        is_root=True,
        record=self_record,
    ))

    if not relatives:
        return result

    group_sizes: dict[str, int] = defaultdict(int)
    placed: list[tuple[RelativeRecord, str, int]] = []
    for record in relatives:
        if record is self_record:
            continue
        if record.is_self:
            logger.warning("Extra self record %s (%r); root is already %s",
                           record.id, record.name, self_record.id)
            result.skipped.append(record)
            continue
        key = record.relationship.lower()
        if key not in PLACEMENT_RULES:
            logger.warning("No layout rule for relationship %r (relative %s)",
                           record.relationship, record.id)
            result.skipped.append(record)
            continue
        placed.append((record, key, group_sizes[key]))
        group_sizes[key] += 1

    radius = clamp_radius(is_root=False, compact=compact)

    for record, key, index in placed:
        rule = PLACEMENT_RULES[key]
        distance, arc = rule.resolve(compact)
        angle = rule.angle + arc_offset(index, group_sizes[key], arc)

        x, y = clamp(canvas, *polar_to_canvas(canvas, angle, distance), radius)
        node = GraphNode(id=node_id_for(record), name=record.name, x=x, y=y, record=record)
        result.nodes.append(node)
        result.edges.append(GraphEdge(ROOT_ID, node.id, record.relationship))

    return result
