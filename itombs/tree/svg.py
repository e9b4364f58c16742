"""Render a tree layout to SVG markup."""

from html import escape
from typing import Mapping, Optional

from itombs.tree.canvas import Canvas, display_radius
from itombs.tree.models import GraphEdge, GraphNode

EDGE_COLOR = "#A3A3A3"
LABEL_FILL = "#F8FAFC"
LABEL_STROKE = "#CBD5E1"
ROOT_COLOR = "#4F46E5"
RELATIVE_COLOR = "#10B981"


def truncate_name(name: str, compact: bool) -> str:
    """Shorten long names so labels don't overlap."""
    limit = 9 if compact else 12
    return name[:limit] + "..." if len(name) > limit else name


def _edge_svg(x1, y1, x2, y2, label: str, compact: bool) -> str:
    mid_x, mid_y = (x1 + x2) / 2, (y1 + y2) / 2
    width, height = (60, 18) if compact else (80, 24)
    font = 10 if compact else 12
    return (
        f'<g class="edge">'
        f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
        f'stroke="{EDGE_COLOR}" stroke-width="2"/>'
        f'<rect x="{mid_x - width / 2:.1f}" y="{mid_y - height / 2:.1f}" '
        f'width="{width}" height="{height}" rx="6" ry="6" '
        f'fill="{LABEL_FILL}" stroke="{LABEL_STROKE}"/>'
        f'<text x="{mid_x:.1f}" y="{mid_y + (3 if compact else 5):.1f}" '
        f'text-anchor="middle" font-size="{font}" font-weight="600" fill="#374151">'
        f'{escape(label.upper())}</text>'
        f'</g>'
    )


def _node_svg(node: GraphNode, x: float, y: float, compact: bool) -> str:
    radius = display_radius(node.is_root, compact)
    fill = ROOT_COLOR if node.is_root else RELATIVE_COLOR
    cursor = "pointer" if node.clickable else "default"
    parts = [
        f'<g class="node" data-node-id="{escape(node.id)}" style="cursor: {cursor}">',
        f'<circle cx="{x:.1f}" cy="{y:.1f}" r="{radius}" fill="{fill}" '
        f'stroke="#FFFFFF" stroke-width="4"/>',
        f'<text x="{x:.1f}" y="{y + radius + (16 if compact else 20):.1f}" '
        f'text-anchor="middle" font-size="{12 if compact else 14}" font-weight="700" '
        f'fill="#1F2937">{escape(truncate_name(node.name, compact))}</text>',
    ]
    if node.is_root:
        parts.append(
            f'<text x="{x:.1f}" y="{y + radius + (28 if compact else 38):.1f}" '
            f'text-anchor="middle" font-size="{10 if compact else 12}" '
            f'fill="#4338CA">(YOU)</text>'
        )
    parts.append("</g>")
    return "".join(parts)


def render_svg(
    nodes: list[GraphNode],
    edges: list[GraphEdge],
    canvas: Canvas,
    positions: Optional[Mapping[str, tuple[float, float]]] = None,
    standalone: bool = True,
) -> str:
    """
    Build SVG markup for the tree.

    Args:
        nodes: Layout nodes, root first.
        edges: Root-to-relative edges.
        canvas: Canvas the layout was computed for.
        positions: Current (possibly dragged) positions by node id. Falls
            back to the layout coordinates.
        standalone: Wrap the shapes in an ``<svg>`` element. NiceGUI's
            interactive image supplies its own.
    """
    positions = positions or {}

    def where(node: GraphNode) -> tuple[float, float]:
        return positions.get(node.id, (node.x, node.y))

    by_id = {node.id: node for node in nodes}
    body = []
    for edge in edges:
        source, target = by_id.get(edge.source), by_id.get(edge.target)
        if source is None or target is None:
            continue
        body.append(_edge_svg(*where(source), *where(target), edge.relationship, canvas.compact))

    for node in nodes:
        body.append(_node_svg(node, *where(node), canvas.compact))

    content = "".join(body)
    if not standalone:
        return content
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{canvas.width:g}" '
        f'height="{canvas.height:g}" viewBox="0 0 {canvas.width:g} {canvas.height:g}">'
        f'{content}</svg>'
    )
