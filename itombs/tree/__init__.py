"""Tree package - layout, interaction and rendering of the family tree."""

from itombs.tree.models import GraphNode, GraphEdge, TreeLayout
from itombs.tree.canvas import Canvas, canvas_for
from itombs.tree.layout import layout
from itombs.tree.interaction import DragState, TreeInteraction
from itombs.tree.svg import render_svg

__all__ = [
    "GraphNode",
    "GraphEdge",
    "TreeLayout",
    "Canvas",
    "canvas_for",
    "layout",
    "DragState",
    "TreeInteraction",
    "render_svg",
]
