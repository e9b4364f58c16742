"""Canvas dimensions, node radii and bounds clamping."""

from dataclasses import dataclass
from typing import Optional

from itombs.config import CanvasSettings, settings

# Radii used to keep a node's circle inside the canvas.
ROOT_CLAMP_RADIUS = (35, 30)      # (full, compact)
RELATIVE_CLAMP_RADIUS = (30, 25)

# Radii the renderer draws with.
ROOT_DISPLAY_RADIUS = (45, 35)
RELATIVE_DISPLAY_RADIUS = (40, 30)


@dataclass(frozen=True)
class Canvas:
    """Drawing area for the tree."""
    width: float
    height: float
    compact: bool = False

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


def _pick(pair: tuple[int, int], compact: bool) -> int:
    return pair[1] if compact else pair[0]


def clamp_radius(is_root: bool, compact: bool) -> int:
    """Radius used for bounds clamping."""
    return _pick(ROOT_CLAMP_RADIUS if is_root else RELATIVE_CLAMP_RADIUS, compact)


def display_radius(is_root: bool, compact: bool) -> int:
    """Radius of the drawn node circle."""
    return _pick(ROOT_DISPLAY_RADIUS if is_root else RELATIVE_DISPLAY_RADIUS, compact)


def clamp(canvas: Canvas, x: float, y: float, radius: float) -> tuple[float, float]:
    """Clamp a point so a circle of ``radius`` around it stays on the canvas."""
    return (
        max(radius, min(canvas.width - radius, x)),
        max(radius, min(canvas.height - radius, y)),
    )


def canvas_for(
    container_width: float,
    viewport_width: float,
    config: Optional[CanvasSettings] = None,
) -> Canvas:
    """
    Size the canvas for the current window.

    Narrow viewports (below the mobile breakpoint) get compact mode, a
    width bounded by the viewport minus a margin, and a shorter canvas.
    """
    config = config or settings.canvas
    compact = viewport_width < config.mobile_breakpoint

    if compact:
        width = min(container_width, viewport_width - config.mobile_margin)
        height = config.mobile_height
    else:
        width = min(container_width, config.desktop_max_width)
        height = config.desktop_height

    return Canvas(width=max(width, 1), height=height, compact=compact)
