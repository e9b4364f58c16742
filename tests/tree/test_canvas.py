"""Tests for canvas sizing and clamping."""

from itombs.config import CanvasSettings
from itombs.tree.canvas import Canvas, canvas_for, clamp, clamp_radius, display_radius


class TestCanvasFor:
    """Tests for responsive canvas sizing."""

    def test_desktop(self):
        canvas = canvas_for(1200, 1280)
        assert canvas == Canvas(1000, 600, compact=False)

    def test_desktop_narrow_container(self):
        assert canvas_for(900, 1024).width == 900

    def test_mobile(self):
        canvas = canvas_for(700, 700)
        assert canvas.compact
        assert canvas.width == 660
        assert canvas.height == 500

    def test_breakpoint_is_exclusive(self):
        assert not canvas_for(768, 768).compact
        assert canvas_for(767, 767).compact

    def test_custom_settings(self):
        config = CanvasSettings(mobile_breakpoint=1000, mobile_height=400)
        canvas = canvas_for(900, 900, config)
        assert canvas.compact
        assert canvas.height == 400


class TestClamp:
    """Tests for bounds clamping."""

    def test_inside_untouched(self):
        assert clamp(Canvas(800, 600), 100, 200, 30) == (100, 200)

    def test_clamps_both_axes(self):
        assert clamp(Canvas(800, 600), 900, -10, 30) == (770, 30)

    def test_radii(self):
        assert clamp_radius(True, False) == 35
        assert clamp_radius(True, True) == 30
        assert clamp_radius(False, False) == 30
        assert clamp_radius(False, True) == 25
        assert display_radius(True, False) == 45
        assert display_radius(False, True) == 30
