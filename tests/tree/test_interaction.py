"""Tests for node dragging."""

import pytest

from itombs.tree.canvas import Canvas
from itombs.tree.interaction import (
    DragState,
    TreeInteraction,
    apply_drag,
    begin_drag,
    end_drag,
    hit_test,
    update_drag,
)
from itombs.tree.layout import layout
from itombs.tree.models import ROOT_ID

CANVAS = Canvas(800, 600)


@pytest.fixture
def tree(make_record):
    return layout("Jane Doe", [make_record("Bob", "parent"), make_record("Tom", "sibling")], 800, 600)


@pytest.fixture
def state(tree):
    return DragState.from_layout(tree)


class TestReducers:
    """Tests for the pure drag reducers."""

    def test_initial_state_idle(self, state, tree):
        assert state.is_idle
        assert state.positions[ROOT_ID] == (400, 300)
        assert len(state.positions) == len(tree.nodes)

    def test_root_drag_clamps_to_corner(self, state):
        """Dragging the root off the canvas clamps by the root radius."""
        state = begin_drag(state, ROOT_ID, (400, 300))
        state = update_drag(state, (-50, -50), CANVAS)
        assert state.is_dragging
        assert state.positions[ROOT_ID] == (35, 35)

    def test_root_clamp_compact(self, state):
        state = begin_drag(state, ROOT_ID, (400, 300))
        state = update_drag(state, (-50, -50), Canvas(800, 600, compact=True))
        assert state.positions[ROOT_ID] == (30, 30)

    def test_relative_clamp(self, state, tree):
        """Relatives clamp with the smaller radius."""
        bob = tree.nodes[1]
        state = begin_drag(state, bob.id, (bob.x, bob.y))
        state = update_drag(state, (1000, 1000), CANVAS)
        assert state.positions[bob.id] == (770, 570)

    def test_drag_keeps_grab_offset(self, state):
        """The node moves with the pointer, keeping the grab offset."""
        state = begin_drag(state, ROOT_ID, (410, 290))
        state = update_drag(state, (510, 390), CANVAS)
        assert state.positions[ROOT_ID] == (500, 400)

    def test_small_move_is_not_a_drag(self, state):
        """Movement within the threshold leaves the node in place."""
        state = begin_drag(state, ROOT_ID, (400, 300))
        state = update_drag(state, (402, 301), CANVAS, threshold=5)
        assert not state.is_dragging
        assert state.positions[ROOT_ID] == (400, 300)

        state, clicked = end_drag(state)
        assert clicked == ROOT_ID
        assert state.is_idle

    def test_drag_suppresses_click(self, state):
        state = begin_drag(state, ROOT_ID, (400, 300))
        state = update_drag(state, (450, 300), CANVAS)
        state, clicked = end_drag(state)
        assert clicked is None
        assert state.is_idle
        assert state.positions[ROOT_ID] == (450, 300)

    def test_second_press_ignored(self, state, tree):
        """Only one node is dragged at a time."""
        bob = tree.nodes[1]
        state = begin_drag(state, ROOT_ID, (400, 300))
        assert begin_drag(state, bob.id, (bob.x, bob.y)) is state

    def test_update_when_idle(self, state):
        assert update_drag(state, (10, 10), CANVAS) is state

    def test_end_when_idle(self, state):
        new_state, clicked = end_drag(state)
        assert clicked is None
        assert new_state.positions == state.positions

    def test_unknown_node(self, state):
        assert begin_drag(state, "node-999", (0, 0)) is state
        assert apply_drag(state, "node-999", (0, 0)) is state

    def test_apply_drag_is_pure(self, state):
        """Reducers never mutate the previous state."""
        moved = apply_drag(state, ROOT_ID, (100, 100))
        assert moved.positions[ROOT_ID] == (100, 100)
        assert state.positions[ROOT_ID] == (400, 300)


class TestHitTest:
    """Tests for finding the node under the pointer."""

    def test_hits_root(self, state):
        assert hit_test(state, (420, 310)) == ROOT_ID

    def test_hits_relative(self, state, tree):
        tom = tree.nodes[2]
        assert hit_test(state, (tom.x + 5, tom.y - 5)) == tom.id

    def test_misses(self, state):
        assert hit_test(state, (5, 595)) is None


class TestTreeInteraction:
    """Tests for the mutable interaction wrapper."""

    def test_gesture(self, tree):
        interaction = TreeInteraction(tree, CANVAS, threshold=5)
        interaction.begin_drag(ROOT_ID, (400, 300))
        assert interaction.update_drag((420, 330))
        assert interaction.position(ROOT_ID) == (420, 330)
        assert interaction.end_drag() is None

    def test_reset_discards_drags(self, tree):
        """A new layout pass drops manual positions."""
        interaction = TreeInteraction(tree, CANVAS)
        interaction.begin_drag(ROOT_ID, (400, 300))
        interaction.update_drag((100, 100))
        interaction.end_drag()

        interaction.reset(tree, CANVAS)
        assert interaction.position(ROOT_ID) == (400, 300)

    def test_node_at(self, tree):
        interaction = TreeInteraction(tree, CANVAS)
        assert interaction.node_at((400, 300)) == ROOT_ID
