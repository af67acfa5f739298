"""
Unit tests for the InputHandler gesture state machine.
"""

import pytest

from tempoverlay.core.input_handler import (
    InputHandler, Moved, PointerEvent, PointerPhase, Tapped, WidgetPosition,
)


def down(x, y, t=0):
    return PointerEvent(PointerPhase.DOWN, x, y, t)


def move(x, y, t=0):
    return PointerEvent(PointerPhase.MOVE, x, y, t)


def up(x, y, t=0):
    return PointerEvent(PointerPhase.UP, x, y, t)


def cancel(t=0):
    return PointerEvent(PointerPhase.CANCEL, 0, 0, t)


class FakeWidget:
    """Holds the widget position and applies Moved actions like the overlay service does."""

    def __init__(self, position=WidgetPosition(30, 120), close_hit=False):
        self.position = position
        self.close_hit = close_hit
        self.hit_tests = []

    def hit_test(self, x, y):
        self.hit_tests.append((x, y))
        return self.close_hit


@pytest.fixture
def widget():
    return FakeWidget()


@pytest.fixture
def handler(widget):
    return InputHandler(position_provider=lambda: widget.position, close_hit_test=widget.hit_test)


def feed(handler, widget, events):
    actions = []
    for event in events:
        action = handler.on_pointer_event(event)
        if action is not None:
            actions.append(action)
            if isinstance(action, Moved):
                widget.position = action.position
    return actions


def test_press_and_release_without_movement_is_a_tap(handler, widget):
    actions = feed(handler, widget, [down(50, 50, 0), up(50, 50, 100)])
    assert actions == [Tapped(False)]
    assert handler.session is None


def test_small_moves_emit_moved_and_still_tap(handler, widget):
    """Press at (100,100), move to (103,101), release after 120 ms."""
    actions = feed(handler, widget, [down(100, 100, 0), move(103, 101, 60), up(103, 101, 120)])
    assert actions == [Moved(WidgetPosition(33, 121)), Tapped(False)]


@pytest.mark.parametrize("path", [
    [(101, 100), (102, 101), (104, 104)],
    [(96, 100), (100, 96), (98, 102)],
    [(100, 108)],
])
def test_displacement_within_threshold_emits_exactly_one_tap(handler, widget, path):
    events = [down(100, 100, 0)] + [move(x, y, 10 * i) for i, (x, y) in enumerate(path, 1)] + [up(*path[-1], 200)]
    actions = feed(handler, widget, events)
    taps = [a for a in actions if isinstance(a, Tapped)]
    moves = [a for a in actions if isinstance(a, Moved)]
    assert taps == [Tapped(False)]
    assert len(moves) == len(path)


def test_crossing_threshold_makes_it_a_drag(handler, widget):
    actions = feed(handler, widget, [down(100, 100, 0), move(105, 104, 20), up(105, 104, 50)])
    assert actions == [Moved(WidgetPosition(35, 124))]
    assert widget.hit_tests == []


def test_drag_stays_a_drag_after_returning_to_start(handler, widget):
    actions = feed(handler, widget, [
        down(100, 100, 0), move(120, 100, 20), move(100, 100, 40), up(100, 100, 60),
    ])
    assert not any(isinstance(a, Tapped) for a in actions)
    assert widget.position == WidgetPosition(30, 120)


def test_moved_positions_are_relative_to_press_position(handler, widget):
    actions = feed(handler, widget, [down(10, 10, 0), move(40, 25, 10), move(70, 5, 20)])
    assert actions == [Moved(WidgetPosition(60, 135)), Moved(WidgetPosition(90, 115))]


def test_fractional_deltas_truncate_toward_zero(handler, widget):
    actions = feed(handler, widget, [down(100.0, 100.0, 0), move(112.7, 87.4, 10)])
    # dx = 12.7 -> 12, dy = -12.6 -> -12
    assert actions == [Moved(WidgetPosition(42, 108))]


def test_long_press_is_not_a_tap(handler, widget):
    actions = feed(handler, widget, [down(100, 100, 0), up(100, 100, 250)])
    assert actions == []


def test_release_just_under_timeout_is_a_tap(handler, widget):
    actions = feed(handler, widget, [down(100, 100, 0), up(100, 100, 249)])
    assert actions == [Tapped(False)]


def test_tap_consults_hit_test_with_release_coordinates(widget):
    widget.close_hit = True
    handler = InputHandler(lambda: widget.position, widget.hit_test)
    actions = feed(handler, widget, [down(100, 100, 0), up(102, 101, 80)])
    assert actions == [Tapped(True)]
    assert widget.hit_tests == [(102, 101)]


def test_cancel_discards_the_session(handler, widget):
    actions = feed(handler, widget, [down(100, 100, 0), cancel(10), up(100, 100, 20)])
    assert actions == []
    assert handler.session is None


def test_press_after_cancel_starts_cleanly(handler, widget):
    feed(handler, widget, [down(100, 100, 0), move(150, 150, 10), cancel(20)])
    actions = feed(handler, widget, [down(10, 10, 100), up(10, 10, 150)])
    assert actions == [Tapped(False)]


def test_events_without_press_are_ignored(handler, widget):
    actions = feed(handler, widget, [move(10, 10), up(10, 10), cancel()])
    assert actions == []
    assert widget.position == WidgetPosition(30, 120)


def test_position_is_read_on_press(handler, widget):
    widget.position = WidgetPosition(200, 300)
    actions = feed(handler, widget, [down(0, 0, 0), move(10, 0, 10)])
    assert actions == [Moved(WidgetPosition(210, 300))]


def test_reset_drops_gesture_in_progress(handler, widget):
    handler.on_pointer_event(down(0, 0, 0))
    handler.reset()
    assert handler.on_pointer_event(up(0, 0, 50)) is None
