"""
Input Handler for TempOverlay.

This module turns raw pointer events delivered to the overlay's root widget
into overlay actions. It handles:
1. Dragging (the widget follows the pointer from the first move).
2. Tap classification (short press without dragging).
3. Routing a tap to the close control or the collapse toggle via a hit-test.

The state machine is toolkit-agnostic: the Qt widget translates QMouseEvents
into `PointerEvent`s, so the gesture logic can be driven directly in tests.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from tempoverlay import constants


@dataclass(frozen=True)
class WidgetPosition:
    """Top-left screen offset of the overlay, in screen pixels."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "WidgetPosition":
        return WidgetPosition(self.x + dx, self.y + dy)

    @classmethod
    def default(cls) -> "WidgetPosition":
        return cls(*constants.overlay.DEFAULT_POSITION)


class PointerPhase(enum.Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in global screen coordinates with a monotonic timestamp in ms."""
    phase: PointerPhase
    x: float
    y: float
    timestamp_ms: float


@dataclass
class GestureSession:
    """State captured on press; lives until release or cancel."""
    start_position: WidgetPosition
    start_x: float
    start_y: float
    press_timestamp_ms: float
    has_moved: bool = False


@dataclass(frozen=True)
class Moved:
    position: WidgetPosition


@dataclass(frozen=True)
class Tapped:
    hit_close_control: bool


Action = Union[Moved, Tapped]


class InputHandler:
    """
    Gesture state machine for the overlay widget.

    All events for the widget arrive here, never at its child elements; the
    close control is resolved by geometric hit-test on release so that a drag
    starting over the close glyph is still a drag.

    Args:
        position_provider: Returns the widget's current position; read on press.
        close_hit_test: Called with the release coordinate of a tap; returns
            True when it falls inside the close control.
    """

    def __init__(self,
                 position_provider: Callable[[], WidgetPosition],
                 close_hit_test: Callable[[float, float], bool]) -> None:
        self.position_provider = position_provider
        self.close_hit_test = close_hit_test
        self.logger = logging.getLogger("TempOverlay.Core.InputHandler")

        self._session: Optional[GestureSession] = None

    @property
    def session(self) -> Optional[GestureSession]:
        return self._session

    def on_pointer_event(self, event: PointerEvent) -> Optional[Action]:
        """Feeds one event to the state machine. Never raises for out-of-order events."""
        if event.phase is PointerPhase.DOWN:
            return self._handle_down(event)
        if event.phase is PointerPhase.MOVE:
            return self._handle_move(event)
        if event.phase is PointerPhase.UP:
            return self._handle_up(event)
        if event.phase is PointerPhase.CANCEL:
            self._handle_cancel()
        return None

    def reset(self) -> None:
        """Drops any in-progress gesture."""
        self._session = None

    def _handle_down(self, event: PointerEvent) -> None:
        if self._session is not None:
            self.logger.debug("Press received with a gesture in progress; starting over.")
        self._session = GestureSession(
            start_position=self.position_provider(),
            start_x=event.x,
            start_y=event.y,
            press_timestamp_ms=event.timestamp_ms,
        )
        return None

    def _handle_move(self, event: PointerEvent) -> Optional[Moved]:
        session = self._session
        if session is None:
            return None

        # int() truncates toward zero
        dx = int(event.x - session.start_x)
        dy = int(event.y - session.start_y)
        if not session.has_moved and abs(dx) + abs(dy) > constants.gesture.DRAG_THRESHOLD_PX:
            session.has_moved = True
            self.logger.debug("Drag threshold crossed (dx=%d, dy=%d).", dx, dy)

        return Moved(session.start_position.offset(dx, dy))

    def _handle_up(self, event: PointerEvent) -> Optional[Tapped]:
        session = self._session
        if session is None:
            return None
        self._session = None

        elapsed_ms = event.timestamp_ms - session.press_timestamp_ms
        if session.has_moved or elapsed_ms >= constants.gesture.TAP_TIMEOUT_MS:
            self.logger.debug("Release ended a drag or long press (moved=%s, elapsed=%.0fms).",
                              session.has_moved, elapsed_ms)
            return None

        hit_close = bool(self.close_hit_test(event.x, event.y))
        self.logger.debug("Tap detected (close=%s, elapsed=%.0fms).", hit_close, elapsed_ms)
        return Tapped(hit_close)

    def _handle_cancel(self) -> None:
        if self._session is not None:
            self.logger.debug("Gesture cancelled by the host.")
        self._session = None
