"""
Constants for tap/drag discrimination on the overlay widget.
"""

from typing import Final

class GestureConstants:
    """Thresholds used by the gesture state machine."""
    # Manhattan distance (|dx| + |dy|) in pixels that turns a press into a drag.
    DRAG_THRESHOLD_PX: Final[int] = 8
    # A press released before this many milliseconds (and without dragging) is a tap.
    TAP_TIMEOUT_MS: Final[int] = 250

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.DRAG_THRESHOLD_PX < 0:
            raise ValueError("DRAG_THRESHOLD_PX must be non-negative")
        if self.TAP_TIMEOUT_MS <= 0:
            raise ValueError("TAP_TIMEOUT_MS must be positive")

# Singleton instance for easy access
gesture = GestureConstants()
