"""
Timeouts and Delays Constants Module.

This module defines constant values for the delays used during start-up and
shutdown to avoid magic numbers.
"""

from typing import Final


class TimeoutConstants:
    """Defines all timeout values used across the application."""
    # Delay before showing the main window so the event loop is running (milliseconds)
    WINDOW_INIT_DELAY_MS: Final[int] = 0
    # Delay before auto-starting the overlay on launch (milliseconds)
    OVERLAY_AUTOSTART_DELAY_MS: Final[int] = 500
    # Interval at which the interpreter gets a chance to handle SIGINT (milliseconds)
    SIGNAL_POLL_INTERVAL_MS: Final[int] = 250
    # How long the tray balloon message stays visible (milliseconds)
    TRAY_MESSAGE_DURATION_MS: Final[int] = 4000

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate that all timeouts are non-negative."""
        for attr_name in dir(self):
            if attr_name.endswith("_MS"):
                value = getattr(self, attr_name)
                if not isinstance(value, (int, float)) or value < 0:
                    raise ValueError(f"{attr_name} must be a non-negative number.")


# Singleton instance for easy access
timeouts = TimeoutConstants()
