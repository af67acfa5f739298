"""
Constants for the sampling intervals used by the temperature schedulers.
"""

from typing import Final

class TimerConstants:
    """Defines all timer intervals used for temperature sampling."""
    # The overlay samples at a constant rate, collapsed or not, so that
    # expanding it never shows stale data.
    OVERLAY_SAMPLE_INTERVAL_MS: Final[int] = 5000
    SCREEN_VISIBLE_INTERVAL_MS: Final[int] = 5000
    SCREEN_HIDDEN_INTERVAL_MS: Final[int] = 30000
    MINIMUM_INTERVAL_MS: Final[int] = 100

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the timer constants to ensure they are positive."""
        for attr_name in dir(self):
            if attr_name.endswith("_MS"):
                value = getattr(self, attr_name)
                if not isinstance(value, int) or value <= 0:
                    raise ValueError(f"{attr_name} must be a positive integer.")
        if self.SCREEN_HIDDEN_INTERVAL_MS < self.SCREEN_VISIBLE_INTERVAL_MS:
            raise ValueError("SCREEN_HIDDEN_INTERVAL_MS must not be shorter than SCREEN_VISIBLE_INTERVAL_MS")

# Singleton instance for easy access
timers = TimerConstants()
