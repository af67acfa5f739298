"""
Constants for the floating overlay widget's placement and rendering.
"""

from typing import Final, Tuple

class OverlayConstants:
    """Defines default placement, glyphs and styling of the overlay widget."""
    DEFAULT_POSITION: Final[Tuple[int, int]] = (30, 120)
    COLLAPSED_GLYPH: Final[str] = "•"
    CLOSE_GLYPH: Final[str] = "✕"
    UNAVAILABLE_TEXT: Final[str] = "--.- °C"
    CELSIUS_SUFFIX: Final[str] = "°C"

    FONT_SIZE: Final[int] = 11
    CONTENT_MARGIN: Final[int] = 6
    CONTENT_SPACING: Final[int] = 8
    BACKGROUND_COLOR: Final[str] = "rgba(20, 20, 20, 200)"
    TEXT_COLOR: Final[str] = "#FFFFFF"
    CORNER_RADIUS: Final[int] = 8

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if len(self.DEFAULT_POSITION) != 2 or not all(isinstance(v, int) for v in self.DEFAULT_POSITION):
            raise ValueError("DEFAULT_POSITION must be a pair of integers")
        for attr_name in ("COLLAPSED_GLYPH", "CLOSE_GLYPH", "UNAVAILABLE_TEXT"):
            if not getattr(self, attr_name):
                raise ValueError(f"{attr_name} must not be empty")
        if self.FONT_SIZE < 1:
            raise ValueError("FONT_SIZE must be positive")

# Singleton instance for easy access
overlay = OverlayConstants()
