import logging
from typing import TYPE_CHECKING, Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout

from tempoverlay import constants

if TYPE_CHECKING:
    from tempoverlay.views.widget.main import TemperatureOverlayWidget


class WidgetLayoutManager:
    """
    Manages window properties, child elements and styling for the
    TemperatureOverlayWidget. Extracts construction logic from the widget class.
    """

    def __init__(self, widget: "TemperatureOverlayWidget"):
        self.widget = widget
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.LayoutManager")

    def setup_window_properties(self) -> None:
        """Frameless, always-on-top tool window that never takes focus."""
        self.logger.debug("Setting window properties...")
        self.widget.setWindowFlags(
            Qt.WindowType.FramelessWindowHint |
            Qt.WindowType.WindowStaysOnTopHint |
            Qt.WindowType.Tool |
            Qt.WindowType.WindowDoesNotAcceptFocus |
            Qt.WindowType.NoDropShadowWindowHint
        )
        self.widget.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.widget.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)
        self.widget.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.logger.debug("Window properties set")

    def build_content(self, text: str, close_glyph: str) -> Tuple[QLabel, QLabel]:
        """
        Creates the temperature and close labels inside a styled frame.

        Every child is transparent for mouse events so presses anywhere on the
        widget, including over the close glyph, reach the root widget.
        """
        frame = QFrame(self.widget)
        frame.setObjectName("overlayFrame")
        frame.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)

        font = QFont()
        font.setPointSize(constants.overlay.FONT_SIZE)
        font.setBold(True)

        text_label = QLabel(text, frame)
        text_label.setObjectName("overlayText")
        text_label.setFont(font)
        text_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)

        close_label = QLabel(close_glyph, frame)
        close_label.setObjectName("overlayClose")
        close_label.setFont(font)
        close_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)

        margin = constants.overlay.CONTENT_MARGIN
        row = QHBoxLayout(frame)
        row.setContentsMargins(margin, margin, margin, margin)
        row.setSpacing(constants.overlay.CONTENT_SPACING)
        row.addWidget(text_label)
        row.addWidget(close_label)

        outer = QVBoxLayout(self.widget)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(frame)

        frame.setStyleSheet(
            f"#overlayFrame {{ background-color: {constants.overlay.BACKGROUND_COLOR};"
            f" border-radius: {constants.overlay.CORNER_RADIUS}px; }}"
            f" QLabel {{ color: {constants.overlay.TEXT_COLOR}; background: transparent; }}"
        )
        return text_label, close_label
