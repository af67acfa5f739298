"""
The floating temperature widget.

A frameless, always-on-top window showing the temperature text and a close
glyph. It has no behaviour of its own: mouse input on the root widget is
re-emitted as toolkit-neutral `PointerEvent`s, and the owning display surface
decides what to do with them.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from PyQt6.QtCore import QEvent, QObject, QPoint, QRect, Qt, pyqtSignal
from PyQt6.QtGui import QCloseEvent, QMouseEvent
from PyQt6.QtWidgets import QWidget

from tempoverlay import constants
from tempoverlay.core.input_handler import PointerEvent, PointerPhase
from tempoverlay.views.widget.layout import WidgetLayoutManager


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class TemperatureOverlayWidget(QWidget):
    """Always-on-top widget that forwards raw pointer input."""

    pointer_event = pyqtSignal(object)
    closed_by_host = pyqtSignal()

    def __init__(self, text: str, close_glyph: str, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")
        self._detaching = False
        self._pressed = False

        self.layout_manager = WidgetLayoutManager(self)
        self.layout_manager.setup_window_properties()
        self.text_label, self.close_label = self.layout_manager.build_content(text, close_glyph)
        self.adjustSize()


    def set_text(self, text: str) -> None:
        if self.text_label.text() == text:
            return
        self.text_label.setText(text)
        self.adjustSize()


    def close_control_contains(self, x: float, y: float) -> bool:
        """Hit-tests a global screen coordinate against the close glyph's bounds."""
        if not self.close_label.isVisible():
            return False
        top_left = self.close_label.mapToGlobal(QPoint(0, 0))
        return QRect(top_left, self.close_label.size()).contains(int(x), int(y))


    def detach(self) -> None:
        """Closes the window on behalf of the owner, without reporting it as host-initiated."""
        self._detaching = True
        self.close()
        self.deleteLater()


    def _emit(self, phase: PointerPhase, event: QMouseEvent) -> None:
        pos = event.globalPosition()
        self.pointer_event.emit(PointerEvent(phase, pos.x(), pos.y(), _monotonic_ms()))


    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._pressed = True
            self._emit(PointerPhase.DOWN, event)
            event.accept()
        else:
            super().mousePressEvent(event)


    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._pressed and event.buttons() & Qt.MouseButton.LeftButton:
            self._emit(PointerPhase.MOVE, event)
            event.accept()
        else:
            super().mouseMoveEvent(event)


    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self._pressed:
            self._pressed = False
            self._emit(PointerPhase.UP, event)
            event.accept()
        else:
            super().mouseReleaseEvent(event)


    def event(self, event: QEvent) -> bool:
        # Losing the mouse grab mid-press (popup, window switch) cancels the gesture.
        if event.type() == QEvent.Type.UngrabMouse and self._pressed:
            self._pressed = False
            self.pointer_event.emit(PointerEvent(PointerPhase.CANCEL, 0.0, 0.0, _monotonic_ms()))
        return super().event(event)


    def closeEvent(self, event: QCloseEvent) -> None:
        if not self._detaching:
            self.logger.info("Overlay window closed by the window system.")
            self.closed_by_host.emit()
        event.accept()
