"""
Qt implementation of the overlay's display surface.

Creates one `TemperatureOverlayWidget` per attachment and addresses it through
an integer handle. Operations on a handle that is no longer attached raise
`StaleHandleError`, which the overlay service absorbs.
"""

import itertools
import logging
from typing import Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from tempoverlay.core.errors import StaleHandleError
from tempoverlay.core.input_handler import WidgetPosition
from tempoverlay.core.overlay_service import OverlayContent
from tempoverlay.views.widget import TemperatureOverlayWidget


class QtDisplaySurface(QObject):
    """
    Signals:
        pointer_event: Re-emits every PointerEvent from any attached widget.
        host_detached: Emitted with the handle of a widget the window system closed.
    """
    pointer_event = pyqtSignal(object)
    host_detached = pyqtSignal(object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger("TempOverlay.QtDisplaySurface")
        self._widgets: Dict[int, TemperatureOverlayWidget] = {}
        self._handles = itertools.count(1)

    def attach(self, position: WidgetPosition, content: OverlayContent) -> int:
        handle = next(self._handles)
        widget = TemperatureOverlayWidget(content.text, content.close_glyph)
        widget.pointer_event.connect(self.pointer_event)
        widget.closed_by_host.connect(lambda h=handle: self._on_widget_closed(h))
        widget.move(position.x, position.y)
        widget.show()
        self._widgets[handle] = widget
        self.logger.debug("Attached overlay widget %d at (%d, %d).", handle, position.x, position.y)
        return handle

    def _widget(self, handle: int) -> TemperatureOverlayWidget:
        widget = self._widgets.get(handle)
        if widget is None:
            raise StaleHandleError(f"Overlay handle {handle!r} is not attached.")
        return widget

    def update_position(self, handle: int, position: WidgetPosition) -> None:
        self._widget(handle).move(position.x, position.y)

    def update_text(self, handle: int, text: str) -> None:
        self._widget(handle).set_text(text)

    def hit_close_control(self, handle: int, x: float, y: float) -> bool:
        return self._widget(handle).close_control_contains(x, y)

    def detach(self, handle: int) -> None:
        widget = self._widgets.pop(handle, None)
        if widget is None:
            raise StaleHandleError(f"Overlay handle {handle!r} is already detached.")
        widget.detach()
        self.logger.debug("Detached overlay widget %d.", handle)

    def _on_widget_closed(self, handle: int) -> None:
        if self._widgets.pop(handle, None) is not None:
            self.host_detached.emit(handle)
