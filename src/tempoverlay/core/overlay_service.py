"""
Overlay lifecycle service for TempOverlay.

`OverlayService` owns everything that lives while the floating widget is on
screen. That includes its position and display mode, plus the gesture state machine
and sampling scheduler that drive it. The host window system, the permission
and the sensor are reached only through the protocols defined here.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, TypeVar, Union

from PyQt6.QtCore import QObject, pyqtSignal

from tempoverlay import constants
from tempoverlay.core.errors import CapabilityDeniedError, OverlayAttachError, OverlayError, StaleHandleError
from tempoverlay.core.input_handler import InputHandler, Moved, PointerEvent, Tapped, WidgetPosition
from tempoverlay.core.temperature import TemperatureSource
from tempoverlay.core.timer_manager import SampleValue, SamplingScheduler
from tempoverlay.utils.helpers import format_widget_temperature

T = TypeVar("T")


class DisplayMode(enum.Enum):
    EXPANDED = "expanded"
    COLLAPSED = "collapsed"


@dataclass(frozen=True)
class OverlayContent:
    """What the host needs to build the widget."""
    text: str
    close_glyph: str


class DisplaySurface(Protocol):
    """Host window system. Operations on a detached handle raise StaleHandleError."""

    def attach(self, position: WidgetPosition, content: OverlayContent) -> Any:
        ...

    def update_position(self, handle: Any, position: WidgetPosition) -> None:
        ...

    def update_text(self, handle: Any, text: str) -> None:
        ...

    def hit_close_control(self, handle: Any, x: float, y: float) -> bool:
        ...

    def detach(self, handle: Any) -> None:
        ...


class OverlayCapability(Protocol):
    """The host's permission to draw over other applications."""

    def is_granted(self) -> bool:
        ...

    def request_grant(self) -> None:
        ...


@dataclass(frozen=True)
class Inactive:
    pass


@dataclass
class Active:
    handle: Any
    position: WidgetPosition
    mode: DisplayMode = DisplayMode.EXPANDED
    text: str = constants.overlay.UNAVAILABLE_TEXT


OverlayState = Union[Inactive, Active]
INACTIVE = Inactive()


class OverlayService(QObject):
    """
    Lifecycle shell of the floating temperature widget.

    Signals:
        active_changed: Emitted with True after activation and False after
            deactivation (requested or caused by the host).
    """
    active_changed = pyqtSignal(bool)

    def __init__(self,
                 surface: DisplaySurface,
                 capability: OverlayCapability,
                 source: TemperatureSource,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger("TempOverlay.OverlayService")
        self.surface = surface
        self.capability = capability
        self.source = source

        self._state: OverlayState = INACTIVE
        self.input_handler = InputHandler(
            position_provider=self._current_position,
            close_hit_test=self._hit_close_control,
        )
        self.scheduler = SamplingScheduler("overlay", parent=self)
        self.logger.debug("OverlayService initialized.")


    # --- State inspection ---

    @property
    def state(self) -> OverlayState:
        return self._state

    @property
    def is_active(self) -> bool:
        return isinstance(self._state, Active)

    @property
    def position(self) -> Optional[WidgetPosition]:
        return self._state.position if isinstance(self._state, Active) else None

    @property
    def display_mode(self) -> Optional[DisplayMode]:
        return self._state.mode if isinstance(self._state, Active) else None

    @property
    def rendered_text(self) -> Optional[str]:
        return self._state.text if isinstance(self._state, Active) else None


    # --- Lifecycle ---

    def activate(self) -> None:
        """
        Puts the widget on screen and starts sampling. No-op when already active.

        Raises:
            CapabilityDeniedError: The host has not granted overlay display.
            OverlayAttachError: The host failed to create the widget.
        """
        if isinstance(self._state, Active):
            self.logger.debug("Activation requested while already active; ignoring.")
            return
        if not self.capability.is_granted():
            self.logger.warning("Overlay activation refused: display capability not granted.")
            raise CapabilityDeniedError("Overlay display permission has not been granted.")

        position = WidgetPosition.default()
        content = OverlayContent(
            text=constants.overlay.UNAVAILABLE_TEXT,
            close_glyph=constants.overlay.CLOSE_GLYPH,
        )
        try:
            handle = self.surface.attach(position, content)
        except OverlayError:
            raise
        except Exception as e:
            self.logger.error("Failed to attach overlay widget: %s", e, exc_info=True)
            raise OverlayAttachError(f"Failed to attach overlay widget: {e}") from e

        self._state = Active(handle=handle, position=position, text=content.text)
        self.input_handler.reset()
        self.scheduler.start(self.source.read, self._overlay_interval, self._apply_sample)
        self.logger.info("Overlay activated at (%d, %d).", position.x, position.y)
        self.active_changed.emit(True)


    def deactivate(self) -> None:
        """Stops sampling and removes the widget. Safe to call repeatedly."""
        state = self._state
        if not isinstance(state, Active):
            self.logger.debug("Deactivation requested while inactive; ignoring.")
            return

        # Flip state first so callbacks still in flight see an inactive overlay.
        self._state = INACTIVE
        self.scheduler.stop()
        self.input_handler.reset()
        try:
            self._call_surface(self.surface.detach, state.handle)
        except Exception as e:
            self.logger.error("Host failed to detach overlay widget: %s", e, exc_info=True)
        self.logger.info("Overlay deactivated.")
        self.active_changed.emit(False)


    def on_host_detached(self, handle: Any = None) -> None:
        """
        The host destroyed the widget on its own. Stops sampling without
        detaching again. Notifications for an older handle are ignored.
        """
        state = self._state
        if not isinstance(state, Active):
            return
        if handle is not None and handle != state.handle:
            self.logger.debug("Ignoring detach notification for stale handle %r.", handle)
            return
        self._state = INACTIVE
        self.scheduler.stop()
        self.input_handler.reset()
        self.logger.warning("Overlay widget was detached by the host; overlay is now inactive.")
        self.active_changed.emit(False)


    # --- Interaction ---

    def handle_pointer_event(self, event: PointerEvent) -> None:
        """Routes one pointer event from the widget's root surface."""
        if not isinstance(self._state, Active):
            return
        action = self.input_handler.on_pointer_event(event)
        if isinstance(action, Moved):
            self._move_to(action.position)
        elif isinstance(action, Tapped):
            if action.hit_close_control:
                self.logger.info("Close control tapped.")
                self.deactivate()
            else:
                self.toggle_display_mode()


    def toggle_display_mode(self) -> None:
        """Flips collapsed/expanded. Expanding resamples immediately."""
        state = self._state
        if not isinstance(state, Active):
            return
        if state.mode is DisplayMode.EXPANDED:
            state.mode = DisplayMode.COLLAPSED
            self._render(state, constants.overlay.COLLAPSED_GLYPH)
            self.logger.debug("Overlay collapsed.")
        else:
            state.mode = DisplayMode.EXPANDED
            self.logger.debug("Overlay expanded; refreshing immediately.")
            self.scheduler.sample_now()


    # --- Internals ---

    def _overlay_interval(self) -> int:
        # Independent of display mode; collapsed overlays keep sampling.
        return constants.timers.OVERLAY_SAMPLE_INTERVAL_MS


    def _apply_sample(self, value: SampleValue) -> None:
        state = self._state
        if not isinstance(state, Active) or state.mode is DisplayMode.COLLAPSED:
            return
        self._render(state, format_widget_temperature(value))


    def _render(self, state: Active, text: str) -> None:
        state.text = text
        self._call_surface(self.surface.update_text, state.handle, text)


    def _move_to(self, position: WidgetPosition) -> None:
        state = self._state
        if not isinstance(state, Active):
            return
        state.position = position
        self._call_surface(self.surface.update_position, state.handle, position)


    def _current_position(self) -> WidgetPosition:
        state = self._state
        return state.position if isinstance(state, Active) else WidgetPosition.default()


    def _hit_close_control(self, x: float, y: float) -> bool:
        state = self._state
        if not isinstance(state, Active):
            return False
        return bool(self._call_surface(self.surface.hit_close_control, state.handle, x, y))


    def _call_surface(self, operation: Callable[..., T], *args: Any) -> Optional[T]:
        try:
            return operation(*args)
        except StaleHandleError as e:
            self.logger.debug("Ignoring %s on stale overlay handle: %s", getattr(operation, "__name__", operation), e)
            return None


    def cleanup(self) -> None:
        """Deactivates the overlay and releases the scheduler."""
        self.deactivate()
        self.scheduler.cleanup()
        self.logger.debug("OverlayService cleanup completed.")
