"""
Core submodule for TempOverlay.

Contains the gesture state machine, the sampling scheduler, the overlay
lifecycle service and their collaborators.
"""

from tempoverlay.core.controller import OverlayController
from tempoverlay.core.input_handler import InputHandler, PointerEvent, PointerPhase, WidgetPosition
from tempoverlay.core.overlay_service import DisplayMode, OverlayService
from tempoverlay.core.timer_manager import SamplingScheduler

__all__ = [
    "OverlayController",
    "InputHandler",
    "PointerEvent",
    "PointerPhase",
    "WidgetPosition",
    "DisplayMode",
    "OverlayService",
    "SamplingScheduler",
]
