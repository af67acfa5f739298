"""
Controller module for TempOverlay.

This module defines the OverlayController, the command surface used by the
main window and tray menu: check or request the overlay permission, start the
overlay, stop it. Both commands are idempotent.
"""

import logging
from typing import Optional, TYPE_CHECKING

from PyQt6.QtWidgets import QWidget

from tempoverlay.core.errors import CapabilityDeniedError, OverlayError

if TYPE_CHECKING:
    from tempoverlay.core.overlay_service import OverlayService
    from tempoverlay.core.permission import OverlayPermission

logger = logging.getLogger("TempOverlay.OverlayController")


class OverlayController:
    """
    Centralizes permission checks and starting/stopping the overlay.
    """

    def __init__(self, service: 'OverlayService', permission: 'OverlayPermission') -> None:
        self.logger = logger
        self.service = service
        self.permission = permission
        self.last_error: Optional[str] = None

    @property
    def is_running(self) -> bool:
        return self.service.is_active

    def can_draw_overlays(self) -> bool:
        return self.permission.is_granted()

    def request_permission(self, parent: Optional[QWidget] = None) -> None:
        self.permission.request_grant(parent)

    def start_overlay(self) -> bool:
        """
        Starts the overlay. Returns True when it is running afterwards; on
        failure the reason is kept in `last_error`.
        """
        self.last_error = None
        try:
            self.service.activate()
            return True
        except CapabilityDeniedError as e:
            self.logger.warning("Cannot start overlay: %s", e)
            self.last_error = str(e)
            return False
        except OverlayError as e:
            self.logger.error("Failed to start overlay: %s", e)
            self.last_error = str(e)
            return False

    def stop_overlay(self) -> None:
        self.service.deactivate()
