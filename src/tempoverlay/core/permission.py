"""
Overlay display permission for TempOverlay.

Desktop window systems do not ask before letting an application float a
window over others, so the grant is an explicit opt-in recorded in the user's
configuration. Requesting it opens a non-modal confirmation dialog and returns
at once; the outcome arrives later through `grant_changed`. Platforms where a
client cannot position its own top-level windows (Wayland) never grant it.
"""

import logging
from typing import Any, Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QMessageBox, QWidget

from tempoverlay import constants
from tempoverlay.utils.config import ConfigError, ConfigManager

UNSUPPORTED_PLATFORMS = ("wayland",)


class OverlayPermission(QObject):
    """
    Tracks whether the user allowed the overlay to be drawn over other apps.

    Signals:
        grant_changed: Emitted with the new grant state whenever it changes.
    """
    grant_changed = pyqtSignal(bool)

    def __init__(self, config_manager: ConfigManager, config: Dict[str, Any], parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger("TempOverlay.OverlayPermission")
        self.config_manager = config_manager
        self.config = config
        self._dialog: Optional[QMessageBox] = None

    def is_platform_supported(self) -> bool:
        platform = (QGuiApplication.platformName() or "").lower()
        return not any(platform.startswith(name) for name in UNSUPPORTED_PLATFORMS)

    def is_granted(self) -> bool:
        return self.is_platform_supported() and bool(self.config.get("overlay_permission_granted", False))

    def request_grant(self, parent: Optional[QWidget] = None) -> None:
        """Opens the confirmation dialog without blocking."""
        if self._dialog is not None and self._dialog.isVisible():
            self._dialog.raise_()
            return

        if not self.is_platform_supported():
            self.logger.warning("Overlay permission requested on unsupported platform '%s'.", QGuiApplication.platformName())
            box = QMessageBox(QMessageBox.Icon.Warning, constants.strings.PERMISSION_DIALOG_TITLE,
                              constants.strings.PERMISSION_UNSUPPORTED_TEXT, QMessageBox.StandardButton.Ok, parent)
        else:
            box = QMessageBox(QMessageBox.Icon.Question, constants.strings.PERMISSION_DIALOG_TITLE,
                              constants.strings.PERMISSION_DIALOG_TEXT,
                              QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No, parent)
            box.finished.connect(self._on_dialog_finished)
        self._dialog = box
        box.open()

    def _on_dialog_finished(self, _result: int) -> None:
        box = self._dialog
        self._dialog = None
        if box is None:
            return
        clicked = box.standardButton(box.clickedButton())
        if clicked == QMessageBox.StandardButton.Yes:
            self.set_granted(True)
        else:
            self.logger.info("Overlay permission request declined.")

    def set_granted(self, granted: bool) -> None:
        """Records the grant in the configuration and notifies listeners."""
        if bool(self.config.get("overlay_permission_granted", False)) == granted:
            return
        self.config["overlay_permission_granted"] = granted
        try:
            self.config_manager.save(self.config)
        except ConfigError as e:
            # The grant still applies to this session.
            self.logger.error("Failed to persist overlay permission: %s", e)
        self.logger.info("Overlay permission %s.", "granted" if granted else "revoked")
        self.grant_changed.emit(self.is_granted())
