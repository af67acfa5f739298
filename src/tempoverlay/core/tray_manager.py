"""
Tray Icon Manager Module for TempOverlay.

This module provides the "overlay is running" indicator: a system tray icon
that is visible only while the overlay is active, announces itself once per
activation, and offers a context menu to stop the overlay or quit.
"""

import logging
from typing import Optional, TYPE_CHECKING

from PyQt6.QtCore import QObject
from PyQt6.QtGui import QAction, QIcon
from PyQt6.QtWidgets import QApplication, QMenu, QStyle, QSystemTrayIcon

from tempoverlay import constants

if TYPE_CHECKING:
    from tempoverlay.core.controller import OverlayController


class TrayIconManager(QObject):
    """
    Manages the tray icon and its context menu.
    """
    def __init__(self, controller: 'OverlayController', parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.logger = logging.getLogger("TempOverlay.TrayIconManager")

        self.tray_icon: Optional[QSystemTrayIcon] = None
        self.context_menu: Optional[QMenu] = None
        self.stop_action: Optional[QAction] = None
        self.exit_action: Optional[QAction] = None

    def initialize(self) -> None:
        """Creates the icon and menu and follows the overlay's active state."""
        if not QSystemTrayIcon.isSystemTrayAvailable():
            self.logger.warning("System tray is not available; running indicator disabled.")
            return
        try:
            self.tray_icon = QSystemTrayIcon(self._load_icon(), self)
            self.tray_icon.setToolTip(constants.strings.TRAY_TOOLTIP)
            self._init_context_menu()
            self.controller.service.active_changed.connect(self.on_overlay_active_changed)
            self.on_overlay_active_changed(self.controller.is_running)
            self.logger.debug("Tray icon initialized.")
        except Exception as e:
            self.logger.error("Error initializing tray icon: %s", e, exc_info=True)
            self.tray_icon = None

    def _load_icon(self) -> QIcon:
        icon = QIcon.fromTheme("temperature")
        if icon.isNull():
            style = QApplication.style()
            icon = style.standardIcon(QStyle.StandardPixmap.SP_ComputerIcon) if style else QIcon()
        return icon

    def _init_context_menu(self) -> None:
        self.context_menu = QMenu()

        self.stop_action = self.context_menu.addAction(constants.strings.TRAY_STOP_ITEM)
        self.stop_action.triggered.connect(self.controller.stop_overlay)

        self.context_menu.addSeparator()

        self.exit_action = self.context_menu.addAction(constants.strings.TRAY_EXIT_ITEM)
        app_instance = QApplication.instance()
        if app_instance:
            self.exit_action.triggered.connect(app_instance.quit)
        else:
            self.exit_action.setEnabled(False)

        self.tray_icon.setContextMenu(self.context_menu)

    def on_overlay_active_changed(self, active: bool) -> None:
        if self.tray_icon is None:
            return
        if active:
            self.tray_icon.show()
            if QSystemTrayIcon.supportsMessages():
                self.tray_icon.showMessage(
                    constants.strings.TRAY_MESSAGE_TITLE,
                    constants.strings.TRAY_MESSAGE_TEXT,
                    QSystemTrayIcon.MessageIcon.Information,
                    constants.timeouts.TRAY_MESSAGE_DURATION_MS,
                )
        else:
            self.tray_icon.hide()

    def cleanup(self) -> None:
        if self.tray_icon is not None:
            try:
                self.controller.service.active_changed.disconnect(self.on_overlay_active_changed)
            except (TypeError, RuntimeError):
                pass
            self.tray_icon.hide()
            self.tray_icon = None
        self.logger.debug("Tray icon cleanup completed.")
