"""
Application entry point and lifecycle management for TempOverlay.
"""

import logging
import signal
import sys

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication, QMessageBox

from tempoverlay import constants
from tempoverlay.core.controller import OverlayController
from tempoverlay.core.overlay_service import OverlayService
from tempoverlay.core.permission import OverlayPermission
from tempoverlay.core.temperature import TemperatureRepository
from tempoverlay.core.tray_manager import TrayIconManager
from tempoverlay.utils.config import ConfigManager
from tempoverlay.views.main_window import MainWindow
from tempoverlay.views.overlay_surface import QtDisplaySurface


def main() -> int:
    """
    Main entry point for the TempOverlay application.

    Orchestrates the application's startup sequence:
    1. Sets up logging.
    2. Loads configuration.
    3. Wires the temperature source, overlay service and controller.
    4. Creates the tray indicator and main window, and runs the event loop.

    Returns:
        An integer exit code.
    """
    ConfigManager.setup_logging()
    logger = logging.getLogger("TempOverlay.Main")

    app = QApplication(sys.argv)
    app.setApplicationName(constants.app.APP_NAME)
    app.setApplicationVersion(constants.app.VERSION)

    try:
        config_manager = ConfigManager()
        config = config_manager.load()

        source = TemperatureRepository(config)
        permission = OverlayPermission(config_manager, config)
        surface = QtDisplaySurface()
        service = OverlayService(surface, permission, source)
        surface.pointer_event.connect(service.handle_pointer_event)
        surface.host_detached.connect(service.on_host_detached)
        controller = OverlayController(service, permission)

        tray = TrayIconManager(controller)
        tray.initialize()

        window = MainWindow(controller, source, config_manager, config)

        # The overlay outlives the main window; the app ends when both are gone.
        app.setQuitOnLastWindowClosed(False)

        def _quit_if_idle(active: bool) -> None:
            if not active and not window.isVisible():
                logger.info("Overlay stopped with no window open; quitting.")
                app.quit()

        service.active_changed.connect(_quit_if_idle)

        def _shutdown() -> None:
            logger.info("Application shutting down.")
            tray.cleanup()
            service.cleanup()
            window.cleanup()

        app.aboutToQuit.connect(_shutdown)

        signal.signal(signal.SIGINT, lambda s, f: QApplication.instance().quit())
        signal.signal(signal.SIGTERM, lambda s, f: QApplication.instance().quit())
        # Python signal handlers only run when the interpreter regains control.
        signal_poll = QTimer()
        signal_poll.timeout.connect(lambda: None)
        signal_poll.start(constants.timeouts.SIGNAL_POLL_INTERVAL_MS)

        QTimer.singleShot(constants.timeouts.WINDOW_INIT_DELAY_MS, window.show)
        if config.get("start_overlay_on_launch", False):
            QTimer.singleShot(constants.timeouts.OVERLAY_AUTOSTART_DELAY_MS, controller.start_overlay)

        logger.info("%s %s started.", constants.app.APP_NAME, constants.app.VERSION)
        return app.exec()

    except Exception as e:
        logger.critical("A critical error occurred during startup: %s", e, exc_info=True)
        QMessageBox.critical(None, constants.strings.ERROR_WINDOW_TITLE,
                             f"A critical error occurred and {constants.app.APP_NAME} must close:\n\n{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
