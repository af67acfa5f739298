"""
Main window for TempOverlay.

Shows the current device temperature while the window is on screen and offers
the controls to grant the overlay permission and start or stop the overlay.
The temperature is polled by its own `SamplingScheduler`: every 5 s while the
reading is shown, every 30 s while the user has hidden it.
"""

import logging
from typing import Any, Dict, Optional

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QCloseEvent, QFont, QHideEvent, QShowEvent
from PyQt6.QtWidgets import (
    QApplication, QFrame, QGroupBox, QHBoxLayout, QLabel, QMessageBox,
    QPushButton, QVBoxLayout, QWidget,
)

from tempoverlay import constants
from tempoverlay.core.controller import OverlayController
from tempoverlay.core.temperature import TemperatureSource
from tempoverlay.core.timer_manager import SampleValue, SamplingScheduler
from tempoverlay.utils.config import ConfigError, ConfigManager
from tempoverlay.utils.helpers import format_screen_temperature


class MainWindow(QWidget):
    """The application's primary screen."""

    def __init__(self,
                 controller: OverlayController,
                 source: TemperatureSource,
                 config_manager: ConfigManager,
                 config: Dict[str, Any],
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger("TempOverlay.MainWindow")
        self.controller = controller
        self.source = source
        self.config_manager = config_manager
        self.config = config
        self._temperature_visible = bool(config.get("temperature_visible", True))

        self.scheduler = SamplingScheduler("screen", parent=self)

        self.setWindowTitle(constants.strings.MAIN_WINDOW_TITLE)
        self._build_ui()

        self.controller.service.active_changed.connect(self._on_overlay_active_changed)
        self.controller.permission.grant_changed.connect(self._on_grant_changed)
        self._refresh_temperature_section()
        self._refresh_overlay_section()
        self.logger.debug("MainWindow initialized.")


    # --- UI construction ---

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        self.card = QFrame(self)
        self.card.setFrameShape(QFrame.Shape.StyledPanel)
        card_layout = QVBoxLayout(self.card)
        title = QLabel(constants.strings.CARD_TITLE, self.card)
        title_font = QFont()
        title_font.setBold(True)
        title.setFont(title_font)
        self.temperature_label = QLabel(format_screen_temperature(None), self.card)
        value_font = QFont()
        value_font.setPointSize(16)
        self.temperature_label.setFont(value_font)
        source_hint = QLabel(constants.strings.CARD_SOURCE_HINT, self.card)
        source_hint.setWordWrap(True)
        card_layout.addWidget(title)
        card_layout.addWidget(self.temperature_label)
        card_layout.addWidget(source_hint)

        self.hidden_label = QLabel(constants.strings.HIDDEN_HINT, self)
        self.hidden_label.setWordWrap(True)

        self.visibility_button = QPushButton(self)
        self.visibility_button.clicked.connect(self.toggle_temperature_visible)

        root.addWidget(self.visibility_button, alignment=Qt.AlignmentFlag.AlignLeft)
        root.addWidget(self.card)
        root.addWidget(self.hidden_label)

        overlay_box = QGroupBox(constants.strings.OVERLAY_SECTION_TITLE, self)
        overlay_layout = QVBoxLayout(overlay_box)

        self.permission_hint = QLabel(constants.strings.PERMISSION_REQUIRED_HINT, overlay_box)
        self.permission_hint.setWordWrap(True)
        self.grant_button = QPushButton(constants.strings.GRANT_PERMISSION_BUTTON, overlay_box)
        self.grant_button.clicked.connect(self._on_grant_clicked)

        buttons = QHBoxLayout()
        self.start_button = QPushButton(constants.strings.START_OVERLAY_BUTTON, overlay_box)
        self.start_button.clicked.connect(self._on_start_clicked)
        self.stop_button = QPushButton(constants.strings.STOP_OVERLAY_BUTTON, overlay_box)
        self.stop_button.clicked.connect(self.controller.stop_overlay)
        buttons.addWidget(self.start_button)
        buttons.addWidget(self.stop_button)

        self.status_label = QLabel(overlay_box)

        overlay_layout.addWidget(self.permission_hint)
        overlay_layout.addWidget(self.grant_button)
        overlay_layout.addLayout(buttons)
        overlay_layout.addWidget(self.status_label)
        root.addWidget(overlay_box)
        root.addStretch(1)


    # --- Temperature panel ---

    @property
    def temperature_visible(self) -> bool:
        return self._temperature_visible


    def toggle_temperature_visible(self) -> None:
        self.set_temperature_visible(not self._temperature_visible)


    def set_temperature_visible(self, visible: bool) -> None:
        """Shows or hides the reading, persists the choice and restarts polling at the new cadence."""
        if visible == self._temperature_visible:
            return
        self._temperature_visible = visible
        self.config["temperature_visible"] = visible
        try:
            self.config_manager.save(self.config)
        except ConfigError as e:
            self.logger.error("Failed to persist temperature visibility: %s", e)
        self._refresh_temperature_section()
        if self.scheduler.is_running:
            self.start_polling()


    def _refresh_temperature_section(self) -> None:
        visible = self._temperature_visible
        self.card.setVisible(visible)
        self.hidden_label.setVisible(not visible)
        self.visibility_button.setText(
            constants.strings.HIDE_TEMPERATURE_BUTTON if visible else constants.strings.SHOW_TEMPERATURE_BUTTON
        )


    def screen_interval(self) -> int:
        if self._temperature_visible:
            return constants.timers.SCREEN_VISIBLE_INTERVAL_MS
        return constants.timers.SCREEN_HIDDEN_INTERVAL_MS


    def start_polling(self) -> None:
        self.scheduler.start(self.source.read, self.screen_interval, self._apply_sample)


    def stop_polling(self) -> None:
        self.scheduler.stop()


    def _apply_sample(self, value: SampleValue) -> None:
        # Updated even while hidden so the value is current when shown again.
        self.temperature_label.setText(format_screen_temperature(value))


    # --- Overlay section ---

    def _refresh_overlay_section(self) -> None:
        granted = self.controller.can_draw_overlays()
        running = self.controller.is_running
        self.permission_hint.setVisible(not granted)
        self.grant_button.setVisible(not granted)
        self.start_button.setVisible(granted)
        self.stop_button.setVisible(granted)
        self.start_button.setEnabled(granted and not running)
        self.stop_button.setEnabled(running)
        self.status_label.setText(
            constants.strings.OVERLAY_RUNNING_STATUS if running else constants.strings.OVERLAY_STOPPED_STATUS
        )


    def _on_grant_clicked(self) -> None:
        self.controller.request_permission(self)


    def _on_start_clicked(self) -> None:
        if self.controller.start_overlay():
            return
        if not self.controller.can_draw_overlays():
            message = constants.strings.CAPABILITY_DENIED_MESSAGE
        else:
            message = constants.strings.OVERLAY_START_FAILED_MESSAGE
        self.logger.warning("Overlay start failed: %s", self.controller.last_error)
        box = QMessageBox(QMessageBox.Icon.Warning, constants.strings.MAIN_WINDOW_TITLE, message,
                          QMessageBox.StandardButton.Ok, self)
        box.open()
        self._refresh_overlay_section()


    def _on_overlay_active_changed(self, _active: bool) -> None:
        self._refresh_overlay_section()


    def _on_grant_changed(self, _granted: bool) -> None:
        self._refresh_overlay_section()


    # --- Qt events ---

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if not self.scheduler.is_running:
            self.start_polling()


    def hideEvent(self, event: QHideEvent) -> None:
        super().hideEvent(event)
        if not event.spontaneous():
            self.stop_polling()


    def closeEvent(self, event: QCloseEvent) -> None:
        """Closing the window ends the app unless the overlay is still running."""
        self.stop_polling()
        event.accept()
        if self.controller.is_running:
            self.logger.info("Main window closed; overlay keeps running.")
            return
        self.logger.info("Main window closed; quitting.")
        app = QApplication.instance()
        if app is not None:
            app.quit()


    def cleanup(self) -> None:
        self.scheduler.cleanup()
        self.logger.debug("MainWindow cleanup completed.")
