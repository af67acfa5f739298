"""
Unit tests for the TrayIconManager class.
"""

from unittest.mock import MagicMock, patch

import pytest
from PyQt6.QtCore import QObject, pyqtSignal

from tempoverlay.core.tray_manager import TrayIconManager


class FakeService(QObject):
    active_changed = pyqtSignal(bool)


@pytest.fixture
def controller(q_app):
    controller = MagicMock()
    controller.service = FakeService()
    controller.is_running = False
    return controller


@pytest.fixture
def tray_available():
    with patch("tempoverlay.core.tray_manager.QSystemTrayIcon") as mock_tray_cls:
        mock_tray_cls.isSystemTrayAvailable.return_value = True
        mock_tray_cls.supportsMessages.return_value = True
        yield mock_tray_cls


def test_initialization_creates_hidden_icon_and_menu(controller, tray_available):
    manager = TrayIconManager(controller)
    manager.initialize()

    icon = tray_available.return_value
    icon.setContextMenu.assert_called_once_with(manager.context_menu)
    icon.hide.assert_called()
    assert manager.stop_action.text() == "Stop overlay"
    assert manager.exit_action.text() == "Exit"


def test_icon_follows_overlay_state(controller, tray_available):
    manager = TrayIconManager(controller)
    manager.initialize()
    icon = tray_available.return_value

    controller.service.active_changed.emit(True)
    icon.show.assert_called_once()
    icon.showMessage.assert_called_once()

    controller.service.active_changed.emit(False)
    assert icon.hide.call_count == 2


def test_stop_action_stops_overlay(controller, tray_available):
    manager = TrayIconManager(controller)
    manager.initialize()
    manager.stop_action.trigger()
    controller.stop_overlay.assert_called_once()


def test_no_system_tray_is_tolerated(controller):
    with patch("tempoverlay.core.tray_manager.QSystemTrayIcon") as mock_tray_cls:
        mock_tray_cls.isSystemTrayAvailable.return_value = False
        manager = TrayIconManager(controller)
        manager.initialize()
    assert manager.tray_icon is None
    manager.on_overlay_active_changed(True)


def test_cleanup_hides_icon(controller, tray_available):
    manager = TrayIconManager(controller)
    manager.initialize()
    icon = tray_available.return_value
    manager.cleanup()
    assert manager.tray_icon is None
    assert icon.hide.called
