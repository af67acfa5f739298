"""
Unit tests for the OverlayPermission opt-in.
"""

from unittest.mock import MagicMock, patch

import pytest
from PyQt6.QtWidgets import QMessageBox

from tempoverlay.core.permission import OverlayPermission
from tempoverlay.utils.config import ConfigError, ConfigManager


@pytest.fixture
def config_manager():
    return MagicMock(spec=ConfigManager)


@pytest.fixture
def permission(q_app, config_manager):
    return OverlayPermission(config_manager, ConfigManager.defaults())


def test_not_granted_by_default(permission):
    assert permission.is_granted() is False


def test_set_granted_persists_and_notifies(permission, config_manager):
    events = []
    permission.grant_changed.connect(events.append)
    permission.set_granted(True)

    assert permission.is_granted() is True
    assert permission.config["overlay_permission_granted"] is True
    config_manager.save.assert_called_once_with(permission.config)
    assert events == [True]


def test_set_granted_unchanged_does_nothing(permission, config_manager):
    permission.set_granted(False)
    config_manager.save.assert_not_called()


def test_save_failure_still_grants_for_session(permission, config_manager):
    config_manager.save.side_effect = ConfigError("read-only")
    permission.set_granted(True)
    assert permission.is_granted() is True


def test_wayland_never_grants(permission):
    permission.config["overlay_permission_granted"] = True
    with patch("tempoverlay.core.permission.QGuiApplication") as mock_gui:
        mock_gui.platformName.return_value = "wayland"
        assert permission.is_platform_supported() is False
        assert permission.is_granted() is False


def test_request_grant_opens_non_modal_dialog(permission):
    with patch("tempoverlay.core.permission.QMessageBox") as mock_box_cls:
        mock_box_cls.Icon = QMessageBox.Icon
        mock_box_cls.StandardButton = QMessageBox.StandardButton
        permission.request_grant()
        mock_box_cls.return_value.open.assert_called_once()
        mock_box_cls.return_value.exec.assert_not_called()
    assert permission.is_granted() is False


def test_dialog_accept_grants(permission):
    box = MagicMock()
    box.standardButton.return_value = QMessageBox.StandardButton.Yes
    permission._dialog = box
    permission._on_dialog_finished(0)
    assert permission.is_granted() is True


def test_dialog_decline_does_not_grant(permission):
    box = MagicMock()
    box.standardButton.return_value = QMessageBox.StandardButton.No
    permission._dialog = box
    permission._on_dialog_finished(0)
    assert permission.is_granted() is False
