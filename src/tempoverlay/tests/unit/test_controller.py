"""
Unit tests for the OverlayController command surface.
"""

from unittest.mock import MagicMock

import pytest

from tempoverlay.core.controller import OverlayController
from tempoverlay.core.errors import CapabilityDeniedError, OverlayAttachError


@pytest.fixture
def service():
    service = MagicMock()
    service.is_active = False
    return service


@pytest.fixture
def permission():
    permission = MagicMock()
    permission.is_granted.return_value = True
    return permission


@pytest.fixture
def controller(service, permission):
    return OverlayController(service, permission)


def test_start_overlay_activates_service(controller, service):
    assert controller.start_overlay() is True
    service.activate.assert_called_once()
    assert controller.last_error is None


def test_start_overlay_reports_capability_denied(controller, service):
    service.activate.side_effect = CapabilityDeniedError("not granted")
    assert controller.start_overlay() is False
    assert controller.last_error == "not granted"


def test_start_overlay_reports_attach_failure(controller, service):
    service.activate.side_effect = OverlayAttachError("no display")
    assert controller.start_overlay() is False
    assert controller.last_error == "no display"


def test_successful_start_clears_previous_error(controller, service):
    service.activate.side_effect = [OverlayAttachError("first"), None]
    controller.start_overlay()
    controller.start_overlay()
    assert controller.last_error is None


def test_stop_overlay_deactivates_service(controller, service):
    controller.stop_overlay()
    controller.stop_overlay()
    assert service.deactivate.call_count == 2


def test_permission_queries_are_delegated(controller, permission):
    assert controller.can_draw_overlays() is True
    parent = object()
    controller.request_permission(parent)
    permission.request_grant.assert_called_once_with(parent)


def test_is_running_follows_service(controller, service):
    assert controller.is_running is False
    service.is_active = True
    assert controller.is_running is True
