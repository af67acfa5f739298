"""
Unit tests for the validated constant groups.
"""

import pytest

from tempoverlay import constants
from tempoverlay.constants.strings import StringConstants


def test_sampling_intervals():
    assert constants.timers.OVERLAY_SAMPLE_INTERVAL_MS == 5000
    assert constants.timers.SCREEN_VISIBLE_INTERVAL_MS == 5000
    assert constants.timers.SCREEN_HIDDEN_INTERVAL_MS == 30000


def test_gesture_thresholds():
    assert constants.gesture.DRAG_THRESHOLD_PX == 8
    assert constants.gesture.TAP_TIMEOUT_MS == 250


def test_overlay_presentation():
    assert constants.overlay.DEFAULT_POSITION == (30, 120)
    assert constants.overlay.UNAVAILABLE_TEXT == "--.- °C"
    assert constants.overlay.COLLAPSED_GLYPH == "•"


def test_default_config_has_expected_keys():
    assert set(constants.config.defaults.DEFAULT_CONFIG) == {
        "overlay_permission_granted", "temperature_visible",
        "start_overlay_on_launch", "sensor_keywords",
    }


def test_string_validation_rejects_empty_values():
    class BrokenStrings(StringConstants):
        CARD_TITLE = ""

    with pytest.raises(ValueError):
        BrokenStrings()
