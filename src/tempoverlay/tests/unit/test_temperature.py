"""
Unit tests for the TemperatureRepository psutil-backed source.
"""

from collections import namedtuple
from unittest.mock import patch

import psutil
import pytest

from tempoverlay.core.temperature import TemperatureRepository

shwtemp = namedtuple("shwtemp", ["label", "current", "high", "critical"])

SENSORS = {
    "coretemp": [shwtemp("Package id 0", 55.0, 80.0, 100.0)],
    "BAT0": [shwtemp("", 31.5, None, None)],
    "nvme": [shwtemp("Composite", 40.0, 80.0, 90.0)],
}


@pytest.fixture
def repository():
    return TemperatureRepository()


def test_battery_sensor_is_preferred(repository):
    with patch("tempoverlay.core.temperature.psutil.sensors_temperatures", return_value=SENSORS, create=True):
        assert repository.read() == 31.5


def test_falls_back_to_cpu_sensor(repository):
    sensors = {k: v for k, v in SENSORS.items() if k != "BAT0"}
    with patch("tempoverlay.core.temperature.psutil.sensors_temperatures", return_value=sensors, create=True):
        assert repository.read() == 55.0


def test_configured_keywords_change_the_order():
    repository = TemperatureRepository({"sensor_keywords": ["nvme"]})
    with patch("tempoverlay.core.temperature.psutil.sensors_temperatures", return_value=SENSORS, create=True):
        assert repository.read() == 40.0


def test_implausible_readings_are_skipped(repository):
    sensors = {"BAT0": [shwtemp("", -273.0, None, None), shwtemp("", float("nan"), None, None),
                        shwtemp("", 29.0, None, None)]}
    with patch("tempoverlay.core.temperature.psutil.sensors_temperatures", return_value=sensors, create=True):
        assert repository.read() == 29.0


def test_no_matching_sensor_is_unavailable(repository):
    with patch("tempoverlay.core.temperature.psutil.sensors_temperatures", return_value={"nvme": []}, create=True):
        assert repository.read() is None


def test_access_denied_is_unavailable(repository):
    with patch("tempoverlay.core.temperature.psutil.sensors_temperatures",
               side_effect=psutil.AccessDenied(), create=True):
        assert repository.read() is None


def test_unsupported_platform_is_unavailable(repository):
    with patch("tempoverlay.core.temperature.psutil") as mock_psutil:
        del mock_psutil.sensors_temperatures
        assert repository.read() is None


def test_outage_is_logged_once(repository):
    with patch("tempoverlay.core.temperature.psutil.sensors_temperatures", return_value={}, create=True):
        with patch.object(repository.logger, "warning") as mock_warning:
            repository.read()
            repository.read()
    mock_warning.assert_called_once()


def test_keywords_follow_the_shared_config():
    config = {"sensor_keywords": ["battery"]}
    repository = TemperatureRepository(config)
    config["sensor_keywords"] = ["nvme"]
    with patch("tempoverlay.core.temperature.psutil.sensors_temperatures", return_value=SENSORS, create=True):
        assert repository.read() == 40.0
