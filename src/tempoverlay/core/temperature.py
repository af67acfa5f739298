"""
Temperature source for TempOverlay.

Reads the device temperature through psutil's hardware sensor API. Sensor
groups are searched in the order of the configured keywords (battery sensors
first by default), and the first usable reading wins. Platforms without sensor
support (psutil only exposes temperatures on Linux and FreeBSD) simply report
the reading as unavailable.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Protocol, Sequence

import psutil

from tempoverlay import constants

logger = logging.getLogger("TempOverlay.TemperatureRepository")

# Readings outside this range are sensor glitches, not temperatures.
_PLAUSIBLE_RANGE_C = (-60.0, 200.0)


class TemperatureSource(Protocol):
    """Anything that can report a Celsius reading, or None when unavailable."""

    def read(self) -> Optional[float]:
        ...


class TemperatureRepository:
    """
    Reads the device temperature via `psutil.sensors_temperatures()`.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.logger = logger
        self.config = config or {}
        self._reported_unavailable = False

    @property
    def keywords(self) -> List[str]:
        return self.config.get("sensor_keywords", constants.config.defaults.DEFAULT_SENSOR_KEYWORDS)

    def read(self) -> Optional[float]:
        """Returns the current temperature in Celsius, or None when no sensor reports one."""
        sensors = self._fetch_sensors()
        if sensors:
            for keyword in self.keywords:
                for name, entries in sensors.items():
                    if keyword in name.lower():
                        value = self._first_plausible(entries)
                        if value is not None:
                            if self._reported_unavailable:
                                self.logger.info("Temperature sensor '%s' is reporting again.", name)
                                self._reported_unavailable = False
                            return value

        if not self._reported_unavailable:
            # Logged once per outage; read() runs every few seconds.
            self.logger.warning("No temperature sensor matching %s is available.", self.keywords)
            self._reported_unavailable = True
        return None

    def _fetch_sensors(self) -> Dict[str, Sequence[Any]]:
        """Fetches raw sensor groups from psutil; empty where unsupported."""
        read_sensors = getattr(psutil, "sensors_temperatures", None)
        if read_sensors is None:
            return {}
        try:
            return read_sensors(fahrenheit=False) or {}
        except (psutil.AccessDenied, OSError) as e:
            self.logger.error("Permission denied reading temperature sensors: %s", e)
            return {}
        except Exception as e:
            self.logger.error("Error reading temperature sensors: %s", e, exc_info=True)
            return {}

    @staticmethod
    def _first_plausible(entries: Sequence[Any]) -> Optional[float]:
        low, high = _PLAUSIBLE_RANGE_C
        for entry in entries:
            current = getattr(entry, "current", None)
            if current is None:
                continue
            try:
                value = float(current)
            except (TypeError, ValueError):
                continue
            if math.isfinite(value) and low <= value <= high:
                return value
        return None
