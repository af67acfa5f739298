"""
Constants for application configuration defaults and constraints.
"""
from typing import Final, Dict, Any, List

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_BOOLEAN: Final[str] = "Invalid {key} '{value}', resetting to boolean default '{default}'"
    INVALID_KEYWORDS: Final[str] = "Invalid sensor_keywords value '{value}', resetting to defaults"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all application settings."""
    DEFAULT_PERMISSION_GRANTED: Final[bool] = False
    DEFAULT_TEMPERATURE_VISIBLE: Final[bool] = True
    DEFAULT_START_OVERLAY_ON_LAUNCH: Final[bool] = False
    # Sensor group names reported by psutil, searched in order. Battery first.
    DEFAULT_SENSOR_KEYWORDS: Final[List[str]] = [
        "battery", "bat", "acpitz", "coretemp", "k10temp", "cpu_thermal", "soc_thermal",
    ]

    CONFIG_FILENAME: Final[str] = "TempOverlay_Config.json"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "overlay_permission_granted": DEFAULT_PERMISSION_GRANTED,
        "temperature_visible": DEFAULT_TEMPERATURE_VISIBLE,
        "start_overlay_on_launch": DEFAULT_START_OVERLAY_ON_LAUNCH,
        "sensor_keywords": DEFAULT_SENSOR_KEYWORDS,
    }

    BOOLEAN_KEYS: Final[List[str]] = [
        "overlay_permission_granted", "temperature_visible", "start_overlay_on_launch",
    ]

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.CONFIG_FILENAME.endswith(".json"):
            raise ValueError("CONFIG_FILENAME must be a .json file")
        if not self.DEFAULT_SENSOR_KEYWORDS:
            raise ValueError("DEFAULT_SENSOR_KEYWORDS must not be empty")
        expected = set(self.BOOLEAN_KEYS) | {"sensor_keywords"}
        if set(self.DEFAULT_CONFIG) != expected:
            raise ValueError(
                f"DEFAULT_CONFIG keys {sorted(self.DEFAULT_CONFIG)} do not match the validated keys {sorted(expected)}"
            )


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()


config = ConfigurationConstants()
