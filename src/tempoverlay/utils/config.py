"""
Configuration management for TempOverlay.

Settings live in a small JSON document in the per-user application data
directory. Every load is merged over the defaults and validated key by key, so
a hand-edited or partially written file can never put the application into an
invalid state. Writes go through a temporary file in the same directory and
are moved into place.

The same module owns logging setup, because the log file sits next to the
configuration file.
"""

import os
import json
import logging
import logging.handlers
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .helpers import get_app_data_path
from tempoverlay import constants

REDACTED_PATH = "<REDACTED_PATH>"


def _redactable_paths() -> List[str]:
    """User-identifying directories, longest first, ignoring roots like '/' or 'C:\\'."""
    candidates = {os.path.expanduser("~"), tempfile.gettempdir()}
    paths = {os.path.normcase(os.path.normpath(p)) for p in candidates if p and len(p) > 3}
    return sorted(paths, key=len, reverse=True)


class ObfuscatingFormatter(logging.Formatter):
    """
    Formatter that replaces the user's home and temp directories with a
    placeholder, tracebacks included.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._patterns = [re.compile(re.escape(p), re.IGNORECASE) for p in _redactable_paths()]

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        for pattern in self._patterns:
            text = pattern.sub(REDACTED_PATH, text)
        return text


class ConfigError(Exception):
    """Raised when the configuration cannot be read or written."""


class ConfigManager:
    """
    Loads, validates and persists TempOverlay's settings.

    Args:
        config_path: Location of the JSON file. Defaults to the file in the
            per-user application data directory.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        self.config_path = Path(config_path or self.base_dir() / constants.config.defaults.CONFIG_FILENAME)
        self.logger = logging.getLogger("TempOverlay.Config")
        self._last_config: Optional[Dict[str, Any]] = None


    # --- Paths and logging ---

    @classmethod
    def base_dir(cls) -> Path:
        try:
            return get_app_data_path()
        except OSError as e:
            raise ConfigError(f"Application data directory is unavailable: {e}") from e


    @classmethod
    def get_log_file_path(cls) -> Path:
        return cls.base_dir() / constants.logs.LOG_FILENAME


    @classmethod
    def setup_logging(cls) -> None:
        """
        Attaches a rotating file handler and a console handler to the
        application's root logger. Production mode (see
        `constants.app.ENV_VAR_PROD_MODE`) raises both thresholds.

        Falls back to a basic console configuration if the log file cannot be
        opened, so logging never prevents startup.
        """
        production = os.environ.get(constants.app.ENV_VAR_PROD_MODE, "").lower() == "true"
        file_level = constants.logs.PRODUCTION_LOG_LEVEL if production else constants.logs.FILE_LOG_LEVEL
        console_level = constants.logs.PRODUCTION_LOG_LEVEL if production else constants.logs.CONSOLE_LOG_LEVEL

        app_logger = logging.getLogger(constants.app.APP_NAME)
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                cls.get_log_file_path(),
                maxBytes=constants.logs.MAX_LOG_SIZE,
                backupCount=constants.logs.LOG_BACKUP_COUNT,
                encoding="utf-8",
                delay=True,
            )
        except (ConfigError, OSError) as e:
            logging.basicConfig(level=logging.ERROR)
            logging.error("Failed to initialize file logging, falling back to basic console: %s", e)
            return

        file_handler.setLevel(file_level)
        file_handler.setFormatter(ObfuscatingFormatter(constants.logs.LOG_FORMAT, datefmt=constants.logs.LOG_DATE_FORMAT))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(constants.logs.CONSOLE_FORMAT))

        app_logger.handlers.clear()
        app_logger.setLevel(logging.DEBUG)
        app_logger.addHandler(file_handler)
        app_logger.addHandler(console_handler)
        app_logger.info("Logging initialized. Production mode: %s", production)


    # --- Validation ---

    @staticmethod
    def defaults() -> Dict[str, Any]:
        """A fresh, independently mutable copy of the default settings."""
        config = dict(constants.config.defaults.DEFAULT_CONFIG)
        config["sensor_keywords"] = list(config["sensor_keywords"])
        return config


    def _validate_boolean(self, key: str, value: Any, default: bool) -> bool:
        if isinstance(value, bool):
            return value
        self.logger.warning(constants.config.messages.INVALID_BOOLEAN.format(key=key, value=value, default=default))
        return default


    def _validate_keywords(self, value: Any) -> List[str]:
        """A non-empty list of non-empty strings, normalized to lower case."""
        if isinstance(value, list) and value and all(isinstance(k, str) and k.strip() for k in value):
            return [k.strip().lower() for k in value]
        self.logger.warning(constants.config.messages.INVALID_KEYWORDS.format(value=value))
        return list(constants.config.defaults.DEFAULT_SENSOR_KEYWORDS)


    def _validate_config(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        """Returns exactly the known keys, each valid, taking defaults where needed."""
        defaults = constants.config.defaults.DEFAULT_CONFIG
        unknown = sorted(set(raw) - set(defaults))
        if unknown:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(unknown))

        validated = self.defaults()
        for key in constants.config.defaults.BOOLEAN_KEYS:
            if key in raw:
                validated[key] = self._validate_boolean(key, raw[key], defaults[key])
        if "sensor_keywords" in raw:
            validated["sensor_keywords"] = self._validate_keywords(raw["sensor_keywords"])
        return validated


    # --- Persistence ---

    def _backup_corrupt_file(self) -> None:
        backup = self.config_path.with_name(f"{self.config_path.name}.corrupt")
        try:
            shutil.move(self.config_path, backup)
            self.logger.info("Corrupt configuration moved to %s", backup)
        except OSError:
            self.logger.exception("Failed to back up corrupt config file.")


    def load(self) -> Dict[str, Any]:
        """
        Reads and validates the configuration file.

        A missing, corrupt or non-object file is replaced with the defaults.

        Raises:
            ConfigError: The file exists but cannot be read.
        """
        if not self.config_path.exists():
            self.logger.info("Configuration file not found. Creating with default settings.")
            return self.reset_to_defaults()

        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError:
            self.logger.error("Configuration file is corrupt. Backing it up and using defaults.")
            self._backup_corrupt_file()
            return self.reset_to_defaults()
        except OSError as e:
            self.logger.critical("OS error reading config file %s: %s", self.config_path, e)
            raise ConfigError(f"Cannot read configuration file {self.config_path}: {e}") from e

        if not isinstance(raw, dict):
            self.logger.error("Configuration root is not an object. Using defaults.")
            return self.reset_to_defaults()

        config = self._validate_config(raw)
        self._last_config = dict(config)
        return config


    def save(self, config: Dict[str, Any]) -> None:
        """
        Validates and writes the configuration. Skipped when nothing changed
        since the last load or save.

        Raises:
            ConfigError: The file could not be written.
        """
        validated = self._validate_config(config)
        if validated == self._last_config:
            self.logger.debug("Skipping save, configuration is unchanged.")
            return

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile("w", delete=False, dir=self.config_path.parent,
                                             encoding="utf-8", suffix=".tmp") as tmp:
                json.dump(validated, tmp, indent=4)
            shutil.move(tmp.name, self.config_path)
        except OSError as e:
            self.logger.error("Failed to save configuration to %s: %s", self.config_path, e)
            raise ConfigError(f"Failed to save configuration to {self.config_path}: {e}") from e

        self._last_config = dict(validated)
        self.logger.debug("Configuration saved to %s", self.config_path)


    def reset_to_defaults(self) -> Dict[str, Any]:
        self.logger.info("Resetting configuration to default values.")
        config = self.defaults()
        self.save(config)
        return config
