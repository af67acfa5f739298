"""
Logging configuration constants: file name, formats, levels and rotation.
"""
import logging
from typing import Final

_LEVELS = (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL)


class LogConstants:
    """Settings consumed by `ConfigManager.setup_logging`."""
    LOG_FILENAME: Final[str] = "TempOverlay_Log.log"
    LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s (%(module)s:%(lineno)d): %(message)s"
    CONSOLE_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"
    LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    FILE_LOG_LEVEL: Final[int] = logging.DEBUG
    CONSOLE_LOG_LEVEL: Final[int] = logging.INFO
    PRODUCTION_LOG_LEVEL: Final[int] = logging.WARNING

    # Rotate at 10 MB, keeping three old files.
    MAX_LOG_SIZE: Final[int] = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: Final[int] = 3

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.LOG_FILENAME.endswith(".log"):
            raise ValueError("LOG_FILENAME must end with '.log'")
        if self.MAX_LOG_SIZE <= 0 or self.LOG_BACKUP_COUNT < 0:
            raise ValueError("Log rotation settings must be positive")
        for name in ("FILE_LOG_LEVEL", "CONSOLE_LOG_LEVEL", "PRODUCTION_LOG_LEVEL"):
            if getattr(self, name) not in _LEVELS:
                raise ValueError(f"{name} is not a standard logging level")


logs = LogConstants()
