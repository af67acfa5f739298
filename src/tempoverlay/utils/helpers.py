"""
Helper utilities for TempOverlay.

This module provides foundational functions for directory management and
temperature formatting used across the application.
"""

import os
import sys
import math
import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from pathlib import Path
from typing import Optional

from tempoverlay import constants

_ONE_DECIMAL = Decimal("0.1")


def get_app_data_path() -> Path:
    """
    Retrieve the per-user application data directory, creating it if needed.

    Uses %APPDATA% on Windows and $XDG_CONFIG_HOME (or ~/.config) elsewhere.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    if sys.platform == "win32":
        base: Optional[str] = os.getenv("APPDATA")
    else:
        base = os.getenv("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    if not base:
        base = os.path.expanduser("~")
        logger.warning("App data environment variable not set, using home directory: %s", base)
    path: Path = Path(base) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        test_file = path / f".tov_write_test_{os.getpid()}"
        with open(test_file, 'w') as f:
            f.write("test")
        test_file.unlink()
        logger.debug("App data path ensured and writable: %s", path)
        return path
    except PermissionError as e:
        logger.error("Permission denied creating/writing to app data directory %s: %s", path, e)
        raise PermissionError(f"Cannot access app data directory: {path}. Please check permissions.") from e
    except OSError as e:
        logger.error("Failed to create or verify app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e


def round_celsius(value: float) -> Optional[Decimal]:
    """
    Round a Celsius reading to one decimal place.

    Rounds half away from zero on the shortest decimal representation of the
    float, so 23.45 becomes 23.5 and 23.449 becomes 23.4 regardless of the
    binary approximation. Returns None for NaN and infinities.

    Examples:
        >>> round_celsius(23.449)
        Decimal('23.4')
        >>> round_celsius(-1.25)
        Decimal('-1.3')
    """
    value = float(value)
    if not math.isfinite(value):
        return None
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits for every integer place plus one decimal.
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        rounded = exact.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        # Avoid rendering "-0.0"
        rounded = abs(rounded)
    return rounded


def _format_celsius(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    rounded = round_celsius(value)
    if rounded is None:
        return None
    return f"{format(rounded, 'f')} {constants.overlay.CELSIUS_SUFFIX}"


def format_widget_temperature(value: Optional[float]) -> str:
    """Formats a reading for the overlay widget, e.g. '23.4 °C' or '--.- °C'."""
    text = _format_celsius(value)
    return text if text is not None else constants.overlay.UNAVAILABLE_TEXT


def format_screen_temperature(value: Optional[float]) -> str:
    """Formats a reading for the main window, e.g. 'Temperature: 23.4 °C'."""
    text = _format_celsius(value)
    if text is None:
        return constants.strings.SCREEN_UNAVAILABLE_TEXT
    return f"{constants.strings.SCREEN_VALUE_PREFIX} {text}"
