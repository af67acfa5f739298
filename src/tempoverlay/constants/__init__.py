"""
Provides centralized, immutable constants for the TempOverlay application.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from tempoverlay import constants

    # Access application metadata
    print(constants.app.VERSION)

    # Access a user-facing string
    print(constants.strings.START_OVERLAY_BUTTON)

    # Access a sampling interval in milliseconds
    timer.start(constants.timers.OVERLAY_SAMPLE_INTERVAL_MS)
"""

from .app import app
from .config import config
from .gesture import gesture
from .logs import logs
from .overlay import overlay
from .strings import strings
from .timeouts import timeouts
from .timers import timers

__all__ = [
    "app",
    "config",
    "gesture",
    "logs",
    "overlay",
    "strings",
    "timeouts",
    "timers",
]
