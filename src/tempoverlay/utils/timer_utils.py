"""
Timer utilities for TempOverlay.

Provides reusable functions for timer management, including interval clamping,
timer creation, and cleanup. These utilities ensure consistent timer handling
with proper error management and logging.

For the restartable sampling loop itself, use the `SamplingScheduler` class in
`timer_manager.py`.
"""

from typing import Optional, Callable
import logging
from PyQt6.QtCore import QTimer, QObject

from tempoverlay import constants

logger = logging.getLogger("TempOverlay.TimerUtils")


def clamp_interval(interval_ms: int) -> int:
    """
    Clamp a requested interval to the minimum allowed by `constants.timers`.

    Args:
        interval_ms: The requested interval in milliseconds.

    Returns:
        int: The interval, raised to `MINIMUM_INTERVAL_MS` if it was lower.

    Raises:
        ValueError: If `interval_ms` is negative.

    Examples:
        >>> clamp_interval(5000)
        5000
        >>> clamp_interval(10)
        100
    """
    if interval_ms < 0:
        logger.error("Interval cannot be negative: %d", interval_ms)
        raise ValueError(f"Interval cannot be negative: {interval_ms}")
    minimum = constants.timers.MINIMUM_INTERVAL_MS
    if interval_ms < minimum:
        logger.warning("Requested interval %dms is below minimum (%dms). Using minimum.", interval_ms, minimum)
        return minimum
    return int(interval_ms)


def create_timer(parent: QObject, callback: Callable[[], None], interval: int, single_shot: bool = False) -> QTimer:
    """
    Build a stopped QTimer owned by `parent` that calls `callback` on timeout.

    Raises:
        ValueError: If `callback` is not callable or `interval` is negative.
    """
    if not callable(callback):
        raise ValueError(f"Callback must be callable, got {type(callback)}")
    if interval < 0:
        raise ValueError(f"Interval cannot be negative: {interval}")

    timer = QTimer(parent)
    timer.setSingleShot(single_shot)
    timer.setInterval(interval)
    timer.timeout.connect(callback)
    logger.debug("Timer created (interval=%dms, single_shot=%s)", interval, single_shot)
    return timer


def cleanup_timer(timer: Optional[QTimer]) -> None:
    """Stop a timer, drop its connections and schedule it for deletion. None is ignored."""
    if timer is None:
        return
    timer.stop()
    try:
        timer.timeout.disconnect()
    except TypeError:
        # Nothing was connected.
        pass
    timer.deleteLater()
    logger.debug("Timer released")
