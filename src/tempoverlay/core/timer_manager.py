"""
Timer management module for TempOverlay.

This module defines the `SamplingScheduler` class, a restartable periodic
sampling loop driven by a single-shot QTimer. Key responsibilities include:
- Calling an injected sampler and handing each sample to an `on_sample` callback.
- Re-arming itself with the interval returned by an injected interval provider,
  re-evaluated on every tick so state changes apply without a restart.
- Providing an immediate, out-of-cadence resample.
- Stopping promptly: a stopped scheduler never calls `on_sample` again.

The same class backs both the main window (interval depends on whether the
temperature panel is visible) and the overlay widget (constant interval,
rendering suppressed while collapsed); only the strategies differ.
"""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer

from tempoverlay.utils.timer_utils import clamp_interval, create_timer, cleanup_timer

SampleValue = Optional[float]
Sampler = Callable[[], SampleValue]
IntervalProvider = Callable[[], int]
SampleCallback = Callable[[SampleValue], None]


class SamplingScheduler(QObject):
    """
    Runs `sampler -> on_sample -> wait interval_provider()` until stopped.

    Ticks run on the thread owning the scheduler (the GUI thread) and are
    strictly sequential: the next wait is only armed after `on_sample` returns.
    """

    def __init__(self, name: str = "sampling", parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.name = name
        self.logger = logging.getLogger(f"TempOverlay.SamplingScheduler.{name}")

        self._sampler: Optional[Sampler] = None
        self._interval_provider: Optional[IntervalProvider] = None
        self._on_sample: Optional[SampleCallback] = None
        self._running: bool = False
        self._interval_ms: int = 0
        self._timer: Optional[QTimer] = create_timer(self, self._on_timeout, 0, single_shot=True)


    @property
    def is_running(self) -> bool:
        return self._running


    @property
    def interval_ms(self) -> int:
        """The interval the pending wait was armed with (0 before the first tick)."""
        return self._interval_ms


    def start(self, sampler: Sampler, interval_provider: IntervalProvider, on_sample: SampleCallback) -> None:
        """
        Starts the loop, taking the first sample immediately.

        Starting a running scheduler restarts it with the new strategies.
        """
        if self._timer is None:
            raise RuntimeError(f"Scheduler '{self.name}' has been cleaned up and cannot be restarted.")
        if self._running:
            self.logger.debug("Restarting running scheduler.")
            self.stop()

        self._sampler = sampler
        self._interval_provider = interval_provider
        self._on_sample = on_sample
        self._running = True
        self.logger.info("Sampling scheduler '%s' started.", self.name)
        self._tick()


    def stop(self) -> None:
        """Cancels the pending wait. No `on_sample` call happens after this returns."""
        if not self._running:
            return
        self._running = False
        if self._timer is not None and self._timer.isActive():
            self._timer.stop()
        self._sampler = None
        self._interval_provider = None
        self._on_sample = None
        self.logger.info("Sampling scheduler '%s' stopped.", self.name)


    def sample_now(self) -> SampleValue:
        """
        Samples and applies a value right away, outside the regular cadence.

        The pending wait is left untouched. Does nothing (and returns None)
        when the scheduler is not running.
        """
        if not self._running:
            self.logger.debug("Immediate sample requested while stopped; ignored.")
            return None
        value = self._read_sample()
        self._apply(value)
        return value


    def _on_timeout(self) -> None:
        if not self._running:
            return
        self._tick()


    def _tick(self) -> None:
        self._apply(self._read_sample())
        # on_sample may have stopped us (e.g. an overlay torn down from the callback)
        if not self._running or self._interval_provider is None:
            return

        try:
            self._interval_ms = clamp_interval(int(self._interval_provider()))
        except (TypeError, ValueError) as e:
            self.logger.error("Invalid interval from provider: %s. Stopping scheduler.", e)
            self.stop()
            return
        self._timer.start(self._interval_ms)
        self.logger.debug("Next sample in %dms.", self._interval_ms)


    def _apply(self, value: SampleValue) -> None:
        if not self._running or self._on_sample is None:
            return
        try:
            self._on_sample(value)
        except Exception as e:
            # An exception escaping a Qt slot would abort the application.
            self.logger.error("Sample callback failed: %s", e, exc_info=True)


    def _read_sample(self) -> SampleValue:
        if self._sampler is None:
            return None
        try:
            return self._sampler()
        except Exception as e:
            # Treated like a device that reports nothing.
            self.logger.error("Sampler failed, treating reading as unavailable: %s", e, exc_info=True)
            return None


    def cleanup(self) -> None:
        """Stops the loop and releases the underlying timer."""
        self.stop()
        if self._timer is not None:
            cleanup_timer(self._timer)
            self._timer = None
        self.logger.debug("Scheduler '%s' cleanup completed.", self.name)
