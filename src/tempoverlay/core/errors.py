"""
Exception hierarchy for the overlay core.

None of these are fatal to the process: callers either refuse the request
(capability denied), log and carry on (stale handle), or report the failure
to the user (attach failure).
"""


class OverlayError(Exception):
    """Base class for all overlay-related errors."""


class CapabilityDeniedError(OverlayError):
    """Activation was attempted without the display-over-other-apps grant."""


class StaleHandleError(OverlayError):
    """An operation targeted a display-surface handle that is no longer attached."""


class OverlayAttachError(OverlayError):
    """The host could not create or attach the overlay widget."""
