"""
User-facing strings for the main window, tray icon and dialogs.
"""

from typing import Final

class StringConstants:
    """English UI strings. Every attribute must be a non-empty string."""
    MAIN_WINDOW_TITLE: Final[str] = "Temperature Overlay"
    CARD_TITLE: Final[str] = "Device Temperature"
    CARD_SOURCE_HINT: Final[str] = "Source: hardware sensors. Some devices may not report a value."
    SCREEN_UNAVAILABLE_TEXT: Final[str] = "Temperature: unavailable"
    SCREEN_VALUE_PREFIX: Final[str] = "Temperature:"
    HIDE_TEMPERATURE_BUTTON: Final[str] = "Hide temperature"
    SHOW_TEMPERATURE_BUTTON: Final[str] = "Show temperature"
    HIDDEN_HINT: Final[str] = "Temperature is hidden. (Polling slows down to save power.)"

    OVERLAY_SECTION_TITLE: Final[str] = "Always visible overlay (over other apps)"
    PERMISSION_REQUIRED_HINT: Final[str] = "Permission required: allow the overlay to be displayed over other apps."
    GRANT_PERMISSION_BUTTON: Final[str] = "Grant overlay permission"
    START_OVERLAY_BUTTON: Final[str] = "Start overlay"
    STOP_OVERLAY_BUTTON: Final[str] = "Stop overlay"
    OVERLAY_RUNNING_STATUS: Final[str] = "Overlay running."
    OVERLAY_STOPPED_STATUS: Final[str] = "Overlay stopped."
    CAPABILITY_DENIED_MESSAGE: Final[str] = "The overlay cannot be started until permission is granted."
    OVERLAY_START_FAILED_MESSAGE: Final[str] = "The overlay window could not be created."

    PERMISSION_DIALOG_TITLE: Final[str] = "Display over other apps"
    PERMISSION_DIALOG_TEXT: Final[str] = (
        "Allow Temperature Overlay to show a small always-on-top window over other applications?"
    )
    PERMISSION_UNSUPPORTED_TEXT: Final[str] = (
        "This display server does not let applications position always-on-top windows."
    )

    TRAY_TOOLTIP: Final[str] = "Temperature overlay running"
    TRAY_MESSAGE_TITLE: Final[str] = "Temperature overlay running"
    TRAY_MESSAGE_TEXT: Final[str] = "Overlay is active. Return to the app to stop it."
    TRAY_STOP_ITEM: Final[str] = "Stop overlay"
    TRAY_EXIT_ITEM: Final[str] = "Exit"
    ERROR_WINDOW_TITLE: Final[str] = "Application Error"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"StringConstants.{attr_name} must be a non-empty string.")

# Singleton instance for easy access
strings = StringConstants()
