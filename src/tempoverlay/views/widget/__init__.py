from .main import TemperatureOverlayWidget

__all__ = ["TemperatureOverlayWidget"]
