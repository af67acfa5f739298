from .main_window import MainWindow
from .overlay_surface import QtDisplaySurface
from .widget import TemperatureOverlayWidget

__all__ = ["MainWindow", "QtDisplaySurface", "TemperatureOverlayWidget"]
