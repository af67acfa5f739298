"""
TempOverlay: an always-on-top, draggable device temperature widget.
"""

from tempoverlay.constants import app as _app

__version__ = _app.VERSION
