"""Views package."""

from .path_renderer import PathRenderer
from .drawing_canvas import DrawingCanvas
from .main_window import MainWindow

__all__ = [
    "PathRenderer",
    "DrawingCanvas",
    "MainWindow",
]
