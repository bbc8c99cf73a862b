"""
Drawing Canvas.

QWidget that forms the rendering/input boundary of the editor:
- translates left-button mouse press/move/release into session events
- Escape cancels the active gesture
- repaints the preview path and the marker overlay on every change

Click to add a corner point, press and drag to add a smooth point with
a handle, drag existing markers to reshape the path.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QKeyEvent, QMouseEvent, QPainter
from PyQt6.QtWidgets import QWidget, QSizePolicy

from models.drawing import Drawing
from models.geometry import Point
from services.live_edit import EditState, LiveEditSession
from services.settings_manager import CanvasSettings
from .path_renderer import PathRenderer

logger = logging.getLogger(__name__)


class DrawingCanvas(QWidget):
    """
    Interactive canvas for drawing and editing a single path.

    Signals:
        drawingChanged(int): Emitted with the anchor count after a commit
            or a marker drag
    """

    drawingChanged = pyqtSignal(int)

    def __init__(self, settings: Optional[CanvasSettings] = None,
                 drawing: Optional[Drawing] = None, parent=None):
        super().__init__(parent)
        self.settings = settings or CanvasSettings()
        self.session = LiveEditSession(
            drawing=drawing,
            drag_threshold=self.settings.drag_threshold,
            hit_radius=self.settings.hit_radius,
            markers_enabled=self.settings.show_markers,
            parent=self,
        )

        self.session.previewChanged.connect(self.update)
        self.session.anchorCommitted.connect(self._on_drawing_changed)
        self.session.drawingModified.connect(self._on_drawing_changed)

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMouseTracking(False)
        self.setCursor(Qt.CursorShape.CrossCursor)

    @property
    def drawing(self) -> Drawing:
        return self.session.drawing

    def set_markers_visible(self, visible: bool):
        """Show or hide the handle overlay (hidden markers cannot be dragged)."""
        self.settings.show_markers = visible
        self.session.markers_enabled = visible

    def _on_drawing_changed(self, *args):
        self.drawingChanged.emit(len(self.session.drawing))

    @staticmethod
    def _event_point(event: QMouseEvent) -> Point:
        pos = event.position()
        return Point(pos.x(), pos.y())

    # =========================================================================
    # Qt event handlers
    # =========================================================================

    def paintEvent(self, event):
        """Paint background, path and overlay."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.fillRect(self.rect(), QColor(self.settings.background_color))
        PathRenderer.draw_path(painter, self.session.path(), self.settings)
        PathRenderer.draw_overlay(painter, self.session.markers(), self.settings)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        state = self.session.pointer_down(self._event_point(event))
        if state == EditState.MOVING_MARKER:
            self.setCursor(Qt.CursorShape.SizeAllCursor)
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        if not (event.buttons() & Qt.MouseButton.LeftButton):
            return
        self.session.pointer_move(self._event_point(event))
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self.session.pointer_up(self._event_point(event))
        self.setCursor(Qt.CursorShape.CrossCursor)
        event.accept()

    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == Qt.Key.Key_Escape and self.session.is_active:
            logger.debug("Gesture cancelled")
            self.session.cancel()
            self.setCursor(Qt.CursorShape.CrossCursor)
            event.accept()
            return
        super().keyPressEvent(event)
