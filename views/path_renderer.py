"""
Path Renderer.

Renders a PathSpec and its marker overlay with QPainter. Used by the
drawing canvas; kept separate so the conversion to QPainterPath can be
used without a widget.
"""

from typing import List

from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import QPainter, QColor, QPen, QBrush, QPainterPath, QPolygonF

from models.geometry import Point
from models.path import PathCommand, PathCommandType
from services.handle_markers import Marker, MarkerKind, MarkerOverlay
from services.settings_manager import CanvasSettings


def _qpoint(p: Point) -> QPointF:
    return QPointF(p.x, p.y)


class PathRenderer:
    """Static helpers for drawing paths and markers."""

    CONTROL_CORNER_RADIUS = 2.0

    @staticmethod
    def to_painter_path(commands: List[PathCommand]) -> QPainterPath:
        """Convert a PathSpec to a QPainterPath."""
        path = QPainterPath()
        for command in commands:
            kind = command.command_type
            if kind == PathCommandType.MOVE_TO:
                path.moveTo(_qpoint(command.to))
            elif kind == PathCommandType.LINE_TO:
                path.lineTo(_qpoint(command.to))
            elif kind == PathCommandType.QUAD_TO:
                path.quadTo(_qpoint(command.control1), _qpoint(command.to))
            elif kind == PathCommandType.CUBIC_TO:
                path.cubicTo(_qpoint(command.control1), _qpoint(command.control2),
                             _qpoint(command.to))
        return path

    @staticmethod
    def draw_path(painter: QPainter, commands: List[PathCommand], settings: CanvasSettings):
        """Stroke the path."""
        painter.save()
        pen = QPen(QColor(settings.stroke_color), settings.stroke_width)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(PathRenderer.to_painter_path(commands))
        painter.restore()

    @staticmethod
    def draw_overlay(painter: QPainter, overlay: MarkerOverlay, settings: CanvasSettings):
        """Draw guide lines, then markers in overlay order."""
        painter.save()

        painter.setPen(QPen(QColor(settings.guide_color), 1))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        for guide in overlay.guides:
            painter.drawPolyline(QPolygonF([_qpoint(v) for v in guide.vertices]))

        for marker in overlay.markers:
            PathRenderer._draw_marker(painter, marker, settings)

        painter.restore()

    @staticmethod
    def _draw_marker(painter: QPainter, marker: Marker, settings: CanvasSettings):
        painter.setPen(QPen(QColor(settings.marker_stroke), 1))
        painter.setBrush(QBrush(QColor(settings.marker_fill)))

        if marker.kind == MarkerKind.ANCHOR:
            # 2px padding inside the marker frame
            size = settings.marker_size - 4
            rect = QRectF(marker.position.x - size / 2, marker.position.y - size / 2, size, size)
            painter.drawEllipse(rect)
        else:
            # 4px padding
            size = settings.marker_size - 8
            rect = QRectF(marker.position.x - size / 2, marker.position.y - size / 2, size, size)
            radius = PathRenderer.CONTROL_CORNER_RADIUS
            painter.drawRoundedRect(rect, radius, radius)
