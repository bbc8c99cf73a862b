"""
Live Edit Session.

State machine that turns a pointer-event stream into drawing edits.

States:
- IDLE: no pointer pressed
- PRESSED: pointer down on empty canvas, displacement within threshold
- DRAGGING: displacement exceeded the threshold at least once
- MOVING_MARKER: pointer went down on a marker and drags it

While PRESSED or DRAGGING the preview drawing is the committed drawing
plus one synthetic anchor at the gesture start, with a handle at the
pointer once DRAGGING. Releasing the pointer commits that same anchor.
Marker drags mutate the committed drawing directly.

Usage:
    session = LiveEditSession()
    session.pointer_down(Point(0, 0))
    session.pointer_move(Point(10, 10))
    anchor = session.pointer_up(Point(10, 10))
    commands = session.path()
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from models.drawing import Anchor, Drawing
from models.geometry import Point
from models.gesture import (
    DEFAULT_DRAG_THRESHOLD, GestureState, PointerEvent, PointerPhase,
)
from models.path import PathCommand, build_path
from services.handle_markers import (
    MarkerKind, MarkerOverlay, apply_marker_drag, build_markers, hit_test,
)

logger = logging.getLogger(__name__)


DEFAULT_HIT_RADIUS = 7.0


class EditState(Enum):
    """Live edit session states."""
    IDLE = "idle"
    PRESSED = "pressed"
    DRAGGING = "dragging"
    MOVING_MARKER = "moving_marker"


@dataclass
class MarkerDrag:
    """
    A marker grabbed by the pointer.

    grab_offset is marker position minus press position, so the marker
    keeps its offset from the pointer instead of jumping under it.
    """
    anchor_id: str
    kind: MarkerKind
    grab_offset: Point


class LiveEditSession(QObject):
    """
    Merges the committed drawing with the in-flight pointer gesture.

    The preview is recomputed from (committed drawing, latest gesture
    sample) on every access; nothing is cached.

    Signals:
        previewChanged(): Emitted after any event that changes what is drawn
        anchorCommitted(str): Emitted with the id of a newly committed anchor
        drawingModified(): Emitted when a marker drag mutated the drawing
    """

    previewChanged = pyqtSignal()
    anchorCommitted = pyqtSignal(str)
    drawingModified = pyqtSignal()

    def __init__(self, drawing: Optional[Drawing] = None,
                 drag_threshold: float = DEFAULT_DRAG_THRESHOLD,
                 hit_radius: float = DEFAULT_HIT_RADIUS,
                 markers_enabled: bool = True,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self._drawing = drawing if drawing is not None else Drawing()
        self._drag_threshold = drag_threshold
        self._hit_radius = hit_radius
        self._markers_enabled = markers_enabled

        self._state = EditState.IDLE
        self._gesture: Optional[GestureState] = None
        self._marker_drag: Optional[MarkerDrag] = None

    @property
    def drawing(self) -> Drawing:
        """The committed drawing."""
        return self._drawing

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def gesture(self) -> Optional[GestureState]:
        return self._gesture

    @property
    def marker_drag(self) -> Optional[MarkerDrag]:
        return self._marker_drag

    @property
    def is_active(self) -> bool:
        return self._state != EditState.IDLE

    @property
    def drag_threshold(self) -> float:
        return self._drag_threshold

    @drag_threshold.setter
    def drag_threshold(self, value: float):
        self._drag_threshold = value

    @property
    def hit_radius(self) -> float:
        return self._hit_radius

    @hit_radius.setter
    def hit_radius(self, value: float):
        self._hit_radius = value

    @property
    def markers_enabled(self) -> bool:
        return self._markers_enabled

    @markers_enabled.setter
    def markers_enabled(self, enabled: bool):
        self._markers_enabled = enabled
        self.previewChanged.emit()

    # =========================================================================
    # Pointer events
    # =========================================================================

    def handle_event(self, event: PointerEvent):
        """Dispatch a pointer event by phase."""
        if event.phase == PointerPhase.DOWN:
            self.pointer_down(event.position)
        elif event.phase == PointerPhase.MOVE:
            self.pointer_move(event.position)
        elif event.phase == PointerPhase.UP:
            self.pointer_up(event.position)
        elif event.phase == PointerPhase.CANCEL:
            self.cancel()

    def pointer_down(self, position: Point) -> EditState:
        """Start a gesture: grab a marker under the pointer or begin a new anchor."""
        if self.is_active:
            logger.warning(f"Pointer down ignored, gesture already active ({self._state.value})")
            return self._state

        marker = None
        if self._markers_enabled:
            marker = hit_test(self.markers(), position, self._hit_radius)

        if marker is not None:
            self._marker_drag = MarkerDrag(
                anchor_id=marker.anchor_id,
                kind=marker.kind,
                grab_offset=marker.position - position,
            )
            self._set_state(EditState.MOVING_MARKER)
        else:
            self._gesture = GestureState(
                start_location=position,
                threshold=self._drag_threshold,
            )
            self._set_state(EditState.PRESSED)

        self.previewChanged.emit()
        return self._state

    def pointer_move(self, position: Point) -> EditState:
        """Feed the latest pointer sample into the active gesture."""
        if self._state == EditState.IDLE:
            logger.debug("Pointer move ignored, no active gesture")
            return self._state

        if self._state == EditState.MOVING_MARKER:
            self._drag_marker(position)
        else:
            self._gesture.update(position)
            if self._state == EditState.PRESSED and self._gesture.has_dragged:
                self._set_state(EditState.DRAGGING)

        self.previewChanged.emit()
        return self._state

    def pointer_up(self, position: Point) -> Optional[Anchor]:
        """
        End the active gesture.

        Returns:
            The committed anchor for a drawing gesture, None for a marker
            drag or when no gesture was active
        """
        if self._state == EditState.IDLE:
            logger.warning("Pointer up ignored, no active gesture")
            return None

        if self._state == EditState.MOVING_MARKER:
            self._drag_marker(position)
            self._marker_drag = None
            self._set_state(EditState.IDLE)
            self.previewChanged.emit()
            return None

        self._gesture.update(position)
        anchor = self._drawing.append_gesture(self._gesture)
        logger.debug(
            f"Committed anchor {anchor.id} at {anchor.point.to_tuple()}"
            f"{' with handle' if anchor.has_handle else ''}"
        )
        self._gesture = None
        self._set_state(EditState.IDLE)

        self.anchorCommitted.emit(anchor.id)
        self.previewChanged.emit()
        return anchor

    def cancel(self):
        """
        Abort the active gesture.

        An in-flight anchor is discarded. A marker drag stops where it is;
        the edits it already made stay in the drawing.
        """
        if self._state == EditState.IDLE:
            return
        self._gesture = None
        self._marker_drag = None
        self._set_state(EditState.IDLE)
        self.previewChanged.emit()

    # =========================================================================
    # Derived views
    # =========================================================================

    def preview_drawing(self) -> Drawing:
        """Committed drawing plus the in-flight anchor, if any."""
        preview = self._drawing.copy()
        if self._state in (EditState.PRESSED, EditState.DRAGGING):
            preview.append_gesture(self._gesture)
        return preview

    def path(self) -> List[PathCommand]:
        """PathSpec of the preview drawing."""
        return build_path(self.preview_drawing())

    def markers(self) -> MarkerOverlay:
        """Marker overlay of the preview drawing."""
        if not self._markers_enabled:
            return MarkerOverlay()
        return build_markers(self.preview_drawing())

    def _drag_marker(self, position: Point):
        drag = self._marker_drag
        apply_marker_drag(self._drawing, drag.anchor_id, drag.kind, position + drag.grab_offset)
        self.drawingModified.emit()

    def _set_state(self, state: EditState):
        if state != self._state:
            logger.debug(f"Edit state {self._state.value} -> {state.value}")
            self._state = state
