"""
Unit tests for the live edit session.

Tests:
- State transitions (IDLE, PRESSED, DRAGGING, MOVING_MARKER)
- Preview drawing while a gesture is in flight
- Commit on release (tap vs drag)
- Marker drags through the session
- Cancellation and out-of-order events
- Signals
"""

import pytest

from models.geometry import Point
from models.gesture import PointerEvent, PointerPhase
from models.path import PathCommandType
from services.handle_markers import MarkerKind
from services.live_edit import EditState, LiveEditSession
from tests.conftest import tap, drag


class TestStateTransitions:
    """Tests for the gesture state machine."""

    def test_initial_state(self, session):
        assert session.state == EditState.IDLE
        assert session.gesture is None
        assert not session.is_active

    def test_down_enters_pressed(self, session):
        assert session.pointer_down(Point(0, 0)) == EditState.PRESSED
        assert session.gesture.start_location == Point(0, 0)

    def test_small_move_stays_pressed(self, session):
        session.pointer_down(Point(0, 0))
        assert session.pointer_move(Point(0, 0.5)) == EditState.PRESSED

    def test_large_move_enters_dragging(self, session):
        session.pointer_down(Point(0, 0))
        assert session.pointer_move(Point(5, 0)) == EditState.DRAGGING

    def test_dragging_is_sticky(self, session):
        session.pointer_down(Point(0, 0))
        session.pointer_move(Point(5, 0))
        assert session.pointer_move(Point(0, 0)) == EditState.DRAGGING

    def test_up_returns_to_idle(self, session):
        tap(session, Point(0, 0))
        assert session.state == EditState.IDLE
        assert session.gesture is None

    def test_down_on_marker_enters_moving_marker(self, session):
        tap(session, Point(50, 50))
        assert session.pointer_down(Point(52, 49)) == EditState.MOVING_MARKER
        assert session.marker_drag.kind == MarkerKind.ANCHOR


class TestCommit:
    """Tests for committing gestures."""

    def test_tap_commits_plain_anchor(self, session):
        session.pointer_down(Point(0, 0))
        anchor = session.pointer_up(Point(0, 0.5))
        assert anchor.point == Point(0, 0)
        assert anchor.handle is None
        assert session.drawing.anchors == [anchor]

    def test_drag_commits_anchor_with_handle(self, session):
        session.pointer_down(Point(0, 0))
        anchor = session.pointer_up(Point(10, 10))
        assert anchor.point == Point(0, 0)
        assert anchor.handle == Point(10, 10)

    def test_drag_back_to_start_keeps_handle(self, session):
        """Test a gesture that ever crossed the threshold commits a handle."""
        session.pointer_down(Point(0, 0))
        session.pointer_move(Point(10, 0))
        anchor = session.pointer_up(Point(0.5, 0))
        assert anchor.handle == Point(0.5, 0)

    def test_commits_append_in_order(self, session):
        first = tap(session, Point(0, 0))
        second = drag(session, Point(100, 0), Point(120, 20))
        third = tap(session, Point(200, 0))
        assert session.drawing.anchor_ids == [first.id, second.id, third.id]

    def test_custom_threshold(self):
        session = LiveEditSession(drag_threshold=10.0)
        session.pointer_down(Point(0, 0))
        anchor = session.pointer_up(Point(6, 8))
        assert anchor.handle is None

    def test_existing_drawing(self, curve_drawing):
        session = LiveEditSession(drawing=curve_drawing)
        tap(session, Point(400, 400))
        assert session.drawing is curve_drawing
        assert len(curve_drawing) == 5


class TestPreview:
    """Tests for the preview drawing."""

    def test_idle_preview_equals_committed(self, curve_drawing):
        session = LiveEditSession(drawing=curve_drawing)
        preview = session.preview_drawing()
        assert preview.anchors == curve_drawing.anchors
        assert preview is not curve_drawing

    def test_pressed_preview_has_plain_anchor(self, session):
        tap(session, Point(0, 0))
        session.pointer_down(Point(100, 0))
        preview = session.preview_drawing()
        assert len(preview) == 2
        assert preview.anchors[-1].point == Point(100, 0)
        assert preview.anchors[-1].handle is None
        assert len(session.drawing) == 1

    def test_dragging_preview_has_handle_at_pointer(self, session):
        session.pointer_down(Point(100, 0))
        session.pointer_move(Point(110, 10))
        session.pointer_move(Point(120, 20))
        assert session.preview_drawing().anchors[-1].handle == Point(120, 20)
        assert len(session.drawing) == 0

    def test_preview_anchor_keeps_identity(self, session):
        """Test the in-flight anchor keeps its id through commit."""
        session.pointer_down(Point(0, 0))
        preview_id = session.preview_drawing().anchor_ids[-1]
        session.pointer_move(Point(20, 0))
        assert session.preview_drawing().anchor_ids[-1] == preview_id
        anchor = session.pointer_up(Point(20, 0))
        assert anchor.id == preview_id

    def test_preview_path(self, session):
        tap(session, Point(0, 0))
        session.pointer_down(Point(100, 0))
        session.pointer_move(Point(120, 20))
        commands = session.path()
        assert [c.command_type for c in commands] == [
            PathCommandType.MOVE_TO,
            PathCommandType.QUAD_TO,
        ]
        assert commands[1].control1 == Point(80, -20)

    def test_preview_markers_include_in_flight_anchor(self, session):
        session.pointer_down(Point(100, 0))
        session.pointer_move(Point(120, 20))
        kinds = [m.kind for m in session.markers().markers]
        assert kinds == [MarkerKind.CONTROL_A, MarkerKind.CONTROL_B, MarkerKind.ANCHOR]

    def test_preview_does_not_mutate_committed(self, session):
        tap(session, Point(0, 0))
        session.pointer_down(Point(10, 10))
        for _ in range(3):
            session.preview_drawing()
        assert len(session.drawing) == 1


class TestMarkerDrag:
    """Tests for dragging markers through the session."""

    def test_drag_anchor_marker(self, session):
        anchor = drag(session, Point(100, 0), Point(120, 20))
        session.pointer_down(Point(101, 1))
        session.pointer_move(Point(151, 51))
        assert session.pointer_up(Point(201, 1)) is None
        assert anchor.point == Point(200, 0)
        assert anchor.handle == Point(220, 20)
        assert len(session.drawing) == 1

    def test_drag_control_b(self, session):
        anchor = drag(session, Point(100, 0), Point(120, 20))
        session.pointer_down(Point(120, 20))
        session.pointer_up(Point(100, 40))
        assert anchor.handle == Point(100, 40)

    def test_drag_control_a(self, session):
        anchor = drag(session, Point(100, 0), Point(120, 20))
        session.pointer_down(Point(80, -20))
        session.pointer_up(Point(100, -40))
        assert anchor.handle == Point(100, 40)

    def test_grab_offset_is_kept(self, session):
        """Test the marker does not jump to the pointer when grabbed off-center."""
        anchor = tap(session, Point(50, 50))
        session.pointer_down(Point(53, 54))
        session.pointer_move(Point(53, 54))
        assert anchor.point == Point(50, 50)

    def test_markers_disabled(self):
        session = LiveEditSession(markers_enabled=False)
        tap(session, Point(50, 50))
        assert session.markers().markers == []
        assert session.pointer_down(Point(50, 50)) == EditState.PRESSED


class TestCancelAndOrdering:
    """Tests for cancellation and out-of-order events."""

    def test_cancel_discards_in_flight_anchor(self, session):
        session.pointer_down(Point(0, 0))
        session.pointer_move(Point(10, 10))
        session.cancel()
        assert session.state == EditState.IDLE
        assert len(session.drawing) == 0
        assert len(session.preview_drawing()) == 0

    def test_cancel_keeps_marker_edits(self, session):
        anchor = tap(session, Point(50, 50))
        session.pointer_down(Point(50, 50))
        session.pointer_move(Point(70, 70))
        session.cancel()
        assert anchor.point == Point(70, 70)

    def test_cancel_when_idle_is_noop(self, session):
        session.cancel()
        assert session.state == EditState.IDLE

    def test_move_when_idle_is_ignored(self, session):
        assert session.pointer_move(Point(1, 1)) == EditState.IDLE
        assert len(session.drawing) == 0

    def test_up_when_idle_is_ignored(self, session):
        assert session.pointer_up(Point(1, 1)) is None
        assert len(session.drawing) == 0

    def test_second_down_is_ignored(self, session):
        session.pointer_down(Point(0, 0))
        session.pointer_down(Point(50, 50))
        assert session.gesture.start_location == Point(0, 0)

    def test_handle_event_dispatch(self, session):
        events = [
            PointerEvent(PointerPhase.DOWN, Point(0, 0)),
            PointerEvent(PointerPhase.MOVE, Point(5, 5)),
            PointerEvent(PointerPhase.UP, Point(10, 10)),
            PointerEvent(PointerPhase.DOWN, Point(100, 100)),
            PointerEvent(PointerPhase.CANCEL, Point(100, 100)),
        ]
        for event in events:
            session.handle_event(event)
        assert len(session.drawing) == 1
        assert session.drawing.anchors[0].handle == Point(10, 10)
        assert session.state == EditState.IDLE


class TestSignals:
    """Tests for session signals."""

    def test_commit_signals(self, session):
        committed, changed = [], []
        session.anchorCommitted.connect(committed.append)
        session.previewChanged.connect(lambda: changed.append(True))
        anchor = tap(session, Point(0, 0))
        assert committed == [anchor.id]
        assert len(changed) == 2  # down, up

    def test_marker_drag_signals(self, session):
        tap(session, Point(0, 0))
        modified = []
        session.drawingModified.connect(lambda: modified.append(True))
        session.pointer_down(Point(0, 0))
        session.pointer_move(Point(5, 5))
        session.pointer_up(Point(6, 6))
        assert len(modified) == 2

    def test_toggling_markers_requests_repaint(self, session):
        changed = []
        session.previewChanged.connect(lambda: changed.append(True))
        session.markers_enabled = False
        assert changed == [True]
