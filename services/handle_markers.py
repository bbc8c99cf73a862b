"""
Handle Marker View Model.

Computes the draggable overlay for a drawing and routes marker drags
back into the drawing's mutators.

Per anchor, in path order:
- CONTROL_A marker at the mirrored control point (if a handle exists)
- CONTROL_B marker at the raw handle (if a handle exists)
- ANCHOR marker at the anchor point
- a guide line control A -> point -> control B (if a handle exists)

Markers are identified by (anchor_id, kind) so the canvas can match them
across frames.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from models.drawing import Anchor, Drawing
from models.geometry import Point


class MarkerKind(Enum):
    """Which part of an anchor a marker drags."""
    ANCHOR = "anchor"
    CONTROL_A = "control_a"   # Mirrored control point (primary)
    CONTROL_B = "control_b"   # Raw handle (secondary)


@dataclass(frozen=True)
class Marker:
    """A draggable overlay marker."""
    anchor_id: str
    kind: MarkerKind
    position: Point

    @property
    def key(self) -> Tuple[str, MarkerKind]:
        """Stable identity across frames."""
        return (self.anchor_id, self.kind)


@dataclass(frozen=True)
class GuideLine:
    """Polyline from one control point through the anchor to the other."""
    anchor_id: str
    vertices: Tuple[Point, Point, Point]


@dataclass
class MarkerOverlay:
    """Everything the canvas draws on top of the path."""
    markers: List[Marker] = field(default_factory=list)
    guides: List[GuideLine] = field(default_factory=list)

    def find(self, anchor_id: str, kind: MarkerKind) -> Optional[Marker]:
        for marker in self.markers:
            if marker.anchor_id == anchor_id and marker.kind == kind:
                return marker
        return None


def build_markers(anchors: Iterable[Anchor]) -> MarkerOverlay:
    """
    Build the marker overlay for an anchor sequence.

    Control markers come before their anchor marker so the anchor is
    drawn on top and wins hit-testing when they overlap.
    """
    overlay = MarkerOverlay()
    for anchor in anchors:
        control_points = anchor.control_points
        if control_points is not None:
            control_a, control_b = control_points
            overlay.guides.append(
                GuideLine(anchor.id, (control_a, anchor.point, control_b))
            )
            overlay.markers.append(Marker(anchor.id, MarkerKind.CONTROL_A, control_a))
            overlay.markers.append(Marker(anchor.id, MarkerKind.CONTROL_B, control_b))
        overlay.markers.append(Marker(anchor.id, MarkerKind.ANCHOR, anchor.point))
    return overlay


def hit_test(overlay: MarkerOverlay, position: Point, radius: float) -> Optional[Marker]:
    """
    Find the marker under position.

    Args:
        overlay: Markers in draw order
        position: Pointer position
        radius: Hit circle radius around each marker

    Returns:
        The last-drawn marker within radius, or None
    """
    for marker in reversed(overlay.markers):
        if marker.position.distance_to(position) <= radius:
            return marker
    return None


def apply_marker_drag(drawing: Drawing, anchor_id: str, kind: MarkerKind, to: Point):
    """Move the part of an anchor that a marker represents."""
    if kind == MarkerKind.ANCHOR:
        drawing.move_anchor(anchor_id, to)
    elif kind == MarkerKind.CONTROL_A:
        drawing.move_handle_primary(anchor_id, to)
    elif kind == MarkerKind.CONTROL_B:
        drawing.move_handle_secondary(anchor_id, to)
    else:
        raise ValueError(f"Unknown marker kind: {kind}")
