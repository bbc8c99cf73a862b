"""
Models package.

This package contains the data models of the vector drawing editor:
- Geometry (Point and point arithmetic)
- Drawing (Anchor, Drawing)
- Path construction (PathCommand, build_path)
- Pointer gestures (PointerEvent, GestureState)
"""

from .geometry import (
    Point,
    add,
    subtract,
    distance,
    mirror,
)
from .gesture import (
    DEFAULT_DRAG_THRESHOLD,
    PointerPhase,
    PointerEvent,
    GestureState,
)
from .drawing import (
    Anchor,
    Drawing,
    AnchorNotFoundError,
)
from .path import (
    PathCommandType,
    PathCommand,
    build_path,
    segment_count,
)

__all__ = [
    # Geometry
    "Point",
    "add",
    "subtract",
    "distance",
    "mirror",
    # Gestures
    "DEFAULT_DRAG_THRESHOLD",
    "PointerPhase",
    "PointerEvent",
    "GestureState",
    # Drawing
    "Anchor",
    "Drawing",
    "AnchorNotFoundError",
    # Path
    "PathCommandType",
    "PathCommand",
    "build_path",
    "segment_count",
]
