"""
Pointer Gesture State.

Transient state for one pointer-down-to-up interaction. It is never
stored in a Drawing; the live-edit session keeps it only while the
pointer is pressed.
"""

import uuid
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum

from .geometry import Point


DEFAULT_DRAG_THRESHOLD = 1.0


class PointerPhase(Enum):
    """Phase of a pointer event delivered by the input boundary."""
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PointerEvent:
    """A single pointer sample: phase and canvas position."""
    phase: PointerPhase
    position: Point


@dataclass
class GestureState:
    """
    State of an in-flight pointer gesture.

    Attributes:
        start_location: Where the pointer went down
        location: Latest pointer sample
        threshold: Displacement above which the gesture counts as a drag
        anchor_id: Id reserved for the anchor this gesture will commit, so
            the preview anchor and the committed one share identity
        has_dragged: True once any sample exceeded the threshold
    """
    start_location: Point
    location: Optional[Point] = None
    threshold: float = DEFAULT_DRAG_THRESHOLD
    anchor_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    has_dragged: bool = False

    def __post_init__(self):
        if self.location is None:
            self.location = self.start_location
        self.has_dragged = self.has_dragged or self.exceeds_threshold

    @property
    def translation(self) -> Point:
        return self.location - self.start_location

    @property
    def displacement(self) -> float:
        return self.start_location.distance_to(self.location)

    @property
    def exceeds_threshold(self) -> bool:
        return self.displacement > self.threshold

    def update(self, location: Point):
        """Record a new pointer sample."""
        self.location = location
        if self.exceeds_threshold:
            self.has_dragged = True
