"""
Drawing Model.

Data structures for an editable vector path.

Key concepts:
- Anchor: one vertex of the path, with an optional raw handle
- Control points: the handle and its mirror image through the anchor,
  derived on demand and never stored
- Drawing: ordered, identity-addressed collection of anchors

Anchors keep their insertion order, which is the path order. They are
never reordered, deduplicated or deleted; drags mutate them in place.
"""

import uuid
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .geometry import Point
from .gesture import GestureState


def _generate_id() -> str:
    """Generate a unique anchor ID."""
    return str(uuid.uuid4())


class AnchorNotFoundError(KeyError):
    """Raised when a mutator addresses an anchor id the drawing does not hold."""


@dataclass
class Anchor:
    """
    A vertex of the drawing.

    Attributes:
        point: The anchor's own location
        handle: Raw handle point dragged out by the user, or None for a
            plain corner vertex. Its mirror through point is the implicit
            opposite control point.
        id: Stable unique identifier
    """
    point: Point
    handle: Optional[Point] = None
    id: str = field(default_factory=_generate_id)

    @property
    def control_points(self) -> Optional[Tuple[Point, Point]]:
        """(mirrored handle, handle), symmetric about point, or None."""
        if self.handle is None:
            return None
        return (self.handle.mirrored(self.point), self.handle)

    @property
    def has_handle(self) -> bool:
        return self.handle is not None

    def move_to(self, to: Point):
        """Move the anchor; the handle follows rigidly."""
        delta = to - self.point
        self.point = to
        if self.handle is not None:
            self.handle = self.handle + delta

    def move_primary_control(self, to: Point):
        """Drag the mirrored control point to `to`."""
        self.handle = to.mirrored(self.point)

    def move_secondary_control(self, to: Point):
        """Drag the raw handle to `to`."""
        self.handle = to

    def copy(self) -> "Anchor":
        """Copy with the same id."""
        return Anchor(point=self.point, handle=self.handle, id=self.id)


class Drawing:
    """
    Ordered collection of anchors addressed by id.

    Anchors are held in an insertion-ordered dict so a single anchor can
    be looked up and mutated without disturbing path order.
    """

    def __init__(self, anchors: Optional[List[Anchor]] = None):
        self._anchors: Dict[str, Anchor] = {}
        for anchor in anchors or []:
            self._add(anchor)

    def __len__(self) -> int:
        return len(self._anchors)

    def __iter__(self) -> Iterator[Anchor]:
        return iter(self._anchors.values())

    def __contains__(self, anchor_id: str) -> bool:
        return anchor_id in self._anchors

    def __repr__(self) -> str:
        return f"Drawing({list(self._anchors.values())!r})"

    @property
    def anchors(self) -> List[Anchor]:
        """Anchors in path order."""
        return list(self._anchors.values())

    @property
    def anchor_ids(self) -> List[str]:
        return list(self._anchors.keys())

    def get_anchor(self, anchor_id: str) -> Anchor:
        try:
            return self._anchors[anchor_id]
        except KeyError:
            raise AnchorNotFoundError(anchor_id) from None

    def copy(self) -> "Drawing":
        """Deep copy; anchor ids are preserved."""
        return Drawing([anchor.copy() for anchor in self._anchors.values()])

    # =========================================================================
    # Mutators
    # =========================================================================

    def append_anchor(self, point: Point, handle: Optional[Point] = None,
                      anchor_id: Optional[str] = None) -> Anchor:
        """
        Append a new anchor at the end of the path.

        Args:
            point: Anchor location
            handle: Optional raw handle point
            anchor_id: Id to use instead of a fresh one; must be unused

        Returns:
            The new anchor
        """
        anchor = Anchor(point=point, handle=handle, id=anchor_id or _generate_id())
        self._add(anchor)
        return anchor

    def append_gesture(self, gesture: GestureState) -> Anchor:
        """
        Append the anchor described by a pointer gesture.

        The anchor sits at the gesture's start location. It gets a handle at
        the current pointer location only if the gesture crossed the drag
        threshold; a tap produces a plain vertex.
        """
        handle = gesture.location if gesture.has_dragged else None
        return self.append_anchor(gesture.start_location, handle, anchor_id=gesture.anchor_id)

    def move_anchor(self, anchor_id: str, to: Point):
        self.get_anchor(anchor_id).move_to(to)

    def move_handle_primary(self, anchor_id: str, to: Point):
        self.get_anchor(anchor_id).move_primary_control(to)

    def move_handle_secondary(self, anchor_id: str, to: Point):
        self.get_anchor(anchor_id).move_secondary_control(to)

    def _add(self, anchor: Anchor):
        if anchor.id in self._anchors:
            raise ValueError(f"Duplicate anchor id: {anchor.id}")
        self._anchors[anchor.id] = anchor
