"""
Path Builder.

Turns an anchor sequence into a renderable PathSpec: an ordered list of
move / line / quadratic / cubic commands.

Segment selection between consecutive anchors:
- neither has a handle: straight line
- only the later one has a handle: quadratic, controlled by its mirrored
  (incoming) control point
- the earlier one has a handle: cubic, from the earlier anchor's raw
  handle to the later anchor's incoming control point (or the anchor
  itself when it has none)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from .drawing import Anchor
from .geometry import Point


class PathCommandType(Enum):
    """Drawing commands understood by the rendering boundary."""
    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    QUAD_TO = "quad_to"
    CUBIC_TO = "cubic_to"


@dataclass(frozen=True)
class PathCommand:
    """
    One drawing command.

    Attributes:
        command_type: Kind of command
        to: End point of the command
        control1: Control point for QUAD_TO, first control point for CUBIC_TO
        control2: Second control point for CUBIC_TO
    """
    command_type: PathCommandType
    to: Point
    control1: Optional[Point] = None
    control2: Optional[Point] = None

    @classmethod
    def move_to(cls, to: Point) -> "PathCommand":
        return cls(PathCommandType.MOVE_TO, to)

    @classmethod
    def line_to(cls, to: Point) -> "PathCommand":
        return cls(PathCommandType.LINE_TO, to)

    @classmethod
    def quad_to(cls, to: Point, control: Point) -> "PathCommand":
        return cls(PathCommandType.QUAD_TO, to, control1=control)

    @classmethod
    def cubic_to(cls, to: Point, control1: Point, control2: Point) -> "PathCommand":
        return cls(PathCommandType.CUBIC_TO, to, control1=control1, control2=control2)


def build_path(anchors: Iterable[Anchor]) -> List[PathCommand]:
    """
    Build the PathSpec for an anchor sequence.

    Pure function: the same anchors always produce an equal command list.

    Args:
        anchors: Anchors in path order (a Drawing is accepted as well)

    Returns:
        Ordered list of PathCommand; empty for no anchors
    """
    anchors = list(anchors)
    if not anchors:
        return []

    commands = [PathCommand.move_to(anchors[0].point)]
    # The first anchor's handle does not shape the first segment.
    previous_control: Optional[Point] = None

    for anchor in anchors[1:]:
        control_points = anchor.control_points
        incoming = control_points[0] if control_points else anchor.point

        if previous_control is not None:
            commands.append(PathCommand.cubic_to(anchor.point, previous_control, incoming))
        elif control_points is not None:
            commands.append(PathCommand.quad_to(anchor.point, incoming))
        else:
            commands.append(PathCommand.line_to(anchor.point))

        previous_control = anchor.handle

    return commands


def segment_count(commands: List[PathCommand]) -> int:
    """Number of drawn segments (everything except MOVE_TO)."""
    return sum(1 for c in commands if c.command_type != PathCommandType.MOVE_TO)
