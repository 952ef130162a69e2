"""Turtle interpreter: turns a symbol string into 3D geometry.

Commands (rotations are in degrees and in the turtle's local space):

    +  -    yaw by +arg / -arg      (local y axis)
    ^  v    pitch by +arg / -arg    (local x axis)
    <  >    roll by -arg / +arg     (local z axis)
    M       move forward by arg and record the segment
    N       move forward by arg
    [  ]    save / restore the turtle state
    L       record a leaf at the current position

Any command may be followed by `(a)`, which replaces `arg` with the value
bound to parameter `a`. Everything else is a placeholder.
"""

from __future__ import annotations
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from lsystem3d.core.errors import StackUnderflowError
from lsystem3d.models import (
    Bounds, GenerationResult, LineSegment, Point3D, Quaternion, ResultStats,
    X_AXIS, Y_AXIS, Z_AXIS,
)

_ROTATIONS: dict[str, tuple[tuple[float, float, float], float]] = {
    "+": (Y_AXIS, 1.0),
    "-": (Y_AXIS, -1.0),
    "^": (X_AXIS, 1.0),
    "v": (X_AXIS, -1.0),
    "<": (Z_AXIS, -1.0),
    ">": (Z_AXIS, 1.0),
}
_MOVES = frozenset("MN")


class TurtleState(BaseModel):
    """Immutable turtle: where it is and which way it faces."""
    model_config = ConfigDict(frozen=True)

    rotation: Quaternion = Quaternion.identity()
    position: Point3D = Point3D.origin()

    @classmethod
    def initial(
        cls,
        rotation: Quaternion | None = None,
        position: Point3D | None = None,
    ) -> TurtleState:
        """Starting state; a missing or zero rotation means identity."""
        if rotation is None or rotation.is_zero:
            rotation = Quaternion.identity()
        else:
            rotation = rotation.normalized()
        return cls(rotation=rotation, position=position or Point3D.origin())

    @property
    def heading(self) -> Point3D:
        """The local forward axis in world space."""
        return self.rotation.rotate(Point3D.forward())

    def after_rotate(self, axis: tuple[float, float, float], degrees: float) -> TurtleState:
        return TurtleState(
            rotation=self.rotation * Quaternion.from_axis_angle(axis, degrees),
            position=self.position,
        )

    def after_rotate_yaw(self, degrees: float) -> TurtleState:
        return self.after_rotate(Y_AXIS, degrees)

    def after_rotate_pitch(self, degrees: float) -> TurtleState:
        return self.after_rotate(X_AXIS, degrees)

    def after_rotate_roll(self, degrees: float) -> TurtleState:
        return self.after_rotate(Z_AXIS, degrees)

    def after_move(self, distance: float) -> TurtleState:
        return TurtleState(
            rotation=self.rotation,
            position=self.position + self.heading * distance,
        )


class TurtleInterpreter:
    """
    Walks a symbol string once and records what the turtle draws.

    The save stack lives only for the duration of one `run`.
    """

    def __init__(self, default_rotation: float = 30.0, default_move: float = 1.0) -> None:
        self.default_rotation = default_rotation
        self.default_move = default_move

    def run(
        self,
        symbols: str,
        parameters: Mapping[str, float] | None = None,
        initial_rotation: Quaternion | None = None,
        initial_position: Point3D | None = None,
    ) -> GenerationResult:
        parameters = parameters or {}
        turtle = TurtleState.initial(initial_rotation, initial_position)
        stack: list[TurtleState] = []
        max_depth = 0
        segments: list[LineSegment] = []
        leaves: list[Point3D] = []
        points: list[Point3D] = []

        n = len(symbols)
        i = 0
        while i < n:
            c = symbols[i]

            arg = self.default_move if c in _MOVES else self.default_rotation
            skip = 0
            name = self._parameter_at(symbols, i)
            if name is not None:
                # The `(a)` construct is consumed even when `a` is unbound.
                skip = 3
                value = parameters.get(name)
                if value is not None:
                    arg = value

            if c in _ROTATIONS:
                axis, sign = _ROTATIONS[c]
                turtle = turtle.after_rotate(axis, sign * arg)
            elif c == "M":
                start = turtle.position
                turtle = turtle.after_move(arg)
                segments.append(LineSegment(start=start, end=turtle.position))
                points.append(start)
                points.append(turtle.position)
            elif c == "N":
                turtle = turtle.after_move(arg)
            elif c == "[":
                stack.append(turtle)
                max_depth = max(max_depth, len(stack))
            elif c == "]":
                if not stack:
                    raise StackUnderflowError(i)
                turtle = stack.pop()
            elif c == "L":
                leaves.append(turtle.position)
                points.append(turtle.position)

            i += 1 + skip

        segment_tuple = tuple(segments)
        leaf_tuple = tuple(leaves)
        return GenerationResult(
            segments=segment_tuple,
            leaves=leaf_tuple,
            bounds=Bounds.from_points(points),
            stats=ResultStats.from_geometry(
                segment_tuple, leaf_tuple, symbols=n, max_branch_depth=max_depth,
            ),
        )

    @staticmethod
    def _parameter_at(symbols: str, i: int) -> str | None:
        """Name of the `(a)` parameter following symbol `i`, if there is one."""
        if i + 3 >= len(symbols) or symbols[i + 1] != "(" or symbols[i + 3] != ")":
            return None
        name = symbols[i + 2]
        if not "a" <= name <= "z":
            return None
        return name
