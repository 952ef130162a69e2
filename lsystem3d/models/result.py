"""L-system output models."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .geometry import Bounds, Point3D


class LineSegment(BaseModel):
    """A single drawn segment, from the turtle's old to new position."""
    model_config = ConfigDict(frozen=True)

    start: Point3D
    end: Point3D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class ResultStats(BaseModel):
    """Summary statistics for a generated result."""
    model_config = ConfigDict(frozen=True)

    segments: int = 0
    leaves: int = 0
    symbols: int = 0          # Length of the interpreted symbol string
    max_branch_depth: int = 0  # Deepest `[` nesting reached by the turtle
    total_length: float = 0.0

    @classmethod
    def from_geometry(
        cls,
        segments: tuple[LineSegment, ...],
        leaves: tuple[Point3D, ...],
        symbols: int = 0,
        max_branch_depth: int = 0,
    ) -> ResultStats:
        return cls(
            segments=len(segments),
            leaves=len(leaves),
            symbols=symbols,
            max_branch_depth=max_branch_depth,
            total_length=sum(s.length for s in segments),
        )


class GenerationResult(BaseModel):
    """
    The complete generated geometry.

    Segments and leaves keep emission order. `bounds` encloses every
    emitted point and is empty when nothing was emitted.
    """
    model_config = ConfigDict(frozen=True)

    segments: tuple[LineSegment, ...] = ()
    leaves: tuple[Point3D, ...] = ()
    bounds: Bounds = Bounds()
    stats: ResultStats
