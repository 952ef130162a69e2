"""Geometric primitives used throughout the generator."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point3D(BaseModel):
    """Point (or displacement) in 3D space. +z is the turtle's forward axis."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def origin(cls) -> Point3D:
        return cls(x=0.0, y=0.0, z=0.0)

    @classmethod
    def forward(cls) -> Point3D:
        return cls(x=0.0, y=0.0, z=1.0)

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __mul__(self, scalar: float) -> Point3D:
        return Point3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


class Quaternion(BaseModel):
    """Unit quaternion for 3D orientation (x, y, z vector part, w scalar part)."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(x=0.0, y=0.0, z=0.0, w=1.0)

    @classmethod
    def from_axis_angle(cls, axis: tuple[float, float, float], degrees: float) -> Quaternion:
        """Rotation of `degrees` about a unit `axis`."""
        half = math.radians(degrees) / 2
        s = math.sin(half)
        return cls(x=axis[0] * s, y=axis[1] * s, z=axis[2] * s, w=math.cos(half))

    @property
    def is_zero(self) -> bool:
        """A zero quaternion encodes no rotation at all; callers treat it as unset."""
        return self.x == 0 and self.y == 0 and self.z == 0 and self.w == 0

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalized(self) -> Quaternion:
        n = self.norm()
        if n < 1e-12:
            return Quaternion.identity()
        return Quaternion(x=self.x / n, y=self.y / n, z=self.z / n, w=self.w / n)

    def rotate(self, v: Point3D) -> Point3D:
        """Rotate vector `v` by this quaternion."""
        qx, qy, qz, qw = self.x, self.y, self.z, self.w
        # t = 2 * (q.xyz x v)
        tx = 2 * (qy * v.z - qz * v.y)
        ty = 2 * (qz * v.x - qx * v.z)
        tz = 2 * (qx * v.y - qy * v.x)
        # v' = v + w * t + q.xyz x t
        return Point3D(
            x=v.x + qw * tx + (qy * tz - qz * ty),
            y=v.y + qw * ty + (qz * tx - qx * tz),
            z=v.z + qw * tz + (qx * ty - qy * tx),
        )

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product: `self * other` applies `other` in self's local frame."""
        ax, ay, az, aw = self.x, self.y, self.z, self.w
        bx, by, bz, bw = other.x, other.y, other.z, other.w
        return Quaternion(
            x=aw * bx + ax * bw + ay * bz - az * by,
            y=aw * by - ax * bz + ay * bw + az * bx,
            z=aw * bz + ax * by - ay * bx + az * bw,
            w=aw * bw - ax * bx - ay * by - az * bz,
        )


X_AXIS = (1.0, 0.0, 0.0)
Y_AXIS = (0.0, 1.0, 0.0)
Z_AXIS = (0.0, 0.0, 1.0)


class Bounds(BaseModel):
    """
    Axis-aligned bounding box.

    An empty box has no corners; the first encapsulated point gives it
    zero size at that point.
    """
    model_config = ConfigDict(frozen=True)

    min: Point3D | None = None
    max: Point3D | None = None

    @property
    def is_empty(self) -> bool:
        return self.min is None or self.max is None

    @property
    def size(self) -> Point3D:
        if self.is_empty:
            return Point3D.origin()
        return self.max - self.min

    def encapsulate(self, p: Point3D) -> Bounds:
        """Return a box grown to include `p`."""
        if self.is_empty:
            return Bounds(min=p, max=p)
        return Bounds(
            min=Point3D(x=min(self.min.x, p.x), y=min(self.min.y, p.y), z=min(self.min.z, p.z)),
            max=Point3D(x=max(self.max.x, p.x), y=max(self.max.y, p.y), z=max(self.max.z, p.z)),
        )

    def contains(self, p: Point3D, tol: float = 1e-9) -> bool:
        if self.is_empty:
            return False
        return (
            self.min.x - tol <= p.x <= self.max.x + tol
            and self.min.y - tol <= p.y <= self.max.y + tol
            and self.min.z - tol <= p.z <= self.max.z + tol
        )

    @classmethod
    def from_points(cls, points: list[Point3D]) -> Bounds:
        """Smallest box containing every point; empty for no points."""
        if not points:
            return cls()
        return cls(
            min=Point3D(
                x=min(p.x for p in points),
                y=min(p.y for p in points),
                z=min(p.z for p in points),
            ),
            max=Point3D(
                x=max(p.x for p in points),
                y=max(p.y for p in points),
                z=max(p.z for p in points),
            ),
        )
