"""
Faces and solids consumed by the segment intersection routines.

The engine only relies on the ``FaceLike`` and ``PolyhedronLike`` protocols;
``Face`` and ``Polyhedron`` are minimal value containers satisfying them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol, Sequence, Tuple, runtime_checkable

from walker.geometry.core import Vector3
from walker.geometry.tolerance import EPS_POS


@runtime_checkable
class FaceLike(Protocol):
    """A planar triangle with an outward unit normal that follows a->b->c winding."""

    @property
    def a(self) -> Vector3: ...

    @property
    def b(self) -> Vector3: ...

    @property
    def c(self) -> Vector3: ...

    @property
    def normal(self) -> Vector3: ...


@runtime_checkable
class PolyhedronLike(Protocol):
    """Any solid exposing an iterable of faces."""

    @property
    def faces(self) -> Iterable[FaceLike]: ...


@dataclass(frozen=True)
class Face:
    """Triangle a->b->c with unit normal ((b - a) x (c - a)).normal()."""
    a: Vector3
    b: Vector3
    c: Vector3

    @classmethod
    def from_points(cls, points: Sequence[Vector3]) -> "Face":
        if len(points) != 3:
            raise ValueError(f"Face requires exactly 3 points, got {len(points)}")
        return cls(points[0], points[1], points[2])

    @property
    def vertices(self) -> Tuple[Vector3, Vector3, Vector3]:
        return (self.a, self.b, self.c)

    @property
    def normal(self) -> Vector3:
        # Degenerate faces give NaN here; callers screen with is_degenerate().
        return (self.b - self.a).cross(self.c - self.a).normal()

    @property
    def centroid(self) -> Vector3:
        return Vector3(
            (self.a.x + self.b.x + self.c.x) / 3.0,
            (self.a.y + self.b.y + self.c.y) / 3.0,
            (self.a.z + self.b.z + self.c.z) / 3.0,
        )

    def is_degenerate(self) -> bool:
        return (self.b - self.a).cross(self.c - self.a).length() < EPS_POS

    def __str__(self) -> str:
        return f"[{self.a}, {self.b}, {self.c}]"


@dataclass(frozen=True)
class Polyhedron:
    """
    Faces of a solid, kept in the order given.

    Closedness, convexity and manifoldness are not checked.
    """
    faces: Tuple[FaceLike, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "faces", tuple(self.faces))

    def __iter__(self) -> Iterator[FaceLike]:
        return iter(self.faces)

    def __len__(self) -> int:
        return len(self.faces)
