"""
Directed segments and segment/solid intersection.

A ``Line3`` spans from ``o`` to ``o + d``. Intersection points are returned in
absolute space and the parameter ``s`` locates them along the segment
(``point = o + s * d`` with ``0 <= s <= 1``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from walker.geometry.core import Vector3
from walker.geometry.solids import FaceLike, PolyhedronLike
from walker.geometry.tolerance import EPS_GEO

logger = logging.getLogger(__name__)


class IntersectionFailure(Enum):
    """Why a segment does not meet a face."""
    PARALLEL = "parallel"                  # direction lies in or near the face plane
    OUT_OF_RANGE = "out_of_range"          # plane is met beyond the segment ends
    OUTSIDE_TRIANGLE = "outside_triangle"  # plane point falls outside the face


class IntersectionError(ValueError):
    def __init__(self, failure: IntersectionFailure):
        super().__init__(f"Does not intersect - {failure.value}")
        self.failure = failure


@dataclass(frozen=True)
class FaceIntersection:
    """Outcome of a single segment/face test: either a point or a failure."""
    point: Optional[Vector3] = None
    parameter: Optional[float] = None
    failure: Optional[IntersectionFailure] = None

    def __post_init__(self) -> None:
        if (self.point is None) == (self.failure is None):
            raise ValueError("FaceIntersection requires exactly one of point or failure")

    @property
    def hit(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.hit

    def unwrap(self) -> Vector3:
        if self.failure is not None:
            raise IntersectionError(self.failure)
        return self.point


@dataclass
class Line3:
    """
    A segment beginning at ``o`` and displaced by ``d``.

    ``set_end`` and ``set_length`` mutate ``d`` in place; everything else
    returns new values.
    """
    o: Vector3
    d: Vector3

    @property
    def end(self) -> Vector3:
        return self.o + self.d

    def set_end(self, point: Vector3) -> None:
        self.d = point - self.o

    @property
    def length(self) -> float:
        return self.d.length()

    def set_length(self, length: float) -> None:
        self.d = self.d.with_length(length)

    def unit(self) -> Line3:
        """A line beginning at ``o`` with unit ``d``."""
        return Line3(self.o, self.d.normal())

    def dot(self, other: Line3) -> float:
        return self.d.dot(other.d)

    def cross(self, other: Line3) -> Vector3:
        return self.d.cross(other.d)

    def point_at(self, s: float) -> Vector3:
        return self.o + self.d * s

    def intersection(self, face: FaceLike, tolerance: float = EPS_GEO) -> FaceIntersection:
        """
        Locate where this segment crosses a triangular face.

        Returns a ``FaceIntersection`` holding the absolute point and its
        parameter along the segment, or the reason there is none.
        """
        n = face.normal
        denom = n.dot(self.d)
        # Exactly parallel segments are rejected even with tolerance=0.0
        if abs(denom) < tolerance or denom == 0.0:
            return FaceIntersection(failure=IntersectionFailure.PARALLEL)

        s = (-n).dot(self.o - face.a) / denom
        if s < 0.0 or s > 1.0:
            return FaceIntersection(failure=IntersectionFailure.OUT_OF_RANGE)

        point = self.point_at(s)
        edges = ((face.a, face.b), (face.b, face.c), (face.c, face.a))
        for start, stop in edges:
            if (stop - start).cross(point - start).dot(n) < 0.0:
                return FaceIntersection(failure=IntersectionFailure.OUTSIDE_TRIANGLE)

        return FaceIntersection(point=point, parameter=s)

    def intersections(self, solid: PolyhedronLike, tolerance: float = EPS_GEO) -> List[Vector3]:
        """All points where this segment crosses a face of ``solid``, in face order."""
        points: List[Vector3] = []
        for face in solid.faces:
            result = self.intersection(face, tolerance=tolerance)
            if result:
                points.append(result.point)
            else:
                logger.debug("No intersection for %s and %s (%s)", self, face, result.failure.value)
        return points

    def intersections_many(
        self,
        solids: Iterable[PolyhedronLike],
        tolerance: float = EPS_GEO,
    ) -> List[Tuple[PolyhedronLike, List[Vector3]]]:
        """Pair every solid with its own intersection points, in input order."""
        return [(solid, self.intersections(solid, tolerance=tolerance)) for solid in solids]

    def __str__(self) -> str:
        return f"{{{self.o} + {self.d}}}"
