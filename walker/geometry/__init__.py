"""
Walker Geometry Module

Provides float vector algebra, directed segments, and segment/solid intersection.
"""

from walker.geometry.core import (
    Vector3,
    Point3,
)
from walker.geometry.line import (
    FaceIntersection,
    IntersectionError,
    IntersectionFailure,
    Line3,
)
from walker.geometry.solids import (
    Face,
    FaceLike,
    Polyhedron,
    PolyhedronLike,
)
from walker.geometry.tolerance import EPS_GEO

__all__ = [
    "Vector3",
    "Point3",
    "Line3",
    "FaceIntersection",
    "IntersectionError",
    "IntersectionFailure",
    "Face",
    "FaceLike",
    "Polyhedron",
    "PolyhedronLike",
    "EPS_GEO",
]
