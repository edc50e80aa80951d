from __future__ import annotations

import math

import pytest

from walker.geometry.core import Vector3
from walker.geometry.solids import Face, FaceLike, Polyhedron, PolyhedronLike


def test_face_normal_follows_winding() -> None:
    face = Face(Vector3(0.0, 0.0, 0.0), Vector3(2.0, 0.0, 0.0), Vector3(0.0, 3.0, 0.0))
    assert face.normal == Vector3(0.0, 0.0, 1.0)
    assert face.normal.length() == pytest.approx(1.0)
    assert Face(face.a, face.c, face.b).normal == Vector3(0.0, 0.0, -1.0)


def test_face_centroid_and_vertices() -> None:
    face = Face.from_points([Vector3(0.0, 0.0, 0.0), Vector3(3.0, 0.0, 0.0), Vector3(0.0, 3.0, 3.0)])
    assert face.centroid == Vector3(1.0, 1.0, 1.0)
    assert face.vertices == (face.a, face.b, face.c)


def test_face_from_points_requires_three() -> None:
    with pytest.raises(ValueError, match="exactly 3 points"):
        Face.from_points([Vector3.zero(), Vector3.right()])


def test_degenerate_face() -> None:
    face = Face(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), Vector3(2.0, 0.0, 0.0))
    assert face.is_degenerate()
    assert all(math.isnan(c) for c in face.normal.to_tuple())
    assert not Face(Vector3.zero(), Vector3.right(), Vector3.up()).is_degenerate()


def test_polyhedron_keeps_face_order() -> None:
    f1 = Face(Vector3.zero(), Vector3.right(), Vector3.up())
    f2 = Face(Vector3.zero(), Vector3.up(), Vector3.forward())
    solid = Polyhedron([f1, f2])
    assert solid.faces == (f1, f2)
    assert list(solid) == [f1, f2]
    assert len(solid) == 2


def test_concrete_types_satisfy_protocols() -> None:
    face = Face(Vector3.zero(), Vector3.right(), Vector3.up())
    assert isinstance(face, FaceLike)
    assert isinstance(Polyhedron([face]), PolyhedronLike)
