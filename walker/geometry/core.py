"""
Walker Geometry Core

Float vector algebra used by the segment and solid intersection routines.

Axis convention: X increases rightward, Y increases upward and Z increases
inward (into the screen, away from the viewer).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from walker.geometry.tolerance import EPS_GEO


# =============================================================================
# Vector
# =============================================================================

@dataclass(frozen=True, eq=False)
class Vector3:
    """
    3D vector for points, directions, normals, and displacements.

    Equality is tolerance based: two vectors compare equal when every component
    differs by less than ``EPS_GEO``. That relation is not transitive, so the
    hash is a constant. Vectors work as keys of small lookup tables, but do not
    rely on sets or dicts to deduplicate large numbers of near-equal vectors.
    """
    x: float
    y: float
    z: float

    # -------------------------------------------------------------------------
    # Named arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def componentwise_multiply(self, other: Vector3) -> Vector3:
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def componentwise_divide(self, other: Vector3) -> Vector3:
        """Divide component by component; zero divisors give inf/NaN."""
        return Vector3.from_array(_ieee_divide(self.to_array(), other.to_array()))

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union[Vector3, float]) -> Vector3:
        if isinstance(other, Vector3):
            return self.componentwise_multiply(other)
        return self.scale(other)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.scale(scalar)

    def __truediv__(self, other: Union[Vector3, float]) -> Vector3:
        if isinstance(other, Vector3):
            return self.componentwise_divide(other)
        return Vector3.from_array(_ieee_divide(self.to_array(), float(other)))

    def __rtruediv__(self, scalar: float) -> Vector3:
        # scalar / v -> (scalar / x, scalar / y, scalar / z)
        return Vector3.from_array(_ieee_divide(float(scalar), self.to_array()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            abs(self.x - other.x) < EPS_GEO
            and abs(self.y - other.y) < EPS_GEO
            and abs(self.z - other.z) < EPS_GEO
        )

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented
        return not eq

    def __hash__(self) -> int:
        # Any finer hash would split vectors that compare equal.
        return hash(Vector3)

    def __str__(self) -> str:
        return f"<{self.x}, {self.y}, {self.z}>"

    # -------------------------------------------------------------------------
    # Products and magnitude
    # -------------------------------------------------------------------------

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Cross product (right-hand rule)."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def length_squared(self) -> float:
        """Squared length (faster when comparing distances)."""
        return self.x**2 + self.y**2 + self.z**2

    def with_length(self, length: float) -> Vector3:
        """
        Return this vector rescaled to ``length``, keeping its direction.

        A zero-length vector has no direction; the result is NaN in every
        component rather than an exception.
        """
        factor = _ieee_divide(float(length), self.length())
        return self.scale(float(factor))

    def normal(self) -> Vector3:
        """Return unit vector."""
        return self.with_length(1.0)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Convert to numpy array."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @staticmethod
    def from_array(arr: Union[np.ndarray, Sequence[float]]) -> Vector3:
        values = np.asarray(arr, dtype=float).reshape(-1)
        if values.shape[0] != 3:
            raise ValueError(f"Vector3 requires exactly 3 components, got {values.shape[0]}")
        return Vector3(float(values[0]), float(values[1]), float(values[2]))

    # -------------------------------------------------------------------------
    # Canonical vectors
    # -------------------------------------------------------------------------

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def unit_scale() -> Vector3:
        return Vector3(1.0, 1.0, 1.0)

    @staticmethod
    def right() -> Vector3:
        return Vector3(1.0, 0.0, 0.0)

    @staticmethod
    def left() -> Vector3:
        return Vector3(-1.0, 0.0, 0.0)

    @staticmethod
    def up() -> Vector3:
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def down() -> Vector3:
        return Vector3(0.0, -1.0, 0.0)

    @staticmethod
    def forward() -> Vector3:
        return Vector3(0.0, 0.0, 1.0)

    @staticmethod
    def back() -> Vector3:
        return Vector3(0.0, 0.0, -1.0)


# Alias for clarity
Point3 = Vector3


def _ieee_divide(a, b):
    # Python floats raise on zero division; numpy follows IEEE 754 instead.
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(a, b)
