"""Scalar helpers and 2D/3D vectors used by the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Union

PI = 3.1415926535
TWO_PI = PI * 2.0
PI_OVER_2 = PI / 2.0
INFINITY = math.inf
NEG_INFINITY = -math.inf


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * PI / 180.0


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180.0 / PI


def near_zero(val: float, epsilon: float = 0.001) -> bool:
    """Return True when ``val`` lies within ``epsilon`` of zero."""
    return abs(val) <= epsilon


def clamp(value, lower, upper):
    """Limit ``value`` to the closed range [lower, upper]."""
    return min(upper, max(lower, value))


def lerp(a: float, b: float, f: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``f``."""
    return a + f * (b - a)


def cot(angle: float) -> float:
    """Cotangent of ``angle`` (radians)."""
    return 1.0 / math.tan(angle)


class _VectorConstant:
    """Class attribute that hands out a fresh vector on every access."""

    def __init__(self, *components: float) -> None:
        self._components = components

    def __get__(self, instance: Any, owner: type) -> Any:
        return owner(*self._components)


@dataclass
class Vector2:
    """Mutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO = _VectorConstant(0.0, 0.0)
    UNIT_X = _VectorConstant(1.0, 0.0)
    UNIT_Y = _VectorConstant(0.0, 1.0)
    NEG_UNIT_X = _VectorConstant(-1.0, 0.0)
    NEG_UNIT_Y = _VectorConstant(0.0, -1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    def __rmul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> Vector2:
        self.x *= scalar
        self.y *= scalar
        return self

    def __iadd__(self, other: Vector2) -> Vector2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2) -> Vector2:
        self.x -= other.x
        self.y -= other.y
        return self

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalize(self) -> None:
        """Scale this vector to unit length in place."""
        size = self.length()
        self.x /= size
        self.y /= size

    def normalized(self) -> Vector2:
        """Return a unit-length copy of this vector."""
        result = Vector2(self.x, self.y)
        result.normalize()
        return result

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def lerp(a: Vector2, b: Vector2, f: float) -> Vector2:
        return a + f * (b - a)

    @staticmethod
    def reflect(v: Vector2, n: Vector2) -> Vector2:
        """Reflect ``v`` about the normalized vector ``n``."""
        return v - 2.0 * Vector2.dot(v, n) * n

    @staticmethod
    def transform(vec: Vector2, mat: Any, w: float = 1.0) -> Vector2:
        """Transform ``vec`` by a 3x3 matrix exposing a ``mat`` row list."""
        m = mat.mat
        return Vector2(
            vec.x * m[0][0] + vec.y * m[1][0] + w * m[2][0],
            vec.x * m[0][1] + vec.y * m[1][1] + w * m[2][1],
        )


@dataclass
class Vector3:
    """Mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO = _VectorConstant(0.0, 0.0, 0.0)
    UNIT_X = _VectorConstant(1.0, 0.0, 0.0)
    UNIT_Y = _VectorConstant(0.0, 1.0, 0.0)
    UNIT_Z = _VectorConstant(0.0, 0.0, 1.0)
    NEG_UNIT_X = _VectorConstant(-1.0, 0.0, 0.0)
    NEG_UNIT_Y = _VectorConstant(0.0, -1.0, 0.0)
    NEG_UNIT_Z = _VectorConstant(0.0, 0.0, -1.0)
    INFINITY = _VectorConstant(INFINITY, INFINITY, INFINITY)
    NEG_INFINITY = _VectorConstant(NEG_INFINITY, NEG_INFINITY, NEG_INFINITY)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector3, float]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __imul__(self, scalar: float) -> Vector3:
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __iadd__(self, other: Vector3) -> Vector3:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalize(self) -> None:
        """Scale this vector to unit length in place."""
        size = self.length()
        self.x /= size
        self.y /= size
        self.z /= size

    def normalized(self) -> Vector3:
        """Return a unit-length copy of this vector."""
        result = Vector3(self.x, self.y, self.z)
        result.normalize()
        return result

    @staticmethod
    def dot(a: Vector3, b: Vector3) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Vector3, b: Vector3) -> Vector3:
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    @staticmethod
    def lerp(a: Vector3, b: Vector3, f: float) -> Vector3:
        return a + f * (b - a)

    @staticmethod
    def reflect(v: Vector3, n: Vector3) -> Vector3:
        """Reflect ``v`` about the normalized vector ``n``."""
        return v - 2.0 * Vector3.dot(v, n) * n

    @staticmethod
    def _transform_xyz(vec: Vector3, m: Any, w: float) -> Vector3:
        return Vector3(
            vec.x * m[0][0] + vec.y * m[1][0] + vec.z * m[2][0] + w * m[3][0],
            vec.x * m[0][1] + vec.y * m[1][1] + vec.z * m[2][1] + w * m[3][1],
            vec.x * m[0][2] + vec.y * m[1][2] + vec.z * m[2][2] + w * m[3][2],
        )

    @staticmethod
    def transform(vec: Vector3, mat: Any, w: float = 1.0) -> Vector3:
        """Transform ``vec`` by a 4x4 matrix exposing a ``mat`` row list."""
        return Vector3._transform_xyz(vec, mat.mat, w)

    @staticmethod
    def transform_with_persp_div(vec: Vector3, mat: Any, w: float = 1.0) -> Vector3:
        """Transform ``vec`` by a 4x4 matrix and divide by the resulting w."""
        m = mat.mat
        result = Vector3._transform_xyz(vec, m, w)
        transformed_w = (
            vec.x * m[0][3] + vec.y * m[1][3] + vec.z * m[2][3] + w * m[3][3]
        )
        if not near_zero(abs(transformed_w)):
            result *= 1.0 / transformed_w
        return result

    @staticmethod
    def transform_quaternion(v: Vector3, q: Any) -> Vector3:
        """Rotate ``v`` by a quaternion exposing x, y, z and w."""
        qv = Vector3(q.x, q.y, q.z)
        result = Vector3(v.x, v.y, v.z)
        result += 2.0 * Vector3.cross(qv, Vector3.cross(qv, v) + q.w * v)
        return result