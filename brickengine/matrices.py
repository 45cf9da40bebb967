"""Row-major 3x3 and 4x4 matrices and unit quaternions.

Vectors are treated as rows, so a transform built as ``scale * rotation *
translation`` applies the scale first and the translation last.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .mathutil import Vector2, Vector3, cot
from .mathutil import lerp as _lerp

Rows = List[List[float]]


def _identity_rows(size: int) -> Rows:
    return [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]


def _checked_rows(rows: Iterable[Sequence[float]], size: int) -> Rows:
    result = [[float(value) for value in row] for row in rows]
    if len(result) != size or any(len(row) != size for row in result):
        raise ValueError(f"expected a {size}x{size} matrix")
    return result


def _multiply(a: Rows, b: Rows) -> Rows:
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


@dataclass
class Matrix3:
    """3x3 matrix for 2D transforms."""

    mat: Rows = field(default_factory=lambda: _identity_rows(3))

    def __post_init__(self) -> None:
        self.mat = _checked_rows(self.mat, 3)

    def __mul__(self, other: Matrix3) -> Matrix3:
        return Matrix3(_multiply(self.mat, other.mat))

    def __imul__(self, other: Matrix3) -> Matrix3:
        self.mat = _multiply(self.mat, other.mat)
        return self

    def as_flat(self) -> tuple[float, ...]:
        """All entries, row after row."""
        return tuple(value for row in self.mat for value in row)

    @staticmethod
    def identity() -> Matrix3:
        return Matrix3()

    @staticmethod
    def create_scale(x_scale: float, y_scale: float) -> Matrix3:
        return Matrix3(
            [
                [x_scale, 0.0, 0.0],
                [0.0, y_scale, 0.0],
                [0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_uniform_scale(scale: float) -> Matrix3:
        return Matrix3.create_scale(scale, scale)

    @staticmethod
    def create_rotation(theta: float) -> Matrix3:
        """Rotation about the Z axis; ``theta`` is in radians."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix3(
            [
                [c, s, 0.0],
                [-s, c, 0.0],
                [0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_translation(trans: Vector2) -> Matrix3:
        return Matrix3(
            [
                [1.0, 0.0, 0.0],
                [0.0, 1.0, 0.0],
                [trans.x, trans.y, 1.0],
            ]
        )


@dataclass
class Matrix4:
    """4x4 matrix for 3D transforms and projections."""

    mat: Rows = field(default_factory=lambda: _identity_rows(4))

    def __post_init__(self) -> None:
        self.mat = _checked_rows(self.mat, 4)

    def __mul__(self, other: Matrix4) -> Matrix4:
        return Matrix4(_multiply(self.mat, other.mat))

    def __imul__(self, other: Matrix4) -> Matrix4:
        self.mat = _multiply(self.mat, other.mat)
        return self

    def as_flat(self) -> tuple[float, ...]:
        """All entries, row after row."""
        return tuple(value for row in self.mat for value in row)

    def invert(self) -> None:
        """Invert in place; raise ValueError if the matrix is singular."""
        size = 4
        work = [row[:] + ident for row, ident in zip(self.mat, _identity_rows(size))]
        for col in range(size):
            pivot = max(range(col, size), key=lambda r: abs(work[r][col]))
            if work[pivot][col] == 0.0:
                raise ValueError("matrix is singular")
            work[col], work[pivot] = work[pivot], work[col]
            scale = work[col][col]
            work[col] = [value / scale for value in work[col]]
            for r, row in enumerate(work):
                if r != col and row[col] != 0.0:
                    factor = row[col]
                    work[r] = [a - factor * b for a, b in zip(row, work[col])]
        self.mat = [row[size:] for row in work]

    def inverted(self) -> Matrix4:
        """Return the inverse, leaving this matrix unchanged."""
        result = Matrix4(self.mat)
        result.invert()
        return result

    def get_translation(self) -> Vector3:
        return Vector3(self.mat[3][0], self.mat[3][1], self.mat[3][2])

    def _row_vector(self, index: int) -> Vector3:
        row = self.mat[index]
        return Vector3(row[0], row[1], row[2])

    def get_x_axis(self) -> Vector3:
        """Normalized X axis (forward)."""
        return self._row_vector(0).normalized()

    def get_y_axis(self) -> Vector3:
        """Normalized Y axis (left)."""
        return self._row_vector(1).normalized()

    def get_z_axis(self) -> Vector3:
        """Normalized Z axis (up)."""
        return self._row_vector(2).normalized()

    def get_scale(self) -> Vector3:
        return Vector3(
            self._row_vector(0).length(),
            self._row_vector(1).length(),
            self._row_vector(2).length(),
        )

    @staticmethod
    def identity() -> Matrix4:
        return Matrix4()

    @staticmethod
    def create_scale(x_scale: float, y_scale: float, z_scale: float) -> Matrix4:
        return Matrix4(
            [
                [x_scale, 0.0, 0.0, 0.0],
                [0.0, y_scale, 0.0, 0.0],
                [0.0, 0.0, z_scale, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_uniform_scale(scale: float) -> Matrix4:
        return Matrix4.create_scale(scale, scale, scale)

    @staticmethod
    def create_rotation_x(theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, s, 0.0],
                [0.0, -s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_rotation_y(theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            [
                [c, 0.0, -s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_rotation_z(theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            [
                [c, s, 0.0, 0.0],
                [-s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_from_quaternion(q: Quaternion) -> Matrix4:
        x, y, z, w = q.x, q.y, q.z, q.w
        return Matrix4(
            [
                [
                    1.0 - 2.0 * y * y - 2.0 * z * z,
                    2.0 * x * y + 2.0 * w * z,
                    2.0 * x * z - 2.0 * w * y,
                    0.0,
                ],
                [
                    2.0 * x * y - 2.0 * w * z,
                    1.0 - 2.0 * x * x - 2.0 * z * z,
                    2.0 * y * z + 2.0 * w * x,
                    0.0,
                ],
                [
                    2.0 * x * z + 2.0 * w * y,
                    2.0 * y * z - 2.0 * w * x,
                    1.0 - 2.0 * x * x - 2.0 * y * y,
                    0.0,
                ],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_translation(trans: Vector3) -> Matrix4:
        return Matrix4(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [trans.x, trans.y, trans.z, 1.0],
            ]
        )

    @staticmethod
    def create_look_at(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        zaxis = (target - eye).normalized()
        xaxis = Vector3.cross(up, zaxis).normalized()
        yaxis = Vector3.cross(zaxis, xaxis).normalized()
        return Matrix4(
            [
                [xaxis.x, yaxis.x, zaxis.x, 0.0],
                [xaxis.y, yaxis.y, zaxis.y, 0.0],
                [xaxis.z, yaxis.z, zaxis.z, 0.0],
                [
                    -Vector3.dot(xaxis, eye),
                    -Vector3.dot(yaxis, eye),
                    -Vector3.dot(zaxis, eye),
                    1.0,
                ],
            ]
        )

    @staticmethod
    def create_ortho(width: float, height: float, near: float, far: float) -> Matrix4:
        return Matrix4(
            [
                [2.0 / width, 0.0, 0.0, 0.0],
                [0.0, 2.0 / height, 0.0, 0.0],
                [0.0, 0.0, 1.0 / (far - near), 0.0],
                [0.0, 0.0, near / (near - far), 1.0],
            ]
        )

    @staticmethod
    def create_perspective_fov(
        fov_y: float, width: float, height: float, near: float, far: float
    ) -> Matrix4:
        y_scale = cot(fov_y / 2.0)
        x_scale = y_scale * height / width
        return Matrix4(
            [
                [x_scale, 0.0, 0.0, 0.0],
                [0.0, y_scale, 0.0, 0.0],
                [0.0, 0.0, far / (far - near), 1.0],
                [0.0, 0.0, -near * far / (far - near), 0.0],
            ]
        )

    @staticmethod
    def create_simple_view_proj(width: float, height: float) -> Matrix4:
        return Matrix4(
            [
                [2.0 / width, 0.0, 0.0, 0.0],
                [0.0, 2.0 / height, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 1.0, 1.0],
            ]
        )


@dataclass
class Quaternion:
    """Quaternion with vector part (x, y, z) and scalar part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @staticmethod
    def identity() -> Quaternion:
        return Quaternion()

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about the normalized ``axis``."""
        scalar = math.sin(angle / 2.0)
        return Quaternion(
            axis.x * scalar, axis.y * scalar, axis.z * scalar, math.cos(angle / 2.0)
        )

    def conjugate(self) -> None:
        """Negate the vector part in place."""
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalize(self) -> None:
        size = self.length()
        self.x /= size
        self.y /= size
        self.z /= size
        self.w /= size

    def normalized(self) -> Quaternion:
        result = Quaternion(self.x, self.y, self.z, self.w)
        result.normalize()
        return result

    @staticmethod
    def dot(a: Quaternion, b: Quaternion) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w

    @staticmethod
    def lerp(a: Quaternion, b: Quaternion, f: float) -> Quaternion:
        """Component-wise interpolation, normalized."""
        result = Quaternion(
            _lerp(a.x, b.x, f),
            _lerp(a.y, b.y, f),
            _lerp(a.z, b.z, f),
            _lerp(a.w, b.w, f),
        )
        result.normalize()
        return result

    @staticmethod
    def slerp(a: Quaternion, b: Quaternion, f: float) -> Quaternion:
        """Spherical interpolation along the shorter arc, normalized."""
        raw_cosom = Quaternion.dot(a, b)
        cosom = raw_cosom if raw_cosom >= 0.0 else -raw_cosom
        if cosom < 0.9999:
            omega = math.acos(cosom)
            inv_sin = 1.0 / math.sin(omega)
            scale0 = math.sin((1.0 - f) * omega) * inv_sin
            scale1 = math.sin(f * omega) * inv_sin
        else:
            scale0 = 1.0 - f
            scale1 = f
        if raw_cosom < 0.0:
            scale1 = -scale1
        result = Quaternion(
            scale0 * a.x + scale1 * b.x,
            scale0 * a.y + scale1 * b.y,
            scale0 * a.z + scale1 * b.z,
            scale0 * a.w + scale1 * b.w,
        )
        result.normalize()
        return result

    @staticmethod
    def concatenate(q: Quaternion, p: Quaternion) -> Quaternion:
        """Rotation by ``q`` followed by ``p``."""
        qv = Vector3(q.x, q.y, q.z)
        pv = Vector3(p.x, p.y, p.z)
        vec = p.w * qv + q.w * pv + Vector3.cross(pv, qv)
        return Quaternion(vec.x, vec.y, vec.z, p.w * q.w - Vector3.dot(pv, qv))