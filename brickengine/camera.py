"""Camera that builds a left-handed view matrix from position and rotation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .mathutil import Vector3
from .matrices import Matrix4

_DEG_TO_RAD = 0.0174532925


@dataclass
class Camera:
    """Camera placed at ``position``, rotated by ``rotation`` (degrees).

    ``rotation.x`` is pitch, ``rotation.y`` yaw and ``rotation.z`` roll.
    """

    position: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    view_matrix: Matrix4 = field(default_factory=Matrix4, init=False)

    def render(self) -> Matrix4:
        """Recompute and return the view matrix."""
        pitch = self.rotation.x * _DEG_TO_RAD
        yaw = self.rotation.y * _DEG_TO_RAD
        roll = self.rotation.z * _DEG_TO_RAD
        rotation = (
            Matrix4.create_rotation_z(roll)
            * Matrix4.create_rotation_x(pitch)
            * Matrix4.create_rotation_y(yaw)
        )
        look_at = Vector3.transform_with_persp_div(Vector3(0.0, 0.0, 1.0), rotation)
        up = Vector3.transform_with_persp_div(Vector3(0.0, 1.0, 0.0), rotation)
        eye = Vector3(self.position.x, self.position.y, self.position.z)
        self.view_matrix = Matrix4.create_look_at(eye, eye + look_at, up)
        return self.view_matrix