"""Quad meshes the renderer draws sprites with."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .texture import Texture

TRIANGLE_STRIP = "triangle_strip"


class BufferType(Enum):
    """Which shared mesh a sprite is drawn with."""

    SQUARE = 0
    RECTANGLE = 1
    CIRCLE = 2
    NONE = 3


@dataclass(frozen=True)
class Vertex:
    """A mesh corner: position in model space and texture coordinates."""

    position: tuple[float, float, float]
    uv: tuple[float, float]


def _quad(half_width: float, half_height: float) -> tuple[Vertex, ...]:
    """Four corners in strip order: bottom left, top left, bottom right, top right."""
    return (
        Vertex((-half_width, -half_height, 0.0), (0.0, 1.0)),
        Vertex((-half_width, half_height, 0.0), (0.0, 0.0)),
        Vertex((half_width, -half_height, 0.0), (1.0, 1.0)),
        Vertex((half_width, half_height, 0.0), (1.0, 0.0)),
    )


class Model(ABC):
    """Vertex and index data drawn as a triangle strip, with an optional texture."""

    topology = TRIANGLE_STRIP

    def __init__(self) -> None:
        self.texture: Optional[Texture] = None
        self._vertices = tuple(self._build_vertices())
        self._indices = tuple(range(len(self._vertices)))

    @abstractmethod
    def _build_vertices(self) -> tuple[Vertex, ...]:
        """Return the mesh corners in drawing order."""

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return self._vertices

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def index_count(self) -> int:
        return len(self._indices)


class SquareModel(Model):
    """Quad spanning -1..1 on both axes; ``size`` is recorded but not applied."""

    def __init__(self, size: float) -> None:
        self.size = size
        super().__init__()

    def _build_vertices(self) -> tuple[Vertex, ...]:
        return _quad(1.0, 1.0)


class RectModel(Model):
    """Quad of the given width and height centred on the origin."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__()

    def _build_vertices(self) -> tuple[Vertex, ...]:
        return _quad(self.width * 0.5, self.height * 0.5)