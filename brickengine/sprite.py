"""Sprite components: textured meshes attached to actors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Union

from .actor import Actor, Component
from .matrices import Matrix4
from .models import BufferType
from .texture import Texture

_DRAWABLE = (BufferType.SQUARE, BufferType.RECTANGLE, BufferType.CIRCLE)


class SpriteRegistry(Protocol):
    """What a sprite needs from the game that owns its actor."""

    def add_sprite(self, sprite: SpriteComponent) -> None: ...

    def remove_sprite(self, sprite: SpriteComponent) -> None: ...

    def get_texture(self, name: str) -> Optional[Texture]: ...


@dataclass(frozen=True)
class DrawCommand:
    """One textured mesh to draw with the given world transform."""

    buffer_type: BufferType
    world_transform: Matrix4
    texture: Texture


class SpriteComponent(Component):
    """Draws its owner with a shared mesh; lower draw orders are further back."""

    def __init__(
        self, owner: Actor, buffer_type: BufferType, draw_order: int = 100
    ) -> None:
        self.texture: Optional[Texture] = None
        self.buffer_type = buffer_type
        self._draw_order = draw_order
        super().__init__(owner)
        owner.game.add_sprite(self)

    @property
    def draw_order(self) -> int:
        return self._draw_order

    def set_texture(self, texture: Union[Texture, str, None]) -> None:
        """Use ``texture``, or the game's texture of that name if given a string."""
        if isinstance(texture, str):
            texture = self.owner.game.get_texture(texture)
        self.texture = texture

    def draw(self) -> Optional[DrawCommand]:
        """Describe how to draw the owner, or None if there is nothing to draw."""
        if self.texture is None or self.buffer_type not in _DRAWABLE:
            return None
        world = Matrix4(self.owner.world_transform.mat)
        return DrawCommand(self.buffer_type, world, self.texture)

    def destroy(self) -> None:
        self.owner.game.remove_sprite(self)
        super().destroy()