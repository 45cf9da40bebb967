"""The actors a level is built from: bricks, walls and the player's platform."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .actor import Actor, InputComponent, SquareComponent
from .mathutil import Vector2
from .models import BufferType
from .sprite import SpriteComponent

if TYPE_CHECKING:
    from .game import Game

BRICK_WIDTH = 8.0
BRICK_HEIGHT = 4.0
WALL_WIDTH = 10000.0
WALL_HEIGHT = 25.0
PLATFORM_WIDTH = 15.0
PLATFORM_HEIGHT = 5.0
PLATFORM_START = (0.0, -35.0)
PLATFORM_SPEED = 65.0


class Brick(Actor):
    """A breakable block; the game is won when none are left."""

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self.rotation = 0.0
        self.sprite = SpriteComponent(self, BufferType.RECTANGLE)
        self.sprite.set_texture("Brick")
        self.square = SquareComponent(self)
        self.square.height = BRICK_HEIGHT
        self.square.width = BRICK_WIDTH
        game.add_brick(self)

    def destroy(self) -> None:
        """Remove the brick from the game, which may end the level."""
        super().destroy()
        self.game.remove_brick(self)


class BouncingWall(Actor):
    """A long, thin wall the ball bounces off."""

    def __init__(self, game: Game, position: Vector2, rotation: float) -> None:
        super().__init__(game)
        self.position = position
        self.rotation = rotation
        self.square = SquareComponent(self)
        self.square.height = WALL_HEIGHT
        self.square.width = WALL_WIDTH
        self.sprite = SpriteComponent(self, BufferType.RECTANGLE)
        self.sprite.set_texture("Ball")
        game.add_wall(self)

    def destroy(self) -> None:
        self.game.remove_wall(self)
        super().destroy()


class Platform(Actor):
    """The paddle the player steers with the arrow keys."""

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self.position = Vector2(*PLATFORM_START)
        self.rotation = 0.0
        self.sprite = SpriteComponent(self, BufferType.RECTANGLE)
        self.sprite.set_texture("Platform2")
        self.square = SquareComponent(self)
        self.square.height = PLATFORM_HEIGHT
        self.square.width = PLATFORM_WIDTH
        self.input_component = InputComponent(self)
        self.input_component.max_horz_speed = PLATFORM_SPEED