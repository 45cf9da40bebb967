"""The game: actor bookkeeping, the brick level, and per-frame steps."""

from __future__ import annotations

import bisect
import os
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from .actor import Actor, ActorState
from .camera import Camera
from .entities import Brick, Platform
from .inputstate import VK_ESCAPE, InputState
from .mathutil import Vector2, Vector3
from .sprite import DrawCommand, SpriteComponent
from .texture import TargaError, Texture

MAX_DELTA_TIME = 0.05
CAMERA_START = (0.0, 0.0, -90.0)

TEXTURE_FILES = {
    "Brick": "Brick.tga",
    "Ball": "sample-tga-files-sample_640x426.tga",
    "Platform1": "arkanoidPlatform.tga",
    "Platform2": "PlatformSkin2.tga",
    "Ball1": "Ball2.tga",
}

BRICK_COLUMNS = 11
BRICK_ROWS = 4
BRICK_MIN_X = -60.0
BRICK_MAX_X = 60.0
BRICK_MIN_Y = 0.0
BRICK_MAX_Y = 35.0


def _index_of(items: Sequence[Any], item: Any) -> Optional[int]:
    return next((i for i, existing in enumerate(items) if existing is item), None)


def _discard(items: list, item: Any) -> None:
    index = _index_of(items, item)
    if index is not None:
        del items[index]


class Game:
    """Owns every actor, sprite and texture, and steps the simulation."""

    def __init__(self, texture_dir: Union[str, os.PathLike] = "Textures") -> None:
        self.texture_dir = Path(texture_dir)
        self._textures: dict[str, Texture] = {}
        self._actors: list[Actor] = []
        self._pending_actors: list[Actor] = []
        self._sprites: list[SpriteComponent] = []
        self._bricks: list[Actor] = []
        self._balls: list[Actor] = []
        self._walls: list[Actor] = []
        self.platform: Optional[Platform] = None
        self.input = InputState()
        self.camera = Camera(position=Vector3(*CAMERA_START))
        self.is_running = True
        self._updating_actors = False
        self._shut_down = False

    @property
    def actors(self) -> list[Actor]:
        return list(self._actors)

    @property
    def pending_actors(self) -> list[Actor]:
        return list(self._pending_actors)

    @property
    def sprites(self) -> list[SpriteComponent]:
        return list(self._sprites)

    @property
    def bricks(self) -> list[Actor]:
        return list(self._bricks)

    @property
    def balls(self) -> list[Actor]:
        return list(self._balls)

    @property
    def walls(self) -> list[Actor]:
        return list(self._walls)

    def add_actor(self, actor: Actor) -> None:
        """Register an actor; while actors update it waits in the pending list."""
        if self._updating_actors:
            self._pending_actors.append(actor)
        else:
            self._actors.append(actor)

    def remove_actor(self, actor: Actor) -> None:
        """Drop an actor; the last actor of its list takes its place."""
        for group in (self._pending_actors, self._actors):
            index = _index_of(group, actor)
            if index is not None:
                group[index] = group[-1]
                group.pop()

    def add_sprite(self, sprite: SpriteComponent) -> None:
        """Insert after every sprite whose draw order is not higher."""
        index = bisect.bisect_right(
            self._sprites, sprite.draw_order, key=lambda s: s.draw_order
        )
        self._sprites.insert(index, sprite)

    def remove_sprite(self, sprite: SpriteComponent) -> None:
        index = _index_of(self._sprites, sprite)
        if index is None:
            raise ValueError("sprite is not registered with this game")
        del self._sprites[index]

    def load_texture(self, name: str, path: Union[str, os.PathLike]) -> Texture:
        """Load a Targa file under ``name``; a name already loaded is kept."""
        existing = self._textures.get(name)
        if existing is not None:
            return existing
        texture = Texture.from_file(path)
        return self._textures.setdefault(name, texture)

    def get_texture(self, name: str) -> Optional[Texture]:
        return self._textures.get(name)

    def add_brick(self, brick: Actor) -> None:
        self._bricks.append(brick)

    def remove_brick(self, brick: Actor) -> None:
        _discard(self._bricks, brick)
        self.check_win_condition()

    def add_ball(self, ball: Actor) -> None:
        self._balls.append(ball)

    def remove_ball(self, ball: Actor) -> None:
        _discard(self._balls, ball)

    def add_wall(self, wall: Actor) -> None:
        self._walls.append(wall)

    def remove_wall(self, wall: Actor) -> None:
        _discard(self._walls, wall)

    def process_input(self, input_state: Optional[InputState] = None) -> None:
        """Stop on Escape, then hand the key state to every actor."""
        state = self.input if input_state is None else input_state
        if state.is_key_down(VK_ESCAPE):
            self.is_running = False
        self._updating_actors = True
        try:
            for actor in list(self._actors):
                actor.process_input(state)
        finally:
            self._updating_actors = False

    def update_game(self, delta_time: float) -> None:
        """Advance all actors, admit pending ones and destroy the dead."""
        dt = min(delta_time, MAX_DELTA_TIME)
        self._updating_actors = True
        try:
            for actor in list(self._actors):
                actor.update(dt)
        finally:
            self._updating_actors = False

        for pending in self._pending_actors:
            pending.compute_world_transform()
            self._actors.append(pending)
        self._pending_actors.clear()

        dead = [actor for actor in self._actors if actor.state is ActorState.DEAD]
        for actor in dead:
            actor.destroy()

    def generate_output(self) -> list[DrawCommand]:
        """Draw commands for every textured sprite, back to front."""
        if self.input.is_key_down(VK_ESCAPE):
            return []
        self.camera.render()
        return [cmd for sprite in self._sprites if (cmd := sprite.draw()) is not None]

    def load_data(self) -> None:
        """Load the textures that can be found and build the level."""
        for name, filename in TEXTURE_FILES.items():
            try:
                self.load_texture(name, self.texture_dir / filename)
            except (OSError, TargaError):
                continue
        self._spawn_level()

    def _spawn_level(self) -> None:
        self.platform = Platform(self)
        step_x = (BRICK_MAX_X - BRICK_MIN_X) / (BRICK_COLUMNS - 1)
        step_y = (BRICK_MAX_Y - BRICK_MIN_Y) / (BRICK_ROWS - 1)
        for row in range(BRICK_ROWS):
            for column in range(BRICK_COLUMNS):
                brick = Brick(self)
                brick.position = Vector2(
                    BRICK_MIN_X + column * step_x, BRICK_MIN_Y + row * step_y
                )

    def unload_data(self) -> None:
        """Destroy every actor."""
        while self._actors:
            self._actors[-1].destroy()

    def check_win_condition(self) -> None:
        if not self._bricks and not self._shut_down:
            self.shutdown()

    def lose_condition(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Mark every actor dead and build a fresh level."""
        for actor in self._actors:
            actor.state = ActorState.DEAD
        self._spawn_level()

    def shutdown(self) -> None:
        """Stop the game and destroy every actor."""
        if self._shut_down:
            return
        self._shut_down = True
        self.is_running = False
        self.input.reset()
        self.unload_data()