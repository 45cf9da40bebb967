"""Actors, the components attached to them, and the basic component kinds."""

from __future__ import annotations

import bisect
import math
from enum import Enum
from typing import Optional, Protocol

from .inputstate import VK_LEFT, VK_RIGHT, InputState
from .mathutil import Vector2, Vector3, near_zero
from .matrices import Matrix4

PLATFORM_LIMIT_X = 65.0


class ActorRegistry(Protocol):
    """What an actor needs from the game that owns it."""

    def add_actor(self, actor: Actor) -> None: ...

    def remove_actor(self, actor: Actor) -> None: ...


class ActorState(Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    DEAD = "dead"


class Actor:
    """A game object with a 2D transform and an ordered set of components."""

    def __init__(self, game: ActorRegistry) -> None:
        self.state = ActorState.ACTIVE
        self._position = Vector2()
        self._scale = 1.0
        self._rotation = 0.0
        self._world_transform = Matrix4()
        self._recompute_world_transform = True
        self._components: list[Component] = []
        self.age = 0.0
        self.last_input: Optional[InputState] = None
        self.game = game
        game.add_actor(self)

    @property
    def position(self) -> Vector2:
        return Vector2(self._position.x, self._position.y)

    @position.setter
    def position(self, pos: Vector2) -> None:
        self._position = Vector2(pos.x, pos.y)
        self._recompute_world_transform = True

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, scale: float) -> None:
        self._scale = scale
        self._recompute_world_transform = True

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, rotation: float) -> None:
        self._rotation = rotation
        self._recompute_world_transform = True

    @property
    def world_transform(self) -> Matrix4:
        return self._world_transform

    @property
    def forward(self) -> Vector2:
        """Unit vector pointing along the actor's rotation."""
        return Vector2(math.cos(self._rotation), math.sin(self._rotation))

    @property
    def components(self) -> tuple[Component, ...]:
        """Attached components in update order."""
        return tuple(self._components)

    def update(self, delta_time: float) -> None:
        """Advance the actor by ``delta_time`` seconds if it is active."""
        if self.state is not ActorState.ACTIVE:
            return
        self.compute_world_transform()
        self.update_components(delta_time)
        self.update_actor(delta_time)
        self.compute_world_transform()

    def update_components(self, delta_time: float) -> None:
        for component in list(self._components):
            component.update(delta_time)

    def update_actor(self, delta_time: float) -> None:
        """Actor-specific update; by default only tracks time alive."""
        self.age += delta_time

    def process_input(self, key_state: InputState) -> None:
        """Feed keyboard state to the components, then to the actor."""
        if self.state is not ActorState.ACTIVE:
            return
        for component in list(self._components):
            component.process_input(key_state)
        self.actor_input(key_state)

    def actor_input(self, key_state: InputState) -> None:
        """Actor-specific input handling; by default remembers the state."""
        self.last_input = key_state

    def compute_world_transform(self) -> None:
        """Rebuild the world transform (scale, rotate, translate) if stale."""
        if not self._recompute_world_transform:
            return
        self._recompute_world_transform = False
        transform = Matrix4.create_uniform_scale(self._scale)
        transform *= Matrix4.create_rotation_z(self._rotation)
        transform *= Matrix4.create_translation(
            Vector3(self._position.x, self._position.y, 0.0)
        )
        self._world_transform = transform
        for component in list(self._components):
            component.on_update_world_transform()

    def add_component(self, component: Component) -> None:
        """Insert after every component whose update order is not higher."""
        index = bisect.bisect_right(
            self._components,
            component.update_order,
            key=lambda c: c.update_order,
        )
        self._components.insert(index, component)

    def remove_component(self, component: Component) -> None:
        for index, existing in enumerate(self._components):
            if existing is component:
                del self._components[index]
                return

    def destroy(self) -> None:
        """Detach from the game and destroy every component."""
        self.game.remove_actor(self)
        while self._components:
            self._components[-1].destroy()


class Component:
    """Behaviour attached to an actor; lower update orders run first."""

    def __init__(self, owner: Actor, update_order: int = 100) -> None:
        self.owner = owner
        self._update_order = update_order
        self.world_transform = owner.world_transform
        self.last_input: Optional[InputState] = None
        owner.add_component(self)

    @property
    def update_order(self) -> int:
        return self._update_order

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds; does nothing by default."""

    def process_input(self, key_state: InputState) -> None:
        """React to keyboard state; by default remembers the state."""
        self.last_input = key_state

    def on_update_world_transform(self) -> None:
        """Called when the owner's world transform changes; caches it."""
        self.world_transform = self.owner.world_transform

    def destroy(self) -> None:
        self.owner.remove_component(self)


class MoveComponent(Component):
    """Moves the owner horizontally and along its forward direction."""

    def __init__(self, owner: Actor, update_order: int = 10) -> None:
        self.horizontal_speed = 0.0
        self.forward_speed = 0.0
        super().__init__(owner, update_order)

    def update(self, delta_time: float) -> None:
        if not near_zero(self.horizontal_speed):
            pos = self.owner.position
            pos.x += self.horizontal_speed * delta_time
            self.owner.position = pos
        if not near_zero(self.forward_speed):
            pos = self.owner.position
            pos += self.owner.forward * self.forward_speed * delta_time
            self.owner.position = pos


class InputComponent(MoveComponent):
    """Sets horizontal speed from the left and right arrow keys."""

    def __init__(self, owner: Actor) -> None:
        self.max_horz_speed = 25.0
        self.right_key = 0
        self.left_key = 0
        super().__init__(owner)

    def process_input(self, key_state: InputState) -> None:
        x = self.owner.position.x
        speed = 0.0
        if key_state.is_key_down(VK_RIGHT) and x < PLATFORM_LIMIT_X:
            speed += self.max_horz_speed
        if key_state.is_key_down(VK_LEFT) and x > -PLATFORM_LIMIT_X:
            speed -= self.max_horz_speed
        self.horizontal_speed = speed


class SquareComponent(Component):
    """Axis-aligned box used for collisions, centred on the owner."""

    def __init__(self, owner: Actor) -> None:
        self.width = 0.0
        self.height = 0.0
        super().__init__(owner)

    @property
    def center(self) -> Vector2:
        return self.owner.position