# brickengine

A small engine for a brick-breaking arcade game. It has no dependencies and is made of these modules:

- `brickengine.mathutil`: `Vector2` and `Vector3`, plus the scalar helpers `to_radians`, `to_degrees`, `near_zero`, `clamp`, `lerp` and `cot`.
- `brickengine.matrices`: row-major `Matrix3` and `Matrix4` and a `Quaternion`. They cover scale, rotation and translation transforms, inversion, look-at, orthographic and perspective projections, and lerp, slerp and concatenation for quaternions.
- `brickengine.rng`: `Random`, a seedable generator of floats, ints, `Vector2`s and `Vector3`s in given ranges. It raises `ValueError` for an empty range.
- `brickengine.inputstate`: `InputState`, a table of 256 virtual keys. The module also has the key codes `VK_ESCAPE`, `VK_LEFT` and `VK_RIGHT`.
- `brickengine.actor`: the actor/component system. It has `Actor` and `ActorState`, plus `Component`, `MoveComponent`, `InputComponent` (arrow-key steering) and `SquareComponent` (a collision box). Components run in update order. An actor rebuilds its world transform only after its position, rotation or scale changes.
- `brickengine.camera`: `Camera`. Its `render()` method builds a view matrix from the camera's position and its rotation in degrees.
- `brickengine.texture`: `Texture.from_file` and `Texture.from_bytes` load uncompressed 24- and 32-bit Targa images into top-to-bottom RGBA bytes. There is also `convert_to_32bit`. Bad data raises `TargaError`.
- `brickengine.models`: `SquareModel` and `RectModel`, which hold quad vertex and index data in triangle-strip order, and `BufferType`.
- `brickengine.sprite`: `SpriteComponent`. Its `draw()` method returns a `DrawCommand` record: mesh type, world transform and texture. It returns `None` when the sprite has no texture.
- `brickengine.entities`: the level actors `Brick`, `BouncingWall` and `Platform`.
- `brickengine.game`: `Game`, which owns the actors, sprites and textures. It builds the level and runs the per-frame input, update and output steps.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from brickengine.game import Game
from brickengine.inputstate import VK_RIGHT, InputState

game = Game(texture_dir="Textures")
game.load_data()                 # the platform and a 4 x 11 grid of bricks

keys = InputState()
keys.key_down(VK_RIGHT)
game.process_input(keys)
game.update_game(1 / 60)

for command in game.generate_output():
    print(command.buffer_type, command.world_transform.get_translation())
```

`load_data` loads the textures named in `game.TEXTURE_FILES` from `texture_dir`. A file that is missing or cannot be read is skipped. A sprite whose texture did not load produces no draw command.

`update_game` takes the elapsed time in seconds and clamps it to at most 0.05 s. Actors created during an update wait in a pending list and join the scene once the update is done. Actors marked `ActorState.DEAD` are destroyed at the end of the step.

When the last brick is removed, the game shuts itself down. `lose_condition` and `reset` mark every actor dead and build a fresh level. Holding Escape stops the game: `process_input` clears `is_running`, and `generate_output` returns no commands.

## What it does not do

- It does not open a window or draw anything on screen. `generate_output` only returns `DrawCommand` records, which a renderer of your choice has to draw.
- There is no frame loop and no command-line program. You call `process_input`, `update_game` and `generate_output` yourself.
- There is no ball actor and no collision handling. The `add_ball` and `remove_ball` bookkeeping exists, and so do the collision boxes, but nothing moves a ball or tests for hits.
- There is no circle mesh, although `BufferType.CIRCLE` exists.