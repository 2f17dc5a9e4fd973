# novaplay

A small, dependency-free toolkit of the pieces a 2D arcade game is built from.
It computes positions, colours, collisions and key states; the caller renders
the results with whatever graphics library it uses.

## Modules

- `novaplay.structures` – dataclasses `Vector2`, `IntVector2`, `Matrix3x3`
  (with `Matrix3x3.identity()`), `Vertex` (with `Vertex.centered(width, height)`),
  `VertexOnMap`, `RectangleObject` and `Knockback`.
- `novaplay.mathutils` – `factorial`, `power`, `binomial`, `bernstein`,
  `distance`, `length`, `normalize`, `dot`, `cross`, `rotate`, `catmull_rom`
  and the `check_ground` box-overlap test.
- `novaplay.matrix` – 3x3 homogeneous matrices for row vectors: `multiply`,
  `inverse` (raises `ValueError` for a singular matrix), `make_rotate`,
  `make_scale`, `make_translate`, `transform`, `make_affine`,
  `make_orthographic` and `make_viewport`.
- `novaplay.easing` – the `EasingType` enum, the easing curves
  (`ease_in_sine` … `ease_in_out_bounce`), `get_easing_function`, and an
  `Easing` timer whose `step_value`, `step_color` and `step_vector` advance by
  `interval` each call and return the eased value; `color_reverse` blends two
  packed RGBA colours by the current ease value.
- `novaplay.gamebase` – window constants `WINDOW_WIDTH`, `WINDOW_HEIGHT`,
  `BLOCK_SIZE`, the `Direction` and `Key` enums, and a `KeyManager` whose
  `update(pressed)` starts a new frame and whose `is_just_pressed`,
  `is_pressed`, `is_just_released` and `is_released` answer edge and level
  questions.
- `novaplay.camera` – a `Camera` that builds world → view → screen matrices
  (`make_camera_matrix`, `transform_point`), shakes itself or a rectangle
  (`shake_camera`, `shake_object`), and can be nudged from a `KeyManager`
  (`debug_camera_movement`, `debug_rect_movement`).
- `novaplay.afterimage` – an `AfterImage` trail that records every third
  position (at most five, newest first) and returns the quads or circles to
  draw through `rect_instances` and `circle_instances`.
- `novaplay.enemy` – `Enemy` balls with gravity, ground friction, optional air
  resistance (toggled with `Key.F`) and bouncing; `check_collision` and
  `handle_collision` resolve pairs; `EnemyManager` updates all of them,
  toggles pair collisions with `Key.H` and takes 10 off its `score` for each
  enemy that gets past the left edge.
- `novaplay.tilemap` – a 19 × 32 `Map` of `MapChip` cells with walls and a
  floor, point and edge collision checks (`collision_check`,
  `collision_left`, `collision_right`, `collision_top`, `collision_bottom`),
  `get_chip`/`set_chip`, a block colour that cycles through random bright
  colours via `update_colors`, and `chip_colors` to list what to draw.

Random behaviour (`Camera`, `Enemy`, `EnemyManager`, `Map`) comes from an
`rng` field holding a `random.Random`, so it can be seeded.

## Install

```
pip install .
```

## Example

```python
from novaplay.structures import Vector2
from novaplay.mathutils import catmull_rom
from novaplay.easing import Easing, EasingType
from novaplay.gamebase import Key, KeyManager
from novaplay.enemy import EnemyManager

p = catmull_rom(Vector2(0, 0), Vector2(1, 0), Vector2(2, 1), Vector2(3, 1), 0.5)

ease = Easing()
ease.set_easing(EasingType.EASE_OUT_CUBIC)
ease.is_ease = True
value = 0.0
while ease.is_ease:
    value = ease.step_value(0.0, 100.0)

keys = KeyManager()
manager = EnemyManager()
for frame in range(60):
    keys.update({Key.G} if frame == 0 else set())
    manager.update(keys)
print(manager.score)
```

## What it does not do

There is no window, drawing, sound, texture loading or game loop, and no
player, bullets or title/select/play scenes. Keyboard input is whatever the
caller feeds to `KeyManager.update`; there is no command to run.

## Tests

```
pip install .[test]
pytest
```