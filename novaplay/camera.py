"""A 2D camera that maps world rectangles to screen coordinates and can shake."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from novaplay import matrix
from novaplay.gamebase import WINDOW_HEIGHT, WINDOW_WIDTH, Key, KeyManager
from novaplay.structures import IntVector2, Matrix3x3, RectangleObject, Vector2, Vertex


@dataclass
class Camera:
    """World position, scale and rotation of the view, with shake state."""

    is_shake: bool = False
    shake_duration: int = 20
    shake_counter: int = 0
    magnitude: int = 15
    shaking_pos: IntVector2 = field(default_factory=IntVector2)
    camera_matrix: Matrix3x3 = field(default_factory=Matrix3x3)
    pos: Vector2 = field(default_factory=lambda: Vector2(650.0, 350.0))
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    theta: float = 0.0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def shake_object(self, ro: RectangleObject) -> None:
        """Advance the shake of a single rectangle by one frame."""
        if ro.shake_counter < ro.shake_duration:
            m = ro.magnitude
            ro.shaking_pos = IntVector2(self.rng.randint(-m, m), self.rng.randint(-m, m))
            ro.shake_counter += 1
        else:
            ro.shaking_pos = IntVector2()
            ro.shake_counter = 0
            ro.is_shake = False

    def shake_camera(self) -> None:
        """Advance the camera shake by one frame."""
        if self.shake_counter < self.shake_duration:
            m = self.magnitude
            self.shaking_pos = IntVector2(self.rng.randint(-m, m), self.rng.randint(-m, m))
            self.shake_counter += 1
        else:
            self.shaking_pos = IntVector2()
            self.shake_counter = 0
            self.is_shake = False

    def rectangle_world_matrix(self, ro: RectangleObject) -> Matrix3x3:
        """Return the world matrix of a rectangle."""
        return matrix.make_affine(ro.scale, ro.theta, Vector2(ro.w_pos.x, ro.w_pos.y))

    def camera_world_matrix(self) -> Matrix3x3:
        """Return the world matrix of the camera, shake included."""
        position = Vector2(self.pos.x + self.shaking_pos.x, self.pos.y + self.shaking_pos.y)
        return matrix.make_affine(self.scale, self.theta, position)

    def view_matrix(self) -> Matrix3x3:
        """Return the inverse of the camera's world matrix."""
        return matrix.inverse(self.camera_world_matrix())

    def _screen_matrix(self, world: Matrix3x3) -> Matrix3x3:
        orthographic = matrix.make_orthographic(
            -WINDOW_WIDTH / 2.0,
            WINDOW_HEIGHT / 2.0,
            WINDOW_WIDTH / 2.0,
            -WINDOW_HEIGHT / 2.0,
        )
        viewport = matrix.make_viewport(0.0, 0.0, float(WINDOW_WIDTH), float(WINDOW_HEIGHT))
        result = matrix.multiply(world, self.view_matrix())
        result = matrix.multiply(result, orthographic)
        result = matrix.multiply(result, viewport)
        self.camera_matrix = result
        return result

    def make_camera_matrix(self, rect: RectangleObject) -> None:
        """Compute the screen corners and centre of ``rect`` from its world placement."""
        m = self._screen_matrix(self.rectangle_world_matrix(rect))
        draw = rect.s_draw_vertex
        rect.s_vertex = Vertex(
            lt=matrix.transform(draw.lt, m),
            lb=matrix.transform(draw.lb, m),
            rt=matrix.transform(draw.rt, m),
            rb=matrix.transform(draw.rb, m),
        )
        rect.s_pos = matrix.transform(rect.draw_pos, m)

    def transform_point(self, scale: Vector2, theta: float, translate: Vector2) -> Vector2:
        """Return the screen position of an object placed by scale, theta and translate."""
        world = matrix.make_affine(scale, theta, Vector2(translate.x, translate.y))
        return matrix.transform(Vector2(0.0, 0.0), self._screen_matrix(world))

    def debug_camera_movement(self, keys: KeyManager) -> None:
        """Pan, zoom and rotate the camera from held keys."""
        if keys.is_pressed(Key.LEFT):
            self.pos.x -= 5.0
        if keys.is_pressed(Key.RIGHT):
            self.pos.x += 5.0
        if keys.is_pressed(Key.UP):
            self.pos.y += 5.0
        if keys.is_pressed(Key.DOWN):
            self.pos.y -= 5.0
        if keys.is_pressed(Key.R):
            self.scale.x += 0.01
            self.scale.y += 0.01
        if keys.is_pressed(Key.T):
            self.scale.x -= 0.01
            self.scale.y -= 0.01
        if keys.is_pressed(Key.E):
            self.theta += 0.01
        if keys.is_pressed(Key.Q):
            self.theta -= 0.01

    def debug_rect_movement(self, ro: RectangleObject, keys: KeyManager) -> None:
        """Rotate and scale a rectangle from held keys."""
        if keys.is_pressed(Key.Z):
            ro.theta -= 0.05
        if keys.is_pressed(Key.X):
            ro.theta += 0.05
        if keys.is_pressed(Key.C):
            ro.scale.x -= 0.05
            ro.scale.y -= 0.05
        if keys.is_pressed(Key.V):
            ro.scale.x += 0.05
            ro.scale.y += 0.05