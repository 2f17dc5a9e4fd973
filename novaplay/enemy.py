"""Bouncing enemies with friction, air drag and pairwise collisions."""

from __future__ import annotations

import itertools
import math
import random
from dataclasses import dataclass, field

from novaplay import mathutils
from novaplay.afterimage import AfterImage
from novaplay.camera import Camera
from novaplay.gamebase import Key, KeyManager
from novaplay.structures import RectangleObject, Vector2

ENEMY_AMOUNT = 10
GROUND_Y = 100.0
SPAWN_X = 1300.0
LEFT_LIMIT = 100.0
RIGHT_LIMIT = 1400.0
RESTITUTION = 0.8


@dataclass
class Enemy:
    """A ball that rolls in from the right, bounces and leaves on the left."""

    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    rect: RectangleObject = field(default_factory=RectangleObject)
    vel: Vector2 = field(default_factory=Vector2)
    acc: Vector2 = field(default_factory=Vector2)
    radius: float = 0.0
    mass: float = 1.0
    base_mass: float = 1.5
    miu: float = 0.0006
    gravity: float = -0.6
    k_gravity: Vector2 = field(default_factory=lambda: Vector2(0.0, -9.8))
    air_drag: float = 0.1
    air_resistance: Vector2 = field(default_factory=Vector2)
    air_resistance_acc: Vector2 = field(default_factory=Vector2)
    fric_force: Vector2 = field(default_factory=Vector2)
    fric_normal_force: Vector2 = field(default_factory=Vector2)
    fric_dir: Vector2 = field(default_factory=Vector2)
    fric_mag: float = 0.0
    bounce_factor: float = 1.0
    theta: float = 1.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    is_exist: bool = False
    is_air_resistance: bool = False
    is_after_image: bool = False
    is_attacked: bool = True
    camera: Camera = field(default_factory=Camera)
    after_image: AfterImage = field(default_factory=AfterImage)

    def __post_init__(self) -> None:
        self._refresh_air_resistance()

    def _refresh_air_resistance(self) -> None:
        self.air_resistance = Vector2(self.air_drag * -self.vel.x, self.air_drag * -self.vel.y)
        self.air_resistance_acc = Vector2(
            self.air_resistance.x / self.mass, self.air_resistance.y / self.mass
        )

    def init(self) -> None:
        """Reset the enemy's physics settings and flags to their starting values."""
        self.is_exist = False
        self.camera = Camera()
        self.after_image = AfterImage()
        self.theta = 1.0
        self.scale = Vector2(1.0, 1.0)
        self.bounce_factor = 1.0
        self.acc = Vector2(0.0, 0.0)
        self.mass = 1.0
        self.base_mass = 1.5
        self.miu = 0.0006
        self.gravity = -0.6
        self.k_gravity = Vector2(0.0, -9.8)
        self.air_drag = 0.1
        self._refresh_air_resistance()
        self.is_air_resistance = False
        self.is_after_image = False
        self.is_attacked = True

    def _spawn(self) -> None:
        self.rect.w_pos.x = SPAWN_X
        self.rect.w_pos.y = float(self.rng.randint(200, 599))
        self.radius = self.rng.random() * 50.0 + 10.0
        self.vel = Vector2(-(self.rng.random() * 5.0 + 1.0), 0.0)
        self.mass = self.base_mass * (self.radius / 30)
        self.is_exist = True
        self._refresh_air_resistance()

    def _apply_friction(self) -> None:
        pos = self.rect.w_pos
        if pos.y == GROUND_Y + self.radius:
            self.fric_normal_force = Vector2(
                -self.mass * self.k_gravity.x, -self.mass * self.k_gravity.y
            )
            self.fric_mag = self.miu * mathutils.length(self.fric_normal_force)
            direction = mathutils.normalize(self.vel)
            self.fric_dir = Vector2(-direction.x, -direction.y)
            self.fric_force.x = self.fric_mag * self.fric_dir.x
            self.acc.x = self.fric_force.x / self.mass
        else:
            self.acc.x = 0.0

    def update(self, keys: KeyManager | None = None) -> None:
        """Advance one frame: spawn if needed, apply forces, bounce and leave the screen."""
        keys = keys if keys is not None else KeyManager()
        if not self.is_exist:
            self._spawn()

        pos = self.rect.w_pos
        self._apply_friction()

        if keys.is_just_pressed(Key.F):
            self.is_air_resistance = not self.is_air_resistance
        if self.is_air_resistance:
            self._refresh_air_resistance()
        else:
            self.air_resistance_acc = Vector2(0.0, 0.0)

        if math.fabs(self.acc.x / 60.0) > math.fabs(self.vel.x):
            self.acc.x = self.vel.x * 60.0 + self.air_resistance_acc.x

        self.vel.x += self.acc.x
        pos.x += self.vel.x

        self.acc.y = self.gravity + self.air_resistance_acc.y
        self.vel.y += self.acc.y * self.mass
        pos.y += self.vel.y

        floor = GROUND_Y + self.radius
        if pos.y < floor:
            pos.y = floor
            self.bounce_factor = 1.0 / self.mass
            if self.bounce_factor > 1.0:
                self.bounce_factor = 0.95
            self.vel.y *= -self.bounce_factor

        if pos.x <= LEFT_LIMIT + self.radius:
            self.is_exist = False
            self.is_attacked = True
        if pos.x >= RIGHT_LIMIT + self.radius:
            self.is_exist = False

        if keys.is_just_pressed(Key.G):
            self.is_after_image = not self.is_after_image
        if self.is_after_image:
            self.after_image.update_position_history(pos)

        self.camera.make_camera_matrix(self.rect)


def check_collision(enemy1: Enemy, enemy2: Enemy) -> bool:
    """Return whether two enemies' circles overlap."""
    gap = mathutils.distance(enemy1.rect.w_pos, enemy2.rect.w_pos)
    return gap < enemy1.radius + enemy2.radius


def handle_collision(enemy1: Enemy, enemy2: Enemy) -> None:
    """Exchange an impulse along the line between two approaching enemies."""
    relative = Vector2(enemy1.vel.x - enemy2.vel.x, enemy1.vel.y - enemy2.vel.y)
    normal = Vector2(
        enemy1.rect.w_pos.x - enemy2.rect.w_pos.x,
        enemy1.rect.w_pos.y - enemy2.rect.w_pos.y,
    )
    gap = mathutils.length(normal)
    if gap == 0:
        return
    normal = Vector2(normal.x / gap, normal.y / gap)

    along_normal = mathutils.dot(relative, normal)
    if along_normal > 0:
        return

    impulse = -(1 + RESTITUTION) * along_normal
    impulse /= 1 / enemy1.mass + 1 / enemy2.mass
    push = Vector2(impulse * normal.x, impulse * normal.y)

    enemy1.vel.x += push.x / enemy1.mass
    enemy1.vel.y += push.y / enemy1.mass
    enemy2.vel.x -= push.x / enemy2.mass
    enemy2.vel.y -= push.y / enemy2.mass


@dataclass
class EnemyManager:
    """Owns the enemies, resolves their collisions and keeps the score."""

    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    enemies: list[Enemy] = field(default_factory=list)
    frame_count: int = 0
    appear_interval: int = 100
    is_collision_enemy: bool = True
    score: int = 200

    def __post_init__(self) -> None:
        if not self.enemies:
            self.enemies = [Enemy(rng=self.rng) for _ in range(ENEMY_AMOUNT)]

    def init(self) -> None:
        """Reset the spawn timer and the score."""
        self.appear_interval = 100
        self.frame_count = 0
        self.score = 100

    def add_score(self, value: int) -> None:
        """Add ``value`` to the score."""
        self.score += value

    def update(self, keys: KeyManager | None = None) -> None:
        """Advance every enemy one frame and charge the score for each that got through."""
        keys = keys if keys is not None else KeyManager()
        if self.frame_count <= 0:
            self.frame_count = self.appear_interval
        if self.frame_count == self.appear_interval:
            for enemy in self.enemies:
                enemy.is_exist = True
        self.frame_count -= 1

        if keys.is_just_pressed(Key.H):
            self.is_collision_enemy = not self.is_collision_enemy

        if self.is_collision_enemy:
            for first, second in itertools.combinations(self.enemies, 2):
                if check_collision(first, second):
                    handle_collision(first, second)

        for enemy in self.enemies:
            enemy.update(keys)
            if enemy.is_attacked:
                self.score -= 10
                enemy.is_attacked = False