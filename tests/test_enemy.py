import random

import pytest

from novaplay.enemy import (
    ENEMY_AMOUNT,
    Enemy,
    EnemyManager,
    check_collision,
    handle_collision,
)
from novaplay.gamebase import Key, KeyManager
from novaplay.structures import Vector2


def _enemy_at(x, y, radius, mass=1.0, vel=(0.0, 0.0)):
    enemy = Enemy(rng=random.Random(1))
    enemy.rect.w_pos = Vector2(x, y)
    enemy.radius = radius
    enemy.mass = mass
    enemy.vel = Vector2(*vel)
    enemy.is_exist = True
    return enemy


def test_check_collision_overlap_and_apart():
    a = _enemy_at(0.0, 0.0, 10.0)
    b = _enemy_at(15.0, 0.0, 10.0)
    c = _enemy_at(25.0, 0.0, 10.0)
    assert check_collision(a, b) is True
    assert check_collision(a, c) is False


def test_handle_collision_conserves_momentum():
    a = _enemy_at(0.0, 0.0, 10.0, mass=2.0, vel=(3.0, 1.0))
    b = _enemy_at(15.0, 5.0, 10.0, mass=1.0, vel=(-2.0, 0.5))
    before = (a.mass * a.vel.x + b.mass * b.vel.x, a.mass * a.vel.y + b.mass * b.vel.y)
    handle_collision(a, b)
    after = (a.mass * a.vel.x + b.mass * b.vel.x, a.mass * a.vel.y + b.mass * b.vel.y)
    assert after[0] == pytest.approx(before[0])
    assert after[1] == pytest.approx(before[1])
    assert a.vel.x < 3.0
    assert b.vel.x > -2.0


def test_handle_collision_ignores_separating_pair():
    a = _enemy_at(0.0, 0.0, 10.0, vel=(-1.0, 0.0))
    b = _enemy_at(15.0, 0.0, 10.0, vel=(1.0, 0.0))
    handle_collision(a, b)
    assert a.vel == Vector2(-1.0, 0.0)
    assert b.vel == Vector2(1.0, 0.0)


def test_spawn_sets_position_radius_and_mass():
    enemy = Enemy(rng=random.Random(42))
    enemy.update()
    assert enemy.is_exist is True
    assert 10.0 <= enemy.radius <= 60.0
    assert enemy.mass == pytest.approx(enemy.base_mass * enemy.radius / 30)
    assert enemy.vel.x < 0
    assert enemy.rect.w_pos.x == pytest.approx(1300.0 + enemy.vel.x)


def test_bounces_off_ground():
    enemy = _enemy_at(600.0, 110.0, 20.0, mass=1.0, vel=(-2.0, 0.0))
    enemy.update()
    assert enemy.rect.w_pos.y == 120.0
    assert enemy.vel.y > 0
    assert enemy.bounce_factor == 1.0


def test_reaching_left_edge_marks_attacked():
    enemy = _enemy_at(110.0, 300.0, 20.0, vel=(-2.0, 0.0))
    enemy.is_attacked = False
    enemy.update()
    assert enemy.is_exist is False
    assert enemy.is_attacked is True


def test_air_resistance_toggles_on_key_press_only():
    enemy = _enemy_at(600.0, 300.0, 20.0, vel=(-2.0, 0.0))
    keys = KeyManager()
    keys.update({Key.F})
    enemy.update(keys)
    assert enemy.is_air_resistance is True
    keys.update({Key.F})
    enemy.update(keys)
    assert enemy.is_air_resistance is True
    keys.update(set())
    keys.update({Key.F})
    enemy.update(keys)
    assert enemy.is_air_resistance is False


def test_init_resets_flags():
    enemy = _enemy_at(600.0, 300.0, 20.0, mass=3.0)
    enemy.is_after_image = True
    enemy.is_attacked = False
    enemy.init()
    assert enemy.is_exist is False
    assert enemy.is_after_image is False
    assert enemy.is_attacked is True
    assert enemy.mass == 1.0


def test_manager_first_update_charges_every_enemy():
    manager = EnemyManager(rng=random.Random(3))
    assert len(manager.enemies) == ENEMY_AMOUNT
    start = manager.score
    manager.update()
    assert manager.score == start - 10 * ENEMY_AMOUNT
    assert all(not e.is_attacked for e in manager.enemies)
    assert manager.frame_count == manager.appear_interval - 1


def test_manager_init_and_add_score():
    manager = EnemyManager(rng=random.Random(0))
    manager.frame_count = 7
    manager.init()
    assert manager.frame_count == 0
    manager.add_score(25)
    assert manager.score == 125


def test_manager_collision_toggle():
    manager = EnemyManager(rng=random.Random(0))
    keys = KeyManager()
    keys.update({Key.H})
    manager.update(keys)
    assert manager.is_collision_enemy is False
    keys.update(set())
    keys.update({Key.H})
    manager.update(keys)
    assert manager.is_collision_enemy is True