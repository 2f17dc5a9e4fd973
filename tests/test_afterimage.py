from novaplay.afterimage import MAX_HISTORY, AfterImage
from novaplay.camera import Camera
from novaplay.gamebase import WINDOW_HEIGHT
from novaplay.structures import Vector2


def _fill(trail, count):
    for n in range(count):
        for _ in range(3):
            trail.update_position_history(Vector2(float(n), float(n * 2)))


def test_records_only_every_third_frame():
    trail = AfterImage()
    trail.update_position_history(Vector2(1.0, 2.0))
    trail.update_position_history(Vector2(1.0, 2.0))
    assert len(trail.pos_history) == 0
    trail.update_position_history(Vector2(3.0, 4.0))
    assert list(trail.pos_history) == [Vector2(3.0, 4.0)]
    assert trail.frame_counter == 0


def test_history_is_newest_first_and_capped():
    trail = AfterImage()
    _fill(trail, 8)
    assert len(trail.pos_history) == MAX_HISTORY
    assert trail.pos_history[0] == Vector2(7.0, 14.0)
    assert trail.pos_history[-1] == Vector2(3.0, 6.0)


def test_history_stores_copies():
    trail = AfterImage()
    pos = Vector2(5.0, 5.0)
    for _ in range(3):
        trail.update_position_history(pos)
    pos.x = 99.0
    assert trail.pos_history[0].x == 5.0


def test_fade_does_nothing_unless_started():
    trail = AfterImage()
    _fill(trail, 3)
    trail.update_fade()
    assert trail.color_alpha == 0.0
    assert trail.is_fading is False


def test_fade_with_full_history_keeps_fading():
    trail = AfterImage()
    _fill(trail, MAX_HISTORY)
    trail.start_fading()
    trail.update_fade()
    assert trail.color_alpha > 0.0
    assert trail.color_alpha < 1.0
    assert trail.is_fading is True


def test_fade_with_single_entry_is_opaque():
    trail = AfterImage()
    _fill(trail, 1)
    trail.start_fading()
    trail.update_fade()
    assert trail.color_alpha == 1.0


def test_fade_with_empty_history_stops():
    trail = AfterImage()
    trail.start_fading()
    assert trail.is_fading is True
    trail.update_fade()
    assert trail.is_fading is False


def test_rect_instances_offset_by_camera_and_fade_out():
    trail = AfterImage()
    _fill(trail, 3)
    trail.color_alpha = 1.0
    camera = Camera()
    quads = trail.rect_instances(32, 16, camera)
    assert len(quads) == 3
    newest = trail.pos_history[0]
    assert quads[0].x == int(newest.x - camera.pos.x)
    assert quads[0].y == int(newest.y - camera.pos.y)
    assert quads[0].color == 0xFFFFFFFF
    assert all(q.color >> 8 == 0xFFFFFF for q in quads)
    alphas = [q.color & 0xFF for q in quads]
    assert alphas == sorted(alphas, reverse=True)
    assert quads[0].corners[3] == (quads[0].x + 32, quads[0].y + 16)


def test_circle_instances_flip_y():
    trail = AfterImage()
    _fill(trail, 2)
    circles = trail.circle_instances(12)
    assert [c.radius for c in circles] == [12, 12]
    for circle, pos in zip(circles, trail.pos_history):
        assert circle.x == int(pos.x)
        assert circle.y == WINDOW_HEIGHT - int(pos.y)


def test_negative_alpha_is_clamped_to_transparent():
    trail = AfterImage()
    _fill(trail, 2)
    circles = trail.circle_instances(5)
    assert circles[1].color & 0xFF == 0