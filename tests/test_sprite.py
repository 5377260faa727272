import math

import pygame
import pytest

from gamebox.sprite import ImageLoadError, Quad, Sprite, load_image


def make_sprite(width=100, height=50):
    return Sprite("bird.png", width, height, pygame.Surface((width, height)))


def centroid(quad):
    xs = [p[0] for p in quad]
    ys = [p[1] for p in quad]
    return sum(xs) / 4, sum(ys) / 4


def flat(quad):
    return [c for p in quad for c in p]


def test_fresh_sprite_has_default_quad():
    sprite = make_sprite()
    assert sprite.vertices() == Quad((-1.0, 1.0), (-1.0, -1.0), (1.0, -1.0), (1.0, 1.0))
    assert sprite.position == (0.0, 0.0)
    assert sprite.rotation == 0.0
    assert sprite.scale == 1.0


def test_none_path_becomes_blank():
    sprite = Sprite(None)
    assert sprite.path == " "


def test_set_position_centres_quad():
    sprite = make_sprite()
    sprite.set_position((200.0, 100.0))
    assert sprite.position == pytest.approx((2.0, 2.0))
    assert centroid(sprite.vertices()) == pytest.approx(sprite.position)


def test_translate_round_trip():
    sprite = make_sprite()
    sprite.set_position((30.0, -20.0))
    start = sprite.position
    sprite.translate((45.0, 12.0))
    assert sprite.position != pytest.approx(start)
    sprite.translate((-45.0, -12.0))
    assert sprite.position == pytest.approx(start)


def test_translate_by_whole_size_moves_one_unit():
    sprite = make_sprite(100, 50)
    sprite.translate((300.0, 0.0))
    assert sprite.position == pytest.approx((3.0, 0.0))


def test_rotate_accumulates():
    sprite = make_sprite()
    sprite.rotate(0.25)
    sprite.rotate(0.5)
    assert sprite.rotation == pytest.approx(0.75)


def test_rotation_by_pi_swaps_opposite_corners():
    sprite = make_sprite()
    sprite.scale = 1.0
    before = sprite.vertices()
    sprite.rotate(math.pi)
    after = sprite.vertices()
    assert after.top_left == pytest.approx(before.bottom_right)
    assert after.bottom_left == pytest.approx(before.top_right)


def test_full_turn_restores_corners():
    sprite = make_sprite()
    sprite.set_position((10.0, 10.0))
    before = flat(sprite.vertices())
    sprite.rotate(2 * math.pi)
    assert flat(sprite.vertices()) == pytest.approx(before)


def test_rotation_preserves_diagonal():
    sprite = make_sprite()
    sprite.scale = 2.0
    quad = sprite.vertices()
    diag = math.dist(quad.top_left, quad.bottom_right)
    sprite.rotation = 1.1
    quad = sprite.vertices()
    assert math.dist(quad.top_left, quad.bottom_right) == pytest.approx(diag)
    assert sprite.rotation == pytest.approx(1.1)


def test_doubling_scale_doubles_extent():
    sprite = make_sprite()
    sprite.scale = 0.5
    small = sprite.vertices()
    sprite.scale = 1.0
    large = sprite.vertices()
    small_width = small.top_right[0] - small.top_left[0]
    large_width = large.top_right[0] - large.top_left[0]
    assert large_width == pytest.approx(2 * small_width)
    assert sprite.scale == 1.0


def test_copy_keeps_transform_and_default_quad():
    sprite = make_sprite()
    sprite.set_position((50.0, 25.0))
    sprite.rotation = 0.3
    sprite.scale = 0.7
    twin = sprite.copy()
    assert twin.position == sprite.position
    assert twin.rotation == sprite.rotation
    assert twin.scale == sprite.scale
    assert (twin.width, twin.height, twin.path) == (sprite.width, sprite.height, sprite.path)
    assert twin.vertices() == Quad((-1.0, 1.0), (-1.0, -1.0), (1.0, -1.0), (1.0, 1.0))
    assert twin.surface.get_size() == sprite.surface.get_size()
    assert twin.surface is not sprite.surface


def test_copy_is_independent():
    sprite = make_sprite()
    twin = sprite.copy()
    twin.translate((100.0, 0.0))
    assert sprite.position == (0.0, 0.0)
    assert twin.position == pytest.approx((1.0, 0.0))


def test_zero_size_sprite_cannot_move():
    sprite = Sprite()
    with pytest.raises(ValueError):
        sprite.translate((1.0, 1.0))
    with pytest.raises(ValueError):
        sprite.set_position((1.0, 1.0))


def test_load_image_reads_size(tmp_path):
    path = tmp_path / "pipe.bmp"
    pygame.image.save(pygame.Surface((8, 4)), str(path))
    sprite = load_image(str(path))
    assert (sprite.width, sprite.height) == (8, 4)
    assert sprite.path == str(path)
    assert sprite.surface.get_size() == (8, 4)


def test_load_image_missing_file(tmp_path):
    with pytest.raises(ImageLoadError):
        load_image(str(tmp_path / "missing.png"))