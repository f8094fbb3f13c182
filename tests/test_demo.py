import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"

import pygame
import pytest

from orbitengine.demo import DemoGameApp, main
from orbitengine.gametime import GameTime

SUN_SIZE = (40, 20)
EARTH_SIZE = (16, 16)
MOON_SIZE = (8, 8)


def _write_image(path, size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))


@pytest.fixture
def resources(tmp_path):
    _write_image(tmp_path / "Sun.png", SUN_SIZE, (255, 200, 0))
    _write_image(tmp_path / "Earth.png", EARTH_SIZE, (0, 100, 255))
    _write_image(tmp_path / "Moon.png", MOON_SIZE, (200, 200, 200))
    return tmp_path


@pytest.fixture
def app(resources):
    application = DemoGameApp(resources, 320, 240)
    ticks = iter([0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0])
    application.game_time = GameTime(clock=lambda: next(ticks))
    application.initialize()
    yield application
    application.uninitialize()


def test_hierarchy_is_built(app):
    assert app.earth.transform.parent is app.sun.transform
    assert app.moon.transform.parent is app.earth.transform
    assert app.sun.transform.parent is None
    assert app.sun.transform.scale == (0.1, 0.1)
    assert app.earth.transform.position == (0.0, 1000.0)
    assert app.moon.transform.position == (0.0, 1000.0)
    assert all(obj.transform.camera is app.camera for obj in app.objects)


def test_offsets_use_sun_bitmap_size(app):
    expected = (-SUN_SIZE[0] / 2, -SUN_SIZE[1] / 2)
    for renderer in app.objects:
        assert (renderer.offset_x, renderer.offset_y) == expected
    assert app.moon.bitmap.get_size() == MOON_SIZE


def test_objects_registered_with_render_manager(app):
    manager = app.render_manager
    assert manager.render_list == (app.sun, app.earth, app.moon)
    assert manager.main_camera is app.camera
    assert all(obj.render_manager is manager for obj in app.objects)
    assert all((obj.screen_width, obj.screen_height) == (320, 240) for obj in app.objects)


def test_camera_moves_while_keys_held(app):
    app.input.update({pygame.K_d, pygame.K_w})
    app.update()
    assert app.camera.position == (app.camera_move_speed, app.camera_move_speed)
    app.input.update({pygame.K_d, pygame.K_w})
    app.update()
    assert app.camera.position == (2 * app.camera_move_speed, 2 * app.camera_move_speed)
    app.input.update({pygame.K_a, pygame.K_s})
    app.update()
    assert app.camera.position == (app.camera_move_speed, app.camera_move_speed)


def test_rotation_follows_delta_time(app):
    app.game_time.update_time()
    app.update()
    sun_rotation = app.sun.transform.rotation
    earth_rotation = app.earth.transform.rotation
    assert sun_rotation == pytest.approx(app.base_rotate_speed * app.sun_rotate_ratio * 0.5)
    assert earth_rotation == pytest.approx(5 * sun_rotation)
    assert app.moon.transform.rotation == 0.0


def test_reverse_key_flips_direction(app):
    app.input.update({pygame.K_t})
    app.game_time.update_time()
    app.update()
    assert app.base_rotate_speed == -360.0
    assert app.sun.transform.rotation < 0.0


def test_toggle_key_stops_rotation(app):
    app.input.update({pygame.K_r})
    app.game_time.update_time()
    app.update()
    assert app.is_solar_system_move is False
    app.input.update(set())
    app.game_time.update_time()
    app.update()
    assert app.sun.transform.rotation == 0.0
    app.input.update({pygame.K_r})
    app.update()
    assert app.is_solar_system_move is True


def test_unity_key_toggles_all_objects(app):
    assert all(obj.transform.is_unity_coords for obj in app.objects)
    app.input.update({pygame.K_y})
    app.update()
    assert not any(obj.transform.is_unity_coords for obj in app.objects)
    app.input.update({pygame.K_y})
    app.update()
    assert all(obj.transform.is_unity_coords for obj in app.objects)


def test_reset_key_returns_sun_and_camera_to_origin(app):
    app.sun.transform.position = (5.0, 7.0)
    app.camera.position = (-3.0, 4.0)
    app.input.update({pygame.K_u})
    app.update()
    assert app.sun.transform.position == (0.0, 0.0)
    assert app.camera.position == (0.0, 0.0)


def test_render_clears_background(app):
    app.render()
    target = app.render_manager.target
    assert target.get_at((319, 239)) == pygame.Color("darkslateblue")


def test_uninitialize_clears_objects(resources):
    application = DemoGameApp(resources, 320, 240)
    application.initialize()
    application.uninitialize()
    assert application.objects == []
    assert application.render_manager is None


def test_missing_resource_raises(tmp_path):
    application = DemoGameApp(tmp_path, 320, 240)
    try:
        with pytest.raises(OSError):
            application.initialize()
    finally:
        application.uninitialize()


def test_main_fails_without_resources(tmp_path):
    with pytest.raises(OSError):
        main(["--resources", str(tmp_path), "--width", "320", "--height", "240"])