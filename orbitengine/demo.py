"""A sun, earth and moon orbiting each other, with a movable camera."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pygame

from .application import DEFAULT_HEIGHT, DEFAULT_WIDTH, Application
from .bitmap_renderer import BitmapRenderer
from .transform import Transform

DEFAULT_RESOURCE_DIR = Path("..") / "Resource"

BASE_ROTATE_SPEED = 360.0
CAMERA_MOVE_SPEED = 10.0
SUN_ROTATE_RATIO = 0.1
EARTH_ROTATE_RATIO = 0.5
MOON_ROTATE_RATIO = 0.8

KEY_TOGGLE_MOVE = pygame.K_r
KEY_REVERSE = pygame.K_t
KEY_UNITY_COORDS = pygame.K_y
KEY_RESET = pygame.K_u


class DemoGameApp(Application):
    """The solar-system demo: R, T, Y, U toggle behaviour; WASD moves the camera."""

    def __init__(
        self,
        resource_dir: Union[str, "os.PathLike[str]", None] = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        super().__init__(width, height)
        self.resource_dir = Path(resource_dir) if resource_dir is not None else DEFAULT_RESOURCE_DIR
        self.camera: Optional[Transform] = None
        self.sun: Optional[BitmapRenderer] = None
        self.earth: Optional[BitmapRenderer] = None
        self.moon: Optional[BitmapRenderer] = None
        self.objects: List[BitmapRenderer] = []
        self.base_rotate_speed = BASE_ROTATE_SPEED
        self.camera_move_speed = CAMERA_MOVE_SPEED
        self.sun_rotate_ratio = SUN_ROTATE_RATIO
        self.earth_rotate_ratio = EARTH_ROTATE_RATIO
        self.moon_rotate_ratio = MOON_ROTATE_RATIO
        self.is_solar_system_move = True

    def initialize(self) -> None:
        """Open the window and build the sun -> earth -> moon hierarchy."""
        super().initialize()
        manager = self.render_manager
        self.camera = Transform()

        sun_bitmap = manager.load_bitmap(self.resource_dir / "Sun.png")
        sun_width, sun_height = sun_bitmap.get_size()
        offset = (sun_width / 2 * -1, sun_height / 2 * -1)

        self.sun = BitmapRenderer()
        self.sun.transform.scale = (0.1, 0.1)
        self.sun.transform.camera = self.camera
        self.sun.bitmap = sun_bitmap
        self.sun.set_offset(*offset)

        self.earth = BitmapRenderer()
        self.earth.transform.scale = (0.5, 0.5)
        self.earth.transform.position = (0.0, 1000.0)
        self.earth.transform.parent = self.sun.transform
        self.earth.transform.camera = self.camera
        self.earth.bitmap = manager.load_bitmap(self.resource_dir / "Earth.png")
        self.earth.set_offset(*offset)

        self.moon = BitmapRenderer()
        self.moon.transform.scale = (0.5, 0.5)
        self.moon.transform.position = (0.0, 1000.0)
        self.moon.transform.parent = self.earth.transform
        self.moon.transform.camera = self.camera
        self.moon.bitmap = manager.load_bitmap(self.resource_dir / "Moon.png")
        self.moon.set_offset(*offset)

        self.objects = [self.sun, self.earth, self.moon]
        for renderer in self.objects:
            renderer.render_manager = manager
            renderer.set_screen_size(self.width, self.height)
            manager.add_render_object(renderer)

        manager.main_camera = self.camera

    def render(self) -> None:
        super().render()

    def uninitialize(self) -> None:
        """Close the window and drop every scene object."""
        super().uninitialize()
        self.objects.clear()

    def update(self) -> None:
        super().update()
        self._handle_flags()
        self._move_camera()
        self._update_solar_system()

    def reset(self) -> None:
        """Put the sun and the camera back at the origin."""
        self.sun.transform.position = (0.0, 0.0)
        self.camera.position = (0.0, 0.0)

    def _handle_flags(self) -> None:
        if self.input.is_key_pressed(KEY_TOGGLE_MOVE):
            self.is_solar_system_move = not self.is_solar_system_move
        if self.input.is_key_pressed(KEY_REVERSE):
            self.base_rotate_speed *= -1
        if self.input.is_key_pressed(KEY_UNITY_COORDS):
            for renderer in self.objects:
                renderer.transform.is_unity_coords = not renderer.transform.is_unity_coords
        if self.input.is_key_pressed(KEY_RESET):
            self.reset()

    def _move_camera(self) -> None:
        steps = (
            (pygame.K_d, self.camera_move_speed, 0.0),
            (pygame.K_a, -self.camera_move_speed, 0.0),
            (pygame.K_w, 0.0, self.camera_move_speed),
            (pygame.K_s, 0.0, -self.camera_move_speed),
        )
        for key, dx, dy in steps:
            if self.input.is_key_down(key):
                x, y = self.camera.position
                self.camera.position = (x + dx, y + dy)

    def _update_solar_system(self) -> None:
        if not self.is_solar_system_move:
            return
        delta = self.game_time.delta_time
        self.sun.transform.rotation += self.base_rotate_speed * self.sun_rotate_ratio * delta
        self.earth.transform.rotation += self.base_rotate_speed * self.earth_rotate_ratio * delta


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solar-system demo until its window is closed."""
    parser = argparse.ArgumentParser(description="Solar-system demo.")
    parser.add_argument(
        "--resources",
        default=str(DEFAULT_RESOURCE_DIR),
        help="directory holding Sun.png, Earth.png and Moon.png",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)

    app = DemoGameApp(args.resources, args.width, args.height)
    try:
        app.initialize()
        app.run()
    finally:
        app.uninitialize()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())