"""Scene rendering onto a pygame surface."""

from __future__ import annotations

import math
import os
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Union

import pygame

from .transform import Matrix3x2, Transform

Rect = Tuple[float, float, float, float]

BACKGROUND = pygame.Color("darkslateblue")
TEXT_COLOUR = pygame.Color("white")
FONT_SIZE = 15
TEXT_BOX = (300, 250)

HELP_LINES = (
    ("Toggle rotation : R", 0.0, 0.0),
    ("Reverse rotation : T", 0.0, 20.0),
    ("Toggle Unity coordinates : Y", 0.0, 40.0),
    ("Reset sun position to (0,0) : U", 0.0, 80.0),
    ("Move camera : WASD", 0.0, 60.0),
)


class Renderer(ABC):
    """Something the render manager draws once per frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw this object through its render manager."""


class RenderManager:
    """Owns the draw target, the render list and the main camera."""

    def __init__(self) -> None:
        self.target: Optional[pygame.Surface] = None
        self.main_camera: Optional[Transform] = None
        self.screen_width = 0
        self.screen_height = 0
        self._render_list: List[Renderer] = []
        self._font: Optional[pygame.font.Font] = None
        self._transform = Matrix3x2.identity()

    @property
    def render_list(self) -> Tuple[Renderer, ...]:
        return tuple(self._render_list)

    @property
    def bitmap_transform(self) -> Matrix3x2:
        """The matrix applied to the next bitmap drawn."""
        return self._transform

    def initialize(self) -> None:
        """Prepare the text font."""
        pygame.font.init()
        self._font = pygame.font.Font(None, FONT_SIZE)

    def uninitialize(self) -> None:
        """Forget every render object and release the font."""
        self._render_list.clear()
        self._font = None

    def render(self) -> None:
        """Clear the target, draw every object in order, then the help text."""
        target = self._require_target()
        target.fill(BACKGROUND)
        for renderer in self._render_list:
            renderer.render()
        for text, left, top in HELP_LINES:
            self.print_text(text, left, top)

    def set_target(self, surface: Optional[pygame.Surface]) -> None:
        self.target = surface

    def set_screen_size(self, width: int, height: int) -> None:
        self.screen_width = width
        self.screen_height = height

    def set_bitmap_transform(self, matrix: Matrix3x2) -> None:
        self._transform = matrix

    def draw_bitmap(
        self, bitmap: Optional[pygame.Surface], dest_rect: Optional[Rect] = None
    ) -> None:
        """Draw a bitmap with the current transform.

        ``dest_rect`` is ``(left, top, right, bottom)`` in bitmap space; the
        bitmap is stretched to fill it. Without it the bitmap is drawn at its
        own size at the origin.
        """
        target = self._require_target()
        if bitmap is None:
            return
        width, height = bitmap.get_size()
        if width == 0 or height == 0:
            return

        matrix = self._transform
        if dest_rect is not None:
            left, top, right, bottom = dest_rect
            matrix = (
                Matrix3x2.scale((right - left) / width, (bottom - top) / height)
                @ Matrix3x2.translation(left, top)
                @ matrix
            )

        det = matrix.m11 * matrix.m22 - matrix.m12 * matrix.m21
        scale_x = math.hypot(matrix.m11, matrix.m12)
        if scale_x == 0.0 or det == 0.0:
            return
        scale_y = det / scale_x
        angle = math.degrees(math.atan2(matrix.m12, matrix.m11))

        size = (round(width * scale_x), round(height * abs(scale_y)))
        if size[0] <= 0 or size[1] <= 0:
            return

        image = bitmap if size == (width, height) else pygame.transform.scale(bitmap, size)
        if scale_y < 0:
            image = pygame.transform.flip(image, False, True)
        if abs(angle) > 1e-9:
            if not image.get_flags() & pygame.SRCALPHA:
                with_alpha = pygame.Surface(image.get_size(), pygame.SRCALPHA)
                with_alpha.blit(image, (0, 0))
                image = with_alpha
            image = pygame.transform.rotate(image, -angle)

        corners = [
            matrix.transform_point(x, y)
            for x, y in ((0, 0), (width, 0), (0, height), (width, height))
        ]
        left = min(x for x, _ in corners)
        top = min(y for _, y in corners)
        target.blit(image, (round(left), round(top)))

    def load_bitmap(self, path: Union[str, "os.PathLike[str]"]) -> pygame.Surface:
        """Load an image file; raise OSError if it cannot be read."""
        try:
            return pygame.image.load(os.fspath(path))
        except FileNotFoundError:
            raise
        except pygame.error as exc:
            raise OSError(f"cannot load image {os.fspath(path)!r}: {exc}") from exc

    def add_render_object(self, renderer: Renderer) -> None:
        self._render_list.append(renderer)

    def print_text(self, text: str, left: float, top: float) -> None:
        """Draw white text at screen coordinates, clipped to a fixed box."""
        if self.target is None or self._font is None:
            return
        self._transform = Matrix3x2.identity()
        rendered = self._font.render(text, True, TEXT_COLOUR)
        self.target.blit(
            rendered, (round(left), round(top)), pygame.Rect((0, 0), TEXT_BOX)
        )

    def camera_invert_matrix(self) -> Matrix3x2:
        """Inverse world matrix of the main camera, or identity without one."""
        if self.main_camera is None:
            return Matrix3x2.identity()
        return self.main_camera.to_world_invert_matrix()

    def _require_target(self) -> pygame.Surface:
        if self.target is None:
            raise RuntimeError("no render target set")
        return self.target