"""A renderer that draws one bitmap placed by a transform."""

from __future__ import annotations

from typing import Optional

import pygame

from .render_manager import RenderManager, Renderer
from .transform import Matrix3x2, Transform


class BitmapRenderer(Renderer):
    """Draws a bitmap through its transform, the main camera and the screen."""

    def __init__(self) -> None:
        self.render_manager: Optional[RenderManager] = None
        self.bitmap: Optional[pygame.Surface] = None
        self.transform = Transform()
        self.final_matrix = Matrix3x2.identity()
        self.screen_width = 0
        self.screen_height = 0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.unity_coord_matrix = Matrix3x2.identity()
        self.normal_render_matrix = Matrix3x2.scale(1.0, 1.0) @ Matrix3x2.translation(0.0, 0.0)
        self.unity_render_matrix = Matrix3x2.scale(1.0, -1.0) @ Matrix3x2.translation(0.0, 0.0)

    def render(self) -> None:
        manager = self.render_manager
        if manager is None:
            return
        if self.bitmap is not None:
            camera = manager.camera_invert_matrix()
            world = self.transform.to_world_matrix()
            if self.transform.is_unity_coords:
                self.final_matrix = (
                    self.unity_render_matrix @ world @ camera @ self.unity_coord_matrix
                )
            else:
                self.final_matrix = self.normal_render_matrix @ world @ camera
            manager.set_bitmap_transform(self.final_matrix)
        manager.draw_bitmap(self.bitmap)

    def set_screen_size(self, width: int, height: int) -> None:
        """Remember the screen size; Unity coordinates put (0, 0) at its centre."""
        self.screen_width = width
        self.screen_height = height
        self.unity_coord_matrix = Matrix3x2.scale(1.0, -1.0) @ Matrix3x2.translation(
            float(int(width / 2)), float(int(height / 2))
        )

    def set_offset(self, x: float, y: float) -> None:
        """Shift the bitmap relative to its transform's origin."""
        self.offset_x = x
        self.offset_y = y
        self.normal_render_matrix = Matrix3x2.scale(1.0, 1.0) @ Matrix3x2.translation(x, y)
        self.unity_render_matrix = Matrix3x2.scale(1.0, -1.0) @ Matrix3x2.translation(x, -y)

    def render_matrix(self, transform: Optional[Transform]) -> Matrix3x2:
        """Flip on y for Unity coordinates; identity otherwise or without a transform."""
        if transform is None:
            return Matrix3x2.identity()
        scale_y = -1.0 if transform.is_unity_coords else 1.0
        return Matrix3x2.scale(1.0, scale_y) @ Matrix3x2.translation(0.0, 0.0)