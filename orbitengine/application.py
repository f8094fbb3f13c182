"""Window, event loop and per-frame driving of a render manager."""

from __future__ import annotations

from typing import FrozenSet, Optional

import pygame

from .gametime import GameTime
from .input import Input
from .render_manager import RenderManager

WINDOW_TITLE = "D2D1 Clear Example"
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
FRAME_RATE = 60


class Application:
    """Opens a window and runs update and render once per frame until closed."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.render_manager: Optional[RenderManager] = None
        self.input = Input()
        self.game_time = GameTime()
        self.running = False
        self.is_window_open = False
        self._held_keys: set = set()

    @property
    def held_keys(self) -> FrozenSet[int]:
        """Keys currently held according to the events seen so far."""
        return frozenset(self._held_keys)

    def initialize(self) -> None:
        """Open the window, set up the render manager and start the clock."""
        pygame.init()
        screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.is_window_open = True

        manager = RenderManager()
        manager.initialize()
        manager.set_screen_size(self.width, self.height)
        manager.set_target(screen)
        self.render_manager = manager

        self.game_time.init_time()

    def uninitialize(self) -> None:
        """Release the render manager and close the window."""
        if self.render_manager is not None:
            self.render_manager.uninitialize()
            self.render_manager = None
        self._held_keys.clear()
        self.is_window_open = False
        pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == pygame.QUIT:
            self.running = False
            self.is_window_open = False
        elif event.type == pygame.KEYDOWN:
            self._held_keys.add(event.key)
        elif event.type == pygame.KEYUP:
            self._held_keys.discard(event.key)
        elif event.type == pygame.VIDEORESIZE:
            width, height = event.w, event.h
            if width == 0 or height == 0:
                return
            if (width, height) != (self.width, self.height):
                self.width = width
                self.height = height
                self._resize_target()

    def render(self) -> None:
        """Draw the scene and present it."""
        if self.render_manager is None:
            raise RuntimeError("initialize() must be called first")
        self.render_manager.render()
        pygame.display.flip()

    def update(self) -> None:
        """Advance the game by one frame; nothing happens by default."""

    def run(self) -> None:
        """Handle events and run frames until the window is closed."""
        self.running = True
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break
            self.input.update(self._held_keys)
            self.game_time.update_time()
            self.update()
            self.render()
            clock.tick(FRAME_RATE)

    def _resize_target(self) -> None:
        if self.render_manager is None:
            return
        surface = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        self.render_manager.set_target(surface)