"""Keyboard state tracking across frames."""

from __future__ import annotations

from typing import Hashable, Iterable


class Input:
    """Tracks which keys are held now and which were held on the last frame."""

    def __init__(self) -> None:
        self._previous: frozenset = frozenset()
        self._current: frozenset = frozenset()

    def update(self, pressed: Iterable[Hashable]) -> None:
        """Start a new frame with the given set of keys held down."""
        self._previous = self._current
        self._current = frozenset(pressed)

    def is_key_down(self, key: Hashable) -> bool:
        """True while the key is held."""
        return key in self._current

    def is_key_pressed(self, key: Hashable) -> bool:
        """True only on the frame the key went down."""
        return key in self._current and key not in self._previous

    def is_key_released(self, key: Hashable) -> bool:
        """True only on the frame the key went up."""
        return key in self._previous and key not in self._current