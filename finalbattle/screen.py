"""The base for every screen the game can show."""

from __future__ import annotations

from typing import Any

import pygame

BACKGROUND = (0, 0, 0)


class Screen:
    """A screen draws itself, reacts to input and reports when it is done."""

    pressed: Any = None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the screen; the base screen shows a blank background."""
        surface.fill(BACKGROUND)

    def handle_event(self, pressed: Any) -> None:
        """Remember the keys held this frame; the base screen does nothing else."""
        self.pressed = pressed

    def is_finished(self) -> bool:
        """Return True once the screen should be replaced by the next one."""
        return False