"""Key bindings that map movement directions to sprite sheet rows."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame


@dataclass(frozen=True)
class KeyControl:
    """A key and the sprite sheet row shown while it is held."""

    direction: int
    row: int


@dataclass
class KeyControls:
    """The four movement bindings."""

    up: KeyControl = field(default_factory=lambda: KeyControl(pygame.K_w, 3))
    right: KeyControl = field(default_factory=lambda: KeyControl(pygame.K_d, 2))
    left: KeyControl = field(default_factory=lambda: KeyControl(pygame.K_a, 1))
    down: KeyControl = field(default_factory=lambda: KeyControl(pygame.K_s, 0))