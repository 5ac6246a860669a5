"""The walking player character and the enemies shown on screen."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Tuple

import pygame

from finalbattle import assets
from finalbattle.assets import ImageEnum, TextureManager
from finalbattle.sprite import AnimatedSprite, Bounds

WALK_SPEED = 2.5
PLAYER_SHEET_ROWS = 4
PLAYER_SHEET_COLS = 3

# Sheet row shown while each movement key is held.
_WALK_ROWS = (
    (pygame.K_w, (0.0, -WALK_SPEED), 0),
    (pygame.K_a, (-WALK_SPEED, 0.0), 2),
    (pygame.K_s, (0.0, WALK_SPEED), 1),
    (pygame.K_d, (WALK_SPEED, 0.0), 3),
)


def _held(pressed: Any, key: int) -> bool:
    if isinstance(pressed, (set, frozenset)):
        return key in pressed
    return bool(pressed[key])


class Player:
    """The character the player walks around the overworld."""

    def __init__(
        self,
        image: ImageEnum = ImageEnum.MAINCHAR,
        textures: Optional[TextureManager] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if textures is None:
            textures = assets.textures
        self.sprite = AnimatedSprite(
            textures.get(image), PLAYER_SHEET_ROWS, PLAYER_SHEET_COLS, clock
        )
        self.velocity: Tuple[float, float] = (0.0, 0.0)

    def set_scale(self, scale: Tuple[float, float]) -> None:
        self.sprite.scale = tuple(scale)

    def set_position(self, pos: Tuple[float, float]) -> None:
        self.sprite.position = tuple(pos)

    def handle_input(self, pressed: Any) -> None:
        """Work out this frame's velocity from the held movement keys."""
        vx, vy = 0.0, 0.0
        for key, (dx, dy), row in _WALK_ROWS:
            if _held(pressed, key):
                vx += dx
                vy += dy
                self.sprite.set_frame(row)
                self.sprite.animate()
        self.velocity = (vx, vy)

    def update(self) -> None:
        """Move by the current velocity."""
        self.sprite.move(self.velocity)

    def draw(self, surface: pygame.Surface) -> None:
        self.sprite.draw(surface)

    def global_bounds(self) -> Bounds:
        return self.sprite.global_bounds()


class EnemyOverworld:
    """An enemy that idles in place, looping its animation."""

    def __init__(
        self,
        image: ImageEnum,
        rows: int,
        cols: int,
        textures: Optional[TextureManager] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if textures is None:
            textures = assets.textures
        self.sprite = AnimatedSprite(textures.get(image), rows, cols, clock)

    def set_scale(self, scale: Tuple[float, float]) -> None:
        self.sprite.scale = tuple(scale)

    def set_position(self, pos: Tuple[float, float]) -> None:
        self.sprite.position = tuple(pos)

    def draw(self, surface: pygame.Surface) -> None:
        """Advance the animation and draw the current frame."""
        self.sprite.animate()
        self.sprite.draw(surface)

    def update(self) -> None:
        """Enemies do not move on their own."""

    def global_bounds(self) -> Bounds:
        return self.sprite.global_bounds()


class EnemyBossBattle(EnemyOverworld):
    """A battle combatant whose sprite can be tinted."""

    def set_color(self, color: Tuple[int, ...]) -> None:
        """Tint the sprite; an RGB colour is taken as fully opaque."""
        if len(color) == 3:
            color = (*color, 255)
        self.sprite.color = tuple(color)