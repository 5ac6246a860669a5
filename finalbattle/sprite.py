"""A sprite that steps through the frames of a sprite sheet."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Tuple

import pygame

from finalbattle.controls import KeyControls

FRAME_MILLISECONDS = 200
WHITE = (255, 255, 255, 255)


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned rectangle in world coordinates."""

    left: float
    top: float
    width: float
    height: float


class AnimatedSprite:
    """Shows one cell of a sprite sheet divided into rows and columns."""

    def __init__(
        self,
        texture: pygame.Surface,
        rows: int,
        cols: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be positive")
        self.texture = texture
        self.rows = rows
        self.cols = cols
        width, height = texture.get_size()
        self._rect = pygame.Rect(0, 0, width // cols, height // rows)
        self.texture_rect = self._rect.copy()
        self.position: Tuple[float, float] = (0.0, 0.0)
        self.scale: Tuple[float, float] = (1.0, 1.0)
        self.color: Tuple[int, int, int, int] = WHITE
        self.key_controls = KeyControls()
        self._clock = clock
        self._started = clock()

    def set_frame(self, row: int) -> None:
        """Select the sheet row; it is shown from the next animation step."""
        self._rect.y = row * self._rect.height

    def animate(self) -> None:
        """Advance one column once enough time has passed, wrapping at the end."""
        now = self._clock()
        if int((now - self._started) * 1000) <= FRAME_MILLISECONDS:
            return
        if self._rect.x + self._rect.width >= self.texture.get_width():
            self._rect.x = 0
        else:
            self._rect.x += self._rect.width
        self._started = now
        self.texture_rect = self._rect.copy()

    def set_key_controls(self, key_controls: KeyControls) -> None:
        self.key_controls = key_controls

    def global_bounds(self) -> Bounds:
        """Return the on-screen rectangle covered by the sprite."""
        sx, sy = self.scale
        x, y = self.position
        return Bounds(x, y, self.texture_rect.width * abs(sx), self.texture_rect.height * abs(sy))

    def move(self, offset: Tuple[float, float]) -> None:
        dx, dy = offset
        x, y = self.position
        self.position = (x + dx, y + dy)

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the current frame onto ``surface``."""
        frame = self.texture.subsurface(self.texture_rect)
        bounds = self.global_bounds()
        size = (round(bounds.width), round(bounds.height))
        if size != frame.get_size():
            frame = pygame.transform.scale(frame, size)
        if tuple(self.color) != WHITE:
            frame = frame.copy()
            frame.fill(self.color, special_flags=pygame.BLEND_RGBA_MULT)
        surface.blit(frame, (round(bounds.left), round(bounds.top)))