"""The overworld screen where the player walks up to the boss."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Tuple

import pygame

from finalbattle.actors import EnemyOverworld, Player
from finalbattle.assets import ImageEnum, SoundEffectManager, SoundEnum, TextureManager
from finalbattle.audio import AudioManager, SoundEffect
from finalbattle.screen import Screen
from finalbattle.sprite import Bounds

OVERWORLD_THEME = "Sounds/OverworldTheme.mp3"
MAP_IMAGE = "images/updatedmap.png"
MAP_SCALE = 1.2
CAMERA_ZOOM = 0.5
SHOUT_SECONDS = 2.0
ENEMY_SCALE = (1.5, 1.5)
ENEMY_X_OFFSET = 30
OFFSCREEN = (-500.0, -500.0)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _held(pressed: Any, key: int) -> bool:
    if isinstance(pressed, (set, frozenset)):
        return key in pressed
    return bool(pressed[key])


def _load_background(path: str) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        print("Error loading image!")
        return None


class OverWorld(Screen):
    """The map with the player, the idle boss and the shout that starts the fight."""

    def __init__(
        self,
        size: Tuple[int, int],
        *,
        textures: Optional[TextureManager] = None,
        sounds: Optional[SoundEffectManager] = None,
        music: Optional[AudioManager] = None,
        background: Optional[pygame.Surface] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.width, self.height = size
        self._clock = clock
        self.boss_shout = SoundEffect(SoundEnum.KYUREM_CRY, sounds)
        self.player = Player(ImageEnum.MAINCHAR, textures, clock)
        self.enemy = EnemyOverworld(ImageEnum.ENEMY, 8, 2, textures, clock)
        self.enemy2 = EnemyOverworld(ImageEnum.ENEMYSHOUT, 8, 10, textures, clock)
        self.music = music if music is not None else AudioManager()
        self._background = background
        self._background_tried = background is not None
        self.boss_fight = False
        self._shout_started: Optional[float] = None

        bounds = self.player.global_bounds()
        self.player.set_position(
            (float(self.width // 2) - bounds.width, float(self.height) - bounds.height)
        )
        self.enemy2.set_position(OFFSCREEN)
        self.enemy.set_scale(ENEMY_SCALE)
        self.enemy.set_position((float(self.width // 2 - ENEMY_X_OFFSET), 0.0))

        self.view_center: Tuple[float, float] = (self.width / 2, self.height / 2)
        self.view_size: Tuple[float, float] = (float(self.width), float(self.height))

        self.music.play_music(OVERWORLD_THEME)

    def seconds_since_shout(self) -> float:
        """Seconds since the boss last shouted, or 0 before it has."""
        if self._shout_started is None:
            return 0.0
        return self._clock() - self._shout_started

    def view_rect(self) -> Bounds:
        """The part of the world the camera shows."""
        (cx, cy), (vw, vh) = self.view_center, self.view_size
        return Bounds(cx - vw / 2, cy - vh / 2, vw, vh)

    def _map(self) -> Optional[pygame.Surface]:
        if not self._background_tried:
            self._background_tried = True
            self._background = _load_background(MAP_IMAGE)
        return self._background

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the map and everyone on it through the camera."""
        world = pygame.Surface((self.width, self.height))
        background = self._map()
        if background is not None:
            scaled = pygame.transform.scale(
                background,
                (
                    round(background.get_width() * MAP_SCALE),
                    round(background.get_height() * MAP_SCALE),
                ),
            )
            world.blit(scaled, (0, 0))
        self.player.draw(world)
        self.enemy.draw(world)
        self.enemy2.draw(world)

        view = self.view_rect()
        visible = pygame.Surface((max(1, round(view.width)), max(1, round(view.height))))
        visible.blit(world, (-round(view.left), -round(view.top)))
        if visible.get_size() != surface.get_size():
            visible = pygame.transform.scale(visible, surface.get_size())
        surface.blit(visible, (0, 0))

    def handle_event(self, pressed: Any) -> None:
        """Move the camera and player, and start the boss fight once it has shouted."""
        vw, vh = self.width * CAMERA_ZOOM, self.height * CAMERA_ZOOM
        self.view_size = (vw, vh)
        bounds = self.player.global_bounds()
        centre_x = bounds.left + bounds.width / 2
        centre_y = bounds.top + bounds.height / 2
        self.view_center = (
            _clamp(centre_x, vw / 2, self.width - vw / 2),
            _clamp(centre_y, vh / 2, self.height - vh / 2),
        )

        enemy_height = self.enemy.global_bounds().height
        if bounds.top <= enemy_height - bounds.height:
            if _held(pressed, pygame.K_RETURN):
                self._shout_started = self._clock()
                self.boss_shout.play()
                self.enemy.set_position(OFFSCREEN)
                self.enemy2.set_position((float(self.width // 2 - ENEMY_X_OFFSET), 0.0))
                self.enemy2.set_scale(ENEMY_SCALE)
            if self.seconds_since_shout() >= SHOUT_SECONDS:
                self.music.stop_music()
                self.boss_fight = True

        self.player.handle_input(pressed)
        self.enemy.update()
        self.player.update()

    def is_finished(self) -> bool:
        return self.boss_fight