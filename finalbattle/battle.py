"""The boss battle screen."""

from __future__ import annotations

import random
import time
from typing import Any, Callable, Optional, Tuple

import pygame

from finalbattle.actors import EnemyBossBattle
from finalbattle.assets import (
    FontManager,
    ImageEnum,
    SoundEffectManager,
    SoundEnum,
    TextureManager,
)
from finalbattle.audio import AudioManager, SoundEffect
from finalbattle.battle_gui import BattleGUI
from finalbattle.pokemon import Pokemon
from finalbattle.screen import Screen

KYUREM_THEME = "Sounds/KyuremTheme.mp3"
STAGE_IMAGE = "images/SnowNightStage.png"
STAGE_SCALE = (3.5, 4.0)
BOSS_SCALE = (3.0, 3.0)
BOSS_HIT_SCALE = (3.5, 3.5)
PLAYER_SCALE = (3.5, 3.5)
PLAYER_X = -70.0
WHITE = (255, 255, 255, 255)


def _load_background(path: str) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        print("Error loading image!")
        return None


class Battle(Screen):
    """The stage, both combatants and the battle menu."""

    def __init__(
        self,
        size: Tuple[int, int],
        *,
        textures: Optional[TextureManager] = None,
        fonts: Optional[FontManager] = None,
        sounds: Optional[SoundEffectManager] = None,
        music: Optional[AudioManager] = None,
        rng: Optional[random.Random] = None,
        background: Optional[pygame.Surface] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.width, self.height = size
        self.hit_sfx = SoundEffect(SoundEnum.HIT, sounds)
        self.confirm_sfx = SoundEffect(SoundEnum.SELECT, sounds)
        self.gui = BattleGUI(size, fonts, sounds, rng)
        self.enemy_boss = EnemyBossBattle(ImageEnum.ENEMYBATTLE, 1, 16, textures, clock)
        self.player = EnemyBossBattle(ImageEnum.RAYQUAZA, 1, 12, textures, clock)
        self.rayquaza = Pokemon(10, 10, rng)
        self.music = music if music is not None else AudioManager()
        self._background = background
        self._background_tried = background is not None

        self.music.play_music(KYUREM_THEME)

        self.enemy_boss.set_position(
            (float(self.width // 2), float(self.height // 3 // 4 - 50))
        )
        self.enemy_boss.set_scale(BOSS_SCALE)

        self.player.set_color(WHITE)
        self.player.set_position((PLAYER_X, float(self.height // 2) - 50))
        self.player.set_scale(PLAYER_SCALE)

    def _stage(self) -> Optional[pygame.Surface]:
        if not self._background_tried:
            self._background_tried = True
            self._background = _load_background(STAGE_IMAGE)
        return self._background

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the stage, the combatants and the menu."""
        stage = self._stage()
        if stage is not None:
            sx, sy = STAGE_SCALE
            scaled = pygame.transform.scale(
                stage, (round(stage.get_width() * sx), round(stage.get_height() * sy))
            )
            surface.blit(scaled, (0, 0))
        self.player.draw(surface)
        self.damage_taken()
        self.enemy_boss.draw(surface)
        self.gui.draw(surface)

    def handle_event(self, pressed: Any) -> None:
        self.gui.update(pressed)

    def damage_taken(self) -> None:
        """Enlarge the boss while an attack is confirmed."""
        if self.gui.action_confirmed:
            self.enemy_boss.set_scale(BOSS_HIT_SCALE)
        else:
            self.enemy_boss.set_scale(BOSS_SCALE)