"""The battle menu, cursor and the boss's health bar."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import pygame

from finalbattle import assets
from finalbattle.assets import FontEnum, FontManager, SoundEffectManager, SoundEnum
from finalbattle.audio import SoundEffect
from finalbattle.pokemon import Pokemon

MENU_TEXT = "FIGHT\nRUN"
MENU_HEIGHT = 125
MENU_X_FROM_RIGHT = 180
CURSOR_X_FROM_RIGHT = 210
HEALTH_WIDTH = 200.0
HEALTH_HEIGHT = 15.0
HEALTH_POSITION = (50.0, 20.0)

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)
BACKGROUND_COLOR = (0, 0, 0, 200)


def _held(pressed: Any, key: int) -> bool:
    if isinstance(pressed, (set, frozenset)):
        return key in pressed
    return bool(pressed[key])


@dataclass
class MenuText:
    """A line of menu text at a screen position."""

    text: str
    position: Tuple[float, float]


class BattleGUI:
    """Menu at the bottom of the battle screen and the boss health bar."""

    def __init__(
        self,
        size: Tuple[int, int],
        fonts: Optional[FontManager] = None,
        sounds: Optional[SoundEffectManager] = None,
        rng: Optional[random.Random] = None,
    ):
        if fonts is None:
            fonts = assets.fonts
        self.width, self.height = size
        self._font = fonts.get(FontEnum.POKEMON)
        self._menu_text_height = self._font.get_linesize() * len(MENU_TEXT.splitlines())

        self.rayquaza = Pokemon(50, 10, rng)
        self.boss = Pokemon(100, 10, rng)

        self.confirm_sfx = SoundEffect(SoundEnum.SELECT, sounds)
        self.hit_sfx = SoundEffect(SoundEnum.HIT, sounds)
        self.hit_sfx.set_volume(100)

        self.action_confirmed = False
        self._enter_was_down = False

        self.health_bar_width = HEALTH_WIDTH
        self.background_position = (0.0, float(self.height - MENU_HEIGHT))

        top = float(self.height - MENU_HEIGHT)
        self.cursor = MenuText(">", self._cursor_top())
        fight = MenuText("FIGHT", (float(self.width - MENU_X_FROM_RIGHT), top))
        run = MenuText(
            "RUN",
            (float(self.width - MENU_X_FROM_RIGHT), self.height - MENU_HEIGHT / 1.5),
        )
        self.menu_items = [run, fight]

    def _cursor_top(self) -> Tuple[float, float]:
        return (float(self.width - CURSOR_X_FROM_RIGHT), float(self.height - MENU_HEIGHT))

    def _cursor_bottom(self) -> Tuple[float, float]:
        return (
            float(self.width - CURSOR_X_FROM_RIGHT),
            float(self.height - self._menu_text_height - 20),
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the menu panel, its items, the health bar and the cursor."""
        panel = pygame.Surface((self.width, MENU_HEIGHT), pygame.SRCALPHA)
        panel.fill(BACKGROUND_COLOR)
        surface.blit(panel, _rounded(self.background_position))

        for item in self.menu_items:
            self._draw_text(surface, item)

        x, y = HEALTH_POSITION
        pygame.draw.rect(surface, BLACK, pygame.Rect(x, y, HEALTH_WIDTH, HEALTH_HEIGHT))
        width = max(0.0, self.health_bar_width)
        if width > 0:
            pygame.draw.rect(surface, RED, pygame.Rect(x, y, width, HEALTH_HEIGHT))

        self._draw_text(surface, self.cursor)

    def _draw_text(self, surface: pygame.Surface, item: MenuText) -> None:
        rendered = self._font.render(item.text, True, WHITE)
        surface.blit(rendered, _rounded(item.position))

    def update(self, pressed: Any) -> None:
        """Handle input and, if an attack was confirmed, strike the boss."""
        self.handle_event(pressed)
        if self.action_confirmed:
            self.hit_sfx.play()
            damage = self.rayquaza.calculate_damage()
            self.boss.take_damage(damage)
            self.update_health(damage)
            self.action_confirmed = False

    def update_health(self, damage: int) -> None:
        """Resize the health bar to the boss's remaining hit points."""
        print(f"Remaining boss hp: {self.boss.hp}")
        print(f"dmg done: {damage}")
        self.health_bar_width = HEALTH_WIDTH * self.boss.hp / self.boss.max_hp

    def handle_event(self, pressed: Any) -> None:
        """Move the cursor and confirm an action when Enter goes down."""
        if _held(pressed, pygame.K_s):
            self.cursor.position = self._cursor_bottom()
        elif _held(pressed, pygame.K_w):
            self.cursor.position = self._cursor_top()

        enter_now = _held(pressed, pygame.K_RETURN)
        if enter_now and not self._enter_was_down:
            self.confirm_sfx.play()
            self.action_confirmed = True
        self._enter_was_down = enter_now


def _rounded(position: Tuple[float, float]) -> Tuple[int, int]:
    return (round(position[0]), round(position[1]))