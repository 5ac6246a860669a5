"""Which screen is showing and what comes after it."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import pygame

from finalbattle.assets import GameStateEnum
from finalbattle.battle import Battle
from finalbattle.overworld import OverWorld
from finalbattle.screen import Screen

ScreenFactory = Callable[[Tuple[int, int]], Screen]

_DEFAULT_FACTORIES: Dict[GameStateEnum, ScreenFactory] = {
    GameStateEnum.OVERWORLD: OverWorld,
    GameStateEnum.BATTLE: Battle,
}


class GameState:
    """Holds the current screen and swaps it for the next when it finishes."""

    def __init__(
        self,
        size: Tuple[int, int],
        factories: Optional[Mapping[GameStateEnum, ScreenFactory]] = None,
    ):
        self.size = size
        self._factories = dict(factories if factories is not None else _DEFAULT_FACTORIES)
        self.stack: List[GameStateEnum] = [GameStateEnum.OVERWORLD, GameStateEnum.BATTLE]
        self.current = self.new_screen(GameStateEnum.OVERWORLD)

    def new_screen(self, state: GameStateEnum) -> Screen:
        """Build the screen for ``state``."""
        try:
            factory = self._factories[state]
        except (KeyError, TypeError):
            raise ValueError(f"unknown game state: {state!r}") from None
        return factory(self.size)

    def pop(self) -> None:
        """Replace the current screen with the one on top of the stack."""
        self.current = self.new_screen(self.stack[-1])

    def check_status(self) -> bool:
        """Move on if the current screen has finished; return whether it did."""
        if not self.current.is_finished():
            return False
        self.pop()
        print("stack popped!")
        return True

    def draw(self, surface: pygame.Surface) -> None:
        self.current.draw(surface)

    def handle_events(self, pressed: Any) -> None:
        self.current.handle_event(pressed)