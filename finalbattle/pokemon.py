"""Battle statistics for a single creature."""

from __future__ import annotations

import random
from typing import Optional

CRIT_CHANCE_PERCENT = 25
CRIT_MULTIPLIER = 2


class Pokemon:
    """Hit points and attack power, with a chance of critical hits."""

    def __init__(self, hp: int, attack: int, rng: Optional[random.Random] = None):
        self.hp = hp
        self.attack = attack
        self.max_hp = hp
        self._rng = rng if rng is not None else random.Random()

    def is_fainted(self) -> bool:
        return self.hp <= 0

    def take_damage(self, amount: int) -> None:
        self.hp -= amount

    def calculate_crit(self) -> int:
        """Return the damage multiplier: doubled one time in four."""
        roll = self._rng.randint(1, 100)
        return CRIT_MULTIPLIER if roll <= CRIT_CHANCE_PERCENT else 1

    def calculate_damage(self) -> int:
        return self.attack * self.calculate_crit()