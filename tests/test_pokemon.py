import random

import pytest

from finalbattle.pokemon import Pokemon


class FixedRoll:
    def __init__(self, value):
        self.value = value
        self.bounds = []

    def randint(self, low, high):
        self.bounds.append((low, high))
        return self.value


def test_initial_state():
    mon = Pokemon(50, 10)
    assert mon.hp == 50
    assert mon.max_hp == 50
    assert mon.attack == 10
    assert not mon.is_fainted()


def test_take_damage_until_fainted():
    mon = Pokemon(10, 10)
    mon.take_damage(4)
    assert mon.hp == 6
    assert not mon.is_fainted()
    mon.take_damage(6)
    assert mon.is_fainted()
    assert mon.max_hp == 10


def test_hp_can_go_negative():
    mon = Pokemon(5, 1)
    mon.take_damage(8)
    assert mon.hp == -3
    assert mon.is_fainted()


@pytest.mark.parametrize("roll, expected", [(1, 2), (25, 2), (26, 1), (100, 1)])
def test_crit_threshold(roll, expected):
    rng = FixedRoll(roll)
    mon = Pokemon(100, 10, rng)
    assert mon.calculate_crit() == expected
    assert rng.bounds == [(1, 100)]


def test_damage_is_attack_times_crit():
    assert Pokemon(100, 10, FixedRoll(10)).calculate_damage() == 20
    assert Pokemon(100, 10, FixedRoll(90)).calculate_damage() == 10


def test_random_damage_is_normal_or_doubled():
    mon = Pokemon(100, 7, random.Random(1234))
    results = {mon.calculate_damage() for _ in range(200)}
    assert results == {7, 14}