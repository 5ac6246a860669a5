import pygame
import pytest

from finalbattle.actors import WALK_SPEED
from finalbattle.assets import (
    ImageEnum,
    SoundEffectManager,
    SoundEnum,
    TextureManager,
    image_path,
)
from finalbattle.audio import AudioManager
from finalbattle.overworld import OFFSCREEN, OverWorld

SIZE = (800, 600)
SHEETS = {
    image_path(ImageEnum.MAINCHAR): (48, 64),
    image_path(ImageEnum.ENEMY): (40, 80),
    image_path(ImageEnum.ENEMYSHOUT): (100, 80),
}


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1

    def set_volume(self, volume):
        self.volume = volume


class FakeMusic:
    def __init__(self):
        self.loaded = []
        self.playing = False

    def load(self, filename):
        self.loaded.append(filename)

    def set_volume(self, volume):
        self.volume = volume

    def play(self, loops=0):
        self.playing = True

    def stop(self):
        self.playing = False


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def parts():
    return {
        "textures": TextureManager(loader=lambda path: pygame.Surface(SHEETS[path])),
        "sounds": SoundEffectManager(loader=lambda path: FakeSound()),
        "music": FakeMusic(),
        "clock": FakeClock(),
    }


def make(parts, background=None):
    if background is None:
        background = pygame.Surface((10, 10))
    return OverWorld(
        SIZE,
        textures=parts["textures"],
        sounds=parts["sounds"],
        music=AudioManager(music=parts["music"]),
        background=background,
        clock=parts["clock"],
    )


def test_constructor_plays_overworld_theme(parts):
    make(parts)
    assert parts["music"].loaded == ["Sounds/OverworldTheme.mp3"]
    assert parts["music"].playing is True


def test_player_starts_at_bottom_centre(parts):
    world = make(parts)
    bounds = world.player.global_bounds()
    assert bounds.left + bounds.width == SIZE[0] // 2
    assert bounds.top + bounds.height == SIZE[1]


def test_enemies_start_in_place(parts):
    world = make(parts)
    assert world.enemy.global_bounds().left == 370
    assert world.enemy.global_bounds().top == 0
    assert (world.enemy2.global_bounds().left, world.enemy2.global_bounds().top) == OFFSCREEN


def test_walking_right_moves_player(parts):
    world = make(parts)
    before = world.player.global_bounds()
    world.handle_event({pygame.K_d})
    after = world.player.global_bounds()
    assert after.left == before.left + WALK_SPEED
    assert after.top == before.top


def test_camera_stays_inside_window(parts):
    world = make(parts)
    world.handle_event(set())
    view = world.view_rect()
    assert view.width == SIZE[0] / 2
    assert view.height == SIZE[1] / 2
    assert 0 <= view.left and view.left + view.width <= SIZE[0]
    assert 0 <= view.top and view.top + view.height <= SIZE[1]


def test_camera_follows_player_in_middle(parts):
    world = make(parts)
    world.player.set_position((392.0, 292.0))
    bounds = world.player.global_bounds()
    world.handle_event(set())
    assert world.view_center == (
        bounds.left + bounds.width / 2,
        bounds.top + bounds.height / 2,
    )


def test_not_finished_without_shout(parts):
    world = make(parts)
    world.player.set_position((400.0, -5.0))
    parts["clock"].now = 10.0
    world.handle_event(set())
    assert world.is_finished() is False


def test_shout_starts_fight_after_two_seconds(parts):
    world = make(parts)
    enemy_place = world.enemy.global_bounds()
    world.player.set_position((400.0, -5.0))
    world.handle_event({pygame.K_RETURN})

    assert parts["sounds"].get(SoundEnum.KYUREM_CRY).plays == 1
    moved = world.enemy.global_bounds()
    assert (moved.left, moved.top) == OFFSCREEN
    shouting = world.enemy2.global_bounds()
    assert (shouting.left, shouting.top) == (enemy_place.left, enemy_place.top)
    assert world.is_finished() is False

    parts["clock"].now = 1.0
    world.handle_event(set())
    assert world.is_finished() is False
    assert parts["music"].playing is True

    parts["clock"].now = 2.0
    world.handle_event(set())
    assert world.is_finished() is True
    assert parts["music"].playing is False


def test_enter_away_from_boss_is_ignored(parts):
    world = make(parts)
    world.handle_event({pygame.K_RETURN})
    parts["clock"].now = 5.0
    world.handle_event(set())
    assert parts["sounds"].get(SoundEnum.KYUREM_CRY).plays == 0
    assert world.is_finished() is False


def test_draw_shows_map(parts):
    background = pygame.Surface((10, 10))
    background.fill((255, 0, 0))
    world = make(parts, background)
    target = pygame.Surface(SIZE)
    world.draw(target)
    assert tuple(target.get_at((0, 0)))[:3] == (255, 0, 0)


def test_missing_map_is_reported(parts, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    world = OverWorld(
        SIZE,
        textures=parts["textures"],
        sounds=parts["sounds"],
        music=AudioManager(music=parts["music"]),
        clock=parts["clock"],
    )
    target = pygame.Surface(SIZE)
    target.fill((9, 9, 9))
    world.draw(target)
    assert "Error loading image!" in capsys.readouterr().out
    assert tuple(target.get_at((0, 0)))[:3] == (0, 0, 0)