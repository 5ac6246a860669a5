import pygame
import pytest

from finalbattle.actors import EnemyBossBattle, EnemyOverworld, Player
from finalbattle.assets import ImageEnum, TextureManager


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sheet():
    surface = pygame.Surface((96, 128), pygame.SRCALPHA)
    surface.fill((255, 255, 255, 255))
    return surface


@pytest.fixture
def textures(sheet):
    return TextureManager(loader=lambda path: sheet)


@pytest.fixture
def player(textures, clock):
    return Player(ImageEnum.MAINCHAR, textures, clock)


def test_player_frame_is_one_cell_of_sheet(player, sheet):
    bounds = player.global_bounds()
    assert bounds.width * 3 == sheet.get_width()
    assert bounds.height * 4 == sheet.get_height()


def test_no_keys_means_no_motion(player):
    player.set_position((10.0, 20.0))
    player.handle_input(set())
    player.update()
    assert player.velocity == (0.0, 0.0)
    assert (player.global_bounds().left, player.global_bounds().top) == (10.0, 20.0)


def test_up_key_moves_up(player):
    player.handle_input({pygame.K_w})
    assert player.velocity == (0.0, -2.5)
    player.update()
    assert player.global_bounds().top == -2.5


def test_diagonal_combines_keys(player):
    player.handle_input({pygame.K_w, pygame.K_d})
    assert player.velocity == (2.5, -2.5)


def test_opposite_keys_cancel(player):
    player.handle_input({pygame.K_a, pygame.K_d})
    assert player.velocity == (0.0, 0.0)


def test_velocity_resets_each_frame(player):
    player.handle_input({pygame.K_s})
    player.handle_input(set())
    assert player.velocity == (0.0, 0.0)


def test_handle_input_accepts_indexable_state(player):
    state = [False] * 512
    state[pygame.K_a] = True
    player.handle_input(state)
    assert player.velocity == (-2.5, 0.0)


def test_walking_down_shows_row_one_after_frame_time(player, clock):
    clock.now = 0.3
    player.handle_input({pygame.K_s})
    rect = player.sprite.texture_rect
    assert rect.y == rect.height
    assert rect.x == rect.width


def test_set_scale_and_position(player):
    before = player.global_bounds()
    player.set_scale((2.0, 3.0))
    player.set_position((5.0, 6.0))
    after = player.global_bounds()
    assert after.width == before.width * 2
    assert after.height == before.height * 3
    assert (after.left, after.top) == (5.0, 6.0)


def test_player_draw_blits_onto_surface(player):
    target = pygame.Surface((100, 100))
    target.fill((0, 0, 0))
    player.draw(target)
    assert target.get_at((1, 1))[:3] == (255, 255, 255)
    assert target.get_at((90, 90))[:3] == (0, 0, 0)


def test_enemy_draw_advances_animation(textures, clock):
    enemy = EnemyOverworld(ImageEnum.ENEMY, 8, 2, textures, clock)
    target = pygame.Surface((200, 200))
    enemy.draw(target)
    assert enemy.sprite.texture_rect.x == 0
    clock.now = 0.25
    enemy.draw(target)
    assert enemy.sprite.texture_rect.x == enemy.sprite.texture_rect.width


def test_enemy_animation_wraps(textures, clock):
    enemy = EnemyOverworld(ImageEnum.ENEMY, 8, 2, textures, clock)
    target = pygame.Surface((200, 200))
    clock.now = 0.25
    enemy.draw(target)
    clock.now = 0.5
    enemy.draw(target)
    assert enemy.sprite.texture_rect.x == 0


def test_enemy_update_leaves_it_in_place(textures, clock):
    enemy = EnemyOverworld(ImageEnum.ENEMY, 8, 2, textures, clock)
    enemy.set_position((30.0, 40.0))
    enemy.set_scale((1.5, 1.5))
    before = enemy.global_bounds()
    enemy.update()
    assert enemy.global_bounds() == before


def test_enemy_rejects_empty_grid(textures, clock):
    with pytest.raises(ValueError):
        EnemyOverworld(ImageEnum.ENEMY, 0, 2, textures, clock)


def test_boss_set_color_tints_drawing(textures, clock):
    boss = EnemyBossBattle(ImageEnum.ENEMYBATTLE, 1, 16, textures, clock)
    boss.set_color((255, 0, 0))
    assert boss.sprite.color == (255, 0, 0, 255)
    target = pygame.Surface((50, 50))
    target.fill((0, 0, 0))
    boss.sprite.draw(target)
    assert target.get_at((1, 1))[:3] == (255, 0, 0)


def test_boss_white_color_keeps_sprite_unchanged(textures, clock):
    boss = EnemyBossBattle(ImageEnum.ENEMYBATTLE, 1, 16, textures, clock)
    boss.set_color((255, 255, 255, 255))
    target = pygame.Surface((50, 50))
    boss.sprite.draw(target)
    assert target.get_at((1, 1))[:3] == (255, 255, 255)