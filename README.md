# finalbattle

A short game in two scenes, built on pygame. You walk a character around an
overworld map toward a boss. Get close to it and press **Enter**, and the boss
shouts. Two seconds later the overworld music stops and the game switches to
the battle screen. There you confirm attacks from a menu and watch the boss's
health bar shrink.

## Installing

```
pip install .
```

This installs pygame as well. The test suite needs pytest, which you can
install with `pip install .[test]`.

## Running

Start the game from a directory that holds the game's asset folders:

```
finalbattle
```

`python -m finalbattle.main` does the same. The window is 800×600 and the
game runs at up to 60 frames per second. It stops when you close the window.

Option:

- `--frames N` stops after `N` frames. `N` must be zero or more.

### Asset files

Assets are loaded from paths relative to the current directory:

- `images/`: `CharacterWalk.png`, `WhiteKyuremIdle.png`, `KyuremCharge.png`,
  `KyuremBattleAnimSheet.png`, `RAYQUAZAFINAL.png`, `Rotate-Anim.png`,
  `updatedmap.png` and `SnowNightStage.png`.
- `Sounds/`: `OverworldTheme.mp3`, `KyuremTheme.mp3`, `KyuremShout.mp3`,
  `selectSFX.mp3` and `hitFX.mp3`.
- `fonts/`: `Dune_Rise.otf` and `Pokemon Classic.ttf`.

Some files are required. If a sprite sheet, a sound effect or the battle font
is missing, pygame raises an error and the game stops. Other files are
optional:

- If a music file fails to load, the game prints
  `AudioManager: failed to load …` and carries on without music.
- If the map or stage background is missing, the game prints
  `Error loading image!` and draws without a background.

## Controls

| Key     | Overworld                              | Battle                     |
|---------|----------------------------------------|----------------------------|
| W A S D | walk up, left, down, right             | W / S move the menu cursor |
| Enter   | make the boss shout when you are near it | confirm an attack        |

In the overworld the camera shows half the window's width and height around
the player, enlarged to fill the window. It stops at the edges of the map.

## The battle

Your fighter and the boss are `Pokemon` objects. Your fighter has 50 hit points
and 10 attack. The boss has 100 hit points and 10 attack.

Each time Enter goes down, your fighter attacks:

- The attack deals its attack value to the boss.
- One roll in four is a critical hit, which doubles the damage.
- The boss sprite is drawn larger for the frame in which the hit lands.
- The health bar in the top-left corner is resized to the boss's remaining
  share of its hit points.
- The remaining hit points and the damage dealt are printed to the console.

## What the game does not do

- The menu lists FIGHT and RUN, but Enter always attacks. Choosing RUN has no
  effect.
- The boss never attacks back.
- The battle has no ending. When the boss runs out of hit points, nothing
  happens and the battle screen stays up.
- There is no game-over screen and no way back to the overworld.

## Modules

- `finalbattle.assets` holds the enums `ImageEnum`, `SoundEnum`, `FontEnum`
  and `GameStateEnum`, and the path lookups `image_path`, `sound_path` and
  `font_path`. Each lookup raises `ValueError` for an unknown key. The module
  also holds `ResourceManager`, a cache that loads a resource on first `get`,
  with the subclasses `TextureManager`, `FontManager` and
  `SoundEffectManager`.
- `finalbattle.audio` provides:
  - `AudioManager`, with `play_music`, `stop_music` and `play_sound_effect`.
  - `SoundEffect`, with `play` and `set_volume`. Volume is on a 0 to 100
    scale.
- `finalbattle.controls` provides `KeyControl` and `KeyControls`, the
  movement-key-to-sheet-row bindings.
- `finalbattle.sprite.AnimatedSprite` cuts a sprite sheet into rows and
  columns:
  - `set_frame` picks a row.
  - `animate` moves to the next column once more than 200 ms have passed, and
    wraps back to the first column at the end of the row.
  - `global_bounds`, `move` and `draw` are also available.
- `finalbattle.pokemon.Pokemon` provides `is_fainted`, `take_damage`,
  `calculate_crit` and `calculate_damage`.
- `finalbattle.actors` provides `Player`, `EnemyOverworld` and
  `EnemyBossBattle`.
- `finalbattle.screen.Screen` is the base screen, with `draw`, `handle_event`
  and `is_finished`. `OverWorld` (in `finalbattle.overworld`) and `Battle` (in
  `finalbattle.battle`) build on it. The battle menu and health bar are
  `BattleGUI` in `finalbattle.battle_gui`.
- `finalbattle.game_state.GameState` starts on the overworld. Call
  `check_status` after each frame. Once the current screen reports it is
  finished, `check_status` replaces it with the battle screen.
- `finalbattle.main.main` is the command's entry point.