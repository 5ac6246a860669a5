"""Background music and sound effect playback."""

from __future__ import annotations

from typing import Any

import pygame

from finalbattle import assets
from finalbattle.assets import SoundEffectManager, SoundEnum


class SoundEffect:
    """A playable sound effect backed by a cached buffer."""

    def __init__(self, sound: SoundEnum, manager: SoundEffectManager | None = None):
        if manager is None:
            manager = assets.sounds
        self.sound = sound
        self._buffer = manager.get(sound)
        self.volume = 100.0

    def set_volume(self, volume: float) -> None:
        """Set the volume on a 0-100 scale."""
        self.volume = float(volume)
        self._buffer.set_volume(self.volume / 100.0)

    def play(self) -> None:
        """Start playing the effect."""
        self._buffer.play()


class AudioManager:
    """Plays looping background music and one-shot effects."""

    def __init__(self, music: Any = None, sounds: SoundEffectManager | None = None):
        self._music = music
        self._sounds = sounds

    @property
    def _player(self) -> Any:
        if self._music is not None:
            return self._music
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.music

    def play_music(self, filename: str) -> None:
        """Load ``filename`` and play it on a loop at full volume."""
        player = self._player
        try:
            player.load(filename)
        except (pygame.error, OSError):
            print(f"AudioManager: failed to load “{filename}”")
            return
        player.set_volume(1.0)
        player.play(loops=-1)
        print(f"AudioManager: playing “{filename}”")

    def stop_music(self) -> None:
        """Stop the background music."""
        self._player.stop()

    def play_sound_effect(self, effect: SoundEnum) -> None:
        """Play a one-shot sound effect."""
        SoundEffect(effect, self._sounds).play()