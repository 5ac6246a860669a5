"""Asset identifiers, their file paths and caching resource managers."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable, Dict, Generic, Hashable, Mapping, TypeVar

import pygame

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class ImageEnum(Enum):
    """Sprite sheets and images used by the game."""

    ROTATEZ = auto()
    MAINCHAR = auto()
    ENEMY = auto()
    ENEMYSHOUT = auto()
    ENEMYBATTLE = auto()
    RAYQUAZA = auto()


class SoundEnum(Enum):
    """Short sound effects."""

    KYUREM_CRY = auto()
    HIT = auto()
    SELECT = auto()


class FontEnum(Enum):
    """Fonts used for on-screen text."""

    DUNE = auto()
    POKEMON = auto()


class GameStateEnum(Enum):
    """Screens the game can be in."""

    OVERWORLD = auto()
    BATTLE = auto()


_IMAGE_PATHS: Dict[ImageEnum, str] = {
    ImageEnum.ROTATEZ: "images/Rotate-Anim.png",
    ImageEnum.MAINCHAR: "images/CharacterWalk.png",
    ImageEnum.ENEMY: "images/WhiteKyuremIdle.png",
    ImageEnum.ENEMYSHOUT: "images/KyuremCharge.png",
    ImageEnum.ENEMYBATTLE: "images/KyuremBattleAnimSheet.png",
    ImageEnum.RAYQUAZA: "images/RAYQUAZAFINAL.png",
}

_SOUND_PATHS: Dict[SoundEnum, str] = {
    SoundEnum.KYUREM_CRY: "Sounds/KyuremShout.mp3",
    SoundEnum.SELECT: "Sounds/selectSFX.mp3",
    SoundEnum.HIT: "Sounds/hitFX.mp3",
}

_FONT_PATHS: Dict[FontEnum, str] = {
    FontEnum.DUNE: "fonts/Dune_Rise.otf",
    FontEnum.POKEMON: "fonts/Pokemon Classic.ttf",
}

DEFAULT_FONT_SIZE = 25


def _lookup(paths: Mapping[Any, str], key: Any, kind: str) -> str:
    try:
        return paths[key]
    except (KeyError, TypeError):
        raise ValueError(f"unknown {kind}: {key!r}") from None


def image_path(image: ImageEnum) -> str:
    """Return the file path of an image."""
    return _lookup(_IMAGE_PATHS, image, "image")


def sound_path(sound: SoundEnum) -> str:
    """Return the file path of a sound effect."""
    return _lookup(_SOUND_PATHS, sound, "sound")


def font_path(font: FontEnum) -> str:
    """Return the file path of a font."""
    return _lookup(_FONT_PATHS, font, "font")


class ResourceManager(Generic[K, T]):
    """Loads a resource the first time it is asked for and caches it."""

    def __init__(self, loader: Callable[[str], T], paths: Mapping[K, str]):
        self._loader = loader
        self._paths = dict(paths)
        self._cache: Dict[K, T] = {}

    def path_for(self, key: K) -> str:
        """Return the file path that backs ``key``."""
        return _lookup(self._paths, key, "resource")

    def get(self, key: K) -> T:
        """Return the resource for ``key``, loading it on first use."""
        if key not in self._cache:
            self._cache[key] = self._loader(self.path_for(key))
        return self._cache[key]

    def clear(self) -> None:
        """Drop every cached resource."""
        self._cache.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._cache


def _load_texture(path: str) -> pygame.Surface:
    return pygame.image.load(path)


def _load_sound(path: str) -> pygame.mixer.Sound:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


def _font_loader(size: int) -> Callable[[str], pygame.font.Font]:
    def load(path: str) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(path, size)

    return load


class TextureManager(ResourceManager[ImageEnum, Any]):
    """Cache of sprite sheet surfaces."""

    def __init__(self, loader: Callable[[str], Any] | None = None):
        super().__init__(loader if loader is not None else _load_texture, _IMAGE_PATHS)

    def path_for(self, key: ImageEnum) -> str:
        return image_path(key)


class FontManager(ResourceManager[FontEnum, Any]):
    """Cache of fonts at one character size."""

    def __init__(
        self,
        size: int = DEFAULT_FONT_SIZE,
        loader: Callable[[str], Any] | None = None,
    ):
        self.size = size
        super().__init__(loader if loader is not None else _font_loader(size), _FONT_PATHS)

    def path_for(self, key: FontEnum) -> str:
        return font_path(key)


class SoundEffectManager(ResourceManager[SoundEnum, Any]):
    """Cache of sound effect buffers."""

    def __init__(self, loader: Callable[[str], Any] | None = None):
        super().__init__(loader if loader is not None else _load_sound, _SOUND_PATHS)

    def path_for(self, key: SoundEnum) -> str:
        return sound_path(key)


textures = TextureManager()
fonts = FontManager()
sounds = SoundEffectManager()