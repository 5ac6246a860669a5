"""Opens the game window and runs the frame loop."""

from __future__ import annotations

import argparse
from typing import Any, Callable, Optional, Sequence

import pygame

from finalbattle.game_state import GameState

WINDOW_SIZE = (800, 600)
TITLE = "Final Battle"
FRAMERATE = 60
CLEAR_COLOR = (0, 0, 0)


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="finalbattle", description="Run the game.")
    parser.add_argument(
        "--frames",
        type=_non_negative,
        default=None,
        help="stop after this many frames",
    )
    return parser.parse_args(argv)


def _run(
    window: pygame.Surface,
    game: Any,
    frames: Optional[int] = None,
    tick: Optional[Callable[[], Any]] = None,
) -> int:
    """Run frames until the window is closed or ``frames`` have been shown."""
    shown = 0
    while frames is None or shown < frames:
        if any(event.type == pygame.QUIT for event in pygame.event.get()):
            break
        window.fill(CLEAR_COLOR)
        game.handle_events(pygame.key.get_pressed())
        game.draw(window)
        game.check_status()
        pygame.display.flip()
        if tick is not None:
            tick()
        shown += 1
    return shown


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        game = GameState(WINDOW_SIZE)
        clock = pygame.time.Clock()
        _run(window, game, args.frames, lambda: clock.tick(FRAMERATE))
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())