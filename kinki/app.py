"""The game's window, main loop and command line."""

from __future__ import annotations

import argparse
import os
import random
import sys

import pygame

from .controls import Key, handle_key
from .entities import GameState
from .render import Renderer
from .settings import WD_HEIGHT, WD_WIDTH
from .world import update_objects

WINDOW_TITLE = "禁忌地方"
WINDOW_POSITION = "80,50"
FRAME_RATE = 60

_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_c: Key.C,
}


def print_error(message) -> int:
    """Write `message` to standard error and return the failure status."""
    print(message, file=sys.stderr)
    return -1


def key_from_pygame(key_code):
    """The game key for a pygame key code, or None if the game ignores it."""
    return _KEYS.get(key_code)


def run(asset_dir=".", max_frames=None) -> int:
    """Open the window and play until it is closed or `max_frames` have passed."""
    os.environ.setdefault("SDL_VIDEO_WINDOW_POS", WINDOW_POSITION)
    pygame.init()
    try:
        if not pygame.display.get_init():
            return print_error(pygame.get_error())
        try:
            screen = pygame.display.set_mode((WD_WIDTH, WD_HEIGHT))
        except pygame.error as exc:
            return print_error(str(exc))
        pygame.display.set_caption(WINDOW_TITLE)

        renderer = Renderer(screen, asset_dir)
        if renderer.background is None:
            return print_error("failed to initialize window")

        state = GameState.new(random.Random())
        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running and (max_frames is None or frames < max_frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    key = key_from_pygame(event.key)
                    if key is not None:
                        handle_key(state.player, key, event.type == pygame.KEYDOWN)
            update_objects(state)
            renderer.render_frame(state)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
            frames += 1
        return 0
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="kinki", description="A vertical shooting game.")
    parser.add_argument(
        "--assets", default=".", help="directory holding the image/ and font/ folders"
    )
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)
    return run(args.assets, args.frames)


if __name__ == "__main__":
    raise SystemExit(main())