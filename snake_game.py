#!/usr/bin/env python3
"""
Simple Snake
A grid snake game with a start menu, pause screen and game-over screen

Controls:
- Arrows or h/j/k/l: steer
- Hold Enter: move fast
- Space: pause / resume
- G: toggle grid lines
- Esc or Q: give up the round

Run with: python snake_game.py [--font PATH] [--seed N]
For headless testing: SDL_VIDEODRIVER=dummy python snake_game.py --headless
"""

import argparse
import logging
import os
import random
import sys

import pygame

from simple_snake import config
from simple_snake.config import Settings
from simple_snake.display import PygameDisplay
from simple_snake.events import KeyDown, PygameEventSource, ScriptedEventSource, Tick
from simple_snake.game import Game

logger = logging.getLogger("simple_snake")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Simple Snake")
    parser.add_argument("--font", help="Path to a TTF font for all text (default: pygame's font)")
    parser.add_argument("--seed", type=int, help="Seed for food placement")
    parser.add_argument("--width", type=int, default=config.WINDOW_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=config.WINDOW_HEIGHT, help="Window height in pixels")
    parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Cell size in pixels")
    parser.add_argument("--normal-speed", type=int, default=config.NORMAL_SPEED_MS,
                        help="Milliseconds per tick at normal speed")
    parser.add_argument("--fast-speed", type=int, default=config.FAST_SPEED_MS,
                        help="Milliseconds per tick while Enter is held")
    parser.add_argument("--headless", action="store_true",
                        default=os.environ.get("SDL_VIDEODRIVER") == "dummy",
                        help="Run a scripted round without a window")
    parser.add_argument("--demo-ticks", type=int, default=100, help="Ticks to play in headless mode")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every tick")
    return parser.parse_args(argv)


def headless_script(ticks):
    """Pick "New Game" and let the snake run for a number of ticks"""
    return [KeyDown(pygame.K_RETURN)] + [Tick() for _ in range(ticks)]


def run(settings: Settings):
    # SDL reads the driver in pygame.init(), not at import
    if settings.headless:
        os.environ['SDL_VIDEODRIVER'] = 'dummy'
        os.environ['SDL_AUDIODRIVER'] = 'dummy'

    pygame.init()
    try:
        display = PygameDisplay(settings.width, settings.height, settings.font_path, settings.font_size)
        if settings.headless:
            logger.info("Running in headless mode for %d ticks...", settings.demo_ticks)
            events = ScriptedEventSource(headless_script(settings.demo_ticks))
        else:
            events = PygameEventSource()

        game = Game(settings, display, events, random.Random(settings.seed))
        game.run()

        if settings.headless and game.session.round is not None:
            logger.info("Headless run complete. Score: %d, length: %d",
                        game.session.round.score, len(game.session.round.snake))
        return game
    finally:
        pygame.quit()


def main(argv=None):
    """Entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(Settings.from_args(args))
    except Exception:
        logger.exception("Game crashed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
