import argparse
import logging
import random
import sys

import pygame

from app import App
from config import (
    KEY_REPEAT_DELAY_MS,
    KEY_REPEAT_INTERVAL_MS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    ConfigurationError,
)


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dodge the incoming balls with the arrow keys.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="playfield width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="playfield height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle placement")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def open_window(width: int, height: int) -> pygame.Surface:
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Dodger - Avoid the Balls")
    # Holding an arrow keeps the paddle moving
    pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
    return screen


def run(app: App) -> None:
    app.start()
    pygame.display.flip()
    running = True
    while running:
        # Block until the timer or the keyboard has something for us
        events = [pygame.event.wait()] + pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                app.handle_event(event)
        pygame.display.flip()
    app.timer.cancel()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.width <= 0 or args.height <= 0:
        logger.error("window size must be positive, got %dx%d", args.width, args.height)
        return 2

    pygame.init()
    try:
        screen = open_window(args.width, args.height)
        rng = random.Random(args.seed)
        run(App(screen, rng=rng))
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
