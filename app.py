import logging
import random
from enum import Enum, auto

import pygame

from config import END_FONT_SIZE, FONT_NAME, SCORE_FONT_SIZE, TICK_MS, ConfigurationError
from game_state import GameMode, GameState
from objects import Playfield
from render import draw_end_screen, draw_scene


logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEY_CODES = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
}


def key_code(key: int) -> str:
    return KEY_CODES.get(key, pygame.key.name(key))


class EventKind(Enum):
    TICK = auto()
    KEY = auto()


class TickTimer:
    # Posts TICK_EVENT to the pygame queue every period_ms
    def __init__(self, period_ms: int = TICK_MS, event_type: int = TICK_EVENT) -> None:
        self.period_ms = period_ms
        self.event_type = event_type
        self.running = False

    def start(self) -> None:
        pygame.time.set_timer(self.event_type, self.period_ms)
        self.running = True

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        self.running = False


class App:
    # Dispatch runs until it has to wait; awaiting records which event kind resumes it
    def __init__(
        self,
        surface: pygame.Surface | None,
        rng: random.Random | None = None,
        timer: TickTimer | None = None,
    ) -> None:
        if surface is None:
            raise ConfigurationError("no drawing surface available")
        self.surface = surface
        self.state = GameState(Playfield.from_surface(surface), rng=rng)
        self.timer = timer or TickTimer()
        self.awaiting: EventKind | None = None
        self.score_font = pygame.font.SysFont(FONT_NAME, SCORE_FONT_SIZE)
        self.end_font = pygame.font.SysFont(FONT_NAME, END_FONT_SIZE)

    @property
    def mode(self) -> GameMode:
        return self.state.mode

    def start(self) -> None:
        self.dispatch()

    def dispatch(self) -> None:
        while self.awaiting is None:
            mode = self.state.mode
            if mode is GameMode.INIT:
                self.state.init()
            elif mode is GameMode.PLAYING:
                self.timer.start()
                self.awaiting = EventKind.TICK
            elif mode is GameMode.ENDED:
                self.end_game()
                self.awaiting = EventKind.KEY
            elif mode is GameMode.RELOAD:
                logger.info("Restarting")
                self.state.mode = GameMode.INIT

    def draw(self) -> None:
        draw_scene(self.surface, self.state, self.score_font)

    def end_game(self) -> None:
        draw_end_screen(self.surface, self.state.score, self.end_font)

    def on_tick(self) -> None:
        if self.awaiting is not EventKind.TICK:
            return

        self.state.frames += 1
        self.draw()
        self.state.update()
        self.state.check()
        if self.state.mode is not GameMode.PLAYING:
            self.timer.cancel()
            self.awaiting = None
            self.dispatch()

    def on_key(self, code: str) -> bool:
        if self.awaiting is EventKind.KEY:
            self.awaiting = None
            self.state.mode = GameMode.RELOAD
            self.dispatch()
            return True

        if self.state.mode is not GameMode.PLAYING:
            return False
        if code == "ArrowUp":
            self.state.move_player(-1)
        elif code == "ArrowDown":
            self.state.move_player(1)
        else:
            return False

        self.draw()
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == self.timer.event_type:
            self.on_tick()
            return True
        if event.type == pygame.KEYDOWN:
            return self.on_key(key_code(event.key))
        return False
