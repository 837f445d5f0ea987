import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from app import TickTimer
from objects import Playfield


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def playfield():
    return Playfield(500, 500)


class FakeTimer(TickTimer):
    def __init__(self):
        super().__init__()
        self.starts = 0
        self.cancels = 0

    def start(self):
        self.running = True
        self.starts += 1

    def cancel(self):
        self.running = False
        self.cancels += 1


@pytest.fixture
def timer():
    return FakeTimer()
