import random
from dataclasses import dataclass

import pygame

from config import (
    OBSTACLE_COLOR,
    OBSTACLE_RADIUS_MAX,
    OBSTACLE_RADIUS_MIN,
    OBSTACLE_SPEED_FACTOR,
    PLAYER_ASPECT_DIVISOR,
    PLAYER_COLOR,
    PLAYER_HEIGHT_DIVISOR,
    PLAYER_STEP_DIVISOR,
    ConfigurationError,
)


@dataclass(frozen=True)
class Playfield:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"playfield must have a positive size, got {self.width}x{self.height}")

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> "Playfield":
        width, height = surface.get_size()
        return cls(width, height)


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


class GeometricObject:
    # Constructor keeps the position as given so obstacles can enter from the
    # right edge; later assignments to x or y are clamped into the playfield
    def __init__(self, x: float, y: float, playfield: Playfield) -> None:
        self.playfield = playfield
        self.position = pygame.Vector2(x, y)

    @property
    def width(self) -> float:
        raise NotImplementedError

    @property
    def height(self) -> float:
        raise NotImplementedError

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = clamp(value, 0, self.playfield.width - self.width)

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = clamp(value, 0, self.playfield.height - self.height)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(round(self.width)), int(round(self.height)))

    def update(self) -> None:
        pass

    def draw(self, surface: pygame.Surface) -> None:
        raise NotImplementedError

    def is_colliding(self, other: "GeometricObject") -> bool:
        # Touching edges count as a hit
        return not (
            other.x > self.x + self.width
            or other.x + other.width < self.x
            or other.y > self.y + self.height
            or other.y + other.height < self.y
        )


class Player(GeometricObject):
    @property
    def height(self) -> float:
        return self.playfield.height / PLAYER_HEIGHT_DIVISOR

    @property
    def width(self) -> float:
        return self.height / PLAYER_ASPECT_DIVISOR

    @property
    def step(self) -> float:
        return self.height / PLAYER_STEP_DIVISOR

    def move_up(self) -> None:
        self.y -= self.step

    def move_down(self) -> None:
        self.y += self.step

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, PLAYER_COLOR, self.rect)


class Obstacle(GeometricObject):
    def __init__(
        self,
        x: float,
        y: float,
        playfield: Playfield,
        rng: random.Random | None = None,
        radius: float | None = None,
    ) -> None:
        super().__init__(x, y, playfield)
        if radius is None:
            rng = rng or random.Random()
            radius = rng.random() * (OBSTACLE_RADIUS_MAX - OBSTACLE_RADIUS_MIN) + OBSTACLE_RADIUS_MIN
        self.radius = radius
        # Vertical extent is kept on the playfield from the start
        self.y = y

    @property
    def width(self) -> float:
        return self.radius * 2

    @property
    def height(self) -> float:
        return self.radius * 2

    @property
    def speed(self) -> float:
        return OBSTACLE_SPEED_FACTOR / self.radius

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2(self.x + self.radius, self.y + self.radius)

    def update(self) -> None:
        self.x -= self.speed

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.circle(surface, OBSTACLE_COLOR, self.center, self.radius)
