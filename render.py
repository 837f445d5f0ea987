import pygame

from config import (
    BACKGROUND_COLOR,
    END_BACKGROUND_COLOR,
    END_TEXT_COLOR,
    SCORE_COLOR,
)
from game_state import GameState

def fit_to_width(text: pygame.Surface, max_width: int) -> pygame.Surface:
    # Shrink text that would overflow, keeping its aspect ratio
    if text.get_width() <= max_width:
        return text
    scale = max_width / text.get_width()
    size = (max_width, max(1, int(text.get_height() * scale)))
    return pygame.transform.smoothscale(text, size)

def draw_score(surface: pygame.Surface, score: int, font: pygame.font.Font) -> None:
    text = font.render(str(score), True, SCORE_COLOR)
    rect = text.get_rect(topright=(surface.get_width(), 0))
    surface.blit(text, rect)

def draw_scene(surface: pygame.Surface, state: GameState, font: pygame.font.Font) -> None:
    surface.fill(BACKGROUND_COLOR)
    state.player.draw(surface)
    for obstacle in state.obstacles:
        obstacle.draw(surface)
    draw_score(surface, state.score, font)

def draw_end_screen(surface: pygame.Surface, score: int, font: pygame.font.Font) -> None:
    surface.fill(END_BACKGROUND_COLOR)
    text = font.render(f"You lost with {score} points", True, END_TEXT_COLOR)
    text = fit_to_width(text, surface.get_width())
    surface.blit(text, text.get_rect(center=surface.get_rect().center))
