import pygame

from config import BACKGROUND_COLOR, END_BACKGROUND_COLOR, OBSTACLE_COLOR, PLAYER_COLOR
from game_state import GameState
from objects import Obstacle
from render import draw_end_screen, draw_scene, fit_to_width


def font():
    return pygame.font.Font(None, 30)


def test_scene_draws_player_obstacles_and_background(playfield):
    surface = pygame.Surface((playfield.width, playfield.height))
    state = GameState(playfield)
    state.init()
    state.obstacles.append(Obstacle(200, 300, playfield, radius=8))

    draw_scene(surface, state, font())

    assert surface.get_at((250, 150)) == BACKGROUND_COLOR
    assert surface.get_at((10, 50)) == PLAYER_COLOR
    assert surface.get_at((208, 308)) == OBSTACLE_COLOR


def test_score_is_drawn_in_top_right_corner(playfield):
    surface = pygame.Surface((playfield.width, playfield.height))
    state = GameState(playfield)
    state.init()
    state.score = 88

    draw_scene(surface, state, font())

    corner = [
        surface.get_at((x, y))
        for x in range(playfield.width - 40, playfield.width)
        for y in range(0, 30)
    ]
    assert any(color != BACKGROUND_COLOR for color in corner)


def test_end_screen_fills_background(playfield):
    surface = pygame.Surface((playfield.width, playfield.height))
    draw_end_screen(surface, 12, pygame.font.Font(None, 70))
    assert surface.get_at((0, 0)) == END_BACKGROUND_COLOR
    assert surface.get_at((playfield.width - 1, playfield.height - 1)) == END_BACKGROUND_COLOR


def test_end_screen_draws_final_score_message(playfield):
    surface = pygame.Surface((playfield.width, playfield.height))
    draw_end_screen(surface, 12, pygame.font.Font(None, 70))
    cy = surface.get_rect().centery
    band = [
        surface.get_at((x, y))
        for x in range(0, playfield.width, 2)
        for y in range(cy - 10, cy + 10)
    ]
    assert any(color != END_BACKGROUND_COLOR for color in band)


def test_fit_to_width_shrinks_wide_text():
    text = pygame.font.Font(None, 70).render("You lost with 1000 points", True, (255, 0, 0))
    fitted = fit_to_width(text, 100)
    assert fitted.get_width() == 100
    assert fitted.get_height() <= text.get_height()
    assert fit_to_width(text, text.get_width() + 10) is text
