import pygame


WINDOW_WIDTH = 800
WINDOW_HEIGHT = 500
FPS = 70
TICK_MS = 1000 // FPS

# Held arrow keys repeat KEYDOWN after the delay, once per interval
KEY_REPEAT_DELAY_MS = 250
KEY_REPEAT_INTERVAL_MS = 35

# Spawning
SPAWN_INTERVAL_FRAMES = 50

# Obstacle tuning
OBSTACLE_RADIUS_MIN = 3.0
OBSTACLE_RADIUS_MAX = 10.0
# Horizontal speed is OBSTACLE_SPEED_FACTOR / radius px per tick
OBSTACLE_SPEED_FACTOR = 10.0

# Player tuning
PLAYER_HEIGHT_DIVISOR = 5
PLAYER_ASPECT_DIVISOR = 5
PLAYER_STEP_DIVISOR = 5

# Colors and fonts
Color = pygame.Color
BACKGROUND_COLOR = Color("white")
PLAYER_COLOR = Color("green")
OBSTACLE_COLOR = Color("red")
SCORE_COLOR = Color("black")
END_BACKGROUND_COLOR = Color("black")
END_TEXT_COLOR = Color("red")
FONT_NAME = "comicsansms"
SCORE_FONT_SIZE = 30
END_FONT_SIZE = 70


class ConfigurationError(ValueError):
    # Raised when the game is set up with an unusable playfield
    pass
