import pygame

from config import KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS, WINDOW_HEIGHT, WINDOW_WIDTH
from main import main, open_window, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert (args.width, args.height) == (WINDOW_WIDTH, WINDOW_HEIGHT)
    assert args.seed is None
    assert args.log_level == "WARNING"


def test_parse_args_overrides():
    args = parse_args(["--width", "640", "--height", "320", "--seed", "9", "--log-level", "debug"])
    assert (args.width, args.height, args.seed, args.log_level) == (640, 320, 9, "debug")


def test_zero_sized_window_is_a_configuration_error():
    assert main(["--width", "0"]) == 2


def test_open_window_turns_on_key_repeat():
    pygame.key.set_repeat(0, 0)
    screen = open_window(320, 200)
    try:
        assert screen.get_size() == (320, 200)
        assert pygame.key.get_repeat() == (KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
    finally:
        pygame.key.set_repeat(0, 0)
