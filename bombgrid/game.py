"""The in-game screen: the play loop and the status panel around the board."""

from __future__ import annotations

import curses
import time

from .game_over import game_over_screen
from .world import GameState, convert_key

FRAME_SECONDS = 0.04

_SCORE_TITLE = (
    "  __   ___ __  ___ ___  ",
    r"/'__/ / _//__\| _ \ __| ",
    r"`._`.| \_| \/ | v / _|  ",
    r"|___/ \__/\__/|_|_\___| ",
)

_LIVES_TITLE = (
    " _   _  _   _  ___  __   ",
    r"| | | || \ / || __/'__/",
    r"| |_| |`\ V /'| _|`._`. ",
    r"|___|_|  \_/  |___|___/ ",
)

_TIME_TITLE = (
    " _____ _ __ __ ___  ",
    "|_   _| |  V  | __| ",
    r"  | | | | \_/ | _|  ",
    "  |_| |_|_| |_|___| ",
)

_LEVEL_TITLE = (
    "   __   ",
    "  / /   ",
    " / /__  ",
    "/____/_ ",
    "  / __/ ",
    " / _/   ",
    "/___/ __",
    " | | / /",
    " | |/ / ",
    " |___/_ ",
    "  / __/ ",
    " / _/   ",
    "/___/   ",
    "  / /   ",
    " / /__  ",
    "/____/  ",
)

_DIGITS = (
    ("  ___     ", " <  /     ", " / /      ", "/_/       "),
    ("  ___     ", " |_  |    ", " / __/    ", "/____/    "),
    ("  ____    ", " |_  /    ", " _/_ <    ", "/____/    "),
    ("  ____    ", " / / /    ", "/_  _/    ", "/_/       "),
    ("   ____   ", "  / __/   ", r" /__ \ ", "/____/    "),
)

_HEART_SPACING = 3
_SCORE_COLUMN = 58
_WIDE_SCORE = 100


def _put(window, y, x, text, attr=0):
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _heart():
    # The alternate character set is only defined once the screen is set up.
    return getattr(curses, "ACS_DIAMOND", "*")


def score_column(score):
    """Return the column offset that keeps the score centred under its title."""
    column = _SCORE_COLUMN
    if score >= _WIDE_SCORE:
        # Three or more digits: shift left by one to stay centred.
        column -= 1
    return column


def level_banner(level_number):
    """Return the lines of the vertical LEVEL banner followed by the level's digit."""
    if not 1 <= level_number <= len(_DIGITS):
        raise ValueError(f"no banner for level {level_number}")
    return [*_LEVEL_TITLE, *_DIGITS[level_number - 1]]


def _draw_score(window, score, x_start, y_start):
    for row, line in enumerate(_SCORE_TITLE):
        _put(window, y_start + 7 + row, x_start + 48, line)
    _put(window, y_start + 12, x_start + score_column(score), str(score))


def _draw_lives(window, player, x_start, y_start):
    for row, line in enumerate(_LIVES_TITLE):
        _put(window, y_start + row, x_start + 48, line)
    _put(window, y_start + 5, x_start + 55, " " * 10)
    heart = _heart()
    for index in range(player.lives):
        try:
            window.addch(y_start + 5, x_start + 55 + index * _HEART_SPACING, heart)
        except curses.error:
            pass


def _draw_level(window, level_number, x_start, y_start):
    for row, line in enumerate(level_banner(level_number)):
        _put(window, y_start + row, x_start - 12, line)


def _draw_time_left(window, time_left, x_start, y_start):
    for row, line in enumerate(_TIME_TITLE):
        _put(window, y_start + 14 + row, x_start + 49, line)
    _put(window, y_start + 19, x_start + 57, f"{time_left}  ")


def draw_status(window, state, x_start, y_start):
    """Draw the board and the score, lives, level and time panels."""
    level = state.level
    _draw_score(window, state.score, x_start, y_start)
    _draw_lives(window, state.player, x_start, y_start)
    _draw_level(window, level.number, x_start, y_start)
    level.board.draw(window, x_start, y_start)
    _draw_time_left(window, level.time_left, x_start, y_start)
    window.refresh()


def game_loop(window, width, height):
    """Play one game at 25 frames a second, then show the game over dialog.

    Returns the state to go to next.
    """
    x_start = width // 2 - 25
    y_start = height // 2 - 10
    window.nodelay(True)
    window.keypad(True)
    window.erase()
    window.box()

    state = GameState()
    start = time.monotonic()
    seconds = 0
    frame = 0
    while not state.over:
        if seconds != int(time.monotonic() - start):
            seconds += 1
            state.tick_second()

        state.step(convert_key(window.getch()), seconds)
        draw_status(window, state, x_start, y_start)

        frame += 1
        delay = start + frame * FRAME_SECONDS - time.monotonic()
        if delay > 0:
            time.sleep(delay)

    game_over_screen(window, state.player.lives, state.score, state.time_expired)
    return "H"