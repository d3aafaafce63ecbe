"""Program entry: screen setup and the switch between menu, game and leaderboard."""

from __future__ import annotations

import argparse
import curses

from .game import game_loop
from .highscore import highscore_loop
from .menu import menu_loop

MIN_HEIGHT = 30
MIN_WIDTH = 120


def terminal_too_small(height, width):
    """Tell whether the terminal is below the size the game needs."""
    return height < MIN_HEIGHT or width < MIN_WIDTH


def _put(window, y, x, text):
    try:
        window.addstr(y, max(x, 0), text)
    except curses.error:
        pass


def _wait_for_size(screen):
    height, width = screen.getmaxyx()
    while terminal_too_small(height, width):
        screen.getch()
        screen.clear()
        y = height // 2
        _put(screen, y, width // 2 - 12, "TERMINALE TROPPO PICCOLO!")
        _put(
            screen,
            y + 2,
            width // 2 - 31,
            f"Ridimensionare il terminale per una dimensione di almeno {MIN_HEIGHT}x{MIN_WIDTH}",
        )
        _put(screen, y + 4, width // 2 - 8, f"Al momento {width}x{height}")
        screen.refresh()
        curses.napms(500)
        height, width = screen.getmaxyx()
    return height, width


def run(screen):
    """Drive the screens until the player quits."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.noecho()
    curses.cbreak()
    screen.nodelay(True)
    screen.keypad(True)
    screen.refresh()

    height, width = _wait_for_size(screen)
    window = curses.newwin(height, width, 0, 0)
    screen.refresh()

    screens = {
        "M": lambda: menu_loop(window),
        "G": lambda: game_loop(window, width, height),
        "H": lambda: highscore_loop(window),
    }
    state = "M"
    while state != "Q":
        handler = screens.get(state)
        if handler is None:
            raise RuntimeError(f"Invalid state {state}")
        state = handler()


def main(argv=None):
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="bombgrid", description="Play a bomb-laying maze game in the terminal."
    )
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0