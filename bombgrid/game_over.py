"""The game over dialog that asks for a nickname and saves the score."""

from __future__ import annotations

import curses

from .highscore import save_highscore

NAME_LENGTH = 16
DIALOG_WIDTH = 80
DIALOG_HEIGHT = 18

_LOSE = (
    "__   __          ___  _        _ _ ",
    r"\ \ / /__ _  _  |   \(_)___ __| | |",
    r" \ V / _ \ || | | |) | / -_) _` |_|",
    r"  |_|\___/\_,_| |___/|_\___\__,_(_)",
    "                                   ",
)

_WIN = (
    "__   __         __      __ _      _ ",
    r"\ \ / /__ _  _  \ \    / /(_)_ _ | |",
    r" \ V / _ \ || |  \ \/\/ / | | ' \|_|",
    r"  |_|\___/\_,_|   \_/\_/  |_|_||_(_)",
    "                                    ",
)

_TIMES_UP = (
    " _____ _            _                _ ",
    "|_   _(_)_ __  ___ ( )___  _  _ _ __| |",
    r"  | | | | '  \/ -_| /(_-< | || | '_ \_|",
    r"  |_| |_|_|_|_\___/  /__/  \_,_| .__(_)",
    "                               |_|     ",
)

_BACKSPACE_KEYS = frozenset({curses.KEY_BACKSPACE, 127, 8})
_ENTER_KEYS = frozenset({10, curses.KEY_ENTER})


def game_over_banner(lives, times_up):
    """Return the banner lines: defeat, time's up or victory."""
    if lives <= 0:
        return list(_LOSE)
    if times_up:
        return list(_TIMES_UP)
    return list(_WIN)


def edit_name(name, key):
    """Apply one key press to the nickname being typed and return the result."""
    if key in _BACKSPACE_KEYS:
        name = name[:-1]
    if len(name) < NAME_LENGTH and 32 <= key <= 126:
        name += chr(key)
    return name


def _put(window, y, x, text, attr=0):
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _set_cursor(visibility):
    try:
        curses.curs_set(visibility)
    except curses.error:
        pass


def _window_size(window):
    height, width = window.getmaxyx()
    if width == 1 or height == 1:
        return curses.LINES, curses.COLS
    return height, width


def _read_name(box):
    name = ""
    _set_cursor(1)
    box.move(1, 1)
    while True:
        key = box.getch()
        if key in _ENTER_KEYS:
            return name
        name = edit_name(name, key)
        _put(box, 1, 1, name.ljust(NAME_LENGTH))
        box.move(1, min(len(name) + 1, NAME_LENGTH))
        box.refresh()


def game_over_screen(window, lives, score, times_up):
    """Show the result and final score, and save it under the nickname typed."""
    height, width = _window_size(window)
    dialog = curses.newwin(
        DIALOG_HEIGHT,
        DIALOG_WIDTH,
        height // 2 - DIALOG_HEIGHT // 2,
        width // 2 - DIALOG_WIDTH // 2,
    )
    dialog.nodelay(False)
    dialog.box()

    banner = game_over_banner(lives, times_up)
    measure = _LOSE if lives <= 0 else _WIN
    for row, (line, reference) in enumerate(zip(banner, measure)):
        _put(dialog, 2 + row, DIALOG_WIDTH // 2 - len(reference) // 2, line)

    _put(dialog, 9, DIALOG_WIDTH // 2 - 6, f"score: {score}", curses.A_BOLD)
    _put(dialog, DIALOG_HEIGHT // 2 + 4, DIALOG_WIDTH // 2 - 18, "Insert Nickname:")
    dialog.refresh()

    input_box = curses.newwin(3, NAME_LENGTH + 2, height // 2 + 3, width // 2)
    input_box.keypad(True)
    input_box.box()
    input_box.refresh()

    name = _read_name(input_box)
    if name:
        save_highscore(name, score)
    _set_cursor(0)
    del input_box
    del dialog