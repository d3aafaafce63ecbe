"""High score storage and the leaderboard screen."""

from __future__ import annotations

import curses
import random
import re
from dataclasses import dataclass

DEFAULT_PATH = "highscores.txt"
DEFAULT_LIMIT = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_TITLE = (
    "     _  _ _      _      ___                    ",
    "    | || (_)__ _| |_   / __| __ ___ _ _ ___ ___",
    "    | __ | / _` | ' \\  \\__ \\/ _/ _ \\ '_/ -_|_-<",
    "    |_||_|_\\__, |_||_| |___/\\__\\___/_| \\___/__/",
    "           |___/                               ",
)

_MENU = ("Menu", "Quit")
_MENU_STATES = ("M", "Q")


@dataclass(frozen=True)
class HighScore:
    """One leaderboard entry."""

    name: str
    score: int


def save_highscore(name, score, path=DEFAULT_PATH):
    """Append a score to the high score file."""
    with open(path, "a", encoding="utf-8") as stream:
        stream.write(f"\n{name}-{score}")


def add_highscore(scores, name, score):
    """Return a new list with the entry inserted in descending order.

    A new entry goes after existing entries with an equal score.
    """
    entry = HighScore(name, score)
    position = next(
        (index for index, existing in enumerate(scores) if existing.score < score),
        len(scores),
    )
    return [*scores[:position], entry, *scores[position:]]


def _atoi(text):
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def load_highscores(limit=DEFAULT_LIMIT, path=DEFAULT_PATH):
    """Read the best scores from the file, at most limit (at least one) of them."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            lines = stream.read().split("\n")
    except OSError:
        return []
    scores = []
    for line in lines:
        stripped = line.lstrip("-")
        if not stripped:
            continue
        name, _, rest = stripped.partition("-")
        scores = add_highscore(scores, name, _atoi(rest))
    return scores[: max(limit, 1)]


def ordinal(position):
    """Return the leaderboard label for a position, such as 1ST or 12TH."""
    if position in (11, 12, 13):
        return f"{position}TH"
    suffix = {1: "ST", 2: "ND", 3: "RD"}.get(position % 10, "TH")
    return f"{position}{suffix}"


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


def _read_digits(box, max_len):
    text = ""
    _set_cursor(1)
    box.move(1, 1)
    while True:
        key = box.getch()
        if key in (10, curses.KEY_ENTER):
            return text
        if key in (curses.KEY_BACKSPACE, 127, 8):
            if text:
                text = text[:-1]
                _put(box, 1, len(text) + 1, " ")
                box.move(1, len(text) + 1)
        elif len(text) < max_len and ord("0") <= key <= ord("9"):
            text += chr(key)
            _put(box, 1, len(text), chr(key))
            box.move(1, len(text) + 1)
        box.refresh()


def _draw_leaderboard(scoreboard, scores, scroll, width, height):
    scoreboard.box()
    for position, entry in enumerate(scores, 1):
        y = 2 * position + scroll
        if y <= 0 or y >= height - 1:
            continue
        x = width // 2 - 16
        if position >= 10:
            x -= 1
        _put(scoreboard, y, x - 1, " " * 5)
        _put(scoreboard, y, x, ordinal(position))
        if position >= 10:
            x += 1
        _put(scoreboard, y, x + 6, entry.name.ljust(16))
        _put(scoreboard, y, width // 2 + 12, str(entry.score).ljust(6))


def highscore_loop(window, path=DEFAULT_PATH):
    """Ask how many scores to show, display them and return the next state."""
    window.erase()
    window.refresh()
    height, width = _window_size(window)

    _put(window, height // 2 - 4, width // 2 - 20, "How many highscores do you want to load?")
    window.refresh()

    input_box = curses.newwin(3, 7, height // 2, width // 2 - 3)
    input_box.box()
    input_box.refresh()
    amount = _read_digits(input_box, 4)
    del input_box
    _set_cursor(0)

    scores = load_highscores(int(amount) if amount else DEFAULT_LIMIT, path)

    window.erase()
    window.keypad(True)

    board_width = width // 2
    board_height = height // 3 * 2 - 1
    scoreboard = curses.newwin(board_height, board_width, 8, width // 4)

    curses.start_color()
    curses.init_pair(1, curses.COLOR_YELLOW, curses.COLOR_BLACK)

    selection = 0
    scroll = 0
    window.nodelay(False)

    while True:
        window.box("|", "#")
        for row, line in enumerate(_TITLE):
            _put(window, 2 + row, 12, line)

        for index, label in enumerate(_MENU):
            x = (width // 6) * (4 + index) - len(label) // 2
            _put(window, 4, x - 2, ">" if selection == index else " ")
            attr = curses.color_pair(1) | curses.A_BOLD if selection == index else 0
            _put(window, 4, x, label, attr)

        try:
            window.addch(height // 2, width // 4 - 2, curses.ACS_UARROW)
            window.addch(height // 2 + 4, width // 4 - 2, curses.ACS_DARROW)
        except curses.error:
            pass

        _draw_leaderboard(scoreboard, scores, scroll, board_width, board_height)
        window.refresh()
        scoreboard.refresh()

        key = window.getch()
        if key in (curses.KEY_LEFT, ord("a"), ord("A")):
            selection = 0
        elif key in (curses.KEY_RIGHT, ord("d"), ord("D")):
            selection = 1
        elif key in (curses.KEY_UP, ord("w"), ord("W")):
            if scroll < 0:
                scroll += 2
        elif key in (curses.KEY_DOWN, ord("s"), ord("S")):
            if scroll > -len(scores) * 2 + board_height - 2:
                scroll -= 2
        elif key in (10, ord(" "), ord("e"), ord("E")):
            break
        elif key in (ord("r"), ord("R")):
            suffix = "".join(chr(random.randrange(32, 127)) for _ in range(2))
            scores = add_highscore(scores, "Player:" + suffix, random.randrange(1000))

    del scoreboard
    window.nodelay(True)
    return _MENU_STATES[selection]