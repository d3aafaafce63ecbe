"""The playing field: a fixed grid of single-character tiles."""

from __future__ import annotations

import curses
import math
import random

ROWS = 21
COLS = 41

SOLID_WALL = "I"
WALL = "m"
EMPTY = "v"
PLAYER = "@"
BOMB = "$"
EXPLOSION = "&"

HIDDEN_RANGE = "R"
HIDDEN_LIFE = "L"
HIDDEN_BOMB = "N"
HIDDEN_TIME = "T"
HIDDEN_POINTS = "P"

RANGE_ITEM = "r"
LIFE_ITEM = "l"
BOMB_ITEM = "n"
TIME_ITEM = "t"
POINTS_ITEM = "p"

BASE_ENEMY = "#"
ADVANCED_ENEMY = "%"
ADVANCED_ENEMY_ON_WALL = "x"
ADVANCED_ENEMY_ON_SOLID = "z"

OUT_OF_BOUNDS = "["

HIDDEN_ITEMS = frozenset(
    {HIDDEN_RANGE, HIDDEN_LIFE, HIDDEN_BOMB, HIDDEN_TIME, HIDDEN_POINTS}
)
REVEALED_ITEMS = frozenset({RANGE_ITEM, LIFE_ITEM, BOMB_ITEM, TIME_ITEM, POINTS_ITEM})

EXIT_ROW = 10
LEFT_EXIT = (0, EXIT_ROW)
RIGHT_EXIT = (COLS - 1, EXIT_ROW)

# Cells near the player's spawn point that never receive a wall.
_SAFE_CELLS = frozenset({(1, 10), (1, 9), (2, 9)})

_GRAY = 8


class Board:
    """A grid of tiles addressed by (x, y), with walls on the border."""

    def __init__(self):
        self._grid = [
            [self._initial_tile(x, y) for x in range(COLS)] for y in range(ROWS)
        ]

    @staticmethod
    def _initial_tile(x, y):
        if (x, y) in (LEFT_EXIT, RIGHT_EXIT):
            return EMPTY
        if y in (0, ROWS - 1) or x in (0, COLS - 1):
            return SOLID_WALL
        if y % 2 == 0 and x % 2 == 0:
            return SOLID_WALL
        return EMPTY

    def generate_level(self, level, rng=None):
        """Scatter destructible walls for the given level number."""
        rng = rng if rng is not None else random.Random()
        walls = int(120.0 * math.sqrt(level))
        free = sum(
            1
            for y in range(1, ROWS - 1)
            for x in range(1, COLS - 1)
            if (x, y) not in _SAFE_CELLS and self._grid[y][x] == EMPTY
        )
        if walls > free:
            raise ValueError(
                f"level {level} needs {walls} walls but only {free} cells are free"
            )
        while walls > 0:
            x = rng.randint(1, COLS - 2)
            y = rng.randint(1, ROWS - 2)
            if (x, y) not in _SAFE_CELLS and self._grid[y][x] == EMPTY:
                self._grid[y][x] = WALL
                walls -= 1
        if level == 1:
            self._grid[EXIT_ROW][0] = SOLID_WALL
            self._grid[1][1] = EMPTY
            self._grid[2][1] = EMPTY
            self._grid[1][2] = EMPTY
        if level == 5:
            self._grid[EXIT_ROW][COLS - 1] = SOLID_WALL

    def at(self, x, y):
        """Return the tile at (x, y), or OUT_OF_BOUNDS outside the grid."""
        if 0 <= x < COLS and 0 <= y < ROWS:
            return self._grid[y][x]
        return OUT_OF_BOUNDS

    def set(self, x, y, tile):
        """Replace the tile at (x, y); positions outside the grid are ignored."""
        if 0 <= x < COLS and 0 <= y < ROWS:
            self._grid[y][x] = tile

    def rows(self):
        """Return the grid as one string per row, top to bottom."""
        return ["".join(row) for row in self._grid]

    def draw(self, window, x_start, y_start):
        """Paint the board on a curses window at the given offset."""
        curses.start_color()
        gray = _GRAY if curses.COLORS > _GRAY else curses.COLOR_WHITE
        if gray == _GRAY and curses.can_change_color():
            curses.init_color(_GRAY, 574, 574, 574)
        pairs = {
            1: (curses.COLOR_WHITE, curses.COLOR_WHITE),
            2: (gray, gray),
            3: (curses.COLOR_BLACK, curses.COLOR_BLACK),
            4: (curses.COLOR_WHITE, curses.COLOR_BLACK),
            5: (curses.COLOR_RED, curses.COLOR_BLACK),
            6: (curses.COLOR_RED, gray),
            7: (curses.COLOR_RED, curses.COLOR_WHITE),
        }
        for number, (fg, bg) in pairs.items():
            curses.init_pair(number, fg, bg)
        for y, row in enumerate(self._grid):
            for x, tile in enumerate(row):
                look = _appearance(tile)
                if look is None:
                    continue
                pair, glyph = look
                try:
                    window.addch(y + y_start, x + x_start, glyph, curses.color_pair(pair))
                except curses.error:
                    pass


def _appearance(tile):
    """Return the colour pair and glyph used to draw a tile."""
    if tile == SOLID_WALL:
        return 1, curses.ACS_BLOCK
    if tile == WALL or tile in HIDDEN_ITEMS:
        return 2, curses.ACS_CKBOARD
    if tile == EMPTY:
        return 3, " "
    if tile == PLAYER:
        return 4, PLAYER
    if tile in (BOMB, EXPLOSION):
        return 4, curses.ACS_LANTERN
    if tile in REVEALED_ITEMS:
        return 4, tile.upper()
    if tile in (BASE_ENEMY, ADVANCED_ENEMY):
        return 5, tile
    if tile == ADVANCED_ENEMY_ON_WALL:
        return 6, ADVANCED_ENEMY
    if tile == ADVANCED_ENEMY_ON_SOLID:
        return 7, ADVANCED_ENEMY
    return None