"""Power-ups hidden under destructible walls."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from .board import (
    BOMB_ITEM,
    COLS,
    HIDDEN_BOMB,
    HIDDEN_LIFE,
    HIDDEN_POINTS,
    HIDDEN_RANGE,
    HIDDEN_TIME,
    LIFE_ITEM,
    POINTS_ITEM,
    RANGE_ITEM,
    ROWS,
    TIME_ITEM,
    WALL,
)

BONUS_POINTS = 50
EXTRA_SECONDS = 60

REVEALED_BY_HIDDEN = {
    HIDDEN_RANGE: RANGE_ITEM,
    HIDDEN_LIFE: LIFE_ITEM,
    HIDDEN_BOMB: BOMB_ITEM,
    HIDDEN_TIME: TIME_ITEM,
    HIDDEN_POINTS: POINTS_ITEM,
}


class Item(ABC):
    """A power-up placed under a random destructible wall."""

    hidden = ""

    def __init__(self, board, player, rng=None):
        self.board = board
        self.player = player
        rng = rng if rng is not None else random.Random()
        if not any(
            board.at(x, y) == WALL
            for x in range(1, COLS - 1)
            for y in range(1, ROWS - 1)
        ):
            raise ValueError("no destructible wall left to hide an item under")
        while True:
            x = rng.randint(1, COLS - 2)
            y = rng.randint(1, ROWS - 2)
            if board.at(x, y) == WALL:
                break
        self.x, self.y = x, y
        board.set(x, y, self.hidden)

    def revealed_tile(self):
        """Return the tile shown once the covering wall is destroyed."""
        return REVEALED_BY_HIDDEN[self.hidden]

    @abstractmethod
    def apply(self, level):
        """Apply the effect of picking the item up; return the points gained."""


class BombRange(Item):
    """Lengthens the player's blasts by one cell."""

    hidden = HIDDEN_RANGE

    def apply(self, level):
        self.player.blast_range += 1
        return 0


class ExtraLife(Item):
    """Gives the player one more life."""

    hidden = HIDDEN_LIFE

    def apply(self, level):
        self.player.change_lives(1)
        return 0


class ExtraBomb(Item):
    """Lets the player keep one more bomb on the board."""

    hidden = HIDDEN_BOMB

    def apply(self, level):
        self.player.bombs += 1
        return 0


class ExtraTime(Item):
    """Adds time to the current level."""

    hidden = HIDDEN_TIME

    def apply(self, level):
        level.time_left += EXTRA_SECONDS
        return 0


class BonusPoints(Item):
    """Awards bonus points."""

    hidden = HIDDEN_POINTS

    def apply(self, level):
        return BONUS_POINTS