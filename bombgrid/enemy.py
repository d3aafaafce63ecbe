"""Enemies that roam the board and hurt the player on contact."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from .board import (
    ADVANCED_ENEMY,
    ADVANCED_ENEMY_ON_SOLID,
    ADVANCED_ENEMY_ON_WALL,
    BASE_ENEMY,
    COLS,
    EMPTY,
    EXPLOSION,
    PLAYER,
    REVEALED_ITEMS,
    ROWS,
    SOLID_WALL,
    WALL,
)

SCORE_PER_ENEMY = 10
ADVANCED_ENEMY_BONUS = 5
DAMAGE_COOLDOWN = 15
BASE_SPEED = 10
ADVANCED_SPEED = 12

# Tiles an enemy passes over without drawing itself.
_TRANSPARENT = frozenset({EXPLOSION}) | REVEALED_ITEMS
# Tiles a base enemy may step onto.
_WALKABLE = frozenset({EMPTY, PLAYER}) | _TRANSPARENT

# left, up, right, down
_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))

_UNCOVER = {
    ADVANCED_ENEMY: EMPTY,
    ADVANCED_ENEMY_ON_WALL: WALL,
    ADVANCED_ENEMY_ON_SOLID: SOLID_WALL,
}
_COVER = {
    EMPTY: ADVANCED_ENEMY,
    WALL: ADVANCED_ENEMY_ON_WALL,
    SOLID_WALL: ADVANCED_ENEMY_ON_SOLID,
    PLAYER: ADVANCED_ENEMY,
}


class Enemy(ABC):
    """An enemy placed on a random empty cell of a board."""

    speed = BASE_SPEED
    tile = BASE_ENEMY
    spawn_columns = (5, COLS - 2)

    def __init__(self, board, rng=None):
        self.board = board
        self.rng = rng if rng is not None else random.Random()
        self.tick = 0
        self.cooldown = 0
        self.x, self.y = self._spawn_position()
        board.set(self.x, self.y, self.tile)

    def _spawn_position(self):
        low, high = self.spawn_columns
        if not any(
            self.board.at(x, y) == EMPTY
            for x in range(low, high + 1)
            for y in range(1, ROWS - 1)
        ):
            raise ValueError("no empty cell left to place an enemy")
        while True:
            x = self.rng.randint(low, high)
            y = self.rng.randint(1, ROWS - 2)
            if self.board.at(x, y) == EMPTY:
                return x, y

    def move(self, player):
        """Advance one frame: step when ready, then hurt the player on contact."""
        if self.tick >= self.speed:
            self._step(player)
        else:
            self.tick += 1
        if (player.x, player.y) == (self.x, self.y) and self.cooldown <= 0:
            player.change_lives(-1)
            self.cooldown = DAMAGE_COOLDOWN
        if self.cooldown > 0:
            self.cooldown -= 1

    @abstractmethod
    def _step(self, player):
        """Move one cell, updating the board."""

    @abstractmethod
    def points(self):
        """Return the score awarded for killing this enemy."""


class BaseEnemy(Enemy):
    """Walks in a straight line and turns at random when blocked."""

    def __init__(self, board, rng=None):
        self.direction = None
        super().__init__(board, rng)

    def _can_go(self, direction):
        dx, dy = _DIRECTIONS[direction]
        nx, ny = self.x + dx, self.y + dy
        if not (1 <= nx <= COLS - 2 and 1 <= ny <= ROWS - 2):
            return False
        return self.board.at(nx, ny) in _WALKABLE

    def _step(self, player):
        if not any(self._can_go(direction) for direction in range(len(_DIRECTIONS))):
            return
        if self.board.at(self.x, self.y) not in _TRANSPARENT:
            if (player.x, player.y) == (self.x, self.y):
                self.board.set(self.x, self.y, PLAYER)
            else:
                self.board.set(self.x, self.y, EMPTY)
        while self.direction is None or not self._can_go(self.direction):
            self.direction = self.rng.randrange(len(_DIRECTIONS))
        dx, dy = _DIRECTIONS[self.direction]
        self.x += dx
        self.y += dy
        self.tick = 0
        if self.board.at(self.x, self.y) not in _TRANSPARENT:
            self.board.set(self.x, self.y, BASE_ENEMY)

    def points(self):
        return SCORE_PER_ENEMY


class AdvancedEnemy(Enemy):
    """Chases the player, passing over any wall."""

    speed = ADVANCED_SPEED
    tile = ADVANCED_ENEMY
    spawn_columns = (10, COLS - 2)

    def _step(self, player):
        if (player.x, player.y) == (self.x, self.y):
            return
        here = self.board.at(self.x, self.y)
        if here not in _TRANSPARENT and here in _UNCOVER:
            self.board.set(self.x, self.y, _UNCOVER[here])

        dx, dy = player.x - self.x, player.y - self.y
        step_x = 1 if dx > 0 else -1
        step_y = 1 if dy > 0 else -1
        if dx == 0:
            self.y += step_y
        elif dy == 0:
            self.x += step_x
        elif abs(dy) < abs(dx):
            self.y += step_y
        elif abs(dx) < abs(dy):
            self.x += step_x
        self.tick = 0

        there = self.board.at(self.x, self.y)
        if there not in _TRANSPARENT and there in _COVER:
            self.board.set(self.x, self.y, _COVER[there])

    def points(self):
        return SCORE_PER_ENEMY + ADVANCED_ENEMY_BONUS


def remove_enemies_at(enemies, x, y):
    """Remove from the list every enemy at (x, y) and return those removed."""
    removed = [enemy for enemy in enemies if (enemy.x, enemy.y) == (x, y)]
    enemies[:] = [enemy for enemy in enemies if (enemy.x, enemy.y) != (x, y)]
    return removed