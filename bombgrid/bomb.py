"""Bombs and the damage their blast does."""

from __future__ import annotations

from dataclasses import dataclass

from .board import (
    ADVANCED_ENEMY,
    ADVANCED_ENEMY_ON_SOLID,
    ADVANCED_ENEMY_ON_WALL,
    BASE_ENEMY,
    EMPTY,
    PLAYER,
    SOLID_WALL,
    WALL,
)
from .enemy import SCORE_PER_ENEMY, remove_enemies_at
from .items import REVEALED_BY_HIDDEN

WALL_POINTS = 5
ADVANCED_KILL_BONUS = 10

# centre, up, right, left, down
_DIRECTIONS = ((0, 0), (0, -1), (1, 0), (-1, 0), (0, 1))

_ENEMY_POINTS = {
    BASE_ENEMY: SCORE_PER_ENEMY,
    ADVANCED_ENEMY: SCORE_PER_ENEMY + ADVANCED_KILL_BONUS,
    ADVANCED_ENEMY_ON_WALL: 0,
    ADVANCED_ENEMY_ON_SOLID: 0,
}


@dataclass(frozen=True)
class Blast:
    """What an explosion achieved."""

    score: int
    killed: int


@dataclass
class Bomb:
    """A bomb placed at (x, y) at time placed_at."""

    x: int
    y: int
    placed_at: int
    blast_range: int = 1

    def explode(self, board, player, enemies):
        """Blow up the bomb, clearing walls and killing enemies in its cross.

        Enemies killed are removed from the enemies list. The player loses a
        life and becomes immune when caught in the blast.
        """
        score = 0
        killed = 0
        stopped = set()
        for distance in range(1, self.blast_range + 1):
            for index, (dx, dy) in enumerate(_DIRECTIONS):
                if index in stopped:
                    continue
                tx, ty = self.x + dx * distance, self.y + dy * distance
                tile = board.at(tx, ty)
                if tile == WALL:
                    board.set(tx, ty, EMPTY)
                    score += WALL_POINTS
                elif tile in REVEALED_BY_HIDDEN:
                    board.set(tx, ty, REVEALED_BY_HIDDEN[tile])
                    score += WALL_POINTS
                elif tile in _ENEMY_POINTS:
                    score += _ENEMY_POINTS[tile]
                    remove_enemies_at(enemies, tx, ty)
                    board.set(tx, ty, EMPTY)
                    killed += 1
                elif tile == SOLID_WALL:
                    stopped.add(index)

                if (player.x, player.y) == (tx, ty):
                    player.change_lives(-1)
                    player.make_immune()

        on_bomb = (player.x, player.y) == (self.x, self.y)
        board.set(self.x, self.y, PLAYER if on_bomb else EMPTY)
        player.deployed -= 1
        return Blast(score, killed)