"""Game state: the chain of levels, bombs, blasts, items and enemies."""

from __future__ import annotations

import curses
import random
from dataclasses import dataclass, field

from .board import (
    BOMB,
    EMPTY,
    EXIT_ROW,
    EXPLOSION,
    HIDDEN_ITEMS,
    PLAYER,
    SOLID_WALL,
    WALL,
    Board,
    COLS,
)
from .bomb import Bomb
from .enemy import AdvancedEnemy, BaseEnemy, remove_enemies_at
from .items import BombRange, BonusPoints, ExtraBomb, ExtraLife, ExtraTime
from .player import Player

NUMBER_OF_LEVELS = 5
TIME_PER_LEVEL = 200
PLAYER_SPEED = 3
ANIMATION_TICKS = 20
BOMB_FUSE = 3

_MOVES = {"w": (0, -1), "s": (0, 1), "d": (1, 0), "a": (-1, 0)}
_BLOCKING = frozenset({SOLID_WALL, WALL, BOMB}) | HIDDEN_ITEMS

_ARROWS = {
    curses.KEY_UP: "w",
    curses.KEY_DOWN: "s",
    curses.KEY_LEFT: "a",
    curses.KEY_RIGHT: "d",
}

# Enemy and item line-ups per level, in creation order.
_ENEMIES = {
    1: (BaseEnemy, BaseEnemy, BaseEnemy),
    2: (BaseEnemy, BaseEnemy, BaseEnemy, BaseEnemy),
    3: (BaseEnemy, BaseEnemy, BaseEnemy, AdvancedEnemy),
    4: (BaseEnemy, BaseEnemy, AdvancedEnemy, AdvancedEnemy),
    5: (BaseEnemy, AdvancedEnemy, AdvancedEnemy, AdvancedEnemy),
}
_ITEMS = {
    1: (BombRange, ExtraBomb, ExtraLife, BonusPoints),
    2: (ExtraLife, ExtraBomb, BonusPoints, BonusPoints),
    3: (ExtraLife, BombRange, BonusPoints, ExtraLife),
    4: (BombRange, ExtraLife, ExtraTime, ExtraTime),
    5: (ExtraLife, ExtraBomb, ExtraTime, ExtraTime),
}


@dataclass
class Level:
    """One board together with what lives on it."""

    number: int
    board: Board
    enemies_left: int
    enemies: list = field(default_factory=list)
    items: list = field(default_factory=list)
    bombs: list = field(default_factory=list)
    time_left: int = TIME_PER_LEVEL


@dataclass
class BombAnimation:
    """A blast drawn on the board until its ticks run out."""

    x: int
    y: int
    reach: int
    ticks: int = ANIMATION_TICKS


def create_enemies(level_number, board, rng=None):
    """Place the enemies of a level on its board; the newest comes first."""
    rng = rng if rng is not None else random.Random()
    created = [kind(board, rng) for kind in _ENEMIES.get(level_number, ())]
    return created[::-1]


def create_items(level_number, board, player, rng=None):
    """Hide the items of a level under its walls; the newest comes first."""
    rng = rng if rng is not None else random.Random()
    created = [kind(board, player, rng) for kind in _ITEMS.get(level_number, ())]
    return created[::-1]


def build_levels(player, rng=None):
    """Create every level of the game, in order."""
    rng = rng if rng is not None else random.Random()
    levels = []
    for number in range(1, NUMBER_OF_LEVELS + 1):
        board = Board()
        board.generate_level(number, rng)
        levels.append(
            Level(
                number=number,
                board=board,
                enemies_left=3 if number == 1 else 4,
                enemies=create_enemies(number, board, rng),
                items=create_items(number, board, player, rng),
            )
        )
    return levels


def is_walkable(board, x, y, direction):
    """Tell whether the player may step from (x, y) in the given direction."""
    dx, dy = _MOVES.get(direction, (0, 0))
    return board.at(x + dx, y + dy) not in _BLOCKING


def is_edge_exit(x, y, direction):
    """Tell whether the move leaves the board through a side exit."""
    if y != EXIT_ROW:
        return False
    return (x == 0 and direction == "a") or (x == COLS - 1 and direction == "d")


def convert_key(key):
    """Turn a curses key code into a command character ('' for none)."""
    if key in _ARROWS:
        return _ARROWS[key]
    if 0 <= key <= 255:
        return chr(key)
    return ""


def _blast_cells(board, x, y, reach):
    """Yield the cells of a blast cross, each arm stopping at a solid wall."""
    if board.at(x, y) == SOLID_WALL:
        return
    yield x, y
    for dx, dy in ((0, -1), (0, 1), (1, 0), (-1, 0)):
        for shift in range(1, reach + 1):
            cx, cy = x + dx * shift, y + dy * shift
            if board.at(cx, cy) == SOLID_WALL:
                break
            yield cx, cy


def _draw_blast(board, animation):
    for cx, cy in _blast_cells(board, animation.x, animation.y, animation.reach):
        if board.at(cx, cy) not in (BOMB, EXPLOSION):
            board.set(cx, cy, EXPLOSION)


class GameState:
    """Everything that changes while a game is played."""

    def __init__(self, rng=None):
        rng = rng if rng is not None else random.Random()
        self.player = Player()
        self.levels = build_levels(self.player, rng)
        self.current = 0
        self.score = 0
        self.animations = []
        self.move_cooldown = 0
        self.time_expired = False
        self.over = False
        self.level.board.set(self.player.x, self.player.y, PLAYER)

    @property
    def level(self):
        """The level the player is on."""
        return self.levels[self.current]

    @property
    def has_next(self):
        return self.current + 1 < len(self.levels)

    @property
    def has_previous(self):
        return self.current > 0

    def _remove_current(self):
        """Drop the current level, moving to the next one, or the previous if last."""
        last = not self.has_next
        del self.levels[self.current]
        if last:
            self.current -= 1

    def tick_second(self):
        """Count one second off the level clock while enemies remain."""
        if self.level.enemies_left > 0:
            self.level.time_left -= 1

    def move_player(self, direction):
        """Move the player one cell, or to a neighbouring level through an exit."""
        player = self.player
        board = self.level.board
        moved = False
        if is_edge_exit(player.x, player.y, direction):
            if board.at(player.x, player.y) != BOMB:
                board.set(player.x, player.y, EMPTY)
            if direction == "d" and player.x == COLS - 1:
                if self.has_next:
                    if self.level.enemies_left == 0:
                        self.score += self.level.time_left
                        self._remove_current()
                    else:
                        self.current += 1
                    player.move(-(COLS - 1), 0)
            elif direction == "a" and player.x == 0 and self.has_previous:
                if self.level.enemies_left == 0:
                    self._remove_current()
                else:
                    self.current -= 1
                player.move(COLS - 1, 0)
            moved = True
        elif is_walkable(board, player.x, player.y, direction):
            if board.at(player.x, player.y) != BOMB:
                board.set(player.x, player.y, EMPTY)
            player.move(*_MOVES[direction])
            if board.at(player.x, player.y) == EXPLOSION:
                player.change_lives(-1)
                player.make_immune()
            else:
                player.make_vulnerable()
            moved = True
        if moved:
            self.level.board.set(player.x, player.y, PLAYER)

    def place_bomb(self, now):
        """Drop a bomb under the player if one is available; return it or None."""
        player = self.player
        if player.deployed >= player.bombs:
            return None
        self.level.board.set(player.x, player.y, BOMB)
        bomb = Bomb(player.x, player.y, now, player.blast_range)
        self.level.bombs.append(bomb)
        player.deployed += 1
        return bomb

    def update_bombs(self, now):
        """Explode the bombs whose fuse has run out; return them."""
        level = self.level
        exploded = []
        waiting = []
        for bomb in level.bombs:
            if now - bomb.placed_at < BOMB_FUSE:
                waiting.append(bomb)
                continue
            blast = bomb.explode(level.board, self.player, level.enemies)
            self.score += blast.score
            self.animations.append(
                BombAnimation(bomb.x, bomb.y, self.player.blast_range)
            )
            for animation in self.animations:
                _draw_blast(level.board, animation)
            level.enemies_left -= blast.killed
            exploded.append(bomb)
        level.bombs = waiting
        return exploded

    def _item_tile_at(self, x, y):
        return next(
            (item.revealed_tile() for item in self.level.items if (item.x, item.y) == (x, y)),
            EMPTY,
        )

    def _erase_blast(self, animation):
        level = self.level
        board = level.board
        player = self.player
        for cx, cy in _blast_cells(board, animation.x, animation.y, animation.reach):
            if (player.x, player.y) == (cx, cy):
                board.set(cx, cy, PLAYER)
            elif board.at(cx, cy) == BOMB:
                continue
            else:
                board.set(cx, cy, self._item_tile_at(cx, cy))
                removed = remove_enemies_at(level.enemies, cx, cy)
                level.enemies_left -= len(removed)

    def update_animations(self):
        """Age the blast animations and clear those that have finished."""
        remaining = []
        for animation in self.animations:
            animation.ticks -= 1
            if animation.ticks == 0:
                self._erase_blast(animation)
            else:
                remaining.append(animation)
        self.animations = remaining

    def pick_up_items(self):
        """Collect the first item under the player; return it or None."""
        items = self.level.items
        position = (self.player.x, self.player.y)
        for item in items:
            if (item.x, item.y) == position:
                self.score += item.apply(self.level)
                items.remove(item)
                return item
        return None

    def remove_exploded_enemies(self):
        """Kill the enemies standing in a blast, scoring them; return them."""
        level = self.level
        caught = [e for e in level.enemies if level.board.at(e.x, e.y) == EXPLOSION]
        for enemy in caught:
            self.score += enemy.points()
            level.enemies_left -= 1
        level.enemies[:] = [e for e in level.enemies if e not in caught]
        return caught

    def move_enemies(self):
        """Let every enemy of the current level take its turn."""
        for enemy in list(self.level.enemies):
            enemy.move(self.player)

    def step(self, key, now):
        """Run one frame for a command character; return whether the game is over."""
        if key in _MOVES and self.move_cooldown == 0:
            self.move_player(key)
            self.move_cooldown = PLAYER_SPEED
        elif key == " ":
            self.place_bomb(now)

        self.update_bombs(now)
        if self.level.time_left == 0:
            self.time_expired = True
        if self.player.lives <= 0 or self.time_expired:
            self.over = True
        if self.move_cooldown > 0:
            self.move_cooldown -= 1

        if self.level.enemies_left == 0 and len(self.levels) == 1:
            self.score += self.level.time_left
            self.over = True

        self.pick_up_items()
        self.update_animations()
        self.remove_exploded_enemies()
        self.move_enemies()
        self.remove_exploded_enemies()
        return self.over