import curses
import random

import pytest

from bombgrid.board import (
    BOMB,
    EMPTY,
    EXPLOSION,
    HIDDEN_POINTS,
    PLAYER,
    WALL,
    Board,
)
from bombgrid.enemy import AdvancedEnemy, BaseEnemy
from bombgrid.items import BombRange, BonusPoints, ExtraBomb, ExtraLife, ExtraTime
from bombgrid.player import Player
from bombgrid.world import (
    ANIMATION_TICKS,
    TIME_PER_LEVEL,
    GameState,
    build_levels,
    convert_key,
    create_enemies,
    create_items,
    is_edge_exit,
    is_walkable,
)


def _clear_enemies(level):
    for enemy in level.enemies:
        level.board.set(enemy.x, enemy.y, EMPTY)
    level.enemies.clear()


@pytest.fixture
def state():
    return GameState(random.Random(7))


@pytest.fixture
def quiet_state(state):
    _clear_enemies(state.level)
    return state


def test_build_levels_structure():
    levels = build_levels(Player(), random.Random(1))
    assert [level.number for level in levels] == [1, 2, 3, 4, 5]
    assert [level.enemies_left for level in levels] == [3, 4, 4, 4, 4]
    for level in levels:
        assert len(level.enemies) == level.enemies_left
        assert len(level.items) == 4
        assert level.time_left == TIME_PER_LEVEL


def test_create_enemies_level_three_newest_first():
    rng = random.Random(3)
    board = Board()
    board.generate_level(3, rng)
    enemies = create_enemies(3, board, rng)
    assert isinstance(enemies[0], AdvancedEnemy)
    assert sum(isinstance(e, BaseEnemy) for e in enemies) == 3
    for enemy in enemies:
        assert board.at(enemy.x, enemy.y) == enemy.tile


def test_create_enemies_unknown_level_is_empty():
    assert create_enemies(6, Board(), random.Random(0)) == []


def test_create_items_level_one_order():
    rng = random.Random(4)
    board = Board()
    board.generate_level(1, rng)
    items = create_items(1, board, Player(), rng)
    assert [type(item) for item in items] == [BonusPoints, ExtraLife, ExtraBomb, BombRange]
    for item in items:
        assert board.at(item.x, item.y) == item.hidden


def test_create_items_level_four_has_two_time_items():
    rng = random.Random(5)
    board = Board()
    board.generate_level(4, rng)
    items = create_items(4, board, Player(), rng)
    assert sum(isinstance(item, ExtraTime) for item in items) == 2


def test_is_walkable():
    board = Board()
    assert is_walkable(board, 1, 1, "d")
    assert not is_walkable(board, 1, 1, "w")
    board.set(2, 1, WALL)
    assert not is_walkable(board, 1, 1, "d")
    board.set(1, 2, HIDDEN_POINTS)
    assert not is_walkable(board, 1, 1, "s")
    board.set(1, 2, BOMB)
    assert not is_walkable(board, 1, 1, "s")


@pytest.mark.parametrize(
    "x, y, direction, expected",
    [
        (0, 10, "a", True),
        (40, 10, "d", True),
        (0, 10, "d", False),
        (5, 10, "a", False),
        (40, 9, "d", False),
    ],
)
def test_is_edge_exit(x, y, direction, expected):
    assert is_edge_exit(x, y, direction) is expected


def test_convert_key():
    assert convert_key(curses.KEY_UP) == "w"
    assert convert_key(curses.KEY_DOWN) == "s"
    assert convert_key(curses.KEY_LEFT) == "a"
    assert convert_key(curses.KEY_RIGHT) == "d"
    assert convert_key(ord("x")) == "x"
    assert convert_key(-1) == ""


def test_initial_state(state):
    assert (state.player.x, state.player.y) == (1, 1)
    assert state.level.number == 1
    assert state.level.board.at(1, 1) == PLAYER


def test_move_player_into_empty_cell(quiet_state):
    board = quiet_state.level.board
    board.set(2, 1, EMPTY)
    quiet_state.move_player("d")
    assert (quiet_state.player.x, quiet_state.player.y) == (2, 1)
    assert board.at(1, 1) == EMPTY
    assert board.at(2, 1) == PLAYER


def test_move_player_blocked_by_wall(quiet_state):
    quiet_state.move_player("w")
    assert (quiet_state.player.x, quiet_state.player.y) == (1, 1)


def test_move_player_into_explosion_hurts(quiet_state):
    quiet_state.level.board.set(2, 1, EXPLOSION)
    quiet_state.move_player("d")
    assert quiet_state.player.lives == 2
    assert quiet_state.player.hittable is False


def test_right_exit_goes_to_next_level(quiet_state):
    player = quiet_state.player
    old_board = quiet_state.level.board
    player.x, player.y = 40, 10
    old_board.set(40, 10, PLAYER)
    quiet_state.move_player("d")
    assert quiet_state.level.number == 2
    assert player.x == 0
    assert quiet_state.level.board.at(0, 10) == PLAYER
    assert old_board.at(40, 10) == EMPTY
    assert len(quiet_state.levels) == 5


def test_right_exit_from_cleared_level_removes_it(quiet_state):
    player = quiet_state.player
    player.x, player.y = 40, 10
    quiet_state.level.enemies_left = 0
    quiet_state.move_player("d")
    assert len(quiet_state.levels) == 4
    assert quiet_state.level.number == 2
    assert quiet_state.score == TIME_PER_LEVEL


def test_left_exit_goes_back(quiet_state):
    player = quiet_state.player
    player.x, player.y = 40, 10
    quiet_state.move_player("d")
    quiet_state.move_player("a")
    assert quiet_state.level.number == 1
    assert player.x == 40
    assert quiet_state.level.board.at(40, 10) == PLAYER


def test_place_bomb_respects_supply(quiet_state):
    bomb = quiet_state.place_bomb(0)
    assert (bomb.x, bomb.y) == (1, 1)
    assert quiet_state.player.deployed == 1
    assert quiet_state.level.board.at(1, 1) == BOMB
    assert quiet_state.place_bomb(0) is None
    assert len(quiet_state.level.bombs) == 1


def test_bomb_waits_for_fuse(quiet_state):
    quiet_state.place_bomb(0)
    assert quiet_state.update_bombs(2) == []
    assert len(quiet_state.level.bombs) == 1


def test_bomb_explosion_and_animation_cycle(quiet_state):
    board = quiet_state.level.board
    board.set(2, 1, WALL)
    quiet_state.place_bomb(0)
    exploded = quiet_state.update_bombs(3)
    assert len(exploded) == 1
    assert quiet_state.level.bombs == []
    assert quiet_state.player.deployed == 0
    assert quiet_state.score == 5
    assert quiet_state.player.lives == 2
    assert board.at(2, 1) == EXPLOSION
    assert len(quiet_state.animations) == 1

    for _ in range(ANIMATION_TICKS - 1):
        quiet_state.update_animations()
    assert len(quiet_state.animations) == 1
    quiet_state.update_animations()
    assert quiet_state.animations == []
    assert board.at(2, 1) == EMPTY
    assert board.at(1, 1) == PLAYER


def test_pick_up_bonus_points(quiet_state):
    item = next(i for i in quiet_state.level.items if isinstance(i, BonusPoints))
    quiet_state.player.x, quiet_state.player.y = item.x, item.y
    assert quiet_state.pick_up_items() is item
    assert item not in quiet_state.level.items
    assert quiet_state.score == 50


def test_pick_up_nothing(quiet_state):
    count = len(quiet_state.level.items)
    assert quiet_state.pick_up_items() is None
    assert len(quiet_state.level.items) == count


def test_remove_exploded_enemies(state):
    level = state.level
    enemy = level.enemies[0]
    level.board.set(enemy.x, enemy.y, EXPLOSION)
    caught = state.remove_exploded_enemies()
    assert caught == [enemy]
    assert enemy not in level.enemies
    assert level.enemies_left == 2
    assert state.score == enemy.points()


def test_tick_second(state):
    state.tick_second()
    assert state.level.time_left == TIME_PER_LEVEL - 1
    state.level.enemies_left = 0
    state.tick_second()
    assert state.level.time_left == TIME_PER_LEVEL - 1


def test_step_wins_on_last_cleared_level(quiet_state):
    quiet_state.levels = [quiet_state.level]
    quiet_state.level.enemies_left = 0
    assert quiet_state.step("", 0) is True
    assert quiet_state.score == TIME_PER_LEVEL


def test_step_ends_without_lives(quiet_state):
    quiet_state.player.lives = 0
    assert quiet_state.step("", 0) is True
    assert quiet_state.time_expired is False


def test_step_ends_when_time_runs_out(quiet_state):
    quiet_state.level.time_left = 0
    assert quiet_state.step("", 0) is True
    assert quiet_state.time_expired is True


def test_step_throttles_movement(quiet_state):
    board = quiet_state.level.board
    board.set(2, 1, EMPTY)
    board.set(3, 1, EMPTY)
    assert quiet_state.step("d", 0) is False
    assert quiet_state.player.x == 2
    quiet_state.step("d", 0)
    assert quiet_state.player.x == 2
    quiet_state.step("", 0)
    quiet_state.step("", 0)
    quiet_state.step("d", 0)
    assert quiet_state.player.x == 3


def test_step_places_bomb(quiet_state):
    quiet_state.step(" ", 0)
    assert quiet_state.level.board.at(1, 1) == BOMB
    assert quiet_state.player.deployed == 1