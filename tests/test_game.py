from types import SimpleNamespace

import pytest

from bombgrid.game import draw_status, level_banner, score_column
from bombgrid.player import Player


class RecordingWindow:
    def __init__(self):
        self.texts = []
        self.chars = []
        self.refreshed = 0

    def addstr(self, y, x, text, attr=0):
        self.texts.append((y, x, text))

    def addch(self, y, x, char, attr=0):
        self.chars.append((y, x, char))

    def refresh(self):
        self.refreshed += 1


class RecordingBoard:
    def __init__(self):
        self.calls = []

    def draw(self, window, x_start, y_start):
        self.calls.append((window, x_start, y_start))


def make_state(score=0, lives=3, number=1, time_left=200):
    board = RecordingBoard()
    level = SimpleNamespace(number=number, board=board, time_left=time_left)
    return SimpleNamespace(score=score, player=Player(lives=lives), level=level)


def test_score_column_is_constant_below_one_hundred():
    assert score_column(0) == score_column(99)
    assert score_column(0) == 58


def test_score_column_shifts_left_for_three_digits():
    assert score_column(100) == score_column(12345)
    assert score_column(99) == score_column(100) + 1


def test_level_banner_has_title_and_digit_lines():
    for number in range(1, 6):
        assert len(level_banner(number)) == 20


def test_level_banner_title_is_shared():
    first = level_banner(1)[:16]
    for number in range(2, 6):
        assert level_banner(number)[:16] == first


def test_level_banner_digits_differ():
    digits = {tuple(level_banner(number)[16:]) for number in range(1, 6)}
    assert len(digits) == 5


def test_level_banner_first_digit_line():
    assert level_banner(1)[16] == "  ___     "
    assert level_banner(5)[18] == " /__ \\ "


@pytest.mark.parametrize("number", [0, 6, -1])
def test_level_banner_rejects_unknown_levels(number):
    with pytest.raises(ValueError):
        level_banner(number)


def test_draw_status_writes_score_where_centred():
    window = RecordingWindow()
    state = make_state(score=42)
    draw_status(window, state, 10, 5)
    assert (5 + 12, 10 + score_column(42), "42") in window.texts


def test_draw_status_draws_one_heart_per_life():
    window = RecordingWindow()
    state = make_state(lives=2)
    draw_status(window, state, 0, 0)
    assert len(window.chars) == state.player.lives
    columns = [x for _, x, _ in window.chars]
    assert columns == sorted(columns)


def test_draw_status_draws_board_at_offset_and_refreshes():
    window = RecordingWindow()
    state = make_state()
    draw_status(window, state, 7, 3)
    assert state.level.board.calls == [(window, 7, 3)]
    assert window.refreshed == 1


def test_draw_status_writes_time_left_and_level_banner():
    window = RecordingWindow()
    state = make_state(number=3, time_left=137)
    draw_status(window, state, 20, 2)
    written = [text for _, _, text in window.texts]
    assert any(text.strip() == "137" for text in written)
    for line in level_banner(3):
        assert line in written