from bombgrid.player import Player


def test_defaults():
    player = Player()
    assert (player.x, player.y) == (1, 1)
    assert player.lives == 3
    assert player.bombs == 1
    assert player.deployed == 0
    assert player.blast_range == 1
    assert player.hittable is True


def test_constructor_arguments():
    player = Player(4, 7, 5, 2)
    assert (player.x, player.y, player.lives, player.blast_range) == (4, 7, 5, 2)


def test_change_lives_applies():
    player = Player()
    assert player.change_lives(-1) is True
    assert player.lives == 2
    assert player.change_lives(1) is True
    assert player.lives == 3


def test_change_lives_never_below_zero():
    player = Player(lives=1)
    assert player.change_lives(-2) is False
    assert player.lives == 1
    assert player.change_lives(-1) is True
    assert player.lives == 0
    assert player.change_lives(-1) is False
    assert player.lives == 0


def test_immunity_blocks_changes():
    player = Player()
    player.make_immune()
    assert player.hittable is False
    assert player.change_lives(-1) is False
    assert player.change_lives(1) is False
    assert player.lives == 3
    player.make_vulnerable()
    assert player.change_lives(-1) is True
    assert player.lives == 2


def test_move():
    player = Player()
    player.move(1, 0)
    player.move(0, -1)
    player.move(2, 3)
    assert (player.x, player.y) == (4, 3)