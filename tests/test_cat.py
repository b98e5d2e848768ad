import pytest

from aigames.catchthecat.cat import Cat
from aigames.catchthecat.hexgrid import is_neighbor, neighbors
from aigames.core.point2d import Point2D


class _Board:
    def __init__(self, side, cat, blocked=()):
        self.side = side
        self.cat = cat
        self.blocked = set(blocked)

    def cat_position(self):
        return self.cat

    def side_size(self):
        return self.side

    def is_valid_position(self, p):
        half = self.side // 2
        return -half <= p.x <= half and -half <= p.y <= half

    def get_content(self, p):
        return p in self.blocked

    def cat_wins_on_space(self, p):
        half = self.side // 2
        return abs(p.x) == half or abs(p.y) == half

    def cat_can_move_to_position(self, p):
        return is_neighbor(self.cat, p) and not self.get_content(p)


def test_move_follows_first_shortest_path():
    board = _Board(7, Point2D(0, 0))
    cat = Cat()
    assert cat.move(board) == cat.find_cat_shortest_path(board)[0][0]


def test_move_is_a_free_neighbor():
    board = _Board(7, Point2D(0, 0), [Point2D(1, 0)])
    step = Cat().move(board)
    assert board.cat_can_move_to_position(step)


def test_steps_onto_border_when_adjacent():
    board = _Board(5, Point2D(1, 0))
    step = Cat().move(board)
    assert board.cat_wins_on_space(step)
    assert is_neighbor(board.cat, step)


def test_trapped_cat_stays_put():
    cat_pos = Point2D(0, 0)
    board = _Board(7, cat_pos, neighbors(cat_pos))
    assert Cat().move(board) == cat_pos


@pytest.mark.parametrize("attempt", range(10))
def test_without_escape_picks_the_only_free_cell(attempt):
    cat_pos = Point2D(0, 0)
    free = Point2D(1, 0)
    pocket = {cat_pos, free}
    walls = {n for p in pocket for n in neighbors(p)} - pocket
    board = _Board(7, cat_pos, walls)
    assert Cat().move(board) == free


@pytest.mark.parametrize("attempt", range(10))
def test_without_escape_choice_is_always_free(attempt):
    cat_pos = Point2D(0, 0)
    pocket = {cat_pos, Point2D(1, 0), Point2D(-1, 0)}
    walls = {n for p in pocket for n in neighbors(p)} - pocket
    board = _Board(7, cat_pos, walls)
    step = Cat().move(board)
    assert step in {Point2D(1, 0), Point2D(-1, 0)}