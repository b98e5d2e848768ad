import pytest

from aigames.catchthecat.hexgrid import neighbors
from aigames.catchthecat.world import World, main
from aigames.core.color import Color
from aigames.core.engine import Engine
from aigames.core.point2d import Point2D


def _cells(side):
    half = side // 2
    return [
        Point2D(x, y)
        for y in range(-half, half + 1)
        for x in range(-half, half + 1)
    ]


def _world(side, cat, blocked=(), cat_turn=True, engine=None):
    blocked = set(blocked)
    state = [cell in blocked for cell in _cells(side)]
    return World.from_state(engine or Engine(), side, cat_turn, cat, state)


def _border(side):
    half = side // 2
    return {c for c in _cells(side) if abs(c.x) == half or abs(c.y) == half}


class _Recorder:
    def __init__(self):
        self.colors = []
        self.lines = 0

    def set_draw_color(self, r, g, b, a):
        self.colors.append((r, g, b))

    def draw_line(self, x1, y1, x2, y2):
        self.lines += 1


def test_even_size_is_rejected():
    with pytest.raises(ValueError):
        World(Engine(), 10)


def test_new_world_has_cat_in_free_centre():
    engine = Engine()
    world = World(engine, 11)
    assert world.side_size() == 11
    assert world.cat_position() == Point2D(0, 0)
    assert not world.get_content(Point2D(0, 0))
    assert world in engine.game_objects
    assert world.cat_turn is True


def test_clear_world_places_few_walls():
    world = World(Engine(), 11)
    blocked = sum(world.get_content(c) for c in _cells(11))
    assert blocked <= 7


def test_from_state_checks_length():
    with pytest.raises(ValueError):
        World.from_state(Engine(), 5, True, Point2D(0, 0), [False] * 24)


def test_get_content_reads_state():
    world = _world(5, Point2D(0, 0), blocked={Point2D(-2, -2), Point2D(1, 1)})
    assert world.get_content(Point2D(-2, -2))
    assert world.get_content(Point2D(1, 1))
    assert not world.get_content(Point2D(1, 0))


def test_get_content_outside_raises():
    world = _world(5, Point2D(0, 0))
    with pytest.raises(IndexError):
        world.get_content(Point2D(0, -3))


def test_valid_positions_and_win_spaces():
    world = _world(11, Point2D(0, 0))
    assert world.is_valid_position(Point2D(5, 5))
    assert world.is_valid_position(Point2D(-5, 0))
    assert not world.is_valid_position(Point2D(6, 0))
    assert world.cat_wins_on_space(Point2D(5, 0))
    assert world.cat_wins_on_space(Point2D(0, -5))
    assert not world.cat_wins_on_space(Point2D(4, 4))


def test_cat_moves():
    cat = Point2D(0, 0)
    wall = neighbors(cat)[0]
    world = _world(5, cat, blocked={wall})
    assert not world.cat_can_move_to_position(wall)
    assert world.cat_can_move_to_position(neighbors(cat)[1])
    assert not world.cat_can_move_to_position(Point2D(2, 2))


def test_catcher_moves():
    world = _world(5, Point2D(1, 0))
    assert not world.catcher_can_move_to_position(Point2D(1, 0))
    assert not world.catcher_can_move_to_position(Point2D(3, 0))
    assert world.catcher_can_move_to_position(Point2D(0, 0))


def test_cat_step_moves_to_neighbour():
    world = _world(5, Point2D(0, 0))
    world.step()
    assert world.cat_position() in neighbors(Point2D(0, 0))
    assert world.cat_turn is False


def test_catcher_step_adds_one_wall():
    world = _world(7, Point2D(0, 0), cat_turn=False)
    world.step()
    blocked = [c for c in _cells(7) if world.get_content(c)]
    assert len(blocked) == 1
    assert blocked[0] != world.cat_position() or False
    assert world.cat_position() not in blocked
    assert world.cat_turn is True


def test_cat_reaching_border_wins_and_next_step_resets():
    world = _world(5, Point2D(1, 0))
    world.step()
    assert world.cat_won
    assert world.cat_wins_on_space(world.cat_position())
    world.step()
    assert not world.cat_won
    assert world.cat_position() == Point2D(0, 0)
    assert world.cat_turn is True


def test_catcher_closes_last_gap_and_wins():
    cat = Point2D(0, 0)
    around = neighbors(cat)
    gap = around[2]
    walls = _border(5) | (set(around) - {gap})
    world = _world(5, cat, blocked=walls, cat_turn=False)
    world.step()
    assert world.get_content(gap)
    assert world.catcher_won


def test_trapped_cat_loses():
    cat = Point2D(0, 0)
    world = _world(5, cat, blocked=_border(5) | set(neighbors(cat)))
    world.is_simulating = True
    world.step()
    assert world.catcher_won
    assert not world.is_simulating
    assert world.cat_position() == cat


def test_update_waits_for_timer():
    world = _world(5, Point2D(1, 0))
    world.update(5.0)
    assert world.cat_position() == Point2D(1, 0)

    world.is_simulating = True
    world.update(0.5)
    assert world.cat_position() == Point2D(1, 0)
    world.update(0.6)
    assert world.cat_won
    assert world.time_for_next_tick == world.time_between_ai_ticks


def test_str_of_small_board():
    world = _world(3, Point2D(0, 0))
    assert str(world) == ". . .\n . C .\n. . .\n "


def test_str_marks_walls():
    walls = {Point2D(-1, -1), Point2D(2, 2)}
    world = _world(5, Point2D(1, 0), blocked=walls)
    text = str(world)
    assert text.count("#") == len(walls)
    assert text.count("C") == 1
    assert text.count(".") == 25 - len(walls) - 1


def test_on_draw_colours_each_cell():
    walls = {Point2D(-1, -1), Point2D(2, 2), Point2D(0, 1)}
    world = _world(5, Point2D(1, 0), blocked=walls)
    recorder = _Recorder()
    world.on_draw(recorder)
    rgb = lambda c: (c.r, c.g, c.b)
    assert len(recorder.colors) == 25
    assert recorder.colors.count(rgb(Color.RED)) == 1
    assert recorder.colors.count(rgb(Color.BLUE)) == len(walls)
    assert recorder.colors.count(rgb(Color.GRAY)) == 25 - len(walls) - 1
    assert recorder.lines == 25 * 6


def test_main_with_arguments_does_nothing(capsys):
    assert main(["--headless"]) == 0
    assert capsys.readouterr().out == ""


def test_main_plays_a_game(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Cat wins" in out or "Catcher wins" in out
    assert out.count("C") >= 2