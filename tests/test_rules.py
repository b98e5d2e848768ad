from dataclasses import dataclass, field

import pytest

from aigames.core.color import Color
from aigames.core.engine import Engine
from aigames.core.transform import Transform
from aigames.core.vectors import Vector2
from aigames.flocking.rules import (
    AlignmentRule,
    BoundedAreaRule,
    CohesionRule,
    MouseInfluenceRule,
    SeparationRule,
    WindRule,
)


@dataclass
class FakeWorld:
    engine: Engine


@dataclass
class FakeBoid:
    transform: Transform = field(default_factory=Transform)
    velocity: Vector2 = field(default_factory=Vector2.zero)


class RecordingRenderer:
    def __init__(self):
        self.colors = []
        self.lines = []

    def set_draw_color(self, r, g, b, a):
        self.colors.append((r, g, b, a))

    def draw_line(self, x1, y1, x2, y2):
        self.lines.append((x1, y1, x2, y2))


def boid_at(x, y, vx=0.0, vy=0.0):
    return FakeBoid(Transform(position=Vector2(x, y)), Vector2(vx, vy))


@pytest.fixture
def world():
    return FakeWorld(Engine(window_size=Vector2(800.0, 600.0)))


def test_disabled_rule_gives_zero_and_caches_it(world):
    rule = WindRule(world, weight=3.0, is_enabled=False)
    result = rule.compute_weighted_force([], boid_at(0, 0))
    assert result == Vector2.zero()
    assert rule.force == Vector2.zero()


def test_weighted_force_applies_weight_and_multiplier(world):
    rule = WindRule(world, weight=2.0)
    boid = boid_at(0, 0)
    raw = rule.compute_force([], boid)
    weighted = rule.compute_weighted_force([], boid)
    assert weighted == raw * (rule.base_weight_multiplier * 2.0)
    assert rule.force == weighted


def test_wind_at_angle_zero_points_right(world):
    assert WindRule(world).compute_force([], boid_at(0, 0)) == Vector2.right()


def test_alignment_follows_average_heading(world):
    neighbors = [boid_at(1, 1, 3, 0), boid_at(2, 2, 1, 0)]
    assert AlignmentRule(world).compute_force(neighbors, boid_at(0, 0)) == Vector2.right()


def test_alignment_without_neighbors_is_zero(world):
    assert AlignmentRule(world).compute_force([], boid_at(0, 0)) == Vector2.zero()


def test_cohesion_points_to_center_of_mass(world):
    neighbors = [boid_at(10, 5), boid_at(10, -5)]
    force = CohesionRule(world).compute_force(neighbors, boid_at(0, 0))
    assert force == Vector2.right()


def test_separation_pushes_away_from_close_neighbor(world):
    rule = SeparationRule(world, desired_separation=25.0)
    force = rule.compute_force([boid_at(5, 0)], boid_at(0, 0))
    assert force == Vector2.left()
    assert force.magnitude() == pytest.approx(1.0)


def test_separation_ignores_far_neighbor(world):
    rule = SeparationRule(world, desired_separation=25.0)
    assert rule.compute_force([boid_at(100, 0)], boid_at(0, 0)) == Vector2.zero()


def test_mouse_without_press_is_zero(world):
    assert MouseInfluenceRule(world).compute_force([], boid_at(0, 0)) == Vector2.zero()


def test_mouse_attracts_and_repels(world):
    attract = MouseInfluenceRule(world)
    attract.mouse_position = Vector2(0, 50)
    repel = MouseInfluenceRule(world, is_repulsive=True)
    repel.mouse_position = Vector2(0, 50)
    boid = boid_at(0, 0)
    pull = attract.compute_force([], boid)
    push = repel.compute_force([], boid)
    assert pull.normalized() == Vector2.down()
    assert push == -pull


def test_bounded_area_inside_is_zero(world):
    rule = BoundedAreaRule(world, 20)
    assert rule.compute_force([], boid_at(400, 300)) == Vector2.zero()


def test_bounded_area_pushes_away_from_borders(world):
    rule = BoundedAreaRule(world, 20)
    left = rule.compute_force([], boid_at(5, 300))
    bottom = rule.compute_force([], boid_at(400, 595))
    assert left.x > 0 and left.y == 0
    assert bottom.y < 0 and bottom.x == 0


def test_bounded_area_push_is_one_at_the_border(world):
    rule = BoundedAreaRule(world, 20)
    assert rule.compute_force([], boid_at(0, 300)) == Vector2.right()


def test_clone_is_independent(world):
    rule = SeparationRule(world, 25.0, 4.75)
    copy = rule.clone()
    copy.weight = 1.0
    copy.is_enabled = False
    assert type(copy) is SeparationRule
    assert rule.weight == 4.75
    assert rule.is_enabled
    assert copy.world is world
    assert copy.desired_minimal_distance == rule.desired_minimal_distance


def test_draw_shows_force_line(world):
    rule = WindRule(world, weight=2.0)
    boid = boid_at(100, 100)
    rule.compute_weighted_force([], boid)
    renderer = RecordingRenderer()
    rule.draw(boid, renderer)
    end = boid.transform.position + rule.force * 1.5
    assert renderer.lines == [(100, 100, int(end.x), int(end.y))]
    c = Color.WHITE
    assert renderer.colors == [(c.r, c.g, c.b, 255)]


def test_bounded_draw_adds_rectangle(world):
    rule = BoundedAreaRule(world, 20)
    renderer = RecordingRenderer()
    rule.draw(boid_at(400, 300), renderer)
    assert len(renderer.lines) == 5
    assert renderer.lines[1:] == [
        (20, 20, 780, 20),
        (780, 20, 780, 580),
        (780, 580, 20, 580),
        (20, 580, 20, 20),
    ]
    gray = Color.GRAY
    assert renderer.colors[1:] == [(gray.r, gray.g, gray.b, 255)] * 4


def test_rule_names_and_colors(world):
    assert AlignmentRule(world).name == "Alignment Rule"
    assert BoundedAreaRule(world, 20).name == "Bounded Windows"
    assert MouseInfluenceRule(world).base_weight_multiplier == 0.1
    assert BoundedAreaRule(world, 20).debug_color == Color.RED.light()
    assert CohesionRule(world).debug_color == Color.CYAN