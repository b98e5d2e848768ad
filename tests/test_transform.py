from aigames.core.transform import Transform
from aigames.core.vectors import Vector2


def test_defaults():
    t = Transform()
    assert t.position == Vector2.zero()
    assert t.scale == Vector2.identity()
    assert t.rotation == Vector2.zero()


def test_positional_order_is_position_scale_rotation():
    position = Vector2(10.0, 20.0)
    scale = Vector2(2.0, 3.0)
    rotation = Vector2.up()
    t = Transform(position, scale, rotation)
    assert t.position == position
    assert t.scale == scale
    assert t.rotation == rotation


def test_default_vectors_are_not_shared():
    a = Transform()
    b = Transform()
    a.scale *= 4.0
    a.position += Vector2.right()
    assert b.scale == Vector2.identity()
    assert b.position == Vector2.zero()
    assert a.scale == Vector2.identity() * 4.0