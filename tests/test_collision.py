import pytest

from bravoengine.collider import Collider
from bravoengine.collision import check_collision_aabb, check_collision_aabb_inside
from bravoengine.gameobject import GameObject
from bravoengine.geometry import Geometry


def make_collider(position, scale=(1.0, 1.0, 1.0)):
    geometry = Geometry()
    obj = GameObject(type="collider", position=position, scale=scale, geometry=geometry)
    return Collider(obj, None, geometry)


def test_overlapping_boxes_collide():
    a = make_collider((0.0, 0.0, 0.0))
    b = make_collider((1.5, 0.5, -0.5))
    assert check_collision_aabb(a, b) is True
    assert check_collision_aabb(b, a) is True


def test_touching_boxes_collide():
    a = make_collider((0.0, 0.0, 0.0))
    b = make_collider((2.0, 0.0, 0.0))
    assert check_collision_aabb(a, b) is True


@pytest.mark.parametrize(
    "position",
    [(2.5, 0.0, 0.0), (-2.5, 0.0, 0.0), (0.0, 2.5, 0.0), (0.0, -2.5, 0.0), (0.0, 0.0, 2.5), (0.0, 0.0, -2.5)],
)
def test_separated_boxes_do_not_collide(position):
    a = make_collider((0.0, 0.0, 0.0))
    b = make_collider(position)
    assert check_collision_aabb(a, b) is False
    assert check_collision_aabb(b, a) is False


def test_collision_follows_object_movement():
    a = make_collider((0.0, 0.0, 0.0))
    b = make_collider((10.0, 0.0, 0.0))
    assert check_collision_aabb(a, b) is False
    b.gameobject.position = (0.5, 0.0, 0.0)
    assert check_collision_aabb(a, b) is True


def test_small_box_inside_large_box():
    small = make_collider((0.2, -0.2, 0.1), scale=(0.5, 0.5, 0.5))
    large = make_collider((0.0, 0.0, 0.0), scale=(2.0, 2.0, 2.0))
    assert check_collision_aabb_inside(small, large) is True
    assert check_collision_aabb_inside(large, small) is False


def test_box_is_inside_itself():
    a = make_collider((3.0, 1.0, -2.0))
    b = make_collider((3.0, 1.0, -2.0))
    assert check_collision_aabb_inside(a, b) is True


def test_partially_overlapping_box_is_not_inside():
    a = make_collider((1.5, 0.0, 0.0))
    b = make_collider((0.0, 0.0, 0.0))
    assert check_collision_aabb(a, b) is True
    assert check_collision_aabb_inside(a, b) is False