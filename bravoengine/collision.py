"""Axis-aligned bounding box tests between colliders."""

from __future__ import annotations

# Corner indices into a collider's world box (see Geometry.bounding_box):
# 0 = (x_min, y_min, z_max), 1 = (x_max, y_min, z_max),
# 2 = (x_min, y_min, z_min), 3 = (x_max, y_min, z_min),
# 4 = (x_min, y_max, z_max), 5 = (x_max, y_max, z_max).


def check_collision_aabb(current, checked) -> bool:
    """Return True when the world boxes of two colliders overlap or touch.

    Rotation of the underlying objects is not taken into account.
    """
    a = [v.position for v in current.world_aabb()]
    b = [v.position for v in checked.world_aabb()]
    return (
        a[0][0] <= b[1][0]
        and a[1][0] >= b[0][0]
        and a[0][1] <= b[4][1]
        and a[4][1] >= b[0][1]
        and a[2][2] <= b[0][2]
        and a[0][2] >= b[2][2]
    )


def check_collision_aabb_inside(inside, checked) -> bool:
    """Return True when the box of ``inside`` lies wholly within ``checked``."""
    a = [v.position for v in inside.world_aabb()]
    b = [v.position for v in checked.world_aabb()]

    def within(value: float, low: float, high: float) -> bool:
        return low <= value <= high

    x_ok = (
        within(a[0][0], b[0][0], b[1][0])
        and within(a[1][0], b[0][0], b[1][0])
        and within(a[2][0], b[2][0], b[3][0])
        and within(a[3][0], b[2][0], b[3][0])
    )
    y_ok = (
        within(a[0][1], b[0][1], b[4][1])
        and within(a[4][1], b[0][1], b[4][1])
        and within(a[1][1], b[1][1], b[5][1])
        and within(a[5][1], b[1][1], b[5][1])
    )
    z_ok = (
        within(a[0][2], b[2][2], b[0][2])
        and within(a[2][2], b[2][2], b[0][2])
        and within(a[1][2], b[3][2], b[1][2])
        and within(a[3][2], b[3][2], b[1][2])
    )
    return x_ok and y_ok and z_ok