import math

import pytest

from minirt.color import Color
from minirt.intersect import (
    CapHit,
    find_intersection,
    hit_cap_bottom,
    hit_cap_top,
    hit_cylinder_tube,
    hit_plane,
    hit_sphere,
)
from minirt.scene import Cylinder, Plane, Sphere
from minirt.vector import Vec3

RED = Color(255, 0, 0)
ORIGIN = Vec3(0.0, 0.0, 0.0)
FORWARD = Vec3(0.0, 0.0, 1.0)


def _sphere(z=5.0, radius=1.0):
    return Sphere(center=Vec3(0.0, 0.0, z), radius=radius, color=RED)


def _cylinder():
    return Cylinder(
        center=Vec3(0.0, 0.0, 0.0),
        orientation=Vec3(0.0, 1.0, 0.0),
        radius=1.0,
        height=2.0,
        color=RED,
    )


def _close(a: Vec3, b: Vec3) -> bool:
    return (a - b).length() < 1e-9


def test_plane_hit_lies_on_plane():
    plane = Plane(point=Vec3(0.0, 0.0, 3.0), normal=Vec3(0.0, 0.0, -1.0), color=RED)
    direction = Vec3(0.3, 0.2, 1.0).normalized()
    t = hit_plane(ORIGIN, direction, plane)
    assert t is not None and t > 0
    point = ORIGIN + direction * t
    assert abs((point - plane.point).dot(plane.normal)) < 1e-9


def test_plane_parallel_ray_misses():
    plane = Plane(point=Vec3(0.0, -1.0, 0.0), normal=Vec3(0.0, 1.0, 0.0), color=RED)
    assert hit_plane(ORIGIN, FORWARD, plane) is None


def test_plane_behind_origin_misses():
    plane = Plane(point=Vec3(0.0, 0.0, -3.0), normal=Vec3(0.0, 0.0, 1.0), color=RED)
    assert hit_plane(ORIGIN, FORWARD, plane) is None


def test_sphere_hit_on_surface_and_nearest():
    sphere = _sphere()
    t = hit_sphere(ORIGIN, FORWARD, sphere)
    assert t is not None
    point = ORIGIN + FORWARD * t
    assert math.isclose((point - sphere.center).length(), sphere.radius)
    assert t < sphere.center.z


def test_sphere_miss():
    assert hit_sphere(ORIGIN, Vec3(0.0, 1.0, 0.0), _sphere()) is None


def test_sphere_behind_origin_misses():
    assert hit_sphere(ORIGIN, FORWARD, _sphere(z=-5.0)) is None


def test_sphere_from_inside_uses_exit():
    sphere = _sphere(z=0.0, radius=2.0)
    t = hit_sphere(ORIGIN, FORWARD, sphere)
    assert t is not None and t > 0
    assert math.isclose(t, sphere.radius)


def test_tube_hit_is_at_radius_from_axis():
    cyl = _cylinder()
    origin = Vec3(0.0, 0.0, -5.0)
    t = hit_cylinder_tube(origin, FORWARD, cyl)
    assert t is not None
    point = origin + FORWARD * t
    assert math.isclose(math.hypot(point.x, point.z), cyl.radius)
    assert abs(point.y) <= cyl.height_half


def test_tube_outside_height_misses():
    assert hit_cylinder_tube(Vec3(0.0, 5.0, -5.0), FORWARD, _cylinder()) is None


def test_tube_ray_along_axis_misses():
    assert hit_cylinder_tube(Vec3(0.0, 5.0, 0.0), Vec3(0.0, -1.0, 0.0), _cylinder()) is None


def test_caps_hit_from_above():
    cyl = _cylinder()
    origin = Vec3(0.0, 5.0, 0.0)
    down = Vec3(0.0, -1.0, 0.0)
    top = hit_cap_top(origin, down, cyl)
    bottom = hit_cap_bottom(origin, down, cyl)
    assert top is not None and bottom is not None
    assert _close(origin + down * top, cyl.cap_top_center)
    assert _close(origin + down * bottom, cyl.cap_bottom_center)
    assert top < bottom


def test_cap_outside_radius_misses():
    cyl = _cylinder()
    origin = Vec3(3.0, 5.0, 0.0)
    down = Vec3(0.0, -1.0, 0.0)
    assert hit_cap_top(origin, down, cyl) is None
    assert hit_cap_bottom(origin, down, cyl) is None


def test_cap_parallel_ray_misses():
    assert hit_cap_top(Vec3(0.0, 1.0, -5.0), FORWARD, _cylinder()) is None


def test_find_intersection_empty_scene():
    assert find_intersection(ORIGIN, FORWARD, []) is None


def test_find_intersection_picks_closest():
    near = _sphere(z=5.0)
    far = _sphere(z=10.0)
    ix = find_intersection(ORIGIN, FORWARD, [far, near])
    assert ix is not None
    assert ix.obj is near
    assert _close(ix.point, ORIGIN + FORWARD * ix.t)
    assert ix.t == hit_sphere(ORIGIN, FORWARD, near)


@pytest.mark.parametrize(
    ("origin", "direction", "expected"),
    [
        (Vec3(0.0, 5.0, 0.0), Vec3(0.0, -1.0, 0.0), CapHit.TOP_CAP),
        (Vec3(0.0, -5.0, 0.0), Vec3(0.0, 1.0, 0.0), CapHit.BOTTOM_CAP),
        (Vec3(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0), CapHit.NO_HIT),
    ],
)
def test_find_intersection_cylinder_part(origin, direction, expected):
    cyl = _cylinder()
    ix = find_intersection(origin, direction, [cyl])
    assert ix is not None
    assert ix.obj is cyl
    assert ix.cap_hit is expected