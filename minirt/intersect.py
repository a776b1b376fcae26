"""Ray intersection with planes, spheres and finite cylinders."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from .quadratic import discriminant, entry_distance, exit_distance
from .scene import EPSILON, Cylinder, Plane, SceneObject, Sphere
from .vector import Vec3


class CapHit(Enum):
    """Which part of a cylinder a ray struck."""

    NO_HIT = 0
    TOP_CAP = 1
    BOTTOM_CAP = 2


@dataclass
class Intersection:
    """The closest hit of a ray, plus lighting data filled in during shading."""

    obj: SceneObject
    t: float
    point: Vec3
    cap_hit: CapHit = CapHit.NO_HIT
    light_dir: Vec3 = field(default_factory=Vec3)
    light_dist: float = 0.0
    normal: Vec3 = field(default_factory=Vec3)


def hit_plane(origin: Vec3, direction: Vec3, plane: Plane) -> float | None:
    """Distance along the ray to the plane, or None if parallel or behind."""
    denom = direction.dot(plane.normal)
    if abs(denom) > EPSILON:
        t = (plane.point - origin).dot(plane.normal) / denom
        if t > 0.0:
            return t
    return None


def hit_sphere(origin: Vec3, direction: Vec3, sphere: Sphere) -> float | None:
    """Distance to the nearest sphere hit in front of the origin, or None.

    The direction is expected to be normalized.
    """
    oc = origin - sphere.center
    b = 2.0 * oc.dot(direction)
    c = oc.dot(oc) - sphere.radius * sphere.radius
    disc = discriminant(1.0, b, c)
    if disc < 0.0:
        return None
    t = entry_distance(1.0, b, disc)
    if t > 0.0:
        return t
    t = exit_distance(1.0, b, disc)
    if t > 0.0:
        return t
    return None


def _within_height(origin: Vec3, direction: Vec3, cylinder: Cylinder, t: float) -> bool:
    point = origin + direction * t
    projection = (point - cylinder.center).dot(cylinder.orientation)
    return -cylinder.height_half <= projection <= cylinder.height_half


def hit_cylinder_tube(origin: Vec3, direction: Vec3, cylinder: Cylinder) -> float | None:
    """Distance to the nearest hit on the cylinder's side surface, or None."""
    axis = cylinder.orientation
    axis_dot_ray = direction.dot(axis)
    a = direction.dot(direction) - axis_dot_ray * axis_dot_ray
    oc = origin - cylinder.center
    axis_dot_oc = oc.dot(axis)
    b = 2.0 * (direction.dot(oc) - axis_dot_ray * axis_dot_oc)
    c = oc.dot(oc) - axis_dot_oc * axis_dot_oc - cylinder.radius_sqrd
    disc = discriminant(a, b, c)
    if disc < 0:
        return None
    for t in (entry_distance(a, b, disc), exit_distance(a, b, disc)):
        if t > 0.0 and _within_height(origin, direction, cylinder, t):
            return t
    return None


def _hit_disc(
    origin: Vec3, direction: Vec3, center: Vec3, normal: Vec3, radius_sqrd: float
) -> float | None:
    denominator = direction.dot(normal)
    if abs(denominator) < EPSILON:
        return None
    numerator = (origin - center).dot(normal)
    t = -(numerator / denominator)
    if not t > 0.0:
        return None
    difference = origin + direction * t - center
    if difference.dot(difference) <= radius_sqrd:
        return t
    return None


def hit_cap_top(origin: Vec3, direction: Vec3, cylinder: Cylinder) -> float | None:
    """Distance to the cylinder's top cap, or None."""
    return _hit_disc(
        origin, direction, cylinder.cap_top_center, cylinder.cap_top_normal, cylinder.radius_sqrd
    )


def hit_cap_bottom(origin: Vec3, direction: Vec3, cylinder: Cylinder) -> float | None:
    """Distance to the cylinder's bottom cap, or None."""
    return _hit_disc(
        origin,
        direction,
        cylinder.cap_bottom_center,
        cylinder.cap_bottom_normal,
        cylinder.radius_sqrd,
    )


def _candidates(
    origin: Vec3, direction: Vec3, obj: SceneObject
) -> Iterator[tuple[float | None, CapHit]]:
    if isinstance(obj, Plane):
        yield hit_plane(origin, direction, obj), CapHit.NO_HIT
    elif isinstance(obj, Sphere):
        yield hit_sphere(origin, direction, obj), CapHit.NO_HIT
    elif isinstance(obj, Cylinder):
        yield hit_cylinder_tube(origin, direction, obj), CapHit.NO_HIT
        yield hit_cap_top(origin, direction, obj), CapHit.TOP_CAP
        yield hit_cap_bottom(origin, direction, obj), CapHit.BOTTOM_CAP


def find_intersection(
    origin: Vec3, direction: Vec3, objects: Iterable[SceneObject]
) -> Intersection | None:
    """Return the closest intersection of the ray with any object, or None."""
    best_t = math.inf
    best_obj: SceneObject | None = None
    best_cap = CapHit.NO_HIT
    for obj in objects:
        for t, cap in _candidates(origin, direction, obj):
            if t is not None and t < best_t:
                best_t, best_obj, best_cap = t, obj, cap
    if best_obj is None:
        return None
    return Intersection(
        obj=best_obj,
        t=best_t,
        point=origin + direction * best_t,
        cap_hit=best_cap,
    )