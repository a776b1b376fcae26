"""Camera and shadow rays, surface normals and Phong-style pixel shading."""

from __future__ import annotations

from dataclasses import dataclass

from .color import Color, clamp
from .intersect import CapHit, Intersection
from .scene import EPSILON, Camera, Cylinder, Light, Plane, Scene, Sphere
from .vector import Vec3

K_DIFFUSE = 1.0
K_SPECULAR = 0.5
K_SHININESS = 32
K_FADE = 1.0


@dataclass(frozen=True)
class ShadowRay:
    """A ray from a surface point towards the light."""

    origin: Vec3
    direction: Vec3
    length: float


@dataclass(frozen=True)
class Shade:
    """The components that make up a shaded pixel."""

    base: Color
    light: Color
    ambient: Color
    diff_coeff: float
    spec_coeff: float
    fade: float
    diffuse: Color
    specular: Color
    shaded: Color


def camera_ray(x: int, y: int, camera: Camera, width: int, height: int) -> Vec3:
    """Return the normalized world-space direction through pixel (x, y)."""
    norm_x = ((2.0 * (x + 0.5) / width) - 1.0) * camera.aspect_ratio * camera.scale
    norm_y = (1.0 - (2.0 * (y + 0.5) / height)) * camera.scale
    world = camera.right * norm_x + camera.up * norm_y + camera.direction
    return world.normalized()


def _cylinder_mantle_normal(ix: Intersection, cylinder: Cylinder) -> Vec3:
    axis = cylinder.orientation
    t = (ix.point - cylinder.center).dot(axis)
    projected = cylinder.center + axis * t
    return (ix.point - projected).normalized()


def surface_normal(ix: Intersection) -> Vec3:
    """Return the unit surface normal at the intersection point."""
    obj = ix.obj
    if isinstance(obj, Plane):
        return obj.normal
    if isinstance(obj, Sphere):
        return (ix.point - obj.center).normalized()
    if isinstance(obj, Cylinder):
        if ix.cap_hit is CapHit.TOP_CAP:
            return obj.cap_top_normal
        if ix.cap_hit is CapHit.BOTTOM_CAP:
            return obj.cap_bottom_normal
        return _cylinder_mantle_normal(ix, obj)
    return Vec3()


def compute_shadow_ray(ix: Intersection, light: Light) -> ShadowRay:
    """Build the shadow ray towards ``light``.

    Also stores the light direction, light distance and surface normal on
    ``ix``. The normal is flipped when the camera is inside the object, and the
    ray origin is pushed off the surface along it to avoid self-hits.
    """
    to_light = light.position - ix.point
    direction = to_light.normalized()
    length = to_light.length()
    normal = surface_normal(ix)
    if ix.obj.cam_inside:
        normal = normal * -1.0
    ix.light_dir = direction
    ix.light_dist = length
    ix.normal = normal
    return ShadowRay(origin=ix.point + normal * EPSILON, direction=direction, length=length)


def _reflection(vec_in: Vec3, normal: Vec3) -> Vec3:
    return (normal * (2 * vec_in.dot(normal)) - vec_in).normalized()


def _diffuse_coefficient(scene: Scene, ix: Intersection) -> float:
    dot = max(ix.normal.dot(ix.light_dir), 0.0)
    return dot * scene.light.ratio * K_DIFFUSE


def _specular_coefficient(scene: Scene, ix: Intersection) -> float:
    reflection = _reflection(ix.light_dir, ix.normal)
    view = (scene.camera.position - ix.point).normalized()
    dot = max(reflection.dot(view), 0.0)
    return dot**K_SHININESS * scene.light.ratio * K_SPECULAR


def _fade(distance: float) -> float:
    if distance == 0.0:
        return 1.0
    return clamp(K_FADE * 100 / (distance * distance), 1.0)


def _channel(value: float) -> int:
    return min(255, int(value))


def shade(scene: Scene, ix: Intersection, specular: bool = False, fade: bool = False) -> Shade:
    """Shade a lit intersection; ``compute_shadow_ray`` must have run on ``ix``."""
    base = ix.obj.color
    light = scene.light.color
    ambient = ix.obj.color_in_amb
    diff_coeff = _diffuse_coefficient(scene, ix)
    spec_coeff = _specular_coefficient(scene, ix) if specular else 0.0
    fade_factor = _fade(ix.light_dist) if fade else 1.0
    diffuse = Color(
        *(
            _channel(b * li // 255 * diff_coeff * fade_factor)
            for b, li in ((base.r, light.r), (base.g, light.g), (base.b, light.b))
        )
    )
    spec = Color(*(_channel(li * spec_coeff * fade_factor) for li in (light.r, light.g, light.b)))
    shaded = Color(
        *(
            int(clamp(a + d + s, 255))
            for a, d, s in (
                (ambient.r, diffuse.r, spec.r),
                (ambient.g, diffuse.g, spec.g),
                (ambient.b, diffuse.b, spec.b),
            )
        )
    )
    return Shade(
        base=base,
        light=light,
        ambient=ambient,
        diff_coeff=diff_coeff,
        spec_coeff=spec_coeff,
        fade=fade_factor,
        diffuse=diffuse,
        specular=spec,
        shaded=shaded,
    )