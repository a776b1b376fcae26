"""Scene description: light sources, camera and renderable objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from .color import Color
from .vector import Vec3

EPSILON = 1e-6

_WORLD_UP = Vec3(0.0, 1.0, 0.0)
_WORLD_FORWARD = Vec3(0.0, 0.0, 1.0)


@dataclass
class Ambient:
    """Ambient lighting: a ratio in [0, 1] and a colour."""

    ratio: float
    color: Color


@dataclass
class Camera:
    """A pinhole camera with an orthonormal basis."""

    position: Vec3
    direction: Vec3
    fov: float
    scale: float
    aspect_ratio: float
    right: Vec3
    up: Vec3


@dataclass
class Light:
    """A point light."""

    position: Vec3
    ratio: float
    color: Color = field(default_factory=lambda: Color(255, 255, 255))


@dataclass
class Sphere:
    center: Vec3
    radius: float
    color: Color
    color_in_amb: Color = field(default_factory=Color)
    cam_inside: bool = False

    def contains(self, point: Vec3) -> bool:
        """True if ``point`` lies inside or on the sphere."""
        oc = point - self.center
        return oc.dot(oc) <= self.radius * self.radius


@dataclass
class Plane:
    point: Vec3
    normal: Vec3
    color: Color
    color_in_amb: Color = field(default_factory=Color)
    cam_inside: bool = False

    def __post_init__(self) -> None:
        self.normal = self.normal.normalized()


@dataclass
class Cylinder:
    center: Vec3
    orientation: Vec3
    radius: float
    height: float
    color: Color
    color_in_amb: Color = field(default_factory=Color)
    cam_inside: bool = False

    def __post_init__(self) -> None:
        self.orientation = self.orientation.normalized()

    @property
    def radius_sqrd(self) -> float:
        return self.radius * self.radius

    @property
    def height_half(self) -> float:
        return self.height / 2.0

    @property
    def cap_top_normal(self) -> Vec3:
        return self.orientation

    @property
    def cap_bottom_normal(self) -> Vec3:
        return self.orientation * -1.0

    @property
    def cap_top_center(self) -> Vec3:
        return self.center + self.cap_top_normal * (self.height / 2.0)

    @property
    def cap_bottom_center(self) -> Vec3:
        return self.center + self.cap_bottom_normal * (self.height / 2.0)

    def contains(self, point: Vec3) -> bool:
        """True if ``point`` lies inside or on the finite cylinder."""
        oc = point - self.center
        axis_dot_oc = oc.dot(self.orientation)
        if axis_dot_oc < -self.height_half or axis_dot_oc > self.height_half:
            return False
        dist_sq = oc.dot(oc) - axis_dot_oc * axis_dot_oc
        return dist_sq <= self.radius_sqrd


SceneObject = Union[Sphere, Plane, Cylinder]


@dataclass
class Scene:
    ambient: Ambient
    camera: Camera
    light: Light
    objects: list[SceneObject] = field(default_factory=list)


def make_camera(position: Vec3, direction: Vec3, fov: float, aspect_ratio: float) -> Camera:
    """Build a camera with its right and up vectors from a view direction and FOV in degrees."""
    direction = direction.normalized()
    scale = math.tan((fov / 2) * math.pi / 180.0)
    right = _WORLD_UP.cross(direction)
    if right.length() < EPSILON:
        right = direction.cross(_WORLD_FORWARD)
    right = right.normalized()
    up = direction.cross(right).normalized()
    return Camera(
        position=position,
        direction=direction,
        fov=fov,
        scale=scale,
        aspect_ratio=aspect_ratio,
        right=right,
        up=up,
    )


def _color_in_ambient(color: Color, ambient: Ambient) -> Color:
    return Color(
        int(color.r * (ambient.color.r * ambient.ratio) / 255.0),
        int(color.g * (ambient.color.g * ambient.ratio) / 255.0),
        int(color.b * (ambient.color.b * ambient.ratio) / 255.0),
    )


def prepare_scene(scene: Scene) -> Scene:
    """Precompute per-object lighting data relative to the camera.

    Applies ambient light to each object's colour, turns plane normals to
    face the camera and marks objects that enclose the camera.
    """
    cam_pos = scene.camera.position
    for obj in scene.objects:
        obj.color_in_amb = _color_in_ambient(obj.color, scene.ambient)
        if isinstance(obj, Plane):
            if (obj.point - cam_pos).dot(obj.normal) > 0:
                obj.normal = obj.normal * -1.0
        obj.cam_inside = isinstance(obj, (Sphere, Cylinder)) and obj.contains(cam_pos)
    return scene