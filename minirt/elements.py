"""Parsing of single scene elements and assembly of a whole scene."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .checks import (
    IdentifierTracker,
    check_color,
    check_coordinates,
    check_orientation_vector,
    correct_amount_of_fields,
)
from .color import Color
from .errors import ErrorCode, SceneFileError, SceneParseError
from .scene import (
    Ambient,
    Camera,
    Cylinder,
    Light,
    Plane,
    Scene,
    SceneObject,
    Sphere,
    make_camera,
    prepare_scene,
)
from .textutils import (
    atod,
    atoi,
    only_numbers_and_dec_pt,
    only_numbers_and_newline,
    only_numbers_dec_pt_and_newline,
    split_by_spaces,
)

DEFAULT_WIDTH = 1440
DEFAULT_HEIGHT = 900
DEFAULT_ASPECT_RATIO = DEFAULT_WIDTH / DEFAULT_HEIGHT

_WHITE = Color(255, 255, 255)


def parse_ambient(fields: Sequence[str]) -> Ambient:
    """Parse ``A <ratio> <R,G,B>``."""
    if not correct_amount_of_fields(fields, 3):
        raise SceneParseError(ErrorCode.AMB_FIELDS)
    ratio = atod(fields[1])
    if ratio < 0.0 or ratio > 1.0:
        raise SceneParseError(ErrorCode.AMB_LIGHT)
    color = check_color(fields[2], ErrorCode.AMB_COLOR_FIELDS)
    return Ambient(ratio=ratio, color=color)


def _field_of_view(text: str) -> int:
    if not only_numbers_and_newline(text):
        raise SceneParseError(ErrorCode.CAM_FIELD_OF_VIEW)
    fov = atoi(text)
    if fov < 0 or fov > 180:
        raise SceneParseError(ErrorCode.CAM_FIELD_OF_VIEW)
    return fov


def parse_camera(
    fields: Sequence[str], aspect_ratio: float = DEFAULT_ASPECT_RATIO
) -> Camera:
    """Parse ``C <x,y,z> <dx,dy,dz> <fov>``."""
    if not correct_amount_of_fields(fields, 4):
        raise SceneParseError(ErrorCode.CAM_FIELDS)
    position = check_coordinates(fields[1], ErrorCode.CAM_COOR_FIELDS)
    direction = check_orientation_vector(fields[2], ErrorCode.CAM_VECTOR_FIELDS)
    fov = _field_of_view(fields[3])
    return make_camera(position, direction, fov, aspect_ratio)


def _brightness(text: str) -> float:
    if not only_numbers_dec_pt_and_newline(text):
        raise SceneParseError(ErrorCode.LIGHT_BRIGHTNESS)
    ratio = atod(text.split("\n", 1)[0])
    if ratio < 0 or ratio > 1:
        raise SceneParseError(ErrorCode.LIGHT_BRIGHTNESS)
    return ratio


def parse_light(fields: Sequence[str]) -> Light:
    """Parse ``L <x,y,z> <brightness> [R,G,B]``; the colour defaults to white."""
    if not correct_amount_of_fields(fields, 3) and not correct_amount_of_fields(fields, 4):
        raise SceneParseError(ErrorCode.LIGHT_FIELDS)
    position = check_coordinates(fields[1], ErrorCode.LIGHT_COOR_FIELDS)
    ratio = _brightness(fields[2])
    color_text = fields[3] if len(fields) == 4 else None
    if color_text and not color_text.startswith("\n"):
        color = check_color(color_text, ErrorCode.LIGHT_COLOR_FIELDS)
    else:
        color = _WHITE
    return Light(position=position, ratio=ratio, color=color)


def parse_sphere(fields: Sequence[str]) -> Sphere:
    """Parse ``sp <x,y,z> <diameter> <R,G,B>``."""
    if not correct_amount_of_fields(fields, 4):
        raise SceneParseError(ErrorCode.SP_FIELDS)
    center = check_coordinates(fields[1], ErrorCode.SP_COOR_FIELDS)
    if not only_numbers_and_dec_pt(fields[2]):
        raise SceneParseError(ErrorCode.SP_DM)
    color = check_color(fields[3], ErrorCode.SP_COLOR_FIELDS)
    return Sphere(center=center, radius=atod(fields[2]) / 2, color=color)


def parse_plane(fields: Sequence[str]) -> Plane:
    """Parse ``pl <x,y,z> <nx,ny,nz> <R,G,B>``."""
    if not correct_amount_of_fields(fields, 4):
        raise SceneParseError(ErrorCode.PL_FIELDS)
    point = check_coordinates(fields[1], ErrorCode.PL_COOR_FIELDS)
    normal = check_orientation_vector(fields[2], ErrorCode.PL_VECTOR_FIELDS)
    color = check_color(fields[3], ErrorCode.PL_COLOR_FIELDS)
    return Plane(point=point, normal=normal, color=color)


def parse_cylinder(fields: Sequence[str]) -> Cylinder:
    """Parse ``cy <x,y,z> <ax,ay,az> <diameter> <height> <R,G,B>``."""
    if not correct_amount_of_fields(fields, 6):
        raise SceneParseError(ErrorCode.CY_FIELDS)
    center = check_coordinates(fields[1], ErrorCode.CY_COOR_FIELDS)
    orientation = check_orientation_vector(fields[2], ErrorCode.CY_VECTOR_FIELDS)
    if not only_numbers_and_dec_pt(fields[3]):
        raise SceneParseError(ErrorCode.CY_DM)
    if not only_numbers_and_dec_pt(fields[4]):
        raise SceneParseError(ErrorCode.CY_HEIGHT)
    color = check_color(fields[5], ErrorCode.CY_COLOR_FIELDS)
    return Cylinder(
        center=center,
        orientation=orientation,
        radius=atod(fields[3]) / 2,
        height=atod(fields[4]),
        color=color,
    )


_OBJECT_PARSERS: dict[str, Callable[[Sequence[str]], SceneObject]] = {
    "sp": parse_sphere,
    "pl": parse_plane,
    "cy": parse_cylinder,
}


class SceneBuilder:
    """Collects scene description lines one at a time and builds a Scene."""

    def __init__(self, aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> None:
        self.aspect_ratio = aspect_ratio
        self.identifiers = IdentifierTracker()
        self.ambient: Ambient | None = None
        self.camera: Camera | None = None
        self.light: Light | None = None
        self.objects: list[SceneObject] = []
        self._counts = dict.fromkeys(_OBJECT_PARSERS, 0)

    def add_line(self, line: str) -> None:
        """Parse one line; blank lines and comments are ignored.

        Raises SceneParseError for an invalid or duplicated element.
        """
        fields = split_by_spaces(line)
        if not fields:
            return
        self.identifiers.register(fields[0])
        kind = fields[0].removesuffix("\n")
        if not kind:
            return
        if kind == "A":
            self.ambient = parse_ambient(fields)
        elif kind == "C":
            self.camera = parse_camera(fields, self.aspect_ratio)
        elif kind == "L":
            self.light = parse_light(fields)
        elif kind in _OBJECT_PARSERS:
            self._counts[kind] += 1
            try:
                obj = _OBJECT_PARSERS[kind](fields)
            except SceneParseError as exc:
                raise SceneParseError(exc.code, self._counts[kind]) from exc
            self.objects.append(obj)
        else:
            raise SceneParseError(ErrorCode.INVALID_IDENTIFIER)

    def build(self) -> Scene:
        """Return the prepared scene; raise if A, C or L is missing."""
        if (
            not self.identifiers.complete()
            or self.ambient is None
            or self.camera is None
            or self.light is None
        ):
            raise SceneFileError(ErrorCode.MISSING_IDENTIFIER)
        scene = Scene(
            ambient=self.ambient,
            camera=self.camera,
            light=self.light,
            objects=list(self.objects),
        )
        return prepare_scene(scene)