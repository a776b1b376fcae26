"""Error codes, messages and exceptions raised while loading and rendering scenes."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric codes reported for scene file problems; also used as exit status."""

    USAGE = 1
    FILE_EXTENSION = 2
    FILE_ACCESS = 3
    MEM_ALLOC = 4
    UNIQUE_ELEM = 5
    INVALID_IDENTIFIER = 6
    FILE_EMPTY = 7
    MISSING_IDENTIFIER = 8

    AMB_FIELDS = 9
    AMB_LIGHT = 10
    AMB_COLOR_FIELDS = 11
    AMB_COLOR_VALUES = 12

    CAM_FIELDS = 13
    CAM_COOR_FIELDS = 14
    CAM_COOR_VALUES = 15
    CAM_VECTOR_FIELDS = 16
    CAM_VECTOR_VALUES = 17
    CAM_VECTOR_NORM = 18
    CAM_FIELD_OF_VIEW = 19

    LIGHT_FIELDS = 20
    LIGHT_COOR_FIELDS = 21
    LIGHT_COOR_VALUES = 22
    LIGHT_BRIGHTNESS = 23
    LIGHT_COLOR_FIELDS = 24
    LIGHT_COLOR_VALUES = 25

    SP_FIELDS = 26
    SP_COOR_FIELDS = 27
    SP_COOR_VALUES = 28
    SP_DM = 29
    SP_COLOR_FIELDS = 30
    SP_COLOR_VALUES = 31

    PL_FIELDS = 32
    PL_COOR_FIELDS = 33
    PL_COOR_VALUES = 34
    PL_VECTOR_FIELDS = 35
    PL_VECTOR_VALUES = 36
    PL_VECTOR_NORM = 37
    PL_COLOR_FIELDS = 38
    PL_COLOR_VALUES = 39

    CY_FIELDS = 40
    CY_COOR_FIELDS = 41
    CY_COOR_VALUES = 42
    CY_VECTOR_FIELDS = 43
    CY_VECTOR_VALUES = 44
    CY_VECTOR_NORM = 45
    CY_DM = 46
    CY_HEIGHT = 47
    CY_COLOR_FIELDS = 48
    CY_COLOR_VALUES = 49


_E = ErrorCode

_MESSAGES: dict[ErrorCode, str] = {
    _E.USAGE: "Usage: minirt <scene.rt>",
    _E.FILE_EXTENSION: "Scene file must have the '.rt' extension",
    _E.FILE_ACCESS: "Cannot open scene file",
    _E.MEM_ALLOC: "Memory allocation failed",
    _E.UNIQUE_ELEM: "Ambient light, camera and light may each be defined only once",
    _E.INVALID_IDENTIFIER: "Invalid element type identifier",
    _E.FILE_EMPTY: "Scene file is empty",
    _E.MISSING_IDENTIFIER: "Scene needs an ambient light (A), a camera (C) and a light (L)",
    _E.AMB_FIELDS: "Ambient light: wrong number of fields",
    _E.AMB_LIGHT: "Ambient light: ratio must be between 0.0 and 1.0",
    _E.AMB_COLOR_FIELDS: "Ambient light: colour needs three components",
    _E.AMB_COLOR_VALUES: "Ambient light: colour components must be integers from 0 to 255",
    _E.CAM_FIELDS: "Camera: wrong number of fields",
    _E.CAM_COOR_FIELDS: "Camera: position needs three coordinates",
    _E.CAM_COOR_VALUES: "Camera: position coordinates must be numbers",
    _E.CAM_VECTOR_FIELDS: "Camera: orientation vector needs three components",
    _E.CAM_VECTOR_VALUES: "Camera: orientation components must be numbers from -1 to 1",
    _E.CAM_VECTOR_NORM: "Camera: orientation vector must be normalized",
    _E.CAM_FIELD_OF_VIEW: "Camera: field of view must be an integer from 0 to 180",
    _E.LIGHT_FIELDS: "Light: wrong number of fields",
    _E.LIGHT_COOR_FIELDS: "Light: position needs three coordinates",
    _E.LIGHT_COOR_VALUES: "Light: position coordinates must be numbers",
    _E.LIGHT_BRIGHTNESS: "Light: brightness must be between 0.0 and 1.0",
    _E.LIGHT_COLOR_FIELDS: "Light: colour needs three components",
    _E.LIGHT_COLOR_VALUES: "Light: colour components must be integers from 0 to 255",
    _E.SP_FIELDS: "Sphere: wrong number of fields",
    _E.SP_COOR_FIELDS: "Sphere: centre needs three coordinates",
    _E.SP_COOR_VALUES: "Sphere: centre coordinates must be numbers",
    _E.SP_DM: "Sphere: diameter must be a positive number",
    _E.SP_COLOR_FIELDS: "Sphere: colour needs three components",
    _E.SP_COLOR_VALUES: "Sphere: colour components must be integers from 0 to 255",
    _E.PL_FIELDS: "Plane: wrong number of fields",
    _E.PL_COOR_FIELDS: "Plane: point needs three coordinates",
    _E.PL_COOR_VALUES: "Plane: point coordinates must be numbers",
    _E.PL_VECTOR_FIELDS: "Plane: normal vector needs three components",
    _E.PL_VECTOR_VALUES: "Plane: normal components must be numbers from -1 to 1",
    _E.PL_VECTOR_NORM: "Plane: normal vector must be normalized",
    _E.PL_COLOR_FIELDS: "Plane: colour needs three components",
    _E.PL_COLOR_VALUES: "Plane: colour components must be integers from 0 to 255",
    _E.CY_FIELDS: "Cylinder: wrong number of fields",
    _E.CY_COOR_FIELDS: "Cylinder: centre needs three coordinates",
    _E.CY_COOR_VALUES: "Cylinder: centre coordinates must be numbers",
    _E.CY_VECTOR_FIELDS: "Cylinder: axis vector needs three components",
    _E.CY_VECTOR_VALUES: "Cylinder: axis components must be numbers from -1 to 1",
    _E.CY_VECTOR_NORM: "Cylinder: axis vector must be normalized",
    _E.CY_DM: "Cylinder: diameter must be a positive number",
    _E.CY_HEIGHT: "Cylinder: height must be a positive number",
    _E.CY_COLOR_FIELDS: "Cylinder: colour needs three components",
    _E.CY_COLOR_VALUES: "Cylinder: colour components must be integers from 0 to 255",
}

_OBJECT_KINDS = (
    (range(_E.SP_FIELDS, _E.SP_COLOR_VALUES + 1), "Sphere"),
    (range(_E.PL_FIELDS, _E.PL_COLOR_VALUES + 1), "Plane"),
    (range(_E.CY_FIELDS, _E.CY_COLOR_VALUES + 1), "Cylinder"),
)


def message_for(code: int) -> str:
    """Return the human-readable message for an error code.

    Raises ValueError for an unknown code.
    """
    return _MESSAGES[ErrorCode(code)]


def _object_kind(code: ErrorCode) -> str | None:
    for codes, kind in _OBJECT_KINDS:
        if code in codes:
            return kind
    return None


class RTError(Exception):
    """Base class for errors that end the program with a message."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def report(self) -> str:
        """Return the text to print on standard error."""
        return f"Error\n{self.message}\n"


class SceneFileError(RTError):
    """A problem with the scene file itself or with the command line."""

    def __init__(self, code: int, reason: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.reason = reason
        message = message_for(self.code)
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, int(self.code))


class SceneParseError(RTError):
    """An invalid element in the scene file.

    ``index`` is the running count of elements of the failing kind, reported
    for spheres, planes and cylinders.
    """

    def __init__(self, code: int, index: int = 0) -> None:
        self.code = ErrorCode(code)
        self.index = index
        super().__init__(message_for(self.code), int(self.code))

    @property
    def object_kind(self) -> str | None:
        """Name of the object kind the error concerns, if any."""
        return _object_kind(self.code)

    def report(self) -> str:
        text = super().report()
        kind = self.object_kind
        if kind is not None:
            text += f"{kind} number: {self.index}\n"
        return text