"""Validation of the individual fields of scene description elements."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .color import Color
from .errors import ErrorCode, SceneFileError, SceneParseError
from .textutils import (
    atod,
    atoi,
    only_numbers_and_newline,
    only_numbers_signs_and_dec_pt,
)
from .vector import Vec3

_UNIQUE = ("A", "C", "L")


def _split_commas(text: str) -> list[str]:
    return [part for part in text.split(",") if part]


@dataclass
class IdentifierTracker:
    """Records which of the unique elements (A, C, L) have been seen."""

    a_found: bool = False
    c_found: bool = False
    l_found: bool = False

    def register(self, identifier: str | None) -> None:
        """Note an element identifier; raise if a unique one repeats."""
        if identifier is None:
            return
        name = identifier[:-1] if identifier.endswith("\n") else identifier
        if name not in _UNIQUE:
            return
        attr = f"{name.lower()}_found"
        if getattr(self, attr):
            raise SceneParseError(ErrorCode.UNIQUE_ELEM)
        setattr(self, attr, True)

    def complete(self) -> bool:
        """True once ambient light, camera and light have all been seen."""
        return self.a_found and self.c_found and self.l_found


def check_color(text: str, error_code: int) -> Color:
    """Parse ``R,G,B``.

    Raises ``error_code`` for a wrong component count and ``error_code + 1``
    for non-numeric or out-of-range components.
    """
    rgb = _split_commas(text)
    if len(rgb) != 3 or rgb[2].startswith("\n"):
        raise SceneParseError(error_code)
    if not all(only_numbers_and_newline(part) for part in rgb):
        raise SceneParseError(error_code + 1)
    values = [atoi(part) for part in rgb]
    if any(not 0 <= value <= 255 for value in values):
        raise SceneParseError(error_code + 1)
    return Color(*values)


def check_coordinates(text: str, error_code: int) -> Vec3:
    """Parse ``x,y,z``.

    Raises ``error_code`` for a wrong count and ``error_code + 1`` for
    components that are not plain numbers.
    """
    coords = _split_commas(text)
    if len(coords) != 3:
        raise SceneParseError(error_code)
    if not all(only_numbers_signs_and_dec_pt(part) for part in coords):
        raise SceneParseError(error_code + 1)
    return Vec3(*(atod(part) for part in coords))


def check_orientation_vector(text: str, error_code: int) -> Vec3:
    """Parse a normalized direction ``x,y,z``.

    Raises ``error_code`` for a wrong count, ``error_code + 1`` for invalid
    or out-of-range components and ``error_code + 2`` if the length differs
    from 1 by more than 0.001.
    """
    coords = _split_commas(text)
    if len(coords) != 3:
        raise SceneParseError(error_code)
    values = [atod(part) for part in coords]
    if not all(only_numbers_signs_and_dec_pt(part) for part in coords) or any(
        not -1 <= value <= 1 for value in values
    ):
        raise SceneParseError(error_code + 1)
    vec = Vec3(*values)
    if abs(vec.length() - 1) > 0.001:
        raise SceneParseError(error_code + 2)
    return vec


def correct_amount_of_fields(fields: Sequence[str], expected: int) -> bool:
    """True if ``fields`` has ``expected`` entries, ignoring a trailing newline field."""
    count = len(fields)
    if count and fields[-1] == "\n":
        return count - 1 == expected
    return count == expected


def check_file(path: str | Path) -> Path:
    """Check that the scene file can be read and ends in ``.rt``."""
    path = Path(path)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise SceneFileError(ErrorCode.FILE_ACCESS, exc.strerror or str(exc)) from exc
    name = str(path)
    if len(name) < 4 or not name.endswith(".rt"):
        raise SceneFileError(ErrorCode.FILE_EXTENSION)
    return path