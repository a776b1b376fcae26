"""Loading a scene from a ``.rt`` scene description file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .checks import check_file
from .elements import DEFAULT_ASPECT_RATIO, SceneBuilder
from .errors import ErrorCode, SceneParseError
from .scene import Scene


def parse_lines(
    lines: Iterable[str], aspect_ratio: float = DEFAULT_ASPECT_RATIO
) -> Scene:
    """Build a prepared scene from an iterable of description lines.

    Raises SceneParseError for an empty input or an invalid element, and
    SceneFileError if the ambient light, camera or light is missing.
    """
    builder = SceneBuilder(aspect_ratio)
    empty = True
    for line in lines:
        empty = False
        builder.add_line(line)
    if empty:
        raise SceneParseError(ErrorCode.FILE_EMPTY)
    return builder.build()


def load_scene(
    path: str | Path, aspect_ratio: float = DEFAULT_ASPECT_RATIO
) -> Scene:
    """Check and read the scene file at ``path`` and return the prepared scene."""
    checked = check_file(path)
    with checked.open(encoding="utf-8", errors="surrogateescape") as handle:
        return parse_lines(handle, aspect_ratio)