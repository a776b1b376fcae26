import pytest

from minirt.checks import (
    IdentifierTracker,
    check_color,
    check_coordinates,
    check_file,
    check_orientation_vector,
    correct_amount_of_fields,
)
from minirt.color import Color
from minirt.errors import ErrorCode, SceneFileError, SceneParseError
from minirt.vector import Vec3

SP_COLOR = ErrorCode.SP_COLOR_FIELDS
CAM_COOR = ErrorCode.CAM_COOR_FIELDS
PL_VEC = ErrorCode.PL_VECTOR_FIELDS


def test_check_color_valid():
    assert check_color("255,0,128\n", SP_COLOR) == Color(255, 0, 128)
    assert check_color("10,20,30", SP_COLOR) == Color(10, 20, 30)


@pytest.mark.parametrize(
    "text, offset",
    [
        ("1,2", 0),
        ("1,2,3,4", 0),
        ("1,2,\n", 0),
        ("", 0),
        ("1,a,3", 1),
        ("-1,0,0", 1),
        ("256,0,0", 1),
        ("0,0,300\n", 1),
    ],
)
def test_check_color_errors(text, offset):
    with pytest.raises(SceneParseError) as info:
        check_color(text, SP_COLOR)
    assert info.value.code == SP_COLOR + offset


def test_check_coordinates_valid():
    assert check_coordinates("1.5,-2,+3", CAM_COOR) == Vec3(1.5, -2.0, 3.0)


@pytest.mark.parametrize(
    "text, offset",
    [("1,2", 0), ("1,2,3,4", 0), ("1,x,2", 1), ("-,0,0", 1), ("1,2,3\n", 1)],
)
def test_check_coordinates_errors(text, offset):
    with pytest.raises(SceneParseError) as info:
        check_coordinates(text, CAM_COOR)
    assert info.value.code == CAM_COOR + offset


def test_check_orientation_valid():
    assert check_orientation_vector("0,0,1", PL_VEC) == Vec3(0, 0, 1)
    assert check_orientation_vector("0,-1.0,0", PL_VEC) == Vec3(0, -1, 0)


@pytest.mark.parametrize(
    "text, offset",
    [
        ("1,0", 0),
        ("0,0,2", 1),
        ("0,a,1", 1),
        ("0.5,0.5,0", 2),
        ("0,0,0", 2),
    ],
)
def test_check_orientation_errors(text, offset):
    with pytest.raises(SceneParseError) as info:
        check_orientation_vector(text, PL_VEC)
    assert info.value.code == PL_VEC + offset


@pytest.mark.parametrize(
    "fields, expected, result",
    [
        (["A", "0.2", "255,255,255\n"], 3, True),
        (["A", "0.2", "255,255,255", "\n"], 3, True),
        (["A", "0.2"], 3, False),
        (["A", "0.2", "1,1,1", "x"], 3, False),
        (["A", "\n"], 2, False),
    ],
)
def test_correct_amount_of_fields(fields, expected, result):
    assert correct_amount_of_fields(fields, expected) is result


def test_tracker_rejects_duplicates():
    tracker = IdentifierTracker()
    tracker.register("A")
    with pytest.raises(SceneParseError) as info:
        tracker.register("A\n")
    assert info.value.code == ErrorCode.UNIQUE_ELEM


def test_tracker_allows_repeated_objects_and_completes():
    tracker = IdentifierTracker()
    for ident in ("sp", "sp", "pl\n", "cy", "A", "C\n", None):
        tracker.register(ident)
    assert tracker.complete() is False
    tracker.register("L")
    assert tracker.complete() is True


def test_check_file_missing(tmp_path):
    with pytest.raises(SceneFileError) as info:
        check_file(tmp_path / "missing.rt")
    assert info.value.code == ErrorCode.FILE_ACCESS


def test_check_file_wrong_extension(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text("A 0.2 255,255,255\n")
    with pytest.raises(SceneFileError) as info:
        check_file(path)
    assert info.value.code == ErrorCode.FILE_EXTENSION


def test_check_file_ok(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text("A 0.2 255,255,255\n")
    assert check_file(str(path)) == path