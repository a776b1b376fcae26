"""Command line entry point: render a ``.rt`` scene file to a PPM image."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .elements import DEFAULT_HEIGHT, DEFAULT_WIDTH
from .errors import ErrorCode, RTError, SceneFileError
from .parsing import load_scene
from .render import render_scene


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise SceneFileError(ErrorCode.USAGE, message)


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{text} is not a positive integer")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="minirt", description="Render a .rt scene to a PPM image.")
    parser.add_argument("scene", help="scene description file ending in .rt")
    parser.add_argument("-o", "--output", help="output image path (default: scene name with .ppm)")
    parser.add_argument("--width", type=_positive, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive, default=DEFAULT_HEIGHT)
    parser.add_argument(
        "--bonus", action="store_true", help="enable specular highlights and light fade"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the renderer; return the process exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
        scene = load_scene(args.scene, args.width / args.height)
        image = render_scene(scene, args.width, args.height, args.bonus, args.bonus)
        output = Path(args.output) if args.output else Path(args.scene).with_suffix(".ppm")
        image.save(output)
    except RTError as exc:
        sys.stderr.write(exc.report())
        return exc.exit_code
    except OSError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())