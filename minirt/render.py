"""Rendering a prepared scene into an RGB image, one traced ray per pixel."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .intersect import Intersection, find_intersection
from .scene import Scene
from .shading import camera_ray, compute_shadow_ray, shade

BACKGROUND = 0x000000


@dataclass
class Image:
    """A row-major image of ``0xRRGGBB`` pixel values."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size {self.width}x{self.height} must be positive")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [BACKGROUND] * size
        elif len(self.pixels) != size:
            raise ValueError(f"expected {size} pixels, got {len(self.pixels)}")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (``0xRRGGBB``) at pixel (x, y)."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the ``0xRRGGBB`` value at pixel (x, y)."""
        return self.pixels[self._index(x, y)]

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM (P6) file."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for pixel in self.pixels:
            body += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
        return header + bytes(body)

    def save(self, path: str | Path) -> Path:
        """Write the image to ``path`` as PPM and return the path."""
        path = Path(path)
        path.write_bytes(self.to_ppm())
        return path


def _is_shadowed(scene: Scene, ix: Intersection) -> bool:
    ray = compute_shadow_ray(ix, scene.light)
    blocker = find_intersection(ray.origin, ray.direction, scene.objects)
    return blocker is not None and blocker.t < ray.length


def render_pixel(
    scene: Scene,
    x: int,
    y: int,
    width: int,
    height: int,
    specular: bool = False,
    fade: bool = False,
) -> int:
    """Trace the camera ray through pixel (x, y) and return its ``0xRRGGBB`` colour."""
    direction = camera_ray(x, y, scene.camera, width, height)
    ix = find_intersection(scene.camera.position, direction, scene.objects)
    if ix is None:
        return BACKGROUND
    if _is_shadowed(scene, ix):
        return ix.obj.color_in_amb.to_hex()
    return shade(scene, ix, specular, fade).shaded.to_hex()


def render_scene(
    scene: Scene,
    width: int,
    height: int,
    specular: bool = False,
    fade: bool = False,
) -> Image:
    """Render every pixel of the scene into a new image."""
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            image.set_pixel(x, y, render_pixel(scene, x, y, width, height, specular, fade))
    return image