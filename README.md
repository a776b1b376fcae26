# minirt

A small ray tracer. It reads a scene from a `.rt` file, traces one ray per
pixel from the camera, shades every hit with ambient and diffuse light
(optionally with specular highlights and distance fade), casts hard shadows
from a single point light, and writes the result as a binary PPM image.

## Installing

```
pip install .
```

## Rendering a scene

```
minirt scene.rt
```

This writes `scene.ppm` next to the scene file. Options:

- `-o PATH`, `--output PATH`: where to write the image (default: the scene
  path with its suffix replaced by `.ppm`).
- `--width N`, `--height N`: image size in pixels (default 1440 x 900). The
  aspect ratio of the camera follows from these.
- `--bonus`: turn on specular highlights and light fade with distance.

The scene file must end in `.rt` and be readable. If the command line or the
scene is invalid, `Error` and a message naming the problem are printed to
standard error; for a bad sphere, plane or cylinder the message is followed
by its number among elements of that kind (for example `Sphere number: 2`).
The command then exits with the error's numeric code (see
`minirt.errors.ErrorCode`); on success it exits with 0.

## What it does not do

The renderer does not open a window or show the image on screen, and there
is no interactive viewer: each run renders one image file and exits.

## Scene files

One element per line; fields are separated by spaces or tabs; empty lines
are ignored, and a word starting with `#` and everything after it on the
line are ignored. `A`, `C` and `L` must each appear exactly once.

```
# ambient: ratio [0,1], colour
A 0.2 255,255,255
# camera: position, normalised direction, horizontal FOV [0,180]
C -50,0,20 0,0,1 70
# light: position, brightness [0,1], optional colour (white by default)
L -40,0,30 0.7 255,255,255
# plane: point, normal, colour
pl 0,0,0 0,1,0 255,0,225
# sphere: centre, diameter, colour
sp 0,0,20 20 255,0,0
# cylinder: centre, axis, diameter, height, colour
cy 50,0,20.6 0,0,1 14.2 21.42 10,0,255
```

Colours are three integers in `0..255`. Direction vectors must have
components in `[-1, 1]` and a length of 1 (within 0.001). The camera's field
of view is a whole number of degrees.

## Using it from Python

```python
from minirt.parsing import load_scene
from minirt.render import render_scene

scene = load_scene("scene.rt", 1440 / 900)
image = render_scene(scene, 1440, 900, True, False)
image.save("scene.ppm")
```

`load_scene` checks the file and returns a prepared `Scene`;
`minirt.parsing.parse_lines` does the same for any iterable of lines.
`render_scene(scene, width, height, specular, fade)` returns an `Image`;
`Image.get_pixel(x, y)` gives a pixel as `0xRRGGBB`, `Image.to_ppm()` gives
the image as binary PPM data, and `Image.save(path)` writes it.
`minirt.render.render_pixel` renders a single pixel.

Parsing failures raise `SceneFileError` or `SceneParseError` from
`minirt.errors`; both carry a `code` and a `report()` method that returns
the text printed by the command.

Lower-level pieces are available too: `minirt.vector.Vec3`,
`minirt.intersect.find_intersection` and the `hit_*` functions, and
`minirt.shading` for camera rays, shadow rays and shading.

## Running the tests

```
pip install .[test]
pytest
```