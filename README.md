# minirt

A small ray tracer that reads a scene description in the `.rt` format and
renders it with Phong shading (ambient, diffuse and specular light, plus hard
shadows) to a binary PPM (P6) image. Rays that miss every object show a
white-to-blue sky gradient.

It has no dependencies outside the Python standard library and needs
Python 3.10 or later.

## Installing

```
pip install .
```

## Rendering a scene

```
minirt scene.rt
minirt scene.rt -o picture.ppm --width 400 --height 300
```

Options:

- `-o`, `--output`: the image file to write. By default it is the scene path
  with its suffix changed to `.ppm`.
- `--width`, `--height`: the image size in pixels (default 800 by 600; each
  must be at least 2).

The command exits with status 0 on success. On a bad scene, an unreadable file
or an impossible image size it prints `Error` and a message on standard error
and exits with status 1.

## The scene format

The scene file name must end in `.rt`. Each non-empty line describes one
element; blank lines are skipped. Fields are separated by spaces, tabs,
vertical tabs, form feeds or carriage returns. Vectors and colours are
comma-separated triples with no spaces inside them.

| Identifier | Fields |
|------------|--------|
| `A`  | ambient ratio `[0,1]`, colour `R,G,B` |
| `C`  | position `x,y,z`, direction `x,y,z` (each component in `[-1,1]`), horizontal field of view in degrees `[0,180)` |
| `L`  | position `x,y,z`, brightness ratio `[0,1]`, colour `R,G,B` |
| `sp` | centre `x,y,z`, diameter, colour `R,G,B` |
| `pl` | point `x,y,z`, normal `x,y,z` (each component in `[-1,1]`), colour `R,G,B` |
| `cy` | base centre `x,y,z`, axis `x,y,z` (each component in `[-1,1]`), diameter, height, colour `R,G,B` |

Rules that are checked:

- A scene holds exactly one `A`, one `C` and one `L`; any other identifier
  is rejected.
- Each line must have exactly the number of fields shown above.
- Colour channels are integers from 0 to 255.
- Numbers are plain decimals such as `-1.25` or `.5`; exponents are not
  accepted.
- Direction and normal vectors must not be zero and are normalised when read.
- Diameters and heights must not be negative.

Cylinders are open tubes: the side runs from the base centre along the axis
for the given height, with no end caps.

Example:

```
A 0.2 255,255,255
C 0,0,20 0,0,-1 70
L -10,10,10 0.7 255,255,255
sp 0,0,0 6 200,40,40
pl 0,-3,0 0,1,0 120,120,120
cy 5,-3,0 0,1,0 2 5 40,120,220
```

## Earth scene generator

```
miniearth <latitude> <S/N> <longitude> <W/E>
miniearth 37.5 N 127 E > earth.rt
```

This prints to standard output an `.rt` scene whose camera sits above the
given geographic position, looking down at a globe of radius 10 at the origin,
with a light beside the camera. Latitude must lie in `[0, 90)` and longitude
in `[0, 180)`; `S` and `W` select the southern and western hemispheres.

## Using it as a library

```python
from minirt.parse import read_scene_elements
from minirt.scene import build_scene
from minirt.render import render, write_ppm

elements = read_scene_elements("scene.rt")
scene = build_scene(elements, 800, 600)
pixels = render(scene)
with open("scene.ppm", "wb") as stream:
    write_ppm(pixels, stream)
```

- `minirt.vector`: the immutable `Vec3` (with `dot`, `cross`, `mult`,
  `length`, `unit`, `minimum`, `up`) and `coordinate_system`.
- `minirt.textnum`: strict number parsing (`parse_float`, `parse_int`) and
  `split_fields`.
- `minirt.parse`: `parse_line`, `parse_lines`, `read_scene_elements` and the
  range-checked `parse_double`, `parse_int_vector` and `parse_double_vector`.
  Malformed scenes raise `SceneError`.
- `minirt.scene`: the `Scene`, `Camera`, `Ambient`, `Light`, `Sphere`, `Plane`
  and `Cylinder` classes, `make_camera` and `build_scene`.
- `minirt.trace`: `Ray`, `HitRecord`, `primary_ray`, the intersection tests
  `intersect` and `closest_hit`, and shading with `illuminate` and
  `trace_ray`.
- `minirt.render`: `render`, which returns rows of `0xRRGGBB` integers with
  the top row first, `pack_color`, `color_channel` and `write_ppm`.
- `minirt.earth`: `earth_scene`, which returns the generator's scene text.

## What it does not do

- It writes image files only; it does not open a window or display the
  picture.
- It renders plain-coloured spheres, planes and cylinders only. There are no
  textures, bump maps or other shapes, and a scene holds a single light.
- The scene printed by `miniearth` describes textured, bump-mapped spheres
  (lines such as `sp 0,0,0 10 bm ...`). `minirt` cannot render that scene and
  rejects those lines as having too many fields.

## Running the tests

```
pip install ".[test]"
pytest
```