# rrt

A small ray tracer written in plain Python with no third-party dependencies.
It casts one ray per pixel through a pinhole camera. Objects that a ray hits are
coloured by their surface normal, and every pixel where nothing is hit shows a
sky gradient. Each image is rendered many times, each time with a random
sub-pixel offset, and the results are averaged to smooth the edges
(supersampling anti-aliasing). The samples are split among a pool of worker
threads. The output is a plain-text PPM (`P3`) image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rrt
```

This command renders the default scene to `result.ppm` in the current directory.
The scene is a sphere of radius 0.5, centred at (0, 0, -1), under a sky. The
image is 640×480 and each pixel gets 100 samples. Any viewer that reads PPM
files can open the result.

Options:

- `--samples N`: the number of samples per pixel. The default is 100.
- `--output PATH`: the file to write. The default is `result.ppm`.
- `--workers N`: the number of worker threads. The default is the CPU count.
- `--width N`, `--height N`: override the image size. The camera's pixel size
  stays the same, so a different size shows a larger or smaller part of the view.
- `--verbose`: turn on debug logging.

All numeric options must be positive integers.

Rendering runs in pure Python and is slow. At the full 640×480 size, use a small
`--samples` value, or a smaller `--width` and `--height`, to see a result
quickly.

## Library use

```python
from rrt.renderer import new_skied_world
from rrt.sphere import NormalVectorVisualizedSphere
from rrt.types import PixelF64, Vec3

sphere = NormalVectorVisualizedSphere(center=Vec3(0.0, 0.0, -1.0), radius=0.5)
renderer = new_skied_world([sphere], PixelF64)
image = renderer.render(samples=16, path="sphere.ppm", workers=4)
```

`Renderer.render(samples, path="result.ppm", workers=None)` averages `samples`
jittered images, writes the result to `path` and returns it as an `Image`.

- A `samples` of 0 raises `RuntimeError`.
- A negative `samples` raises `ValueError`.
- A `workers` below 1 raises `ValueError`.

Other ready-made renderers in `rrt.renderer` all use a 640×480 camera:

- `new_demo_renderer(pixel_type)`: the sky gradient only.
- `new_sphere_renderer(pixel_type)`: a solid black sphere against the sky.
- `new_norm_visualized_sphere_renderer(pixel_type)`: a single sphere coloured by
  its surface normals.

### Building blocks

- `rrt.types`:
  - `Vec3` is an immutable 3-vector. It has `dot`, `norm`, `norm_squared`,
    `normalize` and `scale`, and supports `+`, `-`, negation and
    multiplication by a number.
  - `PixelU8` stores 8-bit integer channels. Multiplying it clamps each
    channel to 0–255. Adding two pixels whose channels go past 255 raises
    `OverflowError`.
  - `PixelF64` stores float channels, nominally in the range 0 to 1.
  - Both pixel types provide `from_rgb_normalized`, `from_rgb8`, `black` and
    `from_pixel`.
- `rrt.ppm.Image(width, height, pixel_type)`: a grid of pixels that starts black.
  - `set_pixel` and `get_pixel` raise `IndexError` for a position outside the
    image.
  - Iterating over the image yields `(x, y, pixel)` row by row, and
    `coordinates()` yields the positions in the same order.
  - `*=` scales every pixel.
  - `+=` adds another image pixel by pixel, and raises `ValueError` if the
    shapes differ.
  - `write(stream)` writes P3 text to an open stream, and `save(path)` writes it
    to a file.
- `rrt.ray.Ray(origin, direction)`: `at(t)` returns the point the ray reaches at
  time `t`.
- `rrt.scene`:
  - `Camera` has `get_image(scene, rnd_x, rnd_y)`, which renders one sample, and
    `pixel_position(x, y)`.
  - The scenes are `DemoSkyScene`, `AbsoluteSphereScene`,
    `NormVectorVisualizedSphereScene` and `SkiedWorld`.
  - `SkiedWorld` returns the colour of the nearest `Hittable` object the ray
    hits, or the sky colour if the ray hits nothing.
- `rrt.sphere.NormalVectorVisualizedSphere`: a hittable sphere coloured by its
  outward normal.

To add your own kind of object, subclass `rrt.scene.Hittable` and implement
`try_hit(ray, t1, t2)`. It must return a `HitEvent` for the earliest hit with
`t1 <= t < t2`, or `None` if there is no such hit.

## Limitations

- The only shape available is the sphere.
- There are no materials, lights, shadows or reflections. Colour comes only
  from surface normals, a flat colour or the sky.
- Images can be written as P3 PPM only. The package cannot read images.
- Each worker thread uses a new, unseeded random generator, so two renders of
  the same scene can differ slightly.