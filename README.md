# orbitengine

A small 2D engine built on pygame. It has affine 3x2 matrices,
parent/child transforms, keyboard edge detection, a frame clock, a render
manager with a text overlay and a bitmap renderer. A demo is included: an
earth orbits a sun and a moon orbits the earth.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
orbitengine-demo
```

Options:

- `--resources DIR`: the directory that holds `Sun.png`, `Earth.png` and
  `Moon.png` (default `../Resource`, relative to the working directory).
- `--width N`, `--height N`: the window size (default 1024 x 768).

If an image is missing, the demo stops with `FileNotFoundError`. If an image
cannot be read, it stops with `OSError`.

Controls:

| Key  | Action                                                    |
|------|-----------------------------------------------------------|
| R    | Start or stop the orbits                                  |
| T    | Reverse the direction of rotation                         |
| Y    | Switch between Unity-style (y up, origin at the centre) and screen coordinates |
| U    | Move the sun and the camera back to (0, 0)                |
| WASD | Move the camera                                           |

The sun and the earth rotate at 10% and 50% of a base speed of 360 degrees
per second. The moon is carried round by the earth.

## Using the engine

Transforms form a hierarchy. A child's world matrix is its local matrix
(scale, then rotation, then translation) composed with its parent's world
matrix:

```python
from orbitengine.transform import Matrix3x2, Transform

sun = Transform()
earth = Transform()
earth.parent = sun
earth.position = (0.0, 1000.0)
sun.rotation = 90.0

world = earth.to_world_matrix()
print(world.transform_point(0.0, 0.0))
```

`Matrix3x2` works on row vectors. It provides `identity()`, `scale()`,
`rotation()` (in degrees), `translation()` and `transform_point()`.
Matrices compose with `@`, and `a @ b` applies `a` first. `inverted()`
raises `ValueError` when a matrix is singular. `Transform.to_local_invert_matrix()`
and `to_world_invert_matrix()` return the identity in that case instead.

The other building blocks:

- `orbitengine.input.Input`: `update(pressed)` starts a new frame with the
  keys that are held. After that, `is_key_down`, `is_key_pressed` and
  `is_key_released` report on any key.
- `orbitengine.gametime.GameTime`: `init_time()`, `update_time()`, the
  `delta_time` property and `elapsed_time()`, in seconds. It takes an
  optional clock function (the default is `time.perf_counter`).
- `orbitengine.render_manager.RenderManager`: holds the target surface, the
  render list, the main camera and the bitmap transform. `render()` clears
  the target, draws each `Renderer` in order and then the help text.
  `load_bitmap()` loads an image file.
- `orbitengine.bitmap_renderer.BitmapRenderer`: draws one bitmap at its
  transform, seen through the main camera. It can offset the bitmap with
  `set_offset()`.
- `orbitengine.application.Application`: opens the window and runs the main
  loop. Subclass it and override `initialize`, `update` and `render`.
- `orbitengine.demo.DemoGameApp`: the orbit demo. `main()` is the entry
  point of the `orbitengine-demo` command.

## Limitations

Bitmaps are drawn with pygame's scale, flip and rotate operations. This
covers rotation, scaling and flipping only. A matrix with shear is not
reproduced exactly. The engine has no sound and no scene files. Scenes are
built in code.