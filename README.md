# softraster

A small software rasterizer in pure Python. It draws lit, depth-tested
triangles into an in-memory RGB canvas. It needs no GPU and no windowing system.

## What is in it

- `softraster.vec4.Vec4`: a 4-component vector with `x`, `y`, `z` and `w`.
  `w` defaults to 1. It supports indexing, scaling, `+` and `-`. Both `+` and
  `-` give `w = 0`. It also has `Vec4.dot`, `Vec4.cross`, `normalise()` and
  `divide_w()`, which does the perspective division.
- `softraster.colour.Colour` and `Channel`: floating-point RGB colours.
  - They can be scaled, multiplied component-wise and added.
  - `clamp()` caps each component at 1.
  - `to_rgb()` returns three 0–255 values.
- `softraster.rng.RandomNumberGenerator`: a Mersenne Twister random source.
  - `RandomNumberGenerator.get_instance()` returns one shared instance. You can also seed your own instance.
  - `random_int(low, high)` is inclusive at both ends.
  - `random_float(low, high)` returns a value in `[low, high)`.
- `softraster.mesh.Mesh` and `Vertex`: meshes of vertices and index triangles.
  - Build them by hand with `add_vertex` and `add_triangle`.
  - Or generate them with `Mesh.make_rectangle`, `Mesh.make_cube` and `Mesh.make_sphere`.
  - `make_sphere` raises `ValueError` for fewer than 2 latitude or 3 longitude divisions.
  - Every mesh carries `ka` and `kd` coefficients and a `world` attribute, which you may fill.
- `softraster.window.Window`: a width × height RGB back buffer.
  - Drawing: `draw`, `draw_index`, `pixel`, `clear` and `present`.
  - Keyboard and mouse state (`MouseButton`, `MouseButtonState`): you feed it events with `key_down`, `key_up`, `mouse_down`, `mouse_up`, `mouse_move` and `mouse_wheel`.
  - `present()` calls the `on_present` callback you supplied.
- `softraster.image.Image`: 8-bit RGB or RGBA pixel data.
  - `Image.load(filename)` reads a file through Pillow. Any other pixel mode raises `ValueError`.
  - `at`, `channel_at` and `alpha_at` clamp coordinates to the image.
  - The `*_unchecked` variants do not clamp.
- `softraster.renderer`:
  - `Renderer` holds a `canvas` (a `Window`) and a `zbuffer`. The `zbuffer` is a `DepthBuffer`, indexed as `zbuffer[x, y]` and cleared to 1.0.
  - It also holds the projection parameters `fov`, `aspect`, `near` and `far`.
  - `Light` is a directional light with `omega_i`, `diffuse` and `ambient`.
- `softraster.triangle.Triangle` and `Vec2`: barycentric rasterisation of screen-space triangles.
  - Per-pixel colour, depth and normal are interpolated.
  - There is a depth test and ambient plus diffuse shading.
  - Triangles with screen area under 1 are skipped.
- `softraster.timer.Timer`: `dt()` returns the seconds since the last reset and then restarts.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short example

```python
from softraster.colour import Colour
from softraster.mesh import Vertex
from softraster.renderer import Light, Renderer
from softraster.triangle import Triangle
from softraster.vec4 import Vec4

frames = []
renderer = Renderer(320, 240, on_present=frames.append)
light = Light(Vec4(0.0, 1.0, 1.0, 0.0), Colour(1.0, 1.0, 1.0), Colour(0.2, 0.2, 0.2))

facing = Vec4(0.0, 0.0, 1.0, 0.0)
red = Colour(1.0, 0.0, 0.0)
tri = Triangle(
    Vertex(Vec4(50.0, 50.0, 0.5), facing, red),
    Vertex(Vec4(250.0, 50.0, 0.5), facing, red),
    Vertex(Vec4(150.0, 200.0, 0.5), facing, red),
)

renderer.clear()
tri.draw(renderer, light, ka=0.75, kd=0.75)
renderer.present()

print(renderer.canvas.pixel(150, 100))
```

Vertex positions given to `Triangle` are already in screen space: x and y are
pixels, with y pointing down. z is a depth, and a pixel is drawn only where that
depth is above 0.001 and nearer than the depth already stored.

## What it does not do

- **No transforms.** There is no matrix type and no projection or camera
  transform. `Renderer` only stores the `fov`, `aspect`, `near` and `far` values.
  Turning mesh vertices into screen-space positions is left to the caller.
- **No display or input handling.** Nothing opens a window on screen or reads
  the keyboard, mouse or game controllers. `Window` holds pixels and the input
  state you give it, and `present()` only calls your callback.
- **No audio.**
- **No command-line program or demo scenes.**