# sphereview

An interactive viewer for a scene of spheres that is ray traced in a fragment
shader drawn over a full-screen quad. The Python side opens an OpenGL 3.3
window with pyglet, uploads the scene and camera as shader uniforms, and moves
a first-person camera with the mouse and the W, A, S and D keys.

## Installation

```
pip install .
```

It needs a display that supports OpenGL 3.3.

## Running

```
sphereview
```

Options:

| Option | Default | Meaning |
|--------|---------|---------|
| `--width` | `1920` | Window width in pixels (must be positive). |
| `--height` | `1080` | Window height in pixels (must be positive). |
| `--title` | `my title` | Window title. |

```
sphereview --help
```

The shaders are read from `shaders/vertex.glsl` and `shaders/fragment.glsl`,
relative to the current directory. If the window or the shaders cannot be set
up, the error is printed to standard error and the command exits with status
-1.

## What your shaders must provide

The vertex shader must declare at least one input attribute; the first one is
fed the 2D corners of the full-screen quad, from (-1, -1) to (1, 1).

Each frame the viewer sets these uniforms. A uniform the program does not
declare is skipped, so the fragment shader may use any subset of them:

| Uniform | Value |
|---------|-------|
| `sphere_count` | Number of spheres (5 in the default scene). |
| `sphere_centers` | Sphere centres, three floats each. |
| `sphere_radii` | Sphere radii. |
| `sphere_material` | Material per sphere: 0 Lambertian, 1 metal, 2 dielectric. |
| `sphere_albedo` | Colour per sphere, three floats each. |
| `sphere_fuzz` | Fuzz per sphere (used by metals). |
| `sphere_ref_idx` | Refractive index per sphere (used by dielectrics). |
| `uFrame` | Frame number as a float, counting up from 0. |
| `WINDOW` | Window size given at start-up, as two floats. |
| `uCameraOrigin` | Camera position. |
| `uViewportHeight` | Always 2.0. |
| `uFocalLength` | Always 1.0. |

The viewer does not pass the yaw and pitch to the shader while it runs; only
the camera position follows the movement.

## Controls

| Input | Action |
|-------|--------|
| Mouse | Look around. The mouse is captured by the window. Pitch is clamped to ±89°. |
| W / S | Move forward or back along the view direction. |
| A / D | Strafe sideways in the horizontal plane. |
| Close the window | Quit. |

The camera starts at the origin with a yaw of -90° and moves at 2.5 units per
second; mouse motion turns it by 0.1° per pixel. About once a second the console
shows a line such as:

```
FPS: 60 | Camera: (0, 0, -1.2) | Yaw: -90 | Pitch: 0
```

## The scene

`sphereview.scene.default_scene()` returns five `Sphere` values:

| Centre | Radius | Material | Albedo | Notes |
|--------|--------|----------|--------|-------|
| (0, 0, -1) | 0.5 | Lambertian | (0.8, 0.3, 0.3) | red |
| (-1, 0, -1.5) | 0.4 | Metal | (0.8, 0.8, 0.8) | silver, fuzz 0.1 |
| (1, 0.2, -2) | 0.3 | Dielectric | (1, 1, 1) | glass, refractive index 1.5 |
| (0.5, -0.2, -0.5) | 0.2 | Metal | (0.7, 0.7, 0.2) | gold, fuzz 0.3 |
| (0, -100.5, -1) | 100 | Lambertian | (0.8, 0.8, 0) | ground |

## Using it as a library

- `sphereview.vec.Vec3` – a frozen three-float vector with `+`, `-`, scaling,
  negation and `as_tuple()`.
- `sphereview.scene` – `Material` (an `IntEnum`), `Sphere`, `default_scene()` and
  `upload_scene(shader, spheres)`, which sets the sphere uniforms listed above.
- `sphereview.camera.Camera` – viewport settings; `set_window_size(width, height)`
  derives the aspect ratio and viewport width (and raises `ValueError` for a
  non-positive size), and `upload_to_shader(shader)` sets `uCameraOrigin`,
  `uViewportHeight`, `uFocalLength`, `uYaw` and `uPitch`.
- `sphereview.shader_util` – `read_shader_sources(vertex_path, fragment_path)`
  returns both sources as text; `load_shader(vertex_path, fragment_path)`
  compiles and links them into a pyglet `ShaderProgram`.
- `sphereview.game.Game` – the viewer itself.

The camera logic of `Game` works without a window:

```python
from sphereview.game import Game

game = Game(1280, 720)
game.look(50, 0)                      # turn right by 5 degrees
game.update({"w"}, current_ms=0)      # first call only sets the clock
report = game.update({"w"}, current_ms=1000)
print(game.camera_pos, game.front())
print(report)                         # the status line, once a second has passed
```

`update(pressed, current_ms)` returns the status line when at least a second has
passed since the last one, and `None` otherwise. Called with no arguments it
reads the held keys from the window and the time from a monotonic clock.
`init(title)` opens the window and loads the shaders, `render()` draws a frame
and `stop()` ends the main loop.

## What it does not do

The package ships no GLSL shaders: the ray tracing itself lives in the shader
files you provide. The scene is fixed to `default_scene()` when run as a
command, there is no key to quit other than closing the window, and resizing
the window does not change the `WINDOW` uniform.