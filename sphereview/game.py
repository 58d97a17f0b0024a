"""The interactive viewer: window, input, camera movement and drawing."""

from __future__ import annotations

import math
import time
from typing import Iterable

from .scene import default_scene, upload_scene
from .shader_util import _set_uniform, load_shader
from .vec import Vec3

QUAD_VERTICES = (-1.0, 1.0, 1.0, 1.0, 1.0, -1.0, -1.0, -1.0)
QUAD_INDICES = (0, 1, 2, 2, 3, 0)
VERTEX_SHADER_PATH = "shaders/vertex.glsl"
FRAGMENT_SHADER_PATH = "shaders/fragment.glsl"
PITCH_LIMIT = 89.0
FPS_INTERVAL_MS = 1000


class Game:
    """A fly-through viewer of the ray-traced sphere scene."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.camera_pos = Vec3()
        self.yaw = -90.0
        self.pitch = 0.0
        self.move_speed = 2.5
        self.mouse_sensitivity = 0.1
        self.frame_count = 0
        self.running = False
        self.spheres = default_scene()
        self.window = None
        self._shader = None
        self._quad = None
        self._keys = None
        self._key_codes: dict[str, int] = {}
        self._prev_time: int | None = None
        self._fps_timer: int | None = None
        self._frame = 0

    def init(self, title) -> None:
        """Open the window, build the screen quad and load the shaders."""
        try:
            import pyglet
            from pyglet import gl
            from pyglet.window import key

            config = gl.Config(
                major_version=3, minor_version=3, forward_compatible=True, double_buffer=True
            )
            window = pyglet.window.Window(
                self.width, self.height, caption=title, resizable=True, config=config
            )
        except Exception as exc:
            raise RuntimeError(f"Failed to create window: {exc}") from exc

        self.window = window
        shader = load_shader(VERTEX_SHADER_PATH, FRAGMENT_SHADER_PATH)
        attribute = next(iter(shader.attributes), None)
        if attribute is None:
            raise RuntimeError("vertex shader declares no input attribute")
        self._quad = shader.vertex_list_indexed(
            4, gl.GL_TRIANGLES, QUAD_INDICES, **{attribute: ("f", QUAD_VERTICES)}
        )
        self._shader = shader

        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)

        window.set_exclusive_mouse(True)
        self._keys = key.KeyStateHandler()
        window.push_handlers(self._keys)
        window.push_handlers(on_close=self._on_close, on_mouse_motion=self._on_mouse_motion)
        self._key_codes = {"w": key.W, "a": key.A, "s": key.S, "d": key.D}

        self._prev_time = None
        self._fps_timer = None
        self.frame_count = 0
        self.running = True

    def _on_close(self) -> bool:
        self.stop()
        return True

    def _on_mouse_motion(self, x, y, dx, dy) -> None:
        # Window y grows upwards; look() takes downward-positive motion.
        self.look(dx, -dy)

    def look(self, xrel, yrel) -> None:
        """Turn the view by a relative mouse motion (y grows downwards)."""
        self.yaw += xrel * self.mouse_sensitivity
        pitch = self.pitch - yrel * self.mouse_sensitivity
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))

    def front(self) -> Vec3:
        """Return the unit viewing direction for the current yaw and pitch."""
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        return Vec3(math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch))

    def _pressed_keys(self) -> set[str]:
        if self._keys is None:
            return set()
        return {name for name, code in self._key_codes.items() if self._keys[code]}

    def update(self, pressed: Iterable[str] | None = None, current_ms: int | None = None):
        """Move the camera for the held keys; return a status line once a second."""
        if pressed is None:
            pressed = self._pressed_keys()
        if current_ms is None:
            current_ms = time.monotonic_ns() // 1_000_000
        held = {name.lower() for name in pressed}

        if self._prev_time is None:
            self._prev_time = current_ms
        delta = (current_ms - self._prev_time) / 1000.0
        self._prev_time = current_ms

        velocity = self.move_speed * delta
        front = self.front()
        side_angle = math.radians(self.yaw) - math.pi / 2
        strafe = Vec3(math.cos(side_angle), 0.0, math.sin(side_angle))

        if "w" in held:
            self.camera_pos += front * velocity
        if "s" in held:
            self.camera_pos -= front * velocity
        if "a" in held:
            self.camera_pos -= strafe * velocity
        if "d" in held:
            self.camera_pos += strafe * velocity

        self.frame_count += 1
        if self._fps_timer is None:
            self._fps_timer = current_ms
        if current_ms - self._fps_timer >= FPS_INTERVAL_MS:
            line = self.status_line()
            self.frame_count = 0
            self._fps_timer = current_ms
            return line
        return None

    def status_line(self) -> str:
        """Describe the frame rate and camera state."""
        x, y, z = self.camera_pos.as_tuple()
        return (
            f"FPS: {self.frame_count} | Camera: ({x:g}, {y:g}, {z:g})"
            f" | Yaw: {self.yaw:g} | Pitch: {self.pitch:g}"
        )

    def stop(self) -> None:
        """Ask the main loop to finish."""
        self.running = False

    def render(self) -> None:
        """Draw one frame of the scene and present it."""
        if self.window is None or self._shader is None or self._quad is None:
            raise RuntimeError("the game must be initialised before rendering")
        from pyglet import gl

        self.window.switch_to()
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        shader = self._shader
        shader.use()
        upload_scene(shader, self.spheres)
        _set_uniform(shader, "uFrame", float(self._frame))
        self._frame += 1
        _set_uniform(shader, "WINDOW", (float(self.width), float(self.height)))
        _set_uniform(shader, "uCameraOrigin", self.camera_pos.as_tuple())
        _set_uniform(shader, "uViewportHeight", 2.0)
        _set_uniform(shader, "uFocalLength", 1.0)
        self._quad.draw(gl.GL_TRIANGLES)
        self.window.flip()