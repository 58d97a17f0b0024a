"""A pinhole camera description uploaded to the ray-tracing shader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .shader_util import _set_uniform
from .vec import Vec3


@dataclass
class Camera:
    """Viewport geometry and orientation of the viewer."""

    aspect_ratio: float = 16.0 / 9.0
    viewport_height: float = 2.0
    focal_length: float = 1.0
    origin: Vec3 = field(default_factory=Vec3)
    yaw: float = 0.0
    pitch: float = 0.0
    viewport_width: float = field(default=0.0, init=False)
    window_width: int = field(default=0, init=False)
    window_height: int = field(default=0, init=False)

    def set_window_size(self, width: int, height: int) -> None:
        """Record the window size and derive the aspect ratio and viewport width."""
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.window_width = width
        self.window_height = height
        self.aspect_ratio = width / height
        self.viewport_width = self.viewport_height * self.aspect_ratio

    def upload_to_shader(self, shader: Any) -> None:
        """Write the camera uniforms into a shader program."""
        _set_uniform(shader, "uCameraOrigin", self.origin.as_tuple())
        _set_uniform(shader, "uViewportHeight", self.viewport_height)
        _set_uniform(shader, "uFocalLength", self.focal_length)
        _set_uniform(shader, "uYaw", self.yaw)
        _set_uniform(shader, "uPitch", self.pitch)