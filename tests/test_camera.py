import pytest

from sphereview.camera import Camera
from sphereview.vec import Vec3


def test_defaults():
    camera = Camera()
    assert camera.aspect_ratio == pytest.approx(16.0 / 9.0)
    assert camera.viewport_height == 2.0
    assert camera.focal_length == 1.0
    assert camera.origin == Vec3()


def test_set_window_size_derives_aspect():
    camera = Camera()
    camera.set_window_size(1920, 1080)
    assert (camera.window_width, camera.window_height) == (1920, 1080)
    assert camera.aspect_ratio * 1080 == pytest.approx(1920)


def test_viewport_width_follows_aspect():
    camera = Camera(viewport_height=3.0)
    camera.set_window_size(640, 480)
    assert camera.viewport_width == pytest.approx(camera.viewport_height * camera.aspect_ratio)
    assert camera.viewport_width / camera.viewport_height == pytest.approx(640 / 480)


@pytest.mark.parametrize("size", [(0, 100), (100, 0), (-5, 10)])
def test_set_window_size_rejects_non_positive(size):
    with pytest.raises(ValueError):
        Camera().set_window_size(*size)


def test_upload_to_shader_writes_all_uniforms():
    camera = Camera(origin=Vec3(1.0, 2.0, 3.0), yaw=10.0, pitch=-5.0)
    uniforms = {}
    camera.upload_to_shader(uniforms)
    assert uniforms == {
        "uCameraOrigin": (1.0, 2.0, 3.0),
        "uViewportHeight": 2.0,
        "uFocalLength": 1.0,
        "uYaw": 10.0,
        "uPitch": -5.0,
    }


class _Program(dict):
    def __init__(self, names):
        super().__init__()
        self.uniforms = set(names)


def test_upload_skips_uniforms_the_program_lacks():
    program = _Program({"uYaw", "uPitch"})
    Camera(yaw=7.0, pitch=3.0).upload_to_shader(program)
    assert dict(program) == {"uYaw": 7.0, "uPitch": 3.0}