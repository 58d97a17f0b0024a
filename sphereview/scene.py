"""The spheres of the scene and their upload to the shader."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable

from .shader_util import _set_uniform
from .vec import Vec3


class Material(IntEnum):
    """Surface models understood by the fragment shader."""

    LAMBERTIAN = 0
    METAL = 1
    DIELECTRIC = 2


@dataclass(frozen=True)
class Sphere:
    """A sphere with its surface material."""

    center: Vec3
    radius: float
    material: Material = Material.LAMBERTIAN
    albedo: Vec3 = Vec3(1.0, 1.0, 1.0)
    fuzz: float = 0.0
    ref_idx: float = 0.0


def default_scene() -> tuple[Sphere, ...]:
    """Return the built-in scene: four spheres resting on a ground sphere."""
    return (
        Sphere(Vec3(0.0, 0.0, -1.0), 0.5, Material.LAMBERTIAN, Vec3(0.8, 0.3, 0.3)),
        Sphere(Vec3(-1.0, 0.0, -1.5), 0.4, Material.METAL, Vec3(0.8, 0.8, 0.8), fuzz=0.1),
        Sphere(Vec3(1.0, 0.2, -2.0), 0.3, Material.DIELECTRIC, Vec3(1.0, 1.0, 1.0), ref_idx=1.5),
        Sphere(Vec3(0.5, -0.2, -0.5), 0.2, Material.METAL, Vec3(0.7, 0.7, 0.2), fuzz=0.3),
        Sphere(Vec3(0.0, -100.5, -1.0), 100.0, Material.LAMBERTIAN, Vec3(0.8, 0.8, 0.0)),
    )


def _flatten(vectors: Iterable[Vec3]) -> tuple[float, ...]:
    return tuple(component for vector in vectors for component in vector.as_tuple())


def upload_scene(shader: Any, spheres: Iterable[Sphere]) -> None:
    """Write the sphere arrays and their count into a shader program."""
    spheres = tuple(spheres)
    _set_uniform(shader, "sphere_count", len(spheres))
    _set_uniform(shader, "sphere_centers", _flatten(s.center for s in spheres))
    _set_uniform(shader, "sphere_radii", tuple(s.radius for s in spheres))
    _set_uniform(shader, "sphere_material", tuple(int(s.material) for s in spheres))
    _set_uniform(shader, "sphere_albedo", _flatten(s.albedo for s in spheres))
    _set_uniform(shader, "sphere_fuzz", tuple(s.fuzz for s in spheres))
    _set_uniform(shader, "sphere_ref_idx", tuple(s.ref_idx for s in spheres))