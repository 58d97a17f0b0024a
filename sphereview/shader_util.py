"""Loading GLSL sources and linking them into a shader program."""

from __future__ import annotations

from pathlib import Path
from typing import Any


def _set_uniform(shader: Any, name: str, value: Any) -> None:
    """Assign a uniform, silently ignoring names the program does not expose."""
    available = getattr(shader, "uniforms", None)
    if available is not None and name not in available:
        return
    shader[name] = value


def read_shader_sources(vertex_path, fragment_path) -> tuple[str, str]:
    """Read the vertex and fragment shader sources from disk."""
    vertex_source = Path(vertex_path).read_text(encoding="utf-8")
    fragment_source = Path(fragment_path).read_text(encoding="utf-8")
    return vertex_source, fragment_source


def load_shader(vertex_path, fragment_path):
    """Compile both shaders and link them into a program."""
    vertex_source, fragment_source = read_shader_sources(vertex_path, fragment_path)

    from pyglet.graphics.shader import Shader, ShaderProgram

    vertex = Shader(vertex_source, "vertex")
    fragment = Shader(fragment_source, "fragment")
    try:
        return ShaderProgram(vertex, fragment)
    finally:
        vertex.delete()
        fragment.delete()