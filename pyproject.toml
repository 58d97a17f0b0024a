[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphereview"
version = "0.1.0"
description = "Interactive viewer for a shader ray-traced sphere scene with a free-fly camera"
requires-python = ">=3.10"
keywords = ["ray tracing", "opengl", "shader", "spheres", "camera", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sphereview = "sphereview.main:main"

[tool.hatch.build.targets.wheel]
packages = ["sphereview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
