"""Interactive viewer for a shader ray-traced sphere scene with a free-fly camera."""

__version__ = "0.1.0"
__all__ = ["__version__"]