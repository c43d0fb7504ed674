"""A small ray tracer: vectors, pixels, scenes, spheres and a renderer that writes PPM images."""

__version__ = "0.1.0"