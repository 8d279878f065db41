"""A small software rasterizer: vectors, colours, meshes, images, a depth-buffered canvas and shaded triangle drawing."""

__version__ = "0.1.0"

__all__ = [
    "colour",
    "image",
    "mesh",
    "renderer",
    "rng",
    "timer",
    "triangle",
    "vec4",
    "window",
]