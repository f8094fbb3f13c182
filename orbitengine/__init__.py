"""A small 2D engine with hierarchical transforms, pygame rendering and an orbit demo."""

__version__ = "0.1.0"
__all__ = [
    "application",
    "bitmap_renderer",
    "demo",
    "gametime",
    "input",
    "render_manager",
    "transform",
]