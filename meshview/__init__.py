"""Mesh connectivity, default logo mesh, vertex buffers, draw layouts, viewer state, mouse interaction and camera navigation."""

__version__ = "0.1.0"

__all__ = [
    "buffer",
    "faces",
    "interaction",
    "layout",
    "logo",
    "navigation",
    "viewer_data",
]