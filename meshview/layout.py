"""Vertex attribute layouts, draw modes and point/line settings for rendering buffers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from meshview.buffer import BufferType, VertexBuffer

FLOAT_SIZE = 4
"""Size in bytes of one float32 component."""

_COMPONENTS = 3


class DrawMode(enum.Enum):
    """Primitive used to draw a buffer."""

    TRIANGLES = "triangles"
    LINES = "lines"
    POINTS = "points"


@dataclass(frozen=True)
class Attribute:
    """One per-vertex attribute inside an interleaved float32 buffer.

    ``offset`` and ``stride`` are in bytes.
    """

    name: str
    offset: int
    components: int
    stride: int


def attribute_layout(buffer_type: BufferType) -> tuple[Attribute, ...]:
    """Attributes of an interleaved buffer of the given type, in storage order.

    Positions come first, then normals, then colors, matching
    :meth:`VertexBuffer.interleaved`.
    """
    names = ["vertex"]
    if buffer_type in (BufferType.MATERIAL_NORMAL, BufferType.COLOR_NORMAL):
        names.append("vnormal")
    if buffer_type in (BufferType.COLOR, BufferType.COLOR_NORMAL):
        names.append("vcolor")
    stride = len(names) * _COMPONENTS * FLOAT_SIZE
    return tuple(
        Attribute(name, slot * _COMPONENTS * FLOAT_SIZE, _COMPONENTS, stride)
        for slot, name in enumerate(names)
    )


def draw_mode(buffer: VertexBuffer) -> DrawMode:
    """Triangles for faces, lines for polylines, points otherwise."""
    if buffer.has_faces:
        return DrawMode.TRIANGLES
    if buffer.has_polylines:
        return DrawMode.LINES
    return DrawMode.POINTS


class ShaderSettings:
    """Point size, line width and model-view-projection matrix for drawing."""

    def __init__(self, point_size: float = 4.0, line_width: float = 2.0) -> None:
        self._point_size = 0.0
        self._line_width = 0.0
        self.point_size = point_size
        self.line_width = line_width
        self.mvp_matrix: np.ndarray = np.identity(4, dtype=np.float32)

    @property
    def point_size(self) -> float:
        """Point size in pixels; negative values are stored as zero."""
        return self._point_size

    @point_size.setter
    def point_size(self, value: float) -> None:
        self._point_size = max(0.0, float(value))

    @property
    def line_width(self) -> float:
        """Line width in pixels; negative values are stored as zero."""
        return self._line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        self._line_width = max(0.0, float(value))