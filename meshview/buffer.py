"""Flattened vertex buffers built from indexed face sets and line sets."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np


class BufferType(enum.Enum):
    """Which per-vertex attributes a buffer carries besides positions."""

    MATERIAL = 0
    MATERIAL_NORMAL = 1
    COLOR = 2
    COLOR_NORMAL = 3

    @classmethod
    def of(cls, has_color: bool, has_normal: bool) -> "BufferType":
        if has_color:
            return cls.COLOR_NORMAL if has_normal else cls.COLOR
        return cls.MATERIAL_NORMAL if has_normal else cls.MATERIAL


_EMPTY = np.zeros((0, 3), dtype=np.float32)


@dataclass(frozen=True)
class VertexBuffer:
    """Unindexed triangles, line segments or points ready for drawing."""

    buffer_type: BufferType
    vertices: np.ndarray
    normals: np.ndarray
    colors: np.ndarray
    has_faces: bool = False
    has_polylines: bool = False
    has_color: bool = False
    has_normal: bool = False

    def has_points(self) -> bool:
        """True when the buffer holds neither faces nor polylines."""
        return not (self.has_faces or self.has_polylines)

    def number_of_vertices(self) -> int:
        return len(self.vertices)

    def number_of_normals(self) -> int:
        return len(self.normals)

    def number_of_colors(self) -> int:
        return len(self.colors)

    def interleaved(self) -> np.ndarray:
        """Flat float32 array: position, then normal, then color, per vertex."""
        blocks = [self.vertices]
        if len(self.normals):
            blocks.append(self.normals)
        if len(self.colors):
            blocks.append(self.colors)
        return np.hstack(blocks).astype(np.float32).ravel()


def _rows(values: Sequence[float], what: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32).ravel()
    if array.size % 3:
        raise ValueError(f"{what} length {array.size} is not a multiple of 3")
    return array.reshape(-1, 3)


def _row(table: np.ndarray, index: int, what: str) -> np.ndarray:
    if not 0 <= index < len(table):
        raise IndexError(f"{what} index {index} out of range")
    return table[index]


def _index(indices: Sequence[int], position: int, what: str) -> int:
    if not 0 <= position < len(indices):
        raise IndexError(f"{what} has no entry {position}")
    return int(indices[position])


def _runs(coord_index: Sequence[int]) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` of each run closed by a negative separator."""
    start = 0
    for position, value in enumerate(coord_index):
        if value < 0:
            yield start, position
            start = position + 1


def _stack(rows: list[np.ndarray]) -> np.ndarray:
    return np.array(rows, dtype=np.float32).reshape(-1, 3) if rows else _EMPTY.copy()


def build_face_set_buffer(
    coord: Sequence[float],
    coord_index: Sequence[int],
    normal: Sequence[float] = (),
    normal_index: Sequence[int] = (),
    normal_per_vertex: bool = True,
    color: Sequence[float] = (),
    color_index: Sequence[int] = (),
    color_per_vertex: bool = True,
) -> VertexBuffer:
    """Triangulate every face as a fan and emit its corners in reverse order.

    Without faces the coordinates are emitted as a point cloud, with normals
    and colors taken one per coordinate.
    """
    points = _rows(coord, "coord")
    normals = _rows(normal, "normal")
    colors = _rows(color, "color")
    coord_index = [int(i) for i in coord_index]

    has_faces = any(i < 0 for i in coord_index)
    has_normal = len(normals) > 0
    has_color = len(colors) > 0

    out_v: list[np.ndarray] = []
    out_n: list[np.ndarray] = []
    out_c: list[np.ndarray] = []

    if has_faces:
        for face, (start, end) in enumerate(_runs(coord_index)):
            face_normal = face_color = None
            if has_normal and not normal_per_vertex:
                i_n = _index(normal_index, face, "normal_index") if normal_index else face
                face_normal = _row(normals, i_n, "normal")
            if has_color and not color_per_vertex:
                i_c = _index(color_index, face, "color_index") if color_index else face
                face_color = _row(colors, i_c, "color")

            for second, third in zip(range(start + 1, end), range(start + 2, end)):
                for corner in (third, second, start):
                    vertex = coord_index[corner]
                    out_v.append(_row(points, vertex, "coord"))
                    if has_normal:
                        if normal_per_vertex:
                            i_n = (
                                _index(normal_index, corner, "normal_index")
                                if normal_index
                                else vertex
                            )
                            out_n.append(_row(normals, i_n, "normal"))
                        else:
                            out_n.append(face_normal)
                    if has_color:
                        if color_per_vertex:
                            i_c = (
                                _index(color_index, corner, "color_index")
                                if color_index
                                else vertex
                            )
                            out_c.append(_row(colors, i_c, "color"))
                        else:
                            out_c.append(face_color)
    else:
        for vertex, position in enumerate(points):
            out_v.append(position)
            if has_normal:
                out_n.append(_row(normals, vertex, "normal"))
            if has_color:
                out_c.append(_row(colors, vertex, "color"))

    return VertexBuffer(
        buffer_type=BufferType.of(has_color, has_normal),
        vertices=_stack(out_v),
        normals=_stack(out_n),
        colors=_stack(out_c),
        has_faces=has_faces,
        has_color=has_color,
        has_normal=has_normal,
    )


def build_line_set_buffer(
    coord: Sequence[float],
    coord_index: Sequence[int],
    color: Sequence[float] = (),
    color_index: Sequence[int] = (),
    color_per_vertex: bool = True,
) -> VertexBuffer:
    """Split every polyline into segments, each emitted end point first.

    Without polylines the coordinates are emitted as a point cloud, with
    colors looked up through ``color_index`` when it is given.
    """
    points = _rows(coord, "coord")
    colors = _rows(color, "color")
    coord_index = [int(i) for i in coord_index]

    has_polylines = any(i < 0 for i in coord_index)
    has_color = len(colors) > 0

    out_v: list[np.ndarray] = []
    out_c: list[np.ndarray] = []

    if has_polylines:
        for line, (start, end) in enumerate(_runs(coord_index)):
            line_color = None
            if has_color and not color_per_vertex:
                i_c = _index(color_index, line, "color_index") if color_index else line
                line_color = _row(colors, i_c, "color")
            for first, second in zip(range(start, end), range(start + 1, end)):
                for corner in (second, first):
                    vertex = coord_index[corner]
                    out_v.append(_row(points, vertex, "coord"))
                    if has_color:
                        if color_per_vertex:
                            i_c = (
                                _index(color_index, corner, "color_index")
                                if color_index
                                else vertex
                            )
                            out_c.append(_row(colors, i_c, "color"))
                        else:
                            out_c.append(line_color)
    else:
        for vertex, position in enumerate(points):
            out_v.append(position)
            if has_color:
                i_c = _index(color_index, vertex, "color_index") if color_index else vertex
                out_c.append(_row(colors, i_c, "color"))

    return VertexBuffer(
        buffer_type=BufferType.COLOR if has_color else BufferType.MATERIAL,
        vertices=_stack(out_v),
        normals=_EMPTY.copy(),
        colors=_stack(out_c),
        has_polylines=has_polylines,
        has_color=has_color,
    )