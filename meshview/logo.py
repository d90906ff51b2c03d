"""A triangulated, extruded logo used as the default scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_HALF_DEPTH = 0.05
_PI = 3.14159
_SECTORS = 100
_SCALE = 2.0

Vec3 = tuple[float, float, float]


def _unit_normal(a: Vec3, b: Vec3) -> Vec3:
    """Normalised cross product of ``a`` and ``b``."""
    cx = a[1] * b[2] - a[2] * b[1]
    cy = a[2] * b[0] - a[0] * b[2]
    cz = a[0] * b[1] - a[1] * b[0]
    length = math.sqrt(cx * cx + cy * cy + cz * cz)
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (cx / length, cy / length, cz / length)


@dataclass
class LogoMesh:
    """Triangle mesh with one normal per face."""

    coord: list[float] = field(default_factory=list)
    coord_index: list[int] = field(default_factory=list)
    normal: list[float] = field(default_factory=list)
    normal_per_vertex: bool = False
    name: str = "QtLogo"
    diffuse_color: Vec3 = (1.0, 0.6, 0.3)

    def number_of_faces(self) -> int:
        return sum(1 for i in self.coord_index if i < 0)

    def number_of_vertices(self) -> int:
        return len(self.coord) // 3

    def bounding_box(self) -> tuple[Vec3, Vec3]:
        """Axis-aligned bounds as ``(minimum, maximum)`` corners."""
        if not self.coord:
            raise ValueError("mesh has no vertices")
        xs, ys, zs = self.coord[0::3], self.coord[1::3], self.coord[2::3]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def _add_vertex(self, x: float, y: float, z: float) -> int:
        index = len(self.coord) // 3
        self.coord.extend((x, y, z))
        return index

    def _add_triangle(self, i0: int, i1: int, i2: int, n: Vec3) -> None:
        self.coord_index.extend((i0, i1, i2, -1))
        self.normal.extend(n)

    def _add_quad(self, x1, y1, x2, y2, x3, y3, x4, y4) -> None:
        i1m = self._add_vertex(x1, y1, -_HALF_DEPTH)
        i2m = self._add_vertex(x2, y2, -_HALF_DEPTH)
        i3m = self._add_vertex(x3, y3, -_HALF_DEPTH)
        i4m = self._add_vertex(x4, y4, -_HALF_DEPTH)
        nm = _unit_normal((x2 - x1, y2 - y1, 0.0), (x4 - x1, y4 - y1, 0.0))
        self._add_triangle(i1m, i2m, i4m, nm)
        self._add_triangle(i3m, i4m, i2m, nm)

        i4p = self._add_vertex(x4, y4, _HALF_DEPTH)
        i3p = self._add_vertex(x3, y3, _HALF_DEPTH)
        i2p = self._add_vertex(x2, y2, _HALF_DEPTH)
        i1p = self._add_vertex(x1, y1, _HALF_DEPTH)
        np_ = _unit_normal((x2 - x4, y2 - y4, 0.0), (x1 - x4, y1 - y4, 0.0))
        self._add_triangle(i4p, i2p, i1p, np_)
        self._add_triangle(i2p, i4p, i3p, np_)

    def _add_extrusion(self, x1, y1, x2, y2) -> None:
        i1p = self._add_vertex(x1, y1, _HALF_DEPTH)
        i1m = self._add_vertex(x1, y1, -_HALF_DEPTH)
        i2p = self._add_vertex(x2, y2, _HALF_DEPTH)
        i2m = self._add_vertex(x2, y2, -_HALF_DEPTH)
        n = _unit_normal((x2 - x1, y2 - y1, 0.0), (0.0, 0.0, -2 * _HALF_DEPTH))
        self._add_triangle(i1p, i2p, i1m, n)
        self._add_triangle(i2m, i1m, i2p, n)


def build_logo() -> LogoMesh:
    """Build the default logo mesh: a ring with a diagonal bar, extruded in z."""
    mesh = LogoMesh()

    x1, y1 = 0.06, -0.14
    x2, y2 = 0.14, -0.06
    x3, y3 = 0.08, 0.00
    x4, y4 = 0.30, 0.22

    mesh._add_quad(x1, y1, x2, y2, y2, x2, y1, x1)
    mesh._add_quad(x3, y3, x4, y4, y4, x4, y3, x3)

    for edge in (
        (x1, y1, x2, y2),
        (x2, y2, y2, x2),
        (y2, x2, y1, x1),
        (y1, x1, x1, y1),
        (x3, y3, x4, y4),
        (x4, y4, y4, x4),
        (y4, x4, y3, x3),
    ):
        mesh._add_extrusion(*edge)

    for i in range(_SECTORS):
        a1 = (i * 2 * _PI) / _SECTORS
        a2 = ((i + 1) * 2 * _PI) / _SECTORS
        x5, y5 = 0.30 * math.sin(a1), 0.30 * math.cos(a1)
        x6, y6 = 0.20 * math.sin(a1), 0.20 * math.cos(a1)
        x7, y7 = 0.20 * math.sin(a2), 0.20 * math.cos(a2)
        x8, y8 = 0.30 * math.sin(a2), 0.30 * math.cos(a2)
        mesh._add_quad(x5, y5, x6, y6, x7, y7, x8, y8)
        mesh._add_extrusion(x6, y6, x7, y7)
        mesh._add_extrusion(x8, y8, x5, y5)

    mesh.coord = [c * _SCALE for c in mesh.coord]
    return mesh