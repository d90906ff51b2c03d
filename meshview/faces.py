"""Polygon connectivity stored as a flat, separator-terminated index array."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable


class Faces:
    """Faces of a polygon mesh described by a ``coordIndex`` style array.

    Each face is a run of non-negative vertex indices terminated by a
    negative separator (conventionally ``-1``). Every array entry,
    separators included, counts as a corner.
    """

    def __init__(self, n_vertices: int, coord_index: Iterable[int]) -> None:
        self._coord_index: tuple[int, ...] = tuple(int(v) for v in coord_index)
        if self._coord_index and self._coord_index[-1] >= 0:
            raise ValueError("coord_index must end with a negative separator")

        self._face_starts: list[int] = []
        start = 0
        for corner, vertex in enumerate(self._coord_index):
            if vertex < 0:
                self._face_starts.append(start)
                start = corner + 1

        largest = max((v for v in self._coord_index if v >= 0), default=-1)
        self._n_vertices = max(int(n_vertices), largest + 1)

    def number_of_vertices(self) -> int:
        """The vertex count given at construction, raised to cover every index used."""
        return self._n_vertices

    def number_of_faces(self) -> int:
        """The number of separators in the index array."""
        return len(self._face_starts)

    def number_of_corners(self) -> int:
        """The length of the index array, separators included."""
        return len(self._coord_index)

    def _check_face(self, face: int) -> None:
        if not 0 <= face < len(self._face_starts):
            raise IndexError(f"face index {face} out of range")

    def _check_corner(self, corner: int) -> None:
        if not 0 <= corner < len(self._coord_index):
            raise IndexError(f"corner index {corner} out of range")
        if self._coord_index[corner] < 0:
            raise ValueError(f"corner {corner} is a face separator")

    def _face_end(self, face: int) -> int:
        """Index of the separator closing ``face``."""
        if face + 1 < len(self._face_starts):
            return self._face_starts[face + 1] - 1
        return len(self._coord_index) - 1

    def face_size(self, face: int) -> int:
        """Number of corners of ``face``, not counting its separator."""
        self._check_face(face)
        return self._face_end(face) - self._face_starts[face]

    def face_first_corner(self, face: int) -> int:
        """Index into the array of the first corner of ``face``."""
        self._check_face(face)
        return self._face_starts[face]

    def face_vertex(self, face: int, j: int) -> int:
        """Vertex index stored at the ``j``-th corner of ``face``."""
        size = self.face_size(face)
        if not 0 <= j < size:
            raise IndexError(f"corner {j} out of range for face {face}")
        return self._coord_index[self._face_starts[face] + j]

    def corner_face(self, corner: int) -> int:
        """Index of the face that contains ``corner``."""
        self._check_corner(corner)
        return bisect_right(self._face_starts, corner) - 1

    def next_corner(self, corner: int) -> int:
        """The following corner in the cyclic order of its face."""
        self._check_corner(corner)
        if self._coord_index[corner + 1] >= 0:
            return corner + 1
        return self._face_starts[self.corner_face(corner)]