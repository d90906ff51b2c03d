"""State shared by the viewer: the scene and bounding-box grid options."""

from __future__ import annotations

from typing import Any

MAX_BBOX_DEPTH = 10


def clamp_depth(depth: int) -> int:
    """Limit a grid depth to the range 0 to 10."""
    return min(max(int(depth), 0), MAX_BBOX_DEPTH)


def clamp_scale(scale: float) -> float:
    """Limit a bounding-box scale to non-negative values."""
    return max(float(scale), 0.0)


class ViewerData:
    """The current scene graph together with bounding-box grid settings."""

    def __init__(self) -> None:
        self._scene_graph: Any = None
        self._bbox_depth = 0
        self._bbox_scale = 1.05
        self.bbox_cube = True
        self.bbox_occupied = False

    @property
    def scene_graph(self) -> Any:
        """The scene being viewed, or ``None``."""
        return self._scene_graph

    def set_scene_graph(self, scene_graph: Any) -> None:
        """Replace the scene being viewed; ``None`` clears it."""
        if scene_graph is not self._scene_graph:
            self._scene_graph = scene_graph

    @property
    def bbox_depth(self) -> int:
        """Subdivision depth of the bounding-box grid, between 0 and 10."""
        return self._bbox_depth

    @bbox_depth.setter
    def bbox_depth(self, value: int) -> None:
        self._bbox_depth = clamp_depth(value)

    @property
    def bbox_scale(self) -> float:
        """Scale applied to the bounding box, never negative."""
        return self._bbox_scale

    @bbox_scale.setter
    def bbox_scale(self, value: float) -> None:
        self._bbox_scale = clamp_scale(value)