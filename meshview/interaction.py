"""Mouse zones, status messages and highlight handles of the 3D view.

The view is split into a 3 x 3 grid of zones by borders along each edge.
Zones are numbered row by row from the top left:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8

Zone ``-1`` means the pointer is outside the view.
"""

from __future__ import annotations

import enum

import numpy as np

BORDER_UP = 20
BORDER_DOWN = 20
BORDER_LEFT = 20
BORDER_RIGHT = 20

NO_ZONE = -1
CENTER_ZONE = 4

HANDLE_COLOR = (0.6, 0.6, 0.9)
"""RGB color used to draw the highlighted zone."""

_HINTS = {
    0: "HOME",
    1: "",
    2: "Invert Normals",
    3: "Rotate Around Horizontal Axis | Translate Left-Right",
    4: "Rotate Object With Respect To Center",
    5: "Translate Object Along Viewing Direction",
    6: "Stop Animation",
    7: "Rotate Around Vertical Axis | Translate Up-Down",
    8: "Resume Animation",
}


class ReleaseAction(enum.Enum):
    """What releasing the mouse button in a zone does."""

    NONE = "none"
    HOME = "home"
    INVERT_NORMALS = "invert_normals"
    STOP_ANIMATION = "stop_animation"
    RESTART_ANIMATION = "restart_animation"

    @property
    def message(self) -> str:
        """Status bar message shown while the action takes place."""
        return _RELEASE_MESSAGES.get(self, "")


_RELEASE_MESSAGES = {
    ReleaseAction.STOP_ANIMATION: "Stoping Animation",
    ReleaseAction.RESTART_ANIMATION: "Restarting Animation",
}

_RELEASE_ACTIONS = {
    0: ReleaseAction.HOME,
    2: ReleaseAction.INVERT_NORMALS,
    6: ReleaseAction.STOP_ANIMATION,
    8: ReleaseAction.RESTART_ANIMATION,
}


def mouse_zone(x: int, y: int, width: int, height: int) -> int:
    """Zone, from 0 to 8, under the pointer at ``(x, y)`` in a view of the given size."""
    if x < BORDER_LEFT:
        code_x = 0
    elif x >= width - BORDER_RIGHT:
        code_x = 2
    else:
        code_x = 1
    if y < BORDER_UP:
        code_y = 0
    elif y >= height - BORDER_DOWN:
        code_y = 2
    else:
        code_y = 1
    return code_x + 3 * code_y


def zone_hint(zone: int) -> str:
    """Status bar hint shown while hovering over ``zone`` with no button pressed."""
    return _HINTS.get(zone, "")


def press_message(
    zone: int, left: bool, right: bool, zone4_enabled: bool = True
) -> str | None:
    """Status bar message for a button press in ``zone``.

    The left button takes precedence over the right one. ``None`` means the
    current message is left unchanged.
    """
    if left:
        if zone == 1:
            return "Rotating Light Source" if zone4_enabled else None
        if zone in (3, 7):
            return "Rotating Object"
        if zone == 4:
            return "Rotating Object" if zone4_enabled else None
        if zone == 5:
            return "Zooming"
        return ""
    if right:
        if zone in (3, 7):
            return "Translating Object"
        if zone == 4:
            return "Rotating Light Source" if zone4_enabled else None
        return ""
    return None


def release_action(zone: int) -> ReleaseAction:
    """Action triggered by releasing the mouse button in ``zone``."""
    return _RELEASE_ACTIONS.get(zone, ReleaseAction.NONE)


def handle_rectangle(
    zone: int, width: int, height: int
) -> tuple[float, float, float, float] | None:
    """Rectangle ``(hx0, hy0, hx1, hy1)`` highlighting ``zone`` in unit view coordinates.

    Coordinates run from 0 to 1 with y pointing up. The centre zone and
    positions outside the view have no handle and give ``None``.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"view size must be positive, got {width}x{height}")
    w, h = float(width), float(height)
    xs = (0.0, BORDER_LEFT / w, (width - BORDER_RIGHT) / w, 1.0)
    ys = (1.0, (height - BORDER_UP) / h, BORDER_DOWN / h, 0.0)
    if zone not in _HINTS or zone == CENTER_ZONE:
        return None
    row, column = divmod(zone, 3)
    hx0, hx1 = xs[column], xs[column + 1]
    hy0, hy1 = ys[row], ys[row + 1]
    if hx0 == hx1 or hy0 == hy1:
        return None
    return hx0, hy0, hx1, hy1


def handle_quad(hx0: float, hy0: float, hx1: float, hy1: float) -> np.ndarray:
    """Two triangles covering a handle rectangle, as a ``(6, 3)`` float32 array."""
    return np.array(
        [
            (hx0, hy0, 0.0),
            (hx0, hy1, 0.0),
            (hx1, hy0, 0.0),
            (hx1, hy1, 0.0),
            (hx1, hy0, 0.0),
            (hx0, hy1, 0.0),
        ],
        dtype=np.float32,
    )