"""Camera state of the 3D view: home view, zoom, drag and wheel navigation."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

DEFAULT_DIAMETER = 2.0
VERTICAL_ANGLE = 10.0
NEAR_FACTOR = 1.0
FAR_FACTOR = 100.0
HOME_DISTANCE_FACTOR = 5.0
MIN_DISTANCE_FACTOR = 0.25
TRANSLATE_STEP_FACTOR = 0.001
WHEEL_STEPS = 80.0
ANIMATION_STEP = 0.25
HOME_ANGLES = (10.0, 10.0, 0.0)

_LEFT_LIGHT_ZONE = 1
_HORIZONTAL_ZONE = 3
_CENTER_ZONE = 4
_ZOOM_ZONE = 5
_VERTICAL_ZONE = 7


def perspective(vertical_angle: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection matrix with a vertical field of view in degrees."""
    half = math.radians(vertical_angle) / 2.0
    sine = math.sin(half)
    if sine == 0.0:
        raise ValueError("vertical angle must not be a multiple of 360 degrees")
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    clip = far - near
    if clip == 0.0:
        raise ValueError("near and far planes must differ")
    cotan = math.cos(half) / sine
    matrix = np.zeros((4, 4))
    matrix[0, 0] = cotan / aspect
    matrix[1, 1] = cotan
    matrix[2, 2] = -(near + far) / clip
    matrix[2, 3] = -(2.0 * near * far) / clip
    matrix[3, 2] = -1.0
    return matrix


def rotation(angle: float, x: float, y: float, z: float) -> np.ndarray:
    """4 x 4 matrix rotating by ``angle`` degrees about the axis ``(x, y, z)``."""
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        raise ValueError("rotation axis must not be zero")
    x, y, z = x / length, y / length, z / length
    radians = math.radians(angle)
    c, s = math.cos(radians), math.sin(radians)
    ic = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [x * x * ic + c, x * y * ic - z * s, x * z * ic + y * s],
        [y * x * ic + z * s, y * y * ic + c, y * z * ic - x * s],
        [x * z * ic - y * s, y * z * ic + x * s, z * z * ic + c],
    ]
    return matrix


def _translation(offset: Sequence[float]) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    forward = center - eye
    norm = np.linalg.norm(forward)
    if norm == 0.0:
        return np.identity(4)
    forward = forward / norm
    side = np.cross(forward, up)
    side = side / np.linalg.norm(side)
    true_up = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    return matrix @ _translation(-eye)


class Camera:
    """Viewing parameters of the 3D view and how mouse input changes them."""

    def __init__(self) -> None:
        self.bbox_diameter = DEFAULT_DIAMETER
        self.eye = np.zeros(3)
        self.center = np.array([0.0, 0.0, 1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.translate_step = 0.010
        self.camera_translation = np.zeros(3)
        self.view_rotation = np.identity(4)
        self.light_source = np.array([0.0, 0.3, -1.0])
        self.angle = 0.0
        self.animation_on = True
        self.zone4_enabled = True

    def reset(self, center: Sequence[float] | None, diameter: float = DEFAULT_DIAMETER) -> None:
        """Frame a scene with the given bounding-box centre and diameter.

        ``None`` stands for an empty bounding box: the view is centred on
        the origin with the default diameter.
        """
        if center is None:
            self.center = np.zeros(3)
            self.bbox_diameter = DEFAULT_DIAMETER
        else:
            self.center = np.asarray(center, dtype=float).reshape(3).copy()
            self.bbox_diameter = float(diameter)
        self.translate_step = TRANSLATE_STEP_FACTOR * self.bbox_diameter
        self.set_home_view(False)

    def zoom(self, value: float) -> None:
        """Move the eye along z, keeping it at least a quarter diameter from the centre."""
        self.eye = self.eye + np.array([0.0, 0.0, value])
        minimum = MIN_DISTANCE_FACTOR * self.bbox_diameter
        if self.eye[2] - self.center[2] < minimum:
            self.eye[2] = self.center[2] + minimum

    def set_home_view(self, identity: bool = False) -> None:
        """Restore the home orientation and place the eye in front of the centre."""
        if identity:
            self.view_rotation = np.identity(4)
        else:
            ax, ay, az = HOME_ANGLES
            self.view_rotation = (
                rotation(ax, 1.0, 0.0, 0.0)
                @ rotation(ay, 0.0, 1.0, 0.0)
                @ rotation(az, 0.0, 0.0, 1.0)
            )
        self.angle = 0.0
        self.eye = self.center + np.array(
            [0.0, 0.0, HOME_DISTANCE_FACTOR * self.bbox_diameter]
        )

    def projection(self, width: int, height: int) -> np.ndarray:
        """Projection matrix for a view of the given size in pixels."""
        if width <= 0 or height <= 0:
            raise ValueError(f"view size must be positive, got {width}x{height}")
        return perspective(
            VERTICAL_ANGLE,
            float(width) / float(height),
            NEAR_FACTOR * self.bbox_diameter,
            FAR_FACTOR * self.bbox_diameter,
        )

    def model_view_projection(self, width: int, height: int) -> np.ndarray:
        """Combined matrix that maps scene coordinates to clip coordinates."""
        view = _translation(self.camera_translation) @ _look_at(
            self.eye, self.center, self.up
        )
        return (
            self.projection(width, height)
            @ view
            @ _translation(self.center)
            @ rotation(self.angle, 0.0, 1.0, 0.0)
            @ self.view_rotation
            @ _translation(-self.center)
        )

    def advance_animation(self) -> None:
        """Spin the scene one step about the vertical axis while animation is on."""
        if self.animation_on:
            self.angle += ANIMATION_STEP

    def drag(
        self,
        dx: int,
        dy: int,
        width: int,
        height: int,
        zone: int,
        left: bool,
        right: bool,
    ) -> None:
        """Apply a mouse drag of ``(dx, dy)`` pixels, ``dy`` positive upward.

        What the drag does depends on the zone it happens in and on the
        pressed button; the left button takes precedence over the right.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"view size must be positive, got {width}x{height}")
        fdx = dx / float(width)
        fdy = dy / float(height)
        theta_y = 180.0 * fdx
        theta_x = -180.0 * fdy
        length = math.sqrt(fdx * fdx + fdy * fdy)
        theta_xy = 180.0 * length

        def about_drag_axis() -> np.ndarray:
            if length == 0.0:
                return np.identity(4)
            return rotation(theta_xy, -fdy / length, fdx / length, 0.0)

        dx_t = -0.5 * dx * self.translate_step
        dy_t = -0.5 * dy * self.translate_step
        dz_t = -8.0 * dy * self.translate_step

        translation = np.zeros(3)
        scene_rotation = np.identity(4)
        light_rotation = np.identity(4)

        if left:
            if zone == _LEFT_LIGHT_ZONE and self.zone4_enabled:
                light_rotation = about_drag_axis()
            elif zone == _HORIZONTAL_ZONE:
                scene_rotation = rotation(theta_x, 1.0, 0.0, 0.0)
            elif zone == _CENTER_ZONE and self.zone4_enabled:
                scene_rotation = about_drag_axis()
            elif zone == _ZOOM_ZONE:
                self.zoom(dz_t)
            elif zone == _VERTICAL_ZONE:
                scene_rotation = rotation(theta_y, 0.0, 1.0, 0.0)
        elif right:
            if zone == _HORIZONTAL_ZONE:
                translation = np.array([0.0, -dy_t, 0.0])
            elif zone == _CENTER_ZONE and self.zone4_enabled:
                light_rotation = about_drag_axis()
            elif zone == _VERTICAL_ZONE:
                translation = np.array([-dx_t, 0.0, 0.0])

        self.view_rotation = scene_rotation @ self.view_rotation
        self.light_source = light_rotation[:3, :3] @ self.light_source
        self.camera_translation = self.camera_translation + translation

    def wheel(self, up: bool) -> None:
        """Zoom by one wheel notch, outward when ``up`` is true."""
        step = WHEEL_STEPS * self.translate_step
        self.zoom(step if up else -step)