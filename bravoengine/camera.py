"""First-person camera and the view/projection matrices it needs."""

from __future__ import annotations

import enum
import math

import numpy as np

MOUSE_SENSITIVITY = 0.5
PITCH_LIMIT = 89.0
FOV_MIN = 1.0
FOV_MAX = 45.0


class CameraMovement(enum.Enum):
    FORWARD = enum.auto()
    BACKWARD = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye = np.asarray(eye, dtype=float)
    center = np.asarray(center, dtype=float)
    up = np.asarray(up, dtype=float)
    forward = _normalize(center - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)
    view = np.eye(4)
    view[0, :3] = side
    view[1, :3] = upward
    view[2, :3] = -forward
    view[0, 3] = -np.dot(side, eye)
    view[1, 3] = -np.dot(upward, eye)
    view[2, 3] = np.dot(forward, eye)
    return view


def perspective(fovy, aspect, near, far) -> np.ndarray:
    """Right-handed perspective projection to clip space with depth in [-1, 1].

    ``fovy`` is in radians.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must not be zero")
    projection = np.zeros((4, 4))
    projection[0, 0] = 1.0 / (aspect * tan_half)
    projection[1, 1] = 1.0 / tan_half
    projection[2, 2] = -(far + near) / (far - near)
    projection[2, 3] = -(2.0 * far * near) / (far - near)
    projection[3, 2] = -1.0
    return projection


class Camera:
    """Yaw/pitch camera driven by mouse movement and scroll."""

    def __init__(self, screen_width, screen_height, position=(0.0, 0.0, 0.0)) -> None:
        self.screen_width = int(screen_width)
        self.screen_height = int(screen_height)
        self.position = np.array(position, dtype=float)
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.yaw = -90.0
        self.pitch = 0.0
        self.fov = FOV_MAX

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.front, self.up)

    def process_mouse_input(self, xoffset, yoffset) -> None:
        """Turn the camera by a mouse movement, keeping pitch within limits."""
        self.yaw += xoffset * MOUSE_SENSITIVITY
        self.pitch += yoffset * MOUSE_SENSITIVITY
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(direction)

    def process_mouse_scroll(self, yoffset) -> None:
        """Zoom by narrowing or widening the field of view."""
        self.fov = max(FOV_MIN, min(FOV_MAX, self.fov - float(yoffset)))