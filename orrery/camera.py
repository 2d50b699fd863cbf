"""A free-flying first-person camera."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .transformations import look_at, normalize, perspective

NEAR_PLANE = 0.1
FAR_PLANE = 1000.0
MAX_FOV = 45.0
MIN_FOV = 1.0
PITCH_LIMIT = 89.0


class Camera:
    """Camera with yaw/pitch mouse look, scroll zoom and axis movement."""

    def __init__(self, position: Sequence[float] = (0.0, 0.0, 5.0)) -> None:
        self.position = np.array(position, dtype=float)
        self.forward = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.right = normalize(np.cross(self.forward, self.up))
        self.fov = MAX_FOV
        self.sensitivity = 0.1
        self.yaw = -90.0
        self.pitch = 0.0
        self._last_mouse = (0.0, 0.0)
        self._first_mouse = True
        self.view_matrix = np.identity(4)
        self.perspective_matrix = np.identity(4)

    def calculate_view_matrix(self) -> np.ndarray:
        """Refresh the right vector and the view matrix from the current pose."""
        self.right = normalize(np.cross(self.forward, self.up))
        self.view_matrix = look_at(self.position, self.position + self.forward, self.up)
        return self.view_matrix

    def calculate_perspective_matrix(self, aspect: float) -> np.ndarray:
        """Refresh the projection matrix for the given aspect ratio."""
        self.perspective_matrix = perspective(
            math.radians(self.fov), aspect, NEAR_PLANE, FAR_PLANE
        )
        return self.perspective_matrix

    def move_forward(self, displacement: float) -> None:
        self.position = self.position + displacement * self.forward

    def move_right(self, displacement: float) -> None:
        self.position = self.position + displacement * self.right

    def move_up(self, displacement: float) -> None:
        self.position = self.position + displacement * self.up

    def compute_rotation(self, xpos: float, ypos: float) -> None:
        """Turn the camera according to a new cursor position."""
        if self._first_mouse:
            self._last_mouse = (xpos, ypos)
            self._first_mouse = False

        last_x, last_y = self._last_mouse
        xoffset = (xpos - last_x) * self.sensitivity
        yoffset = (last_y - ypos) * self.sensitivity
        self._last_mouse = (xpos, ypos)

        self.yaw += xoffset
        self.pitch = min(max(self.pitch + yoffset, -PITCH_LIMIT), PITCH_LIMIT)

        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        direction = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.forward = normalize(direction)

    def compute_scroll(self, yoffset: float) -> None:
        """Zoom by narrowing or widening the field of view."""
        self.fov = min(max(self.fov - yoffset, MIN_FOV), MAX_FOV)