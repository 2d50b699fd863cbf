"""4x4 homogeneous transformation matrices.

Matrices are plain ``numpy`` arrays in row-major mathematical layout,
so a point ``p`` is transformed as ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

Vector = Sequence[float] | np.ndarray


def _vec3(vector: Vector) -> np.ndarray:
    array = np.asarray(vector, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def normalize(vector: Vector) -> np.ndarray:
    """Return the vector scaled to unit length."""
    array = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(array))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return array / length


def build_translate(x: float, y: float, z: float) -> np.ndarray:
    """Translation by (x, y, z)."""
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def build_rotate_x(rad: float) -> np.ndarray:
    """Rotation by ``rad`` radians about the X axis."""
    c, s = math.cos(rad), math.sin(rad)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def build_rotate_y(rad: float) -> np.ndarray:
    """Rotation by ``rad`` radians about the Y axis."""
    c, s = math.cos(rad), math.sin(rad)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def build_rotate_z(rad: float) -> np.ndarray:
    """Rotation by ``rad`` radians about the Z axis."""
    c, s = math.cos(rad), math.sin(rad)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate(angle: float, axis: Vector) -> np.ndarray:
    """Rotation by ``angle`` radians about an arbitrary axis."""
    ax, ay, az = normalize(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [c + t * ax * ax, t * ax * ay - s * az, t * ax * az + s * ay],
        [t * ay * ax + s * az, c + t * ay * ay, t * ay * az - s * ax],
        [t * az * ax - s * ay, t * az * ay + s * ax, c + t * az * az],
    ]
    return matrix


def scale(x: float, y: float, z: float) -> np.ndarray:
    """Non-uniform scale along the three axes."""
    return np.diag([float(x), float(y), float(z), 1.0])


def look_at(eye: Vector, center: Vector, up: Vector) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec3(eye)
    forward = normalize(_vec3(center) - eye_v)
    side = normalize(np.cross(forward, _vec3(up)))
    true_up = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye_v))
    matrix[1, 3] = -float(np.dot(true_up, eye_v))
    matrix[2, 3] = float(np.dot(forward, eye_v))
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must be non-zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix