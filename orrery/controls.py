"""Input handling: keyboard movement, window resizing and model choice."""

from __future__ import annotations

import enum
from typing import Iterable, Optional

from .camera import Camera

CAMERA_SPEED = 2.5


class Key(enum.Enum):
    """Keys that steer the camera."""

    W = "w"
    S = "s"
    D = "d"
    A = "a"
    E = "e"
    Q = "q"


def apply_movement(camera: Camera, pressed: Iterable[Key], delta_time: float) -> None:
    """Move ``camera`` for the keys held down during a frame of ``delta_time``."""
    keys = set(pressed)
    speed = CAMERA_SPEED * delta_time
    if Key.W in keys:
        camera.move_forward(speed)
    if Key.S in keys:
        camera.move_forward(-speed)
    if Key.D in keys:
        camera.move_right(speed)
    if Key.A in keys:
        camera.move_right(-speed)
    if Key.E in keys:
        camera.move_up(speed)
    if Key.Q in keys:
        camera.move_up(-speed)


def aspect_ratio(width: int, height: int) -> float:
    """Aspect ratio of a framebuffer of ``width`` by ``height`` pixels."""
    if height == 0:
        raise ValueError("framebuffer height must be non-zero")
    return float(width) / float(height)


def choose_model(option: Optional[str] = None) -> bool:
    """Return True to render the sphere, False to render the torus.

    Only the option ``"torus"`` selects the torus; anything else, or no
    option at all, selects the sphere.
    """
    return option != "torus"