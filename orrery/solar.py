"""Model-view matrices for a small animated solar system."""

from __future__ import annotations

import math

import numpy as np

from .scene import MatrixStack
from .transformations import build_translate, rotate, scale

_Y_AXIS = (0.0, 1.0, 0.0)
PLANET_ORBIT_RADIUS = 4.0
MOON_ORBIT_RADIUS = 2.0
SMALL_BODY_SCALE = 0.5


def solar_system_model_views(view: np.ndarray, time: float) -> dict[str, np.ndarray]:
    """Return the model-view matrix of every body at ``time``, in draw order.

    The keys are ``"sun"``, ``"planet"``, ``"moon"`` and ``"second_planet"``.
    The sun spins about Y at the origin, the planet orbits it in the XZ
    plane, the moon orbits the planet in its YZ plane at half size, and the
    second planet orbits the sun in the YZ plane at half size.
    """
    t = float(time)
    sin_t, cos_t = math.sin(t), math.cos(t)
    bodies: dict[str, np.ndarray] = {}

    stack = MatrixStack()
    stack.push(view)

    # Sun
    stack.push_top()
    stack.multiply_top(build_translate(0.0, 0.0, 0.0))
    stack.push_top()
    stack.multiply_top(rotate(t, _Y_AXIS))
    bodies["sun"] = stack.top().copy()
    stack.pop()

    # Planet orbiting the sun
    stack.push_top()
    stack.multiply_top(
        build_translate(sin_t * PLANET_ORBIT_RADIUS, 0.0, cos_t * PLANET_ORBIT_RADIUS)
    )
    bodies["planet"] = stack.top().copy()

    # Moon orbiting the planet
    stack.push_top()
    stack.multiply_top(
        build_translate(0.0, sin_t * MOON_ORBIT_RADIUS, cos_t * MOON_ORBIT_RADIUS)
    )
    stack.push_top()
    stack.multiply_top(scale(SMALL_BODY_SCALE, SMALL_BODY_SCALE, SMALL_BODY_SCALE))
    bodies["moon"] = stack.top().copy()
    stack.pop()
    stack.pop()
    stack.pop()

    # Second planet
    stack.push_top()
    stack.multiply_top(
        build_translate(0.0, sin_t * PLANET_ORBIT_RADIUS, -cos_t * PLANET_ORBIT_RADIUS)
    )
    stack.multiply_top(scale(SMALL_BODY_SCALE, SMALL_BODY_SCALE, SMALL_BODY_SCALE))
    bodies["second_planet"] = stack.top().copy()
    stack.pop()

    stack.pop()
    stack.pop()
    return bodies