"""Procedurally generated torus with tangent frames."""

from __future__ import annotations

import numpy as np

from .transformations import rotate

_PI_APPROX = 3.14159
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


def _to_radians(degrees: float) -> float:
    return degrees * 2.0 * _PI_APPROX / 360.0


def _rotation3(angle: float, axis: tuple[float, float, float]) -> np.ndarray:
    return rotate(angle, axis)[:3, :3]


class Torus:
    """Torus built by sweeping a ring of radius ``outer`` around the Y axis.

    ``inner`` is the distance from the origin to the centre of the tube and
    ``outer`` the radius of the tube. ``vertices``, ``normals``,
    ``s_tangents`` and ``t_tangents`` are ``(n, 3)`` arrays, ``tex_coords``
    is ``(n, 2)`` and ``indices`` lists triangle corners, six per grid cell.
    """

    def __init__(self, inner_radius: float, outer_radius: float, prec: int) -> None:
        if prec < 1:
            raise ValueError("torus precision must be at least 1")
        self.prec = prec
        self.inner = float(inner_radius)
        self.outer = float(outer_radius)

        ring_positions = []
        ring_t_tangents = []
        for step in range(prec + 1):
            amt = _to_radians(step * 360.0 / prec)
            around_z = _rotation3(amt, _Z_AXIS)
            ring_positions.append(around_z @ np.array([0.0, self.outer, 0.0]))
            tangent_rot = _rotation3(amt + _PI_APPROX / 2.0, _Z_AXIS)
            ring_t_tangents.append(tangent_rot @ np.array([0.0, -1.0, 0.0]))

        first_vertices = np.array(ring_positions) + np.array([self.inner, 0.0, 0.0])
        first_t = np.array(ring_t_tangents)
        first_s = np.tile([0.0, 0.0, -1.0], (prec + 1, 1))
        first_normals = np.cross(first_t, first_s)

        vertices, normals, s_tangents, t_tangents, tex_coords = [], [], [], [], []
        ring_t = np.arange(prec + 1) / prec
        for ring in range(prec + 1):
            rot = _rotation3(_to_radians(ring * 360.0 / prec), _Y_AXIS)
            vertices.append(first_vertices @ rot.T)
            normals.append(first_normals @ rot.T)
            s_tangents.append(first_s @ rot.T)
            t_tangents.append(first_t @ rot.T)
            s_coord = 0.0 if ring == 0 else ring * 2.0 / prec
            tex_coords.append(np.column_stack([np.full(prec + 1, s_coord), ring_t]))

        self.vertices = np.concatenate(vertices)
        self.normals = np.concatenate(normals)
        self.s_tangents = np.concatenate(s_tangents)
        self.t_tangents = np.concatenate(t_tangents)
        self.tex_coords = np.concatenate(tex_coords)

        cell_rings, cell_verts = np.meshgrid(
            np.arange(prec), np.arange(prec), indexing="ij"
        )
        base = (cell_rings * (prec + 1) + cell_verts).ravel()
        below = base + prec + 1
        self.indices = np.stack(
            [base, below, base + 1, base + 1, below, below + 1], axis=-1
        ).ravel()

    @property
    def num_vertices(self) -> int:
        return (self.prec + 1) * (self.prec + 1)

    @property
    def num_indices(self) -> int:
        return self.prec * self.prec * 6