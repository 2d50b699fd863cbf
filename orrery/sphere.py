"""Procedurally generated UV sphere."""

from __future__ import annotations

import numpy as np

_PI_APPROX = 3.14159


def _to_radians(degrees: np.ndarray) -> np.ndarray:
    return degrees * 2.0 * _PI_APPROX / 360.0


class Sphere:
    """Unit sphere with positions, texture coordinates, normals and indices.

    ``vertices`` and ``normals`` are ``(n, 3)`` arrays, ``tex_coords`` is
    ``(n, 2)`` and ``indices`` lists triangle corners, six per grid cell.
    """

    def __init__(self, prec: int) -> None:
        if prec < 1:
            raise ValueError("sphere precision must be at least 1")
        self.prec = prec

        steps = np.arange(prec + 1)
        rows, cols = np.meshgrid(steps, steps, indexing="ij")
        y = np.cos(_to_radians(180.0 - rows * 180.0 / prec))
        ring = np.abs(np.cos(np.arcsin(np.clip(y, -1.0, 1.0))))
        angle = _to_radians(cols * 360.0 / prec)
        x = -np.cos(angle) * ring
        z = np.sin(angle) * ring

        self.vertices = np.stack([x, y, z], axis=-1).reshape(-1, 3)
        self.normals = self.vertices.copy()
        self.tex_coords = np.stack([cols / prec, rows / prec], axis=-1).reshape(-1, 2)

        cell_rows, cell_cols = np.meshgrid(
            np.arange(prec), np.arange(prec), indexing="ij"
        )
        base = (cell_rows * (prec + 1) + cell_cols).ravel()
        below = base + prec + 1
        self.indices = np.stack(
            [base, base + 1, below, base + 1, below + 1, below], axis=-1
        ).ravel()

    @property
    def num_vertices(self) -> int:
        return (self.prec + 1) * (self.prec + 1)

    @property
    def num_indices(self) -> int:
        return self.prec * self.prec * 6