"""Scene state: model-view matrix stack, vertex buffers and frame timing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from .transformations import build_translate, rotate

if TYPE_CHECKING:
    from .sphere import Sphere
    from .torus import Torus

_Y_AXIS = (0.0, 1.0, 0.0)


class MatrixStack:
    """Stack of 4x4 matrices used to build hierarchical model-view transforms."""

    def __init__(self) -> None:
        self._items: list[np.ndarray] = []

    def push(self, matrix: np.ndarray) -> None:
        """Push a copy of ``matrix`` onto the stack."""
        array = np.array(matrix, dtype=float)
        if array.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
        self._items.append(array)

    def push_top(self) -> None:
        """Duplicate the top matrix so it can be modified independently."""
        self.push(self.top())

    def pop(self) -> np.ndarray:
        """Remove and return the top matrix."""
        if not self._items:
            raise IndexError("pop from an empty matrix stack")
        return self._items.pop()

    def top(self) -> np.ndarray:
        """Return the top matrix itself."""
        if not self._items:
            raise IndexError("matrix stack is empty")
        return self._items[-1]

    def multiply_top(self, matrix: np.ndarray) -> np.ndarray:
        """Post-multiply the top matrix by ``matrix`` and return the result."""
        product = self.top() @ np.asarray(matrix, dtype=float)
        self._items[-1] = product
        return product

    def __len__(self) -> int:
        return len(self._items)


@dataclass(frozen=True)
class MeshBuffers:
    """Flat single-precision vertex data ready for upload to the GPU.

    ``indices`` is ``None`` when the vertices are already laid out as a
    plain triangle list.
    """

    positions: np.ndarray
    tex_coords: np.ndarray
    normals: np.ndarray
    indices: np.ndarray | None = None

    @property
    def vertex_count(self) -> int:
        return len(self.positions) // 3


class FrameTimer:
    """Tracks the time elapsed between consecutive frames."""

    def __init__(self) -> None:
        self.delta_time = 0.0
        self.last_frame = 0.0

    def tick(self, now: float) -> float:
        """Record a frame at time ``now`` and return the time since the last one."""
        self.delta_time = now - self.last_frame
        self.last_frame = now
        return self.delta_time


def sphere_buffers(sphere: Sphere) -> MeshBuffers:
    """Expand the sphere's indexed geometry into an unindexed triangle list."""
    order = np.asarray(sphere.indices)
    return MeshBuffers(
        positions=sphere.vertices[order].astype(np.float32).ravel(),
        tex_coords=sphere.tex_coords[order].astype(np.float32).ravel(),
        normals=sphere.normals[order].astype(np.float32).ravel(),
    )


def torus_buffers(torus: Torus) -> MeshBuffers:
    """Flatten the torus vertex attributes and keep its index list."""
    return MeshBuffers(
        positions=torus.vertices.astype(np.float32).ravel(),
        tex_coords=torus.tex_coords.astype(np.float32).ravel(),
        normals=torus.normals.astype(np.float32).ravel(),
        indices=np.asarray(torus.indices, dtype=np.uint32),
    )


def single_model_view(view: np.ndarray, time: float) -> np.ndarray:
    """Model-view matrix of one object at the origin spinning about Y."""
    stack = MatrixStack()
    stack.push(view)
    stack.push_top()
    stack.multiply_top(build_translate(0.0, 0.0, 0.0))
    stack.push_top()
    stack.multiply_top(rotate(time, _Y_AXIS))
    result = stack.pop().copy()
    stack.pop()
    stack.pop()
    return result