"""Mesh vertex data and a builder that assembles it one element at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

BONES_PER_VERTEX = 4
_MAX_INDEX = np.iinfo(np.uint16).max


class MeshLoadingError(Exception):
    """Raised when mesh data is missing, inconsistent or cannot be assembled."""


def _empty(width: int, dtype) -> np.ndarray:
    return np.empty((0, width), dtype=dtype)


def _rows(values, width: int, dtype) -> np.ndarray:
    return np.asarray(values, dtype=dtype).reshape(-1, width)


def _vector(value: Sequence[float], width: int) -> tuple[float, ...]:
    components = tuple(float(c) for c in value)
    if len(components) != width:
        raise ValueError(f"expected {width} components, got {len(components)}")
    return components


@dataclass(eq=False)
class Mesh:
    """Per-vertex attribute arrays and triangle indices of one mesh.

    Vertex attributes are arrays of shape (n, k); ``indices`` is a flat
    ``uint16`` array with three entries per triangle.
    """

    name: str = ""
    mat_id: int = 0
    positions: np.ndarray = field(default_factory=lambda: _empty(3, np.float32))
    colors: np.ndarray = field(default_factory=lambda: _empty(4, np.float32))
    uvs: np.ndarray = field(default_factory=lambda: _empty(2, np.float32))
    normals: np.ndarray = field(default_factory=lambda: _empty(3, np.float32))
    tangents: np.ndarray = field(default_factory=lambda: _empty(3, np.float32))
    bone_ids: np.ndarray = field(default_factory=lambda: _empty(BONES_PER_VERTEX, np.int32))
    bone_weights: np.ndarray = field(default_factory=lambda: _empty(BONES_PER_VERTEX, np.float32))
    indices: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.uint16))

    def __post_init__(self) -> None:
        self.positions = _rows(self.positions, 3, np.float32)
        self.colors = _rows(self.colors, 4, np.float32)
        self.uvs = _rows(self.uvs, 2, np.float32)
        self.normals = _rows(self.normals, 3, np.float32)
        self.tangents = _rows(self.tangents, 3, np.float32)
        self.bone_ids = _rows(self.bone_ids, BONES_PER_VERTEX, np.int32)
        self.bone_weights = _rows(self.bone_weights, BONES_PER_VERTEX, np.float32)
        self.indices = np.asarray(self.indices, dtype=np.uint16).reshape(-1)

    def indices_count(self) -> int:
        """Number of indices (three per triangle)."""
        return int(self.indices.size)

    def has_colors(self) -> bool:
        return len(self.colors) > 0

    def has_uvs(self) -> bool:
        return len(self.uvs) > 0

    def has_tangents(self) -> bool:
        return len(self.tangents) > 0

    def has_bones(self) -> bool:
        return len(self.bone_ids) > 0


class MeshFactory:
    """Collects vertex data and produces a :class:`Mesh`, then starts over empty.

    The material id set through :attr:`mat_id` survives :meth:`make`.
    """

    def __init__(self) -> None:
        self.mat_id = 0
        self._clear()

    def _clear(self) -> None:
        self._positions: list[tuple[float, ...]] = []
        self._colors: list[tuple[float, ...]] = []
        self._uvs: list[tuple[float, ...]] = []
        self._normals: list[tuple[float, ...]] = []
        self._tangents: list[tuple[float, ...]] = []
        self._bone_ids: list[list[int]] = []
        self._bone_weights: list[list[float]] = []
        self._indices: list[int] = []

    def add_position(self, p) -> "MeshFactory":
        self._positions.append(_vector(p, 3))
        return self

    def add_color(self, c) -> "MeshFactory":
        self._colors.append(_vector(c, 4))
        return self

    def add_uv(self, u) -> "MeshFactory":
        self._uvs.append(_vector(u, 2))
        return self

    def add_normal(self, n) -> "MeshFactory":
        self._normals.append(_vector(n, 3))
        return self

    def add_tangent(self, t) -> "MeshFactory":
        self._tangents.append(_vector(t, 3))
        return self

    def add_face(self, i1: int, i2: int, i3: int) -> "MeshFactory":
        """Append one triangle; each index must fit in an unsigned 16-bit value."""
        face = (int(i1), int(i2), int(i3))
        if any(not 0 <= index <= _MAX_INDEX for index in face):
            raise ValueError(f"face indices must lie in 0..{_MAX_INDEX}: {face}")
        self._indices.extend(face)
        return self

    def allocate_bone_data(self) -> "MeshFactory":
        """Reserve zeroed bone slots for every position added so far."""
        if not self._positions:
            raise MeshLoadingError(
                "Tried to allocate memory for bone data before simple vertex data (positions, colors). "
                "Program does not know how much memory to allocate. Bone data will be ignored."
            )
        count = len(self._positions)
        del self._bone_ids[count:]
        del self._bone_weights[count:]
        missing = count - len(self._bone_ids)
        self._bone_ids.extend([0] * BONES_PER_VERTEX for _ in range(missing))
        self._bone_weights.extend([0.0] * BONES_PER_VERTEX for _ in range(missing))
        return self

    def add_bone_data(self, vert_id: int, bone_id: int, weight: float) -> "MeshFactory":
        """Put a bone influence into the first free slot of a vertex.

        A slot holding bone id 0 counts as free.
        """
        if not self._positions or not self._bone_ids:
            raise MeshLoadingError("Bone data not allocated. Bone data ignored.")
        if not 0 <= vert_id < len(self._bone_ids):
            raise IndexError(f"vertex {vert_id} out of range 0..{len(self._bone_ids) - 1}")
        ids = self._bone_ids[vert_id]
        for slot, current in enumerate(ids):
            if current == 0:
                ids[slot] = int(bone_id)
                self._bone_weights[vert_id][slot] = float(weight)
                return self
        raise MeshLoadingError(f"Vertex affected by more than {BONES_PER_VERTEX} bones.")

    def make(self, name: str) -> Mesh:
        """Build a mesh from the collected data and empty the factory."""
        mesh = Mesh(
            name=name,
            mat_id=self.mat_id,
            positions=self._positions,
            colors=self._colors,
            uvs=self._uvs,
            normals=self._normals,
            tangents=self._tangents,
            bone_ids=self._bone_ids,
            bone_weights=self._bone_weights,
            indices=self._indices,
        )
        self._clear()
        return mesh