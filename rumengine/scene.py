"""Plain data describing an imported scene: node hierarchy, meshes, bones and animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .linalg import identity

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


@dataclass(eq=False)
class SceneNode:
    """A named node with a transformation relative to its parent."""

    name: str
    transformation: np.ndarray = field(default_factory=identity)
    children: list["SceneNode"] = field(default_factory=list)
    parent: Optional["SceneNode"] = field(default=None, repr=False)

    def add_child(self, child: "SceneNode") -> "SceneNode":
        """Attach ``child`` below this node and return it."""
        child.parent = self
        self.children.append(child)
        return child


@dataclass(frozen=True)
class VertexWeight:
    """Influence of a bone on one vertex."""

    vertex_id: int
    weight: float


@dataclass
class SceneBone:
    """A bone of a mesh with its mesh-to-bone offset matrix."""

    name: str
    weights: list[VertexWeight] = field(default_factory=list)
    offset_matrix: np.ndarray = field(default_factory=identity)


@dataclass
class SceneMesh:
    """Vertex data of one imported mesh; colours and uvs come from the first channel."""

    name: str
    vertices: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    tangents: list[Vec3] = field(default_factory=list)
    colors: list[Vec4] = field(default_factory=list)
    texture_coords: list[Vec3] = field(default_factory=list)
    faces: list[tuple[int, ...]] = field(default_factory=list)
    bones: list[SceneBone] = field(default_factory=list)
    material_index: int = 0

    def has_positions(self) -> bool:
        return bool(self.vertices)

    def has_normals(self) -> bool:
        return bool(self.normals) and bool(self.vertices)

    def has_vertex_colors(self) -> bool:
        return bool(self.colors) and bool(self.vertices)

    def has_texture_coords(self) -> bool:
        return bool(self.texture_coords) and bool(self.vertices)

    def has_bones(self) -> bool:
        return bool(self.bones)


@dataclass(frozen=True)
class VectorKey:
    """A timed 3-vector key (translation or scaling)."""

    time: float
    value: Vec3


@dataclass(frozen=True)
class QuatKey:
    """A timed rotation key; ``value`` is a quaternion ``(w, x, y, z)``."""

    time: float
    value: Vec4


@dataclass
class NodeAnimation:
    """Keyframes that animate one node."""

    node_name: str
    position_keys: list[VectorKey] = field(default_factory=list)
    rotation_keys: list[QuatKey] = field(default_factory=list)
    scaling_keys: list[VectorKey] = field(default_factory=list)


@dataclass
class SceneAnimation:
    """A named animation made of per-node channels."""

    name: str
    duration: float
    ticks_per_second: float
    channels: list[NodeAnimation] = field(default_factory=list)


@dataclass
class Scene:
    """An imported scene: a root node, its meshes and its animations."""

    root: SceneNode
    meshes: list[SceneMesh] = field(default_factory=list)
    animations: list[SceneAnimation] = field(default_factory=list)