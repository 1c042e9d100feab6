"""Models: a set of meshes with materials and optional skeletal animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .mesh import Mesh


class InvalidDataError(ValueError):
    """Raised when an object is asked to build something from incomplete data."""


@dataclass(eq=False)
class Model:
    """Meshes, material aliases and, optionally, a skeleton with animations."""

    meshes: list[Mesh] = field(default_factory=list)
    material_aliases: list[list[Any]] = field(default_factory=list)
    has_skeleton_and_animation: bool = False
    animator: Optional[Any] = None
    skeleton: Optional[Any] = None
    skeletal_animations: list[Any] = field(default_factory=list)


class ModelFactory:
    """Builds models from meshes.

    Each :meth:`make` needs at least one :meth:`add_mesh` since the previous
    one; meshes added earlier stay in the factory and appear in later models.
    """

    def __init__(self) -> None:
        self._meshes: list[Mesh] = []
        self._added_mesh = False

    def add_mesh(self, mesh: Mesh) -> "ModelFactory":
        self._meshes.append(mesh)
        self._added_mesh = True
        return self

    def make(self) -> Model:
        if not self._added_mesh:
            raise InvalidDataError("ModelFactory was not given a mesh but was ordered to create a model")
        self._added_mesh = False
        return Model(meshes=list(self._meshes))