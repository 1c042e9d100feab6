"""Conversion of imported scene meshes into engine meshes."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .mesh import Mesh, MeshFactory, MeshLoadingError
from .scene import SceneMesh

logger = logging.getLogger(__name__)

DEFAULT_COLOR = (1.0, 0.0, 0.0, 1.0)


class MeshLoader:
    """Loads one scene mesh at a time; :meth:`make` hands it over and resets the loader."""

    def __init__(self) -> None:
        self._factory = MeshFactory()
        self._scene_mesh: Optional[SceneMesh] = None
        self._mat_id = 0

    def load_basic_mesh_info(self, scene_mesh: SceneMesh) -> None:
        """Read positions, normals, colours, uvs, tangents and faces of ``scene_mesh``."""
        self._scene_mesh = scene_mesh
        self._mat_id = scene_mesh.material_index
        factory = self._factory

        has_colors = scene_mesh.has_vertex_colors()
        has_uvs = scene_mesh.has_texture_coords()
        for index, position in enumerate(scene_mesh.vertices):
            if not scene_mesh.has_positions() or not scene_mesh.has_normals():
                raise MeshLoadingError(
                    f"Loaded mesh is invalid {scene_mesh.name}\n"
                    "Mesh state:\n"
                    f"hasPositions : {str(scene_mesh.has_positions()).lower()}\n"
                    f"hasNormal : {str(scene_mesh.has_normals()).lower()}\n"
                )
            factory.add_position(position)
            factory.add_normal(scene_mesh.normals[index])
            factory.add_color(scene_mesh.colors[index] if has_colors else DEFAULT_COLOR)
            if has_uvs:
                u, v, *_ = scene_mesh.texture_coords[index]
                factory.add_uv((u, v))
                factory.add_tangent(scene_mesh.tangents[index])

        for face in scene_mesh.faces:
            factory.add_face(*face[:3])

    def add_bone_info(self, bone_name_to_index: Mapping[str, int]) -> None:
        """Attach bone influences; on a problem the rest of the bone data is skipped and logged."""
        if self._scene_mesh is None:
            raise MeshLoadingError("Tried to add bone info before loading a mesh.")
        try:
            self._factory.allocate_bone_data()
            for bone in self._scene_mesh.bones:
                if bone.name not in bone_name_to_index:
                    raise MeshLoadingError(f"Bone {bone.name!r} is not part of the skeleton.")
                bone_index = bone_name_to_index[bone.name]
                for weight in bone.weights:
                    self._factory.add_bone_data(weight.vertex_id, bone_index, weight.weight)
        except MeshLoadingError as error:
            logger.warning("Ignored mesh bone data because of an error:\n%s", error)

    def make(self) -> Mesh:
        """Return the loaded mesh and go back to the empty state."""
        if self._scene_mesh is None:
            raise MeshLoadingError("No mesh loaded. Possibly tried to return the same mesh twice.")
        self._factory.mat_id = self._mat_id
        name = self._scene_mesh.name
        self._scene_mesh = None
        return self._factory.make(name)