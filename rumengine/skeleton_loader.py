"""Extraction of a bone hierarchy from an imported scene's node tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .linalg import identity
from .scene import Scene, SceneMesh, SceneNode
from .skeleton import Bone, Skeleton


class SkeletonLoadingError(Exception):
    """Raised when a skeleton cannot be built from the scene or is asked for too early."""


@dataclass(eq=False)
class _NodeRecord:
    node: SceneNode
    necessary: bool = False


class SkeletonLoader:
    """Loads one skeleton at a time; :meth:`make` hands it over and resets the loader.

    Bones are the scene nodes named by mesh bones plus every ancestor up to
    (not including) the mesh's node or that node's parent.  Bone indices are
    assigned depth first, starting at the node nearest the scene root.
    """

    def __init__(self) -> None:
        self._records: dict[str, _NodeRecord] = {}
        self._bone_ids: dict[str, int] = {}
        self._offsets: dict[str, np.ndarray] = {}
        self._next_index = 0
        self._returned_initialised = False
        self._constructed: Optional[Skeleton] = None

    def load_skeleton(self, scene: Scene) -> None:
        """Build the skeleton of ``scene``; a scene without bones yields no skeleton."""
        skinned = [mesh for mesh in scene.meshes if mesh.has_bones()]
        if not skinned:
            self._constructed = None
            return

        self._records = {}
        self._bone_ids = {}
        self._offsets = {}
        self._next_index = 0

        self._register_nodes(scene.root)
        for mesh in skinned:
            mesh_root = self._record(mesh.name, "mesh").node
            self._mark_bones(mesh, mesh_root, mesh_root.parent)

        root_node = self._find_skeleton_root(scene.root)
        root_bone = self._to_bone(root_node)
        self._constructed = Skeleton(
            root_bone=root_bone,
            global_inverse_transformation=np.linalg.inv(root_bone.to_parent_space_matrix),
        )

    def _record(self, name: str, what: str) -> _NodeRecord:
        record = self._records.get(name)
        if record is None:
            raise SkeletonLoadingError(f"No scene node found for {what} {name!r}.")
        return record

    def _register_nodes(self, node: SceneNode) -> None:
        self._records.setdefault(node.name, _NodeRecord(node))
        for child in node.children:
            self._register_nodes(child)

    def _mark_bones(self, mesh: SceneMesh, mesh_root: SceneNode, mesh_root_parent: Optional[SceneNode]) -> None:
        for bone in mesh.bones:
            bone_node = self._record(bone.name, "bone").node
            self._mark_needed(bone_node, mesh_root, mesh_root_parent)
            self._offsets.setdefault(bone.name, np.array(bone.offset_matrix, dtype=float))

    def _mark_needed(
        self, leaf: Optional[SceneNode], mesh_root: SceneNode, mesh_root_parent: Optional[SceneNode]
    ) -> None:
        # Nodes that are not bones themselves still shape the pose when bones hang below them.
        while leaf is not None and leaf is not mesh_root and leaf is not mesh_root_parent:
            record = self._records[leaf.name]
            if record.necessary:
                return
            record.necessary = True
            leaf = leaf.parent

    def _find_skeleton_root(self, node: SceneNode) -> SceneNode:
        stack = [node]
        while stack:
            current = stack.pop()
            record = self._records[current.name]
            if record.necessary:
                return record.node
            stack.extend(reversed(current.children))
        raise SkeletonLoadingError("SkeletalSystem Root Node asked for but not found.\n")

    def _to_bone(self, node: SceneNode) -> Optional[Bone]:
        if not self._records[node.name].necessary:
            return None
        name = node.name
        offset = self._offsets.get(name)
        bone = Bone(
            idx=self._next_index,
            name=name,
            to_parent_space_matrix=np.array(node.transformation, dtype=float),
            offset=identity() if offset is None else offset.copy(),
        )
        self._bone_ids.setdefault(name, self._next_index)
        self._next_index += 1
        for child_node in node.children:
            child = self._to_bone(child_node)
            if child is not None:
                bone.add_child(child)
        return bone

    def bone_name_to_id(self) -> dict[str, int]:
        """Return the bone name to bone index map of the loaded skeleton."""
        if not self.is_initialised():
            raise SkeletonLoadingError("Asked for bone name to id map before skeleton was initialised.")
        return dict(self._bone_ids)

    def make(self) -> Optional[Skeleton]:
        """Hand over the loaded skeleton, or ``None`` if the scene had none."""
        skeleton = self._constructed
        self._returned_initialised = skeleton is not None
        self._constructed = None
        return skeleton

    def is_initialised(self) -> bool:
        """True while a skeleton is loaded or was the last one handed over."""
        return self._constructed is not None or self._returned_initialised