"""Loading of model description files into engine models."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable, Optional

from .animation_loader import SkeletonAnimationLoader
from .animator import SkeletalAnimator
from .materials_loader import (
    GEOMETRY_DIRECTORY,
    MODEL_DIRECTORY,
    MaterialsLoader,
    PathLike,
    element_text,
)
from .mesh_loader import MeshLoader
from .model import Model
from .scene import Scene
from .skeleton_loader import SkeletonLoader


class ModelLoadingError(Exception):
    """Raised when a model file or its geometry cannot be loaded."""


class ModelLoader:
    """Builds a :class:`Model` from a model file, its geometry and its materials.

    ``importer`` receives a geometry file path and returns a :class:`Scene`,
    or ``None`` if the file cannot be imported. The scene is taken to hold a
    single model.
    """

    def __init__(self, importer: Callable[[str], Optional[Scene]],
                 load_texture: Callable[[str], Any], base_dir: PathLike = ".") -> None:
        self._importer = importer
        self._base_dir = Path(base_dir)
        self._mesh_loader = MeshLoader()
        self._skeleton_loader = SkeletonLoader()
        self._animation_loader = SkeletonAnimationLoader()
        self._materials_loader = MaterialsLoader(load_texture, base_dir)

    def load_model(self, path: str) -> Model:
        """Load the model described by ``path`` below the model directory."""
        model_path = self._base_dir / (MODEL_DIRECTORY + path)
        try:
            root = ET.parse(model_path).getroot()
        except (OSError, ET.ParseError) as error:
            raise ModelLoadingError(f"Could not read model file: {model_path}") from error

        if root.get("name") is None:
            raise ModelLoadingError(f"Model has no name attribute: {model_path}")
        geometry = root.find("geometry")
        if geometry is None:
            raise ModelLoadingError(f"Model has no <geometry> element: {model_path}")

        geometry_path = str(self._base_dir / (GEOMETRY_DIRECTORY + element_text(geometry)))
        scene = self._importer(geometry_path)
        if scene is None:
            raise ModelLoadingError(f"Could not load file: {geometry_path}")

        model = Model()
        bone_ids = self._load_skeleton(scene, model)
        if bone_ids is not None:
            model.skeletal_animations = [self._load_animation(a, bone_ids) for a in scene.animations]

        for scene_mesh in scene.meshes:
            self._mesh_loader.load_basic_mesh_info(scene_mesh)
            if bone_ids is not None:
                self._mesh_loader.add_bone_info(bone_ids)
            model.meshes.append(self._mesh_loader.make())

        for alias in root.findall("alias"):
            self._materials_loader.load_materials(alias)
            model.material_aliases.append(self._materials_loader.materials())
            self._materials_loader.clear()
        self._materials_loader.clear()
        return model

    def _load_skeleton(self, scene: Scene, model: Model) -> Optional[dict[str, int]]:
        self._skeleton_loader.load_skeleton(scene)
        model.skeleton = self._skeleton_loader.make()
        if model.skeleton is None:
            return None
        model.animator = SkeletalAnimator(model.skeleton)
        return self._skeleton_loader.bone_name_to_id()

    def _load_animation(self, animation, bone_ids: dict[str, int]):
        self._animation_loader.load_animation(animation, bone_ids)
        return self._animation_loader.make()