"""Loading of material description files referenced from a model's material alias."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .material import Material, MaterialPBR, MaterialPhong

TEXTURE_DIRECTORY = "Assets/Materials/Textures/"
MODEL_DIRECTORY = "Assets/Models/"
GEOMETRY_DIRECTORY = "Assets/Geometry/"
MATERIAL_DIRECTORY = "Assets/Materials/"

PathLike = Union[str, "os.PathLike[str]"]


class MaterialLoadingError(Exception):
    """Raised when a material file is malformed or describes an unsupported material."""


def element_text(element: ET.Element) -> str:
    """Return the element's text, or an empty string if it has none."""
    return element.text or ""


def _child_text(parent: ET.Element, tag: str) -> str:
    child = parent.find(tag)
    if child is None:
        raise MaterialLoadingError(f"Material is missing the <{tag}> element.")
    return element_text(child)


class MaterialsLoader:
    """Collects the materials listed by alias elements.

    ``load_texture`` receives a texture file path and returns a texture;
    all asset paths are resolved below ``base_dir``.
    """

    def __init__(self, load_texture: Callable[[str], Any], base_dir: PathLike = ".") -> None:
        self._load_texture = load_texture
        self._base_dir = Path(base_dir)
        self._materials: list[Material] = []

    def load_materials(self, alias_element: ET.Element) -> None:
        """Load the first ``<material>`` child of ``alias_element`` and every element after it."""
        children = list(alias_element)
        start = next((i for i, child in enumerate(children) if child.tag == "material"), None)
        if start is None:
            return
        for entry in children[start:]:
            self._load_file(element_text(entry))

    def _load_file(self, name: str) -> None:
        path = self._base_dir / (MATERIAL_DIRECTORY + name)
        try:
            root = ET.parse(path).getroot()
        except FileNotFoundError:
            raise FileNotFoundError(f"Could not load file: {path}") from None
        except (OSError, ET.ParseError) as error:
            raise MaterialLoadingError(f"Could not parse XML file: {path}") from error

        if root.tag != "material":
            raise MaterialLoadingError(f"No <material> element in file: {path}")
        material_type = root.get("type")
        if material_type is None:
            raise MaterialLoadingError(f"Material has no type attribute in file: {path}")

        if material_type == "PBR_MR":
            self._materials.append(self._load_pbr(root))
        elif material_type == "PHONG":
            self._materials.append(self._load_phong(root))
        else:
            raise MaterialLoadingError(f"Unsuported material type:\t{material_type}\n")

    def _texture(self, material_element: ET.Element, tag: str) -> Any:
        text = _child_text(material_element, tag)
        return self._load_texture(str(self._base_dir / (TEXTURE_DIRECTORY + text)))

    def _load_pbr(self, element: ET.Element) -> MaterialPBR:
        maps = [self._texture(element, tag)
                for tag in ("albedo", "ambient", "metalness", "roughness", "normal")]
        return MaterialPBR(*maps)

    def _load_phong(self, element: ET.Element) -> MaterialPhong:
        return MaterialPhong(self._texture(element, "color"), self._texture(element, "normal"))

    def clear(self) -> None:
        """Forget all loaded materials."""
        self._materials.clear()

    def materials(self) -> list[Material]:
        """Return the materials loaded since the last :meth:`clear`, in load order."""
        return list(self._materials)


def _optional_child(parent: ET.Element, tag: str) -> Optional[ET.Element]:
    return parent.find(tag)