"""Materials: sets of textures that are bound together before drawing a mesh."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Iterable, Protocol


class Bindable(Protocol):
    """Anything that can be bound to a texture unit."""

    def bind(self, texture_unit: int) -> None: ...


class MaterialType(enum.Enum):
    """The shading model a material is meant for."""

    PBR = "PBR"
    PHONG = "PHONG"
    FUR = "FUR"
    CUSTOM = "CUSTOM"


class Material(ABC):
    """Base class of all materials."""

    type: MaterialType

    @abstractmethod
    def bind(self) -> None:
        """Bind the material's textures to their texture units."""


class MaterialPBR(Material):
    """Metalness/roughness PBR material; binds its maps to units 0 through 4."""

    type = MaterialType.PBR

    def __init__(self, albedo: Bindable, ambient: Bindable, metalness: Bindable,
                 roughness: Bindable, normal: Bindable) -> None:
        self.albedo = albedo
        self.ambient = ambient
        self.metalness = metalness
        self.roughness = roughness
        self.normal = normal

    def bind(self) -> None:
        maps = (self.albedo, self.ambient, self.metalness, self.roughness, self.normal)
        for unit, texture in enumerate(maps):
            texture.bind(unit)


class MaterialPhong(Material):
    """Phong material with a colour map and a normal map."""

    type = MaterialType.PHONG

    def __init__(self, color: Bindable, normal: Bindable) -> None:
        self.color = color
        self.normal = normal

    def bind(self) -> None:
        """Phong materials have no texture units assigned, so nothing is bound."""
        return None


class MaterialFur(Material):
    """Fur material with colour, normal and height maps."""

    type = MaterialType.FUR

    def __init__(self, color: Bindable, normal: Bindable, height: Bindable) -> None:
        self.color = color
        self.normal = normal
        self.height = height

    def bind(self) -> None:
        """Fur materials have no texture units assigned, so nothing is bound."""
        return None


class MaterialCustom(Material):
    """A free-form material made of ``(texture, texture_unit)`` pairs."""

    type = MaterialType.CUSTOM

    def __init__(self, textures: Iterable[tuple[Bindable, int]]) -> None:
        self.textures = [(texture, int(unit)) for texture, unit in textures]

    def bind(self) -> None:
        for texture, unit in self.textures:
            texture.bind(unit)