"""Bone hierarchy of a skinned model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np

from .linalg import identity

MAX_BONES = 50


@dataclass(eq=False)
class Bone:
    """A transformation node in the skeleton.

    ``to_parent_space_matrix`` maps to the parent's space; ``offset`` maps from
    mesh space to bone space.
    """

    idx: int
    name: str
    to_parent_space_matrix: np.ndarray = field(default_factory=identity)
    offset: np.ndarray = field(default_factory=identity)
    parent: Optional["Bone"] = field(default=None, repr=False)
    children: list["Bone"] = field(default_factory=list)

    def add_child(self, child: "Bone") -> "Bone":
        """Attach ``child`` below this bone and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator["Bone"]:
        """Yield this bone and all its descendants depth first, parents before children."""
        stack = [self]
        while stack:
            bone = stack.pop()
            yield bone
            stack.extend(reversed(bone.children))


@dataclass(eq=False)
class Skeleton:
    """A root bone and the inverse of the root's transformation."""

    root_bone: Optional[Bone] = None
    global_inverse_transformation: np.ndarray = field(default_factory=identity)