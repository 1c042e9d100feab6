"""Entities: placed instances of a model in the world."""

from __future__ import annotations

from typing import Any

import numpy as np

from .linalg import identity, rotate, scale as scale_matrix, translate

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


class Entity:
    """A model placed in the world with its own model-space matrix."""

    def __init__(self, model: Any, position, rotation, scale) -> None:
        self.model = model
        self.position = np.asarray(position, dtype=float).reshape(3)
        self.rotation = np.asarray(rotation, dtype=float).reshape(3)
        self.scale = np.broadcast_to(np.asarray(scale, dtype=float), (3,)).copy()
        self.model_matrix = self._compose_matrix()

    def _compose_matrix(self) -> np.ndarray:
        rx, ry, rz = self.rotation
        # Each axis rotation is applied to the already accumulated matrix twice over.
        rotation = rotate(identity(), rx, _X_AXIS)
        rotation = rotation @ rotate(rotation, ry, _Y_AXIS)
        rotation = rotation @ rotate(rotation, rz, _Z_AXIS)
        matrix = translate(identity(), self.position) @ rotation
        return scale_matrix(matrix, self.scale)

    def __repr__(self) -> str:
        return (
            f"Entity(model={self.model!r}, position={self.position.tolist()}, "
            f"rotation={self.rotation.tolist()}, scale={self.scale.tolist()})"
        )