"""Name-keyed storage for shared objects and a contiguous buffer of model matrices."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

import numpy as np

T = TypeVar("T")


class StorageManager(Generic[T]):
    """Stores objects under unique string names; the first object stored under a name wins."""

    def __init__(self) -> None:
        self._objects: dict[str, T] = {}

    def add(self, key: str, obj: T) -> None:
        """Store ``obj`` under ``key`` unless that key is already taken."""
        self._objects.setdefault(key, obj)

    def get(self, key: str) -> T:
        """Return the object stored under ``key``; raises ``KeyError`` if absent."""
        return self._objects[key]

    def __delitem__(self, key: str) -> None:
        if key not in self._objects:
            raise KeyError(f"no object stored under {key!r}")
        del self._objects[key]

    def __contains__(self, key: object) -> bool:
        return key in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._objects))


class ModelMatricesBuffer:
    """Holds 4x4 model matrices so they can be handed over as one contiguous block."""

    def __init__(self) -> None:
        self._matrices: list[np.ndarray] = []

    def add_model_matrix(self, matrix) -> np.ndarray:
        """Store a copy of ``matrix`` and return the stored array.

        Changes made in place to the returned array show up in later calls to
        :meth:`matrices`.
        """
        stored = np.array(matrix, dtype=float)
        if stored.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {stored.shape}")
        self._matrices.append(stored)
        return stored

    def matrices(self) -> np.ndarray:
        """Return all stored matrices as one array of shape (n, 4, 4)."""
        if not self._matrices:
            return np.empty((0, 4, 4))
        return np.stack(self._matrices)

    def __len__(self) -> int:
        return len(self._matrices)