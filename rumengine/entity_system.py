"""Registry of models and entities, and a factory that places models as entities."""

from __future__ import annotations

from typing import Any

from .entity import Entity
from .storage import StorageManager


class EntityFactory:
    """Creates entities from models stored in a model storage."""

    def __init__(self, models: StorageManager) -> None:
        self.models = models

    def make(self, model_name: str, position, rotation=(0.0, 0.0, 0.0), scaling=(1.0, 1.0, 1.0)) -> Entity:
        """Create an entity for the named model; ``scaling`` may be a scalar.

        Raises ``KeyError`` if no model is stored under ``model_name``.
        """
        model = self.models.get(model_name)
        return Entity(model, position, rotation, scaling)


class EntitySystem:
    """Holds named models and entities and a factory bound to the models."""

    def __init__(self) -> None:
        self._entities: StorageManager[Entity] = StorageManager()
        self._models: StorageManager[Any] = StorageManager()
        self.entity_factory = EntityFactory(self._models)

    def add_entity(self, name: str, entity: Entity) -> None:
        self._entities.add(name, entity)

    def remove_entity(self, name: str) -> None:
        """Forget the named entity; unknown names are ignored."""
        if name in self._entities:
            del self._entities[name]

    def add_model(self, name: str, model: Any) -> None:
        self._models.add(name, model)

    def get_entity(self, name: str) -> Entity:
        """Return the named entity; raises ``KeyError`` if absent."""
        return self._entities.get(name)

    def get_model(self, name: str) -> Any:
        """Return the named model; raises ``KeyError`` if absent."""
        return self._models.get(name)