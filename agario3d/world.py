"""A small entity store: entities are ids holding one component per type."""

from __future__ import annotations

import itertools
from enum import Enum, auto
from typing import Any, TypeVar

T = TypeVar("T")


class Key(Enum):
    """Keys the game reacts to."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ESCAPE = auto()


class World:
    """Entities with typed components, plus singleton resources."""

    def __init__(self) -> None:
        self._entities: dict[int, dict[type, Any]] = {}
        self._resources: dict[type, Any] = {}
        self._ids = itertools.count()

    def __len__(self) -> int:
        return len(self._entities)

    def spawn(self, *args: Any) -> int:
        """Create an entity from the given components and return its id."""
        components = {type(component): component for component in args}
        if len(components) != len(args):
            raise ValueError("duplicate component type in spawn")
        entity = next(self._ids)
        self._entities[entity] = components
        return entity

    def _components(self, entity: int) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"unknown entity {entity}") from None

    def despawn(self, entity: int) -> None:
        self._components(entity)
        del self._entities[entity]

    def contains(self, entity: int) -> bool:
        return entity in self._entities

    def insert(self, entity: int, *args: Any) -> None:
        """Add components to an entity, replacing any of the same type."""
        self._components(entity).update((type(component), component) for component in args)

    def get(self, entity: int, kind: type[T]) -> T | None:
        """The entity's component of ``kind``, or None if it has none."""
        return self._components(entity).get(kind)

    def query(self, *args: type) -> list[tuple[Any, ...]]:
        """Rows of (entity, component, ...) for entities having every given kind."""
        return [
            (entity, *(components[kind] for kind in args))
            for entity, components in self._entities.items()
            if all(kind in components for kind in args)
        ]

    def insert_resource(self, resource: Any) -> None:
        self._resources[type(resource)] = resource

    def resource(self, kind: type[T]) -> T:
        try:
            return self._resources[kind]
        except KeyError:
            raise KeyError(f"no resource of type {kind.__name__}") from None