"""A small entity store: entities own typed components, and events queue by type."""

from __future__ import annotations

import enum
import itertools
from collections import defaultdict
from typing import Any, TypeVar

T = TypeVar("T")


class InGameSet(enum.IntEnum):
    """Phases of a frame; iterating the enum yields them in run order."""

    DESPAWN_ENTITIES = 1
    USER_INPUT = 2
    ENTITY_UPDATES = 3
    COLLISION_DETECTION = 4


class World:
    """Entities keyed by integer id, each holding at most one component per type."""

    def __init__(self) -> None:
        self._entities: dict[int, dict[type, Any]] = {}
        self._ids = itertools.count(1)
        self._events: defaultdict[type, list[Any]] = defaultdict(list)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def spawn(self, *args: Any) -> int:
        """Create an entity from the given components and return its id."""
        components: dict[type, Any] = {}
        for component in args:
            kind = type(component)
            if kind in components:
                raise ValueError(f"duplicate component {kind.__name__} in one entity")
            components[kind] = component
        entity = next(self._ids)
        self._entities[entity] = components
        return entity

    def despawn(self, entity: int) -> bool:
        """Remove an entity; returns False if it was already gone."""
        return self._entities.pop(entity, None) is not None

    def component(self, entity: int, kind: type[T]) -> T:
        """The entity's component of the given type; KeyError if absent."""
        try:
            return self._entities[entity][kind]
        except KeyError:
            raise KeyError(f"entity {entity} has no {kind.__name__}") from None

    def has(self, entity: int, kind: type) -> bool:
        components = self._entities.get(entity)
        return components is not None and kind in components

    def query(self, *args: type) -> list[tuple[Any, ...]]:
        """Snapshot of ``(entity, *components)`` for entities holding every given type."""
        return [
            (entity, *(components[kind] for kind in args))
            for entity, components in self._entities.items()
            if all(kind in components for kind in args)
        ]

    def send(self, event: Any) -> None:
        """Queue an event under its type."""
        self._events[type(event)].append(event)

    def drain(self, kind: type[T]) -> list[T]:
        """Take every queued event of the given type, oldest first."""
        return self._events.pop(kind, [])