"""Entities, components, systems and shared resources of the engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

Entity = int


class Component:
    """Optional base for data attached to entities."""


class Resource:
    """Optional base for data shared by every system."""


class Schedule(Enum):
    """When a system runs: once before the main loop, or on every frame."""

    SETUP = auto()
    LOOP = auto()


class System(ABC):
    """Logic that works on the world and the shared resources."""

    def get_schedule(self) -> Schedule:
        """Systems run every frame unless they say otherwise."""
        return Schedule.LOOP

    @abstractmethod
    def run(self, world: World, resources: ResourcesManager) -> None:
        """Do one step of work."""


@dataclass
class Deltatime(Resource):
    """Seconds elapsed since the previous frame."""

    seconds: float = 0.0

    def __float__(self) -> float:
        return float(self.seconds)


class ComponentStorage(Generic[T]):
    """Components of one type, indexed by entity."""

    def __init__(self) -> None:
        self._data: list[T | None] = []

    def insert(self, entity: Entity, component: T) -> None:
        """Store ``component`` for ``entity``, replacing any previous one."""
        if entity < 0:
            raise ValueError(f"invalid entity: {entity}")
        missing = entity + 1 - len(self._data)
        if missing > 0:
            self._data.extend([None] * missing)
        self._data[entity] = component

    def get(self, entity: Entity) -> T | None:
        """The entity's component, or None when it has none."""
        if 0 <= entity < len(self._data):
            return self._data[entity]
        return None

    def remove(self, entity: Entity) -> None:
        """Drop the entity's component, if any."""
        if 0 <= entity < len(self._data):
            self._data[entity] = None


class EntityManager:
    """Hands out entity ids and recycles the ids of destroyed entities."""

    def __init__(self) -> None:
        self._next_id: Entity = 0
        self._free_ids: list[Entity] = []

    def create(self) -> Entity:
        """A new entity id, reusing the most recently freed one first."""
        if self._free_ids:
            return self._free_ids.pop()
        entity = self._next_id
        self._next_id += 1
        return entity

    def destroy(self, entity: Entity) -> None:
        """Mark ``entity`` as free for reuse."""
        self._free_ids.append(entity)

    def active_entities(self) -> Iterator[Entity]:
        """Ids handed out and not destroyed, in increasing order."""
        return (entity for entity in range(self._next_id) if entity not in self._free_ids)


class World:
    """Entities and their components, stored per component type."""

    def __init__(self) -> None:
        self.entity_manager = EntityManager()
        self._storages: dict[type, ComponentStorage[Any]] = {}

    def spawn(self) -> Entity:
        """Create a new entity with no components."""
        return self.entity_manager.create()

    def add_component(self, component: object) -> Entity:
        """Spawn an entity holding ``component`` and return it."""
        entity = self.spawn()
        self.add_entity_component(entity, component)
        return entity

    def add_components(self, *args: object) -> Entity:
        """Spawn an entity holding every given component and return it."""
        entity = self.spawn()
        for component in args:
            self.add_entity_component(entity, component)
        return entity

    def add_entity_component(self, entity: Entity, component: object) -> None:
        """Attach ``component`` to ``entity``, replacing one of the same type."""
        storage = self._storages.setdefault(type(component), ComponentStorage())
        storage.insert(entity, component)

    def get_component(self, entity: Entity, component_type: type[T]) -> T | None:
        """The entity's component of ``component_type``, or None."""
        storage = self._storages.get(component_type)
        return storage.get(entity) if storage is not None else None

    def components(self, entity: Entity, *args: type) -> tuple[Any, ...]:
        """The entity's components of each given type, None where it has none."""
        return tuple(self.get_component(entity, component_type) for component_type in args)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        """Detach the entity's component of ``component_type``, if any."""
        storage = self._storages.get(component_type)
        if storage is not None:
            storage.remove(entity)

    def destroy_entity(self, entity: Entity) -> None:
        """Free the entity id; its components are left in place."""
        self.entity_manager.destroy(entity)


class ResourcesManager:
    """Holds at most one resource of each type."""

    def __init__(self) -> None:
        self._resources: dict[type, object] = {}

    def add(self, resource: object) -> None:
        """Store ``resource`` unless one of its type is already present."""
        self._resources.setdefault(type(resource), resource)

    def get(self, resource_type: type[T]) -> T:
        """The resource of ``resource_type``; raises KeyError when absent."""
        try:
            return self._resources[resource_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(f"no resource of type {resource_type.__name__}") from None

    def replace(self, resource: object) -> None:
        """Replace the stored resource of the same type; raises KeyError when absent."""
        resource_type = type(resource)
        if resource_type not in self._resources:
            raise KeyError(f"no resource of type {resource_type.__name__}")
        self._resources[resource_type] = resource