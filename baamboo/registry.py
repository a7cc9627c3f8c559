"""A minimal entity-component registry with lifecycle signals."""

from __future__ import annotations

from collections import defaultdict
from itertools import count
from typing import Any, Callable, Iterator, Optional

Callback = Callable[["Registry", int], None]


class Signal:
    """A list of callbacks invoked with ``(registry, entity)``."""

    def __init__(self) -> None:
        self._callbacks: list[Callback] = []

    def connect(self, callback: Callback) -> None:
        """Register ``callback``; connecting it twice has no further effect."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def disconnect(self, callback: Callback) -> None:
        """Unregister ``callback`` if it is connected."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, registry: "Registry", entity: int) -> None:
        """Call every connected callback in connection order."""
        for callback in list(self._callbacks):
            callback(registry, entity)

    def __len__(self) -> int:
        return len(self._callbacks)


class Registry:
    """Stores components per type and entity, and signals their life cycle.

    Entities are integers that are never reused. ``None`` stands for no entity.
    """

    def __init__(self) -> None:
        self._ids = count()
        self._entities: dict[int, None] = {}
        self._pools: dict[type, dict[int, Any]] = {}
        self._construct: defaultdict[type, Signal] = defaultdict(Signal)
        self._update: defaultdict[type, Signal] = defaultdict(Signal)
        self._destroy: defaultdict[type, Signal] = defaultdict(Signal)

    def _require(self, entity: Optional[int]) -> int:
        if not self.valid(entity):
            raise KeyError(f"invalid entity {entity!r}")
        return entity  # type: ignore[return-value]

    def create(self) -> int:
        """Make a new entity with no components."""
        entity = next(self._ids)
        self._entities[entity] = None
        return entity

    def destroy(self, entity: int) -> None:
        """Remove every component of ``entity`` and then the entity itself."""
        self._require(entity)
        for component_type, pool in list(self._pools.items()):
            if entity in pool:
                self._remove(entity, component_type)
        del self._entities[entity]

    def valid(self, entity: Optional[int]) -> bool:
        """True if ``entity`` was created and not destroyed."""
        return entity is not None and entity in self._entities

    def emplace(self, entity: int, component_type: type, *args: Any, **kwargs: Any) -> Any:
        """Construct a component for ``entity``, signal its construction and return it."""
        self._require(entity)
        pool = self._pools.setdefault(component_type, {})
        if entity in pool:
            raise ValueError(f"entity {entity} already has {component_type.__name__}")
        component = component_type(*args, **kwargs)
        pool[entity] = component
        self._construct[component_type].emit(self, entity)
        return component

    def _remove(self, entity: int, component_type: type) -> None:
        self._destroy[component_type].emit(self, entity)
        pool = self._pools.get(component_type)
        if pool is not None:
            pool.pop(entity, None)

    def remove(self, entity: int, component_type: type) -> int:
        """Remove a component if present; return how many were removed."""
        self._require(entity)
        if entity not in self._pools.get(component_type, {}):
            return 0
        self._remove(entity, component_type)
        return 1

    def get(self, entity: int, component_type: type) -> Any:
        """The component of ``component_type`` owned by ``entity``."""
        self._require(entity)
        try:
            return self._pools[component_type][entity]
        except KeyError:
            raise KeyError(f"entity {entity} has no {component_type.__name__}") from None

    def all_of(self, entity: int, *args: type) -> bool:
        """True if ``entity`` has every one of the given component types."""
        self._require(entity)
        return all(entity in self._pools.get(t, {}) for t in args)

    def any_of(self, entity: int, *args: type) -> bool:
        """True if ``entity`` has at least one of the given component types."""
        self._require(entity)
        return any(entity in self._pools.get(t, {}) for t in args)

    def patch(self, entity: int, component_type: type, func: Optional[Callable[[Any], None]] = None) -> Any:
        """Apply ``func`` to a component, signal the update and return the component."""
        component = self.get(entity, component_type)
        if func is not None:
            func(component)
        self._update[component_type].emit(self, entity)
        return component

    def view(self, *args: type) -> Iterator[tuple]:
        """Yield ``(entity, *components)`` for entities holding all given types.

        Iteration follows the order of the first type's storage.
        """
        if not args:
            raise TypeError("view needs at least one component type")
        pools = [self._pools.get(t, {}) for t in args]
        return self._iterate(pools)

    @staticmethod
    def _iterate(pools: list[dict[int, Any]]) -> Iterator[tuple]:
        first = pools[0]
        for entity in list(first):
            if all(entity in pool for pool in pools):
                yield (entity, *(pool[entity] for pool in pools))

    def sort(self, component_type: type, key: Callable[[Any], Any]) -> None:
        """Reorder the storage of ``component_type`` by ``key`` of each component (stable)."""
        pool = self._pools.get(component_type)
        if not pool:
            return
        items = sorted(pool.items(), key=lambda item: key(item[1]))
        pool.clear()
        pool.update(items)

    def on_construct(self, component_type: type) -> Signal:
        return self._construct[component_type]

    def on_update(self, component_type: type) -> Signal:
        return self._update[component_type]

    def on_destroy(self, component_type: type) -> Signal:
        return self._destroy[component_type]