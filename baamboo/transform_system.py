"""Maintains world matrices and parent/child links of transform components."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .components import TransformComponent
from .freelist import FreeList
from .registry import Registry

_INITIAL_CAPACITY = 1024


class TransformSystem:
    """Keeps one world matrix per transform component, updated when marked dirty."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry
        registry.on_construct(TransformComponent).connect(self.on_transform_constructed)
        registry.on_update(TransformComponent).connect(self.on_transform_updated)
        registry.on_destroy(TransformComponent).connect(self.on_transform_destroyed)

        self._worlds: list[np.ndarray] = [np.eye(4) for _ in range(_INITIAL_CAPACITY)]
        self._indices = FreeList()
        self._indices.reserve(_INITIAL_CAPACITY)

    def _component(self, entity: int) -> TransformComponent:
        return self._registry.get(entity, TransformComponent)

    def on_transform_constructed(self, registry: Registry, entity: int) -> None:
        self.mark_dirty(entity)

        index = self._indices.allocate()
        registry.get(entity, TransformComponent).world = index

        if index >= len(self._worlds):
            self._worlds.extend(np.eye(4) for _ in range(index * 2 - len(self._worlds)))
        self._worlds[index] = np.eye(4)

    def on_transform_updated(self, registry: Registry, entity: int) -> None:
        self.mark_dirty(entity)

    def on_transform_destroyed(self, registry: Registry, entity: int) -> None:
        self._indices.release(registry.get(entity, TransformComponent).world)

    def update(self) -> list[int]:
        """Recompute world matrices of dirty entities, parents first; return them."""
        self._registry.sort(TransformComponent, key=lambda c: c.hierarchy.depth)

        marked: list[int] = []
        for entity, component in self._registry.view(TransformComponent):
            if component.dirty:
                component.transform.update()
                self._update_world_transform(entity)
                marked.append(entity)
                component.dirty = False
        return marked

    def mark_dirty(self, entity: int) -> None:
        """Flag ``entity`` and all of its descendants for update."""
        pending = [entity]
        while pending:
            current = pending.pop()
            component = self._component(current)
            component.dirty = True
            child = component.hierarchy.first_child
            while child is not None:
                pending.append(child)
                child = self._component(child).hierarchy.next_sibling

    def attach_child(self, parent: Optional[int], child: int) -> None:
        """Make ``child`` the last child of ``parent``, detaching it from its old parent."""
        child_h = self._component(child).hierarchy
        if child_h.parent is not None:
            self.detach_child(child)

        child_h.parent = parent
        if parent is not None:
            parent_h = self._component(parent).hierarchy
            child_h.depth = parent_h.depth + 1

            if parent_h.first_child is None:
                parent_h.first_child = child
            else:
                last = parent_h.first_child
                while self._registry.valid(last):
                    last_h = self._component(last).hierarchy
                    if last_h.next_sibling is None:
                        last_h.next_sibling = child
                        child_h.prev_sibling = last
                        break
                    last = last_h.next_sibling
        else:
            child_h.depth = 0
            child_h.prev_sibling = None
            child_h.next_sibling = None
        self.mark_dirty(child)

    def detach_child(self, child: int) -> None:
        """Unlink ``child`` from its parent and siblings."""
        child_h = self._component(child).hierarchy
        parent = child_h.parent
        if parent is None or not self._registry.valid(parent):
            return

        parent_h = self._component(parent).hierarchy
        if parent_h.first_child == child:
            parent_h.first_child = child_h.next_sibling
            if child_h.next_sibling is not None:
                self._component(child_h.next_sibling).hierarchy.prev_sibling = None
        elif child_h.prev_sibling is not None:
            self._component(child_h.prev_sibling).hierarchy.next_sibling = child_h.next_sibling
            if child_h.next_sibling is not None:
                self._component(child_h.next_sibling).hierarchy.prev_sibling = child_h.prev_sibling

        child_h.parent = None
        child_h.prev_sibling = None
        child_h.next_sibling = None

    def world_matrix(self, index: int) -> np.ndarray:
        """A copy of the world matrix stored at ``index``."""
        if not 0 <= index < len(self._worlds):
            raise IndexError(f"world index {index} out of range")
        return self._worlds[index].copy()

    def _update_world_transform(self, entity: int) -> None:
        component = self._component(entity)
        local = component.transform.matrix()
        parent = component.hierarchy.parent
        if parent is not None and self._registry.valid(parent):
            parent_world = self._worlds[self._component(parent).world]
            self._worlds[component.world] = parent_world @ local
        else:
            self._worlds[component.world] = local