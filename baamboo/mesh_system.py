"""Tracks changes of static mesh components."""

from __future__ import annotations

from .components import StaticMeshComponent
from .registry import Registry


class StaticMeshSystem:
    """Marks static meshes dirty when created or patched and reports them once."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry
        registry.on_construct(StaticMeshComponent).connect(self.on_mesh_constructed)
        registry.on_update(StaticMeshComponent).connect(self.on_mesh_updated)
        registry.on_destroy(StaticMeshComponent).connect(self.on_mesh_destroyed)

    def on_mesh_constructed(self, registry: Registry, entity: int) -> None:
        registry.get(entity, StaticMeshComponent).dirty = True

    def on_mesh_updated(self, registry: Registry, entity: int) -> None:
        registry.get(entity, StaticMeshComponent).dirty = True

    def on_mesh_destroyed(self, registry: Registry, entity: int) -> None:
        """Nothing is held per mesh, so there is nothing to release."""

    def update(self) -> list[int]:
        """Return the entities whose meshes changed and clear their marks."""
        marked: list[int] = []
        for entity, mesh in self._registry.view(StaticMeshComponent):
            if mesh.dirty:
                marked.append(entity)
                mesh.dirty = False
        return marked