"""Tracks changes of material components."""

from __future__ import annotations

import numpy as np

from .components import MaterialComponent
from .registry import Registry


class MaterialSystem:
    """Gives new materials their defaults and reports changed materials once."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry
        registry.on_construct(MaterialComponent).connect(self.on_material_constructed)
        registry.on_update(MaterialComponent).connect(self.on_material_updated)
        registry.on_destroy(MaterialComponent).connect(self.on_material_destroyed)

    def on_material_constructed(self, registry: Registry, entity: int) -> None:
        material = registry.get(entity, MaterialComponent)
        material.tint = np.ones(3)
        material.roughness = 1.0
        material.metallic = 0.0
        material.dirty = True

    def on_material_updated(self, registry: Registry, entity: int) -> None:
        registry.get(entity, MaterialComponent).dirty = True

    def on_material_destroyed(self, registry: Registry, entity: int) -> None:
        """Nothing is held per material, so there is nothing to release."""

    def update(self) -> list[int]:
        """Return the entities whose materials changed and clear their marks."""
        marked: list[int] = []
        for entity, material in self._registry.view(MaterialComponent):
            if material.dirty:
                marked.append(entity)
                material.dirty = False
        return marked