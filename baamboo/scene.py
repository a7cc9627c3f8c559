"""Scenes of entities and the handle used to work with one entity."""

from __future__ import annotations

import copy
import dataclasses
import logging
import os
from collections import deque
from pathlib import Path
from typing import Any, Optional, Union

from .common import ComponentType
from .components import (
    DynamicMeshComponent,
    MaterialComponent,
    StaticMeshComponent,
    TagComponent,
    TransformComponent,
)
from .material_system import MaterialSystem
from .mesh_system import StaticMeshSystem
from .model import ModelNode
from .registry import Registry
from .render_view import (
    CameraRenderView,
    DrawRenderView,
    MaterialRenderView,
    SceneRenderView,
    StaticMeshRenderView,
    TransformRenderView,
)
from .transform_system import TransformSystem

logger = logging.getLogger(__name__)

_TEXTURE_FIELDS = (
    ("albedo_texture", "albedo_tex"),
    ("normal_texture", "normal_tex"),
    ("specular_texture", "specular_tex"),
    ("emissive_texture", "emission_tex"),
    ("ao_texture", "ao_tex"),
    ("roughness_texture", "roughness_tex"),
    ("metallic_texture", "metallic_tex"),
)


def _copy_into(target: Any, source: Any) -> None:
    for f in dataclasses.fields(source):
        setattr(target, f.name, copy.deepcopy(getattr(source, f.name)))


class Entity:
    """An entity of a scene; ``id`` is None for no entity."""

    def __init__(self, scene: Optional["Scene"] = None, id: Optional[int] = None) -> None:
        self.scene = scene
        self.id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id and self.scene is other.scene

    def __hash__(self) -> int:
        return hash((id(self.scene), self.id))

    def __bool__(self) -> bool:
        return self.id is not None

    def __repr__(self) -> str:
        return f"Entity({self.id!r})"

    def _registry(self) -> Registry:
        if self.scene is None:
            raise ValueError("entity belongs to no scene")
        return self.scene.registry

    def reset(self) -> None:
        """Detach the handle from its scene and entity."""
        self.id = None
        self.scene = None

    def is_valid(self) -> bool:
        """True if the entity still exists in its scene."""
        return self.scene is not None and self.scene.registry.valid(self.id)

    def attach_component(self, component_type: type, *args: Any, **kwargs: Any) -> Any:
        """Add a new component; raises ValueError if one of that type is present."""
        if self.has_all(component_type):
            raise ValueError(f"{component_type.__name__} is already in entity_{self.id}")
        return self._registry().emplace(self.id, component_type, *args, **kwargs)

    def remove_component(self, component_type: type) -> int:
        """Remove a component; raises KeyError if there is none."""
        if not self.has_all(component_type):
            raise KeyError(f"no {component_type.__name__} in entity_{self.id}")
        return self._registry().remove(self.id, component_type)

    def get_component(self, component_type: type) -> Any:
        return self._registry().get(self.id, component_type)

    def has_all(self, *args: type) -> bool:
        return self._registry().all_of(self.id, *args)

    def has_any(self, *args: type) -> bool:
        return self._registry().any_of(self.id, *args)

    def attach_child(self, child: Union["Entity", int]) -> None:
        """Make ``child`` the last child of this entity."""
        child_id = child.id if isinstance(child, Entity) else child
        registry = self._registry()
        if not (self.has_all(TransformComponent) and registry.all_of(child_id, TransformComponent)):
            raise ValueError("Only entity with TransformComponent can have hierarchical traits!")
        self.scene.transform_system.attach_child(self.id, child_id)

    def detach_child(self) -> None:
        """Unlink this entity from its parent."""
        if not self.has_all(TransformComponent):
            raise ValueError("Only entity with TransformComponent can have hierarchical traits!")
        self.scene.transform_system.detach_child(self.id)

    def clone(self) -> "Entity":
        """Create a copy named ``<tag>_clone`` with the transform and meshes copied."""
        if not self.is_valid():
            raise ValueError("cannot clone an invalid entity")
        new_entity = self.scene.create_entity(self.get_component(TagComponent).tag + "_clone")

        source = self.get_component(TransformComponent)
        target = new_entity.get_component(TransformComponent)
        target.transform = copy.deepcopy(source.transform)
        target.hierarchy = copy.deepcopy(source.hierarchy)
        target.dirty = source.dirty

        for component_type in (StaticMeshComponent, DynamicMeshComponent):
            if self.has_all(component_type):
                _copy_into(new_entity.attach_component(component_type), self.get_component(component_type))
        return new_entity


class Scene:
    """A named set of entities with the systems that maintain their components."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.loading = False
        self.registry = Registry()
        self._dirty_masks: dict[int, int] = {}
        self.transform_system = TransformSystem(self.registry)
        self.static_mesh_system = StaticMeshSystem(self.registry)
        self.material_system = MaterialSystem(self.registry)

    def create_entity(self, tag: str = "Empty") -> Entity:
        """Create an entity with a tag and a transform."""
        entity = Entity(self, self.registry.create())
        entity.attach_component(TagComponent, tag)
        entity.attach_component(TransformComponent)
        logger.debug("create entity_%d", entity.id)
        self._dirty_masks[entity.id] = 0
        return entity

    def remove_entity(self, entity: Entity) -> None:
        """Remove an entity together with all of its descendants."""
        logger.debug("remove entity_%d", entity.id)

        hierarchy = entity.get_component(TransformComponent).hierarchy
        if hierarchy.parent is not None:
            self.transform_system.detach_child(entity.id)

        child = hierarchy.first_child
        while child is not None:
            child_entity = Entity(self, child)
            component = child_entity.get_component(TransformComponent)
            component.hierarchy.parent = None
            self.remove_entity(child_entity)
            child = component.hierarchy.next_sibling

        self.registry.destroy(entity.id)
        self._dirty_masks.pop(entity.id, None)

    def import_model(
        self,
        filepath: Union[str, "os.PathLike[str]"],
        root: ModelNode,
        root_entity: Optional[Entity] = None,
    ) -> Entity:
        """Create entities for a loaded model tree under ``root_entity``.

        Without ``root_entity`` a new one named ``<file>_root`` is created.
        """
        path = Path(filepath)
        filename = path.name
        if root_entity is None:
            root_entity = self.create_entity(filename + "_root")

        directory = str(path.parent)
        depth = 0
        pending: deque[tuple[ModelNode, Entity]] = deque([(root, root_entity)])
        while pending:
            node, parent = pending.popleft()

            node_entity = self.create_entity(f"{filename}_child{depth}")
            depth += 1
            parent.attach_child(node_entity)

            for mesh_data in node.meshes:
                entity = self.create_entity(mesh_data.name)
                node_entity.attach_child(entity)

                mesh = entity.attach_component(StaticMeshComponent)
                mesh.path = str(path)
                mesh.vertices = mesh_data.vertices
                mesh.indices = mesh_data.indices

                material = entity.attach_component(MaterialComponent)
                for source_field, target_field in _TEXTURE_FIELDS:
                    texture = getattr(mesh_data, source_field)
                    if texture:
                        setattr(material, target_field, directory + "/" + texture)

            pending.extend((child, node_entity) for child in node.children)

        return root_entity

    def update(self, dt: float) -> None:
        """Run every system and record which components of each entity changed."""
        for system, component in (
            (self.transform_system, ComponentType.TRANSFORM),
            (self.static_mesh_system, ComponentType.STATIC_MESH),
            (self.material_system, ComponentType.MATERIAL),
        ):
            for entity in system.update():
                self._dirty_masks[entity] = self._dirty_masks.get(entity, 0) | (1 << component)

    def render_view(self, camera: Any) -> SceneRenderView:
        """Collect the data a renderer needs, seen through ``camera``."""
        view = SceneRenderView(
            camera=CameraRenderView(view=camera.view(), proj=camera.proj(), position=camera.position())
        )

        for entity, component in self.registry.view(TransformComponent):
            view.transforms.append(
                TransformRenderView(id=entity, world=self.transform_system.world_matrix(component.world))
            )
            view.draws[entity] = DrawRenderView(transform=len(view.transforms) - 1)

        for entity, tag, mesh, material in self.registry.view(
            TagComponent, StaticMeshComponent, MaterialComponent
        ):
            view.meshes.append(
                StaticMeshRenderView(id=entity, tag=tag.tag, vertices=mesh.vertices, indices=mesh.indices)
            )
            draw = view.draws[entity]
            draw.mesh = len(view.meshes) - 1

            view.materials.append(
                MaterialRenderView(
                    id=entity,
                    tint=material.tint,
                    roughness=material.roughness,
                    metallic=material.metallic,
                    albedo_tex=material.albedo_tex,
                    normal_tex=material.normal_tex,
                    specular_tex=material.specular_tex,
                    ao_tex=material.ao_tex,
                    roughness_tex=material.roughness_tex,
                    metallic_tex=material.metallic_tex,
                    emission_tex=material.emission_tex,
                )
            )
            draw.material = len(view.materials) - 1

        return view

    def dirty_mask(self, entity: Union[Entity, int]) -> int:
        """Bits of the components of ``entity`` that have changed, by ComponentType."""
        entity_id = entity.id if isinstance(entity, Entity) else entity
        return self._dirty_masks[entity_id]