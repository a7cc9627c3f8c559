"""In-memory form of an imported model: a tree of nodes holding meshes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .boundings import BoundingBox
from .common import RendererAPI, Vertex


@dataclass(eq=False)
class MeshData:
    """Geometry and texture file names of one mesh."""

    name: str = ""
    aabb: BoundingBox = field(default_factory=BoundingBox)

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    albedo_texture: str = ""
    normal_texture: str = ""
    specular_texture: str = ""
    ao_texture: str = ""
    metallic_texture: str = ""
    roughness_texture: str = ""
    emissive_texture: str = ""


@dataclass
class MeshDescriptor:
    """Options for importing a model."""

    renderer_api: RendererAPI = RendererAPI.D3D12
    optimize: bool = True
    winding_cw: bool = False


@dataclass(eq=False)
class ModelNode:
    """A node of a model tree with its meshes and child nodes."""

    meshes: list[MeshData] = field(default_factory=list)
    children: list["ModelNode"] = field(default_factory=list)
    material_indices: list[int] = field(default_factory=list)
    aabb: BoundingBox = field(default_factory=BoundingBox)
    parent: Optional["ModelNode"] = field(default=None, repr=False)

    def add_child(self, child: "ModelNode") -> "ModelNode":
        """Append ``child`` to this node and return it."""
        if child.parent is not None:
            raise ValueError("node already has a parent")
        if child is self:
            raise ValueError("a node cannot be its own child")
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator["ModelNode"]:
        """Yield this node and all descendants, breadth first."""
        pending = deque([self])
        while pending:
            node = pending.popleft()
            yield node
            pending.extend(node.children)