"""Component types attached to scene entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from .common import Vertex
from .transform import Transform


@dataclass
class TagComponent:
    """Name shown for an entity in the editor."""

    tag: str = ""


@dataclass
class Hierarchy:
    """Parent, first child and sibling links of an entity; ``None`` means none."""

    parent: Optional[int] = None
    first_child: Optional[int] = None
    prev_sibling: Optional[int] = None
    next_sibling: Optional[int] = None
    depth: int = 0


@dataclass
class TransformComponent:
    """Local transform, hierarchy links and the slot of the world matrix."""

    transform: Transform = field(default_factory=Transform)
    hierarchy: Hierarchy = field(default_factory=Hierarchy)
    world: int = 0
    dirty: bool = False


class CameraType(Enum):
    ORTHOGRAPHIC = "Orthographic"
    PERSPECTIVE = "Perspective"


def camera_type_string(camera_type: CameraType) -> str:
    """Display name of a camera type."""
    return CameraType(camera_type).value


@dataclass
class CameraComponent:
    camera_type: CameraType = CameraType.ORTHOGRAPHIC
    near: float = 0.0
    far: float = 0.0
    fov: float = 0.0
    main: bool = False
    dirty: bool = False


@dataclass
class StaticMeshComponent:
    """Geometry rendered without animation."""

    path: str = ""
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    dirty: bool = False


@dataclass
class DynamicMeshComponent:
    texture: str = ""
    geometry: str = ""


@dataclass
class MaterialComponent:
    """Surface parameters and texture paths of a mesh."""

    tint: np.ndarray = field(default_factory=lambda: np.ones(3))
    roughness: float = 0.0
    metallic: float = 0.0

    albedo_tex: str = ""
    normal_tex: str = ""
    specular_tex: str = ""
    ao_tex: str = ""
    roughness_tex: str = ""
    metallic_tex: str = ""
    emission_tex: str = ""

    dirty: bool = False