"""Renderer interface and the refined scene data handed to a renderer each frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntEnum

import numpy as np

from .common import INVALID_INDEX, Vertex


class RendererType(Enum):
    """Rendering strategies a renderer may offer."""

    FORWARD = "Forward"
    DEFERRED = "Deferred"
    INDIRECT = "Indirect"


class TextureIndex(IntEnum):
    """Reserved texture slots."""

    INVALID = INVALID_INDEX
    DEFAULT_WHITE = 0
    DEFAULT_BLACK = 1


@dataclass(eq=False)
class TransformRenderView:
    """World matrix of one entity."""

    id: int
    world: np.ndarray = field(default_factory=lambda: np.eye(4))


@dataclass(eq=False)
class CameraRenderView:
    """View and projection of the active camera."""

    view: np.ndarray = field(default_factory=lambda: np.eye(4))
    proj: np.ndarray = field(default_factory=lambda: np.eye(4))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass(eq=False)
class StaticMeshRenderView:
    """Geometry of one static mesh, shared with its component."""

    id: int
    tag: str = ""
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.indices)


@dataclass(eq=False)
class MaterialRenderView:
    """Surface parameters and texture paths of one mesh."""

    id: int
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


@dataclass
class DrawRenderView:
    """Indices into the transform, mesh and material lists of one draw."""

    transform: int = INVALID_INDEX
    mesh: int = INVALID_INDEX
    material: int = INVALID_INDEX


@dataclass(eq=False)
class SceneRenderView:
    """Everything a renderer needs to draw one frame of a scene."""

    camera: CameraRenderView = field(default_factory=CameraRenderView)
    transforms: list[TransformRenderView] = field(default_factory=list)
    meshes: list[StaticMeshRenderView] = field(default_factory=list)
    materials: list[MaterialRenderView] = field(default_factory=list)
    draws: dict[int, DrawRenderView] = field(default_factory=dict)


class Renderer(ABC):
    """Interface every rendering back end implements."""

    @abstractmethod
    def set_renderer_type(self, renderer_type: RendererType) -> None:
        """Switch the rendering strategy."""

    @abstractmethod
    def new_frame(self) -> None:
        """Prepare for a new frame."""

    @abstractmethod
    def render(self, render_view: SceneRenderView) -> None:
        """Draw one frame of the given scene data."""

    @abstractmethod
    def on_window_resized(self, width: int, height: int) -> None:
        """React to a change of the output size."""