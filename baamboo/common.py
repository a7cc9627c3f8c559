"""Shared primitive types, constants and resource paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path

import numpy as np

INVALID_INDEX = 0xFFFFFFFF


class RendererAPI(Enum):
    """Graphics back ends a renderer may be built on."""

    D3D11 = "D3D11"
    D3D12 = "D3D12"
    VULKAN = "Vulkan"
    OPENGL = "OpenGL"
    METAL = "Metal"


class ComponentType(IntEnum):
    """Bit positions used in per-entity dirty masks."""

    TRANSFORM = 0
    STATIC_MESH = 1
    DYNAMIC_MESH = 2
    MATERIAL = 3
    POINT_LIGHT = 4


NUM_COMPONENTS = len(ComponentType)


def _zeros(n: int):
    return lambda: np.zeros(n, dtype=np.float32)


@dataclass(eq=False)
class Vertex:
    """A mesh vertex with position, texture coordinate, normal and tangent."""

    position: np.ndarray = field(default_factory=_zeros(3))
    uv: np.ndarray = field(default_factory=_zeros(2))
    normal: np.ndarray = field(default_factory=_zeros(3))
    tangent: np.ndarray = field(default_factory=_zeros(3))


def is_valid_index(index: int) -> bool:
    """Return True unless ``index`` is the invalid-index sentinel."""
    return index != INVALID_INDEX


def kb(x: int) -> int:
    """Return ``x`` kilobytes in bytes."""
    return x * 1024


def mb(x: int) -> int:
    """Return ``x`` megabytes in bytes."""
    return x * 1024 * 1024


def output_path() -> Path:
    """Directory for build output."""
    return Path("Output")


def asset_path() -> Path:
    """Root directory of all assets."""
    return Path("Assets")


def shader_path() -> Path:
    """Directory holding shaders."""
    return Path("Assets/Shader/")


def texture_path() -> Path:
    """Directory holding textures."""
    return Path("Assets/Texture/")


def model_path() -> Path:
    """Directory holding models."""
    return Path("Assets/Model/")