from pathlib import Path

import numpy as np

from baamboo.common import (
    INVALID_INDEX,
    NUM_COMPONENTS,
    ComponentType,
    RendererAPI,
    Vertex,
    asset_path,
    is_valid_index,
    kb,
    mb,
    model_path,
    output_path,
    shader_path,
    texture_path,
)


def test_invalid_index_sentinel():
    assert is_valid_index(INVALID_INDEX) is False
    assert is_valid_index(0xFFFFFFFF) is False
    assert is_valid_index(0) is True


def test_size_helpers():
    assert kb(1) == 1024
    assert mb(3) == kb(3) * 1024
    assert kb(64) == 64 * kb(1)


def test_paths():
    assert output_path() == Path("Output")
    assert asset_path() == Path("Assets")
    assert shader_path().parent == asset_path()
    assert texture_path().parent == asset_path()
    assert model_path() == Path("Assets/Model/")


def test_component_bits():
    assert ComponentType(0) is ComponentType.TRANSFORM
    assert ComponentType(3) is ComponentType.MATERIAL
    assert NUM_COMPONENTS == len(list(ComponentType))


def test_renderer_api_members():
    names = ["D3D11", "D3D12", "Vulkan", "OpenGL", "Metal"]
    assert [RendererAPI(name).value for name in names] == names
    assert [api.value for api in RendererAPI] == names


def test_vertex_defaults_are_independent():
    a = Vertex()
    b = Vertex()
    a.position[0] = 5.0
    assert b.position[0] == 0.0
    assert a.uv.shape == (2,)
    assert np.all(b.tangent == 0.0)