import numpy as np
import pytest

from baamboo.common import INVALID_INDEX, Vertex, is_valid_index
from baamboo.render_view import (
    CameraRenderView,
    DrawRenderView,
    MaterialRenderView,
    Renderer,
    RendererType,
    SceneRenderView,
    StaticMeshRenderView,
    TextureIndex,
    TransformRenderView,
)


class _RecordingRenderer(Renderer):
    def __init__(self):
        self.calls = []

    def set_renderer_type(self, renderer_type):
        self.calls.append(("type", renderer_type))

    def new_frame(self):
        self.calls.append(("frame",))

    def render(self, render_view):
        self.calls.append(("render", render_view))

    def on_window_resized(self, width, height):
        self.calls.append(("resize", width, height))


def test_draw_defaults_are_invalid():
    draw = DrawRenderView()
    assert draw.transform == INVALID_INDEX
    assert draw.mesh == INVALID_INDEX
    assert draw.material == INVALID_INDEX


def test_texture_index_values():
    assert TextureIndex(INVALID_INDEX) is TextureIndex.INVALID
    assert TextureIndex(0) is TextureIndex.DEFAULT_WHITE
    assert TextureIndex(1) is TextureIndex.DEFAULT_BLACK
    assert is_valid_index(TextureIndex.INVALID) is False
    assert is_valid_index(TextureIndex.DEFAULT_BLACK) is True


def test_mesh_counts_follow_data():
    view = StaticMeshRenderView(id=3, tag="mesh", vertices=[Vertex(), Vertex()], indices=[0, 1, 1])
    assert view.vertex_count == len(view.vertices)
    assert view.index_count == len(view.indices)


def test_scene_render_view_starts_empty():
    view = SceneRenderView()
    assert view.transforms == []
    assert view.meshes == []
    assert view.materials == []
    assert view.draws == {}
    np.testing.assert_array_equal(view.camera.view, np.eye(4))


def test_transform_and_material_defaults():
    transform = TransformRenderView(id=1)
    np.testing.assert_array_equal(transform.world, np.eye(4))
    material = MaterialRenderView(id=1)
    np.testing.assert_array_equal(material.tint, np.ones(3))
    assert material.albedo_tex == ""


def test_renderer_is_abstract():
    with pytest.raises(TypeError):
        Renderer()


def test_renderer_subclass_receives_calls():
    renderer = _RecordingRenderer()
    view = SceneRenderView(camera=CameraRenderView())
    renderer.set_renderer_type(RendererType.DEFERRED)
    renderer.new_frame()
    renderer.render(view)
    renderer.on_window_resized(640, 480)
    assert renderer.calls[0] == ("type", RendererType.DEFERRED)
    assert renderer.calls[2][1] is view
    assert renderer.calls[3] == ("resize", 640, 480)