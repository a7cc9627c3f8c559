# baamboo

The core of a real-time 3D engine, built on numpy. It holds the parts that
need no window and no graphics API:

- `baamboo.registry`: `Registry`, an entity-component store. Entities are
  integers that are never reused. It offers `create`, `destroy`, `emplace`,
  `get`, `patch`, `view` and `sort`. Each component type has construct,
  update and destroy `Signal`s.
- `baamboo.components`: `TagComponent`, `TransformComponent` (with its
  `Hierarchy` links), `CameraComponent`, `StaticMeshComponent`,
  `DynamicMeshComponent` and `MaterialComponent`.
- `baamboo.transform_system`, `baamboo.mesh_system`,
  `baamboo.material_system`: `TransformSystem` keeps world matrices and
  parent/child links. `StaticMeshSystem` and `MaterialSystem` report changed
  components once per update.
- `baamboo.scene`: `Scene` and its `Entity` handles. They support
  components, hierarchies, `clone`, recursive removal and per-entity dirty
  masks (`Scene.dirty_mask`, with bits given by `common.ComponentType`).
  `Scene.import_model` turns an in-memory `ModelNode` tree into entities.
- `baamboo.render_view`: the `SceneRenderView` snapshot built by
  `Scene.render_view`, and the abstract `Renderer` interface that a rendering
  back end implements.
- `baamboo.model`: `MeshData`, `MeshDescriptor` and `ModelNode`.
- Math: `transform.Transform`, `boundings.BoundingBox` and
  `boundings.BoundingSphere`. `camera` provides the left-handed
  `look_at_lh`, `perspective_fov_lh_zo` and `ortho_lh_zo`, plus
  `EditorCamera` and `FirstPersonCameraController`. `mathutils` provides
  `align_up`, `calculate_mip_count` and `smooth_step`.
- Utilities: `freelist.FreeList` (index allocator),
  `thread_queue.ThreadQueue` (thread-safe FIFO that `close` ends, raising
  `QueueClosed` from a blocking `pop`), `timer.Timer`, the `input.Input`
  singleton, and `fileio` (`file_exists`, `read_binary`, `write_binary`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from baamboo.scene import Scene
from baamboo.components import TransformComponent
from baamboo.camera import EditorCamera, FirstPersonCameraController

scene = Scene("Example")
parent = scene.create_entity("Parent")
child = scene.create_entity("Child")
parent.attach_child(child)

parent.get_component(TransformComponent).transform.position[:] = (0.0, 1.0, 0.0)
scene.update(0.016)

controller = FirstPersonCameraController()
controller.set_look_at((0.0, 0.0, -5.0), (0.0, 0.0, 0.0))
camera = EditorCamera(controller, 1280, 720)

view = scene.render_view(camera)
print(len(view.transforms), "transforms ready to draw")
```

A model tree built in memory becomes a hierarchy of entities. Texture names
are resolved against the directory of the model path:

```python
from baamboo.model import MeshData, ModelNode

root = ModelNode(meshes=[MeshData(name="Body", albedo_texture="albedo.png")])
helmet = scene.import_model("Assets/Model/Helmet/helmet.gltf", root)
```

The `Input` singleton stores keyboard and mouse state for each frame. The
first-person controller reads it in `update(dt)`:

```python
from baamboo.input import Input, Key

state = Input.instance()
state.update_key(Key.W, True)
assert state.is_key_down(Key.W)
state.end_frame()
assert not state.is_key_down(Key.W) and state.is_key_pressed(Key.W)
```

## What it does not do

The package opens no window and draws nothing. It has no GPU renderer, only
the abstract `Renderer` interface that one would implement. It does not read
model files such as glTF, FBX or OBJ: `Scene.import_model` expects a
`ModelNode` tree that is already loaded. It has no editor user interface and
no command to run.