# rumengine

The scene-side core of a small 3D engine. It covers:

- entities and their model matrices (`rumengine.entity`, `rumengine.entity_system`, `rumengine.storage`),
- meshes, the factory that builds them and a few ready-made meshes (`rumengine.mesh`, `rumengine.mesh_generator`, `rumengine.mesh_loader`),
- models (`rumengine.model`, `rumengine.model_loader`),
- skeletons, skeletal animations and the animator that computes bone poses (`rumengine.skeleton`, `rumengine.animation`, `rumengine.animator`, `rumengine.skeleton_loader`, `rumengine.animation_loader`),
- materials and the XML files that describe them (`rumengine.material`, `rumengine.materials_loader`),
- small helpers: an observer pattern (`rumengine.observer`), 4x4 matrix and quaternion maths (`rumengine.linalg`) and string helpers (`rumengine.utility`).

Vectors and matrices are `numpy` arrays. Matrices are 4x4, applied to column vectors; quaternions are `(w, x, y, z)`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a scene

```python
import numpy as np
from rumengine.entity_system import EntitySystem
from rumengine.mesh_generator import generate_triangle
from rumengine.model import ModelFactory

system = EntitySystem()
system.add_model("Triangle", ModelFactory().add_mesh(generate_triangle()).make())

entity = system.entity_factory.make("Triangle", np.array([1.0, 0.0, -2.0]), scaling=3.0)
system.add_entity("Triangle1", entity)

print(system.get_entity("Triangle1").model_matrix)
```

`EntityFactory.make(model_name, position, rotation=(0, 0, 0), scaling=(1, 1, 1))` takes the rotation as three angles in radians and the scaling either as one number, applied to all three axes, or as a 3-vector. Looking up a name that was never added raises `KeyError`. Adding a second object under a name that is already taken leaves the first one in place.

## Meshes

`MeshFactory` collects vertex attributes and faces. `make(name)` returns a `Mesh` and empties the factory for the next mesh:

```python
from rumengine.mesh import MeshFactory

mesh = (
    MeshFactory()
    .add_position((0, 0, 0)).add_position((1, 0, 0)).add_position((0, 1, 0))
    .add_normal((0, 0, 1)).add_normal((0, 0, 1)).add_normal((0, 0, 1))
    .add_face(0, 1, 2)
    .make("Tri")
)
print(mesh.indices_count())   # 3
```

Face indices must fit in an unsigned 16-bit value. Bone data is reserved with `allocate_bone_data()` after the positions are in; each vertex can then carry at most four bone influences through `add_bone_data`, and a fifth raises `MeshLoadingError`.

`rumengine.mesh_generator` provides `generate_rectangle(x, y, z)`, `generate_triangle()` and `generate_skybox()`.

## Models, skeletons and animation

A `ModelLoader(importer, load_texture, base_dir=".")` reads a model XML file from `Assets/Models/` below `base_dir`. The root element needs a `name` attribute and a `<geometry>` child naming a file in `Assets/Geometry/`. The `importer` callable you pass in turns that geometry path into a `rumengine.scene.Scene`, or returns `None`, which raises `ModelLoadingError`. The loader then:

1. builds the skeleton with `SkeletonLoader`, and a `SkeletalAnimator` for it if the scene has bones,
2. builds the skeletal animations with `SkeletonAnimationLoader` (only when there is a skeleton),
3. builds the meshes with `MeshLoader`, adding bone influences when there is a skeleton,
4. builds one list of materials per `<alias>` element with `MaterialsLoader`.

A `SkeletalAnimator(skeleton, clock=None)` takes the time in seconds from `clock` (by default `time.perf_counter`). After `set_current_animation(animation)`, each `calculate_current_pose()` fills the matrices returned by `pose_transformations()`: an array of shape `(50, 4, 4)` indexed by bone index.

`BoneAnimation` offers interpolated (`interpolated_translation`, `interpolated_rotation`, `interpolated_scaling`) and nearest-keyframe (`nearest_*`) lookups; times outside the keyframes raise `AnimationInterpolationError`.

## Materials

Material files live in `Assets/Materials/` below the base directory. A file's root `<material>` element has a `type` attribute that chooses the material:

- `PBR_MR` gives a `MaterialPBR` built from `<albedo>`, `<ambient>`, `<metalness>`, `<roughness>` and `<normal>`,
- `PHONG` gives a `MaterialPhong` built from `<color>` and `<normal>`,
- any other type raises `MaterialLoadingError`.

Texture names are resolved against `Assets/Materials/Textures/` and passed to the `load_texture` callable you provide. A missing material file raises `FileNotFoundError`; an unreadable one raises `MaterialLoadingError`. `MaterialPBR.bind()` binds its five textures to units 0 to 4 and `MaterialCustom.bind()` binds each texture to its own unit; `MaterialPhong` and `MaterialFur` bind nothing.

## What this package does not do

There is no rendering, window, input handling or shader code here, and no GPU buffers. The package does not read geometry files or decode images itself: geometry reaches it through the `importer` callable as `Scene` objects, and textures through the `load_texture` callable. There is no command-line program.