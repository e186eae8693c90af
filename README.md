# runbasis

runbasis is the core of a small 3D game engine. It is pure Python and has no dependencies. It contains:

- **Math**
  - `Vec3` and `Vec4` in `runbasis.vector`.
  - `Quaternion` in `runbasis.quaternion`.
  - The column-major `Mat4` in `runbasis.matrix`. It has `translate`, `scale`, `rotate_euler`, `rotate`, `rotate_around_center`, `look_at`, `ortho` and `symmetric_perspective`. `to_list` returns the sixteen elements in column-major order.
- **Wavefront formats**
  - `runbasis.obj` parses OBJ models with `parse_obj` and `load`. Polygons are split into triangles with the fan method. Failures raise `ParseError` from `parse_obj` and `LoadOBJError` from `load`.
  - `runbasis.mtl` parses material libraries with `parse_mtl`, `load` and `load_files`. Failures raise `LoadMTLError`.
  - `runbasis.materials` holds the material structures: `Material`, `Rgb`, `IlluminationModel` and `DissolveFactor`.
  - `runbasis.obj_model` holds the model structures: `OBJ`, `Face` and `VertexDataReference`. `OBJ.get_raw_vertices` turns a model into an interleaved vertex buffer of 12 floats per face corner. `OBJ.load_mtls` attaches parsed material libraries to the faces.
- **Bounding boxes**: `AABB.from_vertices` in `runbasis.aabb`.
- **Components** in `runbasis.components`:
  - `Transform`, `DebugCamera`, `PlayerCamera` and `Cube`.
  - They implement the `Controllable` and `Camerable` behaviours.
- **ECS** in `runbasis.ecs`:
  - `World`, `EntityManager`, `ComponentStorage` and `ResourcesManager`.
  - The `System` base class, the `Schedule` enum (`SETUP`, `LOOP`) and the `Deltatime` resource.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Examples

Load a model and build a vertex buffer:

```python
from runbasis.obj import load
from runbasis.vector import Vec3

model = load("cube.obj")
buffer = model.get_raw_vertices(Vec3(1.0, 0.0, 0.0))  # 12 floats per face corner
```

Parse a material library:

```python
from runbasis.mtl import parse_mtl

materials = parse_mtl("newmtl Rock\nKa 0.2 0.5 0.1\nillum 2\n")
print(materials["Rock"].ambient_reflectivity.g)  # 0.5
```

Build a camera view matrix:

```python
from runbasis.components import DebugCamera
from runbasis.vector import Vec3

camera = DebugCamera(Vec3(0.0, 0.0, 10.0), Vec3(0.0, 0.0, -1.0), Vec3(0.0, 1.0, 0.0), 30.0)
camera.move_forward(0.016)
view = camera.get_view_matrix()
print(view)
```

Use the entity–component world and shared resources:

```python
from runbasis.components import Cube, Transform
from runbasis.ecs import Deltatime, ResourcesManager, World

world = World()
entity = world.add_components(Cube(), Transform())

resources = ResourcesManager()
resources.add(Deltatime(0.016))

for e in world.entity_manager.active_entities():
    cube, transform = world.components(e, Cube, Transform)
    if cube is not None and transform is not None:
        transform.move_up(resources.get(Deltatime).seconds)
```

## What it does not do

runbasis does none of the following:

- It opens no window and does no drawing. There is no OpenGL or shader code.
- It reads no keyboard or mouse input.
- It has no main loop that runs the systems.
- It has no command-line program.

Data such as vertex buffers and matrices from `Mat4.to_list` is meant to be handed to a renderer of your choice.

## Tests

```
pytest
```