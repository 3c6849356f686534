# bravoengine

bravoengine is the scene and physics core of a small first-person shooter
engine. It is written in Python and uses numpy. It provides the data and the
maths that a renderer or a game loop needs:

- `bravoengine.camera`: `Camera` holds a position and a yaw, pitch and field of
  view. It turns in response to `process_mouse_input` and zooms in response to
  `process_mouse_scroll`. Pitch is clamped to ±89° and the field of view to
  1–45°. The module also has the `look_at` and `perspective` matrix helpers,
  and `CameraMovement` names the movement directions.
- `bravoengine.mesh`: the `Vertex`, `Texture` and `Mesh` records.
  `Mesh.texture_uniforms()` returns the `material.<role><n>` uniform name, the
  texture unit and the texture id for each texture.
- `bravoengine.shader`: `Shader` reads a vertex source file and a fragment
  source file. `set_uniform` stores bool, int, float, 3-vector and 4x4-matrix
  uniform values, and `uniform` reads them back. If a file cannot be read, or a
  value has an unsupported shape, `ShaderError` is raised.
- `bravoengine.geometry`: `Geometry` is a cube spanning -1..1 on every axis,
  with its vertices, its triangle indices and its eight-corner `bounding_box`.
- `bravoengine.model`: `parse_obj` splits Wavefront OBJ text into triangulated
  meshes. `Model` loads an OBJ file and the texture map names from its `mtllib`
  material files, and computes a bounding box. If the file cannot be read or
  has no faces, `ModelLoadError` is raised.
- `bravoengine.gameobject`: `GameObject` is a scene entity. It has a type, a
  name, a position, a scale, a rotation, a velocity, a colour and render flags,
  plus references to its camera, shader, model or geometry.
- `bravoengine.collider`: `Collider` builds a bounding box from a model or a
  geometry, and a triangle mesh from a geometry. `world_aabb()` and
  `world_mesh()` return them moved by the object's transform, which
  `model_matrix` computes.
- `bravoengine.collision`: `check_collision_aabb` tests whether two boxes
  overlap. `check_collision_aabb_inside` tests whether one box lies wholly
  inside another. Neither test accounts for rotation.
- `bravoengine.raycast`: `raycast_collision` tests a ray against a collider's
  world mesh.
- `bravoengine.rigid_body`: `RigidBody.apply_simple_force` shifts a game
  object's position by a velocity.
- `bravoengine.project_load` and `bravoengine.project_save`: these read and
  write `KEY=VALUE` game-object files and load models from a models directory.
- `bravoengine.network_server`: `NetworkServer` is a TCP server. It accepts a
  single client and applies the client's packets to a table of players.

## Installation

```
pip install .
```

To get the test dependencies as well, install with `pip install .[test]`.

## Example

```python
from bravoengine.camera import Camera
from bravoengine.gameobject import GameObject
from bravoengine.geometry import Geometry
from bravoengine.collider import Collider
from bravoengine.collision import check_collision_aabb
from bravoengine.raycast import raycast_collision

cube = Geometry()

floor = GameObject(type="collider", name="floor",
                   position=(0.0, -5.0, 0.0), scale=(100.0, 1.0, 100.0))
crate = GameObject(type="collider", name="target",
                   position=(0.0, 0.0, -20.0), scale=(2.0, 2.0, 2.0))

floor_collider = Collider(floor, geometry=cube)
crate_collider = Collider(crate, geometry=cube)

print(check_collision_aabb(crate_collider, floor_collider))

camera = Camera(1800, 900)
camera.process_mouse_input(10.0, 0.0)
print(raycast_collision((0.0, 0.0, 0.0), camera.front, crate_collider))
```

## Project files

A game object is stored as lines of `KEY=VALUE`, for example:

```
TYPE=collider
NAME=floor
GEOMETRYTYPE=cube
POSITIONX=0
POSITIONY=-5
POSITIONZ=0
SCALEX=100
SCALEY=1
SCALEZ=100
ENABLERENDER=1
ENABLEBOUNDINGBOX=0
```

There are five types: `camera`, `model`, `overlay`, `geometry` and
`collider`. A key is read only if it appears after `TYPE` and is one of the
keys that type uses.

- `load_gameobject_files(directory)` reads every file in a directory as a list
  of lines. The default directory is `./project/gameobjects`.
- `generate_gameobjects(files, shaders, models, geometries, camera)` builds
  `GameObject` instances from those line lists. Model and overlay objects are
  matched to shaders by their paths, and to models by `MODELPATH`. Geometry and
  collider objects take the second shader and the first geometry.
- `load_models(root)` loads one `Model` from each subdirectory of `root`. The
  default root is `./project/assets/models`. `find_model_file` picks the `.obj`
  file to load.
- `format_gameobject` returns the text for one object.
- `save_gameobjects(gameobjects, directory)` writes the objects to
  `object_<n>.gameobject` files in an existing directory and returns the paths
  it wrote.

## Network packets

`NetworkServer(host="", port=8080)` can be used as a context manager, or
driven with `start()` and `close()`. Each packet is the comma-separated text
`type,player_id,username,x,y,z`, which `parse_packet` turns into a `Packet`.

- A `move` packet sets the position of the player at index `player_id`.
- A `quit` packet ends the client's session.

The player table starts with one player, id `0` with username `ace`, at the
origin. You can edit the table directly with these methods:

- `add_player`
- `remove_player`
- `update_player_id`
- `update_player_username`
- `update_player_position`
- `player_id`
- `player_username`
- `player_position`

`server_messages` lists the status lines recorded so far.

## What it does not do

This package does not render anything. It opens no window, compiles no
shaders, loads no texture images and plays no audio. Shader uniforms and
texture ids are only recorded. There is no game loop, no keyboard handling and
no command to run; your own code supplies these on top of the modules above.
The network server serves a single client and then stops.

## Tests

```
pytest
```