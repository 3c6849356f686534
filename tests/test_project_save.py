from types import SimpleNamespace

import pytest

from bravoengine.gameobject import GameObject
from bravoengine.geometry import Geometry
from bravoengine.project_load import generate_gameobjects, load_gameobject_files
from bravoengine.project_save import format_gameobject, save_gameobjects
from bravoengine.shader import Shader


@pytest.fixture
def shaders(tmp_path):
    result = []
    for stem in ("model", "collider"):
        vert = tmp_path / f"{stem}.vert"
        frag = tmp_path / f"{stem}.frag"
        vert.write_text("void main() {}\n")
        frag.write_text("void main() {}\n")
        result.append(Shader(str(vert), str(frag)))
    return result


def test_camera_lines_in_order():
    camera = GameObject(type="camera", name="eye", position=(1.5, 2, 3), rotation=(0, 90, 0))
    text = format_gameobject(camera)
    assert text.splitlines() == [
        "TYPE=camera",
        "NAME=eye",
        "POSITIONX=1.5",
        "POSITIONY=2",
        "POSITIONZ=3",
        "ROTATIONX=0",
        "ROTATIONY=90",
        "ROTATIONZ=0",
    ]
    assert text.endswith("\n")


def test_model_includes_paths_and_flags(shaders):
    model = SimpleNamespace(model_path="assets/thing.obj")
    obj = GameObject(
        type="model",
        name="crate",
        shader=shaders[0],
        model=model,
        scale=(2, 2, 2),
        enable_render=True,
        enable_bounding_box=False,
    )
    lines = format_gameobject(obj).splitlines()
    assert lines[2] == f"VERTEXPATH={shaders[0].vertex_path}"
    assert lines[3] == f"FRAGMENTPATH={shaders[0].fragment_path}"
    assert lines[4] == "MODELPATH=assets/thing.obj"
    assert "ENABLERENDER=1" in lines
    assert "ENABLEBOUNDINGBOX=0" in lines
    assert "SCALEX=2" in lines


def test_collider_includes_geometry_and_color(shaders):
    obj = GameObject(
        type="collider",
        name="floor",
        shader=shaders[1],
        geometry=Geometry(),
        color=(0.25, 0.5, 1),
    )
    lines = format_gameobject(obj).splitlines()
    assert "GEOMETRYTYPE=cube" in lines
    assert "GEOMETRYCOLORRED=0.25" in lines
    assert "GEOMETRYCOLORGREEN=0.5" in lines
    assert "GEOMETRYCOLORBLUE=1" in lines
    assert lines.index("GEOMETRYTYPE=cube") < lines.index("POSITIONX=0")


def test_unknown_type_gives_empty_text():
    assert format_gameobject(GameObject(type="overlay", name="gun")) == ""


def test_model_without_shader_is_rejected():
    obj = GameObject(type="model", name="broken", model=SimpleNamespace(model_path="x.obj"))
    with pytest.raises(ValueError):
        format_gameobject(obj)


def test_save_writes_numbered_files(tmp_path):
    objects = [GameObject(type="camera", name="a"), GameObject(type="camera", name="b")]
    paths = save_gameobjects(objects, tmp_path)
    assert [p.name for p in paths] == ["object_0.gameobject", "object_1.gameobject"]
    assert paths[1].read_text().splitlines()[1] == "NAME=b"


def test_save_into_missing_directory_fails(tmp_path):
    with pytest.raises(OSError):
        save_gameobjects([GameObject(type="camera")], tmp_path / "missing")


def test_round_trip_through_loader(tmp_path, shaders):
    geometry = Geometry()
    camera = GameObject(type="camera", name="player", position=(10, -12.5, 3))
    collider = GameObject(
        type="collider",
        name="wall",
        shader=shaders[1],
        geometry=geometry,
        position=(1, 2, 3),
        scale=(4, 5, 6),
        rotation=(0, 45, 0),
        color=(0.5, 0, 1),
        enable_render=True,
        enable_bounding_box=True,
    )
    out = tmp_path / "objects"
    out.mkdir()
    save_gameobjects([camera, collider], out)

    files = load_gameobject_files(out)
    loaded = generate_gameobjects(files, shaders, [], [geometry], camera=None)

    assert [o.type for o in loaded] == ["camera", "collider"]
    assert loaded[0].position.tolist() == camera.position.tolist()
    wall = loaded[1]
    assert wall.name == "wall"
    assert wall.position.tolist() == collider.position.tolist()
    assert wall.scale.tolist() == collider.scale.tolist()
    assert wall.rotation.tolist() == collider.rotation.tolist()
    assert wall.color.tolist() == collider.color.tolist()
    assert wall.enable_render is True
    assert wall.enable_bounding_box is True
    assert wall.geometry is geometry