import numpy as np
import pytest

from bravoengine.geometry import Geometry
from bravoengine.model import Model
from bravoengine.project_load import (
    find_model_file,
    generate_gameobjects,
    load_gameobject_files,
    load_models,
)
from bravoengine.shader import Shader

TRIANGLE_OBJ = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"


@pytest.fixture
def shaders(tmp_path):
    result = []
    for name in ("model", "collider"):
        vert = tmp_path / f"{name}.vert"
        frag = tmp_path / f"{name}.frag"
        vert.write_text("void main() {}\n")
        frag.write_text("void main() {}\n")
        result.append(Shader(str(vert), str(frag)))
    return result


@pytest.fixture
def model(tmp_path):
    path = tmp_path / "thing.obj"
    path.write_text(TRIANGLE_OBJ)
    return Model(str(path))


def test_find_model_file_picks_obj(tmp_path):
    (tmp_path / "crate").mkdir()
    (tmp_path / "crate" / "notes.txt").write_text("x")
    (tmp_path / "crate" / "crate.obj").write_text(TRIANGLE_OBJ)
    root = str(tmp_path)
    assert find_model_file(root, "crate") == f"{root}/crate/crate.obj"


def test_find_model_file_without_obj_is_empty(tmp_path):
    (tmp_path / "empty").mkdir()
    (tmp_path / "empty" / "readme.md").write_text("x")
    assert find_model_file(str(tmp_path), "empty") == ""


def test_load_models_one_per_directory(tmp_path):
    root = tmp_path / "models"
    for name in ("a", "b"):
        (root / name).mkdir(parents=True)
        (root / name / f"{name}.obj").write_text(TRIANGLE_OBJ)
    (root / "stray.obj").write_text(TRIANGLE_OBJ)
    models = load_models(str(root))
    assert [m.model_path for m in models] == [f"{root}/a/a.obj", f"{root}/b/b.obj"]


def test_load_gameobject_files_reads_lines(tmp_path):
    (tmp_path / "object_0.gameobject").write_text("TYPE=camera\nNAME=cam\n")
    (tmp_path / "object_1.gameobject").write_text("TYPE=model\n")
    files = load_gameobject_files(str(tmp_path))
    assert files == [["TYPE=camera", "NAME=cam"], ["TYPE=model"]]


def test_load_gameobject_files_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_gameobject_files(str(tmp_path / "missing"))


def test_generate_camera(shaders):
    camera = object()
    files = [["TYPE=camera", "NAME=eye", "POSITIONX=1.5", "POSITIONY=-2", "POSITIONZ=3"]]
    (obj,) = generate_gameobjects(files, shaders, [], [Geometry()], camera)
    assert obj.type == "camera"
    assert obj.name == "eye"
    assert obj.camera is camera
    assert obj.position.tolist() == [1.5, -2.0, 3.0]


def test_keys_before_type_are_ignored(shaders):
    files = [["POSITIONX=9", "TYPE=camera", "POSITIONY=4"]]
    (obj,) = generate_gameobjects(files, shaders, [], [], None)
    assert obj.position.tolist() == [0.0, 0.0, 4.0]


def test_generate_model_links_shader_and_model(shaders, model):
    shader = shaders[0]
    files = [
        [
            "TYPE=model",
            "NAME=crate",
            f"VERTEXPATH={shader.vertex_path}",
            f"FRAGMENTPATH={shader.fragment_path}",
            f"MODELPATH={model.model_path}",
            "POSITIONX=1",
            "SCALEY=2.5",
            "ROTATIONZ=90",
            "ENABLERENDER=1",
            "ENABLEBOUNDINGBOX=0",
        ]
    ]
    (obj,) = generate_gameobjects(files, shaders, [model], [], None)
    assert obj.shader is shader
    assert obj.model is model
    assert obj.position.tolist() == [1.0, 0.0, 0.0]
    assert obj.scale.tolist() == [0.0, 2.5, 0.0]
    assert obj.rotation.tolist() == [0.0, 0.0, 90.0]
    assert obj.enable_render is True
    assert obj.enable_bounding_box is False


def test_generate_model_without_match_has_no_resources(shaders, model):
    files = [["TYPE=overlay", "VERTEXPATH=nope.vert", "MODELPATH=nope.obj"]]
    (obj,) = generate_gameobjects(files, shaders, [model], [], None)
    assert obj.type == "overlay"
    assert obj.shader is None
    assert obj.model is None


def test_generate_collider_uses_second_shader_and_geometry(shaders):
    geometry = Geometry()
    files = [
        [
            "TYPE=collider",
            "NAME=floor",
            "GEOMETRYTYPE=cube",
            "GEOMETRYCOLORRED=0.25",
            "GEOMETRYCOLORBLUE=1",
            "SCALEX=100",
            "ENABLERENDER=1",
        ]
    ]
    (obj,) = generate_gameobjects(files, shaders, [], [geometry], None)
    assert obj.shader is shaders[1]
    assert obj.geometry is geometry
    assert obj.name == "floor"
    assert np.allclose(obj.color, [0.25, 0.0, 1.0])
    assert obj.scale.tolist() == [100.0, 0.0, 0.0]
    assert obj.enable_render is True


def test_camera_ignores_scale(shaders):
    files = [["TYPE=camera", "SCALEX=5"]]
    (obj,) = generate_gameobjects(files, shaders, [], [], None)
    assert obj.scale.tolist() == [0.0, 0.0, 0.0]


def test_unknown_type_and_empty_files_are_skipped(shaders):
    files = [["TYPE=light", "NAME=sun"], [], ["no equals sign here"]]
    assert generate_gameobjects(files, shaders, [], [], None) == []


def test_numbers_with_trailing_text_are_accepted(shaders):
    files = [["TYPE=camera", "POSITIONX=2.5f", "POSITIONY= 7"]]
    (obj,) = generate_gameobjects(files, shaders, [], [], None)
    assert obj.position.tolist() == [2.5, 7.0, 0.0]


def test_invalid_number_raises(shaders):
    files = [["TYPE=camera", "POSITIONX=abc"]]
    with pytest.raises(ValueError):
        generate_gameobjects(files, shaders, [], [], None)


def test_collider_without_second_shader_raises(shaders):
    files = [["TYPE=geometry"]]
    with pytest.raises(ValueError):
        generate_gameobjects(files, shaders[:1], [], [Geometry()], None)


def test_order_of_files_is_kept(shaders):
    files = [["TYPE=camera", "NAME=first"], ["TYPE=geometry", "NAME=second"]]
    objects = generate_gameobjects(files, shaders, [], [Geometry()], None)
    assert [o.name for o in objects] == ["first", "second"]