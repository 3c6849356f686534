"""Loading models and game objects from a project directory."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from .gameobject import GameObject
from .model import Model

logger = logging.getLogger(__name__)

DEFAULT_MODELS_ROOT = "./project/assets/models"
DEFAULT_GAMEOBJECTS_DIR = "./project/gameobjects"

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

_VECTOR_KEYS = {
    "POSITIONX": ("position", 0),
    "POSITIONY": ("position", 1),
    "POSITIONZ": ("position", 2),
    "SCALEX": ("scale", 0),
    "SCALEY": ("scale", 1),
    "SCALEZ": ("scale", 2),
    "ROTATIONX": ("rotation", 0),
    "ROTATIONY": ("rotation", 1),
    "ROTATIONZ": ("rotation", 2),
    "GEOMETRYCOLORRED": ("color", 0),
    "GEOMETRYCOLORGREEN": ("color", 1),
    "GEOMETRYCOLORBLUE": ("color", 2),
}
_FLAG_KEYS = {"ENABLERENDER": "enable_render", "ENABLEBOUNDINGBOX": "enable_bounding_box"}
_PATH_KEYS = {
    "VERTEXPATH": "vertex_path",
    "FRAGMENTPATH": "fragment_path",
    "MODELPATH": "model_path",
}

_POSITION = {"POSITIONX", "POSITIONY", "POSITIONZ"}
_TRANSFORM = _POSITION | {"SCALEX", "SCALEY", "SCALEZ", "ROTATIONX", "ROTATIONY", "ROTATIONZ"}
_MODEL_KEYS = _TRANSFORM | set(_PATH_KEYS) | set(_FLAG_KEYS)
_GEOMETRY_KEYS = (
    _TRANSFORM
    | {"GEOMETRYTYPE", "GEOMETRYCOLORRED", "GEOMETRYCOLORGREEN", "GEOMETRYCOLORBLUE"}
    | set(_FLAG_KEYS)
)

# Keys each object type reads; a key counts only once the type is known.
_TYPE_KEYS = {
    "camera": _POSITION,
    "model": _MODEL_KEYS,
    "overlay": _MODEL_KEYS,
    "collider": _GEOMETRY_KEYS,
    "geometry": _GEOMETRY_KEYS,
}


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


@dataclass
class _Spec:
    type: str = ""
    name: str = ""
    vertex_path: str = ""
    fragment_path: str = ""
    model_path: str = ""
    geometry_type: str = ""
    vectors: dict[str, list[float]] = field(
        default_factory=lambda: {
            "position": [0.0, 0.0, 0.0],
            "scale": [0.0, 0.0, 0.0],
            "rotation": [0.0, 0.0, 0.0],
            "color": [0.0, 0.0, 0.0],
        }
    )
    flags: dict[str, bool] = field(
        default_factory=lambda: {"enable_render": False, "enable_bounding_box": False}
    )

    def apply(self, key: str, value: str) -> None:
        if key == "TYPE":
            self.type = value
        elif key == "NAME":
            self.name = value
        if key not in _TYPE_KEYS.get(self.type, ()):
            return
        if key in _VECTOR_KEYS:
            attr, axis = _VECTOR_KEYS[key]
            self.vectors[attr][axis] = _parse_float(value)
        elif key in _FLAG_KEYS:
            self.flags[_FLAG_KEYS[key]] = _parse_int(value) != 0
        elif key in _PATH_KEYS:
            setattr(self, _PATH_KEYS[key], value)
        elif key == "GEOMETRYTYPE":
            self.geometry_type = value


def _parse_spec(lines) -> _Spec:
    spec = _Spec()
    for line in lines:
        key, sep, value = line.partition("=")
        if sep:
            spec.apply(key, value)
    return spec


def find_model_file(root, model_dir) -> str:
    """Return the path of the OBJ file in ``root/model_dir``, or "" if there is none.

    When several files match, the last in name order wins.
    """
    root = os.fspath(root)
    model_dir = os.fspath(model_dir)
    found = ""
    for entry in sorted(Path(root, model_dir).iterdir()):
        if entry.is_file() and ".obj" in entry.name:
            found = f"{root}/{model_dir}/{entry.name}"
    return found


def load_models(root=DEFAULT_MODELS_ROOT) -> list[Model]:
    """Load one model from each subdirectory of ``root``."""
    root = os.fspath(root)
    return [
        Model(find_model_file(root, entry.name))
        for entry in sorted(Path(root).iterdir())
        if entry.is_dir()
    ]


def load_gameobject_files(directory=DEFAULT_GAMEOBJECTS_DIR) -> list[list[str]]:
    """Read every file in ``directory`` as a list of lines.

    An entry that cannot be read contributes an empty list.
    """
    files = []
    for entry in sorted(Path(directory).iterdir()):
        try:
            lines = entry.read_text(encoding="utf-8").splitlines()
        except OSError:
            logger.error("cannot load game object file %s", entry)
            lines = []
        files.append(lines)
    return files


def generate_gameobjects(files, shaders, models, geometries, camera) -> list[GameObject]:
    """Build game objects from KEY=VALUE line lists.

    Objects of unknown type are skipped. Geometry and collider objects use the
    second shader and the first geometry.
    """
    gameobjects = []
    for lines in files:
        spec = _parse_spec(lines)
        if spec.type not in _TYPE_KEYS:
            continue

        if spec.type == "camera":
            gameobjects.append(
                GameObject(
                    type=spec.type,
                    name=spec.name,
                    camera=camera,
                    position=spec.vectors["position"],
                )
            )
            continue

        common = dict(
            type=spec.type,
            name=spec.name,
            position=spec.vectors["position"],
            scale=spec.vectors["scale"],
            rotation=spec.vectors["rotation"],
            enable_render=spec.flags["enable_render"],
            enable_bounding_box=spec.flags["enable_bounding_box"],
        )

        if spec.type in ("model", "overlay"):
            shader = None
            for candidate in shaders:
                if (
                    candidate.vertex_path == spec.vertex_path
                    and candidate.fragment_path == spec.fragment_path
                ):
                    shader = candidate
            model = None
            for candidate in models:
                if candidate.model_path == spec.model_path:
                    model = candidate
            gameobjects.append(GameObject(shader=shader, model=model, **common))
        else:
            if len(shaders) < 2:
                raise ValueError(f"{spec.type} objects need at least two loaded shaders")
            if not geometries:
                raise ValueError(f"{spec.type} objects need a loaded geometry")
            gameobjects.append(
                GameObject(
                    shader=shaders[1],
                    geometry=geometries[0],
                    color=spec.vectors["color"],
                    **common,
                )
            )
    return gameobjects