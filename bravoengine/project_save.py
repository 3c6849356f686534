"""Writing game objects back to KEY=VALUE project files."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_GAMEOBJECTS_DIR = "./project/gameobjects"


def _number(value) -> str:
    return f"{float(value):g}"


def _flag(value) -> str:
    return "1" if value else "0"


def _vector_lines(prefix: str, suffixes, vector) -> list[str]:
    return [f"{prefix}{suffix}={_number(v)}" for suffix, v in zip(suffixes, vector)]


def _require(gameobject, attribute: str):
    value = getattr(gameobject, attribute)
    if value is None:
        raise ValueError(
            f"{gameobject.type} object {gameobject.name!r} has no {attribute} to save"
        )
    return value


def _transform_lines(gameobject) -> list[str]:
    return (
        _vector_lines("POSITION", "XYZ", gameobject.position)
        + _vector_lines("SCALE", "XYZ", gameobject.scale)
        + _vector_lines("ROTATION", "XYZ", gameobject.rotation)
        + [
            f"ENABLERENDER={_flag(gameobject.enable_render)}",
            f"ENABLEBOUNDINGBOX={_flag(gameobject.enable_bounding_box)}",
        ]
    )


def format_gameobject(gameobject) -> str:
    """Return the file text for one game object; unknown types give ""."""
    kind = gameobject.type
    header = [f"TYPE={kind}", f"NAME={gameobject.name}"]

    if kind == "camera":
        lines = (
            header
            + _vector_lines("POSITION", "XYZ", gameobject.position)
            + _vector_lines("ROTATION", "XYZ", gameobject.rotation)
        )
    elif kind == "model":
        shader = _require(gameobject, "shader")
        model = _require(gameobject, "model")
        lines = (
            header
            + [
                f"VERTEXPATH={shader.vertex_path}",
                f"FRAGMENTPATH={shader.fragment_path}",
                f"MODELPATH={model.model_path}",
            ]
            + _transform_lines(gameobject)
        )
    elif kind in ("geometry", "collider"):
        shader = _require(gameobject, "shader")
        geometry = _require(gameobject, "geometry")
        lines = (
            header
            + [
                f"VERTEXPATH={shader.vertex_path}",
                f"FRAGMENTPATH={shader.fragment_path}",
                f"GEOMETRYTYPE={geometry.geometry_type}",
            ]
            + _vector_lines(
                "GEOMETRYCOLOR", ("RED", "GREEN", "BLUE"), gameobject.color
            )
            + _transform_lines(gameobject)
        )
    else:
        return ""
    return "".join(line + "\n" for line in lines)


def save_gameobjects(gameobjects, directory=DEFAULT_GAMEOBJECTS_DIR) -> list[Path]:
    """Write each object to ``directory/object_<n>.gameobject`` and return the paths.

    The directory must already exist.
    """
    root = Path(os.fspath(directory))
    written = []
    for number, gameobject in enumerate(gameobjects):
        path = root / f"object_{number}.gameobject"
        path.write_text(format_gameobject(gameobject), encoding="utf-8")
        written.append(path)
    return written