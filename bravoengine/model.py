"""Models loaded from Wavefront OBJ files, with materials and bounding box."""

from __future__ import annotations

import os
from itertools import pairwise
from pathlib import Path

from .mesh import Mesh, Texture, Vertex

_BOUNDING_BOX_INDICES = (
    0, 1, 2,
    2, 3, 1,
    4, 5, 6,
    6, 7, 5,
    0, 1, 4,
    4, 5, 1,
    2, 3, 6,
    6, 7, 3,
    0, 2, 4,
    4, 6, 2,
    1, 3, 5,
    5, 7, 3,
)

# Material map keywords and the texture role each one fills.
_TEXTURE_KEYS = {
    "map_kd": "texture_diffuse",
    "map_ks": "texture_specular",
    "map_bump": "texture_normal",
    "bump": "texture_normal",
    "map_ka": "texture_height",
}
_TEXTURE_ORDER = ("texture_diffuse", "texture_specular", "texture_normal", "texture_height")


class ModelLoadError(Exception):
    """Raised when a model file cannot be read or understood."""


def _floats(args: list[str], count: int, line: int) -> tuple[float, ...]:
    if len(args) < count:
        raise ModelLoadError(f"line {line}: expected {count} numbers")
    try:
        return tuple(float(a) for a in args[:count])
    except ValueError:
        raise ModelLoadError(f"line {line}: invalid number") from None


def _resolve(token: str, size: int, line: int) -> int:
    try:
        index = int(token)
    except ValueError:
        raise ModelLoadError(f"line {line}: invalid index {token!r}") from None
    if index > 0:
        resolved = index - 1
    elif index < 0:
        resolved = size + index
    else:
        raise ModelLoadError(f"line {line}: index 0 is not allowed")
    if not 0 <= resolved < size:
        raise ModelLoadError(f"line {line}: index {index} out of range")
    return resolved


def _corner(token, positions, uvs, normals, line: int) -> Vertex:
    fields = token.split("/")
    position = positions[_resolve(fields[0], len(positions), line)]
    tex_coords = (0.0, 0.0)
    normal = (0.0, 0.0, 0.0)
    if len(fields) > 1 and fields[1]:
        u, v = uvs[_resolve(fields[1], len(uvs), line)]
        tex_coords = (u, 1.0 - v)
    if len(fields) > 2 and fields[2]:
        normal = normals[_resolve(fields[2], len(normals), line)]
    return Vertex(position=position, normal=normal, tex_coords=tex_coords)


def _parse(text: str):
    """Split OBJ text into (material, vertices, indices) parts and material libraries."""
    positions: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    uvs: list[tuple[float, float]] = []
    parts: list[tuple[str | None, list[Vertex], list[int]]] = []
    libraries: list[str] = []
    material: str | None = None
    vertices: list[Vertex] = []
    indices: list[int] = []

    def close() -> None:
        nonlocal vertices, indices
        if indices:
            parts.append((material, vertices, indices))
        vertices, indices = [], []

    for number, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        keyword, *args = line.split()
        if keyword == "v":
            positions.append(_floats(args, 3, number))
        elif keyword == "vn":
            normals.append(_floats(args, 3, number))
        elif keyword == "vt":
            values = _floats(args, 1, number) + ((0.0,) if len(args) < 2 else ())
            if len(args) >= 2:
                values = _floats(args, 2, number)
            uvs.append((values[0], values[1]))
        elif keyword == "f":
            if len(args) < 3:
                raise ModelLoadError(f"line {number}: a face needs at least three corners")
            corners = [_corner(a, positions, uvs, normals, number) for a in args]
            first = len(vertices)
            vertices.extend(corners)
            for a, b in pairwise(range(first + 1, first + len(corners))):
                indices.extend((first, a, b))
        elif keyword == "mtllib":
            libraries.extend(args)
        elif keyword == "usemtl":
            close()
            material = args[0] if args else None
        elif keyword in ("o", "g"):
            close()
    close()
    return parts, libraries


def parse_obj(text: str) -> list[Mesh]:
    """Parse OBJ text into triangulated meshes, one per object, group or material.

    Every face corner becomes its own vertex; texture coordinates are flipped
    vertically.
    """
    parts, _ = _parse(text)
    return [Mesh(vertices, indices) for _, vertices, indices in parts]


def _parse_mtl(text: str) -> dict[str, dict[str, str]]:
    materials: dict[str, dict[str, str]] = {}
    current: dict[str, str] | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        keyword, *args = line.split()
        keyword = keyword.lower()
        if keyword == "newmtl" and args:
            current = materials.setdefault(args[0], {})
        elif keyword in _TEXTURE_KEYS and args and current is not None:
            current[_TEXTURE_KEYS[keyword]] = args[-1]
    return materials


class Model:
    """A model read from an OBJ file: meshes, textures and bounding box."""

    def __init__(self, path) -> None:
        self.model_path = os.fspath(path)
        self.directory = str(Path(self.model_path).parent)
        try:
            text = Path(self.model_path).read_text(encoding="utf-8", errors="replace")
        except OSError as error:
            raise ModelLoadError(f"cannot read model {self.model_path!r}") from error

        parts, libraries = _parse(text)
        if not parts:
            raise ModelLoadError(f"model {self.model_path!r} has no faces")

        materials = self._load_materials(libraries)
        self.textures_loaded: list[Texture] = []
        self.meshes = [
            Mesh(vertices, indices, self._material_textures(materials.get(name, {})))
            for name, vertices, indices in parts
        ]

        positions = [v.position for mesh in self.meshes for v in mesh.vertices]
        self.minimum = tuple(min(axis) for axis in zip(*positions))
        self.maximum = tuple(max(axis) for axis in zip(*positions))
        x_min, y_min, z_min = self.minimum
        x_max, y_max, z_max = self.maximum
        corners = (
            (x_min, y_min, z_max),
            (x_max, y_min, z_max),
            (x_min, y_min, z_min),
            (x_max, y_min, z_min),
            (x_min, y_max, z_max),
            (x_max, y_max, z_max),
            (x_min, y_max, z_min),
            (x_max, y_max, z_min),
        )
        self._bounding_box = [Vertex(position=c) for c in corners]
        self.bounding_box_indices = _BOUNDING_BOX_INDICES

    def _load_materials(self, libraries: list[str]) -> dict[str, dict[str, str]]:
        materials: dict[str, dict[str, str]] = {}
        for library in libraries:
            try:
                text = (Path(self.directory) / library).read_text(
                    encoding="utf-8", errors="replace"
                )
            except OSError:
                continue
            materials.update(_parse_mtl(text))
        return materials

    def _material_textures(self, material: dict[str, str]) -> list[Texture]:
        textures = []
        for role in _TEXTURE_ORDER:
            path = material.get(role)
            if path is None:
                continue
            known = next((t for t in self.textures_loaded if t.path == path), None)
            if known is None:
                known = Texture(id=len(self.textures_loaded) + 1, type=role, path=path)
                self.textures_loaded.append(known)
            textures.append(known)
        return textures

    @property
    def bounding_box(self) -> list[Vertex]:
        """The eight box corners: bottom face first, then the top face."""
        return list(self._bounding_box)

    def __repr__(self) -> str:
        return f"Model({self.model_path!r})"