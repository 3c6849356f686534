"""Vertex, texture and mesh data as loaded from model files."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_BONE_INFLUENCE = 4


def _floats(values, size: int, label: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"{label} must have {size} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vertex:
    """A single mesh vertex with its per-vertex attributes."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    tex_coords: tuple[float, float] = (0.0, 0.0)
    tangent: tuple[float, float, float] = (0.0, 0.0, 0.0)
    bitangent: tuple[float, float, float] = (0.0, 0.0, 0.0)
    bone_ids: tuple[int, ...] = (0,) * MAX_BONE_INFLUENCE
    weights: tuple[float, ...] = (0.0,) * MAX_BONE_INFLUENCE

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _floats(self.position, 3, "position"))
        object.__setattr__(self, "normal", _floats(self.normal, 3, "normal"))
        object.__setattr__(self, "tex_coords", _floats(self.tex_coords, 2, "tex_coords"))
        object.__setattr__(self, "tangent", _floats(self.tangent, 3, "tangent"))
        object.__setattr__(self, "bitangent", _floats(self.bitangent, 3, "bitangent"))
        bone_ids = tuple(int(b) for b in self.bone_ids)
        if len(bone_ids) != MAX_BONE_INFLUENCE:
            raise ValueError(f"bone_ids must have {MAX_BONE_INFLUENCE} entries")
        object.__setattr__(self, "bone_ids", bone_ids)
        object.__setattr__(
            self, "weights", _floats(self.weights, MAX_BONE_INFLUENCE, "weights")
        )


@dataclass(frozen=True)
class Texture:
    """A texture bound to a mesh: its handle, role and source path."""

    id: int
    type: str
    path: str


@dataclass
class Mesh:
    """Indexed triangle mesh with the textures used to draw it."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    textures: list[Texture] = field(default_factory=list)

    def texture_uniforms(self) -> list[tuple[str, int, int]]:
        """Return (uniform name, texture unit, texture id) for each texture.

        Diffuse and specular textures are numbered from 1 in order of
        appearance; other roles carry no number.
        """
        counters = {"texture_diffuse": 0, "texture_specular": 0}
        uniforms = []
        for unit, texture in enumerate(self.textures):
            number = ""
            if texture.type in counters:
                counters[texture.type] += 1
                number = str(counters[texture.type])
            uniforms.append((f"material.{texture.type}{number}", unit, texture.id))
        return uniforms