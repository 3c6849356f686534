"""Colliders built from a model's or geometry's bounding box."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .mesh import Vertex


def _rotation(axis: int, degrees: float) -> np.ndarray:
    c = math.cos(math.radians(degrees))
    s = math.sin(math.radians(degrees))
    matrix = np.eye(4)
    if axis == 0:
        matrix[1:3, 1:3] = [[c, -s], [s, c]]
    elif axis == 1:
        matrix[0, 0], matrix[0, 2], matrix[2, 0], matrix[2, 2] = c, s, -s, c
    else:
        matrix[0:2, 0:2] = [[c, -s], [s, c]]
    return matrix


def model_matrix(position, rotation, scale) -> np.ndarray:
    """Translate, then rotate about x, y and z (degrees), then scale."""
    translate = np.eye(4)
    translate[:3, 3] = np.asarray(position, dtype=float)
    rx, ry, rz = (float(r) for r in rotation)
    scaling = np.diag([*np.asarray(scale, dtype=float), 1.0])
    return translate @ _rotation(0, rx) @ _rotation(1, ry) @ _rotation(2, rz) @ scaling


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


@dataclass(eq=False)
class ColliderFace:
    """One triangle of a collider mesh with its unit normal."""

    v0: np.ndarray
    v1: np.ndarray
    v2: np.ndarray
    normal: np.ndarray


class Collider:
    """Axis-aligned box and triangle mesh that follow a game object."""

    def __init__(self, gameobject, model=None, geometry=None) -> None:
        self.gameobject = gameobject
        self.model = model
        self.geometry = geometry

        aabb: list[Vertex] = []
        mesh: list[ColliderFace] = []
        if model is not None:
            aabb = model.bounding_box
        if geometry is not None:
            aabb = geometry.bounding_box
            corners = [np.array(v.position) for v in aabb]
            indices = list(geometry.indices)
            for a, b, c in zip(indices[0::3], indices[1::3], indices[2::3]):
                v0, v1, v2 = corners[a], corners[b], corners[c]
                normal = _normalize(np.cross(v1 - v0, v2 - v0))
                mesh.append(ColliderFace(v0, v1, v2, normal))
        self._aabb = aabb
        self._mesh = mesh

    @property
    def aabb(self) -> list[Vertex]:
        """Box corners in object space."""
        return list(self._aabb)

    @property
    def mesh(self) -> list[ColliderFace]:
        """Collider triangles in object space."""
        return list(self._mesh)

    def _transform(self) -> np.ndarray:
        obj = self.gameobject
        return model_matrix(obj.position, obj.rotation, obj.scale)

    def world_aabb(self) -> list[Vertex]:
        """Box corners moved to the game object's place in the world."""
        matrix = self._transform()
        return [
            Vertex(position=(matrix @ np.append(v.position, 1.0))[:3]) for v in self._aabb
        ]

    def world_mesh(self) -> list[ColliderFace]:
        """Collider triangles and normals moved into world space."""
        obj = self.gameobject
        matrix = self._transform()
        linear = model_matrix((0.0, 0.0, 0.0), obj.rotation, obj.scale)[:3, :3]
        try:
            normal_matrix = np.linalg.inv(linear).T
        except np.linalg.LinAlgError:
            raise ValueError("collider transform is singular") from None

        def place(point: np.ndarray) -> np.ndarray:
            return (matrix @ np.append(point, 1.0))[:3]

        return [
            ColliderFace(
                place(face.v0),
                place(face.v1),
                place(face.v2),
                _normalize(normal_matrix @ face.normal),
            )
            for face in self._mesh
        ]