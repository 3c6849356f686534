"""Scene objects: their resources, transform and render flags."""

from __future__ import annotations

import numpy as np


class _Vector3:
    """Attribute that always holds a float array of three components."""

    def __set_name__(self, owner, name: str) -> None:
        self._public = name
        self._private = "_" + name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return getattr(obj, self._private)

    def __set__(self, obj, value) -> None:
        array = np.array(value, dtype=float)
        if array.shape != (3,):
            raise ValueError(f"{self._public} must have three components")
        setattr(obj, self._private, array)


class GameObject:
    """An object in the scene with references to what draws it."""

    position = _Vector3()
    scale = _Vector3()
    rotation = _Vector3()
    velocity = _Vector3()
    color = _Vector3()

    def __init__(
        self,
        *,
        type="",
        name="",
        id=0,
        position=(0.0, 0.0, 0.0),
        scale=(0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
        velocity=(0.0, 0.0, 0.0),
        color=(0.0, 0.0, 0.0),
        camera=None,
        shader=None,
        model=None,
        geometry=None,
        enable_render=False,
        enable_bounding_box=False,
    ) -> None:
        self.type = type
        self.name = name
        self.id = id
        self.position = position
        self.scale = scale
        self.rotation = rotation
        self.velocity = velocity
        self.color = color
        self.camera = camera
        self.shader = shader
        self.model = model
        self.geometry = geometry
        self.enable_render = bool(enable_render)
        self.enable_bounding_box = bool(enable_bounding_box)

    def __repr__(self) -> str:
        return (
            f"GameObject(type={self.type!r}, name={self.name!r}, "
            f"position={self.position.tolist()!r})"
        )