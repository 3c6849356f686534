"""Built-in primitive geometry with its bounding box."""

from __future__ import annotations

from .mesh import Vertex

_CUBE_POSITIONS = (
    (-1.0, -1.0, 1.0),
    (1.0, -1.0, 1.0),
    (-1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0),
    (-1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0),
    (-1.0, 1.0, -1.0),
    (1.0, 1.0, -1.0),
)

_CUBE_INDICES = (
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

_BOUNDING_BOX_INDICES = (
    0, 2, 1,
    2, 3, 1,
    4, 5, 6,
    5, 7, 6,
    0, 1, 4,
    1, 5, 4,
    2, 6, 3,
    3, 6, 7,
    0, 4, 2,
    2, 4, 6,
    1, 3, 5,
    3, 7, 5,
)


class Geometry:
    """A unit cube spanning -1..1 on every axis."""

    geometry_type = "cube"

    def __init__(self) -> None:
        self._vertices = [Vertex(position=p) for p in _CUBE_POSITIONS]
        self._indices = _CUBE_INDICES
        self.bounding_box_indices = _BOUNDING_BOX_INDICES

        positions = [v.position for v in self._vertices]
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

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    @property
    def bounding_box(self) -> list[Vertex]:
        """The eight box corners: bottom face first, then the top face."""
        return list(self._bounding_box)