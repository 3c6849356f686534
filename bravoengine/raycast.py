"""Ray tests against collider meshes."""

from __future__ import annotations

import numpy as np

PARALLEL_EPSILON = 0.0001


def raycast_collision(origin, direction, collider) -> bool:
    """Return True if a ray from ``origin`` along ``direction`` hits the collider mesh.

    Faces nearly parallel to the ray and hits behind the origin are ignored.
    """
    origin = np.asarray(origin, dtype=float)
    direction = np.asarray(direction, dtype=float)

    for face in collider.world_mesh():
        v0, v1, v2, normal = face.v0, face.v1, face.v2, face.normal

        denom = float(np.dot(normal, direction))
        if abs(denom) < PARALLEL_EPSILON:
            continue

        t = float(np.dot(v0 - origin, normal)) / denom
        if t < 0:
            continue

        point = origin + t * direction
        edges = ((v0, v1), (v1, v2), (v2, v0))
        if all(
            np.dot(np.cross(end - start, point - start), normal) >= 0
            for start, end in edges
        ):
            return True

    return False