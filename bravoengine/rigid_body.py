"""Minimal rigid body that moves its game object."""

from __future__ import annotations

import numpy as np


class RigidBody:
    """Moves a game object by applied velocities."""

    def __init__(self, gameobject) -> None:
        self.gameobject = gameobject

    def apply_simple_force(self, velocity) -> None:
        """Shift the object's position by a velocity for one step."""
        step = np.asarray(velocity, dtype=float)
        if step.shape != (3,):
            raise ValueError("velocity must have three components")
        self.gameobject.position = self.gameobject.position + step