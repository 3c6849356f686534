"""Shader program sources and their uniform values."""

from __future__ import annotations

import numbers
import os
from pathlib import Path

import numpy as np


class ShaderError(Exception):
    """Raised when a shader cannot be loaded or given a value."""


def _read_source(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as error:
        raise ShaderError(f"cannot read shader source {path!r}") from error


class Shader:
    """A vertex/fragment shader pair and the uniforms set on it."""

    def __init__(self, vertex_path, fragment_path) -> None:
        self.vertex_path = os.fspath(vertex_path)
        self.fragment_path = os.fspath(fragment_path)
        self.vertex_source = _read_source(self.vertex_path)
        self.fragment_source = _read_source(self.fragment_path)
        self._uniforms: dict[str, object] = {}

    def set_uniform(self, name: str, value) -> None:
        """Set a bool, int, float, 3-vector or 4x4 matrix uniform."""
        if isinstance(value, (bool, np.bool_)):
            self._uniforms[name] = bool(value)
            return
        if isinstance(value, numbers.Integral):
            self._uniforms[name] = int(value)
            return
        if isinstance(value, numbers.Real):
            self._uniforms[name] = float(value)
            return
        try:
            array = np.array(value, dtype=float)
        except (TypeError, ValueError) as error:
            raise ShaderError(f"unsupported value for uniform {name!r}") from error
        if array.shape not in ((3,), (4, 4)):
            raise ShaderError(
                f"uniform {name!r} must be a 3-vector or 4x4 matrix, got shape {array.shape}"
            )
        array.flags.writeable = False
        self._uniforms[name] = array

    def uniform(self, name: str):
        """Return the value last set for a uniform."""
        try:
            return self._uniforms[name]
        except KeyError:
            raise KeyError(f"uniform {name!r} has not been set") from None

    def __repr__(self) -> str:
        return f"Shader({self.vertex_path!r}, {self.fragment_path!r})"