"""2D affine matrices and hierarchical transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

Vector2 = Tuple[float, float]


@dataclass(frozen=True)
class Matrix3x2:
    """A 3x2 affine matrix for row vectors: ``p' = p @ M``.

    ``a @ b`` applies ``a`` first, then ``b``.
    """

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def identity(cls) -> "Matrix3x2":
        return cls()

    @classmethod
    def scale(cls, sx: float, sy: float) -> "Matrix3x2":
        return cls(m11=sx, m22=sy)

    @classmethod
    def rotation(cls, degrees: float) -> "Matrix3x2":
        """Rotation about the origin; positive angles turn +x towards +y."""
        radians = math.radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return cls(m11=cos, m12=sin, m21=-sin, m22=cos)

    @classmethod
    def translation(cls, x: float, y: float) -> "Matrix3x2":
        return cls(dx=x, dy=y)

    def __matmul__(self, other: object) -> "Matrix3x2":
        if not isinstance(other, Matrix3x2):
            return NotImplemented
        return Matrix3x2(
            m11=self.m11 * other.m11 + self.m12 * other.m21,
            m12=self.m11 * other.m12 + self.m12 * other.m22,
            m21=self.m21 * other.m11 + self.m22 * other.m21,
            m22=self.m21 * other.m12 + self.m22 * other.m22,
            dx=self.dx * other.m11 + self.dy * other.m21 + other.dx,
            dy=self.dx * other.m12 + self.dy * other.m22 + other.dy,
        )

    def inverted(self) -> "Matrix3x2":
        """Return the inverse matrix; raise ValueError if it is singular."""
        det = self.m11 * self.m22 - self.m12 * self.m21
        if det == 0.0 or not math.isfinite(det):
            raise ValueError("matrix is not invertible")
        return Matrix3x2(
            m11=self.m22 / det,
            m12=-self.m12 / det,
            m21=-self.m21 / det,
            m22=self.m11 / det,
            dx=(self.m21 * self.dy - self.m22 * self.dx) / det,
            dy=(self.m12 * self.dx - self.m11 * self.dy) / det,
        )

    def transform_point(self, x: float, y: float) -> Vector2:
        return (
            x * self.m11 + y * self.m21 + self.dx,
            x * self.m12 + y * self.m22 + self.dy,
        )


class Transform:
    """Position, rotation (degrees) and scale, optionally parented."""

    def __init__(self) -> None:
        self.camera: Optional[Transform] = None
        self.parent: Optional[Transform] = None
        self.is_unity_coords: bool = True
        self._position: Vector2 = (0.0, 0.0)
        self._rotation: float = 0.0
        self._scale: Vector2 = (1.0, 1.0)
        self._cached: Matrix3x2 = Matrix3x2.identity()
        self._dirty = True

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value: Vector2) -> None:
        x, y = value
        self._position = (float(x), float(y))
        self._dirty = True

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._dirty = True

    @property
    def scale(self) -> Vector2:
        return self._scale

    @scale.setter
    def scale(self, value: Vector2) -> None:
        sx, sy = value
        self._scale = (float(sx), float(sy))
        self._dirty = True

    def to_local_matrix(self) -> Matrix3x2:
        """Scale, then rotate, then translate; cached until a value changes."""
        if self._dirty:
            self._cached = (
                Matrix3x2.scale(*self._scale)
                @ Matrix3x2.rotation(self._rotation)
                @ Matrix3x2.translation(*self._position)
            )
            self._dirty = False
        return self._cached

    def to_local_invert_matrix(self) -> Matrix3x2:
        """Inverse of the local matrix, or identity when it is singular."""
        try:
            return self.to_local_matrix().inverted()
        except ValueError:
            return Matrix3x2.identity()

    def to_world_matrix(self) -> Matrix3x2:
        local = self.to_local_matrix()
        if self.parent is None:
            return local
        return local @ self.parent.to_world_matrix()

    def to_world_invert_matrix(self) -> Matrix3x2:
        """Inverse of the world matrix, or identity when it is singular."""
        try:
            return self.to_world_matrix().inverted()
        except ValueError:
            return Matrix3x2.identity()

    def reset(self) -> None:
        """Zero position and rotation, and set scale back to (1, 1)."""
        self.position = (0.0, 0.0)
        self.rotation = 0.0
        self.scale = (1.0, 1.0)