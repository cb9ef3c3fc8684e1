"""Two and three component vectors used throughout the renderer.

Vectors are small immutable value types. Arithmetic operators are
componentwise and accept either another vector of the same arity or a plain
scalar, which is broadcast to every component:

    >>> from sdftracer.core.vector import Vector3
    >>> Vector3(1.0, 2.0, 3.0) * 2.0
    Vector3(x=2.0, y=4.0, z=6.0)
    >>> Vector3(1.0, 2.0, 3.0) * Vector3(0.5, 0.5, 0.5)
    Vector3(x=0.5, y=1.0, z=1.5)

Colors are represented with Vector3 as well (x=red, y=green, z=blue).
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Vector2:
    """A 2D vector.

    Attributes:
        x: First component.
        y: Second component.
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    @classmethod
    def splat(cls, value: float) -> Vector2:
        """Build a vector with every component set to value."""
        return cls(value, value)

    def _coerce(self, other: Vector2Like) -> Vector2:
        if isinstance(other, Vector2):
            return other
        return Vector2(other, other)

    def __add__(self, other: Vector2Like) -> Vector2:
        o = self._coerce(other)
        return Vector2(self.x + o.x, self.y + o.y)

    def __sub__(self, other: Vector2Like) -> Vector2:
        o = self._coerce(other)
        return Vector2(self.x - o.x, self.y - o.y)

    def __mul__(self, other: Vector2Like) -> Vector2:
        o = self._coerce(other)
        return Vector2(self.x * o.x, self.y * o.y)

    def __truediv__(self, other: Vector2Like) -> Vector2:
        o = self._coerce(other)
        return Vector2(self.x / o.x, self.y / o.y)

    def __radd__(self, other: float) -> Vector2:
        return self._coerce(other) + self

    def __rsub__(self, other: float) -> Vector2:
        return self._coerce(other) - self

    def __rmul__(self, other: float) -> Vector2:
        return self._coerce(other) * self

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def dot(self, other: Vector2) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def length_sqr(self) -> float:
        """Squared length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sqr())

    def normalized(self) -> Vector2:
        """Return the unit vector, or the zero vector when length is zero."""
        length = self.length()
        if length == 0.0:
            return Vector2.zero()
        return self / length

    def reflect(self, normal: Vector2) -> Vector2:
        """Reflect about normal: self - 2 dot(self, normal) normal."""
        return self - normal * (2.0 * self.dot(normal))

    def lerp(self, other: Vector2, t: float) -> Vector2:
        """Linearly interpolate toward other; t is not clamped."""
        return self * (1.0 - t) + other * t


@dataclass(frozen=True, slots=True)
class Vector3:
    """A 3D vector, also used for RGB colors.

    Attributes:
        x: First component (red for colors).
        y: Second component (green for colors).
        z: Third component (blue for colors).
    """

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def splat(cls, value: float) -> Vector3:
        """Build a vector with every component set to value."""
        return cls(value, value, value)

    def _coerce(self, other: Vector3Like) -> Vector3:
        if isinstance(other, Vector3):
            return other
        return Vector3(other, other, other)

    def __add__(self, other: Vector3Like) -> Vector3:
        o = self._coerce(other)
        return Vector3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, other: Vector3Like) -> Vector3:
        o = self._coerce(other)
        return Vector3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, other: Vector3Like) -> Vector3:
        o = self._coerce(other)
        return Vector3(self.x * o.x, self.y * o.y, self.z * o.z)

    def __truediv__(self, other: Vector3Like) -> Vector3:
        o = self._coerce(other)
        return Vector3(self.x / o.x, self.y / o.y, self.z / o.z)

    def __radd__(self, other: float) -> Vector3:
        return self._coerce(other) + self

    def __rsub__(self, other: float) -> Vector3:
        return self._coerce(other) - self

    def __rmul__(self, other: float) -> Vector3:
        return self._coerce(other) * self

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def dot(self, other: Vector3) -> float:
        """Compute the dot product with another vector.

        Args:
            other: Second vector.

        Returns:
            The sum of the componentwise products.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_sqr(self) -> float:
        """Squared length, cheaper than length() when only comparing."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sqr())

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction.

        A zero-length vector normalizes to the zero vector instead of
        producing NaN components.

        Returns:
            The normalized vector, or Vector3.zero() if the length is zero.
        """
        length = self.length()
        if length == 0.0:
            return Vector3.zero()
        return self / length

    def reflect(self, normal: Vector3) -> Vector3:
        """Reflect this vector about a normal: v - 2 * dot(v, n) * n.

        Args:
            normal: The surface normal (should be normalized).

        Returns:
            The reflected vector.
        """
        return self - normal * (2.0 * self.dot(normal))

    def lerp(self, other: Vector3, t: float) -> Vector3:
        """Linearly interpolate toward other.

        t is not clamped, so values outside [0, 1] extrapolate.

        Args:
            other: The vector reached at t = 1.
            t: Interpolation parameter.

        Returns:
            self * (1 - t) + other * t.
        """
        return self * (1.0 - t) + other * t


Vector2Like = Union[Vector2, float]
Vector3Like = Union[Vector3, float]
