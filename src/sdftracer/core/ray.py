"""Ray data structure and random sampling helpers.

This module provides the Ray dataclass shared by both integrators, the
RandomSource protocol consumed by everything that samples, and the
hemisphere sampler used to pick bounce directions.

Example:
    >>> import numpy as np
    >>> from sdftracer.core.ray import Ray, random_in_hemisphere
    >>> from sdftracer.core.vector import Vector3
    >>> ray = Ray(origin=Vector3.zero(), direction=Vector3(0.0, 0.0, -1.0))
    >>> point = ray.at(5.0)  # Point 5 units along the ray
    >>> bounce = random_in_hemisphere(Vector3(0.0, 1.0, 0.0), np.random.default_rng())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from sdftracer.core.vector import Vector3


class RandomSource(Protocol):
    """Source of uniform random scalars in [0, 1).

    numpy.random.Generator and random.Random both satisfy this protocol.
    """

    def random(self) -> float:
        ...


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be unit
            length; integrators normalize bounce directions themselves.
    """

    origin: Vector3
    direction: Vector3

    def at(self, t: float) -> Vector3:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t


def random_in_hemisphere(normal: Vector3, rng: RandomSource) -> Vector3:
    """Sample a random vector in the hemisphere oriented by normal.

    A point is drawn uniformly from the cube [-1, 1]^3 and negated when it
    points away from the normal, so no sample is ever rejected. The result
    is not normalized.

    Args:
        normal: The surface normal defining the hemisphere.
        rng: Source of uniform random numbers.

    Returns:
        A vector whose dot product with normal is non-negative.
    """
    sample = Vector3(
        rng.random() * 2.0 - 1.0,
        rng.random() * 2.0 - 1.0,
        rng.random() * 2.0 - 1.0,
    )
    if sample.dot(normal) > 0.0:
        return sample
    return -sample
