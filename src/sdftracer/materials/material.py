"""Surface material and bounce direction sampling.

Every surface carries a single Material combining three properties:

    diffuse_color:  albedo that tints light arriving from the next bounce
    emissive_color: light emitted by the surface itself
    smoothness:     blend from random hemisphere scatter (0.0) to a bounce
                    straight along the surface normal (1.0)

Scattering approximates glossy surfaces by pulling a random hemisphere
direction toward the normal. This is not a specular reflection of the
incoming ray.

Example:
    >>> from sdftracer.core.vector import Vector3
    >>> from sdftracer.materials.material import Material
    >>> red = Material.diffuse(Vector3(0.8, 0.1, 0.1))
    >>> lamp = Material(Vector3.zero(), Vector3(4.0, 4.0, 4.0), 0.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from sdftracer.core.ray import RandomSource, random_in_hemisphere
from sdftracer.core.vector import Vector3


@dataclass(frozen=True, slots=True)
class Material:
    """Material properties copied into every hit record.

    Attributes:
        diffuse_color: Albedo per color channel.
        emissive_color: Emitted radiance per color channel.
        smoothness: Scatter blend factor, conceptually in [0, 1].
    """

    diffuse_color: Vector3
    emissive_color: Vector3
    smoothness: float

    @classmethod
    def default(cls) -> Material:
        """A black, non-emissive, fully diffuse material."""
        return cls(Vector3.zero(), Vector3.zero(), 0.0)

    @classmethod
    def diffuse(cls, color: Vector3, smoothness: float = 0.0) -> Material:
        """A non-emissive material with the given albedo."""
        return cls(color, Vector3.zero(), smoothness)


def scatter_direction(normal: Vector3, material: Material, rng: RandomSource) -> Vector3:
    """Sample the direction of the next bounce off a surface.

    Args:
        normal: The surface normal at the hit point (unit length).
        material: The surface material; only smoothness is used.
        rng: Source of uniform random numbers.

    Returns:
        The normalized bounce direction,
        normalize(lerp(random_in_hemisphere(normal), normal, smoothness)).
    """
    return random_in_hemisphere(normal, rng).lerp(normal, material.smoothness).normalized()
