"""Scene object capabilities and the records they produce.

A scene object supports one or both of two capabilities:

    Intersectable: analytic ray queries used by the path tracer
    SDF:           signed distance queries used by the ray marcher

Both are structural protocols, so any class with the right method
participates without inheriting from anything here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Protocol, runtime_checkable

from sdftracer.core.ray import Ray
from sdftracer.core.vector import Vector3
from sdftracer.materials.material import Material


@dataclass(frozen=True, slots=True)
class RayHit:
    """Record of a ray-surface intersection.

    Attributes:
        position: World-space point where the ray met the surface.
        normal: Unit surface normal, facing against the incoming ray for
            front faces and flipped for rays starting inside the shape.
        distance: Ray parameter of the hit.
        material: Material of the surface that was hit.
    """

    position: Vector3
    normal: Vector3
    distance: float
    material: Material


class SDFSample(NamedTuple):
    """A signed distance paired with the material that applies there."""

    distance: float
    material: Material


@runtime_checkable
class Intersectable(Protocol):
    """Shape that answers analytic ray intersection queries."""

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        """Return the hit along ray, or None when the ray misses."""
        ...


@runtime_checkable
class SDF(Protocol):
    """Shape described by a signed distance field."""

    def get_sdf(self, point: Vector3) -> SDFSample:
        """Signed distance from point to the surface (negative inside)."""
        ...
