"""Sphere primitive with ray intersection and signed distance.

The sphere is the only primitive and supports both scene capabilities:

    intersect(ray): analytic ray-sphere intersection for the path tracer
    get_sdf(point): exact signed distance for the ray marcher

The ray-sphere intersection solves

    |origin + t * direction - center|^2 = radius^2

which expands to a*t^2 + 2*h*t + c = 0 with

    oc = origin - center
    a  = dot(direction, direction)
    h  = dot(oc, direction)   (half of the traditional b)
    c  = dot(oc, oc) - radius^2

Example:
    >>> from sdftracer.core.ray import Ray
    >>> from sdftracer.core.vector import Vector3
    >>> from sdftracer.geometry.sphere import Sphere
    >>> from sdftracer.materials.material import Material
    >>> sphere = Sphere(Vector3.zero(), 1.0, Material.default())
    >>> hit = sphere.intersect(Ray(Vector3(0.0, 0.0, -3.0), Vector3(0.0, 0.0, 1.0)))
    >>> hit.distance
    2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from sdftracer.core.ray import Ray
from sdftracer.core.vector import Vector3
from sdftracer.geometry.base import RayHit, SDFSample
from sdftracer.materials.material import Material


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere defined by center point, radius and material.

    Attributes:
        position: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: Material reported for hits and distance samples.
    """

    position: Vector3
    radius: float
    material: Material

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        """Test for ray-sphere intersection.

        The nearer root is used when it lies at or in front of the ray
        origin, giving the entry point and the outward normal. Otherwise the
        ray starts inside the sphere: the farther root is used and the
        normal is flipped to point back toward the center.

        Args:
            ray: The ray to test. Its direction need not be normalized.

        Returns:
            A RayHit, or None when the ray misses the sphere or the sphere
            lies entirely behind the ray origin.
        """
        oc = ray.origin - self.position
        a = ray.direction.length_sqr()
        half_b = oc.dot(ray.direction)
        c = oc.length_sqr() - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant < 0.0 or a == 0.0:
            return None

        sqrt_d = math.sqrt(discriminant)
        distance = (-half_b - sqrt_d) / a
        if distance >= 0.0:
            position = ray.at(distance)
            normal = (position - self.position) / self.radius
        else:
            # Origin is inside the sphere
            distance = (-half_b + sqrt_d) / a
            if distance < 0.0:
                return None
            position = ray.at(distance)
            normal = -(position - self.position) / self.radius

        return RayHit(
            position=position,
            normal=normal,
            distance=distance,
            material=self.material,
        )

    def get_sdf(self, point: Vector3) -> SDFSample:
        """Signed distance from point to the sphere surface."""
        return SDFSample((point - self.position).length() - self.radius, self.material)
