"""Scene-level queries over an ordered collection of shapes.

Two reductions select the single relevant shape for a query:

    nearest_hit:     closest analytic intersection in front of the ray (path tracer)
    nearest_surface: distance sample with the smallest absolute value (ray marcher)

Scenes are plain sequences of shapes, built once and shared read-only by
every render task.

Example:
    >>> from sdftracer.scene.intersection import nearest_hit
    >>> hit = nearest_hit(ray, objects)
    >>> if hit is None:
    ...     pass  # the ray escaped the scene
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from sdftracer.core.ray import Ray
from sdftracer.core.vector import Vector3
from sdftracer.geometry.base import SDF, Intersectable, RayHit, SDFSample


def nearest_hit(ray: Ray, objects: Iterable[Intersectable]) -> Optional[RayHit]:
    """Find the closest intersection of a ray with the scene.

    Hits at distance <= 0 are discarded to reject self-intersection and
    surfaces behind the origin. Among the remaining hits the smallest
    distance wins; on ties the first object in scene order is kept.

    Args:
        ray: The ray to test.
        objects: Shapes supporting analytic intersection.

    Returns:
        The nearest RayHit, or None if the ray escapes the scene.
    """
    closest = None
    for obj in objects:
        hit = obj.intersect(ray)
        if hit is None or not hit.distance > 0.0:
            continue
        if closest is None or hit.distance < closest.distance:
            closest = hit
    return closest


def nearest_surface(point: Vector3, objects: Iterable[SDF]) -> Optional[SDFSample]:
    """Find the shape whose surface is numerically closest to a point.

    Shapes are compared by the absolute value of their signed distance, so
    a point inside one shape can be attracted to the surface of another if
    that surface is nearer. The returned sample keeps its sign.

    Args:
        point: The query point.
        objects: Shapes supporting signed distance queries.

    Returns:
        The SDFSample with the smallest absolute distance, or None for an
        empty scene.
    """
    closest = None
    for obj in objects:
        sample = obj.get_sdf(point)
        # NaN compares false and leaves the current choice in place
        if closest is None or abs(sample.distance) < abs(closest.distance):
            closest = sample
    return closest
