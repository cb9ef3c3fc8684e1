"""Recursive light-transport integrators.

This module implements the two ways a primary ray is turned into radiance:

    trace_ray: path tracing against analytic primitives (Intersectable)
    march_ray: sphere tracing against signed distance fields (SDF)

Both follow the same bounce model. At each surface a new direction is
sampled from the material, the returned light is tinted by the diffuse
color and the surface emission is added:

    radiance = recurse(bounce) * diffuse_color + emissive_color

Rays that leave the scene pick up a vertical sky gradient, which is the
only light source besides emissive materials. Paths are cut off after a
fixed number of bounces and return black. There is no Russian roulette and
no explicit light sampling.

Example:
    >>> import numpy as np
    >>> from sdftracer.core.integrator import MAX_BOUNCES, trace_ray
    >>> from sdftracer.scene.presets import create_sphere_scene
    >>> objects, camera = create_sphere_scene(aspect=1.5)
    >>> color = trace_ray(camera.get_ray(0.0, 0.0), objects, np.random.default_rng(), MAX_BOUNCES)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial

from sdftracer.core.ray import RandomSource, Ray
from sdftracer.core.vector import Vector3
from sdftracer.geometry.base import SDF, Intersectable
from sdftracer.materials.material import scatter_direction
from sdftracer.scene.intersection import nearest_hit, nearest_surface

# =============================================================================
# Rendering Constants
# =============================================================================

# Maximum ray bounces for the path tracer
MAX_BOUNCES = 128

# Maximum ray bounces for the ray marcher
MARCH_MAX_BOUNCES = 64

# A marched distance below this counts as touching the surface
MIN_DISTANCE = 0.001

# A marched distance above this counts as leaving the scene
MAX_DISTANCE = 10000.0

# Sky color straight up; straight down the sky is white
SKY_COLOR = Vector3(0.4, 0.6, 0.8)

Integrator = Callable[[Ray, Sequence, RandomSource, int], Vector3]


def sky_color(direction: Vector3) -> Vector3:
    """Background radiance for a ray leaving the scene.

    Blends from white (looking down) to SKY_COLOR (looking up).

    Args:
        direction: Direction of the escaping ray.

    Returns:
        lerp(white, SKY_COLOR, direction.y * 0.5 + 0.5).
    """
    return Vector3.one().lerp(SKY_COLOR, direction.y * 0.5 + 0.5)


def trace_ray(
    ray: Ray,
    objects: Sequence[Intersectable],
    rng: RandomSource,
    depth: int,
) -> Vector3:
    """Estimate the radiance arriving along a ray by path tracing.

    Args:
        ray: The ray to trace.
        objects: Shapes supporting analytic intersection.
        rng: Source of uniform random numbers, private to the calling task.
        depth: Remaining bounce budget. Zero returns black.

    Returns:
        The radiance (RGB) for this path sample.
    """
    if depth <= 0:
        return Vector3.zero()

    hit = nearest_hit(ray, objects)
    if hit is None:
        return sky_color(ray.direction)

    material = hit.material
    bounce = Ray(
        origin=hit.position,
        direction=scatter_direction(hit.normal, material, rng),
    )
    incoming = trace_ray(bounce, objects, rng, depth - 1)
    return incoming * material.diffuse_color + material.emissive_color


def march_ray(
    ray: Ray,
    objects: Sequence[SDF],
    rng: RandomSource,
    depth: int,
    min_distance: float = MIN_DISTANCE,
    max_distance: float = MAX_DISTANCE,
) -> Vector3:
    """Estimate the radiance arriving along a ray by sphere tracing.

    The ray origin is advanced by the distance to the nearest surface until
    that distance drops below min_distance (a hit) or exceeds max_distance
    (an escape). At a hit the surface normal is approximated by the negated
    ray direction, and the bounce starts 2 * min_distance off the surface.
    A ray with a zero-length direction cannot advance and escapes at once.

    Args:
        ray: The ray to march.
        objects: Shapes supporting signed distance queries.
        rng: Source of uniform random numbers, private to the calling task.
        depth: Remaining bounce budget. Zero returns black.
        min_distance: Surface contact threshold.
        max_distance: Escape threshold.

    Returns:
        The radiance (RGB) for this path sample.
    """
    if depth <= 0:
        return Vector3.zero()

    origin = ray.origin
    direction = ray.direction
    # A zero direction never advances the march
    if direction.length_sqr() == 0.0:
        return sky_color(direction)

    while True:
        sample = nearest_surface(origin, objects)
        # NaN fails the comparison and escapes as well
        if sample is None or not abs(sample.distance) <= max_distance:
            return sky_color(direction)

        distance, material = sample
        origin = origin + direction * distance
        if distance < min_distance:
            normal = -direction
            bounce = Ray(
                origin=origin + normal * (min_distance * 2.0),
                direction=scatter_direction(normal, material, rng),
            )
            incoming = march_ray(bounce, objects, rng, depth - 1, min_distance, max_distance)
            return incoming * material.diffuse_color + material.emissive_color


def get_integrator(
    mode: str,
    min_distance: float = MIN_DISTANCE,
    max_distance: float = MAX_DISTANCE,
) -> Integrator:
    """Select the integrator for a render mode.

    Args:
        mode: "trace" for path tracing or "march" for ray marching.
        min_distance: Surface contact threshold for marching.
        max_distance: Escape threshold for marching.

    Returns:
        A callable (ray, objects, rng, depth) -> radiance.

    Raises:
        ValueError: If mode is not recognized.
    """
    if mode == "trace":
        return trace_ray
    if mode == "march":
        return partial(march_ray, min_distance=min_distance, max_distance=max_distance)
    raise ValueError(f"Unknown render mode: {mode}")
