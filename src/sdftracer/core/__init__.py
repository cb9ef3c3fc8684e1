"""Core rendering module.

This module contains the fundamental building blocks of the renderer:

Components:
    vector: Vector2 / Vector3 value types with componentwise arithmetic
    ray: Ray data structure, random source protocol, hemisphere sampling
    integrator: Light transport (path tracing and SDF ray marching)
    config: Render configuration and presets
    film: Taichi-backed render target resolving radiance to 8-bit pixels
    renderer: Scanline worker pool driving the integrators

Only the leaf modules are re-exported here. The integrator depends on the
scene and material packages, which themselves import from core.
"""

from .ray import Ray, RandomSource, random_in_hemisphere
from .vector import Vector2, Vector3

# Note: integrator, config, film and renderer are NOT imported here to avoid
# circular imports. Import them directly, e.g.:
#   from sdftracer.core.integrator import trace_ray, march_ray

__all__ = [
    "Vector2",
    "Vector3",
    "Ray",
    "RandomSource",
    "random_in_hemisphere",
]
