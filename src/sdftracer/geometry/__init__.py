"""Geometry module for shape primitives and distance-field combinators.

Components:
    base: Intersectable / SDF protocols, RayHit and SDFSample records
    sphere: Sphere primitive (ray intersection and signed distance)
    csg: And (intersection) and Cutout (subtraction) combinators
"""

from .base import SDF, Intersectable, RayHit, SDFSample
from .csg import And, Cutout
from .sphere import Sphere

__all__ = [
    "Intersectable",
    "SDF",
    "RayHit",
    "SDFSample",
    "Sphere",
    "And",
    "Cutout",
]
