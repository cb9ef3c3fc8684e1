"""Boolean combinators for signed distance fields.

    And(a, b):              max(d_a, d_b), the volume inside both children
    Cutout(object, cutout): max(d_object, -d_cutout), object minus cutout

Both take their material from the first operand at every point, whichever
child surface is actually nearer. A renderer with per-surface material
attribution would pick the material of the child that produced the max.

Example:
    >>> from sdftracer.core.vector import Vector3
    >>> from sdftracer.geometry.csg import Cutout
    >>> from sdftracer.geometry.sphere import Sphere
    >>> from sdftracer.materials.material import Material
    >>> bitten = Cutout(
    ...     Sphere(Vector3.zero(), 1.0, Material.default()),
    ...     Sphere(Vector3(1.0, 0.0, 0.0), 0.5, Material.default()),
    ... )
"""

from __future__ import annotations

from dataclasses import dataclass

from sdftracer.core.vector import Vector3
from sdftracer.geometry.base import SDF, SDFSample


@dataclass(frozen=True, slots=True)
class And:
    """Intersection of two distance fields.

    Attributes:
        a: First child; its material is always reported.
        b: Second child.
    """

    a: SDF
    b: SDF

    def get_sdf(self, point: Vector3) -> SDFSample:
        a = self.a.get_sdf(point)
        b = self.b.get_sdf(point)
        return SDFSample(max(a.distance, b.distance), a.material)


@dataclass(frozen=True, slots=True)
class Cutout:
    """Subtraction of the cutout volume from object.

    Attributes:
        object: The shape being carved; its material is always reported.
        cutout: The shape removed from object.
    """

    object: SDF
    cutout: SDF

    def get_sdf(self, point: Vector3) -> SDFSample:
        base = self.object.get_sdf(point)
        removed = self.cutout.get_sdf(point)
        return SDFSample(max(base.distance, -removed.distance), base.material)
