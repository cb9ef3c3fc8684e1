"""Unit tests for the sphere primitive."""

import pytest

from sdftracer.core.ray import Ray
from sdftracer.core.vector import Vector3
from sdftracer.geometry.base import SDF, Intersectable
from sdftracer.geometry.sphere import Sphere
from sdftracer.materials.material import Material


@pytest.fixture
def unit_sphere():
    """Unit sphere at the origin with a recognizable material."""
    return Sphere(Vector3.zero(), 1.0, Material.diffuse(Vector3(0.2, 0.3, 0.8)))


class TestSphereIntersection:
    """Tests for Sphere.intersect."""

    def test_hit_from_outside(self, unit_sphere):
        """Test the entry hit of a ray approaching along +z."""
        ray = Ray(Vector3(0.0, 0.0, -3.0), Vector3(0.0, 0.0, 1.0))
        hit = unit_sphere.intersect(ray)

        assert hit is not None
        assert hit.distance == 2.0
        assert hit.position == Vector3(0.0, 0.0, -1.0)
        assert hit.normal == Vector3(0.0, 0.0, -1.0)
        assert hit.material == unit_sphere.material

    def test_hit_from_inside_flips_normal(self, unit_sphere):
        """Test that a ray starting inside uses the far root and an inward normal."""
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
        hit = unit_sphere.intersect(ray)

        assert hit is not None
        assert hit.distance == 1.0
        assert hit.position == Vector3(0.0, 0.0, 1.0)
        assert hit.normal == Vector3(0.0, 0.0, -1.0)

    def test_miss(self, unit_sphere):
        """Test that a ray passing beside the sphere misses."""
        ray = Ray(Vector3(0.0, 2.0, -3.0), Vector3(0.0, 0.0, 1.0))
        assert unit_sphere.intersect(ray) is None

    def test_sphere_behind_ray(self, unit_sphere):
        """Test that a sphere entirely behind the origin is not reported."""
        ray = Ray(Vector3(0.0, 0.0, 3.0), Vector3(0.0, 0.0, 1.0))
        assert unit_sphere.intersect(ray) is None

    def test_unnormalized_direction(self, unit_sphere):
        """Test that distances are in units of the ray parameter."""
        ray = Ray(Vector3(0.0, 0.0, -3.0), Vector3(0.0, 0.0, 2.0))
        hit = unit_sphere.intersect(ray)
        assert hit.distance == 1.0
        assert hit.position == Vector3(0.0, 0.0, -1.0)

    def test_zero_direction(self, unit_sphere):
        """Test that a degenerate ray reports no hit."""
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3.zero())
        assert unit_sphere.intersect(ray) is None

    def test_normal_is_unit_length(self):
        """Test that normals are normalized for off-axis hits."""
        sphere = Sphere(Vector3(1.0, 2.0, 3.0), 2.5, Material.default())
        ray = Ray(Vector3(0.0, 0.0, -10.0), Vector3(0.1, 0.2, 1.0))
        hit = sphere.intersect(ray)
        assert hit is not None
        assert abs(hit.normal.length() - 1.0) < 1e-9


class TestSphereSDF:
    """Tests for Sphere.get_sdf."""

    def test_signed_distance(self, unit_sphere):
        """Test distances outside, on and inside the surface."""
        assert unit_sphere.get_sdf(Vector3(0.0, 0.0, -3.0)).distance == 2.0
        assert unit_sphere.get_sdf(Vector3(1.0, 0.0, 0.0)).distance == 0.0
        assert unit_sphere.get_sdf(Vector3(0.0, 0.0, 0.0)).distance == -1.0

    def test_material_reported(self, unit_sphere):
        """Test that the sample carries the sphere material."""
        sample = unit_sphere.get_sdf(Vector3(5.0, 0.0, 0.0))
        assert sample.material == unit_sphere.material

    def test_sample_unpacks(self, unit_sphere):
        """Test that a distance sample unpacks into (distance, material)."""
        distance, material = unit_sphere.get_sdf(Vector3(0.0, 4.0, 0.0))
        assert distance == 3.0
        assert material is unit_sphere.material


class TestCapabilities:
    """Tests for the structural protocols."""

    def test_sphere_supports_both_capabilities(self, unit_sphere):
        """Test that a sphere is both Intersectable and an SDF."""
        assert isinstance(unit_sphere, Intersectable)
        assert isinstance(unit_sphere, SDF)
