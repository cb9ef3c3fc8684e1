"""Unit tests for the distance field combinators."""

from sdftracer.core.vector import Vector3
from sdftracer.geometry.base import SDF, Intersectable
from sdftracer.geometry.csg import And, Cutout
from sdftracer.geometry.sphere import Sphere
from sdftracer.materials.material import Material

RED = Material.diffuse(Vector3(1.0, 0.0, 0.0))
BLUE = Material.diffuse(Vector3(0.0, 0.0, 1.0))


class TestAnd:
    """Tests for the intersection combinator."""

    def test_distance_is_max(self):
        """Test that the intersection takes the larger distance."""
        shape = And(
            Sphere(Vector3(0.0, 0.0, 0.0), 1.0, RED),
            Sphere(Vector3(1.0, 0.0, 0.0), 1.0, BLUE),
        )
        sample = shape.get_sdf(Vector3(0.0, 0.0, 0.0))
        assert sample.distance == 0.0
        assert sample.material == RED

    def test_point_outside_both(self):
        """Test a point outside both children."""
        shape = And(
            Sphere(Vector3(0.0, 0.0, 0.0), 1.0, RED),
            Sphere(Vector3(1.0, 0.0, 0.0), 1.0, BLUE),
        )
        assert shape.get_sdf(Vector3(-3.0, 0.0, 0.0)).distance == 3.0

    def test_material_from_first_operand(self):
        """Test that the first child's material is reported even when the second is nearer."""
        shape = And(
            Sphere(Vector3(0.0, 0.0, 0.0), 1.0, RED),
            Sphere(Vector3(5.0, 0.0, 0.0), 1.0, BLUE),
        )
        sample = shape.get_sdf(Vector3(5.0, 0.0, 0.0))
        assert sample.distance == 4.0
        assert sample.material == RED


class TestCutout:
    """Tests for the subtraction combinator."""

    def test_point_inside_cutout(self):
        """Test that points inside the removed volume lie outside the result."""
        shape = Cutout(
            Sphere(Vector3(0.0, 0.0, 0.0), 1.0, RED),
            Sphere(Vector3(1.0, 0.0, 0.0), 0.5, BLUE),
        )
        sample = shape.get_sdf(Vector3(1.0, 0.0, 0.0))
        assert sample.distance == 0.5
        assert sample.material == RED

    def test_point_in_remaining_volume(self):
        """Test a point inside the object and away from the cutout."""
        shape = Cutout(
            Sphere(Vector3(0.0, 0.0, 0.0), 1.0, RED),
            Sphere(Vector3(1.0, 0.0, 0.0), 0.5, BLUE),
        )
        assert shape.get_sdf(Vector3(0.0, 0.0, 0.0)).distance == -0.5

    def test_nested_combinators(self):
        """Test that combinators accept other combinators as children."""
        inner = Cutout(
            Sphere(Vector3(0.0, 0.0, 0.0), 2.0, RED),
            Sphere(Vector3(0.0, 0.0, 0.0), 1.0, BLUE),
        )
        shell = And(inner, Sphere(Vector3(0.0, 0.0, 0.0), 3.0, BLUE))
        # Inside the hollow: distance to the inner wall
        assert shell.get_sdf(Vector3(0.0, 0.0, 0.0)).distance == 1.0
        assert shell.get_sdf(Vector3(1.5, 0.0, 0.0)).distance == -0.5

    def test_combinators_are_sdf_only(self):
        """Test that combinators provide distance queries but no ray intersection."""
        shape = Cutout(
            Sphere(Vector3.zero(), 1.0, RED),
            Sphere(Vector3.one(), 0.5, BLUE),
        )
        assert isinstance(shape, SDF)
        assert not isinstance(shape, Intersectable)
