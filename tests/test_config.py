"""Unit tests for RenderConfig."""

import pytest

from sdftracer.core.config import DEFAULT_OUTPUT, RenderConfig
from sdftracer.core.integrator import MARCH_MAX_BOUNCES, MAX_BOUNCES


class TestPresets:
    """Tests for the two mode presets."""

    def test_path_tracing_defaults(self):
        """Test the path tracer preset."""
        config = RenderConfig.path_tracing()
        assert config.mode == "trace"
        assert (config.width, config.height) == (1080, 720)
        assert config.samples == 512
        assert config.max_bounces == MAX_BOUNCES == 128
        assert config.thread_count == 8
        assert config.pixel_offset == 0.0
        assert config.output == DEFAULT_OUTPUT

    def test_ray_marching_defaults(self):
        """Test the ray marcher preset."""
        config = RenderConfig.ray_marching()
        assert config.mode == "march"
        assert (config.width, config.height) == (640, 480)
        assert config.samples == 2048
        assert config.max_bounces == MARCH_MAX_BOUNCES == 64
        assert config.min_distance == 0.001
        assert config.max_distance == 10000.0
        assert config.pixel_offset == 0.5

    def test_for_mode(self):
        """Test preset lookup by mode name."""
        assert RenderConfig.for_mode("trace") == RenderConfig.path_tracing()
        assert RenderConfig.for_mode("march") == RenderConfig.ray_marching()
        with pytest.raises(ValueError):
            RenderConfig.for_mode("raster")

    def test_aspect(self):
        """Test the aspect ratio property."""
        assert RenderConfig.path_tracing().aspect == 1.5
        assert RenderConfig.ray_marching().aspect == pytest.approx(4.0 / 3.0)


class TestOverrides:
    """Tests for with_overrides."""

    def test_replaces_fields(self):
        """Test that given fields replace preset values."""
        config = RenderConfig.ray_marching().with_overrides(width=32, samples=4)
        assert config.width == 32
        assert config.samples == 4
        assert config.height == 480
        assert config.mode == "march"

    def test_none_keeps_preset(self):
        """Test that None values leave the preset untouched."""
        base = RenderConfig.path_tracing()
        assert base.with_overrides(width=None, output=None) == base

    def test_unknown_field(self):
        """Test that unknown field names are rejected."""
        with pytest.raises(ValueError, match="Unknown configuration fields"):
            RenderConfig.path_tracing().with_overrides(fov=90)

    def test_invalid_override_rejected(self):
        """Test that overrides are validated."""
        with pytest.raises(ValueError):
            RenderConfig.path_tracing().with_overrides(height=0)

    def test_frozen(self):
        """Test that configs are immutable."""
        config = RenderConfig.path_tracing()
        with pytest.raises(AttributeError):
            config.width = 10


class TestValidation:
    """Tests for RenderConfig validation."""

    @pytest.mark.parametrize("field", ["width", "height", "samples", "thread_count"])
    def test_non_positive_counts(self, field):
        """Test that sizes and counts must be positive."""
        with pytest.raises(ValueError, match=field):
            RenderConfig(**{field: 0})

    def test_negative_bounces(self):
        """Test that the bounce budget cannot be negative."""
        with pytest.raises(ValueError, match="max_bounces"):
            RenderConfig(max_bounces=-1)

    def test_zero_bounces_allowed(self):
        """Test that a zero bounce budget is accepted (renders black)."""
        assert RenderConfig(max_bounces=0).max_bounces == 0

    @pytest.mark.parametrize(
        "min_distance,max_distance",
        [(0.0, 10.0), (-1.0, 10.0), (5.0, 5.0), (10.0, 1.0)],
    )
    def test_distance_ordering(self, min_distance, max_distance):
        """Test that 0 < min_distance < max_distance is enforced."""
        with pytest.raises(ValueError, match="min_distance"):
            RenderConfig(min_distance=min_distance, max_distance=max_distance)

    def test_unknown_mode(self):
        """Test that the mode must be a known render mode."""
        with pytest.raises(ValueError, match="Unknown render mode"):
            RenderConfig(mode="raster")
