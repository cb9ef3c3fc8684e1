"""Render configuration.

RenderConfig bundles the fixed numeric parameters the renderer consumes:
image size, samples per pixel, bounce budget, worker count and the marching
thresholds. Two presets reproduce the default setups of the path tracer and
the ray marcher; command-line flags override individual fields.

Example:
    >>> from sdftracer.core.config import RenderConfig
    >>> config = RenderConfig.ray_marching().with_overrides(width=320, height=240)
    >>> config.aspect
    1.3333333333333333
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Literal

from sdftracer.core.integrator import (
    MARCH_MAX_BOUNCES,
    MAX_BOUNCES,
    MAX_DISTANCE,
    MIN_DISTANCE,
)

RenderMode = Literal["trace", "march"]

RENDER_MODES = ("trace", "march")

DEFAULT_THREAD_COUNT = 8
DEFAULT_OUTPUT = "output.png"


@dataclass(frozen=True)
class RenderConfig:
    """Parameters for one render.

    Attributes:
        mode: "trace" (analytic path tracing) or "march" (SDF ray marching).
        width: Image width in pixels.
        height: Image height in pixels.
        samples: Primary rays traced per pixel.
        max_bounces: Recursion budget per primary ray.
        thread_count: Number of worker processes.
        min_distance: Marching surface contact threshold.
        max_distance: Marching escape threshold.
        pixel_offset: Sub-pixel offset of the sample pattern (0.0 corner,
            0.5 center).
        output: Output image path.
    """

    mode: RenderMode = "trace"
    width: int = 1080
    height: int = 720
    samples: int = 512
    max_bounces: int = MAX_BOUNCES
    thread_count: int = DEFAULT_THREAD_COUNT
    min_distance: float = MIN_DISTANCE
    max_distance: float = MAX_DISTANCE
    pixel_offset: float = 0.0
    output: str = DEFAULT_OUTPUT

    def __post_init__(self) -> None:
        if self.mode not in RENDER_MODES:
            raise ValueError(f"Unknown render mode: {self.mode}")
        for name in ("width", "height", "samples", "thread_count"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.max_bounces < 0:
            raise ValueError(f"max_bounces must be non-negative, got {self.max_bounces}")
        if not 0.0 < self.min_distance < self.max_distance:
            raise ValueError(
                f"Marching distances must satisfy 0 < min_distance < max_distance "
                f"(got {self.min_distance}, {self.max_distance})"
            )

    @property
    def aspect(self) -> float:
        """Image width divided by height."""
        return self.width / self.height

    @classmethod
    def path_tracing(cls) -> RenderConfig:
        """Defaults for the analytic path tracer."""
        return cls(
            mode="trace",
            width=1080,
            height=720,
            samples=512,
            max_bounces=MAX_BOUNCES,
            pixel_offset=0.0,
        )

    @classmethod
    def ray_marching(cls) -> RenderConfig:
        """Defaults for the SDF ray marcher."""
        return cls(
            mode="march",
            width=640,
            height=480,
            samples=2048,
            max_bounces=MARCH_MAX_BOUNCES,
            pixel_offset=0.5,
        )

    @classmethod
    def for_mode(cls, mode: str) -> RenderConfig:
        """Return the preset for a render mode."""
        if mode == "trace":
            return cls.path_tracing()
        if mode == "march":
            return cls.ray_marching()
        raise ValueError(f"Unknown render mode: {mode}")

    def with_overrides(self, **changes: Any) -> RenderConfig:
        """Return a copy with the given fields replaced.

        None values are ignored so unset command-line options keep the
        preset value.

        Raises:
            ValueError: If a field name is unknown or a value is invalid.
        """
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown configuration fields: {sorted(unknown)}")
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
