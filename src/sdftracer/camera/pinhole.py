"""Pinhole camera model for primary ray generation.

The camera is described directly by its basis vectors rather than by a
look-at target and field of view:

    position: ray origin for every primary ray
    forward:  direction through the center of the image
    right:    screen x axis, scaled by the aspect ratio
    up:       screen y axis

The basis is used as given. It is not re-orthonormalized, so a skewed or
scaled basis produces a correspondingly skewed projection.

Screen coordinates are normalized to roughly [-1, 1] with y pointing up:

    direction = right * x * aspect + up * y + forward

Example:
    >>> from sdftracer.camera.pinhole import Camera
    >>> from sdftracer.core.vector import Vector3
    >>> camera = Camera(
    ...     position=Vector3(0.0, 1.0, -3.0),
    ...     forward=Vector3(0.0, 0.0, 1.0),
    ...     right=Vector3(1.0, 0.0, 0.0),
    ...     up=Vector3(0.0, 1.0, 0.0),
    ...     aspect=16.0 / 9.0,
    ... )
    >>> ray = camera.get_ray(0.0, 0.0)  # Ray through image center
"""

from __future__ import annotations

from dataclasses import dataclass

from sdftracer.core.ray import RandomSource, Ray
from sdftracer.core.vector import Vector3


@dataclass(frozen=True, slots=True)
class Camera:
    """A pinhole (perspective) camera with an explicit basis.

    Attributes:
        position: Camera position in world space.
        forward: View direction; its length acts as the focal distance.
        right: Screen-space x axis in world space.
        up: Screen-space y axis in world space.
        aspect: Width divided by height of the output image.
    """

    position: Vector3
    forward: Vector3
    right: Vector3
    up: Vector3
    aspect: float

    def get_ray(self, x: float, y: float) -> Ray:
        """Generate a ray through normalized screen coordinates (x, y).

        The direction is not normalized.

        Args:
            x: Horizontal coordinate, -1 at the left edge, 1 at the right.
            y: Vertical coordinate, -1 at the bottom edge, 1 at the top.

        Returns:
            A Ray starting at the camera position.
        """
        direction = self.right * (x * self.aspect) + self.up * y + self.forward
        return Ray(origin=self.position, direction=direction)


def screen_coordinates(
    pixel_x: int,
    pixel_y: int,
    width: int,
    height: int,
    rng: RandomSource,
    pixel_offset: float = 0.0,
) -> tuple[float, float]:
    """Map a pixel plus random jitter to normalized screen coordinates.

    The jitter is uniform in [-1, 1) pixel widths on each axis. Pixel rows
    run top to bottom, so the vertical coordinate is negated.

    Args:
        pixel_x: Pixel column (0 = left).
        pixel_y: Pixel row (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.
        rng: Source of uniform random numbers.
        pixel_offset: Sub-pixel offset added before mapping. 0.0 anchors
            samples at the pixel corner, 0.5 at the pixel center.

    Returns:
        Tuple of (x, y) screen coordinates.
    """
    x = ((pixel_x + pixel_offset) / width) * 2.0 - 1.0 + (rng.random() * 2.0 - 1.0) / width
    y = -(((pixel_y + pixel_offset) / height) * 2.0 - 1.0 + (rng.random() * 2.0 - 1.0) / height)
    return x, y


def get_ray_jittered(
    camera: Camera,
    pixel_x: int,
    pixel_y: int,
    width: int,
    height: int,
    rng: RandomSource,
    pixel_offset: float = 0.0,
) -> Ray:
    """Generate a jittered primary ray for anti-aliasing.

    When accumulated over many samples, the jitter produces smooth edges.

    Returns:
        The camera ray through the jittered screen position.
    """
    x, y = screen_coordinates(pixel_x, pixel_y, width, height, rng, pixel_offset)
    return camera.get_ray(x, y)
