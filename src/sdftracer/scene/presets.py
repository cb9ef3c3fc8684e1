"""Preset scenes for the two renderers.

Both scenes share a layout: a blue diffuse sphere resting on a green ground
plane, seen from a camera one unit up and three units back. The ground is a
sphere of radius 1e10 whose top sits at y = 0, close enough to a plane
for the rest of the scene.

    create_sphere_scene:  the plain sphere, for the path tracer
    create_cutout_scene:  the sphere with a bite carved out, for the ray marcher

Example:
    >>> from sdftracer.scene.presets import create_cutout_scene
    >>> objects, camera = create_cutout_scene(aspect=640 / 480)
"""

from __future__ import annotations

from sdftracer.camera.pinhole import Camera
from sdftracer.core.vector import Vector3
from sdftracer.geometry.csg import Cutout
from sdftracer.geometry.sphere import Sphere
from sdftracer.materials.material import Material

# =============================================================================
# Scene Constants
# =============================================================================

SPHERE_CENTER = Vector3(0.0, 0.9, 0.0)
SPHERE_RADIUS = 1.0
SPHERE_COLOR = Vector3(0.2, 0.3, 0.8)

CUTOUT_CENTER = Vector3(0.4, 1.0, -0.5)
CUTOUT_RADIUS = 0.7

GROUND_RADIUS = 1e10
GROUND_CENTER = Vector3(0.0, -GROUND_RADIUS, 0.0)
GROUND_COLOR = Vector3(0.2, 0.8, 0.3)

CAMERA_POSITION = Vector3(0.0, 1.0, -3.0)


def create_camera(aspect: float) -> Camera:
    """Camera looking down +z with an axis-aligned basis."""
    return Camera(
        position=CAMERA_POSITION,
        forward=Vector3(0.0, 0.0, 1.0),
        right=Vector3(1.0, 0.0, 0.0),
        up=Vector3(0.0, 1.0, 0.0),
        aspect=aspect,
    )


def create_ground() -> Sphere:
    return Sphere(GROUND_CENTER, GROUND_RADIUS, Material.diffuse(GROUND_COLOR))


def create_sphere_scene(aspect: float) -> tuple[tuple[Sphere, ...], Camera]:
    """Create the path tracing scene: one sphere on the ground.

    Args:
        aspect: Image width divided by height.

    Returns:
        Tuple of (objects, camera).
    """
    sphere = Sphere(SPHERE_CENTER, SPHERE_RADIUS, Material.diffuse(SPHERE_COLOR))
    return (sphere, create_ground()), create_camera(aspect)


def create_cutout_scene(aspect: float) -> tuple[tuple[object, ...], Camera]:
    """Create the ray marching scene: a sphere with a spherical bite removed.

    The carved-out surface reports the blue material of the main sphere.

    Args:
        aspect: Image width divided by height.

    Returns:
        Tuple of (objects, camera).
    """
    material = Material.diffuse(SPHERE_COLOR)
    carved = Cutout(
        object=Sphere(SPHERE_CENTER, SPHERE_RADIUS, material),
        cutout=Sphere(CUTOUT_CENTER, CUTOUT_RADIUS, material),
    )
    return (carved, create_ground()), create_camera(aspect)


def create_scene(mode: str, aspect: float) -> tuple[tuple[object, ...], Camera]:
    """Return the preset scene for a render mode ("trace" or "march").

    Raises:
        ValueError: If mode is not recognized.
    """
    if mode == "trace":
        return create_sphere_scene(aspect)
    if mode == "march":
        return create_cutout_scene(aspect)
    raise ValueError(f"Unknown render mode: {mode}")
