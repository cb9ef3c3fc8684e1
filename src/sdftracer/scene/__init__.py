"""Scene module for scene queries and preset scenes.

Components:
    intersection: Nearest-hit (ray tracing) and nearest-surface (marching) queries
    presets: Hard-coded scenes for the path tracer and the ray marcher

A scene is an ordered, immutable sequence of shapes shared read-only by
every render task.
"""

from .intersection import nearest_hit, nearest_surface
from .presets import (
    create_camera,
    create_cutout_scene,
    create_scene,
    create_sphere_scene,
)

__all__ = [
    "nearest_hit",
    "nearest_surface",
    "create_camera",
    "create_scene",
    "create_sphere_scene",
    "create_cutout_scene",
]
