"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole camera with an explicit basis and jittered pixel sampling

Screen coordinates are normalized to roughly [-1, 1] with y pointing up;
pixel rows run top to bottom and are flipped when mapped to the screen.
"""

from .pinhole import Camera, get_ray_jittered, screen_coordinates

__all__ = [
    "Camera",
    "get_ray_jittered",
    "screen_coordinates",
]
