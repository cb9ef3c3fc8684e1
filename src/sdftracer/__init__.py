"""CPU renderer built around two light-transport algorithms.

This package synthesizes images from hard-coded 3D scenes using either:
- Analytic path tracing against primitive shapes (spheres)
- Sphere tracing (ray marching) against signed distance fields combined
  with boolean operators

Subpackages:
    core: Vector algebra, rays, integrators, configuration and the scanline renderer
    geometry: Shape primitives, SDF combinators and the hit record
    materials: Surface material and bounce direction sampling
    scene: Nearest-hit / nearest-surface queries and preset scenes
    camera: Pinhole camera with ray generation
    preview: PNG export and Matplotlib preview
"""

__version__ = "0.1.0"
