"""Surface material and bounce sampling."""

from .material import Material, scatter_direction

__all__ = [
    "Material",
    "scatter_direction",
]
