"""Preview module for output and visualization.

Components:
    export: PNG export via Pillow
    display: Matplotlib-based preview window

Example:
    >>> from sdftracer.preview import save_png_from_array, show_preview
    >>> image = film.resolve(samples)
    >>> save_png_from_array(image, "output.png")
    >>> show_preview(image)
"""

from sdftracer.preview.display import show_preview
from sdftracer.preview.export import save_png, save_png_from_array

__all__ = [
    "show_preview",
    "save_png",
    "save_png_from_array",
]
