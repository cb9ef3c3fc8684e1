"""Image export utilities for rendered images.

This module writes resolved renders to disk as 8-bit RGB PNG files using
Pillow.

Example:
    >>> from sdftracer.preview.export import save_png
    >>> film = renderer.render()
    >>> save_png(film, "output.png", samples=config.samples)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Union

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from sdftracer.core.film import Film


def save_png(film: Film, filepath: Union[str, Path], samples: int) -> Path:
    """Resolve a film and save it as a PNG file.

    Args:
        film: Film holding the per-pixel radiance sums.
        filepath: Output file path (should end in .png).
        samples: Number of samples summed into every pixel.

    Returns:
        Path to the saved image.
    """
    return save_png_from_array(film.resolve(samples), filepath)


def save_png_from_array(image: npt.NDArray[np.uint8], filepath: Union[str, Path]) -> Path:
    """Save an 8-bit image array as a PNG file.

    Parent directories are created as needed.

    Args:
        image: Array of shape (H, W, 3) with dtype uint8.
        filepath: Output file path (should end in .png).

    Returns:
        Path to the saved image.

    Raises:
        ValueError: If the array is not an (H, W, 3) uint8 image.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected dtype uint8, got {image.dtype}")

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    pil_image = PILImage.fromarray(image)
    pil_image.save(path, format="PNG")
    return path
