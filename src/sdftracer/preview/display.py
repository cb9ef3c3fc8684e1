"""Matplotlib-based preview of a finished render.

Example:
    >>> from sdftracer.preview.display import show_preview
    >>> image = film.resolve(config.samples)
    >>> show_preview(image, title="Cutout - 2048 SPP")
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import numpy.typing as npt


def show_preview(
    image: npt.NDArray[np.uint8],
    *,
    title: Optional[str] = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a rendered image in a Matplotlib figure.

    Args:
        image: Resolved 8-bit image of shape (H, W, 3).
        title: Figure title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(image)
    ax.axis("off")

    if title is None:
        height, width = image.shape[:2]
        title = f"Render Preview - {width}x{height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
