"""Matplotlib preview of rendered pixel buffers.

Matplotlib is imported lazily so that rendering and export do not require
a display backend.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from raycaster.preview.export import pixels_to_image


def show_preview(
    pixels: npt.NDArray[np.uint8],
    width: int,
    height: int,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a rendered buffer in a Matplotlib figure.

    Args:
        pixels: Flat RGBA buffer of width * height * 4 bytes.
        width: Image width in pixels.
        height: Image height in pixels.
        title: Custom title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.

    Raises:
        ValueError: If the buffer size does not match the dimensions.
    """
    import matplotlib.pyplot as plt

    image = pixels_to_image(pixels, width, height)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(image)
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {width}x{height}")

    plt.tight_layout()
    plt.show(block=block)
