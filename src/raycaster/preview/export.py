"""Image export utilities for rendered pixel buffers.

The renderer produces a flat RGBA8 buffer. This module reshapes it into an
image array and writes it to disk.

Supported formats:
    - PNG (8-bit RGBA via Pillow)

Example:
    >>> from raycaster.core.render import render_scene
    >>> from raycaster.preview.export import save_png
    >>>
    >>> pixels = render_scene(scene, settings)
    >>> save_png(pixels, settings.width, settings.height, "output.png")
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage


def pixels_to_image(
    pixels: npt.NDArray[np.uint8],
    width: int,
    height: int,
) -> npt.NDArray[np.uint8]:
    """Reshape a flat RGBA buffer into an image array.

    Args:
        pixels: Flat buffer of width * height * 4 bytes, row-major.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Array of shape (height, width, 4) with dtype uint8.

    Raises:
        ValueError: If the buffer size does not match the dimensions.
    """
    pixels = np.asarray(pixels, dtype=np.uint8)
    expected = width * height * 4
    if pixels.size != expected:
        raise ValueError(
            f"Pixel buffer has {pixels.size} bytes, expected {expected} "
            f"for a {width}x{height} RGBA image"
        )
    return pixels.reshape(height, width, 4)


def save_png(
    pixels: npt.NDArray[np.uint8],
    width: int,
    height: int,
    filepath: str,
) -> None:
    """Save a flat RGBA buffer as a PNG file.

    Args:
        pixels: Flat buffer of width * height * 4 bytes, row-major.
        width: Image width in pixels.
        height: Image height in pixels.
        filepath: Output file path (should end in .png).

    Raises:
        ValueError: If the buffer size does not match the dimensions.
    """
    image = pixels_to_image(pixels, width, height)

    # Save using Pillow; a (H, W, 4) uint8 array maps to RGBA
    pil_image = PILImage.fromarray(image)
    pil_image.save(filepath, format="PNG")
