"""Preview module for output and visualization.

Components:
    export: PNG export of RGBA pixel buffers via Pillow
    display: Matplotlib-based preview window

Example:
    >>> from raycaster.preview import save_png
    >>> save_png(pixels, settings.width, settings.height, "output.png")
"""

from raycaster.preview.display import show_preview
from raycaster.preview.export import pixels_to_image, save_png

__all__ = [
    "show_preview",
    "pixels_to_image",
    "save_png",
]
