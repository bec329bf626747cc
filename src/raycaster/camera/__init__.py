"""Camera module for primary ray generation.

Components:
    projection: Pinhole projection from pixel coordinates to camera rays

The camera sits at the world origin looking down -Z with +Y up. Pixel
(0, 0) is the top-left corner of the image.
"""

from .projection import camera_direction, camera_ray, vertical_fov

__all__ = [
    "camera_direction",
    "camera_ray",
    "vertical_fov",
]
